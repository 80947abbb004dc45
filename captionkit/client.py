"""
Closed caption client for captionkit.

Ties the manifest resolver, the track parser and the SRT writer together
behind a single object, and offers module-level convenience functions for
one-off downloads.
"""

import logging
import os
import threading
from typing import Optional, TextIO

from .exceptions import OperationCancelledError
from .interfaces import MetadataFetcher, TrackPayloadFetcher
from .manifest import ManifestResolver
from .models import CaptionManifest, CaptionTrack, CaptionTrackInfo, ClientConfig, DownloadConfig
from .parser import TrackParser
from .writer import ProgressCallback, write_srt
from .youtube import YouTubeController, parse_video_id

logger = logging.getLogger(__name__)


class ClosedCaptionClient:
    """
    Client for closed captions of YouTube videos.

    Lists the caption tracks of a video, parses a selected track and writes
    it as SRT to a stream or a file.

    Example:
        >>> client = ClosedCaptionClient()
        >>> manifest = client.get_manifest("https://youtu.be/dQw4w9WgXcQ")
        >>> track_info = manifest.get_by_language("en")
        >>> client.download_to(track_info, "captions/en.srt")
    """

    def __init__(
        self,
        metadata_fetcher: Optional[MetadataFetcher] = None,
        payload_fetcher: Optional[TrackPayloadFetcher] = None,
        config: Optional[ClientConfig] = None
    ):
        """
        Initialize closed caption client.

        Args:
            metadata_fetcher: Source of player metadata (default: YouTubeController)
            payload_fetcher: Source of track documents (default: YouTubeController)
            config: Client configuration for the default controller
        """
        if metadata_fetcher is None or payload_fetcher is None:
            controller = YouTubeController(config)
            if metadata_fetcher is None:
                metadata_fetcher = controller
            if payload_fetcher is None:
                payload_fetcher = controller

        self.resolver = ManifestResolver(metadata_fetcher)
        self.parser = TrackParser(payload_fetcher)

    def get_manifest(self, video: str) -> CaptionManifest:
        """
        Get the manifest of caption tracks available for a video.

        Args:
            video: Video ID or YouTube URL

        Returns:
            CaptionManifest listing the available tracks

        Raises:
            ValueError: If video is not a valid video ID or YouTube URL
            ExtractionError: If a track record lacks a mandatory field
        """
        return self.resolver.get_manifest(parse_video_id(video))

    def get_track(self, track_info: CaptionTrackInfo) -> CaptionTrack:
        """Get the caption track identified by the given metadata."""
        return self.parser.get_track(track_info)

    def write_to(
        self,
        track_info: CaptionTrackInfo,
        sink: TextIO,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> None:
        """
        Write the caption track identified by the given metadata to a text sink.

        Captions are written in SRT format, one block per write.

        Args:
            track_info: Track metadata from a CaptionManifest
            sink: Writable text stream
            progress_callback: Optional callable receiving progress in (0, 1]
            cancel_event: Optional event checked before fetching and before each caption block

        Raises:
            ExtractionError: If the track payload is malformed
            OperationCancelledError: If cancel_event is set during the write
        """
        if cancel_event is not None and cancel_event.is_set():
            raise OperationCancelledError(f"SRT write cancelled before fetching {track_info}.")

        track = self.get_track(track_info)
        write_srt(track, sink, progress_callback=progress_callback, cancel_event=cancel_event)

    def download_to(
        self,
        track_info: CaptionTrackInfo,
        file_path: str,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> None:
        """
        Download the caption track identified by the given metadata to an SRT file.

        Any existing file at file_path is truncated. The file is closed on
        every exit path; blocks written before a failure or cancellation are
        kept.

        Args:
            track_info: Track metadata from a CaptionManifest
            file_path: Destination path
            progress_callback: Optional callable receiving progress in (0, 1]
            cancel_event: Optional event checked before fetching and before each caption block
        """
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            self.write_to(track_info, f, progress_callback=progress_callback, cancel_event=cancel_event)

        logger.info(f"Captions saved to: {file_path}")

    def download_from_config(
        self,
        config: DownloadConfig,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> str:
        """
        Download captions using a DownloadConfig object.

        Args:
            config: DownloadConfig with video, language and output path

        Returns:
            Path of the written SRT file

        Raises:
            TrackNotFoundError: If no track matches the requested language
        """
        manifest = self.get_manifest(config.video)
        track_info = manifest.get_by_language(config.language, auto_generated=config.auto_generated)
        logger.info(f"Selected {track_info} ({track_info.language.name}, auto={track_info.is_auto_generated})")

        self.download_to(
            track_info,
            config.output_path,
            progress_callback=progress_callback,
            cancel_event=cancel_event,
        )
        return config.output_path


# Convenience functions for one-off use
def get_caption_manifest(video: str, config: Optional[ClientConfig] = None) -> CaptionManifest:
    """List caption tracks of a video. Convenience function wrapping ClosedCaptionClient."""
    client = ClosedCaptionClient(config=config)
    return client.get_manifest(video)


def download_captions(
    video: str,
    output_path: str,
    language: str = "en",
    auto_generated: Optional[bool] = None,
    config: Optional[ClientConfig] = None
) -> str:
    """Download captions of a video to an SRT file. Convenience function wrapping ClosedCaptionClient."""
    client = ClosedCaptionClient(config=config)
    return client.download_from_config(DownloadConfig(
        video=video,
        output_path=output_path,
        language=language,
        auto_generated=auto_generated,
    ))
