"""
Caption manifest resolution for captionkit.

Turns the caption track records found in a video's player metadata into a
CaptionManifest.
"""

import logging
from typing import Optional, TypeVar

from .exceptions import ExtractionError
from .interfaces import MetadataFetcher, RawTrackRecord
from .models import CaptionManifest, CaptionTrackInfo, Language

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require(value: Optional[T], description: str) -> T:
    if value is None:
        raise ExtractionError(f"Could not extract {description}.")
    return value


def _build_track_info(record: RawTrackRecord) -> CaptionTrackInfo:
    url = _require(record.try_get_url(), "track URL")
    language_code = _require(record.try_get_language_code(), "track language code")
    language_name = _require(record.try_get_language_name(), "track language name")

    return CaptionTrackInfo(
        url=url,
        language=Language(language_code, language_name),
        is_auto_generated=record.is_auto_generated(),
    )


class ManifestResolver:
    """
    Resolves the manifest of caption tracks available for a video.

    Every track record must carry a URL, a language code and a language name.
    A record missing any of them aborts the whole resolution with an
    ExtractionError; malformed records are never skipped.
    """

    def __init__(self, metadata_fetcher: MetadataFetcher):
        """
        Initialize the resolver.

        Args:
            metadata_fetcher: Collaborator providing raw player metadata
        """
        self.metadata_fetcher = metadata_fetcher

    def get_manifest(self, video_id: str) -> CaptionManifest:
        """
        Get the manifest of caption tracks for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            CaptionManifest with tracks in player metadata order (possibly empty)

        Raises:
            ExtractionError: If a track record lacks a mandatory field
        """
        logger.debug(f"Resolving caption manifest for video: {video_id}")
        metadata = self.metadata_fetcher.fetch_player_metadata(video_id)

        tracks = [_build_track_info(record) for record in metadata.get_closed_caption_tracks()]

        logger.info(f"Found {len(tracks)} caption tracks for video {video_id}")
        return CaptionManifest(tuple(tracks))
