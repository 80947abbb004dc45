"""
Collaborator interfaces for captionkit.

The resolver and the parser never talk to the network themselves. They are
given a metadata fetcher and a track payload fetcher, and they read raw
records through the ``try_get_*`` accessors below. Each accessor returns None
when its field cannot be derived from the payload; deciding whether that is
fatal is left to the caller.
"""

from datetime import timedelta
from typing import List, Optional, Protocol


class RawTrackRecord(Protocol):
    """Raw caption track entry from player metadata."""

    def try_get_url(self) -> Optional[str]:
        ...

    def try_get_language_code(self) -> Optional[str]:
        ...

    def try_get_language_name(self) -> Optional[str]:
        ...

    def is_auto_generated(self) -> bool:
        ...


class RawPlayerMetadata(Protocol):
    def get_closed_caption_tracks(self) -> List[RawTrackRecord]:
        ...


class RawCaptionPart(Protocol):
    def try_get_text(self) -> Optional[str]:
        ...

    def try_get_offset(self) -> Optional[timedelta]:
        ...


class RawCaption(Protocol):
    """Raw caption entry from a track document."""

    def try_get_text(self) -> Optional[str]:
        ...

    def try_get_offset(self) -> Optional[timedelta]:
        ...

    def try_get_duration(self) -> Optional[timedelta]:
        ...

    def get_parts(self) -> List[RawCaptionPart]:
        ...


class RawTrackDocument(Protocol):
    def get_closed_captions(self) -> List[RawCaption]:
        ...


class MetadataFetcher(Protocol):
    """Fetches player metadata for a video."""

    def fetch_player_metadata(self, video_id: str) -> RawPlayerMetadata:
        """
        Fetch raw player metadata.

        Args:
            video_id: YouTube video ID

        Returns:
            Metadata from which caption track records can be extracted

        Raises:
            VideoUnavailableError: If the video cannot be played
            Exception: Transport errors, propagated unchanged
        """
        ...


class TrackPayloadFetcher(Protocol):
    """Fetches the caption document behind a track URL."""

    def fetch_track_payload(self, url: str) -> RawTrackDocument:
        ...
