"""
Caption track parsing for captionkit.

Fetches the document behind a CaptionTrackInfo and turns its raw caption
entries into a CaptionTrack.

Entries without usable text are dropped: auto-generated tracks routinely
contain empty cue slots. A missing offset or duration is different, since it
would corrupt every timing downstream, so it aborts the whole parse.
"""

import logging
from typing import List, Optional

from .exceptions import ExtractionError
from .interfaces import RawCaption, RawCaptionPart, TrackPayloadFetcher
from .models import Caption, CaptionPart, CaptionTrack, CaptionTrackInfo

logger = logging.getLogger(__name__)


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def _parse_part(raw: RawCaptionPart) -> Optional[CaptionPart]:
    text = raw.try_get_text()
    if _is_blank(text):
        return None

    offset = raw.try_get_offset()
    if offset is None:
        raise ExtractionError("Could not extract caption part offset.")

    return CaptionPart(text, offset)


def _parse_caption(raw: RawCaption) -> Optional[Caption]:
    text = raw.try_get_text()
    if _is_blank(text):
        return None

    offset = raw.try_get_offset()
    if offset is None:
        raise ExtractionError("Could not extract caption offset.")

    duration = raw.try_get_duration()
    if duration is None:
        raise ExtractionError("Could not extract caption duration.")

    parts: List[CaptionPart] = []
    for raw_part in raw.get_parts():
        part = _parse_part(raw_part)
        if part is not None:
            parts.append(part)

    return Caption(text, offset, duration, tuple(parts))


class TrackParser:
    """Parses caption tracks fetched through a TrackPayloadFetcher."""

    def __init__(self, payload_fetcher: TrackPayloadFetcher):
        self.payload_fetcher = payload_fetcher

    def get_track(self, track_info: CaptionTrackInfo) -> CaptionTrack:
        """
        Get the caption track described by the given metadata.

        Args:
            track_info: Track metadata from a CaptionManifest

        Returns:
            CaptionTrack with captions in payload order

        Raises:
            ExtractionError: If a caption with text lacks its offset or
                duration, or a part with text lacks its offset
        """
        logger.debug(f"Fetching caption track: {track_info}")
        document = self.payload_fetcher.fetch_track_payload(track_info.url)

        captions: List[Caption] = []
        for raw in document.get_closed_captions():
            caption = _parse_caption(raw)
            if caption is not None:
                captions.append(caption)

        logger.info(f"Parsed {len(captions)} captions from {track_info}")
        return CaptionTrack(tuple(captions))
