"""
Field extraction for raw YouTube payloads.

Wraps the innertube player response and the ``json3`` timedtext document in
thin accessor objects. Accessors return None when a field is missing or has
the wrong shape; they never raise.
"""

from datetime import timedelta
from typing import Any, List, Optional

from ..utils import parse_milliseconds


def _get(obj: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def _get_str(obj: Any, *path: str) -> Optional[str]:
    value = _get(obj, *path)
    if isinstance(value, str) and value:
        return value
    return None


def _get_list(obj: Any, *path: str) -> List[Any]:
    value = _get(obj, *path)
    return value if isinstance(value, list) else []


class CaptionTrackData:
    """Caption track record from ``captions.playerCaptionsTracklistRenderer``."""

    def __init__(self, content: Any):
        self._content = content

    def try_get_url(self) -> Optional[str]:
        return _get_str(self._content, "baseUrl")

    def try_get_language_code(self) -> Optional[str]:
        return _get_str(self._content, "languageCode")

    def try_get_language_name(self) -> Optional[str]:
        simple_text = _get_str(self._content, "name", "simpleText")
        if simple_text:
            return simple_text

        runs = _get_list(self._content, "name", "runs")
        joined = "".join(_get_str(run, "text") or "" for run in runs)
        return joined or None

    def is_auto_generated(self) -> bool:
        if _get(self._content, "kind") == "asr":
            return True
        vss_id = _get_str(self._content, "vssId") or ""
        return vss_id.lower().startswith("a.")


class PlayerResponse:
    """Innertube ``/player`` response."""

    def __init__(self, content: Any):
        self._content = content

    @property
    def playability_status(self) -> Optional[str]:
        return _get_str(self._content, "playabilityStatus", "status")

    @property
    def playability_error(self) -> Optional[str]:
        return _get_str(self._content, "playabilityStatus", "reason")

    @property
    def is_available(self) -> bool:
        status = self.playability_status or ""
        return status.lower() != "error" and _get(self._content, "videoDetails") is not None

    def get_closed_caption_tracks(self) -> List[CaptionTrackData]:
        tracks = _get_list(self._content, "captions", "playerCaptionsTracklistRenderer", "captionTracks")
        return [CaptionTrackData(track) for track in tracks]


class CaptionPartData:
    """Segment (``segs[]`` entry) of a json3 event."""

    def __init__(self, content: Any):
        self._content = content

    def try_get_text(self) -> Optional[str]:
        value = _get(self._content, "utf8")
        return value if isinstance(value, str) else None

    def try_get_offset(self) -> Optional[timedelta]:
        # An absent tOffsetMs means the segment starts with its event (YouTube omits it on the first one)
        if isinstance(self._content, dict) and "tOffsetMs" not in self._content:
            return timedelta(0)
        return parse_milliseconds(_get(self._content, "tOffsetMs"))


class CaptionData:
    """Event (``events[]`` entry) of a json3 document."""

    def __init__(self, content: Any):
        self._content = content

    def try_get_text(self) -> Optional[str]:
        segs = _get_list(self._content, "segs")
        if not segs:
            return None
        return "".join(part.try_get_text() or "" for part in self.get_parts())

    def try_get_offset(self) -> Optional[timedelta]:
        return parse_milliseconds(_get(self._content, "tStartMs"))

    def try_get_duration(self) -> Optional[timedelta]:
        return parse_milliseconds(_get(self._content, "dDurationMs"))

    def get_parts(self) -> List[CaptionPartData]:
        return [CaptionPartData(seg) for seg in _get_list(self._content, "segs")]


class TrackDocument:
    """Timedtext document in ``json3`` format."""

    def __init__(self, content: Any):
        self._content = content

    def get_closed_captions(self) -> List[CaptionData]:
        return [CaptionData(event) for event in _get_list(self._content, "events")]
