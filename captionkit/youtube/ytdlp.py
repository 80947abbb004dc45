"""
yt-dlp metadata fetcher for captionkit.

Alternative to the innertube player request: lets yt-dlp resolve the video
and reads the caption tracks it reports. Useful where the plain HTTP client
is blocked or cookies are required.
"""

import logging
from typing import Any, Dict, List, Optional

import yt_dlp

from ..models import ClientConfig

logger = logging.getLogger(__name__)

PREFERRED_FORMAT = 'json3'

# yt-dlp lists live chat replays under 'subtitles'
LIVE_CHAT_KEY = 'live_chat'
LIVE_CHAT_PROTOCOL_PREFIX = 'youtube_live_chat'


def _is_live_chat(language_code: str, formats: Any) -> bool:
    if language_code == LIVE_CHAT_KEY:
        return True
    if not isinstance(formats, list):
        return False
    return any(
        isinstance(f, dict) and str(f.get('protocol') or '').startswith(LIVE_CHAT_PROTOCOL_PREFIX)
        for f in formats
    )


class YtDlpTrackRecord:
    """Caption track record built from one language entry of a yt-dlp info dict."""

    def __init__(self, language_code: str, formats: Any, is_auto_generated: bool):
        self._language_code = language_code
        self._formats = formats if isinstance(formats, list) else []
        self._is_auto_generated = is_auto_generated

    def _pick_format(self) -> Optional[Dict[str, Any]]:
        entries = [f for f in self._formats if isinstance(f, dict)]
        for entry in entries:
            if entry.get('ext') == PREFERRED_FORMAT:
                return entry
        return entries[0] if entries else None

    def try_get_url(self) -> Optional[str]:
        entry = self._pick_format()
        url = entry.get('url') if entry else None
        return url if isinstance(url, str) and url else None

    def try_get_language_code(self) -> Optional[str]:
        return self._language_code or None

    def try_get_language_name(self) -> Optional[str]:
        for entry in self._formats:
            if isinstance(entry, dict) and isinstance(entry.get('name'), str) and entry['name']:
                return entry['name']
        return None

    def is_auto_generated(self) -> bool:
        return self._is_auto_generated


class YtDlpVideoInfo:
    """yt-dlp info dict exposed as player metadata."""

    def __init__(self, info: Dict[str, Any]):
        self._info = info or {}

    def get_closed_caption_tracks(self) -> List[YtDlpTrackRecord]:
        records = []
        for key, auto in (('subtitles', False), ('automatic_captions', True)):
            captions = self._info.get(key) or {}
            for language_code, formats in captions.items():
                if _is_live_chat(language_code, formats):
                    continue
                records.append(YtDlpTrackRecord(language_code, formats, auto))
        return records


class YtDlpMetadataFetcher:
    """
    Metadata fetcher using yt-dlp.

    Manually created subtitles are listed before automatic captions. Tracks
    point at yt-dlp's json3 URLs, so YouTubeController.fetch_track_payload
    can download them.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        """
        Initialize yt-dlp fetcher.

        Args:
            config: Client configuration; timeout, verify_ssl and
                cookies_path are passed on to yt-dlp
        """
        self.config = config or ClientConfig()

    def _get_ydl_opts(self, **overrides) -> Dict:
        opts = {
            'quiet': True,
            'no_warnings': True,
            'skip_download': True,
            'socket_timeout': self.config.timeout,
            'nocheckcertificate': not self.config.verify_ssl,
        }

        if self.config.cookies_path:
            opts['cookiefile'] = self.config.cookies_path

        opts.update(overrides)
        return opts

    def fetch_player_metadata(self, video_id: str) -> YtDlpVideoInfo:
        """
        Extract video info with yt-dlp, without downloading media.

        Raises:
            yt_dlp.utils.DownloadError: If yt-dlp cannot resolve the video
        """
        url = f"https://www.youtube.com/watch?v={video_id}"
        logger.debug(f"Extracting caption info with yt-dlp for: {video_id}")

        with yt_dlp.YoutubeDL(self._get_ydl_opts()) as ydl:
            info = ydl.extract_info(url, download=False)

        return YtDlpVideoInfo(info)
