"""
YouTube module for captionkit.

Provides the HTTP and yt-dlp collaborators that fetch raw caption data, the
field extraction for YouTube payloads and video ID parsing.
"""

from .video_id import (
    is_valid_video_id,
    is_youtube_url,
    extract_youtube_id,
    parse_video_id,
)

from .bridge import (
    PlayerResponse,
    CaptionTrackData,
    TrackDocument,
    CaptionData,
    CaptionPartData,
)

from .controller import YouTubeController, PLAYER_URL
from .ytdlp import YtDlpMetadataFetcher, YtDlpVideoInfo, YtDlpTrackRecord

__all__ = [
    'is_valid_video_id',
    'is_youtube_url',
    'extract_youtube_id',
    'parse_video_id',
    'PlayerResponse',
    'CaptionTrackData',
    'TrackDocument',
    'CaptionData',
    'CaptionPartData',
    'YouTubeController',
    'PLAYER_URL',
    'YtDlpMetadataFetcher',
    'YtDlpVideoInfo',
    'YtDlpTrackRecord',
]
