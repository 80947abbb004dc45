"""
CaptionKit - YouTube Closed Caption Toolkit

Retrieves closed captions of YouTube videos and converts them to SubRip
(SRT) files.

Features:
- List the caption tracks available for a video (manual and auto-generated)
- Parse a caption track, including word-level parts where available
- Write SRT incrementally with progress reporting and cancellation
- Fetch metadata over plain HTTP or through yt-dlp

Example usage:
    >>> from captionkit import ClosedCaptionClient
    >>>
    >>> client = ClosedCaptionClient()
    >>> manifest = client.get_manifest("https://www.youtube.com/watch?v=VIDEO_ID")
    >>> track_info = manifest.get_by_language("en")
    >>> client.download_to(track_info, "local/captions/en.srt")
"""

import logging

__version__ = "0.1.0"
__author__ = "CaptionKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Errors
from .exceptions import (
    CaptionKitError,
    ExtractionError,
    VideoUnavailableError,
    TrackNotFoundError,
    CaptionNotFoundError,
    OperationCancelledError,
)

# Data models
from .models import (
    Language,
    CaptionTrackInfo,
    CaptionPart,
    Caption,
    CaptionManifest,
    CaptionTrack,
    ClientConfig,
    DownloadConfig,
)

# Timestamp utilities
from .utils import format_srt_timestamp

# Pipeline stages
from .manifest import ManifestResolver
from .parser import TrackParser
from .writer import format_srt_block, write_srt

# Main client
from .client import ClosedCaptionClient, get_caption_manifest, download_captions

# YouTube utilities
from .youtube import (
    is_youtube_url,
    extract_youtube_id,
    parse_video_id,
    YouTubeController,
    YtDlpMetadataFetcher,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Errors
    "CaptionKitError",
    "ExtractionError",
    "VideoUnavailableError",
    "TrackNotFoundError",
    "CaptionNotFoundError",
    "OperationCancelledError",

    # Models
    "Language",
    "CaptionTrackInfo",
    "CaptionPart",
    "Caption",
    "CaptionManifest",
    "CaptionTrack",
    "ClientConfig",
    "DownloadConfig",

    # Timestamp utilities
    "format_srt_timestamp",

    # Pipeline stages
    "ManifestResolver",
    "TrackParser",
    "format_srt_block",
    "write_srt",

    # Main client
    "ClosedCaptionClient",
    "get_caption_manifest",
    "download_captions",

    # YouTube utilities
    "is_youtube_url",
    "extract_youtube_id",
    "parse_video_id",
    "YouTubeController",
    "YtDlpMetadataFetcher",
]
