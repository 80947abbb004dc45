"""
YouTube video ID parsing for captionkit.

Accepts plain video IDs as well as the common watch, short-link, embed,
shorts and live URL forms.
"""

import re
from typing import Optional

_VIDEO_ID_REGEX = re.compile(r'^[A-Za-z0-9_-]{11}$')

_YOUTUBE_URL_REGEXES = [
    re.compile(r'^(?:https?://)?(?:www\.|m\.|music\.)?youtube\.com/watch\?(?:.*&)?v=([^\s&#]+)'),
    re.compile(r'^(?:https?://)?youtu\.be/([^\s?&#/]+)'),
    re.compile(r'^(?:https?://)?(?:www\.|m\.)?youtube\.com/(?:embed|shorts|live|v)/([^\s?&#/]+)'),
]


def is_valid_video_id(value: str) -> bool:
    """
    Check if the value is a well-formed YouTube video ID.

    Example:
        >>> is_valid_video_id("dQw4w9WgXcQ")
        True
        >>> is_valid_video_id("dQw4w9WgXc")
        False
    """
    return bool(_VIDEO_ID_REGEX.match(value))


def extract_youtube_id(url: str) -> Optional[str]:
    """
    Extract YouTube video ID from a URL.

    Args:
        url: YouTube URL

    Returns:
        YouTube video ID or None if not found

    Example:
        >>> extract_youtube_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> extract_youtube_id("https://youtu.be/dQw4w9WgXcQ?t=42")
        'dQw4w9WgXcQ'
    """
    for regex in _YOUTUBE_URL_REGEXES:
        match = regex.match(url.strip())
        if match and is_valid_video_id(match.group(1)):
            return match.group(1)
    return None


def is_youtube_url(url: str) -> bool:
    """Check if the provided URL is a YouTube video URL."""
    return extract_youtube_id(url) is not None


def parse_video_id(url_or_id: str) -> str:
    """
    Normalize a video ID or YouTube URL to a video ID.

    Args:
        url_or_id: Video ID or YouTube URL

    Returns:
        11-character video ID

    Raises:
        ValueError: If no video ID can be derived
    """
    candidate = url_or_id.strip()
    if is_valid_video_id(candidate):
        return candidate

    video_id = extract_youtube_id(candidate)
    if video_id is None:
        raise ValueError(f"Invalid YouTube video ID or URL: {url_or_id}")
    return video_id
