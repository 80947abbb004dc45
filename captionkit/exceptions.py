"""
Exceptions raised by captionkit.

Transport errors coming from ``requests`` or ``yt-dlp`` are never wrapped;
they reach the caller unchanged.
"""


class CaptionKitError(Exception):
    """Base error for captionkit failures."""


class ExtractionError(CaptionKitError):
    """A mandatory field could not be extracted from a raw payload."""


class VideoUnavailableError(CaptionKitError):
    """The player reports the video as not playable."""


class TrackNotFoundError(LookupError, CaptionKitError):
    pass


class CaptionNotFoundError(LookupError, CaptionKitError):
    pass


class OperationCancelledError(CaptionKitError):
    """Raised when the caller requests cancellation of an SRT write."""
