"""
Data models for captionkit.

Defines the immutable caption structures produced by the manifest resolver
and the track parser, plus the configuration objects used by the client.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterator, List, Optional, Tuple

from .exceptions import CaptionNotFoundError, TrackNotFoundError

_ZERO = timedelta(0)


@dataclass(frozen=True)
class Language:
    """Language of a caption track. Two languages are equal when their codes are."""
    code: str
    name: str = field(compare=False)

    def __str__(self) -> str:
        return f"{self.code} ({self.name})"


@dataclass(frozen=True)
class CaptionTrackInfo:
    """Metadata of one caption track available for a video."""
    url: str
    language: Language
    is_auto_generated: bool = False

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Caption track URL must not be empty")
        if not self.language.code:
            raise ValueError("Caption track language code must not be empty")
        if not self.language.name:
            raise ValueError("Caption track language name must not be empty")

    def __str__(self) -> str:
        return f"CC Track ({self.language.code})"


@dataclass(frozen=True)
class CaptionPart:
    """A span of caption text with its offset relative to the caption start."""
    text: str
    offset: timedelta

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Caption part text must not be empty")
        if self.offset < _ZERO:
            raise ValueError("Caption part offset must be non-negative")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Caption:
    """A single timed subtitle cue."""
    text: str
    offset: timedelta
    duration: timedelta
    parts: Tuple[CaptionPart, ...] = ()

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Caption text must not be empty")
        if self.offset < _ZERO:
            raise ValueError("Caption offset must be non-negative")
        if self.duration < _ZERO:
            raise ValueError("Caption duration must be non-negative")
        # Accept any iterable of parts but store a tuple
        object.__setattr__(self, "parts", tuple(self.parts))

    @property
    def end(self) -> timedelta:
        """Time at which the caption disappears."""
        return self.offset + self.duration

    def try_get_part_by_time(self, time: timedelta) -> Optional[CaptionPart]:
        """
        Get the first part displayed at or after the given time.

        Args:
            time: Offset relative to the caption start

        Returns:
            Matching CaptionPart, or None if there is none
        """
        return next((p for p in self.parts if p.offset >= time), None)

    def get_part_by_time(self, time: timedelta) -> CaptionPart:
        part = self.try_get_part_by_time(time)
        if part is None:
            raise CaptionNotFoundError(f"No caption part displayed at {time}.")
        return part

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CaptionManifest:
    """
    Ordered set of caption tracks available for a video.

    Tracks keep the order in which the player metadata lists them.
    """
    tracks: Tuple[CaptionTrackInfo, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tracks", tuple(self.tracks))

    def __iter__(self) -> Iterator[CaptionTrackInfo]:
        return iter(self.tracks)

    def __len__(self) -> int:
        return len(self.tracks)

    def __getitem__(self, index: int) -> CaptionTrackInfo:
        return self.tracks[index]

    def filter(self, auto_generated: Optional[bool] = None) -> List[CaptionTrackInfo]:
        """
        List tracks matching the auto-generated flag.

        Args:
            auto_generated: True for auto-generated tracks only, False for
                manually created tracks only, None for all tracks

        Returns:
            Matching tracks in manifest order
        """
        return [
            t for t in self.tracks
            if auto_generated is None or t.is_auto_generated == auto_generated
        ]

    def try_get_by_language(
        self,
        language: str,
        auto_generated: Optional[bool] = None
    ) -> Optional[CaptionTrackInfo]:
        """
        Get the first track in the given language.

        The language code is compared case-insensitively, so ``"EN"`` finds a
        track whose code is ``"en"``.

        Args:
            language: Language code (e.g. "en", "pt-BR")
            auto_generated: Optional constraint on the auto-generated flag

        Returns:
            Matching CaptionTrackInfo, or None if there is none

        Example:
            >>> manifest.try_get_by_language("en", auto_generated=False)
            CaptionTrackInfo(url='...', language=Language(code='en', ...), ...)
        """
        code = language.lower()
        for track in self.filter(auto_generated):
            if track.language.code.lower() == code:
                return track
        return None

    def get_by_language(
        self,
        language: str,
        auto_generated: Optional[bool] = None
    ) -> CaptionTrackInfo:
        """Same as try_get_by_language, but raises TrackNotFoundError when nothing matches."""
        track = self.try_get_by_language(language, auto_generated)
        if track is None:
            raise TrackNotFoundError(f"No caption track available for language '{language}'.")
        return track


@dataclass(frozen=True)
class CaptionTrack:
    """Parsed caption track. Captions keep payload order."""
    captions: Tuple[Caption, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "captions", tuple(self.captions))

    def __iter__(self) -> Iterator[Caption]:
        return iter(self.captions)

    def __len__(self) -> int:
        return len(self.captions)

    def __getitem__(self, index: int) -> Caption:
        return self.captions[index]

    def try_get_by_time(self, time: timedelta) -> Optional[Caption]:
        """
        Get the caption displayed at the given time.

        Args:
            time: Offset from the start of the video

        Returns:
            First caption with ``offset <= time <= end``, or None
        """
        return next((c for c in self.captions if c.offset <= time <= c.end), None)

    def get_by_time(self, time: timedelta) -> Caption:
        caption = self.try_get_by_time(time)
        if caption is None:
            raise CaptionNotFoundError(f"No caption displayed at {time}.")
        return caption


@dataclass
class ClientConfig:
    """Configuration for the HTTP and yt-dlp collaborators."""
    timeout: int = 30
    verify_ssl: bool = True
    user_agent: str = (
        "com.google.android.youtube/19.09.37 (Linux; U; Android 11) gzip"
    )
    client_name: str = "ANDROID"
    client_version: str = "19.09.37"
    hl: str = "en"
    gl: str = "US"
    cookies_path: Optional[str] = None  # Used by the yt-dlp fetcher


@dataclass
class DownloadConfig:
    """Configuration for downloading one caption track to an SRT file."""
    video: str  # Video ID or YouTube URL
    output_path: str
    language: str = "en"
    auto_generated: Optional[bool] = None  # None accepts either kind
