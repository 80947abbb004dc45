"""
SRT serialization for captionkit.

Writes a CaptionTrack as SubRip text, one block per caption:

    1
    00:00:00,000 --> 00:00:02,500
    Hello
    <blank line>

Blocks are written one at a time so callers can follow progress and cancel
between blocks. Blocks already written stay in the sink when a write is
cancelled.
"""

import logging
import threading
from typing import Callable, Optional, TextIO

from .exceptions import OperationCancelledError
from .models import Caption, CaptionTrack
from .utils import format_srt_timestamp

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


def format_srt_block(index: int, caption: Caption) -> str:
    """
    Format one caption as an SRT block.

    Args:
        index: 1-based position of the caption in the track
        caption: Caption to format

    Returns:
        Block text, terminated by the blank separator line

    Example:
        >>> format_srt_block(1, Caption("Hello", timedelta(0), timedelta(seconds=2.5)))
        '1\\n00:00:00,000 --> 00:00:02,500\\nHello\\n\\n'
    """
    start = format_srt_timestamp(caption.offset)
    end = format_srt_timestamp(caption.end)
    return f"{index}\n{start} --> {end}\n{caption.text}\n\n"


def write_srt(
    track: CaptionTrack,
    sink: TextIO,
    progress_callback: Optional[ProgressCallback] = None,
    cancel_event: Optional[threading.Event] = None
) -> None:
    """
    Write a caption track to a text sink in SRT format.

    Each block goes out in a single ``sink.write()`` call. After every block
    the progress callback, if any, receives ``written / total``; the last
    report is exactly 1.0. An empty track writes nothing and reports nothing.

    Args:
        track: Parsed caption track
        sink: Writable text stream
        progress_callback: Optional callable receiving progress in (0, 1]
        cancel_event: Optional event; once set, the write stops before the
            next block

    Raises:
        OperationCancelledError: If cancel_event is set before a block
    """
    total = len(track)
    if total == 0:
        logger.debug("Caption track is empty, nothing to write")
        return

    for index, caption in enumerate(track, start=1):
        if cancel_event is not None and cancel_event.is_set():
            logger.info(f"SRT write cancelled after {index - 1}/{total} captions")
            raise OperationCancelledError(f"SRT write cancelled after {index - 1} of {total} captions.")

        sink.write(format_srt_block(index, caption))

        if progress_callback is not None:
            progress_callback(index / total)

    logger.debug(f"Wrote {total} SRT blocks")
