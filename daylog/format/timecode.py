from __future__ import annotations

import math
import re
from typing import Optional, Tuple

TIMECODE_RE = re.compile(r"^(\d{1,2}):(\d{1,2}):(\d{1,2}):(\d{1,2})$")
LARGE_TIMECODE_RE = re.compile(r"^(\d+):(\d{1,2}):(\d{1,2})$")

ZERO_TIMECODE = "00:00:00:00"


def _components(timecode: str) -> Tuple[int, int, int, int]:
    """Split a timecode into hours, minutes, seconds and frames.

    Accepts ``HH:MM:SS:FF`` and the large ``HHHH:MM:SS`` form produced by
    multi-day totals (frames are zero in that case).

    Args:
        timecode: The timecode string.

    Returns:
        A tuple of (hours, minutes, seconds, frames).

    Raises:
        ValueError: If the string matches neither form.
    """
    value = timecode.strip()
    match = TIMECODE_RE.match(value)
    if match:
        hh, mm, ss, ff = (int(part) for part in match.groups())
        return hh, mm, ss, ff
    match = LARGE_TIMECODE_RE.match(value)
    if match:
        hh, mm, ss = (int(part) for part in match.groups())
        return hh, mm, ss, 0
    raise ValueError(f"Invalid timecode: {timecode!r}")


def is_valid_timecode(timecode: str, fps: Optional[float] = None) -> bool:
    """Return True for a well-formed ``HH:MM:SS:FF`` timecode.

    Minutes and seconds must be below 60 and frames below ``fps`` (or 99 when
    no frame rate is known).
    """
    match = TIMECODE_RE.match(timecode)
    if not match:
        return False
    _, minutes, seconds, frames = (int(part) for part in match.groups())
    return minutes < 60 and seconds < 60 and frames < (fps if fps is not None else 99)


def is_valid_duration(value: str) -> bool:
    """Return True for either timecode form accepted as a group duration."""
    if is_valid_timecode(value):
        return True
    match = LARGE_TIMECODE_RE.match(value)
    if not match:
        return False
    _, minutes, seconds = (int(part) for part in match.groups())
    return minutes < 60 and seconds < 60


def timecode_to_frames(timecode: str, fps: float) -> int:
    hh, mm, ss, ff = _components(timecode)
    return int(round((hh * 3600 + mm * 60 + ss) * fps)) + ff


def timecode_to_seconds(timecode: str) -> int:
    """Whole seconds in ``timecode``; the frame component is ignored."""
    hh, mm, ss, _ = _components(timecode)
    return hh * 3600 + mm * 60 + ss


def frames_to_timecode(total_frames: float, fps: float) -> str:
    """Encode a frame count as ``HH:MM:SS:FF``.

    Time is split using the real rate, so 1439 frames at 23.976 fps is one
    minute. Leftover frames are rounded and capped below the nominal rate.

    Raises:
        ValueError: If ``fps`` is not positive.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps!r}")
    whole_seconds = int(math.floor(total_frames / fps + 1e-9))
    frames = int(round(total_frames - whole_seconds * fps))
    frames = min(max(frames, 0), max(math.ceil(fps) - 1, 0))
    hours, remainder = divmod(whole_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}:{frames:02d}"


def seconds_to_timecode(total_seconds: float) -> str:
    hours, remainder = divmod(int(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}:00"


def seconds_to_large_timecode(total_seconds: float) -> str:
    """Encode seconds as ``HHHH:MM:SS`` for totals that can exceed 99 hours."""
    hours, remainder = divmod(int(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:04d}:{minutes:02d}:{seconds:02d}"


def ranges_overlap(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    """Inclusive interval intersection test."""
    return not (a_end < b_start or b_end < a_start)


__all__ = [
    "ZERO_TIMECODE",
    "is_valid_timecode",
    "is_valid_duration",
    "timecode_to_frames",
    "timecode_to_seconds",
    "frames_to_timecode",
    "seconds_to_timecode",
    "seconds_to_large_timecode",
    "ranges_overlap",
]
