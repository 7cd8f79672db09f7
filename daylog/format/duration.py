from __future__ import annotations

from dataclasses import dataclass

from daylog.format.timecode import timecode_to_seconds


@dataclass(frozen=True, slots=True)
class Duration:
    hours: int
    minutes: int
    seconds: int

    def __str__(self) -> str:
        parts = []
        if self.hours:
            parts.append(f"{self.hours}h")
        if self.hours or self.minutes:
            parts.append(f"{self.minutes}m")
        parts.append(f"{self.seconds}s")
        return " ".join(parts)


def format_duration(timecode: str) -> Duration:
    """Split a timecode into whole hours, minutes and seconds."""
    total = timecode_to_seconds(timecode)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return Duration(hours=hours, minutes=minutes, seconds=seconds)


def format_duration_string(timecode: str) -> str:
    """Human readable duration, e.g. ``"1h 2m 3s"`` or ``"14s"``."""
    return str(format_duration(timecode))


__all__ = ["Duration", "format_duration", "format_duration_string"]
