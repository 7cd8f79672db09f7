"""Formatting helpers for timecodes, sizes, durations, days, dates, reels and copies."""

from daylog.format.bytes import SizeOutput, SizeUnit, format_bytes
from daylog.format.copies import CopyGroup, copies_from_clips, copies_from_volumes
from daylog.format.dates import DateFormat, DayPad, format_date, format_day, pad_day
from daylog.format.duration import Duration, format_duration, format_duration_string
from daylog.format.reels import format_reels
from daylog.format.timecode import (
    ZERO_TIMECODE,
    frames_to_timecode,
    is_valid_duration,
    is_valid_timecode,
    ranges_overlap,
    seconds_to_large_timecode,
    seconds_to_timecode,
    timecode_to_frames,
    timecode_to_seconds,
)

__all__ = [
    "SizeOutput",
    "SizeUnit",
    "format_bytes",
    "CopyGroup",
    "copies_from_clips",
    "copies_from_volumes",
    "DateFormat",
    "DayPad",
    "format_date",
    "format_day",
    "pad_day",
    "Duration",
    "format_duration",
    "format_duration_string",
    "format_reels",
    "ZERO_TIMECODE",
    "frames_to_timecode",
    "is_valid_duration",
    "is_valid_timecode",
    "ranges_overlap",
    "seconds_to_large_timecode",
    "seconds_to_timecode",
    "timecode_to_frames",
    "timecode_to_seconds",
]
