"""Totals across any set of assembled logs.

Every function here is pure: it reads the per-log accessors and never
touches caches or raw records.
"""

from __future__ import annotations

from typing import Literal, Optional, Sequence, Tuple, Union

from daylog.format.bytes import SizeOutput, SizeUnit, format_bytes
from daylog.format.dates import DateFormat, DayPad, format_date, pad_day
from daylog.format.duration import Duration, format_duration, format_duration_string
from daylog.format.timecode import seconds_to_large_timecode
from daylog.log import AssembledLog, GroupView

GroupName = Literal["ocf", "proxy", "sound"]
DurationFormat = Literal["tc", "hms", "hms-string"]

_GROUPS = ("ocf", "proxy", "sound")


def _group(log: AssembledLog, group: GroupName) -> GroupView:
    if group not in _GROUPS:
        raise ValueError(f"Unknown group: {group!r}")
    return getattr(log, group)


def total_files(logs: Sequence[AssembledLog], group: GroupName) -> int:
    """Sum of each log's own file count for ``group``."""
    return sum(_group(log, group).files() for log in logs)


def total_size(
    logs: Sequence[AssembledLog],
    group: GroupName,
    *,
    output: SizeOutput = "number",
    unit: Optional[SizeUnit] = None,
) -> Union[str, int, float, Tuple[Union[int, float], str]]:
    """Sum of each log's size for ``group``.

    Args:
        logs: The assembled logs.
        group: ``"ocf"``, ``"proxy"`` or ``"sound"``.
        output: ``"number"`` (bytes by default), ``"string"`` or ``"tuple"``.
        unit: Optional unit override passed to :func:`format_bytes`.

    Returns:
        The total in the requested shape.
    """
    size = sum(_group(log, group).size_as_number() for log in logs)
    return format_bytes(size, output=output, unit=unit)


def total_duration_seconds(logs: Sequence[AssembledLog]) -> int:
    return sum(log.ocf.duration_as_seconds() for log in logs)


def total_duration(logs: Sequence[AssembledLog], fmt: DurationFormat = "tc") -> Union[str, Duration]:
    """Total OCF duration across logs.

    Per-log seconds are summed and encoded as ``HHHH:MM:SS`` before being
    reformatted, so totals past 99 hours survive.
    """
    timecode = seconds_to_large_timecode(total_duration_seconds(logs))
    if fmt == "hms":
        return format_duration(timecode)
    if fmt == "hms-string":
        return format_duration_string(timecode)
    return timecode


def total_days(logs: Sequence[AssembledLog], pad: Optional[DayPad] = None) -> str:
    return pad_day(len(logs), pad)


def total_day_range(logs: Sequence[AssembledLog], pad: Optional[DayPad] = None) -> Tuple[str, str]:
    """First and last day after sorting by each log's formatted day string.

    The sort is lexical on the unpadded day, so ``"10"`` sorts before ``"9"``.
    """
    if not logs:
        return "", ""
    ordered = sorted(logs, key=lambda log: log.day())
    return pad_day(ordered[0].day(), pad), pad_day(ordered[-1].day(), pad)


def total_date_range(logs: Sequence[AssembledLog], fmt: Optional[DateFormat] = None) -> Tuple[str, str]:
    if not logs:
        return "", ""
    ordered = sorted(logs, key=lambda log: log.date())
    return format_date(ordered[0].date(), fmt), format_date(ordered[-1].date(), fmt)


__all__ = [
    "GroupName",
    "DurationFormat",
    "total_files",
    "total_size",
    "total_duration_seconds",
    "total_duration",
    "total_days",
    "total_day_range",
    "total_date_range",
]
