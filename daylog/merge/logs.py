from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from daylog.aggregate import total_duration, total_files, total_size
from daylog.core.logging import get_logger
from daylog.log import AssembledLog, assemble_log
from daylog.schemas.log import (
    CustomClip,
    CustomEntry,
    DayLog,
    MergedDayLog,
    OcfGroup,
    ProxyGroup,
    SoundGroup,
)
from daylog.schemas.project import LogOptions

RANGE_SEPARATOR = " - "


def first_and_last(logs: Sequence[DayLog]) -> Tuple[DayLog, DayLog]:
    """Return the earliest and latest log ordered by date, day, then unit.

    Raises:
        ValueError: If ``logs`` is empty.
    """
    if not logs:
        raise ValueError("No logs provided")
    ordered = sorted(logs, key=lambda log: (log.date, log.day, log.unit or ""))
    return ordered[0], ordered[-1]


def _range(first: str, last: str) -> str:
    return first if first == last else f"{first}{RANGE_SEPARATOR}{last}"


def _combine_units(logs: Sequence[DayLog]) -> str:
    units: List[str] = []
    for log in logs:
        if log.unit is not None and log.unit not in units:
            units.append(log.unit)
    return ", ".join(units)


def _any(logs: Sequence[DayLog], getter: Callable[[DayLog], Any]) -> bool:
    return any(getter(log) is not None for log in logs)


def _has_clips(logs: Sequence[DayLog], group: str) -> bool:
    return any(getattr(log, group) is not None and getattr(log, group).clips for log in logs)


def _union(values: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def _flatten(logs: Sequence[DayLog], group: str) -> Optional[list]:
    if not _any(logs, lambda log: getattr(log, group) and getattr(log, group).clips):
        return None
    return [clip for log in logs if getattr(log, group) for clip in getattr(log, group).clips or []]


def _combine_ocf(logs: Sequence[DayLog], assembled: Sequence[AssembledLog]) -> OcfGroup:
    has_clips = _has_clips(logs, "ocf")
    group = OcfGroup()
    if has_clips or _any(logs, lambda log: log.ocf and log.ocf.files):
        group.files = total_files(assembled, "ocf")
    if has_clips or _any(logs, lambda log: log.ocf and log.ocf.size):
        group.size = total_size(assembled, "ocf")
    if has_clips or _any(logs, lambda log: log.ocf and log.ocf.duration):
        group.duration = total_duration(assembled, "tc")
    if has_clips or _any(logs, lambda log: log.ocf and log.ocf.reels):
        group.reels = _union(reel for log in assembled for reel in log.ocf.reels())
    if has_clips or _any(logs, lambda log: log.ocf and log.ocf.copies):
        group.copies = _union(
            volume for log in assembled for copy in log.ocf.copies() for volume in copy.volumes
        )
    group.clips = _flatten(logs, "ocf")
    return group


def _combine_proxy(logs: Sequence[DayLog], assembled: Sequence[AssembledLog]) -> ProxyGroup:
    has_clips = _has_clips(logs, "proxy")
    group = ProxyGroup()
    if has_clips or _any(logs, lambda log: log.proxy and log.proxy.files):
        group.files = total_files(assembled, "proxy")
    if has_clips or _any(logs, lambda log: log.proxy and log.proxy.size):
        group.size = total_size(assembled, "proxy")
    group.clips = _flatten(logs, "proxy")
    return group


def _combine_sound(logs: Sequence[DayLog], assembled: Sequence[AssembledLog]) -> SoundGroup:
    has_clips = _has_clips(logs, "sound")
    group = SoundGroup()
    if has_clips or _any(logs, lambda log: log.sound and log.sound.files):
        group.files = total_files(assembled, "sound")
    if has_clips or _any(logs, lambda log: log.sound and log.sound.size):
        group.size = total_size(assembled, "sound")
    if has_clips or _any(logs, lambda log: log.sound and log.sound.copies):
        group.copies = _union(
            volume for log in assembled for copy in log.sound.copies() for volume in copy.volumes
        )
    group.clips = _flatten(logs, "sound")
    return group


def _combine_custom(logs: Sequence[DayLog]) -> Optional[List[CustomEntry]]:
    if not _any(logs, lambda log: log.custom):
        return None

    grouped: Dict[str, Tuple[Dict[str, Any], List[CustomClip]]] = {}
    for log in logs:
        for entry in log.custom or []:
            fields, clips = grouped.setdefault(entry.schema_id, ({}, []))
            if entry.log:
                fields.update(entry.log)
            if entry.clips:
                clips.extend(entry.clips)

    return [
        CustomEntry(schema_id=schema_id, log=fields or None, clips=clips or None)
        for schema_id, (fields, clips) in grouped.items()
    ]


def combine_logs(
    logs: Sequence[DayLog],
    options: LogOptions,
    *,
    assembled: Optional[Sequence[AssembledLog]] = None,
) -> MergedDayLog:
    """Combine several day logs into one synthetic multi-day log.

    Totals are recomputed from the assembled per-day logs; clip lists are
    concatenated as-is and not reconciled across days.

    Args:
        logs: The day logs to combine.
        options: The merge policy used to assemble each day.
        assembled: Already assembled views of ``logs`` in the same order.
            Assembled here when omitted.

    Returns:
        The merged log.

    Raises:
        ValueError: If ``logs`` is empty or ``assembled`` does not line up.
    """
    first, last = first_and_last(logs)
    if assembled is None:
        assembled = [assemble_log(log, options) for log in logs]
    elif len(assembled) != len(logs):
        raise ValueError("assembled logs do not match the logs being combined")

    merged = MergedDayLog(
        id=_range(first.id, last.id),
        day=_range(str(first.day), str(last.day)),
        date=_range(first.date, last.date),
        unit=_combine_units(logs),
        ocf=_combine_ocf(logs, assembled),
        proxy=_combine_proxy(logs, assembled),
        sound=_combine_sound(logs, assembled),
        custom=_combine_custom(logs),
        version=1,
    )
    get_logger(component="log_combiner").debug("logs_combined", merged_id=merged.id, days=len(logs))
    return merged


__all__ = ["first_and_last", "combine_logs"]
