"""Assembled log views: computed accessors over a raw day or merged log.

Nothing here mutates the source record. Sizes, durations, reels and copies
are derived on every call so a view never drifts from the data it wraps.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from daylog.format.bytes import SizeUnit, format_bytes
from daylog.format.copies import CopyGroup, copies_from_clips, copies_from_volumes
from daylog.format.dates import DateFormat, DayPad, format_date, format_day
from daylog.format.duration import Duration, format_duration, format_duration_string
from daylog.format.reels import format_reels
from daylog.format.timecode import (
    ZERO_TIMECODE,
    frames_to_timecode,
    timecode_to_frames,
    timecode_to_seconds,
)
from daylog.merge.clips import ClipRecord, merge_clips
from daylog.schemas.log import OcfClip, OcfGroup, ProxyGroup, RawLog, SoundGroup
from daylog.schemas.project import LogOptions

Number = Union[int, float]


class _SizeMixin:
    def _raw_size(self) -> float:
        raise NotImplementedError

    def size(self, unit: Optional[SizeUnit] = None) -> str:
        """Size as a readable string such as ``"1.17 GB"`` (unit picked automatically by default)."""
        return format_bytes(self._raw_size(), output="string", unit=unit)  # type: ignore[return-value]

    def size_as_number(self, unit: Optional[SizeUnit] = None) -> Number:
        """Size as a number, in bytes unless another unit is requested."""
        return format_bytes(self._raw_size(), output="number", unit=unit)  # type: ignore[return-value]

    def size_as_tuple(self, unit: Optional[SizeUnit] = None) -> Tuple[Number, str]:
        return format_bytes(self._raw_size(), output="tuple", unit=unit)  # type: ignore[return-value]


class ClipProxy(_SizeMixin):
    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]]):
        self._data = data or {}

    def _raw_size(self) -> float:
        size = self._data.get("size")
        return size if isinstance(size, (int, float)) else 0

    @property
    def format(self) -> Optional[str]:
        return self._data.get("format")

    @property
    def codec(self) -> Optional[str]:
        return self._data.get("codec")

    @property
    def resolution(self) -> Optional[str]:
        return self._data.get("resolution")

    def __bool__(self) -> bool:
        return bool(self._data)


class Clip(_SizeMixin, Mapping[str, Any]):
    """Read-only view over one merged clip record.

    Record fields are reachable by key (``clip["lens"]``) and, when they do
    not clash with an accessor, as attributes (``clip.lens``).
    """

    __slots__ = ("_record",)

    def __init__(self, record: ClipRecord):
        self._record = MappingProxyType(record)

    def __getitem__(self, key: str) -> Any:
        return self._record[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._record)

    def __len__(self) -> int:
        return len(self._record)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._record[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"Clip({self.name!r})"

    @property
    def name(self) -> str:
        return self._record["clip"]

    @property
    def sound(self) -> List[str]:
        return list(self._record.get("sound", []))

    @property
    def proxy(self) -> ClipProxy:
        return ClipProxy(self._record.get("proxy"))

    def _raw_size(self) -> float:
        size = self._record.get("size")
        return size if isinstance(size, (int, float)) else 0

    def _raw_duration(self) -> str:
        return self._record.get("duration") or ZERO_TIMECODE

    def duration(self) -> str:
        return format_duration_string(self._raw_duration())

    def duration_tc(self) -> str:
        return self._raw_duration()

    def duration_object(self) -> Duration:
        return format_duration(self._raw_duration())

    def duration_as_seconds(self) -> int:
        return timecode_to_seconds(self._raw_duration())

    def duration_as_frames(self) -> int:
        fps = self._record.get("fps")
        if not isinstance(fps, (int, float)) or fps <= 0:
            return 0
        return timecode_to_frames(self._raw_duration(), fps)


def sum_clip_durations(clips: Optional[Sequence[OcfClip]], default_fps: float = 24) -> str:
    """Total duration of clips with per-clip frame rates.

    Each clip's duration is counted in its own frames and converted to time
    with its own fps; the total is expressed at the first clip's fps.
    """
    if not clips:
        return ZERO_TIMECODE
    total_seconds = 0.0
    for clip in clips:
        if not clip.duration:
            continue
        fps = clip.fps or default_fps
        total_seconds += timecode_to_frames(clip.duration, fps) / fps
    reference_fps = clips[0].fps or default_fps
    return frames_to_timecode(int(round(total_seconds * reference_fps)), reference_fps)


class GroupView(_SizeMixin):
    """Shared accessors for the OCF, proxy and sound groups of a log."""

    def __init__(self, data: Union[OcfGroup, ProxyGroup, SoundGroup, None]):
        self._data = data

    @property
    def clips(self) -> list:
        if self._data is None or not self._data.clips:
            return []
        return list(self._data.clips)

    def files(self) -> int:
        if self._data is None:
            return 0
        if self._data.files is not None:
            return self._data.files
        return len(self._data.clips or [])

    def _raw_size(self) -> float:
        if self._data is None:
            return 0
        if self._data.size is not None:
            return self._data.size
        return sum(clip.size or 0 for clip in self._data.clips or [])


class OcfView(GroupView):
    _data: Optional[OcfGroup]

    def __init__(self, data: Optional[OcfGroup], default_fps: float = 24):
        super().__init__(data)
        self._default_fps = default_fps

    def duration_tc(self) -> str:
        if self._data is None:
            return ZERO_TIMECODE
        if self._data.duration:
            return self._data.duration
        return sum_clip_durations(self._data.clips, self._default_fps)

    def duration(self) -> str:
        return format_duration_string(self.duration_tc())

    def duration_object(self) -> Duration:
        return format_duration(self.duration_tc())

    def duration_as_seconds(self) -> int:
        return timecode_to_seconds(self.duration_tc())

    def reels(self, merge_ranges: bool = False) -> List[str]:
        if self._data is None:
            return []
        if self._data.reels is not None:
            return format_reels(self._data.reels, merge_ranges=merge_ranges)
        return format_reels((clip.reel for clip in self._data.clips or []), merge_ranges=merge_ranges)

    def copies(self) -> List[CopyGroup]:
        if self._data is None:
            return []
        if self._data.copies is not None:
            return copies_from_volumes(self._data.copies)
        return copies_from_clips(self._data.clips)


class ProxyView(GroupView):
    _data: Optional[ProxyGroup]


class SoundView(GroupView):
    _data: Optional[SoundGroup]

    def copies(self) -> List[CopyGroup]:
        if self._data is None:
            return []
        if self._data.copies is not None:
            return copies_from_volumes(self._data.copies)
        return copies_from_clips(self._data.clips)


class AssembledLog:
    """Queryable view over a day log (or merged log) and its merged clips."""

    def __init__(self, raw: RawLog, clips: List[Clip], options: LogOptions):
        self.raw = raw
        self.clips = clips
        self._options = options
        self._by_name: Dict[str, Clip] = {clip.name: clip for clip in clips}

    def __repr__(self) -> str:
        return f"AssembledLog(id={self.id!r}, clips={len(self.clips)})"

    @property
    def id(self) -> str:
        return self.raw.id

    @property
    def unit(self) -> Optional[str]:
        return self.raw.unit

    def day(self, pad: Optional[DayPad] = None) -> str:
        return format_day(self.raw.day, pad)

    def date(self, fmt: Optional[DateFormat] = None) -> str:
        return format_date(self.raw.date, fmt)

    def clip(self, name: str) -> Optional[Clip]:
        return self._by_name.get(name)

    @property
    def custom(self) -> Optional[Dict[str, Any]]:
        """Log-level custom fields of all schemas; later entries overwrite earlier ones."""
        merged: Dict[str, Any] = {}
        found = False
        for entry in self.raw.custom or []:
            if entry.log is not None:
                merged.update(entry.log)
                found = True
        return merged if found else None

    @property
    def ocf(self) -> OcfView:
        return OcfView(self.raw.ocf, self._options.default_fps)

    @property
    def proxy(self) -> ProxyView:
        return ProxyView(self.raw.proxy)

    @property
    def sound(self) -> SoundView:
        return SoundView(self.raw.sound)


def assemble_log(log: RawLog, options: LogOptions) -> AssembledLog:
    """Merge a log's clips and wrap the result in an :class:`AssembledLog`."""
    records = merge_clips(log, options)
    return AssembledLog(log, [Clip(record) for record in records.values()], options)


__all__ = [
    "AssembledLog",
    "Clip",
    "ClipProxy",
    "GroupView",
    "OcfView",
    "ProxyView",
    "SoundView",
    "assemble_log",
    "sum_clip_durations",
]
