from __future__ import annotations

import re
from datetime import date
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from daylog.format.timecode import is_valid_duration, is_valid_timecode

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _check_timecode(value: str) -> str:
    if not is_valid_timecode(value):
        raise ValueError(f"Invalid timecode format: {value!r}")
    return value


def _check_duration(value: str) -> str:
    if not is_valid_duration(value):
        raise ValueError(f"Invalid duration format: {value!r}")
    return value


Timecode = Annotated[str, AfterValidator(_check_timecode)]
DurationTimecode = Annotated[str, AfterValidator(_check_duration)]
Size = Annotated[int, Field(ge=0)]


class CopyModel(BaseModel):
    """A verified copy of a clip on a backup volume."""

    model_config = ConfigDict(extra="ignore")

    volume: str
    hash: Optional[str] = None


class OcfClip(BaseModel):
    """An original camera file with its camera metadata."""

    model_config = ConfigDict(extra="ignore")

    clip: str
    size: Size
    copies: List[CopyModel] = Field(default_factory=list)
    tc_start: Optional[Timecode] = None
    tc_end: Optional[Timecode] = None
    duration: Optional[Timecode] = None
    camera_model: Optional[str] = None
    reel: Optional[str] = None
    fps: Optional[float] = Field(default=None, gt=0)
    sensor_fps: Optional[float] = None
    lens: Optional[str] = None
    shutter: Optional[float] = None
    resolution: Optional[str] = None
    codec: Optional[str] = None
    gamma: Optional[str] = None
    ei: Optional[float] = None
    wb: Optional[float] = None
    tint: Optional[str] = None
    lut: Optional[str] = None


class ProxyClip(BaseModel):
    model_config = ConfigDict(extra="ignore")

    clip: str
    size: Size
    format: Optional[str] = None
    codec: Optional[str] = None
    resolution: Optional[str] = None


class SoundClip(BaseModel):
    model_config = ConfigDict(extra="ignore")

    clip: str
    size: Size
    copies: List[CopyModel] = Field(default_factory=list)
    tc_start: Optional[Timecode] = None
    tc_end: Optional[Timecode] = None


class OcfGroup(BaseModel):
    """Day-level camera file summary; explicit values win over clip-derived ones."""

    model_config = ConfigDict(extra="ignore")

    files: Optional[Size] = None
    size: Optional[Size] = None
    duration: Optional[DurationTimecode] = None
    reels: Optional[List[str]] = None
    copies: Optional[List[str]] = None
    clips: Optional[List[OcfClip]] = None


class ProxyGroup(BaseModel):
    model_config = ConfigDict(extra="ignore")

    files: Optional[Size] = None
    size: Optional[Size] = None
    clips: Optional[List[ProxyClip]] = None


class SoundGroup(BaseModel):
    model_config = ConfigDict(extra="ignore")

    files: Optional[Size] = None
    size: Optional[Size] = None
    copies: Optional[List[str]] = None
    clips: Optional[List[SoundClip]] = None


class CustomClip(BaseModel):
    """Open-ended custom metadata for one clip or one timecode range."""

    model_config = ConfigDict(extra="allow")

    clip: Optional[str] = None
    tc_start: Optional[Timecode] = None
    tc_end: Optional[Timecode] = None

    def fields(self) -> Dict[str, Any]:
        """All values set on the entry, join keys included."""
        return self.model_dump(exclude_unset=True)


class CustomEntry(BaseModel):
    """Custom data recorded for one schema: log-level fields and clip rows."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    schema_id: str = Field(..., alias="schema", min_length=1, max_length=80)
    log: Optional[Dict[str, Any]] = None
    clips: Optional[List[CustomClip]] = None


class LogBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    unit: Optional[str] = None
    ocf: Optional[OcfGroup] = None
    proxy: Optional[ProxyGroup] = None
    sound: Optional[SoundGroup] = None
    custom: Optional[List[CustomEntry]] = None
    version: int = 1


class DayLog(LogBase):
    """One shoot day as delivered by the ingest layer."""

    id: str = Field(..., min_length=1, max_length=50)
    day: int = Field(..., ge=1, le=999)
    date: str

    @field_validator("date")
    @classmethod
    def _iso_date(cls, value: str) -> str:
        if not ISO_DATE_RE.fullmatch(value):
            raise ValueError(f"Date must be YYYY-MM-DD: {value!r}")
        date.fromisoformat(value)
        return value


class MergedDayLog(LogBase):
    """Several day logs combined; id, day and date may be ``"first - last"`` ranges."""

    day: str
    date: str


RawLog = Union[DayLog, MergedDayLog]


__all__ = [
    "Timecode",
    "CopyModel",
    "OcfClip",
    "ProxyClip",
    "SoundClip",
    "OcfGroup",
    "ProxyGroup",
    "SoundGroup",
    "CustomClip",
    "CustomEntry",
    "LogBase",
    "DayLog",
    "MergedDayLog",
    "RawLog",
]
