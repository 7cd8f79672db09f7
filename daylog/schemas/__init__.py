"""Validated domain records consumed by the merge engine."""

from daylog.schemas.log import (
    CopyModel,
    CustomClip,
    CustomEntry,
    DayLog,
    LogBase,
    MergedDayLog,
    OcfClip,
    OcfGroup,
    ProxyClip,
    ProxyGroup,
    RawLog,
    SoundClip,
    SoundGroup,
)
from daylog.schemas.project import CustomSchema, LogOptions, ProjectContext, SyncMode

__all__ = [
    "CopyModel",
    "CustomClip",
    "CustomEntry",
    "DayLog",
    "LogBase",
    "MergedDayLog",
    "OcfClip",
    "OcfGroup",
    "ProxyClip",
    "ProxyGroup",
    "RawLog",
    "SoundClip",
    "SoundGroup",
    "CustomSchema",
    "LogOptions",
    "ProjectContext",
    "SyncMode",
]
