"""Domain entities and merge helpers reused by the CLI."""

# Re-export the merge engine entry points for convenience and clarity.
from daylog.aggregate import (
    total_date_range,
    total_day_range,
    total_days,
    total_duration,
    total_files,
    total_size,
)
from daylog.daytalog import Daytalog, create_daytalog
from daylog.log import AssembledLog, Clip, assemble_log
from daylog.merge.clips import merge_clips
from daylog.merge.logs import combine_logs
from daylog.schemas import DayLog, MergedDayLog, ProjectContext
from daylog.services.selection_service import Selection, SelectionService

__all__ = [
    "AssembledLog",
    "Clip",
    "DayLog",
    "Daytalog",
    "MergedDayLog",
    "ProjectContext",
    "Selection",
    "SelectionService",
    "assemble_log",
    "combine_logs",
    "create_daytalog",
    "merge_clips",
    "total_date_range",
    "total_day_range",
    "total_days",
    "total_duration",
    "total_files",
    "total_size",
]
