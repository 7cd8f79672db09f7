"""Single entry point bundling a selection with project-wide totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from daylog.aggregate import (
    DurationFormat,
    total_date_range,
    total_day_range,
    total_days,
    total_duration,
    total_files,
    total_size,
)
from daylog.format.bytes import SizeUnit
from daylog.format.dates import DateFormat, DayPad
from daylog.format.duration import Duration
from daylog.log import AssembledLog
from daylog.schemas.log import DayLog
from daylog.schemas.project import ProjectContext
from daylog.services.selection_service import SelectionService

Number = Union[int, float]


class GroupTotals:
    """File and size totals of one group across a set of logs."""

    def __init__(self, logs: Sequence[AssembledLog], group: str):
        self._logs = logs
        self._group = group

    def files(self) -> int:
        return total_files(self._logs, self._group)

    def size(self, unit: Optional[SizeUnit] = None) -> str:
        return total_size(self._logs, self._group, output="string", unit=unit)

    def size_as_number(self, unit: Optional[SizeUnit] = None) -> Number:
        return total_size(self._logs, self._group, output="number", unit=unit)

    def size_as_tuple(self, unit: Optional[SizeUnit] = None) -> Tuple[Number, str]:
        return total_size(self._logs, self._group, output="tuple", unit=unit)


class OcfTotals(GroupTotals):
    def __init__(self, logs: Sequence[AssembledLog]):
        super().__init__(logs, "ocf")

    def duration(self, fmt: DurationFormat = "hms-string") -> Union[str, Duration]:
        return total_duration(self._logs, fmt)

    def duration_tc(self) -> str:
        return total_duration(self._logs, "tc")

    def duration_object(self) -> Duration:
        return total_duration(self._logs, "hms")


class Totals:
    """Project-wide totals; every accessor is computed on call."""

    def __init__(self, logs: Sequence[AssembledLog]):
        self._logs = logs
        self.ocf = OcfTotals(logs)
        self.proxy = GroupTotals(logs, "proxy")
        self.sound = GroupTotals(logs, "sound")

    def days(self, pad: Optional[DayPad] = None) -> str:
        return total_days(self._logs, pad)

    def day_range(self, pad: Optional[DayPad] = None) -> Tuple[str, str]:
        return total_day_range(self._logs, pad)

    def date_range(self, fmt: Optional[DateFormat] = None) -> Tuple[str, str]:
        return total_date_range(self._logs, fmt)


@dataclass(slots=True)
class Daytalog:
    log: AssembledLog
    logs: List[AssembledLog]
    log_all: List[AssembledLog]
    total: Totals
    project_name: Optional[str] = None
    custom_info: List[Dict[str, str]] = field(default_factory=list)
    message: Optional[str] = None


def create_daytalog(
    project: Optional[ProjectContext],
    logs: Sequence[DayLog],
    selection: Optional[Sequence[str]] = None,
    cache_key: Optional[str] = None,
    message: Optional[str] = None,
    service: Optional[SelectionService] = None,
) -> Daytalog:
    """Resolve a selection and attach totals computed over every log.

    Args:
        project: The project context. Required.
        logs: The full day-log corpus.
        selection: Log ids to select. The latest day is used when empty.
        cache_key: Caller-chosen key for the corpus; ``None`` disables caching.
        message: Free text carried through to the result.
        service: Selection service to use. A default one is built when omitted.

    Returns:
        The bundled current log, selected logs, all logs and totals.

    Raises:
        ConfigurationError: If the project is missing or ``logs`` is empty.
        SelectionError: If a selected id is not in ``logs``.
    """
    service = service or SelectionService()
    result = service.select(logs, project, selection, cache_key)
    return Daytalog(
        log=result.current,
        logs=result.selected,
        log_all=result.all,
        total=Totals(result.all),
        project_name=project.project_name,
        custom_info=list(project.custom_info),
        message=message,
    )


__all__ = ["Daytalog", "GroupTotals", "OcfTotals", "Totals", "create_daytalog"]
