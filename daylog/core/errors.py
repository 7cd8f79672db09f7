from __future__ import annotations

from typing import Iterable


class DaylogError(Exception):
    """Base class for errors raised by the merge engine."""


class ConfigurationError(DaylogError):
    """Raised when the project context or the log corpus is unusable."""


class SelectionError(DaylogError):
    """Raised when requested log ids are not present in the corpus."""

    def __init__(self, missing_ids: Iterable[str]):
        self.missing_ids = sorted(set(missing_ids))
        joined = ", ".join(self.missing_ids)
        super().__init__(f"Selected log(s) could not be found: {joined}")


__all__ = ["DaylogError", "ConfigurationError", "SelectionError"]
