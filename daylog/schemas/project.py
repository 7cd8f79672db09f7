from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

SyncMode = Literal["clip", "tc"]


class CustomSchema(BaseModel):
    """A project-defined metadata schema joined onto clips by name or timecode."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, max_length=80)
    order: int
    sync: SyncMode
    active: bool = True
    log_fields: List[Dict[str, Any]] = Field(default_factory=list)
    clip_fields: List[Dict[str, Any]] = Field(default_factory=list)


@dataclass(frozen=True, slots=True)
class LogOptions:
    """Merge policy handed to the clip merger and log assembler."""

    match_sound: bool = True
    match_schemas: bool = True
    schemas: Tuple[CustomSchema, ...] = field(default_factory=tuple)
    default_fps: int = 24

    def ordered_schemas(self) -> List[CustomSchema]:
        """Active schemas in ascending ``order``; ties keep declaration order."""
        return sorted((schema for schema in self.schemas if schema.active), key=lambda s: s.order)


class ProjectContext(BaseModel):
    """Project-level settings that control how day logs are reconciled."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    project_name: Optional[str] = None
    unit: Optional[str] = None
    match_sound: bool = True
    match_schemas: bool = Field(
        default=True,
        validation_alias=AliasChoices("match_schemas", "match_schema"),
    )
    custom_schemas: List[CustomSchema] = Field(default_factory=list)
    custom_info: List[Dict[str, str]] = Field(default_factory=list)

    def log_options(self, *, default_fps: int = 24) -> LogOptions:
        return LogOptions(
            match_sound=self.match_sound,
            match_schemas=self.match_schemas,
            schemas=tuple(self.custom_schemas),
            default_fps=default_fps,
        )


__all__ = ["SyncMode", "CustomSchema", "LogOptions", "ProjectContext"]
