from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Protocol, Sequence, Tuple


class _Copy(Protocol):
    volume: str


class CopiedClip(Protocol):
    clip: str
    copies: Sequence[_Copy]


@dataclass(slots=True)
class CopyGroup:
    """Volumes that hold the same set of clips."""

    volumes: List[str]
    clips: List[str] = field(default_factory=list)
    count: Tuple[int, int] = (0, 0)

    @property
    def complete(self) -> bool:
        covered, total = self.count
        return total > 0 and covered == total


def copies_from_volumes(volumes: Iterable[str]) -> List[CopyGroup]:
    """Copy groups for explicitly listed volumes, which carry no clip coverage."""
    seen: List[str] = []
    for volume in volumes:
        if volume not in seen:
            seen.append(volume)
    return [CopyGroup(volumes=[volume]) for volume in seen]


def copies_from_clips(clips: Optional[Sequence[CopiedClip]]) -> List[CopyGroup]:
    """Group volumes by the clips they hold.

    Args:
        clips: OCF or sound clips with per-volume ``copies``.

    Returns:
        One group per distinct clip coverage, in order of first appearance;
        ``count`` is (clips on those volumes, distinct clips overall).
    """
    if not clips:
        return []

    all_clips: List[str] = []
    coverage: Dict[str, List[str]] = {}
    for clip in clips:
        if clip.clip not in all_clips:
            all_clips.append(clip.clip)
        for copy in clip.copies:
            names = coverage.setdefault(copy.volume, [])
            if clip.clip not in names:
                names.append(clip.clip)

    total = len(all_clips)
    groups: Dict[FrozenSet[str], CopyGroup] = {}
    for volume, names in coverage.items():
        key = frozenset(names)
        group = groups.get(key)
        if group is None:
            groups[key] = CopyGroup(volumes=[volume], clips=list(names), count=(len(names), total))
        else:
            group.volumes.append(volume)
    return list(groups.values())


__all__ = ["CopyGroup", "copies_from_volumes", "copies_from_clips"]
