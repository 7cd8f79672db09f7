from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple

_REEL_RE = re.compile(r"^(.*?)(\d+)$")


def _split(reel: str) -> Optional[Tuple[str, int, int]]:
    match = _REEL_RE.match(reel)
    if not match:
        return None
    prefix, digits = match.groups()
    return prefix, int(digits), len(digits)


def _sort_key(reel: str) -> Tuple[str, int, str]:
    parts = _split(reel)
    if parts is None:
        return reel, -1, reel
    prefix, number, _ = parts
    return prefix, number, reel


def format_reels(reels: Iterable[Optional[str]], *, merge_ranges: bool = False) -> List[str]:
    """Return the distinct reel names in natural order.

    With ``merge_ranges`` consecutive reels sharing a prefix and number width
    collapse into ``"A001 - A003"``.

    Args:
        reels: Reel names; empty values are ignored.
        merge_ranges: Compact consecutive runs into ranges.

    Returns:
        The list of reels or reel ranges.
    """
    unique = sorted({reel for reel in reels if reel}, key=_sort_key)
    if not merge_ranges:
        return unique

    result: List[str] = []
    run: List[str] = []
    previous: Optional[Tuple[str, int, int]] = None

    def flush() -> None:
        if not run:
            return
        result.append(run[0] if len(run) == 1 else f"{run[0]} - {run[-1]}")
        run.clear()

    for reel in unique:
        parts = _split(reel)
        if (
            parts is not None
            and previous is not None
            and parts[0] == previous[0]
            and parts[2] == previous[2]
            and parts[1] == previous[1] + 1
        ):
            run.append(reel)
        else:
            flush()
            run.append(reel)
        previous = parts
    flush()
    return result


__all__ = ["format_reels"]
