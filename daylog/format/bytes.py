from __future__ import annotations

from typing import Literal, Optional, Tuple, Union

SizeUnit = Literal["auto", "tb", "gb", "mb", "bytes"]
SizeOutput = Literal["string", "number", "tuple"]

_FACTORS = {
    "tb": 1000**4,
    "gb": 1000**3,
    "mb": 1000**2,
    "bytes": 1,
}
_LABELS = {"tb": "TB", "gb": "GB", "mb": "MB", "bytes": "B"}


def _auto_unit(value: float) -> str:
    for unit in ("tb", "gb", "mb"):
        if value >= _FACTORS[unit]:
            return unit
    return "bytes"


def _round(value: float) -> Union[int, float]:
    rounded = round(value, 2)
    if float(rounded).is_integer():
        return int(rounded)
    return rounded


def format_bytes(
    value: Optional[float],
    *,
    output: SizeOutput = "string",
    unit: Optional[SizeUnit] = None,
) -> Union[str, int, float, Tuple[Union[int, float], str]]:
    """Convert a byte count into the requested unit and output shape.

    Sizes use decimal units (1 GB = 1000**3 bytes), as camera and storage
    vendors report them.

    Args:
        value: Size in bytes. ``None`` counts as zero.
        output: ``"string"`` (``"1.17 GB"``), ``"number"`` or ``"tuple"``
            (``(1.17, "GB")``).
        unit: Target unit. Defaults to ``"bytes"`` for numeric output and to
            ``"auto"`` otherwise.

    Returns:
        The formatted size.
    """
    size = float(value or 0)
    if unit is None:
        unit = "bytes" if output == "number" else "auto"
    if unit not in ("auto", *_FACTORS):
        raise ValueError(f"Unknown size unit: {unit!r}")
    resolved = _auto_unit(size) if unit == "auto" else unit
    amount = _round(size / _FACTORS[resolved])

    if output == "number":
        return amount
    if output == "tuple":
        return amount, _LABELS[resolved]
    return f"{amount} {_LABELS[resolved]}"


__all__ = ["SizeUnit", "SizeOutput", "format_bytes"]
