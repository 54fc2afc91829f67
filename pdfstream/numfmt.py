"""Number formatting helpers for PDF content and font metrics."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

_PRECISION = 1000
_FIRST_CHAR = 32
_LAST_CHAR = 255

Widths = Union[Mapping[int, int], Sequence[int]]


def format_float_trim(value: float) -> str:
    """Format ``value`` with at most three decimals, dropping trailing zeros.

    Halves are rounded away from zero; ``10.0001`` becomes ``"10"`` and
    ``9.99`` stays ``"9.99"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    scaled = Decimal(value * _PRECISION).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    rounded = float(scaled) / _PRECISION
    text = format(Decimal(repr(rounded)).normalize(), "f")
    return text


def convert_typo_unit(value: float, units_per_em: int, font_size: float) -> float:
    """Convert a font design-unit measure to points at ``font_size``."""
    per_thousand = value * 1000.0 / float(units_per_em)
    return per_thousand * font_size / 1000.0


def widths_to_string(widths: Widths) -> str:
    """Render the widths of character codes 32 to 255 as a space-separated list.

    The result starts with a space and every width is followed by one.
    Codes missing from a mapping count as width 0.
    """
    if isinstance(widths, Mapping):
        values = (widths.get(code, 0) for code in range(_FIRST_CHAR, _LAST_CHAR + 1))
    else:
        values = (widths[code] for code in range(_FIRST_CHAR, _LAST_CHAR + 1))
    return " " + "".join(f"{int(v)} " for v in values)