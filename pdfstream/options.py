"""Options for text breaking, cells and font styles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Any


class BreakMode(Enum):
    """How over-long text lines are broken."""

    STRICT = 0
    INDICATOR_SENSITIVE = 1


@dataclass(frozen=True)
class BreakOption:
    """Configuration for splitting text into lines."""

    mode: BreakMode = BreakMode.STRICT
    break_indicator: str | None = None
    separator: str = ""

    def has_separator(self) -> bool:
        """True when a separator suffix is configured."""
        return self.separator != ""


DEFAULT_BREAK_OPTION = BreakOption()


class Side(IntFlag):
    """Cell alignment and border flags."""

    BOTTOM = 1
    RIGHT = 2
    TOP = 4
    LEFT = 8
    CENTER = 16
    MIDDLE = 32
    ALL_BORDERS = 15


@dataclass
class CellOption:
    """Alignment, borders and underline tuning for a text cell."""

    align: int = 0
    border: int = 0
    float: int = 0
    transparency: Any = None
    coef_underline_position: float = 0.0
    coef_line_height: float = 0.0
    coef_underline_thickness: float = 0.0
    ext_g_state_indexes: list[int] = field(default_factory=list)


class FontStyle(IntFlag):
    """Font style flags."""

    REGULAR = 0
    ITALIC = 1
    BOLD = 2
    UNDERLINE = 4


def parse_font_style(style: str) -> FontStyle:
    """Turn a style string such as ``"BI"`` or ``"u"`` into flags."""
    upper = style.upper()
    result = FontStyle.REGULAR
    if "B" in upper:
        result |= FontStyle.BOLD
    if "I" in upper:
        result |= FontStyle.ITALIC
    if "U" in upper:
        result |= FontStyle.UNDERLINE
    return result