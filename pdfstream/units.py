"""Measurement units and conversion to PDF points."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum


class Unit(IntEnum):
    """Units a document can be composed in."""

    UNSET = 0
    PT = 1
    MM = 2
    CM = 3
    IN = 4


_POINTS_PER_UNIT = {
    Unit.PT: 1.0,
    Unit.MM: 72.0 / 25.4,
    Unit.CM: 72.0 / 2.54,
    Unit.IN: 72.0,
}


def units_to_points(unit: int, value: float) -> float:
    """Convert ``value`` given in ``unit`` to points; unknown units pass through."""
    factor = _POINTS_PER_UNIT.get(_as_unit(unit))
    return value if factor is None else value * factor


def points_to_units(unit: int, value: float) -> float:
    """Convert ``value`` given in points to ``unit``; unknown units pass through."""
    factor = _POINTS_PER_UNIT.get(_as_unit(unit))
    return value if factor is None else value / factor


def _as_unit(unit: int) -> Unit | None:
    try:
        return Unit(unit)
    except ValueError:
        return None


@dataclass(frozen=True)
class Box:
    """A rectangle given by its four edges."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    unit_override: Unit = Unit.UNSET

    def to_points(self, unit: int) -> Box:
        """Return a copy in points, using ``unit_override`` if it is set."""
        if self.unit_override != Unit.UNSET:
            unit = self.unit_override
        return replace(
            self,
            left=units_to_points(unit, self.left),
            top=units_to_points(unit, self.top),
            right=units_to_points(unit, self.right),
            bottom=units_to_points(unit, self.bottom),
            unit_override=Unit.UNSET,
        )