"""Axis kinds, ticks and per-axis settings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from chartkit.continuous_range import ContinuousRange


class TickPosition(IntEnum):
    """Where tick labels are drawn."""

    UNSET = 0
    BETWEEN_TICKS = 1
    UNDER_TICK = 2


class YAxisType(IntEnum):
    """Which y-axis a series is drawn against."""

    PRIMARY = 0
    SECONDARY = 1


@dataclass(frozen=True)
class Tick:
    """A labelled value on an axis."""

    value: float
    label: str = ""


@dataclass
class AxisSettings:
    """User settings for one axis of a chart."""

    name: str = ""
    hidden: bool = False
    range: ContinuousRange | None = None
    ticks: list[Tick] = field(default_factory=list)
    value_formatter: Callable[[Any], str] | None = None
    tick_position: TickPosition = TickPosition.UNSET
    axis_type: YAxisType = YAxisType.PRIMARY

    def tick_bounds(self) -> tuple[float, float]:
        """Return the lowest and highest custom tick values."""
        if not self.ticks:
            raise ValueError("axis has no custom ticks")
        values = [tick.value for tick in self.ticks]
        return min(values), max(values)