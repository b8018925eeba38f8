"""Line chart layout: ranges, range checks, value formatters and canvas bounds."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from chartkit.axis import AxisSettings, YAxisType
from chartkit.box import Box
from chartkit.colors import DEFAULT_COLOR_PALETTE, ColorPalette
from chartkit.continuous_range import ContinuousRange
from chartkit.defaults import (
    DEFAULT_BACKGROUND_PADDING,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
)
from chartkit.series import (
    AnnotationSeries,
    BoundedValuesProvider,
    ValueFormatter,
    ValuesProvider,
)

_MAX_FLOAT = sys.float_info.max


def _round_to_for_delta(delta: float) -> float:
    """Pick a rounding step one decade below the magnitude of ``delta``."""
    cursor = 1e10
    while cursor > 0:
        if delta > cursor:
            return cursor / 10.0
        cursor /= 10.0
    return 0.0


def _round_down(value: float, round_to: float) -> float:
    if round_to < 1e-15 or not math.isfinite(value):
        return value
    return math.floor(value / round_to) * round_to


def _round_up(value: float, round_to: float) -> float:
    if round_to < 1e-15 or not math.isfinite(value):
        return value
    return math.ceil(value / round_to) * round_to


def _secondary_axis() -> AxisSettings:
    return AxisSettings(axis_type=YAxisType.SECONDARY)


def _is_hidden(series: Any) -> bool:
    return bool(getattr(series, "hidden", False))


def _axis_of(series: Any) -> YAxisType:
    return getattr(series, "y_axis", YAxisType.PRIMARY)


class _Bounds:
    """Running minimum and maximum of a stream of values."""

    def __init__(self) -> None:
        self.low = _MAX_FLOAT
        self.high = -_MAX_FLOAT

    def add(self, *values: float) -> None:
        for value in values:
            self.low = min(self.low, value)
            self.high = max(self.high, value)


@dataclass
class Chart:
    """A chart of one or more series against an x axis and up to two y axes."""

    title: str = ""
    title_hidden: bool = False
    color_palette: ColorPalette | None = None
    width: int = 0
    height: int = 0
    dpi: float = 0.0
    background_padding: Box = field(default_factory=Box)
    x_axis: AxisSettings = field(default_factory=AxisSettings)
    y_axis: AxisSettings = field(default_factory=AxisSettings)
    y_axis_secondary: AxisSettings = field(default_factory=_secondary_axis)
    series: Sequence[Any] = field(default_factory=list)

    def get_dpi(self, default: float | None = None) -> float:
        if self.dpi == 0:
            return DEFAULT_DPI if default is None else default
        return self.dpi

    def effective_width(self) -> int:
        return self.width or DEFAULT_CHART_WIDTH

    def effective_height(self) -> int:
        return self.height or DEFAULT_CHART_HEIGHT

    def color_palette_or_default(self) -> ColorPalette:
        return self.color_palette if self.color_palette is not None else DEFAULT_COLOR_PALETTE

    def box(self) -> Box:
        """Return the chart bounds inside the background padding."""
        padding = self.background_padding
        return Box(
            top=padding.get_top(DEFAULT_BACKGROUND_PADDING.top),
            left=padding.get_left(DEFAULT_BACKGROUND_PADDING.left),
            right=self.effective_width() - padding.get_right(DEFAULT_BACKGROUND_PADDING.right),
            bottom=self.effective_height() - padding.get_bottom(DEFAULT_BACKGROUND_PADDING.bottom),
        )

    def check_has_visible_series(self) -> None:
        """Raise ValueError unless at least one series is visible."""
        if not self.series:
            raise ValueError("please provide at least one series")
        if all(_is_hidden(s) for s in self.series):
            raise ValueError("chart render; must have (1) visible series")

    def validate_series(self) -> None:
        """Validate every series, raising the first error found."""
        for s in self.series:
            s.validate()

    def get_ranges(self) -> tuple[ContinuousRange, ContinuousRange, ContinuousRange]:
        """Return the x, primary y and secondary y ranges for the chart."""
        xs, ys, yas = _Bounds(), _Bounds(), _Bounds()
        mapped_to_secondary = False

        for s in self.series:
            if _is_hidden(s):
                continue
            axis = _axis_of(s)
            if isinstance(s, BoundedValuesProvider):
                for index in range(len(s)):
                    vx, vy1, vy2 = s.get_bounded_values(index)
                    xs.add(vx)
                    if axis == YAxisType.PRIMARY:
                        ys.add(vy1, vy2)
                    elif axis == YAxisType.SECONDARY:
                        yas.add(vy1, vy2)
                        mapped_to_secondary = True
            elif isinstance(s, ValuesProvider):
                for index in range(len(s)):
                    vx, vy = s.get_values(index)
                    xs.add(vx)
                    if axis == YAxisType.PRIMARY:
                        ys.add(vy)
                    elif axis == YAxisType.SECONDARY:
                        yas.add(vy)
                        mapped_to_secondary = True

        x_range = self.x_axis.range if self.x_axis.range is not None else ContinuousRange()
        y_range = self.y_axis.range if self.y_axis.range is not None else ContinuousRange()
        y_range_secondary = (
            self.y_axis_secondary.range
            if self.y_axis_secondary.range is not None
            else ContinuousRange()
        )

        if self.x_axis.ticks:
            x_range.min, x_range.max = self.x_axis.tick_bounds()
        elif x_range.is_zero():
            x_range.min, x_range.max = xs.low, xs.high

        if self.y_axis.ticks:
            y_range.min, y_range.max = self.y_axis.tick_bounds()
        elif y_range.is_zero():
            y_range.min, y_range.max = ys.low, ys.high
            if not self.y_axis.hidden:
                self._round_range(y_range)

        if self.y_axis_secondary.ticks:
            y_range_secondary.min, y_range_secondary.max = self.y_axis_secondary.tick_bounds()
        elif mapped_to_secondary and y_range_secondary.is_zero():
            y_range_secondary.min, y_range_secondary.max = yas.low, yas.high
            if not self.y_axis_secondary.hidden:
                self._round_range(y_range_secondary)

        return x_range, y_range, y_range_secondary

    @staticmethod
    def _round_range(value_range: ContinuousRange) -> None:
        round_to = _round_to_for_delta(value_range.delta())
        value_range.min = _round_down(value_range.min, round_to)
        value_range.max = _round_up(value_range.max, round_to)

    def check_ranges(
        self,
        x_range: ContinuousRange,
        y_range: ContinuousRange,
        y_range_secondary: ContinuousRange,
    ) -> None:
        """Raise ValueError if any range cannot be drawn."""
        x_delta = x_range.delta()
        if math.isinf(x_delta):
            raise ValueError("infinite x-range delta")
        if math.isnan(x_delta):
            raise ValueError("nan x-range delta")
        if x_delta == 0:
            raise ValueError("zero x-range delta; there needs to be at least (2) values")

        y_delta = y_range.delta()
        if math.isinf(y_delta):
            raise ValueError("infinite y-range delta")
        if math.isnan(y_delta):
            raise ValueError("nan y-range delta")

        if self.has_secondary_series():
            secondary_delta = y_range_secondary.delta()
            if math.isinf(secondary_delta):
                raise ValueError("infinite secondary y-range delta")
            if math.isnan(secondary_delta):
                raise ValueError("nan secondary y-range delta")

    def value_formatters(
        self,
    ) -> tuple[ValueFormatter | None, ValueFormatter | None, ValueFormatter | None]:
        """Return the x, primary y and secondary y formatters."""
        x_formatter = y_formatter = secondary_formatter = None
        for s in self.series:
            if not hasattr(s, "value_formatters"):
                continue
            sx, sy = s.value_formatters()
            axis = _axis_of(s)
            if axis == YAxisType.PRIMARY:
                x_formatter, y_formatter = sx, sy
            elif axis == YAxisType.SECONDARY:
                x_formatter, secondary_formatter = sx, sy
        if self.x_axis.value_formatter is not None:
            x_formatter = self.x_axis.value_formatter
        if self.y_axis.value_formatter is not None:
            y_formatter = self.y_axis.value_formatter
        if self.y_axis_secondary.value_formatter is not None:
            secondary_formatter = self.y_axis_secondary.value_formatter
        return x_formatter, y_formatter, secondary_formatter

    def has_axes(self) -> bool:
        return not (self.x_axis.hidden and self.y_axis.hidden and self.y_axis_secondary.hidden)

    def has_annotation_series(self) -> bool:
        return any(
            isinstance(s, AnnotationSeries) and not _is_hidden(s) for s in self.series
        )

    def has_secondary_series(self) -> bool:
        return any(_axis_of(s) == YAxisType.SECONDARY for s in self.series)

    def set_range_domains(
        self,
        canvas_box: Box,
        x_range: ContinuousRange,
        y_range: ContinuousRange,
        y_range_secondary: ContinuousRange,
    ) -> tuple[ContinuousRange, ContinuousRange, ContinuousRange]:
        """Size each range's domain to the canvas."""
        x_range.domain = canvas_box.width()
        y_range.domain = canvas_box.height()
        y_range_secondary.domain = canvas_box.height()
        return x_range, y_range, y_range_secondary