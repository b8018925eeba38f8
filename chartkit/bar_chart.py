"""Bar chart layout: ranges, bar sizing and title sizing."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field

from chartkit.axis import AxisSettings
from chartkit.box import Box
from chartkit.colors import ALTERNATE_COLOR_PALETTE, ColorPalette
from chartkit.continuous_range import ContinuousRange
from chartkit.defaults import (
    DEFAULT_BAR_SPACING,
    DEFAULT_BAR_WIDTH,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
)
from chartkit.series import Value, ValueFormatter, float_value_formatter


@dataclass
class BarChart:
    """A chart that draws one bar per value along a y range."""

    title: str = ""
    title_hidden: bool = False
    color_palette: ColorPalette | None = None
    width: int = 0
    height: int = 0
    dpi_override: float = 0.0
    bar_width: int = 0
    bar_spacing: int = 0
    background_padding: Box = field(default_factory=Box)
    x_axis: AxisSettings = field(default_factory=AxisSettings)
    y_axis: AxisSettings = field(default_factory=AxisSettings)
    use_base_value: bool = False
    base_value: float = 0.0
    bars: list[Value] = field(default_factory=list)

    def dpi(self) -> float:
        return self.dpi_override or DEFAULT_DPI

    def effective_width(self) -> int:
        return self.width or DEFAULT_CHART_WIDTH

    def effective_height(self) -> int:
        return self.height or DEFAULT_CHART_HEIGHT

    def bar_spacing_or_default(self) -> int:
        return self.bar_spacing or DEFAULT_BAR_SPACING

    def bar_width_or_default(self) -> int:
        return self.bar_width or DEFAULT_BAR_WIDTH

    def color_palette_or_default(self) -> ColorPalette:
        return self.color_palette if self.color_palette is not None else ALTERNATE_COLOR_PALETTE

    def get_ranges(self) -> ContinuousRange:
        """Return the y range: the user's range, else the tick bounds, else the bar bounds."""
        if self.y_axis.range is not None and not self.y_axis.range.is_zero():
            return self.y_axis.range
        y_range = ContinuousRange()
        if self.y_axis.ticks:
            y_range.min, y_range.max = self.y_axis.tick_bounds()
            return y_range
        values = [bar.value for bar in self.bars]
        y_range.min = min(values, default=sys.float_info.max)
        y_range.max = max(values, default=-sys.float_info.max)
        return y_range

    def has_axes(self) -> bool:
        return not self.y_axis.hidden

    def box(self) -> Box:
        """Return the chart bounds inside the background padding."""
        padding = self.background_padding
        return Box(
            top=padding.get_top(20),
            left=padding.get_left(20),
            right=self.effective_width() - padding.get_right(10),
            bottom=self.effective_height() - padding.get_bottom(50),
        )

    def set_range_domains(self, canvas_box: Box, y_range: ContinuousRange) -> ContinuousRange:
        y_range.domain = canvas_box.height()
        return y_range

    def value_formatter(self) -> ValueFormatter:
        return self.y_axis.value_formatter or float_value_formatter

    def calculate_total_bar_width(self, bar_width: int, spacing: int) -> int:
        return len(self.bars) * (bar_width + spacing)

    def calculate_effective_bar_spacing(self, canvas_box: Box) -> int:
        """Shrink the spacing between bars if the bars would overflow the canvas."""
        total = self.calculate_total_bar_width(
            self.bar_width_or_default(), self.bar_spacing_or_default()
        )
        if total > canvas_box.width():
            remaining = canvas_box.width() - len(self.bars) * self.bar_width_or_default()
            if remaining > 0:
                return math.ceil(remaining / len(self.bars))
            return 0
        return self.bar_spacing_or_default()

    def calculate_effective_bar_width(self, canvas_box: Box, spacing: int) -> int:
        """Shrink the bar width if the bars would overflow the canvas."""
        total = self.calculate_total_bar_width(self.bar_width_or_default(), spacing)
        if total > canvas_box.width():
            remaining = canvas_box.width() - len(self.bars) * spacing
            if remaining > 0:
                return math.ceil(remaining / len(self.bars))
            return 0
        return self.bar_width_or_default()

    def calculate_scaled_total_width(self, canvas_box: Box) -> tuple[int, int, int]:
        """Return bar width, spacing and the total width they take up."""
        spacing = self.calculate_effective_bar_spacing(canvas_box)
        width = self.calculate_effective_bar_width(canvas_box, spacing)
        return width, spacing, self.calculate_total_bar_width(width, spacing)

    def title_font_size(self) -> float:
        dimension = min(self.effective_width(), self.effective_height())
        if dimension >= 2048:
            return 48.0
        if dimension >= 1024:
            return 24.0
        if dimension >= 512:
            return 18.0
        if dimension >= 256:
            return 12.0
        return 10.0

    def validate(self) -> None:
        """Raise ValueError if the chart cannot be drawn."""
        if not self.bars:
            raise ValueError("please provide at least one bar")
        y_range = self.get_ranges()
        if y_range.max - y_range.min == 0:
            raise ValueError("invalid data range; cannot be zero")