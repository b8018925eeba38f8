"""Donut chart layout: canvas fitting, value normalisation and font sizing."""

from __future__ import annotations

from dataclasses import dataclass, field

from chartkit.box import Box
from chartkit.colors import ALTERNATE_COLOR_PALETTE, ColorPalette
from chartkit.defaults import DEFAULT_BACKGROUND_PADDING, DEFAULT_CHART_WIDTH, DEFAULT_DPI
from chartkit.series import Value


@dataclass
class DonutChart:
    """A chart that draws values as slices of a ring."""

    title: str = ""
    title_hidden: bool = False
    color_palette: ColorPalette | None = None
    width: int = 0
    height: int = 0
    dpi: float = 0.0
    background_padding: Box = field(default_factory=Box)
    values: list[Value] = field(default_factory=list)

    def get_dpi(self, default: float | None = None) -> float:
        if self.dpi == 0:
            return DEFAULT_DPI if default is None else default
        return self.dpi

    def effective_width(self) -> int:
        return self.width or DEFAULT_CHART_WIDTH

    def effective_height(self) -> int:
        # Donut charts are square by default.
        return self.height or DEFAULT_CHART_WIDTH

    def color_palette_or_default(self) -> ColorPalette:
        return self.color_palette if self.color_palette is not None else ALTERNATE_COLOR_PALETTE

    def box(self) -> Box:
        """Return the chart bounds inside the background padding."""
        padding = self.background_padding
        return Box(
            top=padding.get_top(DEFAULT_BACKGROUND_PADDING.top),
            left=padding.get_left(DEFAULT_BACKGROUND_PADDING.left),
            right=self.effective_width() - padding.get_right(DEFAULT_BACKGROUND_PADDING.right),
            bottom=self.effective_height() - padding.get_bottom(DEFAULT_BACKGROUND_PADDING.bottom),
        )

    def circle_adjusted_canvas_box(self, canvas_box: Box) -> Box:
        """Fit a square into the canvas so the ring stays circular."""
        diameter = min(canvas_box.width(), canvas_box.height())
        return canvas_box.fit(Box(right=diameter, bottom=diameter))

    def finalize_values(self) -> list[Value]:
        """Return the positive values as fractions of the total."""
        if not self.values:
            raise ValueError("please provide at least one value")
        total = sum(v.value for v in self.values)
        final = [Value(v.value / total, v.label) for v in self.values if v.value > 0]
        if not final:
            raise ValueError("donut chart must contain at least (1) non-zero value")
        return final

    def scaled_font_size(self) -> float:
        dimension = min(self.effective_width(), self.effective_height())
        if dimension >= 2048:
            return 48.0
        if dimension >= 1024:
            return 24.0
        if dimension > 512:
            return 18.0
        if dimension > 256:
            return 12.0
        return 10.0

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