"""Colors, the default series color lists and color palettes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA color."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")

    def with_alpha(self, alpha: int) -> Color:
        """Return the same color with a different alpha channel."""
        return replace(self, a=alpha)


COLOR_WHITE = Color(255, 255, 255, 255)
COLOR_BLUE = Color(0, 116, 217, 255)
COLOR_CYAN = Color(0, 217, 210, 255)
COLOR_GREEN = Color(0, 217, 101, 255)
COLOR_RED = Color(217, 0, 116, 255)
COLOR_ORANGE = Color(217, 101, 0, 255)
COLOR_YELLOW = Color(217, 210, 0, 255)
COLOR_BLACK = Color(51, 51, 51, 255)
COLOR_LIGHT_GRAY = Color(239, 239, 239, 255)

COLOR_ALTERNATE_BLUE = Color(106, 195, 203, 255)
COLOR_ALTERNATE_GREEN = Color(42, 190, 137, 255)
COLOR_ALTERNATE_GRAY = Color(110, 128, 139, 255)
COLOR_ALTERNATE_YELLOW = Color(240, 174, 90, 255)
COLOR_ALTERNATE_LIGHT_GRAY = Color(187, 190, 191, 255)

COLOR_TRANSPARENT = Color(1, 1, 1, 0)

DEFAULT_BACKGROUND_COLOR = COLOR_WHITE
DEFAULT_BACKGROUND_STROKE_COLOR = COLOR_WHITE
DEFAULT_CANVAS_COLOR = COLOR_WHITE
DEFAULT_CANVAS_STROKE_COLOR = COLOR_WHITE
DEFAULT_TEXT_COLOR = COLOR_BLACK
DEFAULT_AXIS_COLOR = COLOR_BLACK
DEFAULT_STROKE_COLOR = COLOR_LIGHT_GRAY
DEFAULT_FILL_COLOR = COLOR_BLUE
DEFAULT_ANNOTATION_FILL_COLOR = COLOR_WHITE
DEFAULT_GRID_LINE_COLOR = COLOR_LIGHT_GRAY

DEFAULT_COLORS: tuple[Color, ...] = (
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_CYAN,
    COLOR_ORANGE,
)

DEFAULT_ALTERNATE_COLORS: tuple[Color, ...] = (
    COLOR_ALTERNATE_BLUE,
    COLOR_ALTERNATE_GREEN,
    COLOR_ALTERNATE_GRAY,
    COLOR_ALTERNATE_YELLOW,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_CYAN,
    COLOR_ORANGE,
)


def _cycle(colors: tuple[Color, ...], index: int) -> Color:
    if index < 0:
        raise IndexError(f"color index must not be negative: {index}")
    return colors[index % len(colors)]


def get_default_color(index: int) -> Color:
    """Return a default series color; the index wraps around the list."""
    return _cycle(DEFAULT_COLORS, index)


def get_alternate_color(index: int) -> Color:
    """Return an alternate series color; the index wraps around the list."""
    return _cycle(DEFAULT_ALTERNATE_COLORS, index)


class ColorPalette(ABC):
    """The set of colors a chart draws with."""

    background_color: Color = DEFAULT_BACKGROUND_COLOR
    background_stroke_color: Color = DEFAULT_BACKGROUND_STROKE_COLOR
    canvas_color: Color = DEFAULT_CANVAS_COLOR
    canvas_stroke_color: Color = DEFAULT_CANVAS_STROKE_COLOR
    axis_stroke_color: Color = DEFAULT_AXIS_COLOR
    text_color: Color = DEFAULT_TEXT_COLOR

    @abstractmethod
    def get_series_color(self, index: int) -> Color:
        """Return the color for the series at ``index``."""


class DefaultColorPalette(ColorPalette):
    """Palette cycling through the default series colors."""

    def get_series_color(self, index: int) -> Color:
        return get_default_color(index)


class AlternateColorPalette(ColorPalette):
    """Palette cycling through the alternate series colors."""

    def get_series_color(self, index: int) -> Color:
        return get_alternate_color(index)


DEFAULT_COLOR_PALETTE = DefaultColorPalette()
ALTERNATE_COLOR_PALETTE = AlternateColorPalette()