import pytest

from chartkit.colors import (
    ALTERNATE_COLOR_PALETTE,
    COLOR_ALTERNATE_BLUE,
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_WHITE,
    DEFAULT_ALTERNATE_COLORS,
    DEFAULT_COLOR_PALETTE,
    DEFAULT_COLORS,
    AlternateColorPalette,
    Color,
    ColorPalette,
    DefaultColorPalette,
    get_alternate_color,
    get_default_color,
)


def test_theme_blue_values():
    assert COLOR_BLUE == Color(0, 116, 217, 255)


def test_with_alpha_changes_only_alpha():
    faded = COLOR_BLACK.with_alpha(64)
    assert faded.a == 64
    assert (faded.r, faded.g, faded.b) == (COLOR_BLACK.r, COLOR_BLACK.g, COLOR_BLACK.b)
    assert COLOR_BLACK.a == 255


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        COLOR_WHITE.with_alpha(-1)


def test_default_color_first_is_blue():
    assert get_default_color(0) == COLOR_BLUE


@pytest.mark.parametrize("index", range(5))
def test_default_color_wraps(index):
    assert get_default_color(index + len(DEFAULT_COLORS)) == get_default_color(index)
    assert get_default_color(index) == DEFAULT_COLORS[index]


@pytest.mark.parametrize("index", range(9))
def test_alternate_color_wraps(index):
    assert get_alternate_color(index + len(DEFAULT_ALTERNATE_COLORS)) == get_alternate_color(index)
    assert get_alternate_color(index) == DEFAULT_ALTERNATE_COLORS[index]


def test_alternate_first_color():
    assert get_alternate_color(0) == COLOR_ALTERNATE_BLUE


def test_negative_index_raises():
    with pytest.raises(IndexError):
        get_default_color(-1)
    with pytest.raises(IndexError):
        get_alternate_color(-1)


@pytest.mark.parametrize("index", [0, 3, 11])
def test_palettes_match_color_lists(index):
    assert DEFAULT_COLOR_PALETTE.get_series_color(index) == get_default_color(index)
    assert ALTERNATE_COLOR_PALETTE.get_series_color(index) == get_alternate_color(index)


def test_palette_fixed_colors():
    for palette in (DefaultColorPalette(), AlternateColorPalette()):
        assert palette.background_color == COLOR_WHITE
        assert palette.canvas_color == COLOR_WHITE
        assert palette.text_color == COLOR_BLACK
        assert palette.axis_stroke_color == COLOR_BLACK


def test_color_palette_is_abstract():
    with pytest.raises(TypeError):
        ColorPalette()