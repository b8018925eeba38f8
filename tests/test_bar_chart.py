import sys

import pytest

from chartkit.axis import AxisSettings, Tick
from chartkit.bar_chart import BarChart
from chartkit.colors import ALTERNATE_COLOR_PALETTE
from chartkit.continuous_range import ContinuousRange
from chartkit.defaults import (
    DEFAULT_BAR_SPACING,
    DEFAULT_BAR_WIDTH,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
)
from chartkit.series import Value


def five_bars():
    return [
        Value(1.0, "One"),
        Value(2.0, "Two"),
        Value(3.0, "Three"),
        Value(4.0, "Four"),
        Value(5.0, "Five"),
    ]


def test_validate_accepts_bars():
    bc = BarChart(width=1024, title="Test Title", bars=five_bars())
    bc.validate()
    assert bc.get_ranges().max == 5.0


def test_validate_zero_range():
    bc = BarChart(width=1024, bars=[Value(0.0, "One"), Value(0.0, "Two")])
    with pytest.raises(ValueError, match="cannot be zero"):
        bc.validate()


def test_validate_no_bars():
    with pytest.raises(ValueError, match="at least one bar"):
        BarChart().validate()


def test_props():
    bc = BarChart()
    assert bc.dpi() == DEFAULT_DPI
    bc.dpi_override = 100
    assert bc.dpi() == 100

    assert bc.effective_width() == DEFAULT_CHART_WIDTH
    bc.width = DEFAULT_CHART_WIDTH - 1
    assert bc.effective_width() == DEFAULT_CHART_WIDTH - 1

    assert bc.effective_height() == DEFAULT_CHART_HEIGHT
    bc.height = DEFAULT_CHART_HEIGHT - 1
    assert bc.effective_height() == DEFAULT_CHART_HEIGHT - 1

    assert bc.bar_spacing_or_default() == DEFAULT_BAR_SPACING
    bc.bar_spacing = 150
    assert bc.bar_spacing_or_default() == 150

    assert bc.bar_width_or_default() == DEFAULT_BAR_WIDTH
    bc.bar_width = 75
    assert bc.bar_width_or_default() == 75


def test_color_palette_default():
    assert BarChart().color_palette_or_default() is ALTERNATE_COLOR_PALETTE


def test_get_ranges_empty():
    yr = BarChart().get_ranges()
    assert not yr.is_zero()
    assert yr.max == -sys.float_info.max
    assert yr.min == sys.float_info.max


def test_get_ranges_bars_min_max():
    yr = BarChart(bars=[Value(1.0), Value(10.0)]).get_ranges()
    assert not yr.is_zero()
    assert yr.max == 10
    assert yr.min == 1


def test_get_ranges_user_range_wins():
    bc = BarChart(
        y_axis=AxisSettings(
            range=ContinuousRange(min=5.0, max=15.0),
            ticks=[Tick(7.0, "Foo"), Tick(11.0, "Foo2")],
        ),
        bars=[Value(1.0), Value(10.0)],
    )
    yr = bc.get_ranges()
    assert yr.max == 15
    assert yr.min == 5


def test_get_ranges_ticks_min_max():
    bc = BarChart(
        y_axis=AxisSettings(ticks=[Tick(7.0, "Foo"), Tick(11.0, "Foo2")]),
        bars=[Value(1.0), Value(10.0)],
    )
    yr = bc.get_ranges()
    assert yr.max == 11
    assert yr.min == 7


def test_has_axes():
    bc = BarChart()
    assert bc.has_axes()
    bc.y_axis = AxisSettings(hidden=True)
    assert not bc.has_axes()


def test_default_canvas_box():
    b = BarChart().box()
    assert not b.is_zero()
    assert (b.top, b.left, b.right, b.bottom) == (20, 20, 1014, 350)


def test_set_range_domains():
    bc = BarChart()
    yr = bc.set_range_domains(bc.box(), bc.get_ranges())
    assert yr.domain == bc.box().height()
    assert yr.domain != 0


def test_value_formatter():
    bc = BarChart()
    assert bc.value_formatter()(1234.0) == "1234.00"
    bc.y_axis.value_formatter = lambda _: "test"
    assert bc.value_formatter()(1234) == "test"


def test_calculate_effective_bar_spacing():
    bc = BarChart(width=1024, bar_width=10, bars=five_bars())
    assert bc.calculate_effective_bar_spacing(bc.box()) == 100
    bc.bar_width = 250
    assert bc.calculate_effective_bar_spacing(bc.box()) == 0


def test_calculate_effective_bar_width():
    bc = BarChart(width=1024, bar_width=10, bars=five_bars())
    cb = bc.box()

    spacing = bc.calculate_effective_bar_spacing(cb)
    assert spacing != 0
    assert bc.calculate_effective_bar_width(cb, spacing) == 10

    bc.bar_width = 250
    spacing = bc.calculate_effective_bar_spacing(cb)
    assert spacing == 0
    bar_width = bc.calculate_effective_bar_width(cb, spacing)
    assert bar_width == 199

    assert bc.calculate_total_bar_width(bar_width, spacing) == cb.width() + 1

    bw, bs, total = bc.calculate_scaled_total_width(cb)
    assert bs == spacing
    assert bw == bar_width
    assert total == cb.width() + 1


@pytest.mark.parametrize(
    "size, expected",
    [(2049, 48), (1025, 24), (513, 18), (257, 12), (128, 10)],
)
def test_title_font_size(size, expected):
    assert BarChart(width=size, height=size).title_font_size() == expected