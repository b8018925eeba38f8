# chartkit

chartkit holds the layout and data logic behind line, bar and donut charts:
integer box geometry, continuous ranges that map values onto pixels, value
series (continuous, concatenated, annotations, Bollinger bands), colours and
palettes, and the range, canvas and sizing calculations a chart makes before
anything is drawn. It has no dependencies outside the standard library.

## Install

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Modules

- `chartkit.box` – `Box`, `BoxCorners`, `Point`, `new_box`, `BOX_ZERO`.
- `chartkit.continuous_range` – `ContinuousRange`.
- `chartkit.axis` – `TickPosition`, `YAxisType`, `Tick`, `AxisSettings`.
- `chartkit.defaults` – default sizes, spacings, paddings and formats.
- `chartkit.colors` – `Color`, named colours, `get_default_color`,
  `get_alternate_color`, `DefaultColorPalette`, `AlternateColorPalette`.
- `chartkit.series` – `Value`, `Annotation`, `Array`, `ContinuousSeries`,
  `ConcatSeries`, `AnnotationSeries`, `BollingerBandsSeries`,
  `bounded_last_values_annotation_series`, `float_value_formatter`.
- `chartkit.bar_chart` – `BarChart`.
- `chartkit.donut_chart` – `DonutChart`.
- `chartkit.chart` – `Chart`.

## Boxes and ranges

```python
from chartkit.box import Box, new_box
from chartkit.continuous_range import ContinuousRange

canvas = new_box(5, 5, 95, 95)
print(canvas.width(), canvas.height(), canvas.center())  # 90 90 (50, 50)

grown = Box(top=1, left=2, right=15, bottom=15).grow(Box(top=4, left=5, right=30, bottom=35))
print(grown)  # box(1,2,30,35)

r = ContinuousRange(min=1.0, max=8.0, domain=1000)
print(r.translate(5.0))  # 572
```

`Box.get_top` and its siblings return a default when an edge is zero and the
box is not marked as set; `new_box` and `BOX_ZERO` produce set boxes.

## Series

```python
from chartkit.series import BollingerBandsSeries, ContinuousSeries

values = ContinuousSeries(
    name="Values",
    x_values=[1.0, 2.0, 3.0, 4.0],
    y_values=[2.0, 3.5, 3.0, 5.0],
)
values.validate()
print(values.last_values())  # (4.0, 5.0)

bands = BollingerBandsSeries(inner_series=values)
x, upper, lower = bands.get_bounded_last_values()
```

`BollingerBandsSeries` uses a period of 16 and k of 2.0 unless set.
`get_bounded_values` keeps a moving window and expects indexes in ascending
order starting at 0.

## Charts

`Chart`, `BarChart` and `DonutChart` work out ranges, canvas boxes, bar
widths and font sizes from their settings.

```python
from chartkit.axis import AxisSettings, Tick
from chartkit.bar_chart import BarChart
from chartkit.chart import Chart
from chartkit.donut_chart import DonutChart
from chartkit.series import Value

chart = Chart(series=[values])
x_range, y_range, y_range_secondary = chart.get_ranges()
chart.check_ranges(x_range, y_range, y_range_secondary)
print(chart.box())

# Custom ticks take precedence over the data when sizing an axis.
ticked = Chart(
    y_axis=AxisSettings(ticks=[Tick(0.0, "Zero"), Tick(5.0, "Five")]),
    series=[values],
)

bars = BarChart(bars=[Value(v, str(v)) for v in (1.0, 2.0, 3.0, 4.0, 5.0)])
bars.validate()
print(bars.calculate_scaled_total_width(bars.box()))  # (50, 100, 750)

donut = DonutChart(values=[Value(5, "a"), Value(5, "b"), Value(0, "c")])
print(donut.finalize_values())  # the two non-zero values, as 0.5 each
```

Invalid input raises `ValueError`: a series with no values, a chart with no
visible series, ranges that are infinite, NaN or (on the x axis) empty, a bar
chart with no bars or a zero range, a donut chart whose values are all zero.

## What it does not do

chartkit computes layout only. It does not draw: there is no renderer, no
PNG or SVG output, no font handling or text measurement, no axis tick
generation, and no command-line tool.

## Tests

```
pytest
```