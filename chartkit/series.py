"""Value containers and data series: continuous, concatenated, annotations and bands."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from chartkit.axis import YAxisType
from chartkit.defaults import DEFAULT_FLOAT_FORMAT

ValueFormatter = Callable[[Any], str]

DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD = 16


def float_value_formatter(value: Any) -> str:
    """Format a number with two decimals; anything else becomes an empty string."""
    if isinstance(value, (int, float)):
        return DEFAULT_FLOAT_FORMAT % value
    return ""


@runtime_checkable
class ValuesProvider(Protocol):
    """Anything with a length and x, y values per index."""

    def __len__(self) -> int: ...

    def get_values(self, index: int) -> tuple[float, float]: ...


@runtime_checkable
class BoundedValuesProvider(Protocol):
    """Anything with a length and x, upper y, lower y values per index."""

    def __len__(self) -> int: ...

    def get_bounded_values(self, index: int) -> tuple[float, float, float]: ...


@dataclass
class Value:
    """A labelled single value, as used by bar and donut charts."""

    value: float
    label: str = ""


@dataclass
class Annotation:
    """A label placed at an x, y position."""

    x_value: float
    y_value: float
    label: str = ""


class Array(tuple):
    """An immutable sequence of floats."""

    def __new__(cls, values: Sequence[float] = ()) -> Array:
        return super().__new__(cls, (float(v) for v in values))

    def get_value(self, index: int) -> float:
        return self[index]


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _std_dev(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    mean = _mean(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


@dataclass
class ContinuousSeries:
    """A line of x, y values."""

    name: str = ""
    hidden: bool = False
    y_axis: YAxisType = YAxisType.PRIMARY
    x_value_formatter: ValueFormatter | None = None
    y_value_formatter: ValueFormatter | None = None
    x_values: list[float] = field(default_factory=list)
    y_values: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.x_values)

    def get_values(self, index: int) -> tuple[float, float]:
        return self.x_values[index], self.y_values[index]

    def first_values(self) -> tuple[float, float]:
        return self.x_values[0], self.y_values[0]

    def last_values(self) -> tuple[float, float]:
        return self.x_values[-1], self.y_values[-1]

    def value_formatters(self) -> tuple[ValueFormatter, ValueFormatter]:
        """Return the x and y formatters, falling back to the float formatter."""
        return (
            self.x_value_formatter or float_value_formatter,
            self.y_value_formatter or float_value_formatter,
        )

    def validate(self) -> None:
        if not self.x_values:
            raise ValueError("continuous series; must have xvalues set")
        if not self.y_values:
            raise ValueError("continuous series; must have yvalues set")
        if len(self.x_values) != len(self.y_values):
            raise ValueError("continuous series; must have same length xvalues as yvalues")


@dataclass
class ConcatSeries:
    """Several series read one after another as a single run of values."""

    series: Sequence[Any] = field(default_factory=list)

    def _providers(self) -> Iterator[ValuesProvider]:
        return (s for s in self.series if isinstance(s, ValuesProvider))

    def __len__(self) -> int:
        return sum(len(s) for s in self._providers())

    def get_value(self, index: int) -> tuple[float, float]:
        """Return the values at an index counted across all inner series."""
        cursor = 0
        for provider in self._providers():
            length = len(provider)
            if index < cursor + length:
                return provider.get_values(index - cursor)
            cursor += length
        return 0.0, 0.0

    def validate(self) -> None:
        for s in self.series:
            s.validate()


@dataclass
class AnnotationSeries:
    """A set of labels drawn on a chart."""

    name: str = ""
    hidden: bool = False
    y_axis: YAxisType = YAxisType.PRIMARY
    annotations: list[Annotation] = field(default_factory=list)

    def validate(self) -> None:
        if not self.annotations:
            raise ValueError("annotation series requires annotations to be set and not empty")


@dataclass
class BollingerBandsSeries:
    """Bands at the moving average plus and minus k standard deviations of an inner series."""

    name: str = ""
    hidden: bool = False
    y_axis: YAxisType = YAxisType.PRIMARY
    period: int = 0
    k: float = 0.0
    inner_series: ValuesProvider | None = None
    _buffer: deque | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def effective_period(self) -> int:
        return self.period or DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD

    @property
    def effective_k(self) -> float:
        return self.k or 2.0

    def __len__(self) -> int:
        return len(self.inner_series) if self.inner_series is not None else 0

    def _bands(self, values: Sequence[float]) -> tuple[float, float]:
        average = _mean(values)
        spread = self.effective_k * _std_dev(values)
        return average + spread, average - spread

    def get_bounded_values(self, index: int) -> tuple[float, float, float]:
        """Return x and the upper and lower band; call with ascending indexes from 0."""
        if self.inner_series is None:
            return 0.0, 0.0, 0.0
        period = self.effective_period
        if self._buffer is None or index == 0:
            self._buffer = deque()
        if len(self._buffer) >= period:
            self._buffer.popleft()
        x, y = self.inner_series.get_values(index)
        self._buffer.append(y)
        upper, lower = self._bands(list(self._buffer))
        return x, upper, lower

    def get_bounded_last_values(self) -> tuple[float, float, float]:
        """Return x and the bands computed over the last period of values."""
        if self.inner_series is None:
            return 0.0, 0.0, 0.0
        length = len(self.inner_series)
        start = max(length - self.effective_period, 0)
        x = 0.0
        window = []
        for index in range(start, length):
            x, y = self.inner_series.get_values(index)
            window.append(y)
        upper, lower = self._bands(window)
        return x, upper, lower

    def validate(self) -> None:
        if self.inner_series is None:
            raise ValueError("bollinger bands series requires InnerSeries to be set")


def bounded_last_values_annotation_series(
    inner_series: Any, value_formatter: ValueFormatter | None = None
) -> AnnotationSeries:
    """Build an annotation series labelling the last upper and lower values of a bounded series."""
    x, upper, lower = inner_series.get_bounded_last_values()

    if value_formatter is not None:
        formatter = value_formatter
    elif hasattr(inner_series, "value_formatters"):
        _, formatter = inner_series.value_formatters()
    else:
        formatter = float_value_formatter

    name = ""
    hidden = False
    if hasattr(inner_series, "name"):
        name = f"{inner_series.name} - Last Values"
        hidden = getattr(inner_series, "hidden", False)

    return AnnotationSeries(
        name=name,
        hidden=hidden,
        annotations=[
            Annotation(x_value=x, y_value=upper, label=formatter(upper)),
            Annotation(x_value=x, y_value=lower, label=formatter(lower)),
        ],
    )