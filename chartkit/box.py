"""Integer boxes, corner sets and points used for chart layout."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace


def _mean_int(a: int, b: int) -> int:
    """Integer mean truncated toward zero."""
    total = a + b
    half = abs(total) // 2
    return half if total >= 0 else -half


def _rotate_coordinate(cx: int, cy: int, x: int, y: int, theta_radians: float) -> tuple[int, int]:
    dx, dy = float(x - cx), float(y - cy)
    rx = dx * math.cos(theta_radians) - dy * math.sin(theta_radians)
    ry = dx * math.sin(theta_radians) + dy * math.cos(theta_radians)
    return int(rx) + cx, int(ry) + cy


@dataclass(frozen=True)
class Point:
    """An integer x, y pair."""

    x: int = 0
    y: int = 0

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"P{{{self.x},{self.y}}}"


@dataclass(frozen=True)
class Box:
    """The four edges of a rectangle; ``is_set`` marks an intentional all-zero box."""

    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0
    is_set: bool = field(default=False, compare=False)

    def is_zero(self) -> bool:
        if self.is_set:
            return False
        return self.top == 0 and self.left == 0 and self.right == 0 and self.bottom == 0

    def __str__(self) -> str:
        return f"box({self.top},{self.left},{self.right},{self.bottom})"

    def _coalesce(self, value: int, default: int) -> int:
        if not self.is_set and value == 0:
            return default
        return value

    def get_top(self, default: int = 0) -> int:
        return self._coalesce(self.top, default)

    def get_left(self, default: int = 0) -> int:
        return self._coalesce(self.left, default)

    def get_right(self, default: int = 0) -> int:
        return self._coalesce(self.right, default)

    def get_bottom(self, default: int = 0) -> int:
        return self._coalesce(self.bottom, default)

    def width(self) -> int:
        return abs(self.right - self.left)

    def height(self) -> int:
        return abs(self.bottom - self.top)

    def center(self) -> tuple[int, int]:
        return self.left + (self.width() >> 1), self.top + (self.height() >> 1)

    def aspect(self) -> float:
        width, height = self.width(), self.height()
        if height == 0:
            return math.inf if width > 0 else math.nan
        return width / height

    def equals(self, other: Box) -> bool:
        return (
            self.top == other.top
            and self.left == other.left
            and self.right == other.right
            and self.bottom == other.bottom
        )

    def is_bigger_than(self, other: Box) -> bool:
        return (
            self.top < other.top
            or self.bottom > other.bottom
            or self.left < other.left
            or self.right > other.right
        )

    def is_smaller_than(self, other: Box) -> bool:
        return (
            self.top > other.top
            and self.bottom < other.bottom
            and self.left > other.left
            and self.right < other.right
        )

    def grow(self, other: Box) -> Box:
        """Return the smallest box that holds both boxes."""
        return Box(
            top=min(self.top, other.top),
            left=min(self.left, other.left),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )

    def shift(self, x: int, y: int) -> Box:
        return Box(
            top=self.top + y,
            left=self.left + x,
            right=self.right + x,
            bottom=self.bottom + y,
        )

    def corners(self) -> BoxCorners:
        return BoxCorners(
            top_left=Point(self.left, self.top),
            top_right=Point(self.right, self.top),
            bottom_right=Point(self.right, self.bottom),
            bottom_left=Point(self.left, self.bottom),
        )

    def fit(self, other: Box) -> Box:
        """Keep the aspect ratio of ``other`` while fitting it inside this box."""
        box_aspect = self.aspect()
        other_aspect = other.aspect()
        if other_aspect == box_aspect:
            return replace(self)

        bw, bh = float(self.width()), float(self.height())
        bw2 = int(bw) >> 1
        bh2 = int(bh) >> 1
        if other_aspect > box_aspect:
            if other_aspect > 1.0:
                new_half_height = int(bw / other_aspect) >> 1
            else:
                new_half_height = int(bh * other_aspect) >> 1
            return Box(
                top=(self.top + bh2) - new_half_height,
                left=self.left,
                right=self.right,
                bottom=(self.top + bh2) + new_half_height,
            )
        if other_aspect > 1.0:
            new_half_width = int(bh / other_aspect) >> 1
        else:
            new_half_width = int(bw * other_aspect) >> 1
        return Box(
            top=self.top,
            left=(self.left + bw2) - new_half_width,
            right=(self.left + bw2) + new_half_width,
            bottom=self.bottom,
        )

    def constrain(self, other: Box) -> Box:
        """Shrink this box so that it lies within ``other``."""
        return replace(
            self,
            top=max(self.top, other.top),
            left=max(self.left, other.left),
            right=min(self.right, other.right),
            bottom=min(self.bottom, other.bottom),
        )

    def outer_constrain(self, bounds: Box, other: Box) -> Box:
        """Pull this box in by however far ``other`` overflows ``bounds``."""
        top, left, right, bottom = self.top, self.left, self.right, self.bottom
        if other.top < bounds.top:
            top = self.top + (bounds.top - other.top)
        if other.left < bounds.left:
            left = self.left + (bounds.left - other.left)
        if other.right > bounds.right:
            right = self.right - (other.right - bounds.right)
        if other.bottom > bounds.bottom:
            bottom = self.bottom - (other.bottom - bounds.bottom)
        return replace(self, top=top, left=left, right=right, bottom=bottom)

    def validate(self) -> None:
        """Raise ValueError if any edge is negative."""
        if self.left < 0:
            raise ValueError("invalid left; must be >= 0")
        if self.right < 0:
            raise ValueError("invalid right; must be > 0")
        if self.top < 0:
            raise ValueError("invalid top; must be > 0")
        if self.bottom < 0:
            raise ValueError("invalid bottom; must be > 0")


BOX_ZERO = Box(is_set=True)


def new_box(top: int, left: int, right: int, bottom: int) -> Box:
    """Return a box that counts as set even when all edges are zero."""
    return Box(top=top, left=left, right=right, bottom=bottom, is_set=True)


@dataclass(frozen=True)
class BoxCorners:
    """A quadrilateral described by four independent corners."""

    top_left: Point = Point()
    top_right: Point = Point()
    bottom_right: Point = Point()
    bottom_left: Point = Point()

    def to_box(self) -> Box:
        return Box(
            top=min(self.top_left.y, self.top_right.y),
            left=min(self.top_left.x, self.bottom_left.x),
            right=max(self.top_right.x, self.bottom_right.x),
            bottom=max(self.bottom_left.y, self.bottom_right.y),
        )

    def width(self) -> int:
        return max(self.top_right.x, self.bottom_right.x) - min(self.top_left.x, self.bottom_left.x)

    def height(self) -> int:
        return max(self.bottom_left.y, self.bottom_right.y) - min(self.top_left.y, self.top_right.y)

    def center(self) -> tuple[int, int]:
        left = _mean_int(self.top_left.x, self.bottom_left.x)
        right = _mean_int(self.top_right.x, self.bottom_right.x)
        x = ((right - left) >> 1) + left
        top = _mean_int(self.top_left.y, self.top_right.y)
        bottom = _mean_int(self.bottom_left.y, self.bottom_right.y)
        y = ((bottom - top) >> 1) + top
        return x, y

    def rotate(self, theta_degrees: float) -> BoxCorners:
        """Rotate every corner about the center by the given angle."""
        cx, cy = self.center()
        theta = math.radians(theta_degrees)

        def turn(point: Point) -> Point:
            return Point(*_rotate_coordinate(cx, cy, point.x, point.y, theta))

        return BoxCorners(
            top_left=turn(self.top_left),
            top_right=turn(self.top_right),
            bottom_right=turn(self.bottom_right),
            bottom_left=turn(self.bottom_left),
        )

    def __str__(self) -> str:
        return f"BoxC{{{self.top_left},{self.top_right},{self.bottom_right},{self.bottom_left}}}"