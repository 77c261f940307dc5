"""
Integer geometry used by crop, resize and focal-point options.
"""

from __future__ import annotations

from typing import Any, Tuple, Union

from pydantic import field_validator
from pydantic.dataclasses import dataclass


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, order=True)
class Point:
    """A pair of integer coordinates, also used as a size (width x height)."""

    x: int
    y: int

    @classmethod
    def of(cls, value: "PointLike") -> "Point":
        """Coerce a point, an ``(x, y)`` pair or a single int (square size)."""
        if isinstance(value, Point):
            return value
        if _is_int(value):
            return cls(value, value)
        x, y = value
        return cls(x, y)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Union[int, float]) -> "Point":
        if _is_int(factor):
            return Point(self.x * factor, self.y * factor)
        if isinstance(factor, float):
            return Point(int(self.x * factor), int(self.y * factor))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, divisor: Union[int, float]) -> "Point":
        if _is_int(divisor):
            return Point(_trunc_div(self.x, divisor), _trunc_div(self.y, divisor))
        if isinstance(divisor, float):
            return Point(int(self.x / divisor), int(self.y / divisor))
        return NotImplemented

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def flip_horizontally(self) -> "Point":
        """Reflect about the vertical axis (negates ``x``)."""
        return Point(-self.x, self.y)

    def flip_vertically(self) -> "Point":
        """Reflect about the horizontal axis (negates ``y``)."""
        return Point(self.x, -self.y)

    def __str__(self) -> str:
        return f"{self.x}x{self.y}"


PointLike = Union[Point, Tuple[int, int], int]


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle between two corners.

    Corners are normalized on construction, so ``top_left`` always holds the
    smaller coordinates whatever order the points were given in.
    """

    top_left: Point
    bottom_right: Point

    @field_validator("top_left", "bottom_right", mode="before")
    @classmethod
    def _coerce_point(cls, value: Any) -> Any:
        if isinstance(value, (Point, tuple, list)) or _is_int(value):
            return Point.of(value)
        return value

    def __post_init__(self) -> None:
        a, b = self.top_left, self.bottom_right
        object.__setattr__(self, "top_left", Point(min(a.x, b.x), min(a.y, b.y)))
        object.__setattr__(self, "bottom_right", Point(max(a.x, b.x), max(a.y, b.y)))

    @classmethod
    def of(cls, value: "RectLike") -> "Rect":
        if isinstance(value, Rect):
            return value
        first, second = value
        return cls(Point.of(first), Point.of(second))

    @classmethod
    def from_center(cls, center: PointLike, width: int, height: int) -> "Rect":
        size = Point(width, height)
        top_left = Point.of(center) - size / 2
        return cls(top_left, top_left + size)

    @property
    def left(self) -> int:
        return self.top_left.x

    @property
    def top(self) -> int:
        return self.top_left.y

    @property
    def right(self) -> int:
        return self.bottom_right.x

    @property
    def bottom(self) -> int:
        return self.bottom_right.y

    def center(self) -> Point:
        return (self.top_left + self.bottom_right) / 2

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top

    def scale(self, factor: Union[int, float]) -> "Rect":
        """Scale around the center, returning a new rectangle."""
        center = self.center()
        return Rect(
            center + (self.top_left - center) * factor,
            center + (self.bottom_right - center) * factor,
        )

    def __str__(self) -> str:
        return f"{self.top_left}:{self.bottom_right}"


RectLike = Union[Rect, Tuple[PointLike, PointLike]]
