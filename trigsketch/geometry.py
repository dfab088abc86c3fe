"""Canvas-space point primitive and small vector helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point2D = Tuple[float, float]


@dataclass
class Point:
    """Mutable 2D coordinate.

    Corner points are translated in place during layout, so anything handing
    a point to a caller goes through :meth:`copy` first.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def translate(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def as_tuple(self) -> Point2D:
        return (self.x, self.y)


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


__all__ = ["Point", "Point2D", "midpoint"]
