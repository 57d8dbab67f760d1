from __future__ import annotations

from dataclasses import dataclass

from ..types import Point


class InvalidIntervalError(ValueError):
    """A segment was constructed with its end before its start."""


@dataclass(slots=True, frozen=True)
class Segment:
    """Half-open interval [start, end) on the vertical axis."""
    start: float
    end: float

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidIntervalError(
                f"Segment end ({self.end}) is before its start ({self.start})"
            )

    def length(self) -> float:
        return self.end - self.start


def make_arrow(
    from_x: float, to_x: float, y: float, arrow_len: float, arrow_width: float
) -> list[Point]:
    """Vertices of an arrow head with its tip at (to_x, y).

    The arrow points in the direction of travel from from_x to to_x.
    """
    direction = 1.0 if to_x >= from_x else -1.0
    base_x = to_x - direction * arrow_len
    half = 0.5 * arrow_width
    return [
        Point(to_x, y),
        Point(base_x, y - half),
        Point(base_x, y + half),
    ]


def shorten_line_by(amount: float, x1: float, x2: float) -> tuple[float, float]:
    """Pull both ends of a horizontal line in towards each other."""
    if x2 >= x1:
        return x1 + amount, x2 - amount
    return x1 - amount, x2 + amount
