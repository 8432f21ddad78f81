"""Base game objects."""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def make_point(x: int, y: int) -> Point:
    return Point(x, y)


def equal(p1: Optional[Point], p2: Optional[Point]) -> bool:
    """
    Two missing points compare equal; a missing point never equals a present one.
    """
    if p1 is None and p2 is None:
        return True

    if p1 is None or p2 is None:
        return False

    return p1.x == p2.x and p1.y == p2.y


def adjacent(p1: Point, p2: Point) -> bool:
    # A point counts as adjacent to itself.
    return abs(p1.x - p2.x) <= 1 and abs(p1.y - p2.y) <= 1


def to_display_string(p: Point) -> str:
    return str(p)


def find_point(points: Sequence[Optional[Point]], point: Optional[Point]) -> Optional[int]:
    for i, candidate in enumerate(points):
        if equal(candidate, point):
            return i

    return None


class Treasure:
    def __init__(self, name: str, location: Optional[Point]):
        self.name = name
        self.location = location

    @property
    def is_found(self) -> bool:
        return self.location is None

    def mark_found(self):
        self.location = None

    def __repr__(self) -> str:
        return f"Treasure({self.name!r}, {self.location!r})"
