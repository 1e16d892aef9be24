from enum import Enum
from typing import Iterable, Sequence

from geometry import Derived, Point


class MinkowskiMode(Enum):
    SUM = "sum"
    DIFFERENCE = "difference"


def combine(
    hull_a: Iterable[Point],
    hull_b: Iterable[Point],
    mode: MinkowskiMode,
    origin: Point
) -> list[Point]:
    """
    Pairwise Minkowski combination of two point sets, offset by the scene origin.

    sum:        a + b - origin
    difference: b - a + origin

    Produces |A| * |B| derived points ordered by `a` first. The result is not
    a hull: run QuickHull on it to get the boundary of the combined shape.
    """
    if not isinstance(mode, MinkowskiMode):
        raise ValueError(f"Unknown Minkowski mode: {mode!r}")

    hull_b = list(hull_b)
    combined = []
    for a in hull_a:
        for b in hull_b:
            if mode is MinkowskiMode.SUM:
                combined.append(Point(a.x + b.x - origin.x, a.y + b.y - origin.y, Derived()))
            else:
                combined.append(Point(b.x - a.x + origin.x, b.y - a.y + origin.y, Derived()))
    return combined


def minkowski_sum(hull_a: Sequence[Point], hull_b: Sequence[Point], origin: Point) -> list[Point]:
    return combine(hull_a, hull_b, MinkowskiMode.SUM, origin)


def minkowski_difference(hull_a: Sequence[Point], hull_b: Sequence[Point], origin: Point) -> list[Point]:
    return combine(hull_a, hull_b, MinkowskiMode.DIFFERENCE, origin)
