from typing import Iterable, Iterator, Sequence

from exceptions import PointIndexError, ResourceExhaustedError
from geometry import Point, Primary


class PointCollection:
    """
    Owning storage for the points of a scene.

    Hulls reference points of a collection by index. Positions are changed by
    replacing the stored point, so a point passed to a hull computation is never
    mutated underneath it. Removing a point shifts the indices of the points
    after it: hulls computed earlier must be rebuilt.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._points: list[Point] = list(points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        self._check_index(index)
        return self._points[index]

    def __repr__(self) -> str:
        return f"PointCollection({self._points!r})"

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def _check_index(self, index: int):
        if not 0 <= index < len(self._points):
            raise PointIndexError(index, len(self._points))

    def insert(self, x: float, y: float, group: int = 0) -> int:
        """
        Append a new point and return its index.
        """
        try:
            self._points.append(Point(float(x), float(y), Primary(group)))
        except MemoryError as exc:
            raise ResourceExhaustedError(
                f"Cannot insert point #{len(self._points)} into the collection"
            ) from exc
        return len(self._points) - 1

    def remove(self, index: int) -> Point:
        self._check_index(index)
        return self._points.pop(index)

    def clear(self):
        self._points.clear()

    def move(self, index: int, x: float, y: float):
        self._check_index(index)
        self._points[index] = self._points[index].moved_to(float(x), float(y))

    def translate(self, indices: Iterable[int], dx: float, dy: float):
        for index in indices:
            p = self[index]
            self._points[index] = p.moved_to(p.x + dx, p.y + dy)

    def translate_group(self, group: int, dx: float, dy: float):
        self.translate(self.indices_of_group(group), dx, dy)

    def hit_test(self, x: float, y: float, radius: float = 10.0) -> int | None:
        """
        Index of the topmost point within `radius` of (x, y), or None.
        Later points are drawn above earlier ones, so the scan runs backwards.
        """
        for index in range(len(self._points) - 1, -1, -1):
            p = self._points[index]
            if (p.x - x) ** 2 + (p.y - y) ** 2 <= radius ** 2:
                return index
        return None

    def indices_of_group(self, group: int) -> list[int]:
        return [idx for idx, p in enumerate(self._points) if p.group == group]


def partition_by_group(points: Sequence[Point], group_a: int, group_b: int) -> tuple[list[int], list[int]]:
    """
    Split point indices into two subsets by group tag, keeping input order.
    Points tagged with any other group are left out.
    """
    subset_a, subset_b = [], []
    for idx, p in enumerate(points):
        if p.group == group_a:
            subset_a.append(idx)
        elif p.group == group_b:
            subset_b.append(idx)
    return subset_a, subset_b
