import math

from dataclasses import dataclass, field
from typing import Iterator, Sequence, Union


DERIVED_GROUP = 3


@dataclass(frozen=True)
class Primary:
    """
    Role of a point placed by the user. `group` is the partition key:
    0 for single-shape scenes, 1 and 2 for the two input shapes.
    """
    group: int = 0

    def __post_init__(self):
        if self.group == DERIVED_GROUP:
            raise ValueError(f"Group {DERIVED_GROUP} is reserved for derived points")


@dataclass(frozen=True)
class Derived:
    """
    Role of a synthetic point produced by a Minkowski combination.
    """


PointRole = Union[Primary, Derived]


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    role: PointRole = field(default_factory=Primary)

    @property
    def group(self) -> int:
        if isinstance(self.role, Derived):
            return DERIVED_GROUP
        return self.role.group

    @property
    def is_derived(self) -> bool:
        return isinstance(self.role, Derived)

    def moved_to(self, x: float, y: float) -> "Point":
        return Point(x, y, self.role)


def cross(p1: Point, p2: Point, p: Point) -> float:
    """
    Cross product of segments p1p2 and p1p.
    Positive when p lies to the left of the directed line p1 -> p2 (y axis up).
    """
    return (p.y - p1.y) * (p2.x - p1.x) - (p2.y - p1.y) * (p.x - p1.x)


def side(p1: Point, p2: Point, p: Point) -> int:
    """
    Side of point p with respect to the directed line p1 -> p2: +1, -1 or 0 if collinear.
    """
    val = cross(p1, p2, p)
    if val > 0:
        return 1
    if val < 0:
        return -1
    return 0


def distance(p1: Point, p2: Point, p: Point) -> float:
    """
    Value proportional to the distance from p to the line p1p2.
    Only good for comparisons, it is not scaled by |p1p2|.
    """
    return abs(cross(p1, p2, p))


def reference_vertex(points: Sequence[Point], hull: Sequence[int]) -> int | None:
    """
    Vertex with maximum y, ties broken by minimum x.
    """
    if not hull:
        return None

    ref = hull[0]
    for idx in hull[1:]:
        p, r = points[idx], points[ref]
        if p.y > r.y or p.y == r.y and p.x < r.x:
            ref = idx
    return ref


def order_hull(points: Sequence[Point], hull: Sequence[int]) -> tuple[list[int], int | None]:
    """
    Sort hull vertices by polar angle around the reference vertex.

    Returns the ordered vertex indices together with the index of the reference
    vertex, which is placed last. Angles lie in (-pi, 0], so the traversal is
    counter-clockwise for a y-up coordinate system.
    """
    ref = reference_vertex(points, hull)
    if ref is None or len(hull) < 2:
        return list(hull), ref

    center = points[ref]

    def polar_angle(idx: int) -> float:
        p = points[idx]
        return math.atan2(p.y - center.y, p.x - center.x)

    ordered = sorted((idx for idx in hull if idx != ref), key=polar_angle)
    ordered.append(ref)
    return ordered, ref


def convex_hull_contains(vertices: Sequence[Point], query: Point) -> bool:
    """
    Strict point-in-convex-polygon test for counter-clockwise ordered vertices.
    Points on the boundary are reported as outside.
    """
    n = len(vertices)
    if n < 3:
        return False

    for i in range(n):
        if side(vertices[i], vertices[(i + 1) % n], query) <= 0:
            return False
    return True


@dataclass
class Hull:
    """
    Ordered view over convex hull vertices stored in an owning point sequence.
    """
    source: Sequence[Point]
    indices: list[int] = field(default_factory=list)
    reference: int | None = None

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[Point]:
        return (self.source[idx] for idx in self.indices)

    @property
    def vertices(self) -> list[Point]:
        return [self.source[idx] for idx in self.indices]

    @property
    def reference_point(self) -> Point | None:
        if self.reference is None:
            return None
        return self.source[self.reference]

    @property
    def is_degenerate(self) -> bool:
        return len(self.indices) < 3

    def edges(self) -> list[tuple[Point, Point]]:
        """
        Boundary edges including the closing one. Empty for degenerate hulls.
        """
        if self.is_degenerate:
            return []
        vertices = self.vertices
        return list(zip(vertices, vertices[1:] + vertices[:1]))

    def contains(self, query: Point) -> bool:
        return convex_hull_contains(self.vertices, query)
