"""
Demo scenes built on the geometry core.

Each scene takes the points of a collection, recomputes its hulls from scratch
and answers the question the scene is about. Nothing is cached between calls:
points may be dragged between two runs.
"""

import logging

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from config import SceneConfig
from geometry import Hull, Point
from minkowski import MinkowskiMode, combine
from point_collection import PointCollection, partition_by_group
from quickhull import build_ordered_hull


logger = logging.getLogger(__name__)

FIRST_GROUP = 1
SECOND_GROUP = 2
QUERY_GROUP = 0


class Screen(Enum):
    QUICK_HULL = "quick_hull"
    MINKOWSKI_SUM = "minkowski_sum"
    MINKOWSKI_DIFFERENCE = "minkowski_difference"
    POINT_CONVEX_HULL = "point_convex_hull"
    GJK = "gjk"

    @property
    def two_shapes(self) -> bool:
        return self in (Screen.MINKOWSKI_SUM, Screen.MINKOWSKI_DIFFERENCE, Screen.GJK)


@dataclass
class SceneResult:
    screen: Screen
    hulls: list[Hull] = field(default_factory=list)
    combined: Hull | None = None
    query: Point | None = None
    inside: bool | None = None


def quick_hull_scene(collection: PointCollection) -> SceneResult:
    points = collection.points
    return SceneResult(Screen.QUICK_HULL, hulls=[build_ordered_hull(points)])


def point_convex_hull_scene(collection: PointCollection) -> SceneResult:
    """
    Hull of every point but the last one, then test whether the last point is inside.
    """
    points = collection.points
    if not points:
        return SceneResult(Screen.POINT_CONVEX_HULL, hulls=[Hull(points)], inside=False)

    hull = build_ordered_hull(points, range(len(points) - 1))
    query = points[-1]
    inside = hull.contains(query)
    logger.debug("Query point (%s, %s) inside hull: %s", query.x, query.y, inside)
    return SceneResult(Screen.POINT_CONVEX_HULL, hulls=[hull], query=query, inside=inside)


def _group_hulls(points) -> tuple[Hull, Hull]:
    first, second = partition_by_group(points, FIRST_GROUP, SECOND_GROUP)
    return build_ordered_hull(points, first), build_ordered_hull(points, second)


def minkowski_scene(collection: PointCollection, mode: MinkowskiMode, origin: Point) -> SceneResult:
    """
    Hull each of the two shapes, combine the hulls and hull the combination.
    """
    screen = Screen.MINKOWSKI_SUM if mode is MinkowskiMode.SUM else Screen.MINKOWSKI_DIFFERENCE
    hull_a, hull_b = _group_hulls(collection.points)
    combined_points = combine(hull_a, hull_b, mode, origin)
    combined = build_ordered_hull(combined_points)
    logger.debug(
        "Minkowski %s: %d x %d vertices, %d on the combined hull",
        mode.value, len(hull_a), len(hull_b), len(combined),
    )
    return SceneResult(screen, hulls=[hull_a, hull_b], combined=combined)


def gjk_scene(collection: PointCollection, origin: Point) -> SceneResult:
    """
    Two convex shapes overlap iff their Minkowski difference contains the origin.
    """
    hull_a, hull_b = _group_hulls(collection.points)
    difference = build_ordered_hull(combine(hull_a, hull_b, MinkowskiMode.DIFFERENCE, origin))
    inside = difference.contains(origin)
    logger.info("GJK: shapes %s", "overlap" if inside else "are separated")
    return SceneResult(
        Screen.GJK,
        hulls=[hull_a, hull_b],
        combined=difference,
        query=origin,
        inside=inside,
    )


def run_scene(screen: Screen, collection: PointCollection, origin: Point) -> SceneResult:
    if screen is Screen.QUICK_HULL:
        return quick_hull_scene(collection)
    if screen is Screen.POINT_CONVEX_HULL:
        return point_convex_hull_scene(collection)
    if screen is Screen.MINKOWSKI_SUM:
        return minkowski_scene(collection, MinkowskiMode.SUM, origin)
    if screen is Screen.MINKOWSKI_DIFFERENCE:
        return minkowski_scene(collection, MinkowskiMode.DIFFERENCE, origin)
    if screen is Screen.GJK:
        return gjk_scene(collection, origin)
    raise ValueError(f"Unknown screen: {screen!r}")


def pick_group(result: SceneResult, x: float, y: float) -> int | None:
    """
    Group to drag when the user presses inside one of the scene hulls.
    0 stands for every point of a single-shape scene.
    """
    click = Point(x, y)
    if result.hulls and result.hulls[0].contains(click):
        return 0 if result.screen is Screen.QUICK_HULL else FIRST_GROUP
    if len(result.hulls) > 1 and result.hulls[1].contains(click):
        return SECOND_GROUP
    return None


def drag_group(collection: PointCollection, group: int, dx: float, dy: float):
    if group == 0:
        collection.translate(range(len(collection)), dx, dy)
    else:
        collection.translate_group(group, dx, dy)


def generate_points(
    screen: Screen,
    config: SceneConfig | None = None,
    rng: np.random.Generator | None = None
) -> PointCollection:
    """
    Fresh random layout for a scene.

    Single-shape scenes scatter points over the whole drawable area, the
    point-in-hull scene adds the origin as its query point. Two-shape scenes put
    the first group in the upper-left quarter and the second one in the
    lower-right quarter of the drawable area.
    """
    config = config or SceneConfig()
    if rng is None:
        rng = np.random.default_rng(config.seed)
    canvas = config.canvas
    collection = PointCollection()

    def scatter(n, x0, y0, w, h, group):
        xs = rng.integers(0, w, size=n) + x0
        ys = rng.integers(0, h, size=n) + y0
        for x, y in zip(xs, ys):
            collection.insert(x, y, group)

    if screen.two_shapes:
        w, h = canvas.drawable_width // 2, canvas.drawable_height // 2
        scatter(config.group_points, canvas.margin_left, canvas.margin_top, w, h, FIRST_GROUP)
        scatter(config.group_points, canvas.margin_left + w, canvas.margin_top + h, w, h, SECOND_GROUP)
    else:
        scatter(
            config.single_shape_points,
            canvas.margin_left,
            canvas.margin_top,
            canvas.drawable_width,
            canvas.drawable_height,
            FIRST_GROUP,
        )
        if screen is Screen.POINT_CONVEX_HULL:
            origin = canvas.origin
            collection.insert(origin.x, origin.y, QUERY_GROUP)

    logger.debug("Generated %d points for %s", len(collection), screen.value)
    return collection
