import logging

from typing import Sequence

from geometry import Hull, Point, distance, order_hull, side


logger = logging.getLogger(__name__)


class QuickHullBuilder:
    def farthest_point(
        self,
        points: Sequence[Point],
        candidates: Sequence[int],
        a: int,
        b: int,
        sgn: int
    ) -> int | None:
        """
        Candidate on the `sgn` side of line ab with the largest distance to it.
        The first one found wins ties.
        """
        pa, pb = points[a], points[b]
        ind, max_dist = None, 0.0
        for idx in candidates:
            p = points[idx]
            dist = distance(pa, pb, p)
            if side(pa, pb, p) == sgn and dist > max_dist:
                ind, max_dist = idx, dist
        return ind

    def compute_hull(self, points: Sequence[Point], candidates: Sequence[int] | None = None) -> list[int]:
        """
        QuickHull over `points` (or over the subset of indices `candidates`).

        Returns indices of the hull vertices in discovery order, each vertex once.
        Fewer than 3 candidates give an empty hull; collinear input gives
        the two extreme points only.

        Recursion is unrolled onto an explicit stack. Segments are popped in the
        same order the recursive formulation visits them.
        """
        if candidates is None:
            candidates = range(len(points))
        candidates = list(candidates)
        if len(candidates) < 3:
            return []

        min_x = max_x = candidates[0]
        for idx in candidates[1:]:
            if points[idx].x < points[min_x].x:
                min_x = idx
            if points[idx].x > points[max_x].x:
                max_x = idx

        hull: list[int] = []
        seen: set[int] = set()
        stack = [(min_x, max_x, -1), (min_x, max_x, 1)]
        while stack:
            a, b, sgn = stack.pop()
            ind = self.farthest_point(points, candidates, a, b, sgn)

            if ind is None:
                for idx in (a, b):
                    if idx not in seen:
                        seen.add(idx)
                        hull.append(idx)
                continue

            pf, pa, pb = points[ind], points[a], points[b]
            stack.append((ind, b, -side(pf, pb, pa)))
            stack.append((ind, a, -side(pf, pa, pb)))

        logger.debug("QuickHull: %d of %d points on the hull", len(hull), len(candidates))
        return hull


def build_ordered_hull(points: Sequence[Point], candidates: Sequence[int] | None = None) -> Hull:
    """
    Convex hull of `points` ordered for drawing and containment queries.
    """
    vertices = QuickHullBuilder().compute_hull(points, candidates)
    ordered, reference = order_hull(points, vertices)
    return Hull(points, ordered, reference)
