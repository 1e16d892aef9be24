import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import DERIVED_GROUP, Hull, Point
from scenes import SceneResult


GROUP_COLORS = {0: 'r', 1: 'r', 2: 'b', DERIVED_GROUP: 'k'}


def plot_points(points: list[Point], ax: Axes | None = None, s: float = 20):
    ax = ax or plt.gca()
    x = [p.x for p in points]
    y = [p.y for p in points]
    c = [GROUP_COLORS.get(p.group, 'k') for p in points]
    ax.scatter(x, y, c=c, s=s)


def plot_hull(hull: Hull, ax: Axes | None = None, clr: str = 'k'):
    """
    Draw hull boundary as a closed polygon. Degenerate hulls are drawn as
    a segment or a single point.
    """
    ax = ax or plt.gca()
    vertices = hull.vertices
    if not vertices:
        return
    if not hull.is_degenerate:
        vertices.append(vertices[0])
    xs = [p.x for p in vertices]
    ys = [p.y for p in vertices]
    ax.plot(xs, ys, c=clr, marker='o', markersize=3)


def plot_scene(result: SceneResult, points: list[Point], ax: Axes | None = None):
    ax = ax or plt.gca()
    plot_points(points, ax)

    for hull in result.hulls:
        plot_hull(hull, ax, clr='gray')

    if result.combined is not None:
        if result.inside is None:
            clr = 'k'
        else:
            clr = 'g' if result.inside else 'r'
        plot_points(result.combined.source, ax, s=2)
        plot_hull(result.combined, ax, clr=clr)

    if result.query is not None:
        ax.scatter([result.query.x], [result.query.y], c='g' if result.inside else 'm', marker='x')

    ax.set_title(result.screen.value)
    ax.set_aspect('equal')
    ax.grid()
