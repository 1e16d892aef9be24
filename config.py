"""
Scene configuration.

The canvas describes the drawable area the demo scenes are laid out on and the
grid whose central lines define the scene origin used by Minkowski
combinations and the GJK test.
"""

import logging

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from geometry import Point


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanvasConfig:
    width: int = 1200
    height: int = 800
    panel_width: int = 220  # left strip reserved for controls, no grid there
    grid_step: int = 20
    margin_left: int = 250
    margin_top: int = 50
    margin_right: int = 50
    margin_bottom: int = 100

    def __post_init__(self):
        if self.grid_step <= 0:
            raise ValueError(f"grid_step must be positive, got {self.grid_step}")

        if self.panel_width < 0:
            raise ValueError(f"panel_width must be non-negative, got {self.panel_width}")

        if self.width - self.margin_left - self.margin_right < 2:
            raise ValueError(
                f"Canvas width {self.width} leaves no drawable area "
                f"between margins {self.margin_left} and {self.margin_right}"
            )

        if self.height - self.margin_top - self.margin_bottom < 2:
            raise ValueError(
                f"Canvas height {self.height} leaves no drawable area "
                f"between margins {self.margin_top} and {self.margin_bottom}"
            )

    @property
    def drawable_width(self) -> int:
        return self.width - self.margin_left - self.margin_right

    @property
    def drawable_height(self) -> int:
        return self.height - self.margin_top - self.margin_bottom

    @property
    def origin(self) -> Point:
        """
        Crossing of the grid lines at or just before the middle of the gridded area.
        Vertical lines start at the panel edge, horizontal ones at the top.
        """
        step = self.grid_step
        mid_x = (self.width + self.panel_width) // 2
        mid_y = self.height // 2
        return Point(
            float(self.panel_width + (mid_x - self.panel_width) // step * step),
            float(mid_y // step * step),
        )


@dataclass(frozen=True)
class SceneConfig:
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    single_shape_points: int = 15
    group_points: int = 6
    seed: int | None = None

    def __post_init__(self):
        if self.single_shape_points < 3:
            raise ValueError(
                f"single_shape_points must be at least 3, got {self.single_shape_points}"
            )

        if self.group_points < 3:
            raise ValueError(f"group_points must be at least 3, got {self.group_points}")

    @classmethod
    def from_dict(cls, data: dict) -> "SceneConfig":
        data = dict(data or {})
        canvas = CanvasConfig(**(data.pop("canvas", None) or {}))
        return cls(canvas=canvas, **data)


def load_config(path: str | Path) -> SceneConfig:
    """
    Load scene configuration from a YAML file. Missing keys keep their defaults.
    """
    path = Path(path)
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    config = SceneConfig.from_dict(data)
    logger.info("Loaded scene config from %s", path)
    return config
