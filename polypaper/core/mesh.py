"""Mesh assembly: the single regenerate-on-demand entry point."""

import numpy as np
import structlog
from dataclasses import dataclass
from typing import Tuple

from .alea_prng import RandomSource
from .grid import generate_grid
from .lighting import place_lights, random_color
from .shading import shade
from .triangulator import Triangle, triangulate

logger = structlog.get_logger()


@dataclass
class MeshConfig:
    """Per-generation parameters."""

    light_count: int = 2
    z_offset: float = 100.0
    legacy_centroid: bool = False  # skewed y centroid of older renders

    def __post_init__(self):
        if self.light_count < 1:
            raise ValueError(f"light_count must be at least 1, got {self.light_count}")
        if self.z_offset <= 0:
            raise ValueError(f"z_offset must be positive, got {self.z_offset}")


@dataclass(frozen=True, eq=False)
class Mesh:
    """A complete shaded scene, read-only once built."""

    triangles: Tuple[Triangle, ...]
    vertices: np.ndarray
    ambient: np.ndarray
    diffuse: np.ndarray
    width: float
    height: float

    def __len__(self):
        return len(self.triangles)

    def __iter__(self):
        return iter(self.triangles)

    def projected(self) -> np.ndarray:
        """(T, 3, 2) array of 2D triangle corners in render order."""
        return np.array([t.projected() for t in self.triangles])

    def rgba(self) -> np.ndarray:
        """(T, 4) face colors with alpha fixed at 1.0."""
        colors = np.ones((len(self.triangles), 4))
        for i, t in enumerate(self.triangles):
            colors[i, :3] = t.color
        return colors


def generate_mesh(width: float, height: float, config: MeshConfig,
                  rng: RandomSource) -> Mesh:
    """
    Generate a new shaded mesh.

    Runs grid generation, triangulation, light placement and shading in
    that order. Nothing from a previous call is reused.

    Args:
        width: Viewport width
        height: Viewport height
        config: Light count, light height and centroid mode
        rng: Injected random source

    Returns:
        Complete Mesh of 360 triangles
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must be positive, got {width}x{height}")

    logger.info("Generating mesh", width=width, height=height,
                light_count=config.light_count)

    vertices = generate_grid(width, height, rng)
    triangles = triangulate(vertices, legacy_centroid=config.legacy_centroid)
    lights = place_lights(config.light_count, width, height, config.z_offset, rng)

    mesh_ambient = random_color(rng)
    mesh_diffuse = random_color(rng)

    shaded = shade(triangles, lights, mesh_ambient, mesh_diffuse)

    logger.info("Mesh generated", triangles=len(shaded))
    return Mesh(
        triangles=tuple(shaded),
        vertices=vertices,
        ambient=mesh_ambient,
        diffuse=mesh_diffuse,
        width=width,
        height=height,
    )
