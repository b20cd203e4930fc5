"""Random point lights."""

import numpy as np
import structlog
from dataclasses import dataclass
from typing import List

from .alea_prng import RandomSource
from .vector import normalize, vec3

logger = structlog.get_logger()

# Lights may sit slightly outside the viewport
LIGHT_MARGIN = 50.0


@dataclass(frozen=True, eq=False)
class Light:
    """A point light with its own ambient and diffuse tint."""
    position: np.ndarray
    ambient: np.ndarray
    diffuse: np.ndarray

    def ray_to(self, point) -> np.ndarray:
        """Unit direction from ``point`` towards the light."""
        return normalize(self.position - np.asarray(point, dtype=np.float64))


def random_color(rng: RandomSource) -> np.ndarray:
    """Three independent channels in [0, 1)."""
    return vec3(rng.random(), rng.random(), rng.random())


def place_lights(count: int, width: float, height: float, z_offset: float,
                 rng: RandomSource) -> List[Light]:
    """
    Position ``count`` lights above the plane.

    Args:
        count: Number of lights
        width: Viewport width
        height: Viewport height
        z_offset: Base light height; each light lands in [z_offset/2, z_offset*2)
        rng: Random source, advanced by nine draws per light

    Returns:
        List of lights
    """
    logger.info("Positioning lights", count=count, z_offset=z_offset)

    lights = []
    for _ in range(count):
        position = vec3(
            rng.uniform(-LIGHT_MARGIN, width + LIGHT_MARGIN),
            rng.uniform(-LIGHT_MARGIN, height + LIGHT_MARGIN),
            rng.uniform(z_offset / 2, z_offset * 2),
        )
        ambient = random_color(rng)
        diffuse = random_color(rng)
        lights.append(Light(position=position, ambient=ambient, diffuse=diffuse))
    return lights
