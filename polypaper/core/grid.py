"""Jittered vertex lattice for the low-poly plane."""

import numpy as np
import structlog

from .alea_prng import RandomSource

logger = structlog.get_logger()

GRID_COLUMNS = 19
GRID_ROWS = 11
DEPTH_JITTER = 50.0


def grid_variation(width: float, height: float) -> float:
    """Maximum planar deviation of a vertex from its lattice position."""
    return min(width / 32, height / 16)


def generate_grid(width: float, height: float, rng: RandomSource) -> np.ndarray:
    """
    Generate the jittered 19 x 11 vertex lattice.

    The lattice spans one cell beyond the viewport on the left and top edges
    (and past it on the right and bottom), so jittered triangles still cover
    the whole screen.

    Args:
        width: Viewport width
        height: Viewport height
        rng: Random source, advanced by three draws per vertex

    Returns:
        Read-only (209, 3) array of [x, y, z] points, row-major
    """
    variation = grid_variation(width, height)
    step_x = width / 16
    step_y = height / 8

    logger.info("Generating vertices", width=width, height=height, variation=variation)

    points = []
    for y in range(GRID_ROWS):
        for x in range(GRID_COLUMNS):
            px = step_x * x + rng.uniform(-variation, variation) - step_x
            py = step_y * y + rng.uniform(-variation, variation) - step_y
            pz = rng.uniform(-DEPTH_JITTER, DEPTH_JITTER)
            points.append([px, py, pz])

    vertices = np.array(points, dtype=np.float64)
    vertices.flags.writeable = False
    return vertices
