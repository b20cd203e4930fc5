"""
Flat shading of mesh triangles.

Each light contributes an ambient and a diffuse term, both divided by the
light count so the result stays in a similar range however many lights are
placed. Illuminance is the signed cosine between the face normal and the
direction to the light; faces turned away from a light lose diffuse color
instead of being culled. Channels are clamped to [0, 1] once all lights have
been summed.
"""

import dataclasses
import numpy as np
import structlog
from typing import List, Sequence

from .lighting import Light
from .triangulator import Triangle
from .vector import ZERO, clamp, component_multiply

logger = structlog.get_logger()


def illuminance(triangle: Triangle, light: Light) -> float:
    """Signed cosine of the angle between the face normal and the light."""
    return float(np.dot(triangle.normal, light.ray_to(triangle.centroid)))


def shade_triangle(triangle: Triangle, lights: Sequence[Light],
                   mesh_ambient, mesh_diffuse) -> Triangle:
    """
    Compute one triangle's color.

    Degenerate triangles have no normal and stay black.

    Returns:
        A new Triangle carrying the clamped color
    """
    color = ZERO.copy()
    if lights and not triangle.is_degenerate:
        n_lights = len(lights)
        for light in lights:
            ambient = component_multiply(mesh_ambient, light.ambient)
            diffuse = component_multiply(mesh_diffuse, light.diffuse)
            color = color + ambient / n_lights + diffuse * illuminance(triangle, light) / n_lights

    color = clamp(color, 0.0, 1.0)
    color.flags.writeable = False
    return dataclasses.replace(triangle, color=color)


def shade(triangles: Sequence[Triangle], lights: Sequence[Light],
          mesh_ambient, mesh_diffuse) -> List[Triangle]:
    """
    Shade every triangle against every light.

    Args:
        triangles: Unshaded triangles
        lights: Lights placed for this mesh
        mesh_ambient: Ambient base color shared by the whole mesh
        mesh_diffuse: Diffuse base color shared by the whole mesh

    Returns:
        New list of shaded triangles in the same order
    """
    logger.info("Shading triangles", triangles=len(triangles), lights=len(lights))
    return [shade_triangle(t, lights, mesh_ambient, mesh_diffuse) for t in triangles]
