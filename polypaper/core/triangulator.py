"""Split the vertex lattice into flat-shaded triangles."""

import numpy as np
import structlog
from dataclasses import dataclass, field
from typing import List, Tuple

from .grid import GRID_COLUMNS, GRID_ROWS
from .vector import ZERO, normalize, is_zero

logger = structlog.get_logger()


def _frozen(v) -> np.ndarray:
    arr = np.array(v, dtype=np.float64)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Triangle:
    """One face of the mesh.

    Vertices are held by value; centroid and normal are derived at build
    time and color is filled in by shading.
    """
    vertices: Tuple[np.ndarray, np.ndarray, np.ndarray]
    centroid: np.ndarray
    normal: np.ndarray
    color: np.ndarray = field(default_factory=lambda: _frozen(ZERO))

    @property
    def is_degenerate(self) -> bool:
        """True when the vertices are collinear and no normal exists."""
        return is_zero(self.normal)

    def projected(self) -> np.ndarray:
        """(3, 2) screen-space positions; z only matters for lighting."""
        return np.array([v[:2] for v in self.vertices])


def compute_centroid(v0, v1, v2, legacy: bool = False) -> np.ndarray:
    """
    Average the three vertices per axis.

    With ``legacy`` set, the y axis uses ``(v0.y + v1.y + v2.z) / 3``, the
    skewed formula older wallpapers were rendered with: only the third
    vertex contributes its z instead of its y. Only light direction
    is affected, not where the triangle is drawn.
    """
    centroid = (np.asarray(v0) + np.asarray(v1) + np.asarray(v2)) / 3.0
    if legacy:
        centroid[1] = (v0[1] + v1[1] + v2[2]) / 3.0
    return centroid


def build_triangle(v0, v1, v2, legacy_centroid: bool = False) -> Triangle:
    """Create a black triangle with its centroid and unit normal."""
    v0, v1, v2 = _frozen(v0), _frozen(v1), _frozen(v2)
    normal = normalize(np.cross(v1 - v0, v2 - v0))
    return Triangle(
        vertices=(v0, v1, v2),
        centroid=_frozen(compute_centroid(v0, v1, v2, legacy_centroid)),
        normal=_frozen(normal),
    )


def quad_indices() -> List[Tuple[int, int, int]]:
    """
    Vertex index triples for every triangle, in render order.

    Each lattice quad anchored at ``a`` is split along the same diagonal into
    ``(a, a+1, a+19)`` and ``(a+1, a+19, a+20)``.
    """
    triples = []
    for j in range(0, GRID_COLUMNS * (GRID_ROWS - 1), GRID_COLUMNS):
        for i in range(GRID_COLUMNS - 1):
            a = j + i
            triples.append((a, a + 1, a + GRID_COLUMNS))
            triples.append((a + 1, a + GRID_COLUMNS, a + GRID_COLUMNS + 1))
    return triples


def triangulate(vertices: np.ndarray, legacy_centroid: bool = False) -> List[Triangle]:
    """
    Triangulate a lattice produced by ``generate_grid``.

    Args:
        vertices: (209, 3) vertex array
        legacy_centroid: Use the skewed centroid formula

    Returns:
        List of 360 unshaded triangles
    """
    vertices = np.asarray(vertices)
    expected = (GRID_COLUMNS * GRID_ROWS, 3)
    if vertices.shape != expected:
        raise ValueError(f"Expected vertex array of shape {expected}, got {vertices.shape}")

    logger.info("Generating triangles")

    triangles = [
        build_triangle(vertices[a], vertices[b], vertices[c], legacy_centroid)
        for a, b, c in quad_indices()
    ]

    degenerate = sum(1 for t in triangles if t.is_degenerate)
    if degenerate:
        logger.warning("Degenerate triangles found", count=degenerate)

    return triangles
