"""Small 3-component vector helpers used by triangulation and shading."""

import numpy as np
from typing import Sequence, Union

Vec3Like = Union[Sequence[float], np.ndarray]

ZERO = np.zeros(3)


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Build a float64 3-vector."""
    return np.array([x, y, z], dtype=np.float64)


def component_multiply(a: Vec3Like, b: Vec3Like) -> np.ndarray:
    """Multiply two vectors channel by channel."""
    return np.asarray(a, dtype=np.float64) * np.asarray(b, dtype=np.float64)


def clamp(v: Vec3Like, min_val: float = 0.0, max_val: float = 1.0) -> np.ndarray:
    """Clamp every channel independently to [min_val, max_val]."""
    return np.clip(np.asarray(v, dtype=np.float64), min_val, max_val)


def normalize(v: Vec3Like) -> np.ndarray:
    """
    Scale a vector to unit length.

    A zero-length vector has no direction; it is returned as the zero vector
    rather than NaN so that callers can detect it with ``is_zero``.
    """
    v = np.asarray(v, dtype=np.float64)
    length = np.linalg.norm(v)
    if length == 0.0 or not np.isfinite(length):
        return ZERO.copy()
    return v / length


def is_zero(v: Vec3Like) -> bool:
    """True if every component is exactly zero."""
    return not np.any(np.asarray(v))
