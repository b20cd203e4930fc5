"""
Seedable random source for mesh generation.

Uses Johannes Baagøe's Alea algorithm so that a seed string always reproduces
the same wallpaper, independent of the platform's ``random`` implementation.
Anything exposing ``random()`` and ``uniform(low, high)`` (including
``random.Random``) can stand in for it.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Uniform float source injected into every generation step."""

    def random(self) -> float:
        ...

    def uniform(self, low: float, high: float) -> float:
        ...


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


def _mash_factory():
    """Build Alea's stateful string hash."""
    n = 0xEFC8249D

    def mash(data):
        nonlocal n
        for char in str(data):
            n += ord(char)
            h = 0.02519603282416938 * n
            n = _uint32(h)
            h -= n
            h *= n
            n = _uint32(h)
            h -= n
            n += h * 0x100000000  # 2^32
        return _uint32(n) * 2.3283064365386963e-10  # 2^-32

    return mash


class AleaPRNG:
    """
    Alea generator with the uniform-range helpers mesh generation needs.

    Attributes:
        seed: Seed the generator was created from
        draws: Number of values produced so far
    """

    def __init__(self, seed):
        """Initialize with a seed string or number."""
        self.seed = str(seed)
        self.draws = 0

        mash = _mash_factory()
        self._s0 = mash(" ")
        self._s1 = mash(" ")
        self._s2 = mash(" ")
        self._c = 1

        self._s0 -= mash(self.seed)
        if self._s0 < 0:
            self._s0 += 1
        self._s1 -= mash(self.seed)
        if self._s1 < 0:
            self._s1 += 1
        self._s2 -= mash(self.seed)
        if self._s2 < 0:
            self._s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.draws += 1
        t = 2091639 * self._s0 + self._c * 2.3283064365386963e-10  # 2^-32
        self._s0 = self._s1
        self._s1 = self._s2
        self._c = int(t)
        self._s2 = t - self._c
        return self._s2

    def uniform(self, low: float, high: float) -> float:
        """Generate a float in [low, high)."""
        return low + (high - low) * self.random()

    def __repr__(self):
        return f"AleaPRNG(seed={self.seed!r}, draws={self.draws})"
