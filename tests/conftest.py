"""Shared fixtures and deterministic random sources."""

import pytest

from polypaper.core.alea_prng import AleaPRNG
from polypaper.core.mesh import MeshConfig


class MidpointRandom:
    """Always returns the middle of the requested range."""

    def __init__(self):
        self.draws = 0

    def random(self):
        self.draws += 1
        return 0.5

    def uniform(self, low, high):
        self.draws += 1
        return (low + high) / 2


class ConstantRandom:
    """Always returns the same fraction of the requested range."""

    def __init__(self, fraction):
        self.fraction = fraction

    def random(self):
        return self.fraction

    def uniform(self, low, high):
        return low + (high - low) * self.fraction


@pytest.fixture
def midpoint_rng():
    return MidpointRandom()


@pytest.fixture
def prng():
    return AleaPRNG("polypaper_test")


@pytest.fixture
def mesh_config():
    return MeshConfig()
