"""Tests for complete mesh generation."""

import random

import numpy as np
import pytest

from conftest import ConstantRandom
from polypaper.core.alea_prng import AleaPRNG
from polypaper.core.mesh import MeshConfig, generate_mesh


FUZZ_SEEDS = [f"fuzz_{i}" for i in range(20)]


class TestMeshConfig:
    """Test per-generation config validation."""

    def test_defaults(self):
        config = MeshConfig()
        assert config.light_count == 2
        assert config.z_offset == 100.0
        assert config.legacy_centroid is False

    def test_rejects_zero_lights(self):
        with pytest.raises(ValueError):
            MeshConfig(light_count=0)

    def test_rejects_non_positive_z_offset(self):
        with pytest.raises(ValueError):
            MeshConfig(z_offset=0)


class TestGenerateMesh:
    """Test the regeneration entry point."""

    def test_counts(self, prng, mesh_config):
        mesh = generate_mesh(1920, 1080, mesh_config, prng)
        assert len(mesh.vertices) == 209
        assert len(mesh) == 360

    @pytest.mark.parametrize("width,height", [(1920, 1080), (800, 600), (100, 1000)])
    def test_counts_any_viewport(self, width, height, prng, mesh_config):
        assert len(generate_mesh(width, height, mesh_config, prng)) == 360

    @pytest.mark.parametrize("seed", FUZZ_SEEDS)
    def test_colors_in_range(self, seed, mesh_config):
        mesh = generate_mesh(1920, 1080, mesh_config, AleaPRNG(seed))
        colors = np.array([t.color for t in mesh])
        assert np.all(colors >= 0.0)
        assert np.all(colors <= 1.0)

    @pytest.mark.parametrize("seed", FUZZ_SEEDS)
    def test_unit_normals(self, seed, mesh_config):
        mesh = generate_mesh(1920, 1080, mesh_config, AleaPRNG(seed))
        for tri in mesh:
            if not tri.is_degenerate:
                assert np.isclose(np.linalg.norm(tri.normal), 1.0)

    @pytest.mark.parametrize("fraction", [0.0, 0.25, 0.999999])
    def test_colors_in_range_extreme_draws(self, fraction, mesh_config):
        """Test clamping with constant random draws at range edges."""
        mesh = generate_mesh(1920, 1080, mesh_config, ConstantRandom(fraction))
        colors = mesh.rgba()[:, :3]
        assert np.all((colors >= 0.0) & (colors <= 1.0))

    def test_many_lights(self, prng):
        mesh = generate_mesh(1920, 1080, MeshConfig(light_count=7, z_offset=400), prng)
        colors = mesh.rgba()[:, :3]
        assert np.all((colors >= 0.0) & (colors <= 1.0))

    def test_midpoint_mesh(self, midpoint_rng, mesh_config):
        """Test the flat lattice: upper triangles lit, lower ones darker."""
        mesh = generate_mesh(1920, 1080, mesh_config, midpoint_rng)
        # Every draw is 0.5, so each light's ambient term is 0.25 / 2
        ambient_only = 0.25
        for i, tri in enumerate(mesh):
            if i % 2 == 0:
                assert tri.normal[2] > 0
                assert np.all(tri.color >= ambient_only)
            else:
                assert tri.normal[2] < 0
                assert np.all(tri.color <= ambient_only)

    def test_same_seed_same_mesh(self, mesh_config):
        a = generate_mesh(1920, 1080, mesh_config, AleaPRNG("same"))
        b = generate_mesh(1920, 1080, mesh_config, AleaPRNG("same"))
        np.testing.assert_array_equal(a.vertices, b.vertices)
        np.testing.assert_array_equal(a.rgba(), b.rgba())

    def test_regeneration_differs(self, prng, mesh_config):
        """Test that two calls on one source give different meshes of equal size."""
        first = generate_mesh(1920, 1080, mesh_config, prng)
        second = generate_mesh(1920, 1080, mesh_config, prng)
        assert len(first) == len(second) == 360
        assert not np.array_equal(first.vertices, second.vertices)
        assert not np.array_equal(first.rgba(), second.rgba())

    def test_regeneration_shares_nothing(self, prng, mesh_config):
        """Test that a new mesh holds no arrays of the previous one."""
        first = generate_mesh(1920, 1080, mesh_config, prng)
        second = generate_mesh(1920, 1080, mesh_config, prng)
        assert not np.shares_memory(first.vertices, second.vertices)
        for old, new in zip(first, second):
            assert old is not new
            assert not np.shares_memory(old.color, new.color)
            assert not np.shares_memory(old.vertices[0], new.vertices[0])

    def test_stdlib_random_source(self, mesh_config):
        mesh = generate_mesh(1920, 1080, mesh_config, random.Random(7))
        assert len(mesh) == 360

    def test_projected_and_rgba_views(self, prng, mesh_config):
        mesh = generate_mesh(1920, 1080, mesh_config, prng)
        assert mesh.projected().shape == (360, 3, 2)
        rgba = mesh.rgba()
        assert rgba.shape == (360, 4)
        assert np.all(rgba[:, 3] == 1.0)

    def test_mesh_colors_drawn_once(self, prng, mesh_config):
        mesh = generate_mesh(1920, 1080, mesh_config, prng)
        assert mesh.ambient.shape == (3,)
        assert mesh.diffuse.shape == (3,)

    def test_rejects_empty_viewport(self, prng, mesh_config):
        with pytest.raises(ValueError):
            generate_mesh(0, 1080, mesh_config, prng)
