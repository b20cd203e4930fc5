"""
Core mesh generation and lighting.
"""

from .alea_prng import AleaPRNG, RandomSource
from .grid import generate_grid, grid_variation, GRID_COLUMNS, GRID_ROWS
from .triangulator import Triangle, build_triangle, triangulate
from .lighting import Light, place_lights
from .shading import shade, shade_triangle
from .mesh import Mesh, MeshConfig, generate_mesh

__all__ = ['AleaPRNG', 'RandomSource', 'generate_grid', 'grid_variation',
           'GRID_COLUMNS', 'GRID_ROWS', 'Triangle', 'build_triangle', 'triangulate',
           'Light', 'place_lights', 'shade', 'shade_triangle',
           'Mesh', 'MeshConfig', 'generate_mesh']
