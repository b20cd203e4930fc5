"""
Shared helpers.
"""

from .random import create_prng, new_seed

__all__ = ['create_prng', 'new_seed']
