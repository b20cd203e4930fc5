"""
Polypaper: randomized low-poly wallpapers.
"""

__version__ = "0.1.0"
