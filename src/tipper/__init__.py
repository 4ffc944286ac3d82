"""Tipper - Delaunay Triangulation of planar point sets by convex hull growth
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'

from tipper.delaunay import triangulate, build_elements

__all__ = ["triangulate", "build_elements"]
