"""Tipper - Delaunay triangulation of planar point sets by convex hull growth
"""

from tipper.delaunay.insert_hull import triangulate, HullInserter, \
    check_consistency
from tipper.delaunay.elements import build_elements, build_spokes
from tipper.delaunay.iter import StarEdgeIterator, ConvexHullEdgeIterator
from tipper.delaunay.tds import NIL, Point, Edge, OrientedEdge, Element, \
    Triangulation
from tipper.delaunay.errors import TriangulationError, PreconditionError, \
    CapacityError, StaleSlotError, TopologyError, VisibilityError


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__all__ = ("triangulate", "build_elements", "build_spokes",
           "check_consistency", "HullInserter",
           "StarEdgeIterator", "ConvexHullEdgeIterator",
           "NIL", "Point", "Edge", "OrientedEdge", "Element", "Triangulation",
           "TriangulationError", "PreconditionError", "CapacityError",
           "StaleSlotError", "TopologyError", "VisibilityError")
