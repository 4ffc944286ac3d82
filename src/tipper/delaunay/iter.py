'''
Created on Oct 19, 2026
'''

# ------------------------------------------------------------------------------
# Iterators
#
from tipper.delaunay.tds import NIL
from tipper.delaunay.elements import build_spokes
from tipper.delaunay.errors import TopologyError


class StarEdgeIterator(object):
    """Returns iterator over edges in the star of the vertex

    The edges are returned (as OrientedEdge, leaving the vertex) in
    counterclockwise order around the vertex, starting at the spoke of the
    vertex. For a vertex on the hull the iteration stops at the hull.

    Spokes can be given, when iterating around many vertices (see
    build_spokes).
    """

    def __init__(self, triangulation, vertex, spokes=None):
        self.edges = triangulation.edges
        if spokes is None:
            spokes = build_spokes(len(triangulation.vertices), self.edges)
        self.vertex = vertex
        self.start = spokes[vertex]
        self.current = None
        self.done = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.done:
            raise StopIteration()
        if self.current is None:
            self.current = self.start
        else:
            self.current = self.current.next_ccw_around_from(self.edges)
        if self.current is None:
            # we hit the hull
            self.done = True
            raise StopIteration()
        assert self.current.origin(self.edges) == self.vertex
        nxt = self.current.next_ccw_around_from(self.edges)
        if nxt is None or nxt == self.start:
            self.done = True
        return self.current


class ConvexHullEdgeIterator(object):
    """Iterator over the edges on the convex hull (the edges that have no
    triangle on their right), in counterclockwise order.

    The walk starts at the hull edge that leaves the first vertex on the
    hull (i.e. the point with smallest x).
    """

    def __init__(self, triangulation):
        edges = triangulation.edges
        self.edges = edges
        self.leaving = {}
        for idx, edge in enumerate(edges):
            if edge.right_orig == NIL:
                if edge.orig in self.leaving:
                    raise TopologyError(
                        "vertex {} has two hull edges leaving it".format(
                            edge.orig))
                self.leaving[edge.orig] = idx
        if not self.leaving:
            raise TopologyError("no hull edges found")
        self.first = self.leaving[min(self.leaving)]
        self.current = None
        self.count = 0
        self.done = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.done:
            raise StopIteration()
        if self.current is None:
            self.current = self.first
        else:
            dest = self.edges[self.current].dest
            if dest not in self.leaving:
                raise TopologyError(
                    "hull is not closed at vertex {}".format(dest))
            self.current = self.leaving[dest]
            if self.current == self.first:
                if self.count != len(self.leaving):
                    raise TopologyError(
                        "hull edges do not form a single cycle")
                self.done = True
                raise StopIteration()
        self.count += 1
        if self.count > len(self.leaving):
            raise TopologyError("hull edges do not form a single cycle")
        return self.current
