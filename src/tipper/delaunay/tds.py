'''
Created on Oct 19, 2026
'''
# ------------------------------------------------------------------------------
# Records of the triangulation: points, edges, oriented edges, elements
#

# index used for 'no edge' / 'no element'
NIL = -1


class Point(object):
    """A point to triangulate.

    The id is the position of the point in the sequence the caller gave,
    so that results (which use positions in the sorted array) can be mapped
    back.
    """
    __slots__ = ('x', 'y', 'id')

    def __init__(self, x, y, id=NIL):
        self.x = x
        self.y = y
        self.id = id

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def __repr__(self):
        return "Point({0!r}, {1!r}, {2!r})".format(self.x, self.y, self.id)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __len__(self):
        return 2

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return self.x == other.x and self.y == other.y and self.id == other.id

    def __hash__(self):
        return hash((self.x, self.y, self.id))


class Edge(object):
    """A directed edge, with the four edges it shares a triangle with.

    ::

                 dest
        left_dest /|\\ right_dest
                 / | \\
                 \\ | /
        left_orig \\|/ right_orig
                 orig

    The triangle left of orig->dest is bounded by this edge, left_orig and
    left_dest; the one on the right by right_orig and right_dest.
    A NIL neighbour on the right marks an edge of the convex hull.
    """
    __slots__ = ('orig', 'dest',
                 'left_orig', 'left_dest', 'right_orig', 'right_dest')

    def __init__(self, orig=NIL, dest=NIL):
        self.orig = orig
        self.dest = dest
        self.left_orig = NIL
        self.left_dest = NIL
        self.right_orig = NIL
        self.right_dest = NIL

    def __repr__(self):
        return "Edge({0}->{1} | l: {2} {3} | r: {4} {5})".format(
            self.orig, self.dest,
            self.left_orig, self.left_dest,
            self.right_orig, self.right_dest)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return False
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def as_tuple(self):
        return (self.orig, self.dest,
                self.left_orig, self.left_dest,
                self.right_orig, self.right_dest)

    def other(self, vertex):
        """Endpoint of the edge that is not *vertex*"""
        if self.orig == vertex:
            return self.dest
        return self.orig

    @property
    def is_set(self):
        return self.orig != NIL

    @property
    def is_hull(self):
        """Edge lies on the convex hull (nothing on its right)"""
        return self.right_orig == NIL and self.right_dest == NIL

    @property
    def is_swappable(self):
        return NIL not in (self.left_orig, self.left_dest,
                           self.right_orig, self.right_dest)


class OrientedEdge(object):
    """An oriented edge is an index in the edge table and a flag that tells
    whether the edge is followed from orig to dest (True) or the other way.

    The vertex the oriented edge leaves is its origin.
    """
    __slots__ = ('edge', 'orientation')

    def __init__(self, edge, orientation=True):
        self.edge = edge
        self.orientation = orientation

    def __eq__(self, other):
        if not isinstance(other, OrientedEdge):
            return False
        return self.edge == other.edge and \
            self.orientation == other.orientation

    def __hash__(self):
        return hash((self.edge, self.orientation))

    def __repr__(self):
        return "OrientedEdge({0}, {1})".format(self.edge, self.orientation)

    def origin(self, edges):
        e = edges[self.edge]
        return e.orig if self.orientation else e.dest

    def destination(self, edges):
        e = edges[self.edge]
        return e.dest if self.orientation else e.orig

    def _leaving(self, idx, vertex, edges):
        if idx == NIL:
            return None
        return OrientedEdge(idx, edges[idx].orig == vertex)

    def next_ccw_around_from(self, edges):
        """Next edge counterclockwise around the origin (None at the hull)"""
        e = edges[self.edge]
        if self.orientation:
            return self._leaving(e.left_orig, e.orig, edges)
        else:
            return self._leaving(e.right_dest, e.dest, edges)

    def next_cw_around_from(self, edges):
        """Next edge clockwise around the origin (None at the hull)"""
        e = edges[self.edge]
        if self.orientation:
            return self._leaving(e.right_orig, e.orig, edges)
        else:
            return self._leaving(e.left_dest, e.dest, edges)

    def lnext(self, edges):
        """Next edge counterclockwise around the face left of this oriented
        edge, leaving its destination (None if the left face is outside the
        hull)
        """
        e = edges[self.edge]
        if self.orientation:
            return self._leaving(e.left_dest, e.dest, edges)
        else:
            return self._leaving(e.right_orig, e.orig, edges)


class Element(object):
    """Triangle of the finished triangulation.

    Vertices are ccw; edges[k] and neighbours[k] are opposite of
    vertices[k]. orientations[k] tells whether edges[k] runs from its orig
    to its dest when going ccw around this triangle.
    """

    __slots__ = ('vertices', 'edges', 'orientations', 'neighbours')

    def __init__(self, vertices, edges, orientations):
        self.vertices = tuple(vertices)
        self.edges = tuple(edges)
        self.orientations = tuple(orientations)
        self.neighbours = [NIL] * 3

    def __repr__(self):
        return "Element({0}, {1}, {2}, {3})".format(
            self.vertices, self.edges, self.orientations, self.neighbours)

    def __eq__(self, other):
        if not isinstance(other, Element):
            return False
        return self.vertices == other.vertices and \
            self.edges == other.edges and \
            self.orientations == other.orientations and \
            list(self.neighbours) == list(other.neighbours)

    def __hash__(self):
        return hash((self.vertices, self.edges, self.orientations))

    def side_of(self, edge):
        """Index (0, 1 or 2) of *edge* in this element"""
        return self.edges.index(edge)

    @property
    def is_boundary(self):
        return NIL in self.neighbours


class Triangulation(object):
    """Triangulation data structure"""

    def __init__(self, vertices):
        # points, sorted on x
        self.vertices = vertices
        self.edges = []
        self.elements = None
        self.flips = 0

    def new2old(self):
        """Translation from position in the sorted vertices to position
        in the input"""
        return dict((new_pos, v.id) for new_pos, v in enumerate(self.vertices))

    def old2new(self):
        return dict((v.id, new_pos) for new_pos, v in enumerate(self.vertices))

    def segment(self, idx):
        """Coordinates of the end points of an edge"""
        e = self.edges[idx]
        a, b = self.vertices[e.orig], self.vertices[e.dest]
        return (a.x, a.y), (b.x, b.y)
