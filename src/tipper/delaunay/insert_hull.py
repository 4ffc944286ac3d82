'''
Created on Oct 19, 2026
'''

import logging
import time
from datetime import datetime
from operator import attrgetter

from tipper.delaunay.tds import NIL, Point, Edge, Triangulation
from tipper.delaunay.preds import visible, illegal, orient2d
from tipper.delaunay.hull import CyclicList
from tipper.delaunay.elements import build_elements
from tipper.delaunay.errors import CapacityError, PreconditionError, \
    TopologyError, VisibilityError


def decorate(points):
    """Makes a Point for every item in points
    (every item is dealt with as 2-tuple)

    The Point carries the index of the item in the original *points* list
    as its id.
    """
    ret = []
    for idx, pt in enumerate(points):
        try:
            x, y = float(pt[0]), float(pt[1])
        except (TypeError, ValueError, IndexError) as err:
            raise PreconditionError(
                "point {} is not a pair of numbers: {!r}".format(idx, pt)) \
                from err
        ret.append(Point(x, y, idx))
    return ret


def xsort(points):
    """Sorts points on x, ties on y and then on original index, so that the
    order is always the same for the same input
    """
    return sorted(points, key=attrgetter('x', 'y', 'id'))


class HullInserter(object):
    """Class to triangulate a set of points, sorted on x, by growing their
    convex hull (Tipper's algorithm).

    Every new point lies outside the hull of the points before it; it is
    connected to all hull edges it can see. The hull edges that get covered
    are checked for the Delaunay criterion and swapped if they fail it,
    after which the edges around a swapped edge are checked as well.

    Tipper, J.C., 1991. FORTRAN programs to construct the planar Voronoi
    diagram. Computers & Geosciences 17 (5), 597-632.
    """

    __slots__ = ('triangulation', 'points', 'edges', 'hull', 'queue',
                 'flips', 'next_edge', 'lower', 'upper', 'apex')

    def __init__(self, triangulation):
        self.triangulation = triangulation
        self.points = triangulation.vertices
        self.edges = triangulation.edges
        self.hull = None
        self.queue = []
        self.flips = 0
        self.next_edge = len(self.edges)
        # hull slots of the two hull edges that meet in the last point
        self.lower = None
        self.upper = None
        # last point of the initial triangles
        self.apex = None

    def insert(self):
        """Triangulate all points of the triangulation"""
        n = len(self.points)
        if n < 3:
            raise PreconditionError(
                "we cannot triangulate fewer than 3 points ({} given)".format(
                    n))
        first = self.initialize() + 1
        for i in range(first, n):
            self.append(i)
            if (i % 10000) == 0:
                logging.debug(" " + str(datetime.now()) + " " + str(i))
        self.finalize()

    def initialize(self):
        """Make the first triangles, ccw oriented. Their outline is the
        initial convex hull.

        Normally this is one triangle, of the first 3 points. When the
        first points lie on a line, all of them are connected to the first
        point off that line (a fan of triangles). Returns the index of that
        point (the apex).
        """
        points = self.points
        n = len(points)
        # a point adds at most 3 edges, the hull has at most n edges
        self.edges = [Edge() for _ in range(3 * n)]
        self.hull = CyclicList(n)
        self.next_edge = 0
        k = 2
        while k < n and orient2d(points[0], points[1], points[k]) == 0:
            k += 1
        if k == n:
            raise PreconditionError(
                "all {} points are collinear, there is no triangle".format(n))
        if k > 2:
            logging.debug("{} collinear points at the start".format(k))
        ccw = orient2d(points[0], points[1], points[k]) > 0
        if ccw:
            ring = list(range(k + 1))
            triangles = [(j, j + 1, k) for j in range(k - 1)]
        else:
            ring = [0, k] + list(range(k - 1, 0, -1))
            triangles = [(j + 1, j, k) for j in range(k - 1)]
        sides = list(zip(ring, ring[1:] + ring[:1]))
        # hull edges first, in ccw order, then the inner edges of the fan
        pairs = {}
        for a, b in sides:
            pairs[a, b] = pairs[b, a] = self.new_edge(a, b)
        for j in range(1, k - 1):
            pairs[j, k] = pairs[k, j] = idx = self.new_edge(j, k)
            self.queue.append(idx)
        for a, b, c in triangles:
            self.link(pairs, a, b, c)
        slots = [self.hull.add(pairs[side]) for side in sides]
        # upper lies one step further round the hull (in positive
        # direction) than lower
        if k == 2:
            # as Tipper has it: these meet in point 2 only for a ccw
            # triangle as given, else point 3 may have to rotate them
            into = 1
        elif ccw:
            into = k - 1
        else:
            into = 0
        self.lower = slots[into]
        self.upper = slots[(into + 1) % len(slots)]
        self.apex = k
        self.delaunay()
        return k

    def link(self, pairs, a, b, c):
        """Sets the neighbours of the 3 edges around ccw triangle (a, b, c),
        pairs maps the end points of an edge (both ways) to its index
        """
        edges = self.edges
        for u, v, w in ((a, b, c), (b, c, a), (c, a, b)):
            edge = edges[pairs[u, v]]
            if edge.orig == u:
                edge.left_orig = pairs[w, u]
                edge.left_dest = pairs[v, w]
            else:
                edge.right_orig = pairs[v, w]
                edge.right_dest = pairs[w, u]

    def new_edge(self, orig, dest):
        """Takes the next free edge of the edge table"""
        if self.next_edge >= len(self.edges):
            raise CapacityError(
                "edge table is full ({} edges)".format(len(self.edges)))
        idx = self.next_edge
        edge = self.edges[idx]
        edge.orig = orig
        edge.dest = dest
        self.next_edge += 1
        return idx

    def sees(self, pos, pt):
        """Is the hull edge at slot pos visible from pt"""
        edge = self.edges[self.hull.edge(pos)]
        return visible(self.points[edge.orig], self.points[edge.dest], pt)

    def append(self, i):
        """Adds point i to the triangulation.

        This method assumes that all points before i are triangulated,
        and that point i lies right of them (or at the same x).
        """
        edges = self.edges
        hull = self.hull
        pt = self.points[i]
        saved = NIL
        # first the edge between the new point and the point where
        # upper and lower hull edges meet
        if self.sees(self.upper, pt):
            h = hull.edge(self.upper)
            idx = self.new_edge(edges[h].orig, i)
            # the upper sweep makes the next edge
            edges[idx].left_orig = h
            edges[idx].left_dest = idx + 1
            saved = idx
        else:
            if not self.sees(self.lower, pt):
                if i != self.apex + 1:
                    raise VisibilityError(
                        "Can't see the hull from point {} ({})".format(
                            i, pt), pt)
                # bad initial choice of lower / upper, go round the hull
                self.lower = hull.next_pos(self.upper)
                self.upper = hull.next_pos(self.lower)
                if not self.sees(self.lower, pt):
                    raise VisibilityError(
                        "Can't see the hull from point {} ({})".format(
                            i, pt), pt)
            h = hull.edge(self.lower)
            idx = self.new_edge(i, edges[h].dest)
            # the lower sweep makes the next edge
            edges[idx].left_dest = h
            edges[idx].left_orig = idx + 1
        # -- upper sweep, going round the hull in positive direction
        first = True
        while self.sees(self.upper, pt):
            h = hull.edge(self.upper)
            idx = self.new_edge(i, edges[h].dest)
            if not first:
                # close right side of the edge made in the previous pass
                edges[idx - 1].right_orig = idx
                edges[idx - 1].right_dest = h
            first = False
            edges[h].right_orig = idx - 1
            edges[h].right_dest = idx
            edges[idx].left_dest = h
            edges[idx].left_orig = idx - 1
            self.queue.append(h)
            self.delaunay()
            self.upper = hull.delete_forward(self.upper)
            if self.upper is None:
                raise TopologyError(
                    "hull exhausted: point {} ({}) sees all of it".format(
                        i, pt))
        self.upper = hull.add_before(self.upper, self.next_edge - 1)
        # -- lower sweep, going round the hull in negative direction
        while self.sees(self.lower, pt):
            h = hull.edge(self.lower)
            if saved == NIL:
                # upper was not visible
                saved = self.next_edge - 1
            else:
                edges[saved].right_orig = h
                edges[saved].right_dest = self.next_edge
            idx = self.new_edge(edges[h].orig, i)
            edges[h].right_dest = saved
            edges[h].right_orig = idx
            edges[idx].left_orig = h
            edges[idx].left_dest = saved
            self.queue.append(h)
            self.delaunay()
            saved = idx
            self.lower = hull.delete_backward(self.lower)
            if self.lower is None:
                raise TopologyError(
                    "hull exhausted: point {} ({}) sees all of it".format(
                        i, pt))
        # if no lower edge was visible, saved is the edge made
        # at the start (from the upper side)
        self.lower = hull.add_after(self.lower, saved)

    def finalize(self):
        """Hand the edges that were made over to the triangulation"""
        self.edges = [edge for edge in self.edges if edge.orig != NIL]
        self.triangulation.edges = self.edges
        self.triangulation.flips = self.flips

    def delaunay(self):
        """Performs swap for the edges queued if the Delaunay criterion does
        not hold for them.

        If an edge was swapped, the 4 edges around the quadrilateral
        are queued for checking if these are Delaunay.
        """
        queue = self.queue
        while queue:
            idx = queue.pop()
            if self.swap(idx):
                edge = self.edges[idx]
                # left_orig is popped, thus checked, first
                queue.append(edge.right_dest)
                queue.append(edge.right_orig)
                queue.append(edge.left_dest)
                queue.append(edge.left_orig)

    def swap(self, idx):
        """Swaps edge idx for the other diagonal of the quadrilateral around
        it, if the edge is not Delaunay. Returns whether it was swapped.

        Edges on the hull (or not yet fully linked) are never swapped.

        Post-conditions after a swap:
        - edge idx runs from the apex left of it to the apex right of it
        - the 4 edges around the quadrilateral link to the correct edges
        """
        edges = self.edges
        edge = edges[idx]
        if not edge.is_swappable:
            return False
        orig, dest = edge.orig, edge.dest
        lo, ld = edge.left_orig, edge.left_dest
        ro, rd = edge.right_orig, edge.right_dest
        left = edges[lo].other(orig)
        right = edges[ro].other(orig)
        points = self.points
        if not illegal(points[orig], points[dest],
                       points[left], points[right]):
            return False
        self.flips += 1
        # the neighbours can point either way, so their side to relink
        # depends on whether they share orig / dest as their own orig / dest
        around = edges[ro]
        if around.orig == orig:
            around.left_orig = lo
            around.left_dest = idx
        else:
            around.right_orig = idx
            around.right_dest = lo
        around = edges[lo]
        if around.orig == orig:
            around.right_orig = ro
            around.right_dest = idx
        else:
            around.left_orig = idx
            around.left_dest = ro
        around = edges[rd]
        if around.dest == dest:
            around.left_orig = idx
            around.left_dest = ld
        else:
            around.right_orig = ld
            around.right_dest = idx
        around = edges[ld]
        if around.dest == dest:
            around.right_orig = idx
            around.right_dest = rd
        else:
            around.left_orig = rd
            around.left_dest = idx
        # the edge itself: rotated ccw
        edge.orig = left
        edge.dest = right
        edge.left_orig = ld
        edge.left_dest = rd
        edge.right_orig = lo
        edge.right_dest = ro
        return True


def check_consistency(triangulation):
    """Checks that the edges of the triangulation link up properly,
    raises a TopologyError when they do not.

    - every edge has both end points
    - its neighbours exist and share the vertex they are attached at
    - the left side is closed (the hull is ccw, so only the right side of an
      edge can be outside), the right side is either closed or open as a
      whole
    - the two neighbours of a side meet in the same apex
    """
    edges = triangulation.edges
    nv = len(triangulation.vertices)
    ne = len(edges)
    for idx, edge in enumerate(edges):
        if not (0 <= edge.orig < nv and 0 <= edge.dest < nv) or \
                edge.orig == edge.dest:
            raise TopologyError(
                "edge {} has bad end points {}".format(idx, edge))
        for name, vertex in (('left_orig', edge.orig),
                             ('left_dest', edge.dest),
                             ('right_orig', edge.orig),
                             ('right_dest', edge.dest)):
            nb = getattr(edge, name)
            if nb == NIL:
                continue
            if not 0 <= nb < ne:
                raise TopologyError(
                    "edge {} has no valid {} neighbour ({})".format(
                        idx, name, nb))
            if vertex not in (edges[nb].orig, edges[nb].dest):
                raise TopologyError(
                    "edge {} and its {} neighbour {} do not share "
                    "vertex {}".format(idx, name, nb, vertex))
        if edge.left_orig == NIL or edge.left_dest == NIL:
            raise TopologyError("left side of edge {} is open".format(idx))
        if (edge.right_orig == NIL) != (edge.right_dest == NIL):
            raise TopologyError(
                "right side of edge {} is half open".format(idx))
        if edges[edge.left_orig].other(edge.orig) != \
                edges[edge.left_dest].other(edge.dest):
            raise TopologyError(
                "left side of edge {} is not a triangle".format(idx))
        if not edge.is_hull and \
                edges[edge.right_orig].other(edge.orig) != \
                edges[edge.right_dest].other(edge.dest):
            raise TopologyError(
                "right side of edge {} is not a triangle".format(idx))


def triangulate(points, elements=False):
    """Triangulate a set of points

    Returns the Triangulation, with its edges (and its elements, if
    *elements* is True). The vertices of the triangulation are the points
    sorted on x; their id is their index in *points*.
    """
    start = time.perf_counter()
    pts = xsort(decorate(points))
    end = time.perf_counter()
    logging.debug("Sorting points: " + str(end - start) + " secs")

    start = time.perf_counter()
    dt = Triangulation(pts)
    incremental = HullInserter(dt)
    incremental.insert()
    end = time.perf_counter()
    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} vertices".format(len(dt.vertices)))
    logging.debug("{} edges".format(len(dt.edges)))
    logging.debug("{} flips".format(incremental.flips))
    logging.debug(str(float(incremental.flips) /
                      len(dt.vertices)) + " flips per insert")

    check_consistency(dt)

    if elements:
        start = time.perf_counter()
        dt.elements = build_elements(dt.vertices, dt.edges)
        end = time.perf_counter()
        logging.debug("Building elements took: " + str(end - start) +
                      " secs")
        logging.debug("{} elements".format(len(dt.elements)))
    return dt
