'''
Created on Oct 19, 2026
'''
from tipper.delaunay.tds import NIL, Element, OrientedEdge
from tipper.delaunay.errors import TopologyError

# ------------------------------------------------------------------------------
# Connectivity tables, derived from a finished edge table
#


def _face_is_open(edge, orientation):
    """Tells whether the side of *edge* is outside the hull, raises if
    the side is only half linked"""
    if orientation:
        pair = (edge.left_orig, edge.left_dest)
    else:
        pair = (edge.right_orig, edge.right_dest)
    if pair[0] == NIL and pair[1] == NIL:
        return True
    if pair[0] == NIL or pair[1] == NIL:
        raise TopologyError("edge {!r} is half linked".format(edge))
    return False


def build_elements(points, edges):
    """Builds the triangles (elements) of a triangulation given as edge
    table.

    For every side of every edge the triangle there is found by walking
    ccw around it. A side that does not close into a triangle means the
    edge table is malformed, for which a TopologyError is raised.

    Returns a list of Element objects.
    """
    # (element, side) found per edge, for its left [0] and right [1] side
    owner = [[None, None] for _ in edges]
    elements = []
    npoints = len(points)
    for idx, edge in enumerate(edges):
        if not (0 <= edge.orig < npoints and 0 <= edge.dest < npoints):
            raise TopologyError("edge {} has no valid end points".format(idx))
        for orientation in (True, False):
            if owner[idx][0 if orientation else 1] is not None:
                continue
            if _face_is_open(edge, orientation):
                continue
            start = OrientedEdge(idx, orientation)
            ring = [start]
            for _ in range(2):
                step = ring[-1].lnext(edges)
                if step is None:
                    raise TopologyError(
                        "edge {} can not be closed into a triangle".format(
                            idx))
                ring.append(step)
            if ring[-1].lnext(edges) != start:
                raise TopologyError(
                    "edge {} can not be closed into a triangle".format(idx))
            vertices = [oe.origin(edges) for oe in ring]
            if len(set(vertices)) != 3:
                raise TopologyError(
                    "edge {} bounds a triangle with vertices {}".format(
                        idx, vertices))
            # edge k opposite vertex k
            sides = (ring[1], ring[2], ring[0])
            elem = Element(vertices,
                           [oe.edge for oe in sides],
                           [oe.orientation for oe in sides])
            key = len(elements)
            for side, oe in enumerate(sides):
                slot = 0 if oe.orientation else 1
                if owner[oe.edge][slot] is not None:
                    raise TopologyError(
                        "edge {} is used twice on the same side".format(
                            oe.edge))
                owner[oe.edge][slot] = (key, side)
            elements.append(elem)
    # link neighbouring elements over their common edge
    for idx, (left, right) in enumerate(owner):
        if left is None:
            raise TopologyError(
                "edge {} has no triangle on its left".format(idx))
        if right is None:
            continue
        elements[left[0]].neighbours[left[1]] = right[0]
        elements[right[0]].neighbours[right[1]] = left[0]
    return elements


def build_spokes(npoints, edges):
    """Gives for every vertex an oriented edge that leaves it.

    For a vertex on the hull this is the hull edge leaving it, so that going
    ccw around the vertex from this spoke visits all its edges before the
    hull is reached.
    """
    spokes = [None] * npoints
    for idx, edge in enumerate(edges):
        if spokes[edge.orig] is None:
            spokes[edge.orig] = OrientedEdge(idx, True)
        if spokes[edge.dest] is None:
            spokes[edge.dest] = OrientedEdge(idx, False)
    for idx, edge in enumerate(edges):
        if edge.is_hull:
            spokes[edge.orig] = OrientedEdge(idx, True)
    for vertex, spoke in enumerate(spokes):
        if spoke is None:
            raise TopologyError("vertex {} has no edges".format(vertex))
    return spokes
