'''
Created on Oct 19, 2026
'''
from tipper.delaunay.errors import PreconditionError


def output_vertices(V, fh):
    """Output list of vertices as WKT to text file (for QGIS)"""
    fh.write("id;wkt;orig_id\n")
    for idx, v in enumerate(V):
        fh.write("{0};POINT({1});{2}\n".format(idx, v, v.id))


def output_edges(V, E, fh):
    """Output edge table as WKT to text file (for QGIS)"""
    fh.write("id;wkt;orig;dest;left_orig;left_dest;right_orig;right_dest\n")
    for idx, e in enumerate(E):
        fh.write("{0};LINESTRING({1}, {2});"
                 "{3[0]};{3[1]};{3[2]};{3[3]};{3[4]};{3[5]}\n".format(
                     idx, V[e.orig], V[e.dest], e.as_tuple()))


def output_elements(V, T, fh):
    """Output list of elements (triangles) as WKT to text file (for QGIS)"""
    fh.write("id;wkt;n0;n1;n2;v0;v1;v2;e0;e1;e2;o0;o1;o2\n")
    for idx, t in enumerate(T):
        ring = [str(V[v]) for v in t.vertices]
        ring.append(ring[0])
        fh.write("{0};POLYGON(({1}));"
                 "{2[0]};{2[1]};{2[2]};"
                 "{3[0]};{3[1]};{3[2]};"
                 "{4[0]};{4[1]};{4[2]};"
                 "{5[0]};{5[1]};{5[2]}\n".format(
                    idx, ", ".join(ring),
                    t.neighbours, t.vertices, t.edges, t.orientations))


def write_segments(V, E, fh):
    """Output edges as plain text, every edge on two lines:
    its start and its end point (x y)"""
    for e in E:
        fh.write("{0}\n{1}\n".format(V[e.orig], V[e.dest]))


def read_points(fh):
    """Read points (x y per line) from a text file.

    Empty lines and lines starting with # are skipped.
    """
    points = []
    for lineno, line in enumerate(fh, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        try:
            x, y = float(parts[0]), float(parts[1])
        except (IndexError, ValueError) as err:
            raise PreconditionError(
                "line {}: expected x y, got {!r}".format(lineno, line)) \
                from err
        points.append((x, y))
    return points
