"""Triangulates a perturbed grid and writes its edges, two lines per edge.

Usage: python -m tipper.delaunay [n [outfile [seed]]]
"""
import logging
import sys
from random import Random

from tipper.delaunay.insert_hull import triangulate
from tipper.delaunay.helpers import perturbed_grid_vertices
from tipper.delaunay.inout import write_segments


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    logging.basicConfig(level=logging.DEBUG)
    n = int(args[0]) if len(args) > 0 else 100
    filename = args[1] if len(args) > 1 else "triggy"
    seed = int(args[2]) if len(args) > 2 else 0
    pts = perturbed_grid_vertices(n, Random(seed))
    dt = triangulate(pts)
    with open(filename, "w") as fh:
        write_segments(dt.vertices, dt.edges, fh)
    logging.debug("npoint={} nedge={}".format(len(dt.vertices),
                                              len(dt.edges)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
