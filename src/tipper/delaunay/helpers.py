'''
Created on Oct 19, 2026
'''
from math import sqrt, pi, cos, sin
from random import Random
# ------------------------------------------------------------------------------
# Generate randomized point sets (for testing purposes)
#
#     Randomness only comes from the generator passed in, so that a point
#     set can be reproduced from its seed.
#


def random_circle_vertices(n=10, cx=0, cy=0, rng=None):
    """Returns a list with n random vertices in a circle

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    if rng is None:
        rng = Random(0)
    vertices = []
    for _ in range(n):
        r = sqrt(rng.random())
        t = 2 * pi * rng.random()
        x = r * cos(t)
        y = r * sin(t)
        vertices.append((x+cx, y+cy))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices


def perturbed_grid_vertices(n=10, rng=None, amplitude=None):
    """Returns a list with the n*n vertices of a unit grid, each moved by
    a random amount in [0, amplitude) in x and y.

    The default amplitude is n*1e-3. Without perturbation many points share
    their x, which the hull growing does not cope with (vertical hull edges
    count as visible).
    """
    if rng is None:
        rng = Random(0)
    if amplitude is None:
        amplitude = n * 1.e-3
    vertices = []
    for j in range(n):
        for i in range(n):
            x = float(i) + rng.random() * amplitude
            y = float(j) + rng.random() * amplitude
            vertices.append((x, y))
    return vertices
