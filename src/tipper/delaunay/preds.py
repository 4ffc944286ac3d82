'''
Created on Oct 19, 2026
'''
from math import fabs, sqrt

from geompreds import orient2d, incircle

# edges closer than this to vertical / horizontal are dealt with separately
MIN_DISTANCE = 1e-7


def visible(orig, dest, pt):
    """Tests whether the hull edge orig->dest is visible from pt

    Relies on the hull being ccw and on pt having an x larger than (or
    equal to) all points triangulated before. For near vertical edges the
    slope is useless, these are decided by the robust orientation test: a
    vertical edge going down (left side of the hull) is not visible, nor is
    one that pt is collinear with.

    Note that the tolerance is absolute, so does not scale with the
    coordinates.
    """
    if fabs(orig.x - dest.x) < MIN_DISTANCE:
        return orient2d(orig, dest, pt) < 0
    if fabs(dest.y - orig.y) < MIN_DISTANCE:
        if orig.x < dest.x and pt.y < orig.y:
            return True
        if orig.x > dest.x and pt.y > orig.y:
            return True
    if dest.y >= pt.y and orig.y <= pt.y and \
            fabs(orig.y - dest.y) > MIN_DISTANCE:
        return True
    if dest.x > orig.x:
        if pt.y < orig.y + (dest.y - orig.y) / (dest.x - orig.x) * \
                (pt.x - orig.x):
            return True
    elif dest.x < orig.x:
        if pt.y > orig.y + (dest.y - orig.y) / (dest.x - orig.x) * \
                (pt.x - orig.x):
            return True
    return False


def illegal(orig, dest, left, right):
    """Tests whether edge orig->dest, with apex left and right of it,
    should be swapped for edge left->right.

    The edge is illegal if the angles at left and right sum up to more
    than 180 degrees, i.e. if the sum of their cosines is negative.
    The square roots are only taken when one of the angles is obtuse.
    """
    ax, ay = left.x - orig.x, left.y - orig.y
    bx, by = left.x - dest.x, left.y - dest.y
    cx, cy = right.x - orig.x, right.y - orig.y
    dx, dy = right.x - dest.x, right.y - dest.y
    dt1 = ax * bx + ay * by
    dt2 = cx * dx + cy * dy
    if dt1 < 0 or dt2 < 0:
        len1 = sqrt((ax * ax + ay * ay) * (bx * bx + by * by))
        len2 = sqrt((cx * cx + cy * cy) * (dx * dx + dy * dy))
        # coincident points: no angle to compare
        if len1 == 0. or len2 == 0.:
            return False
        return dt1 / len1 + dt2 / len2 < 0
    return False

