import unittest

from tipper import triangulate
from tipper.delaunay.tds import NIL
from tipper.delaunay.preds import orient2d
from tipper.delaunay.elements import build_elements, build_spokes
from tipper.delaunay.iter import StarEdgeIterator, ConvexHullEdgeIterator
from tipper.delaunay.errors import TopologyError


def rotated_grid():
    return [(i - j, i + j) for i in range(3) for j in range(3)]


class TestElements(unittest.TestCase):

    def setUp(self):
        self.dt = triangulate(rotated_grid(), elements=True)

    def test_neighbours_are_mutual(self):
        dt = self.dt
        outside = 0
        for key, elem in enumerate(dt.elements):
            for side, nb in enumerate(elem.neighbours):
                if nb == NIL:
                    outside += 1
                    self.assertTrue(dt.edges[elem.edges[side]].is_hull)
                    continue
                other = dt.elements[nb]
                self.assertIn(key, other.neighbours)
                # they share the edge opposite the sides
                shared = elem.edges[side]
                self.assertEqual(other.neighbours[other.side_of(shared)],
                                 key)
        self.assertEqual(outside, 8)

    def test_edges_opposite_vertices(self):
        dt = self.dt
        for elem in dt.elements:
            for k in range(3):
                edge = dt.edges[elem.edges[k]]
                start = elem.vertices[(k + 1) % 3]
                end = elem.vertices[(k + 2) % 3]
                if elem.orientations[k]:
                    self.assertEqual((edge.orig, edge.dest), (start, end))
                else:
                    self.assertEqual((edge.dest, edge.orig), (start, end))
            self.assertEqual(elem.side_of(elem.edges[1]), 1)

    def test_every_edge_side_used_once(self):
        dt = self.dt
        seen = set()
        for elem in dt.elements:
            for edge, orientation in zip(elem.edges, elem.orientations):
                self.assertNotIn((edge, orientation), seen)
                seen.add((edge, orientation))
        interior = len([e for e in dt.edges if not e.is_hull])
        self.assertEqual(len(seen), len(dt.edges) + interior)

    def test_half_linked_edge(self):
        dt = self.dt
        idx = [i for i, e in enumerate(dt.edges) if not e.is_hull][0]
        dt.edges[idx].right_orig = NIL
        with self.assertRaises(TopologyError):
            build_elements(dt.vertices, dt.edges)

    def test_bad_end_point(self):
        dt = self.dt
        dt.edges[0].orig = len(dt.vertices)
        with self.assertRaises(TopologyError):
            build_elements(dt.vertices, dt.edges)


class TestSpokes(unittest.TestCase):

    def setUp(self):
        self.dt = triangulate(rotated_grid())

    def test_hull_vertex_gets_hull_edge(self):
        dt = self.dt
        spokes = build_spokes(len(dt.vertices), dt.edges)
        for vertex, spoke in enumerate(spokes):
            self.assertEqual(spoke.origin(dt.edges), vertex)
            if vertex != 4:
                self.assertTrue(dt.edges[spoke.edge].is_hull)
                self.assertTrue(spoke.orientation)

    def test_lonely_vertex(self):
        dt = self.dt
        with self.assertRaises(TopologyError):
            build_spokes(len(dt.vertices) + 1, dt.edges)


class TestStarEdgeIterator(unittest.TestCase):

    def setUp(self):
        self.dt = triangulate(rotated_grid())

    def test_interior_vertex(self):
        dt = self.dt
        # vertex 4 is (0, 2), the only one not on the hull
        self.assertEqual((dt.vertices[4].x, dt.vertices[4].y), (0., 2.))
        star = list(StarEdgeIterator(dt, 4))
        self.assertEqual(len(star), 6)
        ends = [oe.destination(dt.edges) for oe in star]
        self.assertEqual(set(ends), set([1, 2, 3, 5, 6, 7]))
        for oe in star:
            self.assertEqual(oe.origin(dt.edges), 4)
        center = dt.vertices[4]
        for k in range(6):
            a = dt.vertices[ends[k]]
            b = dt.vertices[ends[(k + 1) % 6]]
            self.assertGreater(orient2d(center, a, b), 0)

    def test_hull_vertex(self):
        dt = self.dt
        star = list(StarEdgeIterator(dt, 0))
        self.assertEqual([oe.destination(dt.edges) for oe in star], [1, 2])
        self.assertTrue(star[0].orientation)
        self.assertFalse(star[1].orientation)

    def test_clockwise_goes_back(self):
        dt = self.dt
        star = list(StarEdgeIterator(dt, 4))
        for k in range(6):
            self.assertEqual(star[(k + 1) % 6].next_cw_around_from(dt.edges),
                             star[k])


class TestConvexHullEdgeIterator(unittest.TestCase):

    def setUp(self):
        self.dt = triangulate(rotated_grid())

    def test_ccw_cycle(self):
        dt = self.dt
        hull = list(ConvexHullEdgeIterator(dt))
        origins = [dt.edges[idx].orig for idx in hull]
        self.assertEqual(origins, [0, 1, 3, 6, 8, 7, 5, 2])
        for k, idx in enumerate(hull):
            nxt = hull[(k + 1) % len(hull)]
            self.assertEqual(dt.edges[idx].dest, dt.edges[nxt].orig)

    def test_two_hull_edges_leaving(self):
        dt = self.dt
        # make the edge between (0, 0) and (0, 2) look like hull
        for edge in dt.edges:
            if not edge.is_hull and \
                    set([edge.orig, edge.dest]) == set([3, 4]):
                edge.right_orig = NIL
                edge.right_dest = NIL
        with self.assertRaises(TopologyError):
            list(ConvexHullEdgeIterator(dt))


class TestPackageNames(unittest.TestCase):

    def test_iterators_from_package(self):
        from tipper import delaunay
        self.assertIs(delaunay.StarEdgeIterator, StarEdgeIterator)
        self.assertIs(delaunay.ConvexHullEdgeIterator, ConvexHullEdgeIterator)
        self.assertIn("StarEdgeIterator", delaunay.__all__)
        self.assertIn("ConvexHullEdgeIterator", delaunay.__all__)


if __name__ == "__main__":
    unittest.main()
