import io
import os
import shutil
import tempfile
import unittest

from tipper import triangulate
from tipper.delaunay.inout import output_vertices, output_edges, \
    output_elements, write_segments, read_points
from tipper.delaunay.errors import PreconditionError
from tipper.delaunay.__main__ import main


class TestOutput(unittest.TestCase):

    def setUp(self):
        self.dt = triangulate([(0, 0), (1, 0), (0, 1)], elements=True)

    def test_segments(self):
        fh = io.StringIO()
        write_segments(self.dt.vertices, self.dt.edges, fh)
        self.assertEqual(fh.getvalue(),
                         "0.0 0.0\n1.0 0.0\n"
                         "1.0 0.0\n0.0 1.0\n"
                         "0.0 1.0\n0.0 0.0\n")

    def test_vertices(self):
        fh = io.StringIO()
        output_vertices(self.dt.vertices, fh)
        self.assertEqual(fh.getvalue().splitlines(),
                         ["id;wkt;orig_id",
                          "0;POINT(0.0 0.0);0",
                          "1;POINT(0.0 1.0);2",
                          "2;POINT(1.0 0.0);1"])

    def test_edges(self):
        fh = io.StringIO()
        output_edges(self.dt.vertices, self.dt.edges, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[1],
                         "0;LINESTRING(0.0 0.0, 1.0 0.0);0;2;2;1;-1;-1")

    def test_elements(self):
        fh = io.StringIO()
        output_elements(self.dt.vertices, self.dt.elements, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[1],
                         "0;POLYGON((0.0 0.0, 1.0 0.0, 0.0 1.0, 0.0 0.0));"
                         "-1;-1;-1;0;2;1;1;2;0;True;True;True")


class TestReadPoints(unittest.TestCase):

    def test_read(self):
        fh = io.StringIO("# x y\n\n1 2\n3.5, 4\n  -1e-3\t5  \n")
        self.assertEqual(read_points(fh),
                         [(1., 2.), (3.5, 4.), (-0.001, 5.)])

    def test_bad_line(self):
        with self.assertRaises(PreconditionError):
            read_points(io.StringIO("1 2\n3\n"))
        with self.assertRaises(PreconditionError):
            read_points(io.StringIO("1 y\n"))


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_writes_segments(self):
        filename = os.path.join(self.tmpdir, "triggy")
        self.assertEqual(main(["4", filename, "1"]), 0)
        with open(filename) as fh:
            lines = fh.read().splitlines()
        # 16 points, at most 12 on the hull: 3n - 3 - h >= 33 edges
        self.assertEqual(len(lines) % 2, 0)
        self.assertGreaterEqual(len(lines), 2 * 33)


if __name__ == "__main__":
    unittest.main()
