#!/usr/bin/env python
"""
Test suite for the point data readers.
"""

import tempfile
import unittest
from pathlib import Path

import meshio
import numpy as np

from meshraw.core.arrays import ArraySet, NamedArray
from meshraw.core.errors import InputAccessError, MissingArrayError, UnsupportedFormatError
from meshraw.core.validation import validate
from meshraw.mesh import (
    InputFormat, MeshioPointDataReader, PointDataReader, PointDataReaderRegistry,
    PyVistaPointDataReader, detect_input_format, point_data_to_array_set, read_point_arrays
)
from meshraw.mesh.formats import PYVISTA_AVAILABLE

if PYVISTA_AVAILABLE:
    import pyvista as pv


class TestDetectInputFormat(unittest.TestCase):
    """Test extension based format lookup."""

    def test_known_extensions(self):
        self.assertIs(detect_input_format("a/b/grid.vtk"), InputFormat.VTK)
        self.assertIs(detect_input_format("image.vti"), InputFormat.VTI)
        self.assertIs(detect_input_format("surface.vtp"), InputFormat.VTP)
        self.assertIs(detect_input_format("volume.vtu"), InputFormat.VTU)

    def test_case_insensitive(self):
        self.assertIs(detect_input_format("SURFACE.VTP"), InputFormat.VTP)
        self.assertIs(detect_input_format("volume.Vtu"), InputFormat.VTU)

    def test_unknown_extension(self):
        # .vtpx and .stl must not fall through to the PolyData reader
        for name in ("mesh.stl", "mesh.vtpx", "mesh.vt"):
            with self.assertRaises(UnsupportedFormatError):
                detect_input_format(name)

    def test_missing_extension(self):
        with self.assertRaises(UnsupportedFormatError):
            detect_input_format("mesh")


class TestRegistry(unittest.TestCase):
    """Test the reader registry."""

    def test_default_readers(self):
        registry = PointDataReaderRegistry()
        self.assertIsInstance(registry.get_reader(InputFormat.VTK), MeshioPointDataReader)
        self.assertIsInstance(registry.get_reader(InputFormat.VTU), MeshioPointDataReader)
        self.assertIsInstance(registry.get_reader(InputFormat.VTI), PyVistaPointDataReader)
        self.assertIsInstance(registry.get_reader(InputFormat.VTP), PyVistaPointDataReader)

    def test_custom_reader(self):
        class StaticReader(PointDataReader):
            def read(self, file_path):
                return ArraySet([NamedArray.from_values(file_path.name, [1.0, 2.0])])

        registry = PointDataReaderRegistry()
        registry.register(InputFormat.VTI, StaticReader())
        array_set = read_point_arrays("grid.vti", registry=registry)
        self.assertEqual(array_set.names, ["grid.vti"])

    def test_explicit_format_overrides_extension(self):
        registry = PointDataReaderRegistry()
        calls = []

        class RecordingReader(PointDataReader):
            def read(self, file_path):
                calls.append(file_path)
                return ArraySet()

        registry.register(InputFormat.VTU, RecordingReader())
        read_point_arrays("data.bin", format=InputFormat.VTU, registry=registry)
        self.assertEqual(calls, [Path("data.bin")])


class TestPointDataConversion(unittest.TestCase):
    """Test point_data_to_array_set()."""

    def test_order_and_shapes(self):
        array_set = point_data_to_array_set({
            "b": np.zeros(3),
            "a": np.zeros((3, 3)),
            "t": np.zeros((3, 3, 3)),
        })
        self.assertEqual(array_set.names, ["b", "a", "t"])
        self.assertEqual([a.component_count for a in array_set], [1, 3, 9])

    def test_non_numeric_array_is_missing(self):
        array_set = point_data_to_array_set({
            "values": np.zeros(2),
            "labels": np.array(["left", "right"]),
        })
        self.assertIsNone(array_set[1])
        with self.assertRaises(MissingArrayError):
            validate(array_set)


class TestMeshioReaders(unittest.TestCase):
    """Test meshio backed readers."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.test_dir = Path(self.temp_dir.name)
        self.points = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
        self.cells = [("triangle", np.array([[0, 1, 2]]))]
        self.point_data = {
            "zeta": np.array([1.0, 2.0, 3.0]),
            "alpha": np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]),
        }

    def tearDown(self):
        self.temp_dir.cleanup()

    def check(self, suffix):
        path = self.test_dir / f"mesh{suffix}"
        meshio.write_points_cells(str(path), self.points, self.cells, point_data=self.point_data)
        array_set = read_point_arrays(path)
        self.assertEqual(array_set.names, ["zeta", "alpha"])
        np.testing.assert_array_equal(array_set[0].data[:, 0], self.point_data["zeta"])
        np.testing.assert_array_equal(array_set[1].data, self.point_data["alpha"])

    def test_vtu(self):
        self.check(".vtu")

    def test_vtk(self):
        self.check(".vtk")

    def test_missing_file(self):
        with self.assertRaises(InputAccessError):
            read_point_arrays(self.test_dir / "missing.vtu")

    def test_corrupt_file(self):
        path = self.test_dir / "broken.vtu"
        path.write_text("this is not xml")
        with self.assertRaises(InputAccessError):
            read_point_arrays(path)


@unittest.skipUnless(PYVISTA_AVAILABLE, "pyvista is not available")
class TestPyVistaReaders(unittest.TestCase):
    """Test PyVista backed readers."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.test_dir = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_vti(self):
        image_class = getattr(pv, "ImageData", None) or pv.UniformGrid
        grid = image_class(dimensions=(3, 2, 1))
        grid.point_data["temperature"] = np.arange(6, dtype=float)
        grid.point_data["velocity"] = np.arange(18, dtype=float).reshape(6, 3)
        path = self.test_dir / "grid.vti"
        grid.save(str(path))

        array_set = read_point_arrays(path)
        self.assertEqual(array_set.names, ["temperature", "velocity"])
        np.testing.assert_array_equal(array_set[1].data, np.arange(18).reshape(6, 3))

    def test_vtp(self):
        surface = pv.PolyData(np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]))
        surface.point_data["pressure"] = np.array([1.5, 2.5, 3.5])
        path = self.test_dir / "surface.vtp"
        surface.save(str(path))

        array_set = read_point_arrays(path)
        self.assertEqual(array_set.names, ["pressure"])
        np.testing.assert_array_equal(array_set[0].data[:, 0], [1.5, 2.5, 3.5])

    def test_missing_file(self):
        with self.assertRaises(InputAccessError):
            read_point_arrays(self.test_dir / "missing.vtp")


if __name__ == "__main__":
    unittest.main()
