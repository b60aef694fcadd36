#!/usr/bin/env python
"""
Test suite for the point data containers.
"""

import unittest

import numpy as np

from meshraw.core.arrays import ArraySet, NamedArray


class TestNamedArray(unittest.TestCase):
    """Test NamedArray construction and access."""

    def test_one_dimensional_values_have_one_component(self):
        array = NamedArray.from_values("pressure", [1.0, 2.0, 3.0])
        self.assertEqual(array.component_count, 1)
        self.assertEqual(array.tuple_count, 3)
        self.assertEqual(array.component(2, 0), 3.0)

    def test_vector_values(self):
        array = NamedArray.from_values("velocity", [[1, 2, 3], [4, 5, 6]])
        self.assertEqual(array.component_count, 3)
        self.assertEqual(array.tuple_count, 2)
        self.assertEqual(array.component(1, 2), 6.0)
        self.assertEqual(array.data.dtype, np.float64)

    def test_tensor_values_are_flattened(self):
        tensors = np.arange(18).reshape(2, 3, 3)
        array = NamedArray.from_values("stress", tensors)
        self.assertEqual(array.component_count, 9)
        self.assertEqual(array.component(1, 0), 9.0)
        self.assertEqual(array.component(0, 4), 4.0)

    def test_empty_tuple_axis_is_allowed(self):
        array = NamedArray.from_values("empty", np.zeros((0, 2)))
        self.assertEqual(array.tuple_count, 0)
        self.assertEqual(array.component_count, 2)

    def test_scalar_is_rejected(self):
        with self.assertRaises(ValueError):
            NamedArray.from_values("bad", 5.0)

    def test_zero_components_is_rejected(self):
        with self.assertRaises(ValueError):
            NamedArray.from_values("bad", np.zeros((4, 0)))

    def test_non_numeric_values_are_rejected(self):
        with self.assertRaises(ValueError):
            NamedArray.from_values("labels", ["a", "b"])

    def test_none_name_becomes_empty(self):
        self.assertEqual(NamedArray.from_values(None, [1.0]).name, "")


class TestArraySet(unittest.TestCase):
    """Test ArraySet ordering."""

    def test_keeps_insertion_order(self):
        array_set = ArraySet(NamedArray.from_values(name, values) for name, values in
                             [("b", [1, 2]), ("a", [[1, 2], [3, 4]]), ("c", [5, 6])])
        self.assertEqual(array_set.names, ["b", "a", "c"])
        self.assertEqual(len(array_set), 3)
        self.assertEqual(array_set[1].component_count, 2)

    def test_duplicate_and_empty_names(self):
        array_set = ArraySet([
            NamedArray.from_values("", [1.0]),
            NamedArray.from_values("", [2.0]),
        ])
        self.assertEqual(array_set.names, ["", ""])

    def test_missing_slot(self):
        array_set = ArraySet()
        array_set.append(NamedArray.from_values("x", [1.0]))
        array_set.append(None)
        self.assertEqual(len(array_set), 2)
        self.assertIsNone(array_set[1])
        self.assertEqual(array_set.names, ["x", ""])


if __name__ == "__main__":
    unittest.main()
