"""
meshraw Mesh Module

Readers that extract the point data arrays of VTK mesh files.
"""

from meshraw.mesh.general import point_data_to_array_set, read_general_mesh
from meshraw.mesh.formats import (
    InputFormat,
    PointDataReader,
    MeshioPointDataReader,
    PyVistaPointDataReader,
    PointDataReaderRegistry,
    detect_input_format,
    read_point_arrays,
)

__all__ = [
    "point_data_to_array_set",
    "read_general_mesh",
    "InputFormat",
    "PointDataReader",
    "MeshioPointDataReader",
    "PyVistaPointDataReader",
    "PointDataReaderRegistry",
    "detect_input_format",
    "read_point_arrays",
]
