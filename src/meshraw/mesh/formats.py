"""
Point data readers for VTK file formats.

Supported inputs:
- Legacy VTK (.vtk), ASCII or binary
- XML ImageData (.vti)
- XML PolyData (.vtp)
- XML UnstructuredGrid (.vtu)

Legacy VTK and UnstructuredGrid files are read with meshio. ImageData and
PolyData are not handled by meshio and are read with PyVista.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from meshraw.core.arrays import ArraySet
from meshraw.core.errors import InputAccessError, UnsupportedFormatError
from meshraw.mesh.general import point_data_to_array_set, read_point_data_meshio

logger = logging.getLogger(__name__)

# Check for PyVista availability
try:
    import pyvista as pv
    PYVISTA_AVAILABLE = True
except ImportError:
    PYVISTA_AVAILABLE = False
    logger.debug("PyVista not available. Install with 'pip install pyvista' for .vti/.vtp support.")


class InputFormat(Enum):
    """Supported input formats, valued by file extension."""
    VTK = "vtk"
    VTI = "vti"
    VTP = "vtp"
    VTU = "vtu"


def detect_input_format(filename: Union[str, Path]) -> InputFormat:
    """Determine the input format from the file extension.

    Extensions are compared case-insensitively and by equality.

    Raises:
        UnsupportedFormatError: If the file has no extension or an unknown one
    """
    ext = os.path.splitext(str(filename))[1].lower()
    if not ext:
        raise UnsupportedFormatError(f"No file extension found in the input filename: {filename}",
                                     str(filename))
    try:
        return InputFormat(ext[1:])
    except ValueError:
        raise UnsupportedFormatError(
            f"No valid input file extension found: '{ext}' "
            f"(expected one of {', '.join('.' + f.value for f in InputFormat)})",
            str(filename)
        ) from None


# Base class for format handlers
class PointDataReader:
    """Base class for point data readers."""

    def read(self, file_path: Path) -> ArraySet:
        """Read all point data arrays from file, in file order."""
        raise NotImplementedError


class MeshioPointDataReader(PointDataReader):
    """Point data reader backed by meshio."""

    def __init__(self, meshio_format: str):
        self.meshio_format = meshio_format

    def read(self, file_path: Path) -> ArraySet:
        logger.info(f"Reading {self.meshio_format} point data from {file_path}")
        return read_point_data_meshio(str(file_path), self.meshio_format)


class PyVistaPointDataReader(PointDataReader):
    """Point data reader backed by PyVista."""

    def read(self, file_path: Path) -> ArraySet:
        if not PYVISTA_AVAILABLE:
            raise UnsupportedFormatError(
                f"PyVista is required to read {file_path.suffix} files. "
                "Install it with 'pip install pyvista'",
                str(file_path)
            )

        logger.info(f"Reading point data with PyVista from {file_path}")

        if not file_path.exists():
            raise InputAccessError(f"Mesh file not found: {file_path}", str(file_path))

        try:
            dataset = pv.read(str(file_path))
        except Exception as e:
            logger.error(f"Error reading mesh with PyVista: {e}")
            raise InputAccessError(f"Could not read {file_path}: {e}", str(file_path)) from e

        point_data = {name: dataset.point_data[name] for name in dataset.point_data.keys()}
        logger.info(
            f"Successfully read mesh: {dataset.n_points} points, {len(point_data)} point data arrays"
        )
        return point_data_to_array_set(point_data)


class PointDataReaderRegistry:
    """Registry mapping input formats to point data readers."""

    def __init__(self):
        self.readers: Dict[InputFormat, PointDataReader] = {}
        self._register_default_formats()

    def _register_default_formats(self):
        """Register default format handlers."""
        self.readers[InputFormat.VTK] = MeshioPointDataReader("vtk")
        self.readers[InputFormat.VTU] = MeshioPointDataReader("vtu")
        self.readers[InputFormat.VTI] = PyVistaPointDataReader()
        self.readers[InputFormat.VTP] = PyVistaPointDataReader()

    def register(self, format: InputFormat, reader: PointDataReader) -> None:
        self.readers[format] = reader

    def get_reader(self, format: InputFormat) -> PointDataReader:
        """Get reader for specified format."""
        if format not in self.readers:
            raise UnsupportedFormatError(f"No reader available for format: {format.value}")
        return self.readers[format]


def read_point_arrays(file_path: Union[str, Path],
                      format: Optional[InputFormat] = None,
                      registry: Optional[PointDataReaderRegistry] = None) -> ArraySet:
    """Read all point data arrays of a mesh file.

    Args:
        file_path: Path to the mesh file
        format: Input format (detected from the extension if None)
        registry: Reader registry (a default one is created if None)

    Returns:
        ArraySet in file order

    Raises:
        UnsupportedFormatError: If the format cannot be determined or read
        InputAccessError: If the file cannot be read
    """
    file_path = Path(file_path)
    if format is None:
        format = detect_input_format(file_path)
    if registry is None:
        registry = PointDataReaderRegistry()

    reader = registry.get_reader(format)
    return reader.read(file_path)
