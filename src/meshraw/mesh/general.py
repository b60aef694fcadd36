"""
General point data reader functions using meshio.

This module reads legacy VTK and XML UnstructuredGrid files with the meshio
library and turns their point data into an ArraySet.
"""

import logging
import os
from typing import Any, Mapping, Optional

import meshio

from meshraw.core.arrays import ArraySet, NamedArray
from meshraw.core.errors import InputAccessError

logger = logging.getLogger(__name__)


def point_data_to_array_set(point_data: Mapping[str, Any]) -> ArraySet:
    """Convert an ordered name -> values mapping of point data to an ArraySet.

    Arrays that cannot be converted to floating point values are kept as
    missing slots so that validation reports their position.

    Args:
        point_data: Point data in file order

    Returns:
        ArraySet in the same order
    """
    array_set = ArraySet()
    for name, values in point_data.items():
        if values is None:
            logger.warning(f"Point data array '{name}' has no values")
            array_set.append(None)
            continue
        try:
            array_set.append(NamedArray.from_values(name, values))
        except (TypeError, ValueError) as e:
            logger.warning(f"Point data array '{name}' is not numeric: {e}")
            array_set.append(None)
    return array_set


def read_general_mesh(filename: str, file_format: Optional[str] = None) -> meshio.Mesh:
    """Read a mesh file using meshio.

    Args:
        filename: Path to the mesh file
        file_format: meshio format name, or None to let meshio pick by extension

    Returns:
        meshio.Mesh: The loaded mesh

    Raises:
        InputAccessError: If the file is missing or meshio cannot read it
    """
    logger.info(f"Reading mesh file: {filename}")

    if not os.path.exists(filename):
        raise InputAccessError(f"Mesh file not found: {filename}", filename)

    try:
        mesh = meshio.read(filename, file_format)
    except Exception as e:
        logger.error(f"Error reading mesh with meshio: {e}")
        raise InputAccessError(f"Could not read {filename}: {e}", filename) from e

    logger.info(
        f"Successfully read mesh: {len(mesh.points)} points, "
        f"{len(mesh.point_data)} point data arrays"
    )
    return mesh


def read_point_data_meshio(filename: str, file_format: Optional[str] = None) -> ArraySet:
    """Read all point data arrays of a file with meshio."""
    mesh = read_general_mesh(filename, file_format)
    return point_data_to_array_set(mesh.point_data)
