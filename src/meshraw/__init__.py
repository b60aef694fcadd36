"""
meshraw - Point data to raw array converter.

Reads every point data array of a VTK mesh file (.vtk, .vti, .vtp, .vtu) and
writes them side by side as one header-less matrix, either as tab-separated
text or as packed 8-byte doubles.
"""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "1.0.0.dev0"

from meshraw.core import (
    ArraySet, NamedArray, ConversionConfig, OutputMode,
    ConversionSummary, convert_arrays, convert_file
)
from meshraw.core.errors import (
    ConversionError, InputAccessError, UnsupportedFormatError, ValidationError,
    EmptyInputError, MissingArrayError, InconsistentTupleCountError,
    OutputAccessError, WriteError, ConversionCancelled
)
from meshraw.mesh import InputFormat, read_point_arrays

__all__ = [
    "ArraySet", "NamedArray", "ConversionConfig", "OutputMode",
    "ConversionSummary", "convert_arrays", "convert_file",
    "ConversionError", "InputAccessError", "UnsupportedFormatError", "ValidationError",
    "EmptyInputError", "MissingArrayError", "InconsistentTupleCountError",
    "OutputAccessError", "WriteError", "ConversionCancelled",
    "InputFormat", "read_point_arrays",
]
