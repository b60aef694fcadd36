"""Core functionality for meshraw."""

from meshraw.core.arrays import ArraySet, NamedArray
from meshraw.core.config import ConversionConfig, OutputMode
from meshraw.core.layout import ColumnBlock, ColumnLayout, plan
from meshraw.core.validation import ArraySummary, ValidatedSet, validate
from meshraw.core.converter import ConversionSummary, convert_arrays, convert_file

__all__ = [
    "ArraySet", "NamedArray", "ConversionConfig", "OutputMode",
    "ColumnBlock", "ColumnLayout", "plan",
    "ArraySummary", "ValidatedSet", "validate",
    "ConversionSummary", "convert_arrays", "convert_file",
]
