"""Exception hierarchy for meshraw.

Every failure of a conversion is raised as a subclass of ConversionError so
callers can handle the whole family at one boundary. None of these errors are
transient; a conversion that raises one is finished.
"""

from typing import Optional


class ConversionError(Exception):
    """Base class for all conversion failures."""


class InputAccessError(ConversionError):
    """The source file is missing, unreadable or cannot be parsed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class UnsupportedFormatError(InputAccessError):
    """No point data reader is available for the source file."""


class ValidationError(ConversionError):
    """The array set cannot be concatenated into a single matrix."""


class EmptyInputError(ValidationError):
    """The array set contains no arrays."""


class MissingArrayError(ValidationError):
    """An array slot in the set is missing or unreadable."""

    def __init__(self, index: int):
        super().__init__(f"Array {index} is missing or unreadable")
        self.index = index


# Alias kept for callers that use the VTK "NULL array" wording
NullArrayError = MissingArrayError


class InconsistentTupleCountError(ValidationError):
    """An array's tuple count differs from the first array's."""

    def __init__(self, index: int, name: str, expected: int, actual: int):
        super().__init__(
            f"Inconsistent input: array {index} ('{name}') has {actual} tuples, "
            f"expected {expected} (tuple count of array 0)"
        )
        self.index = index
        self.name = name
        self.expected = expected
        self.actual = actual


class OutputAccessError(ConversionError):
    """The destination file cannot be opened or created."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class WriteError(ConversionError):
    """Writing to the destination failed part way through."""


class ConversionCancelled(ConversionError):
    """The caller asked the conversion to stop at a row boundary."""

    def __init__(self, rows_written: int):
        super().__init__(f"Conversion cancelled after {rows_written} rows")
        self.rows_written = rows_written
