"""Configuration module for meshraw.

This module provides the output mode enum and the configuration class for the
array conversion process.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

DEFAULT_PRECISION = 16
DEFAULT_CHUNK_SIZE = 4096
BYTE_ORDERS = {
    'native': '=',
    'little': '<',
    'big': '>',
}


class OutputMode(Enum):
    """Serialization used for the output file."""
    TEXT = "text"
    BINARY = "binary"

    @classmethod
    def from_flag(cls, flag: Union[int, str]) -> "OutputMode":
        """Map the 0/1 binary flag of the command line to an output mode.

        Args:
            flag: 0 (or "0") for text, 1 (or "1") for binary

        Returns:
            The matching OutputMode

        Raises:
            ValueError: If the flag is neither 0 nor 1
        """
        if str(flag).strip() == "0":
            return cls.TEXT
        if str(flag).strip() == "1":
            return cls.BINARY
        raise ValueError(f"Binary option should be either 0 or 1, got {flag!r}")


@dataclass
class ConversionConfig:
    """Configuration for converting point data arrays to a raw file.

    Attributes:
        mode: Text or binary output
        precision: Significant digits used for text output
        delimiter: Field separator used for text output
        byte_order: Byte order of binary output ('native', 'little' or 'big')
        chunk_size: Number of rows assembled per write
        debug: Whether to enable debug output
    """

    mode: OutputMode = OutputMode.TEXT
    precision: int = DEFAULT_PRECISION
    delimiter: str = "\t"
    byte_order: str = "native"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    debug: bool = False

    def __post_init__(self) -> None:
        """Validate the configuration after initialization."""
        if isinstance(self.mode, str):
            self.mode = OutputMode(self.mode)

        if self.precision < 1:
            raise ValueError("Precision must be a positive number of digits")

        if not self.delimiter or "\n" in self.delimiter:
            raise ValueError("Delimiter must be a non-empty string without newlines")

        if self.byte_order not in BYTE_ORDERS:
            raise ValueError(
                f"Byte order must be one of {sorted(BYTE_ORDERS)}, got {self.byte_order!r}"
            )

        if self.chunk_size < 1:
            raise ValueError("Chunk size must be at least 1 row")
