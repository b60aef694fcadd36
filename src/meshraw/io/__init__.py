"""I/O utilities for raw point data output."""

from meshraw.io.export import (
    format_value, iter_row_chunks, open_output, remove_partial_output, write_binary, write_text
)

__all__ = [
    "format_value", "iter_row_chunks", "open_output", "remove_partial_output",
    "write_binary", "write_text"
]
