"""
Raw output writers.

This module writes the concatenated point data matrix either as delimited text
or as a flat stream of 8-byte doubles. Neither format carries a header: a
reader must know the number of columns to rebuild the rows.
"""

import logging
import os
from typing import IO, Callable, Iterator, Optional

import numpy as np

from meshraw.core.config import BYTE_ORDERS, DEFAULT_CHUNK_SIZE, DEFAULT_PRECISION, OutputMode
from meshraw.core.errors import ConversionCancelled, OutputAccessError, WriteError
from meshraw.core.layout import ColumnLayout
from meshraw.core.validation import ValidatedSet

# Configure logging
logger = logging.getLogger(__name__)


def iter_row_chunks(validated: ValidatedSet, layout: ColumnLayout,
                    chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[np.ndarray]:
    """Yield the output matrix in blocks of at most chunk_size rows.

    Each block has shape (rows, layout.total_columns) and is filled array by
    array through the layout, so the full matrix is never held at once.
    """
    for start in range(0, validated.row_count, chunk_size):
        stop = min(start + chunk_size, validated.row_count)
        block = np.empty((stop - start, layout.total_columns), dtype=np.float64)
        for column_block in layout:
            array = validated.arrays[column_block.array_index]
            block[:, layout.column_slice(column_block.array_index)] = array.data[start:stop]
        yield block


def format_value(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a double with the given number of significant digits.

    Uses the C '%g' conversion, so 1.0 is written as '1' and large or small
    magnitudes switch to exponent form.
    """
    return "%.*g" % (precision, value)


def _check_cancel(should_cancel: Optional[Callable[[], bool]], rows_written: int) -> None:
    if should_cancel is not None and should_cancel():
        logger.info(f"Cancellation requested after {rows_written} rows")
        raise ConversionCancelled(rows_written)


def write_text(stream: IO[str], validated: ValidatedSet, layout: ColumnLayout,
               precision: int = DEFAULT_PRECISION, delimiter: str = "\t",
               chunk_size: int = DEFAULT_CHUNK_SIZE,
               should_cancel: Optional[Callable[[], bool]] = None) -> int:
    """Write the matrix as delimited text.

    Rows are separated by a newline with no newline after the last row. The
    delimiter is the same between components and between arrays.

    Args:
        stream: Writable text stream
        validated: Validated arrays
        layout: Column layout from plan()
        precision: Significant digits per value
        delimiter: Field separator
        chunk_size: Rows assembled per write
        should_cancel: Optional callable checked before every chunk

    Returns:
        Number of rows written

    Raises:
        WriteError: If the stream cannot be written
        ConversionCancelled: If should_cancel returned True
    """
    rows_written = 0

    for block in iter_row_chunks(validated, layout, chunk_size):
        _check_cancel(should_cancel, rows_written)

        lines = [delimiter.join(format_value(value, precision) for value in row)
                 for row in block.tolist()]
        text = "\n".join(lines)
        if rows_written > 0:
            text = "\n" + text

        try:
            stream.write(text)
        except (OSError, ValueError) as e:
            logger.error(f"Error writing text output after {rows_written} rows: {e}")
            raise WriteError(f"Failed writing text output after {rows_written} rows: {e}") from e

        rows_written += len(lines)

    logger.debug(f"Wrote {rows_written} text rows")
    return rows_written


def write_binary(stream: IO[bytes], validated: ValidatedSet, layout: ColumnLayout,
                 byte_order: str = "native", chunk_size: int = DEFAULT_CHUNK_SIZE,
                 should_cancel: Optional[Callable[[], bool]] = None) -> int:
    """Write the matrix as packed 8-byte doubles, row-major.

    Args:
        stream: Writable binary stream
        validated: Validated arrays
        layout: Column layout from plan()
        byte_order: 'native', 'little' or 'big'
        chunk_size: Rows assembled per write
        should_cancel: Optional callable checked before every chunk

    Returns:
        Number of bytes written

    Raises:
        ValueError: If the byte order is unknown
        WriteError: If the stream cannot be written
        ConversionCancelled: If should_cancel returned True
    """
    if byte_order not in BYTE_ORDERS:
        raise ValueError(f"Byte order must be one of {sorted(BYTE_ORDERS)}, got {byte_order!r}")

    dtype = np.dtype(BYTE_ORDERS[byte_order] + "f8")
    rows_written = 0
    bytes_written = 0

    for block in iter_row_chunks(validated, layout, chunk_size):
        _check_cancel(should_cancel, rows_written)

        payload = block.astype(dtype, copy=False).tobytes(order="C")
        try:
            stream.write(payload)
        except (OSError, ValueError) as e:
            logger.error(f"Error writing binary output after {bytes_written} bytes: {e}")
            raise WriteError(f"Failed writing binary output after {bytes_written} bytes: {e}") from e

        rows_written += block.shape[0]
        bytes_written += len(payload)

    logger.debug(f"Wrote {rows_written} binary rows ({bytes_written} bytes)")
    return bytes_written


def open_output(filename: str, mode: OutputMode) -> IO:
    """Open the destination file for the given output mode.

    Missing parent directories are created.

    Raises:
        OutputAccessError: If the directory or file cannot be created
    """
    output_dir = os.path.dirname(os.path.abspath(filename))
    if output_dir and not os.path.exists(output_dir):
        try:
            os.makedirs(output_dir, exist_ok=True)
            logger.info(f"Created output directory: {output_dir}")
        except OSError as e:
            logger.error(f"Failed to create output directory: {e}")
            raise OutputAccessError(f"Failed to create output directory: {e}", filename) from e

    try:
        if mode is OutputMode.BINARY:
            return open(filename, 'wb')
        return open(filename, 'w', encoding='utf-8')
    except OSError as e:
        logger.error(f"Can not open output file {filename}: {e}")
        raise OutputAccessError(f"Can not open output file: {filename} ({e})", filename) from e


def remove_partial_output(filename: str) -> bool:
    """Delete an output file left behind by a failed conversion.

    Devices and directories (e.g. /dev/null) are never removed.

    Returns:
        True if a file was removed
    """
    if not os.path.isfile(filename):
        return False
    try:
        os.remove(filename)
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning(f"Could not remove partial output {filename}: {e}")
        return False
    logger.info(f"Removed partial output file: {filename}")
    return True
