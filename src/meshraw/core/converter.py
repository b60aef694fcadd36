"""
Conversion driver.

Runs validation, layout planning and serialization for one array set and one
destination file. Errors propagate as ConversionError subclasses; deciding what
to do with a partially written file is left to the caller.
"""

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from meshraw.core.arrays import ArraySet
from meshraw.core.config import ConversionConfig, OutputMode
from meshraw.core.errors import OutputAccessError, WriteError
from meshraw.core.layout import plan
from meshraw.core.validation import ArraySummary, validate
from meshraw.io.export import open_output, write_binary, write_text
from meshraw.mesh.formats import InputFormat, PointDataReaderRegistry, read_point_arrays

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionSummary:
    """Outcome of a successful conversion."""
    array_count: int
    row_count: int
    column_count: int
    output_path: str
    mode: OutputMode
    bytes_written: int


def convert_arrays(array_set: ArraySet,
                   output_path: Union[str, Path],
                   config: Optional[ConversionConfig] = None,
                   on_array: Optional[Callable[[ArraySummary], None]] = None,
                   should_cancel: Optional[Callable[[], bool]] = None) -> ConversionSummary:
    """Write an array set to a raw text or binary file.

    The set is validated before the destination is opened, so invalid input
    never creates the output file.

    Args:
        array_set: Point data arrays in column order
        output_path: Destination file
        config: Conversion configuration (text output with defaults if None)
        on_array: Optional callback receiving a summary of each array
        should_cancel: Optional callable polled between row chunks

    Returns:
        ConversionSummary describing what was written

    Raises:
        ValidationError: If the arrays cannot be concatenated
        OutputAccessError: If the destination cannot be opened
        WriteError: If writing fails part way through
        ConversionCancelled: If should_cancel returned True
    """
    if config is None:
        config = ConversionConfig()
    output_path = str(output_path)

    validated = validate(array_set, on_array)
    layout = plan(validated)

    logger.info(f"Writing {config.mode.value} output to {output_path}")
    start_time = time.time()

    stream = open_output(output_path, config.mode)
    try:
        with stream:
            if config.mode is OutputMode.BINARY:
                write_binary(
                    stream, validated, layout,
                    byte_order=config.byte_order,
                    chunk_size=config.chunk_size,
                    should_cancel=should_cancel,
                )
            else:
                write_text(
                    stream, validated, layout,
                    precision=config.precision,
                    delimiter=config.delimiter,
                    chunk_size=config.chunk_size,
                    should_cancel=should_cancel,
                )
    except OSError as e:
        # Buffered data is flushed on close, so a full disk often shows up here
        logger.error(f"Error writing output file {output_path}: {e}")
        raise WriteError(f"Failed writing output file {output_path}: {e}") from e

    # Text mode may translate newlines, so measure the file itself
    bytes_written = os.path.getsize(output_path)

    summary = ConversionSummary(
        array_count=validated.array_count,
        row_count=validated.row_count,
        column_count=layout.total_columns,
        output_path=output_path,
        mode=config.mode,
        bytes_written=bytes_written,
    )

    logger.info(
        f"{summary.array_count} arrays in column-wise order as above were written to: {output_path}"
    )
    logger.info(f"Rows: {summary.row_count}, Columns: {summary.column_count}")
    logger.debug(f"Conversion took {time.time() - start_time:.3f} seconds")
    return summary


def _same_file(first: Union[str, Path], second: Union[str, Path]) -> bool:
    """Check whether two paths name the same file, following links."""
    if os.path.exists(first) and os.path.exists(second):
        return os.path.samefile(first, second)
    return os.path.realpath(first) == os.path.realpath(second)


def convert_file(input_path: Union[str, Path],
                 output_path: Union[str, Path],
                 config: Optional[ConversionConfig] = None,
                 input_format: Optional[InputFormat] = None,
                 registry: Optional[PointDataReaderRegistry] = None,
                 on_array: Optional[Callable[[ArraySummary], None]] = None,
                 should_cancel: Optional[Callable[[], bool]] = None) -> ConversionSummary:
    """Read the point data of a mesh file and write it as a raw file.

    Args:
        input_path: Mesh file (.vtk, .vti, .vtp or .vtu)
        output_path: Destination file
        config: Conversion configuration
        input_format: Input format (detected from the extension if None)
        registry: Reader registry to use
        on_array: Optional callback receiving a summary of each array
        should_cancel: Optional callable polled between row chunks

    Returns:
        ConversionSummary describing what was written
    """
    if _same_file(input_path, output_path):
        raise OutputAccessError(f"Output file must differ from the input file: {output_path}",
                                str(output_path))

    array_set = read_point_arrays(input_path, format=input_format, registry=registry)
    return convert_arrays(array_set, output_path, config, on_array, should_cancel)
