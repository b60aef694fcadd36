"""Command-line interface for meshraw.

This module provides the main entry point for the meshraw command-line application.
"""

import argparse
import logging
import traceback
from typing import List, Optional

from meshraw.core.config import BYTE_ORDERS, DEFAULT_PRECISION, ConversionConfig, OutputMode
from meshraw.core.converter import convert_file
from meshraw.core.errors import (
    ConversionError, InputAccessError, OutputAccessError, ValidationError
)
from meshraw.io.export import remove_partial_output
from meshraw.mesh.formats import InputFormat


def setup_logging(debug_mode: bool = False) -> None:
    """Configure logging based on debug mode.

    Args:
        debug_mode: If True, set logging level to DEBUG, otherwise INFO
    """
    log_level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def _binary_flag(value: str) -> OutputMode:
    try:
        return OutputMode.from_flag(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='meshraw',
        description='Write all point data arrays of a VTK file (.vtk, .vti, .vtp, .vtu) '
                    'column-wise to a raw text or binary file',
        epilog='BINARY is optional, it can be either 0 (text, default) or 1 (binary).'
    )
    parser.add_argument('input_file', help='Input mesh file: .vtk, .vti, .vtp or .vtu')
    parser.add_argument('output_file', help='Output raw file')
    parser.add_argument('binary', nargs='?', type=_binary_flag, default=OutputMode.TEXT,
                        metavar='BINARY', help='0 for text output, 1 for binary output')

    # Input control group
    input_group = parser.add_argument_group('input', 'Control how the input file is read')
    input_group.add_argument('--format', choices=[f.value for f in InputFormat], default=None,
                             help='Input format (default: determined by the file extension)')

    # Output control group
    output_group = parser.add_argument_group('output', 'Control the output file')
    output_group.add_argument('--precision', type=int, default=DEFAULT_PRECISION,
                              help=f'Significant digits in text output (default: {DEFAULT_PRECISION})')
    output_group.add_argument('--byte-order', choices=sorted(BYTE_ORDERS), default='native',
                              help='Byte order of binary output (default: native)')
    output_group.add_argument('--keep-partial', action='store_true',
                              help='Keep a partially written output file after an error')

    # Advanced settings
    adv_group = parser.add_argument_group('advanced', 'Advanced settings')
    adv_group.add_argument('--debug', action='store_true', help='Enable debug output')

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed command line arguments
    """
    return build_parser().parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> ConversionConfig:
    """Create the conversion configuration from command line arguments."""
    return ConversionConfig(
        mode=args.binary,
        precision=args.precision,
        byte_order=args.byte_order,
        debug=args.debug,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the converter.

    Returns:
        Exit code: 0 for success, non-zero for error
    """
    # Parse command line arguments
    args = parse_arguments(argv)

    # Set up logging
    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    try:
        config = create_config_from_args(args)
    except ValueError as e:
        logger.error(f"Invalid option: {e}")
        return 1

    input_format = InputFormat(args.format) if args.format else None

    logger.info(f"Processing mesh file: {args.input_file}")

    try:
        convert_file(args.input_file, args.output_file, config, input_format=input_format)
    except (InputAccessError, ValidationError) as e:
        # Raised before the output file is opened
        logger.error(str(e))
        if args.debug:
            logger.debug(traceback.format_exc())
        return 1
    except OutputAccessError as e:
        logger.error(str(e))
        return 1
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
        if args.debug:
            logger.debug(traceback.format_exc())
        if not args.keep_partial:
            remove_partial_output(args.output_file)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
