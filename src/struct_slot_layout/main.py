"""Main entry point for the struct slot layout tool."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application import LayoutGenerator
from .domain.models.layout import LayoutError
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute the storage slot layout (slot, offset, size) of "
        "contract structs declared in source text",
        epilog="""
Examples:
  # Lay out every struct in a file
  struct-slot-layout contracts/Storage.sol

  # Read from stdin, only two structs
  cat Storage.sol | struct-slot-layout --struct AppStorage,Position

  # JSON output with absolute hex slots under a custom storage root
  struct-slot-layout Storage.sol --format json --hex --base-slot 0x1234

  # Using .env file for configuration
  echo 'OUTPUT_FORMAT=json' > .env
  struct-slot-layout Storage.sol
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "source",
        type=Path,
        nargs="?",
        help="Source file with struct declarations (default: read stdin)",
    )
    parser.add_argument(
        "--struct",
        type=str,
        metavar="NAME",
        help="Comma-separated struct names to lay out (default: all)",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        default=None,
        help="Show slot numbers in hexadecimal",
    )
    parser.add_argument(
        "--base-slot",
        type=lambda value: int(value, 0),
        metavar="SLOT",
        help="Storage root added to every slot, decimal or 0x-prefixed",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        default=None,
        help="Lay out structs on a thread pool",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for debug log files (default: no log file)",
    )
    return parser.parse_args(argv)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for struct storage layout computation."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            input_file=args.source,
            output_format=args.format,
            hex_slots=args.hex,
            base_slot=args.base_slot,
            verbose=args.verbose,
            parallel=args.parallel,
            log_dir=args.log_dir,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    struct_names = None
    if args.struct:
        struct_names = [s.strip() for s in args.struct.split(",") if s.strip()]
        if not struct_names:
            logger.error("No struct names provided")
            sys.exit(1)

    generator = LayoutGenerator(config)

    try:
        source = generator.read_source()
        result = generator.generate(source, struct_names)
    except LayoutError as e:
        logger.error(f"Could not scan source: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Error reading source: {e}")
        sys.exit(1)

    if not result.layouts and not result.failures:
        logger.warning("No structs found in source")

    if result.output:
        print(result.output)

    logger.info(f"Laid out: {len(result.layouts)}, failed: {len(result.failures)}")

    sys.exit(0 if result.success else 1)


if __name__ == "__main__":
    main()
