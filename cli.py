#!/usr/bin/env python3
"""
Include Detective CLI

A tool for scanning a project for source files and checking that every
file they #include actually exists.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from scanner.builder import build_report, check_root
from scanner.errors import DetectiveError
from settings.config import CONFIG_FILENAME, load_config
from exporters import to_text, to_json

logger = logging.getLogger(__name__)

EXIT_MISSING = 2


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="detective",
        description="A dependency checker: verify that #include references in source files exist.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Source filenames are read from [rules] filenames in {CONFIG_FILENAME} at the
project root (default: main.c).

Examples:
  detective                          # Scan current directory
  detective -p ./firmware            # Scan another project root
  detective -f app.c                 # Only check files named app.c
  detective --format json -o out.json  # JSON report to file
  detective --strict                 # Exit 2 if anything is missing
        """,
    )

    parser.add_argument(
        "-p", "--path",
        type=str,
        default=None,
        help="The root directory of the project to scan (default: current directory)",
    )

    parser.add_argument(
        "-f", "--source-file",
        type=str,
        default=None,
        help="The name of the file containing the dependencies; replaces configured filenames",
    )

    # Output options
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_MISSING} when any dependency is missing",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.2.0",
    )

    return parser.parse_args(args)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def use_color(parsed) -> bool:
    """Decide whether text output should carry ANSI colors."""
    if parsed.no_color or parsed.output or os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    configure_logging(parsed.verbose)

    root = Path(parsed.path) if parsed.path else Path.cwd()

    try:
        check_root(root)
        config = load_config(root)
        targets = config.target_filenames(parsed.source_file)
        logger.debug("Source filenames: %s", ", ".join(targets))
        report = build_report(root, targets)
    except DetectiveError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Generate output
    if parsed.format == "json":
        output = to_json(report)
    else:
        output = to_text(report, color=use_color(parsed))

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    if parsed.strict and report.has_missing():
        return EXIT_MISSING
    return 0


if __name__ == "__main__":
    sys.exit(main())
