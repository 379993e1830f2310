"""Command-line argument parsing for dirwalk.

This module defines the command-line interface for dirwalk,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dirwalk import __version__
from dirwalk.logging_setup import LOG_LEVELS


def non_negative_int(value: str) -> int:
    """Argparse type for the depth limit.

    Raises:
        argparse.ArgumentTypeError: If value is not an integer of at least 0.
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth limit: {value!r} (expected a non-negative integer)")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid depth limit: {value!r} (expected a non-negative integer)")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirwalk's options.
    """
    description = """
    dirwalk: Lazily walk a directory tree and report every entry it contains.

    Entries are written depth-first in the order the operating system lists them,
    each directory's contents directly after the directory itself. A directory
    that cannot be read is reported in place and the walk continues with the
    rest of the tree.
    """

    epilog = """
    Examples:
      # Walk a directory and print an indented listing
      dirwalk /path/to/project

      # Only list the root and one level below it
      dirwalk -d 1 /path/to/project

      # Walk a file:// URL and write JSON Lines to a file
      dirwalk -f json -o walk.jsonl file:///path/to/project

      # Draw a tree like the Unix tree command
      dirwalk -f tree /path/to/project

      # Report unreadable directories on stderr, or stop at the first one
      dirwalk -P warn /path/to/project
      dirwalk -P fail /path/to/project

      # Print counts and the maximum depth to stderr
      dirwalk -s stderr ~
    """

    parser = argparse.ArgumentParser(
        prog="dirwalk",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirwalk {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "root",
        help="The directory to walk, as a path or a file:// URL.",
    )
    parser.add_argument(
        "-d",
        "--depth-limit",
        type=non_negative_int,
        metavar="N",
        help="Deepest level whose directories are still listed (0 lists only ROOT). Unlimited by default.",
    )
    parser.add_argument(
        "-E",
        "--encoding",
        metavar="CODEC",
        help="Decode entry names with this codec instead of the filesystem encoding.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "tree"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-P",
        "--error-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle directories that cannot be listed (default: ignore).",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Minimum level of diagnostic log events written to stderr (default: warning).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")
