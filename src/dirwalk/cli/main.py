"""Command-line interface for dirwalk.

This module provides the command-line interface for dirwalk, which streams the
results of a directory walk to stdout or a file. It handles command-line argument
parsing, output formatting, walk error reporting and signal management for
graceful interruption handling.

Key Features:
    - Indented text, JSON Lines or tree output
    - Depth limiting
    - Configurable handling of unreadable directories (ignore/warn/fail)
    - Summary report with per-kind counts and maximum depth
    - Signal handling (SIGPIPE on Unix systems, SIGINT)

Exit Codes:
    0: Successful completion
    1: Runtime error, invalid configuration, or walk error with -P fail
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Basic usage
    $ dirwalk /path/to/dir

    # Two levels deep, warning about unreadable directories
    $ dirwalk -d 1 -P warn /path/to/dir
"""

import sys

from dirwalk.cli.argparser import create_parser, validate_args
from dirwalk.cli.error_action import ErrorAction
from dirwalk.cli.walk_output import WalkOutput
from dirwalk.logging_setup import configure_logging
from dirwalk.output_strategies import create_strategy
from dirwalk.summary import WalkSummary
from dirwalk.walker import WalkError, WalkOptions, walk_options


def format_summary(summary: WalkSummary) -> str:
    """Format a walk summary into a human-readable string.

    Args:
        summary: The summary collected during the walk.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    counts = summary.as_dict()
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Symlinks: {counts['symlinks']}",
        f"Other: {counts['other']}",
        f"Errors: {counts['errors']}",
    ]
    if counts["max_depth"] >= 0:
        result.append(f"Max depth: {counts['max_depth']}")
    return "\n".join(result)


def main() -> None:
    """Main entry point for the dirwalk command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error, invalid configuration, or walk error with -P fail
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)
        configure_logging(args.log_level)

        error_action = ErrorAction(args.error_action)
        options = WalkOptions(args.root, depth_limit=args.depth_limit, encoding=args.encoding)
        results = walk_options(options)
        strategy = create_strategy(args.format, options.reported_root())
        summary = WalkSummary()

        with WalkOutput(args.output) as output:
            try:
                for result in summary.consume(results):
                    if isinstance(result, WalkError):
                        output.write(strategy.format_error(result))
                        if error_action is ErrorAction.WARN:
                            print(f"Warning: {result.message}: {result.cause_message}", file=sys.stderr)
                        elif error_action is ErrorAction.FAIL:
                            result.reraise()
                    else:
                        output.write(strategy.format_entry(result))

                output.write(strategy.format_end())

                if args.summary in ("stdout", "file"):
                    output.write("\n" + format_summary(summary) + "\n")
                elif args.summary == "stderr":
                    print(format_summary(summary), file=sys.stderr)

            except BrokenPipeError:
                pass  # The walk stops here; output.exit_code reports why

    except WalkError as e:
        print(f"Error: {e.message}: {e.cause_message}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if output.exit_code:
        sys.exit(output.exit_code)


if __name__ == "__main__":
    main()
