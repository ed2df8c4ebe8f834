"""Command-line interface for metatron.

This module provides the command-line entry point, which scans a directory and
prints or saves either a file listing or a rendered hierarchy.

Exit Codes:
    0: Successful completion
    1: Runtime error (invalid arguments, failed save)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (e.g., when piping to `head`)

Example:
    # List Python files, skipping virtual environments
    $ metatron -x .py -I .venv /path/to/project

    # Save a folders-only tree into the remembered output directory
    $ metatron -m tree -D -S /path/to/project
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional, Sequence

from metatron.cli.argparser import create_parser, validate_args
from metatron.config import Config, load_config, save_config
from metatron.output import save_to_file
from metatron.report import default_output_filename, format_hierarchy_report, format_listing_report
from metatron.scanner.directory_reader import display_name
from metatron.scanner.hierarchy import get_hierarchy
from metatron.scanner.listing import list_files

logger = logging.getLogger(__name__)

LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by the number of -v flags."""
    level = LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def build_output(args: argparse.Namespace) -> str:
    """Run the scan selected by the arguments and format its result.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The JSON document (with --json) or the human-readable report.
    """
    ignored_folders = args.ignore_folders or []
    if args.mode == "tree":
        hierarchy = get_hierarchy(
            args.directory, args.extension, args.folders_only, args.ignore_extension, ignored_folders
        )
        if args.json:
            return json.dumps(hierarchy.to_dict(), ensure_ascii=False, indent=2)
        return format_hierarchy_report(hierarchy, display_name(args.directory), args.extension)

    listing = list_files(args.directory, args.extension, args.folders_only, args.ignore_extension, ignored_folders)
    if args.json:
        return json.dumps(listing.to_dict(), ensure_ascii=False, indent=2)
    return format_listing_report(listing)


def resolve_output_dir(args: argparse.Namespace) -> Optional[str]:
    """Determine where output should be saved.

    An explicit -o directory wins. With -S the directory remembered in the user
    config is used.

    Returns:
        The output directory, or None when output goes to stdout.

    Raises:
        ValueError: If -S is given but no output directory has been remembered.
    """
    if args.output_dir is not None:
        return str(args.output_dir)

    if args.save:
        output_dir = load_config().output_directory
        if not output_dir:
            raise ValueError("No output directory is configured. Use -o/--output-dir to set one.")
        return output_dir

    return None


def remember_output_dir(output_dir: str) -> None:
    """Store a directory in the user config so -S can reuse it."""
    if not save_config(Config(output_directory=output_dir)):
        logger.warning("Could not remember output directory %s", output_dir)


def _silence_stdout() -> None:
    # Keep the interpreter from complaining about the closed pipe on shutdown.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the metatron command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Runtime error (invalid arguments, failed save)
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        validate_args(args)
        output_dir = resolve_output_dir(args)
        content = build_output(args)

        if output_dir is None:
            print(content)
            sys.stdout.flush()
        else:
            filename = args.filename or default_output_filename(args.mode)
            result = save_to_file(content, output_dir, filename)
            if not result.success:
                print(f"Error: {result.error}", file=sys.stderr)
                sys.exit(1)
            print(f"Saved to {result.path}", file=sys.stderr)
            if args.output_dir is not None:
                remember_output_dir(output_dir)

    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(141)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
