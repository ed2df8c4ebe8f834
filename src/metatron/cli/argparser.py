"""Command-line argument parsing for metatron.

This module defines the command-line interface for metatron,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from metatron import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with metatron's options.
    """
    description = """
    metatron: list or draw the contents of a directory tree.

    The directory is scanned recursively and filtered by extension and by folder.
    The result is either a flat list of matching entries (files mode) or a
    box-drawing rendering of the filtered hierarchy (tree mode).

    Filtering:
    - Extensions are given as free-form lists: ".py .md", "py,md" and "PY, .Md" are equivalent
    - Matching is a case-insensitive suffix test on the file name
    - Ignored folders are either bare names (matched at any depth) or paths
      (the folder and everything below it)
    - In tree mode with an extension filter, folders without matching files are hidden
    """

    epilog = """
    Examples:
      # List every file below a directory
      metatron /path/to/project

      # List Markdown and text files only
      metatron -x ".md .txt" /path/to/project

      # Draw the hierarchy, skipping dependency and build folders
      metatron -m tree -I node_modules -I /path/to/project/build /path/to/project

      # Draw folders only
      metatron -m tree -D /path/to/project

      # Ignore log files and print the raw result as JSON
      metatron -X .log --json /path/to/project

      # Save the report into a directory (remembered for later -S runs)
      metatron -m tree -o ~/reports /path/to/project

      # Save into the remembered directory under a chosen name
      metatron -S -n project-files.txt /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="metatron",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"metatron {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        help="The directory to scan. Listed paths are built from it as given.",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=["files", "tree"],
        default="files",
        help="Output a flat list of entries (files) or a rendered hierarchy (tree). Default: files.",
    )
    parser.add_argument(
        "-x",
        "--extension",
        metavar="EXTENSIONS",
        default="",
        help="Only include files with these extensions, separated by commas or spaces (e.g. '.py .md').",
    )
    parser.add_argument(
        "-D",
        "--folders-only",
        action="store_true",
        help="Output folders instead of files.",
    )
    parser.add_argument(
        "-X",
        "--ignore-extension",
        metavar="EXTENSIONS",
        default="",
        help="Exclude files with these extensions, separated by commas or spaces.",
    )
    parser.add_argument(
        "-I",
        "--ignore-folder",
        metavar="FOLDER",
        action="append",
        dest="ignore_folders",
        help=(
            "Folder name or path to skip together with its contents. A bare name matches folders at any "
            "depth; a path matches that folder and its descendants. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output the raw result as JSON instead of a report.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        metavar="DIR",
        help="Save the output into this directory instead of printing it. The directory is remembered for -S.",
    )
    parser.add_argument(
        "-S",
        "--save",
        action="store_true",
        help="Save the output into the remembered output directory.",
    )
    parser.add_argument(
        "-n",
        "--filename",
        metavar="NAME",
        help="File name for saved output (default: metatron_<mode>_<timestamp>.txt). Requires -o or -S.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr; repeat for debug output (-vv).",
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
    if args.output_dir is not None and args.save:
        raise ValueError("-o/--output-dir and -S/--save cannot be used together")
    if args.filename and args.output_dir is None and not args.save:
        raise ValueError("-n/--filename requires -o/--output-dir or -S/--save")
