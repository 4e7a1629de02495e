"""Command-line argument parsing for treetrim.

This module defines the command-line interface for treetrim,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from treetrim import __version__
from treetrim.ignore_rules.base_rules import BaseIgnoreRules
from treetrim.tree_source import STDIN_SOURCE


def create_ignore_action(ignore_rules: BaseIgnoreRules) -> Type[argparse.Action]:
    """Create a custom action class that feeds ignore patterns into a rules object.

    Patterns given with -i/--ignore and pattern files given with -e/--ignore-file are
    added in exactly the order they appear on the command line.

    Args:
        ignore_rules: The ignore rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class IgnoreRulesAction(argparse.Action):
        """Action adding ignore patterns to the rules object as they are parsed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--ignore-file"):
                try:
                    ignore_rules.load_rules(Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:  # -i/--ignore
                try:
                    ignore_rules.add_rule(str(values))
                except ValueError as e:
                    parser.error(str(e))

            # Keep the raw values on the namespace as well
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return IgnoreRulesAction


def node_reference(value: str) -> Union[int, str]:
    """Convert a --toggle value to a node id when it is a number, else keep the name.

    Example:
        >>> node_reference("3")
        3
        >>> node_reference("build")
        'build'
    """
    value = value.strip()
    if not value:
        raise argparse.ArgumentTypeError("node reference must not be empty")
    return int(value) if value.isdigit() else value


def node_name(value: str) -> str:
    """Keep a --toggle-name value as a name, even when it consists of digits.

    Example:
        >>> node_name(" 2024 ")
        '2024'
    """
    value = value.strip()
    if not value:
        raise argparse.ArgumentTypeError("node name must not be empty")
    return value


def create_parser(ignore_rules: BaseIgnoreRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        ignore_rules: The ignore rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with treetrim's options.
    """
    description = """
    treetrim: prune directory tree text before pasting it into documentation.

    Reads a directory tree drawn with box-drawing connectors (as printed by `tree`
    and similar tools), hides the entries you do not want, and prints the remaining
    lines unchanged.

    Entries can be hidden by ignore patterns, which match entry names (not paths),
    ignore case, and support `*` as the only wildcard; or by toggling individual
    entries by id or by name. Hiding an entry hides everything below it. An entry
    hidden by a pattern cannot be toggled back on.
    """

    epilog = """
    Examples:
      # Read a tree from a file and hide node_modules and every log file
      treetrim tree.txt -i node_modules -i "*.log"

      # Read patterns from a file (one per line) and the tree from stdin
      tree -a my-project | treetrim -e .treeignore

      # See node ids and what is currently hidden
      treetrim tree.txt -i build --preview

      # Hide entries by id or by name
      treetrim tree.txt -x 4 -x docs

      # Write the result to a file and print a summary with token count
      treetrim tree.txt -i "*.pyc" -o STRUCTURE.txt -s stderr -t gpt-4
    """

    parser = argparse.ArgumentParser(
        prog="treetrim",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treetrim {__version__}", help="Show the version and exit"
    )

    IgnoreAction = create_ignore_action(ignore_rules)

    parser.add_argument(
        "source",
        nargs="?",
        default=STDIN_SOURCE,
        help="File containing the tree text, or '-' to read it from stdin (default).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=IgnoreAction,
        help=(
            "Hide entries whose name matches PATTERN, with everything below them. Matching ignores "
            "case; '*' matches any run of characters. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-e",
        "--ignore-file",
        type=Path,
        metavar="FILE",
        action=IgnoreAction,
        help="File of ignore patterns, one per line (can be specified multiple times).",
    )
    parser.add_argument(
        "-x",
        "--toggle",
        type=node_reference,
        metavar="NODE",
        action="append",
        default=[],
        help=(
            "Toggle an entry, by numeric id (see --preview) or by name (every entry with that name). "
            "A value made only of digits is always an id; use -X for such names. "
            "Applied after the ignore patterns, in order. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-X",
        "--toggle-name",
        dest="toggle",
        type=node_name,
        metavar="NAME",
        action="append",
        help="Toggle every entry with this name, even a name made only of digits. Ordered together with -x.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="Print every entry with its id, dimming hidden ones, instead of the pruned tree text.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model to use for counting tokens (e.g., gpt-4). Specifying this enables token counting.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing and visibility decisions to stderr.",
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
    if args.preview and args.summary == "file":
        raise ValueError("--summary=file cannot be combined with --preview")
