"""Command-line interface for treetrim.

This module provides the command-line entry point: it reads tree text from a file or
stdin, applies ignore patterns and toggles, and writes the pruned tree (or a preview
of every entry's state) to stdout or a file.

Signal Handling Notes:
    - SIGPIPE: Handled when output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (unreadable input, unknown node, ...)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Hide build output and dependencies
    $ treetrim tree.txt -i build -i node_modules

    # Display version information
    $ treetrim --version
"""

import logging
import shutil
import sys
from collections.abc import Mapping
from typing import List, Optional, Union

from rich.console import Console

from treetrim.cli.argparser import create_parser, validate_args
from treetrim.cli.safe_writer import SafeWriter
from treetrim.cli.signal_handler import setup_signal_handling, signal_handler
from treetrim.exceptions import TokenizerNotAvailableError, UnknownNodeError
from treetrim.ignore_rules.wildcard_rules import WildcardIgnoreRules
from treetrim.render import render_forest
from treetrim.token_counter import check_tiktoken_available
from treetrim.tree_source import read_tree_text
from treetrim.tree_trimmer import TreeTrimmer

logger = logging.getLogger("treetrim")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr: warnings only, or everything with --verbose."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing various count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Nodes: {counts['nodes']}",
        f"Visible: {counts['visible']}",
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.insert(5, f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def apply_toggles(trimmer: TreeTrimmer, references: List[Union[int, str]]) -> None:
    """Toggle nodes given by id or by name, in order.

    A name toggles every node carrying it. Toggles refused because an ignore pattern
    hides the node are reported as warnings.

    Raises:
        UnknownNodeError: If an id or name does not exist in the tree.
    """
    for reference in references:
        if isinstance(reference, int):
            targets = [trimmer.get_node(reference)]
        else:
            targets = trimmer.find_nodes(reference)
            if not targets:
                raise UnknownNodeError(reference)

        for node in targets:
            if not trimmer.toggle(node.node_id):
                logger.warning(
                    "Cannot show %r (node %d): it or a parent matches an ignore pattern", node.name, node.node_id
                )


def format_preview(trimmer: TreeTrimmer, color: bool) -> str:
    """Render every node with its id and state as text, with or without ANSI colors."""
    width = shutil.get_terminal_size().columns
    console = Console(force_terminal=color, no_color=not color, width=width, highlight=False)
    with console.capture() as capture:
        console.print(render_forest(trimmer.forest))
    return capture.get()


def main() -> None:
    """Main entry point for the treetrim command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # The rules object is filled in command-line order while parsing
        ignore_rules = WildcardIgnoreRules()
        parser = create_parser(ignore_rules)
        args = parser.parse_args()

        validate_args(args)
        configure_logging(args.verbose)

        if args.tokenizer and not check_tiktoken_available():
            raise TokenizerNotAvailableError(
                "Token counting was requested with -t/--tokenizer, but the required tiktoken library is not installed."
            )

        tree_text = read_tree_text(args.source)
        trimmer = TreeTrimmer(tree_text, ignore_rules=ignore_rules, tokenizer_model=args.tokenizer)
        apply_toggles(trimmer, args.toggle)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                if args.preview:
                    color = args.output is None and sys.stdout.isatty()
                    safe_writer.write(format_preview(trimmer, color))
                else:
                    for line in trimmer.stream_filtered_tree():
                        safe_writer.write(line)

                if args.summary:
                    if args.preview:
                        # Counts describe the pruned text even when only the preview is shown
                        for _ in trimmer.stream_filtered_tree():
                            pass
                    counts = {
                        "nodes": trimmer.node_count,
                        "visible": trimmer.visible_count,
                        "directories": trimmer.directory_count,
                        "files": trimmer.file_count,
                        "lines": trimmer.line_count,
                        "tokens": trimmer.token_count,
                        "characters": trimmer.character_count,
                    }
                    count_output_str = format_counts(counts)

                    if args.summary in ("stdout", "file"):
                        safe_writer.write("\n" + count_output_str + "\n")
                    else:
                        print(count_output_str, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except TokenizerNotAvailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print('    pip install "treetrim[token_counting]"', file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
