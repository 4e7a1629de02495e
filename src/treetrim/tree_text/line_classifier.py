"""Classification of single tree text lines.

Each line of tree text carries its own nesting information: the run of spaces and
vertical bars before the connector glyph. This module turns one line into its depth,
display name, and the verbatim prefix and connector needed to write it back.
"""

import re
from typing import NamedTuple

from treetrim.types import CONNECTOR_GLYPHS, VERTICAL_GLYPH

# Columns occupied by one nesting level in the tree text convention
INDENT_WIDTH = 4

_PREFIX_RE = re.compile(r"^[\s│]*")
_CONNECTOR_RE = re.compile(r"[├└]──\s*")
_LEADING_CONNECTOR_RE = re.compile(r"^[├└]──\s*")


class ClassifiedLine(NamedTuple):
    """Decoded parts of a single tree text line."""

    depth: int
    name: str
    prefix: str
    connector: str


def compute_depth(line: str) -> int:
    """Compute the nesting depth of a tree text line.

    Lines without a connector glyph are roots (depth 0). Otherwise the characters
    before the earliest connector are measured: a plain space counts as one column
    and a vertical bar as a full level of four. The connector itself adds one level.

    Args:
        line: A single line of tree text.

    Returns:
        The non-negative depth of the line.

    Example:
        >>> compute_depth("root")
        0
        >>> compute_depth("├── a")
        1
        >>> compute_depth("│   └── b")
        2
        >>> compute_depth("        └── c")
        3
    """
    positions = [line.find(glyph) for glyph in CONNECTOR_GLYPHS if glyph in line]
    if not positions:
        return 0

    indentation = 0
    for char in line[: min(positions)]:
        if char == " ":
            indentation += 1
        elif char == VERTICAL_GLYPH:
            indentation += INDENT_WIDTH
    return indentation // INDENT_WIDTH + 1


def extract_name(line: str) -> str:
    """Strip indentation and the connector glyph from a line.

    Example:
        >>> extract_name("│   ├── main.py  ")
        'main.py'
    """
    without_prefix = _PREFIX_RE.sub("", line, count=1)
    return _LEADING_CONNECTOR_RE.sub("", without_prefix, count=1).strip()


def extract_prefix(line: str) -> str:
    """Return the leading run of whitespace and vertical bars, verbatim."""
    match = _PREFIX_RE.match(line)
    return match.group(0) if match else ""


def extract_connector(line: str) -> str:
    """Return the connector glyph with its trailing whitespace, or "" if the line has none."""
    match = _CONNECTOR_RE.search(line)
    return match.group(0) if match else ""


def is_directory_name(name: str) -> bool:
    """Guess whether a display name refers to a directory.

    A name is treated as a file only when it has an extension-like dot and does not
    end with a path separator.

    Example:
        >>> is_directory_name("src")
        True
        >>> is_directory_name("setup.py")
        False
        >>> is_directory_name("site.packages/")
        True
    """
    return "." not in name or name.endswith("/") or name.endswith("\\")


def classify(line: str) -> ClassifiedLine:
    """Decode one line of tree text.

    Never fails: a line that does not follow the notation is treated as a root whose
    name is the trimmed line.

    Args:
        line: A single line of tree text, without its line break.

    Returns:
        ClassifiedLine with the depth, name, prefix and connector of the line.

    Example:
        >>> classify("│   └── b")
        ClassifiedLine(depth=2, name='b', prefix='│   ', connector='└── ')
        >>> classify("project")
        ClassifiedLine(depth=0, name='project', prefix='', connector='')
    """
    return ClassifiedLine(
        depth=compute_depth(line),
        name=extract_name(line),
        prefix=extract_prefix(line),
        connector=extract_connector(line),
    )
