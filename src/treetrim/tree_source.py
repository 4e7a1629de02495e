"""Reading tree text from files or standard input."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from treetrim.exceptions import TreeSourceError
from treetrim.types import PathType

logger = logging.getLogger(__name__)

# Source name that selects standard input
STDIN_SOURCE = "-"


def read_tree_text(source: PathType = STDIN_SOURCE, stdin: Optional[TextIO] = None) -> str:
    """Read tree text in one piece from a file or from standard input.

    The tree text is produced by some other tool (for example `tree` or a directory
    listing feature); this function only fetches it. The whole input is read before
    anything is decoded.

    Args:
        source: Path of a UTF-8 text file, or "-" for standard input. Defaults to "-".
        stdin: Stream to use for "-". Defaults to sys.stdin.

    Returns:
        The tree text exactly as read.

    Raises:
        TreeSourceError: If the file is missing, unreadable, or not valid UTF-8.

    Example:
        >>> import io
        >>> read_tree_text("-", stdin=io.StringIO("root\\n└── a\\n"))
        'root\\n└── a\\n'
    """
    if os.fspath(source) == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin
        try:
            text = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TreeSourceError(STDIN_SOURCE, str(e))
        logger.debug("Read %d characters of tree text from stdin", len(text))
        return text

    path = Path(source)
    if path.is_dir():
        raise TreeSourceError(str(path), "is a directory, expected a tree text file")
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise TreeSourceError(str(path), "file not found")
    except PermissionError:
        raise TreeSourceError(str(path), "permission denied")
    except (OSError, UnicodeDecodeError) as e:
        raise TreeSourceError(str(path), str(e))
    logger.debug("Read %d characters of tree text from %s", len(text), path)
    return text
