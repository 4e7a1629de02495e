"""Decoding and re-encoding of directory tree text.

This package turns box-drawing tree text into a forest of TreeNode objects and
writes the visible part of such a forest back in the same notation.
"""

from .hierarchy_builder import build_forest, parse_tree_text
from .line_classifier import ClassifiedLine, classify, is_directory_name
from .serializer import serialize, stream_tree_text
from .tree_node import TreeNode, iter_forest

__all__ = [
    "ClassifiedLine",
    "TreeNode",
    "build_forest",
    "classify",
    "is_directory_name",
    "iter_forest",
    "parse_tree_text",
    "serialize",
    "stream_tree_text",
]
