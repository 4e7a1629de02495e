"""Reconstruction of the node hierarchy from tree text lines."""

import logging
from typing import Iterable, List

from treetrim.tree_text.line_classifier import classify, is_directory_name
from treetrim.tree_text.tree_node import TreeNode

logger = logging.getLogger(__name__)


def build_forest(lines: Iterable[str]) -> List[TreeNode]:
    """Build a forest of TreeNodes from tree text lines.

    Blank and whitespace-only lines are dropped first; the remaining lines are
    numbered in order and that number becomes the node id. A stack holds the nodes
    that are still open as potential ancestors. Before a node is attached, every
    stacked node at the same or a deeper level is popped; whatever is left on top is
    the parent. With an empty stack the node starts a new root.

    Args:
        lines: Lines of tree text in document order, without line breaks.

    Returns:
        The root nodes in document order. The rest of the tree is reachable
        through each node's children.

    Example:
        >>> roots = build_forest(["root", "├── a", "│   └── b", "└── c"])
        >>> [root.name for root in roots]
        ['root']
        >>> [(child.name, child.depth) for child in roots[0].children]
        [('a', 1), ('c', 1)]
        >>> roots[0].children[0].children[0].parent.name
        'a'
    """
    roots: List[TreeNode] = []
    open_nodes: List[TreeNode] = []

    content_lines = [line for line in lines if line.strip()]
    for index, line in enumerate(content_lines):
        classified = classify(line)
        node = TreeNode(
            index,
            classified.name,
            depth=classified.depth,
            is_dir=is_directory_name(classified.name),
            prefix=classified.prefix,
            connector=classified.connector,
        )

        # Nodes at the same level or deeper cannot be ancestors of this one
        while open_nodes and open_nodes[-1].depth >= node.depth:
            open_nodes.pop()

        if open_nodes:
            parent = open_nodes[-1]
            node.parent = parent
            logger.debug(
                "Attached %r (depth %d) under %r (depth %d)", node.name, node.depth, parent.name, parent.depth
            )
        else:
            roots.append(node)
            logger.debug("Added %r (depth %d) as root node", node.name, node.depth)

        open_nodes.append(node)

    logger.debug("Parsed %d lines into %d root node(s)", len(content_lines), len(roots))
    return roots


def parse_tree_text(tree_text: str) -> List[TreeNode]:
    """Split tree text into lines and build the forest from them.

    Example:
        >>> roots = parse_tree_text("root\\n├── a\\n└── c\\n")
        >>> [child.name for child in roots[0].children]
        ['a', 'c']
        >>> parse_tree_text("")
        []
    """
    return build_forest(tree_text.splitlines())
