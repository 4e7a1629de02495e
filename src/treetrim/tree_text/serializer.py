"""Re-encoding of the visible part of a forest as tree text."""

from typing import Iterator, Sequence

from treetrim.tree_text.tree_node import TreeNode, iter_forest


def stream_tree_text(forest: Sequence[TreeNode]) -> Iterator[str]:
    """Generate the visible lines of a forest one at a time.

    Nodes are visited in document order. An inactive node is skipped together with
    its whole subtree, whatever the state of its descendants. The first root, when
    it sits at depth 0, is the label line of the tree and is written as its bare
    name; every other node is written with the prefix and connector it was read with.

    Args:
        forest: Root nodes in document order.

    Yields:
        Lines of tree text, without line breaks.

    Example:
        >>> from treetrim.tree_text.hierarchy_builder import build_forest
        >>> forest = build_forest(["root", "├── a", "│   └── b", "└── c"])
        >>> forest[0].children[0].is_active = False
        >>> list(stream_tree_text(forest))
        ['root', '└── c']
    """
    label = forest[0] if forest and forest[0].depth == 0 else None

    for node in iter_forest(forest, stop=lambda n: not n.is_active):
        if node is label:
            yield node.name
        else:
            yield node.render_line()


def serialize(forest: Sequence[TreeNode]) -> str:
    """Get the visible part of a forest as a complete tree text string.

    Every line, including the last, ends with a newline. An empty forest, or one
    whose nodes are all inactive, gives an empty string.

    Example:
        >>> from treetrim.tree_text.hierarchy_builder import parse_tree_text
        >>> text = "root\\n├── a\\n│   └── b\\n└── c\\n"
        >>> serialize(parse_tree_text(text)) == text
        True
    """
    return "".join(f"{line}\n" for line in stream_tree_text(forest))
