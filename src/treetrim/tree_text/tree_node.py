"""Node representation for entries decoded from tree text."""

from itertools import chain
from typing import Callable, Iterable, Iterator, Optional

from anytree import Node, PreOrderIter


class TreeNode(Node):  # type: ignore
    """Node class representing one line of a decoded directory tree.

    Extends anytree.Node with the fields decoded from the line. Besides the label,
    each node keeps the exact prefix and connector text it was read with, so the
    visible subset of a tree can be written back without reformatting. Parent and
    children links, ancestors and descendants are inherited from anytree.Node.

    Attributes:
        node_id (int): Sequence index of the line the node was decoded from.
        name (str): The decoded display label.
        depth (int): Indentation depth read from the line; 0 for root-level lines.
        is_dir (bool): True if the label looks like a directory.
        is_active (bool): Visibility flag; inactive nodes are left out of the output.
        prefix (str): Leading whitespace and vertical bars, verbatim.
        connector (str): Connector glyph plus trailing whitespace, verbatim.
        children (tuple[TreeNode]): Child nodes in document order (inherited from anytree.Node).

    Example:
        >>> root = TreeNode(0, "root", is_dir=True)
        >>> child = TreeNode(1, "file.txt", depth=1, connector="└── ", parent=root)
        >>> child.parent.name
        'root'
        >>> [node.name for node in root.children]
        ['file.txt']
    """

    def __init__(
        self,
        node_id: int,
        name: str,
        depth: int = 0,
        is_dir: bool = False,
        prefix: str = "",
        connector: str = "",
        parent: Optional["TreeNode"] = None,
        is_active: bool = True,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            node_id: Sequence index of the source line.
            name: The decoded display label.
            depth: Indentation depth. Defaults to 0.
            is_dir: Whether the node looks like a directory. Defaults to False.
            prefix: Verbatim leading whitespace and vertical bars. Defaults to "".
            connector: Verbatim connector glyph and trailing whitespace. Defaults to "".
            parent: The parent node; the new node becomes its last child. Defaults to None.
            is_active: Initial visibility. Defaults to True.
        """
        self._depth = depth
        super().__init__(name, parent)
        self.node_id = node_id
        self.is_dir = is_dir
        self.prefix = prefix
        self.connector = connector
        self.is_active = is_active

    @property
    def depth(self) -> int:
        """Indentation depth of the source line.

        Replaces anytree's ancestor count: a line may be indented several levels
        deeper than its parent, and a forest may start at a depth above 0.
        """
        return self._depth

    def set_active_recursive(self, is_active: bool) -> None:
        """Set the visibility of this node and its entire subtree."""
        for node in PreOrderIter(self):
            node.is_active = is_active

    def render_line(self) -> str:
        """Return the node's line exactly as it appeared in the source text, minus trailing blanks."""
        return f"{self.prefix}{self.connector}{self.name}"

    def __repr__(self) -> str:
        state = "active" if self.is_active else "inactive"
        return f"TreeNode({self.node_id}, {self.name!r}, depth={self.depth}, {state})"


def iter_forest(
    forest: Iterable[TreeNode], stop: Optional[Callable[[TreeNode], bool]] = None
) -> Iterator[TreeNode]:
    """Iterate over every tree of a forest in document order.

    Args:
        forest: Root nodes, in order.
        stop: Optional function; when it returns True for a node, that node and its
            subtree are skipped (passed on to anytree.PreOrderIter).

    Yields:
        Each visited node, parents before their children.

    Example:
        >>> root = TreeNode(0, "root")
        >>> a = TreeNode(1, "a", depth=1, parent=root)
        >>> b = TreeNode(2, "b", depth=2, parent=a)
        >>> other = TreeNode(3, "other")
        >>> [n.name for n in iter_forest([root, other])]
        ['root', 'a', 'b', 'other']
        >>> [n.name for n in iter_forest([root, other], stop=lambda n: n.name == "a")]
        ['root', 'other']
    """
    return chain.from_iterable(PreOrderIter(root, stop=stop) for root in forest)
