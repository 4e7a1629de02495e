"""Rich preview of a forest and the visibility state of its nodes."""

from typing import Dict, Sequence

from rich.text import Text
from rich.tree import Tree

from treetrim.tree_text.tree_node import TreeNode, iter_forest

DIRECTORY_STYLE = "bold bright_blue"
FILE_STYLE = "default"
INACTIVE_STYLE = "dim strike"
ID_STYLE = "cyan"


def node_label(node: TreeNode) -> Text:
    """Build the label of one node: its id in brackets, then its name.

    Directories are bold; inactive nodes are dimmed and struck through.
    """
    label = Text()
    label.append(f"[{node.node_id}] ", style=ID_STYLE)
    style = DIRECTORY_STYLE if node.is_dir else FILE_STYLE
    if not node.is_active:
        style = f"{style} {INACTIVE_STYLE}"
    label.append(node.name, style=style)
    return label


def render_forest(forest: Sequence[TreeNode], title: str = "tree") -> Tree:
    """Build a rich Tree showing every node of a forest, hidden ones included.

    Unlike the serialized output, inactive nodes and their subtrees are kept so the
    user can see what is hidden and which ids to toggle.

    Args:
        forest: Root nodes in document order.
        title: Label of the top of the preview when the forest has several roots.

    Returns:
        A rich Tree ready to be printed with a rich Console.

    Example:
        >>> from rich.console import Console
        >>> from treetrim.tree_text.hierarchy_builder import parse_tree_text
        >>> console = Console(width=40, color_system=None)
        >>> with console.capture() as capture:
        ...     console.print(render_forest(parse_tree_text("root\\n└── a.txt\\n")))
        >>> print(capture.get().rstrip())
        [0] root
        └── [1] a.txt
    """
    if len(forest) == 1:
        top = Tree(node_label(forest[0]), guide_style=DIRECTORY_STYLE)
        branches: Dict[TreeNode, Tree] = {forest[0]: top}
        nodes = iter_forest(forest[0].children)
    else:
        top = Tree(Text(title, style=DIRECTORY_STYLE), guide_style=DIRECTORY_STYLE)
        branches = {}
        nodes = iter_forest(forest)

    # Parents are visited first, so their branch already exists
    for node in nodes:
        branches[node] = branches.get(node.parent, top).add(node_label(node))

    return top
