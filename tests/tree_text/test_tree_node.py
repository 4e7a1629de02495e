"""Unit tests for the TreeNode class and forest traversal."""

from anytree import Node

from treetrim.tree_text.tree_node import TreeNode, iter_forest


def test_tree_node_initialization():
    """Test defaults of a freshly created node."""
    node = TreeNode(7, "file.txt", depth=2, prefix="│   ", connector="└── ")

    assert isinstance(node, Node)
    assert node.node_id == 7
    assert node.name == "file.txt"
    assert node.depth == 2
    assert not node.is_dir
    assert node.is_active
    assert node.children == ()
    assert node.parent is None
    assert node.is_root
    assert node.render_line() == "│   └── file.txt"


def test_tree_node_parent_child():
    """Test that passing a parent attaches the child in order."""
    root = TreeNode(0, "root", is_dir=True)
    first = TreeNode(1, "first", depth=1, parent=root)
    second = TreeNode(2, "second", depth=1, parent=root)

    assert root.children == (first, second)
    assert first.parent is root
    assert not first.is_root


def test_depth_is_indentation_not_ancestor_count():
    """A line indented several levels below its parent keeps its own depth."""
    root = TreeNode(0, "root")
    deep = TreeNode(1, "deep", depth=3, parent=root)

    assert deep.depth == 3
    assert len(deep.ancestors) == 1


def test_ancestors():
    """Test walking from a node up to its root."""
    root = TreeNode(0, "root")
    a = TreeNode(1, "a", depth=1, parent=root)
    b = TreeNode(2, "b", depth=2, parent=a)

    assert [node.name for node in b.ancestors] == ["root", "a"]
    assert root.ancestors == ()


def test_descendants_and_recursive_state():
    """Test that a state change reaches the whole subtree and nothing else."""
    root = TreeNode(0, "root")
    a = TreeNode(1, "a", depth=1, parent=root)
    b = TreeNode(2, "b", depth=2, parent=a)
    c = TreeNode(3, "c", depth=1, parent=root)

    assert root.descendants == (a, b, c)

    a.set_active_recursive(False)
    assert [node.is_active for node in (root, a, b, c)] == [True, False, False, True]


def test_iter_forest_visits_every_root():
    first = TreeNode(0, "first")
    TreeNode(1, "child", depth=1, parent=first)
    second = TreeNode(2, "second")

    assert [node.node_id for node in iter_forest([first, second])] == [0, 1, 2]
    assert list(iter_forest([])) == []


def test_iter_forest_stop():
    """Nodes for which stop returns True are skipped with their subtrees."""
    root = TreeNode(0, "root")
    a = TreeNode(1, "a", depth=1, parent=root)
    TreeNode(2, "b", depth=2, parent=a)
    TreeNode(3, "c", depth=1, parent=root)

    names = [node.name for node in iter_forest([root], stop=lambda n: n.name == "a")]
    assert names == ["root", "c"]


def test_repr():
    node = TreeNode(4, "src", depth=1)
    node.is_active = False
    assert repr(node) == "TreeNode(4, 'src', depth=1, inactive)"
