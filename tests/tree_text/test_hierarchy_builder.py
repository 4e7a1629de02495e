"""Unit tests for building the node hierarchy from tree text."""

from treetrim.tree_text.hierarchy_builder import build_forest, parse_tree_text
from treetrim.tree_text.tree_node import iter_forest


def _parent_names(forest):
    return {node.name: (node.parent.name if node.parent else None) for node in iter_forest(forest)}


def test_parse_simple_tree(simple_tree_text):
    """Test the canonical three-level example."""
    forest = parse_tree_text(simple_tree_text)

    assert len(forest) == 1
    root = forest[0]
    assert root.name == "root"
    assert root.depth == 0
    assert root.parent is None

    a, c = root.children
    assert (a.name, a.depth) == ("a", 1)
    assert (c.name, c.depth) == ("c", 1)
    assert [(child.name, child.depth) for child in a.children] == [("b", 2)]
    assert c.children == ()


def test_parent_attribution(project_tree_text):
    """Every node is attached to the nearest preceding node with a smaller depth."""
    forest = parse_tree_text(project_tree_text)

    assert _parent_names(forest) == {
        "my-project": None,
        "build": "src",  # the later "build" overwrites the top-level one in this mapping
        "lib": "build",
        "core.o": "lib",
        "main.o": "build",
        "node_modules": "my-project",
        "left-pad": "node_modules",
        "index.js": "left-pad",
        "nodeX": "node_modules",
        "src": "my-project",
        "script.sh": "build",
        "main.py": "src",
        "utils": "src",
        "helpers.py": "utils",
        "README.md": "my-project",
    }
    top_level = [child.name for child in forest[0].children]
    assert top_level == ["build", "node_modules", "src", "README.md"]


def test_depth_increases_along_edges(project_tree_text):
    """A child is always deeper than its parent."""
    for node in iter_forest(parse_tree_text(project_tree_text)):
        if node.parent is not None:
            assert node.depth > node.parent.depth


def test_node_ids_follow_document_order(project_tree_text):
    """Node ids are the sequence numbers of the non-blank lines."""
    nodes = list(iter_forest(parse_tree_text(project_tree_text)))
    assert [node.node_id for node in nodes] == list(range(len(nodes)))


def test_blank_lines_are_dropped():
    """Blank and whitespace-only lines produce no nodes and consume no ids."""
    forest = build_forest(["root", "", "   ", "└── a", "\t"])

    assert [node.name for node in iter_forest(forest)] == ["root", "a"]
    assert forest[0].children[0].node_id == 1


def test_skipped_levels_attach_to_nearest_shallower_node():
    """A jump of more than one level still attaches to the last open ancestor."""
    forest = build_forest(["root", "│   │   └── deep", "└── shallow"])

    root = forest[0]
    deep, shallow = root.children
    assert (deep.name, deep.depth) == ("deep", 3)
    assert deep.parent is root
    assert shallow.parent is root


def test_multiple_roots():
    """Several connector-less lines produce several roots in order."""
    forest = build_forest(["first", "└── child", "second", "third"])

    assert [root.name for root in forest] == ["first", "second", "third"]
    assert [child.name for child in forest[0].children] == ["child"]


def test_orphan_connector_lines_become_roots():
    """Lines with connectors before any root become roots themselves."""
    forest = build_forest(["├── a", "└── b"])

    assert [(root.name, root.depth) for root in forest] == [("a", 1), ("b", 1)]


def test_directory_heuristic_applied():
    """Nodes carry the directory guess made from their names."""
    forest = parse_tree_text("root\n├── src\n└── setup.py\n")

    src, setup = forest[0].children
    assert src.is_dir
    assert not setup.is_dir


def test_windows_line_endings():
    """Carriage returns do not end up in node names."""
    forest = parse_tree_text("root\r\n└── a\r\n")

    assert forest[0].name == "root"
    assert forest[0].children[0].name == "a"


def test_empty_input():
    """Empty input gives an empty forest."""
    assert parse_tree_text("") == []
    assert build_forest([]) == []
