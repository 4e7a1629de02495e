"""Interactive pruning of directory tree text.

This module provides the TreeTrimmer class, which ties together decoding of tree
text, the ignore patterns, the visibility engine and the re-encoding of the visible
nodes. It is the object a user interface (or the command-line interface) holds on to
while the user toggles nodes and edits patterns.
"""

import logging
from typing import Dict, Iterator, List, Optional

from treetrim.exceptions import TokenizationError, UnknownNodeError
from treetrim.ignore_rules.wildcard_rules import WildcardIgnoreRules
from treetrim.token_counter import TokenCounter
from treetrim.tree_text.hierarchy_builder import parse_tree_text
from treetrim.tree_text.serializer import stream_tree_text
from treetrim.tree_text.tree_node import TreeNode, iter_forest
from treetrim.visibility import VisibilityEngine

logger = logging.getLogger(__name__)


class TreeTrimmer:
    """Pruning session over one piece of tree text.

    The forest is rebuilt from scratch whenever new tree text is loaded; the ignore
    patterns survive reloads and are applied to the new forest right away. Nodes are
    addressed by their id (the index of their line among the non-blank input lines).

    Attributes:
        ignore_rules (WildcardIgnoreRules): The current ignore patterns.

    Example:
        >>> trimmer = TreeTrimmer("root\\n├── node_modules\\n│   └── x.js\\n└── src\\n")
        >>> trimmer.set_ignore_patterns("node_*")
        >>> print(trimmer.filtered_text, end="")
        root
        └── src
        >>> trimmer.toggle(3)
        True
        >>> print(trimmer.filtered_text, end="")
        root
    """

    def __init__(
        self,
        tree_text: str = "",
        *,
        ignore_rules: Optional[WildcardIgnoreRules] = None,
        tokenizer_model: Optional[str] = None,
    ) -> None:
        """Initialize the session and decode the initial tree text.

        Args:
            tree_text: Tree text to decode. Defaults to an empty tree.
            ignore_rules: Ignore patterns to start with. Defaults to no patterns.
            tokenizer_model: Model to use for token counting. If None, token counting is disabled.

        Raises:
            TokenizerNotAvailableError: If a tokenizer model is given but tiktoken is not installed.
            ValueError: If the tokenizer for the model cannot be loaded.
        """
        self.ignore_rules = ignore_rules if ignore_rules is not None else WildcardIgnoreRules()
        self._counter = TokenCounter(model=tokenizer_model)
        self._forest: List[TreeNode] = []
        self._nodes: Dict[int, TreeNode] = {}
        self._engine = VisibilityEngine(self._forest, self.ignore_rules)
        self.load(tree_text)

    def load(self, tree_text: str) -> None:
        """Replace the current tree with newly decoded tree text.

        All nodes start active, then the current ignore patterns are applied. Manual
        toggles made on the previous tree are discarded with it.
        """
        self._forest = parse_tree_text(tree_text)
        self._nodes = {node.node_id: node for node in iter_forest(self._forest)}
        self._engine = VisibilityEngine(self._forest, self.ignore_rules)
        self._counter.reset_counts()
        logger.debug("Loaded tree with %d node(s)", len(self._nodes))

    @property
    def forest(self) -> List[TreeNode]:
        """Root nodes of the current tree, in document order."""
        return self._forest

    @property
    def nodes(self) -> List[TreeNode]:
        """All nodes of the current tree, in document order."""
        return [self._nodes[node_id] for node_id in sorted(self._nodes)]

    def get_node(self, node_id: int) -> TreeNode:
        """Look up a node by id.

        Raises:
            UnknownNodeError: If no node has this id.
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id)

    def find_nodes(self, name: str) -> List[TreeNode]:
        """Find every node with the given name (ignoring case), in document order."""
        folded = name.strip().casefold()
        return [node for node in self.nodes if node.name.casefold() == folded]

    def toggle(self, node_id: int) -> bool:
        """Toggle a node and its subtree.

        Returns:
            bool: True if the state changed, False if reactivation was refused because
                the node or an ancestor is ignored.

        Raises:
            UnknownNodeError: If no node has this id.
        """
        return self._engine.toggle(self.get_node(node_id))

    def is_node_or_parent_ignored(self, node_id: int) -> bool:
        return self._engine.is_node_or_parent_ignored(self.get_node(node_id))

    def set_ignore_patterns(self, rules_text: str) -> None:
        """Replace the ignore patterns and recompute every node's state.

        Manual toggles are discarded: every node becomes active again, then the nodes
        matching a pattern are hidden with their subtrees.
        """
        self._engine.set_ignore_text(rules_text)

    def add_ignore_pattern(self, pattern: str) -> bool:
        """Add ignore patterns, one per line, keeping manual toggles elsewhere."""
        return self._engine.add_to_ignore_list(pattern)

    def remove_ignore_pattern(self, pattern: str) -> bool:
        """Remove ignore patterns, one per line, and show what only they were hiding."""
        return self._engine.remove_from_ignore_list(pattern)

    @property
    def node_count(self) -> int:
        """Number of nodes in the tree, hidden ones included."""
        return len(self._nodes)

    @property
    def visible_count(self) -> int:
        """Number of nodes that appear in the filtered text."""
        return sum(1 for _ in iter_forest(self._forest, stop=lambda n: not n.is_active))

    @property
    def directory_count(self) -> int:
        """Number of visible directories, excluding the label line of the tree."""
        return sum(1 for node in self._visible_nodes() if node.is_dir)

    @property
    def file_count(self) -> int:
        """Number of visible files."""
        return sum(1 for node in self._visible_nodes() if not node.is_dir)

    def _visible_nodes(self) -> Iterator[TreeNode]:
        for node in iter_forest(self._forest, stop=lambda n: not n.is_active):
            if not (node.depth == 0 and node is self._forest[0]):
                yield node

    @property
    def token_count(self) -> Optional[int]:
        """Tokens in the last streamed output, or None if token counting is disabled."""
        return self._counter.get_total_tokens()

    @property
    def line_count(self) -> int:
        """Lines in the last streamed output."""
        return self._counter.get_total_lines()

    @property
    def character_count(self) -> int:
        """Characters in the last streamed output."""
        return self._counter.get_total_characters()

    def stream_filtered_tree(self) -> Iterator[str]:
        """Stream the visible part of the tree line by line.

        The line, character and token counts are reset when streaming starts and
        describe the streamed output once it is exhausted.

        Yields:
            Lines of tree text, each with a trailing newline.
        """
        self._counter.reset_counts()
        for line in stream_tree_text(self._forest):
            line_with_newline = line + "\n"
            try:
                self._counter.count(line_with_newline)
            except TokenizationError as e:
                # Continue even if token counting fails
                logger.warning("%s", e)
            yield line_with_newline

    @property
    def filtered_text(self) -> str:
        """The visible part of the tree as a complete string."""
        return "".join(self.stream_filtered_tree())
