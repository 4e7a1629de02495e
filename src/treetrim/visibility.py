"""Visibility state of the nodes of a decoded tree.

The VisibilityEngine keeps each node's is_active flag consistent with two sources of
change: manual toggles and the ignore rules. A state change on a node always cascades
to its whole subtree, and a node hidden by an ignore rule (its own or an ancestor's)
cannot be switched back on by a toggle until that rule is removed.
"""

import logging
from typing import List, Optional, Sequence

from anytree import PreOrderIter

from treetrim.ignore_rules.wildcard_rules import WildcardIgnoreRules, split_patterns
from treetrim.tree_text.tree_node import TreeNode, iter_forest

logger = logging.getLogger(__name__)


class VisibilityEngine:
    """State machine for the active/inactive flag of every node in a forest.

    Only the is_active attribute of the nodes is ever changed; the structure of the
    forest is left alone.

    Attributes:
        forest (List[TreeNode]): Root nodes of the tree being pruned.
        ignore_rules (WildcardIgnoreRules): The current ignore patterns.

    Example:
        >>> from treetrim.tree_text.hierarchy_builder import parse_tree_text
        >>> forest = parse_tree_text("root\\n├── build\\n│   └── out.o\\n└── src\\n")
        >>> engine = VisibilityEngine(forest)
        >>> engine.set_ignore_text("build")
        >>> build, src = forest[0].children
        >>> build.is_active, build.children[0].is_active, src.is_active
        (False, False, True)
        >>> engine.toggle(build.children[0])
        False
        >>> engine.remove_from_ignore_list("build")
        True
        >>> build.is_active, build.children[0].is_active
        (True, True)
    """

    def __init__(self, forest: Sequence[TreeNode], ignore_rules: Optional[WildcardIgnoreRules] = None) -> None:
        """Initialize the engine and apply the ignore rules to the forest.

        Args:
            forest: Root nodes in document order.
            ignore_rules: Rules deciding which names are ignored. Defaults to an empty
                WildcardIgnoreRules.
        """
        self.forest: List[TreeNode] = list(forest)
        self.ignore_rules = ignore_rules if ignore_rules is not None else WildcardIgnoreRules()
        self.recompute()

    def iter_nodes(self) -> List[TreeNode]:
        return list(iter_forest(self.forest))

    def is_node_or_parent_ignored(self, node: TreeNode) -> bool:
        """Check whether a node or any of its ancestors matches the ignore rules."""
        if self.ignore_rules.matches(node.name):
            return True
        return any(self.ignore_rules.matches(ancestor.name) for ancestor in node.ancestors)

    def toggle(self, node: TreeNode) -> bool:
        """Flip a node's state and cascade the new state to all of its descendants.

        The new state overrides whatever the ignore rules had set on the descendants.
        Turning an inactive node back on is refused while the node or an ancestor is
        matched by an ignore rule; nothing changes in that case.

        Args:
            node: The node to toggle.

        Returns:
            bool: True if the state changed, False if the toggle was refused.
        """
        new_state = not node.is_active
        if new_state and self.is_node_or_parent_ignored(node):
            logger.debug("Not reactivating %r: it or an ancestor is ignored", node.name)
            return False

        node.set_active_recursive(new_state)
        logger.debug("Toggled %r to %s", node.name, "active" if new_state else "inactive")
        return True

    def recompute(self) -> None:
        """Recompute every node's state from the ignore rules alone.

        All nodes are reset to active first, discarding manual toggles. Then every
        node whose name matches a rule is deactivated along with its subtree. The walk
        continues below deactivated nodes, so a match deeper down is still found on
        its own.
        """
        nodes = self.iter_nodes()
        for node in nodes:
            node.is_active = True

        ignored = 0
        for node in nodes:
            if not self.ignore_rules.matches(node.name):
                continue
            ignored += 1
            # An inactive node here was hidden with a matched ancestor's subtree
            if node.is_active:
                node.set_active_recursive(False)
        logger.debug("Recomputed visibility of %d node(s); %d matched ignore rules", len(nodes), ignored)

    def set_ignore_text(self, rules_text: str) -> None:
        """Replace the ignore patterns with multi-line text and recompute all states."""
        self.ignore_rules.set_text(rules_text)
        self.recompute()

    def add_to_ignore_list(self, patterns_text: str) -> bool:
        """Add ignore patterns and hide the subtrees of the nodes they match.

        The text may hold one pattern or several, one per line. Unlike
        set_ignore_text(), the states of other nodes (including manual toggles) are
        left as they are.

        Args:
            patterns_text: The pattern or patterns to add.

        Returns:
            bool: True if at least one pattern was new and has been applied.
        """
        added = [pattern for pattern in split_patterns(patterns_text) if self.ignore_rules.add_rule(pattern)]
        if not added:
            return False

        added_rules = WildcardIgnoreRules("\n".join(added))
        for node in self.iter_nodes():
            if added_rules.matches(node.name):
                node.set_active_recursive(False)
        return True

    def remove_from_ignore_list(self, patterns_text: str) -> bool:
        """Remove ignore patterns and show what they alone were hiding.

        The text may hold one pattern or several, one per line. Every node a removed
        pattern matched is reactivated, with its subtree, unless the node or an
        ancestor is still matched by a remaining pattern. Inside a reactivated
        subtree, nodes matched by a remaining pattern stay hidden together with their
        own subtrees.

        Args:
            patterns_text: The pattern or patterns to remove.

        Returns:
            bool: True if at least one pattern was present and has been removed.
        """
        removed = [pattern for pattern in split_patterns(patterns_text) if self.ignore_rules.remove_rule(pattern)]
        if not removed:
            return False

        removed_rules = WildcardIgnoreRules("\n".join(removed))
        for node in self.iter_nodes():
            if removed_rules.matches(node.name) and not self.is_node_or_parent_ignored(node):
                self._reactivate(node)
        return True

    def _reactivate(self, node: TreeNode) -> None:
        """Activate a subtree, except the parts hidden by the current ignore rules."""
        for visited in PreOrderIter(node, stop=self._hide_if_ignored):
            visited.is_active = True
        logger.debug("Reactivated %r", node.name)

    def _hide_if_ignored(self, node: TreeNode) -> bool:
        if self.ignore_rules.matches(node.name):
            node.set_active_recursive(False)
            return True
        return False
