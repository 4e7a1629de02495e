from abc import ABC, abstractmethod
from typing import Sequence, Union

from treetrim.types import PathType


class BaseIgnoreRules(ABC):
    """
    Abstract base class defining the interface for node ignore rules.

    This class serves as a contract for rule sets that decide which tree nodes should be
    hidden, based on the node's display name. All implementations must provide logic for
    checking a single name. Loading rules from files and adding or removing individual
    rules are optional capabilities that depend on the rule type.

    Example:
        >>> from treetrim.ignore_rules.wildcard_rules import WildcardIgnoreRules
        >>> rules = WildcardIgnoreRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.matches('module.PYC')
        True
        >>> rules.matches('module.py')
        False
    """

    @abstractmethod
    def matches(self, name: str) -> bool:
        """
        Determine if a node with the given display name should be ignored.

        Args:
            name (str): The decoded display name of a node (not a path).

        Returns:
            bool: True if the name matches any rule, False otherwise.
        """
        pass

    def __call__(self, name: str) -> bool:
        return self.matches(name)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load ignore rules from one or more files.

        Rule types that don't support file operations use this default implementation,
        which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing ignore rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> bool:
        """
        Add a single ignore rule directly.

        Args:
            rule (str): The rule to add, in the format of the specific implementation.

        Returns:
            bool: True if the rule was added, False if it was skipped.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def remove_rule(self, rule: str) -> bool:
        """
        Remove a single ignore rule.

        Args:
            rule (str): The rule to remove.

        Returns:
            bool: True if the rule was present and has been removed.

        Raises:
            NotImplementedError: If this rule type doesn't support removing individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support removing individual rules.")

    def has_rules(self) -> bool:
        """Return True if at least one rule is configured."""
        return True
