"""Implementation of ignore rules using name patterns with a `*` wildcard."""

import logging
import re
from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from pathspec.pattern import Pattern, RegexPattern

from treetrim.types import NamePredicate, PathType

from .base_rules import BaseIgnoreRules

logger = logging.getLogger(__name__)

# A lone wildcard would hide every node, so it is never compiled
MATCH_EVERYTHING = "*"


class ExactNamePattern(Pattern):
    """Pattern that matches one display name, ignoring case.

    Example:
        >>> pattern = ExactNamePattern("Build")
        >>> pattern.match_file("build")
        True
        >>> print(pattern.match_file("build.log"))
        None
    """

    def __init__(self, name: str) -> None:
        super().__init__(True)
        self.name = name
        self._folded = name.casefold()

    def match_file(self, file: str) -> Optional[bool]:
        if file.casefold() == self._folded:
            return True
        return None


def wildcard_to_regex(pattern: str) -> str:
    """Translate a `*` wildcard pattern into an anchored regular expression.

    Every regex metacharacter is escaped; each `*` becomes a run of any characters.

    Example:
        >>> wildcard_to_regex("node_*")
        '^node_.*$'
        >>> wildcard_to_regex("*.tar.gz")
        '^.*\\\\.tar\\\\.gz$'
    """
    return "^" + ".*".join(re.escape(part) for part in pattern.split("*")) + "$"


def split_patterns(rules_text: str) -> List[str]:
    """Split free-form pattern text into individual patterns.

    Lines are trimmed; empty lines and a lone `*` are dropped.

    Example:
        >>> split_patterns("  build \\n\\n*\\nnode_*\\n")
        ['build', 'node_*']
    """
    patterns = []
    for line in rules_text.splitlines():
        pattern = line.strip()
        if pattern and pattern != MATCH_EVERYTHING:
            patterns.append(pattern)
    return patterns


def compile_pattern(pattern: str) -> Pattern:
    """Compile a single trimmed pattern into a pathspec Pattern.

    Patterns without a wildcard compare the whole name case-insensitively. Patterns
    with a wildcard are compiled into a case-insensitive anchored regular expression;
    if that expression cannot be compiled, the pattern falls back to exact matching.

    Args:
        pattern: A non-empty pattern, already trimmed.

    Returns:
        A Pattern whose match_file() returns a non-None result for matching names.
    """
    if "*" not in pattern:
        return ExactNamePattern(pattern)

    try:
        regex = re.compile(wildcard_to_regex(pattern), re.IGNORECASE)
    except re.error as e:
        logger.warning("Pattern %r could not be compiled (%s); matching it literally", pattern, e)
        return ExactNamePattern(pattern)
    return RegexPattern(regex, include=True)


def compile_patterns(rules_text: str) -> NamePredicate:
    """Compile pattern text into a reusable name predicate.

    Args:
        rules_text: One pattern per line.

    Returns:
        A function that returns True when a name matches ANY of the patterns.

    Example:
        >>> is_ignored = compile_patterns("node_*\\nREADME.md")
        >>> [name for name in ["node_modules", "nodeX", "readme.md", "other"] if is_ignored(name)]
        ['node_modules', 'readme.md']
    """
    return WildcardIgnoreRules(rules_text).matches


class WildcardIgnoreRules(BaseIgnoreRules):
    """Ignore rules made of display-name patterns with a `*` wildcard.

    Each rule is matched against a node's name, never against a path. A rule without
    a wildcard must equal the whole name; `*` stands for any run of characters. All
    matching is case-insensitive, and a name is ignored if ANY rule matches it.

    Rules can be given as multi-line text (one pattern per line), loaded from files,
    or added and removed one at a time. Blank lines and a lone `*` are skipped, and a
    pattern is kept only once.

    Attributes:
        patterns (List[Tuple[str, Pattern]]): Source text and compiled matcher of each rule.

    Example:
        >>> rules = WildcardIgnoreRules("node_*\\nbuild")
        >>> rules.matches("node_modules")
        True
        >>> rules.matches("BUILD")
        True
        >>> rules.remove_rule("build")
        True
        >>> rules.matches("build")
        False
    """

    def __init__(
        self,
        rules_text: Optional[str] = None,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
    ) -> None:
        """Initialize WildcardIgnoreRules.

        Args:
            rules_text: Optional pattern text, one pattern per line.
            rules_files: Optional path(s) to files containing patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.patterns: List[Tuple[str, Pattern]] = []

        if rules_text is not None:
            self.load_text(rules_text)
        if rules_files is not None:
            self.load_rules(rules_files)

    def matches(self, name: str) -> bool:
        """Check whether a display name matches any loaded pattern.

        Args:
            name: The node name to check.

        Returns:
            bool: True if any pattern matches the whole name, ignoring case.
        """
        return any(pattern.match_file(name) is not None for _, pattern in self.patterns)

    def add_rule(self, rule: str) -> bool:
        """Add a single pattern.

        Surrounding whitespace is trimmed. Empty patterns, a lone `*` and patterns
        already present (compared ignoring case, like matching) are skipped.

        Args:
            rule: The pattern to add, e.g. "node_modules" or "*.log".

        Returns:
            bool: True if the pattern was added.

        Raises:
            ValueError: If the rule spans several lines; use load_text() for those.
        """
        pattern = rule.strip()
        if len(pattern.splitlines()) > 1:
            raise ValueError(f"Ignore pattern must be a single line: {pattern!r}")
        if not pattern or pattern == MATCH_EVERYTHING:
            logger.debug("Skipping ignore pattern %r", rule)
            return False
        if self._contains(pattern):
            logger.debug("Ignore pattern %r is already present", pattern)
            return False
        self.patterns.append((pattern, compile_pattern(pattern)))
        logger.debug("Added ignore pattern %r", pattern)
        return True

    def remove_rule(self, rule: str) -> bool:
        """Remove a single pattern, compared ignoring case.

        Args:
            rule: The pattern text to remove; surrounding whitespace is trimmed.

        Returns:
            bool: True if the pattern was present and has been removed.
        """
        pattern = rule.strip()
        if not self._contains(pattern):
            return False
        folded = pattern.casefold()
        self.patterns = [entry for entry in self.patterns if entry[0].casefold() != folded]
        logger.debug("Removed ignore pattern %r", pattern)
        return True

    def _contains(self, pattern: str) -> bool:
        folded = pattern.casefold()
        return any(text.casefold() == folded for text, _ in self.patterns)

    def load_text(self, rules_text: str) -> None:
        """Add every pattern found in multi-line text, one per line."""
        for pattern in split_patterns(rules_text):
            self.add_rule(pattern)

    def set_text(self, rules_text: str) -> None:
        """Replace all patterns with the ones found in multi-line text."""
        self.clear()
        self.load_text(rules_text)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) with one pattern per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        # Convert to list if it's a single path
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                self.load_text(f.read())

    def clear(self) -> None:
        self.patterns = []

    def has_rules(self) -> bool:
        return bool(self.patterns)

    def get_rules(self) -> List[str]:
        """Get the pattern texts in the order they were added."""
        return [pattern for pattern, _ in self.patterns]

    def to_text(self) -> str:
        """Get the patterns as multi-line text, one per line."""
        return "\n".join(self.get_rules())
