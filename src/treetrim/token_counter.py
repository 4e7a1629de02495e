"""Counter for tokens, lines, and characters in the pruned tree text.

Pruned trees usually end up pasted into documentation or a language model prompt,
so the size of the output matters. Lines and characters are always counted; tokens
are counted with OpenAI's tiktoken library when a model name is given and the
optional 'token_counting' extra is installed.
"""

import importlib.util
from collections import namedtuple
from typing import Any, Optional

from treetrim.exceptions import TokenizationError, TokenizerNotAvailableError

CountResult = namedtuple("CountResult", ["lines", "tokens", "characters"])


def check_tiktoken_available() -> bool:
    """Check if the tiktoken library is available.

    Returns:
        True if tiktoken is installed, False otherwise.
    """
    return importlib.util.find_spec("tiktoken") is not None


class TokenCounter:
    """Running totals of lines, characters and (optionally) tokens.

    Attributes:
        model (Optional[str]): Model whose tokenizer is used, or None if token counting is disabled.
        encoder (Optional[Any]): The tiktoken encoder, or None.

    Example:
        >>> counter = TokenCounter()
        >>> result = counter.count("root\\n└── a\\n")
        >>> result.lines, result.characters, result.tokens
        (2, 11, None)

    Raises:
        ValueError: If the specified model's tokenizer cannot be loaded.
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
    """

    def __init__(self, model: Optional[str] = None):
        """Initialize the counter.

        Args:
            model: The model whose tokenizer to use (e.g. "gpt-4"), or None to count
                only lines and characters.

        Raises:
            ValueError: If the specified model's tokenizer cannot be loaded.
            TokenizerNotAvailableError: If tiktoken is not installed and model is specified.
        """
        self.model = model
        self.encoder: Optional[Any] = None

        if self.model is not None:
            if not check_tiktoken_available():
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder(self.model)

        self.reset_counts()

    @staticmethod
    def _get_encoder(model: str) -> Any:
        # Import tiktoken here to avoid import errors when not available
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Consider using a well-supported "
                "model like 'gpt-4' (cl100k_base encoding) for an approximate token count."
            )

    def count(self, text: str) -> CountResult:
        """Count lines, tokens, and characters in text and add them to the totals.

        Args:
            text: The text to analyze.

        Returns:
            CountResult: lines (newlines in text), tokens (None when disabled) and characters.

        Raises:
            TokenizationError: If token counting is enabled but fails.
        """
        lines = text.count("\n")
        chars = len(text)
        tokens = None

        self._total_lines += lines
        self._total_characters += chars

        if self.encoder is not None:
            try:
                tokens = len(self.encoder.encode(text))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {str(e)}")
            self._total_tokens = (self._total_tokens or 0) + tokens

        return CountResult(lines=lines, tokens=tokens, characters=chars)

    def get_total_tokens(self) -> Optional[int]:
        """Total tokens counted so far, or None if token counting is disabled."""
        return self._total_tokens

    def get_total_lines(self) -> int:
        return self._total_lines

    def get_total_characters(self) -> int:
        return self._total_characters

    def reset_counts(self) -> None:
        """Reset all running totals while keeping the tokenizer configuration."""
        self._total_tokens: Optional[int] = None if self.encoder is None else 0
        self._total_lines = 0
        self._total_characters = 0
