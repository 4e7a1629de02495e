class TokenizerNotAvailableError(Exception):
    """
    Exception raised when attempting to use token counting functionality without the required tokenizer package.

    This exception is raised when the `tiktoken` package is not installed but token counting
    functionality is requested. The tiktoken package is an optional dependency that must be
    explicitly installed using the 'token_counting' extra.

    Attributes:
        message (str): Detailed error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        """
        Initialize the exception with an informative error message.

        Args:
            message (str, optional): Base error message. Defaults to "Tokenizer (tiktoken) is not installed."
                Installation instructions will be appended to this message.
        """
        self.message = (
            f"{message} To enable token counting, install treetrim with the 'token_counting' "
            "extra: 'pip install treetrim[token_counting]'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass


class TreeSourceError(Exception):
    """
    Exception raised when tree text cannot be obtained from its source.

    The decoder itself accepts any text, so the only failure a caller sees comes from
    fetching the text: a missing or unreadable file, a closed stdin, or bytes that are
    not valid UTF-8.

    Attributes:
        source (str): The file path (or "-" for stdin) that could not be read.
        reason (str): Description of the underlying failure.

    Example:
        >>> error = TreeSourceError("tree.txt", "No such file or directory")
        >>> str(error)
        'Cannot read tree text from tree.txt: No such file or directory'
    """

    def __init__(self, source: str, reason: str) -> None:
        """
        Initialize the exception with the failing source and the reason.

        Args:
            source (str): The file path, or "-" for stdin.
            reason (str): Description of the underlying failure.
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read tree text from {source}: {reason}")


class UnknownNodeError(KeyError):
    """
    Exception raised when a node id or name does not exist in the current forest.

    Attributes:
        node (str): The id or name that was looked up.

    Example:
        >>> error = UnknownNodeError(42)
        >>> str(error)
        'No node matches 42'
    """

    def __init__(self, node: object) -> None:
        self.node = str(node)
        super().__init__(self.node)

    def __str__(self) -> str:
        return f"No node matches {self.node}"
