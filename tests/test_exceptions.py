"""Tests for treetrim's exception types."""

import pytest

from treetrim.exceptions import TokenizationError, TokenizerNotAvailableError, TreeSourceError, UnknownNodeError


def test_tokenizer_not_available_message():
    error = TokenizerNotAvailableError("Custom message.")
    assert str(error).startswith("Custom message.")
    assert "token_counting" in error.message


def test_tokenization_error():
    with pytest.raises(TokenizationError, match="failed"):
        raise TokenizationError("failed")


def test_tree_source_error_attributes():
    error = TreeSourceError("-", "stdin closed")
    assert error.source == "-"
    assert error.reason == "stdin closed"
    assert str(error) == "Cannot read tree text from -: stdin closed"


def test_unknown_node_error_is_a_key_error():
    with pytest.raises(KeyError):
        raise UnknownNodeError("docs")
    assert str(UnknownNodeError("docs")) == "No node matches docs"
    assert UnknownNodeError(7).node == "7"
