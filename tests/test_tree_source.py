"""Tests for reading tree text from files and stdin."""

import io
from unittest.mock import MagicMock, patch

import pytest

from treetrim.exceptions import TreeSourceError
from treetrim.tree_source import read_tree_text


def test_read_from_file(tmp_path, project_tree_text):
    source = tmp_path / "tree.txt"
    source.write_text(project_tree_text, encoding="utf-8")

    assert read_tree_text(source) == project_tree_text
    assert read_tree_text(str(source)) == project_tree_text


def test_read_from_stdin(simple_tree_text):
    assert read_tree_text("-", stdin=io.StringIO(simple_tree_text)) == simple_tree_text


def test_stdin_is_default(simple_tree_text):
    with patch("sys.stdin", io.StringIO(simple_tree_text)):
        assert read_tree_text() == simple_tree_text


def test_missing_file(tmp_path):
    with pytest.raises(TreeSourceError) as exc_info:
        read_tree_text(tmp_path / "missing.txt")
    assert exc_info.value.reason == "file not found"
    assert "missing.txt" in str(exc_info.value)


def test_directory_is_rejected(tmp_path):
    with pytest.raises(TreeSourceError, match="is a directory"):
        read_tree_text(tmp_path)


def test_invalid_utf8(tmp_path):
    source = tmp_path / "tree.txt"
    source.write_bytes(b"root\n\xff\xfe\n")

    with pytest.raises(TreeSourceError) as exc_info:
        read_tree_text(source)
    assert exc_info.value.source == str(source)


def test_permission_denied(tmp_path):
    source = tmp_path / "tree.txt"
    source.write_text("root\n", encoding="utf-8")

    with patch("pathlib.Path.read_text", side_effect=PermissionError):
        with pytest.raises(TreeSourceError, match="permission denied"):
            read_tree_text(source)


def test_stdin_read_error():
    stdin = MagicMock()
    stdin.read.side_effect = OSError("stdin closed")

    with pytest.raises(TreeSourceError) as exc_info:
        read_tree_text("-", stdin=stdin)
    assert exc_info.value.source == "-"
    assert exc_info.value.reason == "stdin closed"
