"""Unit tests for the argument parser module in the treetrim CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from treetrim.cli.argparser import create_ignore_action, create_parser, node_name, node_reference, validate_args
from treetrim.ignore_rules.wildcard_rules import WildcardIgnoreRules


@pytest.fixture
def ignore_rules():
    return WildcardIgnoreRules()


@pytest.fixture
def parser(ignore_rules):
    return create_parser(ignore_rules)


def test_create_ignore_action():
    """The action class is a proper argparse Action bound to the rules object."""
    mock_rules = MagicMock(spec=WildcardIgnoreRules)
    IgnoreAction = create_ignore_action(mock_rules)
    assert issubclass(IgnoreAction, argparse.Action)

    action = IgnoreAction(option_strings=["-i", "--ignore"], dest="ignore")
    namespace = argparse.Namespace()
    action(MagicMock(), namespace, "build", "-i")

    mock_rules.add_rule.assert_called_once_with("build")
    assert namespace.ignore == ["build"]


def test_ignore_file_action_loads_rules():
    mock_rules = MagicMock(spec=WildcardIgnoreRules)
    IgnoreAction = create_ignore_action(mock_rules)
    action = IgnoreAction(option_strings=["-e", "--ignore-file"], dest="ignore_file")

    action(MagicMock(), argparse.Namespace(), Path("rules.txt"), "--ignore-file")

    mock_rules.load_rules.assert_called_once_with(Path("rules.txt"))


def test_defaults(parser):
    args = parser.parse_args([])

    assert args.source == "-"
    assert args.toggle == []
    assert args.output is None
    assert not args.preview
    assert args.summary is None
    assert args.tokenizer is None
    assert not args.verbose


def test_patterns_keep_command_line_order(tmp_path, parser, ignore_rules):
    rules_file = tmp_path / "rules.txt"
    rules_file.write_text("*.log\n\ndist\n", encoding="utf-8")

    args = parser.parse_args(["tree.txt", "-i", "build", "-e", str(rules_file), "-i", "node_*"])

    assert args.source == "tree.txt"
    assert ignore_rules.get_rules() == ["build", "*.log", "dist", "node_*"]
    assert args.ignore == ["build", "node_*"]


def test_missing_ignore_file(tmp_path, parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-e", str(tmp_path / "missing.txt")])

    assert exc_info.value.code == 2
    assert "Rules file not found" in capsys.readouterr().err


def test_toggle_references(parser):
    args = parser.parse_args(["-x", "4", "--toggle", "docs", "-x", " 12 "])
    assert args.toggle == [4, "docs", 12]


@pytest.mark.parametrize("value, expected", [("0", 0), ("17", 17), ("build", "build"), ("v1.2", "v1.2")])
def test_node_reference(value, expected):
    assert node_reference(value) == expected


def test_node_reference_empty():
    with pytest.raises(argparse.ArgumentTypeError):
        node_reference("  ")


def test_invalid_summary_destination(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["-s", "printer"])


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("treetrim ")


def test_validate_args_summary_file_requires_output(parser):
    with pytest.raises(ValueError, match="requires -o/--output"):
        validate_args(parser.parse_args(["-s", "file"]))

    validate_args(parser.parse_args(["-s", "file", "-o", "out.txt"]))


def test_validate_args_preview_with_summary_file(parser):
    with pytest.raises(ValueError, match="cannot be combined with --preview"):
        validate_args(parser.parse_args(["-p", "-s", "file", "-o", "out.txt"]))

    validate_args(parser.parse_args(["-p", "-s", "stderr"]))


def test_toggle_by_name_keeps_digits(parser):
    """-X keeps numeric values as names and shares the order with -x."""
    args = parser.parse_args(["-x", "2024", "-X", "2024", "--toggle-name", "docs"])
    assert args.toggle == [2024, "2024", "docs"]


def test_node_name():
    assert node_name(" 2024 ") == "2024"
    with pytest.raises(argparse.ArgumentTypeError):
        node_name("")


def test_multi_line_ignore_pattern_is_usage_error(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-i", "build\nnode_modules"])

    assert exc_info.value.code == 2
    assert "single line" in capsys.readouterr().err
