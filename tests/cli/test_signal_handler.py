"""Unit tests for the signal handler module in the treetrim CLI."""

import os
import signal
from unittest.mock import patch

import pytest

from treetrim.cli.signal_handler import SIGPIPE, SignalHandler, cleanup, setup_signal_handling, signal_handler


@pytest.fixture
def mock_signal():
    with patch("signal.signal", autospec=True) as mock:
        yield mock


@pytest.fixture
def fresh_signal_handler():
    """A SignalHandler separate from the module singleton."""
    return SignalHandler()


def test_initial_state(fresh_signal_handler):
    assert not fresh_signal_handler.sigpipe_received.is_set()
    assert not fresh_signal_handler.sigint_received.is_set()
    assert not fresh_signal_handler.interrupted()
    assert fresh_signal_handler.exit_code() is None


def test_handle_sigint(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle_sigint(signal.SIGINT, None)

    assert fresh_signal_handler.interrupted()
    assert fresh_signal_handler.exit_code() == 130
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


@pytest.mark.skipif(SIGPIPE is None, reason="SIGPIPE is not available on this platform")
def test_handle_sigpipe(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle_sigpipe(SIGPIPE, None)

    assert fresh_signal_handler.interrupted()
    assert fresh_signal_handler.exit_code() == 141


def test_sigpipe_exit_code_wins(fresh_signal_handler, mock_signal):
    fresh_signal_handler.sigint_received.set()
    fresh_signal_handler.sigpipe_received.set()
    assert fresh_signal_handler.exit_code() == 141


def test_setup_signal_handling(mock_signal):
    setup_signal_handling()

    mock_signal.assert_any_call(signal.SIGINT, signal_handler.handle_sigint)
    if SIGPIPE is not None:
        mock_signal.assert_any_call(SIGPIPE, signal_handler.handle_sigpipe)


def test_cleanup_without_interruption():
    with patch("treetrim.cli.signal_handler.os") as mock_os:
        cleanup()
    mock_os.dup2.assert_not_called()


def test_cleanup_after_interruption():
    with (
        patch("treetrim.cli.signal_handler.signal_handler") as mock_handler,
        patch("treetrim.cli.signal_handler.os", autospec=True) as mock_os,
        patch("sys.stdout") as mock_stdout,
    ):
        mock_handler.interrupted.return_value = True
        mock_os.open.return_value = 123
        mock_os.devnull = os.devnull
        mock_os.O_WRONLY = os.O_WRONLY
        mock_stdout.fileno.return_value = 1

        cleanup()

    mock_os.open.assert_called_once_with(os.devnull, os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)
