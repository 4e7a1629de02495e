"""Directory tree text pruning utilities.

This package decodes directory trees drawn with box-drawing connectors,
lets callers hide parts of them by toggling nodes or by ignore patterns, and
re-emits only the visible lines for pasting into documentation.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treetrim")
except PackageNotFoundError:
    __version__ = "unknown"
