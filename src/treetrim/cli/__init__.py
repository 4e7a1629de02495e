"""Command-line interface for treetrim."""
