"""Command-line interface for slidedict.

This module provides the CLI using Typer, with rich diagnostics on stderr
so that stdout carries nothing but dictionary rows.
"""

from slidedict.cli.app import cli, main

__all__ = ["cli", "main"]
