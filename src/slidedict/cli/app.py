"""CLI application entry point for slidedict.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer

from slidedict.cli.output import (
    print_cancellation_summary,
    print_error,
    print_skipped,
    print_summary,
)
from slidedict.config import get_default_settings
from slidedict.core import SlideDictionaryBuilder
from slidedict.exceptions import InputError, SlideDictError
from slidedict.io import KeyboardLayoutReader, SlideDictionaryWriter, WordListReader

# Create the Typer app
app = typer.Typer(
    name="slidedict",
    help="Build a gesture-typing slide dictionary from a keyboard layout and a word list.",
    add_completion=False,
)


@app.command()
def build(
    keyboard_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the keyboard layout XML file",
            show_default=False,
        ),
    ],
    wordlist_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the word list (XML, or .txt with one word per line)",
            show_default=False,
        ),
    ],
) -> None:
    """Write one row of slide parameters per word to stdout.

    Each row holds the word and 17 tab-separated parameters. Words without
    parameters (no letters, a single letter, or a letter missing from the
    layout) are reported on stderr as "ignoring word <word>".

    Example:
        slidedict keyboard.xml words.xml > slide.dict
    """
    settings = get_default_settings()

    try:
        layout = KeyboardLayoutReader(keyboard_file).load()
        words = WordListReader(wordlist_file).load()
    except InputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    builder = SlideDictionaryBuilder(settings)
    writer = SlideDictionaryWriter(sys.stdout)

    try:
        stats = builder.build(
            layout=layout,
            words=words,
            writer=writer,
            skip_callback=print_skipped,
        )
    except KeyboardInterrupt:
        print_cancellation_summary(
            processed=writer.row_count,
            cancelled=len(words) - writer.row_count,
        )
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except SlideDictError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_summary(stats)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
