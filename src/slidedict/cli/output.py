"""Rich console output helpers for the CLI.

All output here goes to stderr; stdout is reserved for dictionary rows.
"""

from rich.console import Console
from rich.text import Text

from slidedict.utils import ProcessingStats

console = Console(stderr=True)

SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_skipped(word: str, reason: str | None = None) -> None:
    """Report a word that has no slide parameters.

    Args:
        word: The word as it appears in the word list
        reason: Optional explanation, shown after the word
    """
    # Text keeps brackets in words from being read as markup
    line = Text("ignoring word ")
    line.append(word)
    if reason:
        line.append(f" ({reason})", style="dim")
    console.print(line, soft_wrap=True)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(Text.assemble((f"{SYM_ERR} Error: ", "bold red"), message), soft_wrap=True)
    if details:
        console.print(Text(f"  {details}"), soft_wrap=True)


def print_summary(stats: ProcessingStats) -> None:
    """Print the word counts of a finished build."""
    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"[bold green]{SYM_OK}[/bold green] {stats.processed_count} words {SYM_DOT} "
        f"{stats.skipped_count} ignored {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]",
        soft_wrap=True,
    )


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of words written before cancellation
        cancelled: Number of words that were never processed
    """
    console.print(f"{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} words written {SYM_DOT} {cancelled} words cancelled")
