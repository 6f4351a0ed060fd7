"""Dictionary row writer.

Each computed word becomes one line: the word, a tab, then the parameters
separated by tabs with three digits after the decimal point.
"""

from collections.abc import Sequence
from typing import TextIO

from slidedict.domain import FeatureVector


def format_parameters(values: Sequence[float] | None) -> str:
    """Format parameters as tab-separated fixed-point numbers.

    Args:
        values: Parameters to format

    Returns:
        Tab-joined values with 3 decimals, or "-" if there are none

    Examples:
        >>> format_parameters([0.0, 1.23456])
        '0.000\\t1.235'
    """
    if not values:
        return "-"
    return "\t".join(f"{v:3.3f}" for v in values)


def format_row(word: str, vector: FeatureVector) -> str:
    """Format one dictionary row (without line terminator)."""
    return f"{word}\t{format_parameters(vector.values)}"


class SlideDictionaryWriter:
    """Writes dictionary rows to a text stream.

    The stream is not closed by the writer.

    Example:
        writer = SlideDictionaryWriter(sys.stdout)
        writer.write("hello", vector)
    """

    def __init__(self, stream: TextIO) -> None:
        """Initialize the writer.

        Args:
            stream: Text stream receiving the rows
        """
        self._stream = stream
        self._row_count = 0

    def write(self, word: str, vector: FeatureVector) -> None:
        """Write the row for one word."""
        self._stream.write(format_row(word, vector) + "\n")
        self._row_count += 1

    @property
    def row_count(self) -> int:
        """Number of rows written so far."""
        return self._row_count
