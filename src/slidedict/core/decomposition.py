"""Wavelet transforms for signals of arbitrary length.

The array is decomposed into parts of optimal length by the ancient Egyptian
decomposition: the largest possible sub arrays whose lengths are powers of
two, e.g. 42 = 2^5 + 2^3 + 2^1 = 32 + 8 + 2. Each sub array is transformed
independently and copied back to its original position. The reverse
transform recomputes the same partition from the length and inverts each
part.

An odd length always ends with a sub array of length 2^0 = 1. That sample
is left untouched and acts as the level-0 wavelet coefficient, which holds
for orthonormal wavelets.
"""

from collections.abc import Iterator, Sequence

import numpy as np

from slidedict.core.transforms import Transform
from slidedict.exceptions import TransformError


def ancient_egyptian_multipliers(number: int) -> list[int]:
    """Convert a positive integer to its ancient Egyptian multipliers.

    The multipliers are the exponents of the largest powers of two that sum
    to the number, i.e. the positions of its set bits, most significant
    first.

    Args:
        number: Positive integer

    Returns:
        Strictly decreasing, non-negative exponents ``p`` with
        ``sum(2**p) == number``

    Raises:
        ValueError: If number is less than 1

    Examples:
        >>> ancient_egyptian_multipliers(42)
        [5, 3, 1]
        >>> ancient_egyptian_multipliers(43)
        [5, 3, 1, 0]
    """
    if number < 1:
        raise ValueError(f"Ancient Egyptian decomposition needs a positive integer, got {number}")
    return [p for p in range(number.bit_length() - 1, -1, -1) if (number >> p) & 1]


def multipliers_to_integer(multipliers: Sequence[int]) -> int:
    """Convert ancient Egyptian multipliers back to their integer.

    Examples:
        >>> multipliers_to_integer([5, 3, 1, 0])
        43
    """
    return sum(1 << p for p in multipliers)


def _chunks(length: int) -> Iterator[tuple[int, int]]:
    """Yield (offset, size) of each power-of-two chunk of an array."""
    offset = 0
    for multiplier in ancient_egyptian_multipliers(length):
        size = 1 << multiplier
        yield offset, size
        offset += size


class AncientEgyptianDecomposition:
    """Apply a power-of-two transform to arrays of any positive length.

    The wrapped transform (a wavelet filter, FWT or WPT) is a constructor
    dependency; this class adds no behaviour of its own beyond partitioning.

    Example:
        transform = AncientEgyptianDecomposition(FastWaveletTransform(Haar02()))
        coefficients = transform.forward(signal)
    """

    def __init__(self, transform: Transform) -> None:
        """Initialize with the per-chunk transform.

        Args:
            transform: Any transform of power-of-two length signals
        """
        self.transform = transform

    def _apply(self, data: np.ndarray, level: int | None, inverse: bool) -> np.ndarray:
        src = np.asarray(data, dtype=float)
        if src.ndim != 1:
            raise TransformError(f"Expected a 1-D signal, got shape {src.shape}")
        if len(src) == 0:
            raise TransformError("Cannot transform an empty signal")

        step = self.transform.reverse if inverse else self.transform.forward
        result = np.empty_like(src)
        for offset, size in _chunks(len(src)):
            if size == 1:
                result[offset] = src[offset]
                continue
            result[offset : offset + size] = step(src[offset : offset + size], level)
        return result

    def forward(self, signal: np.ndarray, level: int | None = None) -> np.ndarray:
        """Transform each power-of-two chunk of the signal forward.

        Args:
            signal: 1-D signal of any positive length
            level: Optional level bound passed to every chunk's transform

        Returns:
            Coefficient array of the same length

        Raises:
            TransformError: If the signal is empty or not 1-D
        """
        return self._apply(signal, level, inverse=False)

    def reverse(self, coefficients: np.ndarray, level: int | None = None) -> np.ndarray:
        """Transform each power-of-two chunk of the coefficients back.

        Args:
            coefficients: Output of forward() with the same level
            level: Optional level bound passed to every chunk's transform

        Returns:
            Time domain array of the same length

        Raises:
            TransformError: If the array is empty or not 1-D
        """
        return self._apply(coefficients, level, inverse=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.transform!r})"
