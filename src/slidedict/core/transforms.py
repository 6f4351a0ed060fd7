"""Multi-level wavelet transforms over power-of-two signals.

Key classes:
- Transform: Capability shared by every 1-D transform in this package
- FastWaveletTransform: Pyramidal transform, refilters the approximation band
- WaveletPacketTransform: Packet transform, refilters every band

Both transforms apply a Wavelet filter step repeatedly to bands of halving
width, down to the filter's wave length. A ``level`` bound limits the number
of iterations; reversing with the same bound undoes exactly the iterations
the forward pass applied.
"""

from typing import Protocol, runtime_checkable

import numpy as np

from slidedict.core.wavelets import Wavelet, is_power_of_two
from slidedict.exceptions import TransformError


@runtime_checkable
class Transform(Protocol):
    """A reversible, length-preserving 1-D transform."""

    def forward(self, signal: np.ndarray, level: int | None = None) -> np.ndarray:
        """Transform from time domain to coefficients."""
        ...

    def reverse(self, coefficients: np.ndarray, level: int | None = None) -> np.ndarray:
        """Transform from coefficients back to time domain."""
        ...


class _LeveledWaveletTransform:
    """Shared bookkeeping for transforms iterating a wavelet over band widths."""

    def __init__(self, wavelet: Wavelet) -> None:
        """Initialize with the filter applied at every level.

        Args:
            wavelet: Wavelet filter (Haar02, Daubechies04, Coiflet06, ...)
        """
        self.wavelet = wavelet

    def level_count(self, length: int, level: int | None = None) -> int:
        """Number of iterations a forward pass performs on a signal.

        Band width halves from ``length`` while it stays at or above the
        wave length, giving ``log2(length / wave_length) + 1`` iterations for
        a full decomposition, bounded by ``level``.
        """
        count = 0
        h = length
        while h >= self.wavelet.wave_length:
            count += 1
            h >>= 1
        if level is not None:
            count = min(count, level)
        return count

    def _prepare(self, signal: np.ndarray) -> np.ndarray:
        arr = np.array(signal, dtype=float)
        if arr.ndim != 1:
            raise TransformError(f"Expected a 1-D signal, got shape {arr.shape}")
        if not is_power_of_two(len(arr)):
            raise TransformError(
                f"{type(self).__name__} needs a power-of-two length, got {len(arr)}"
            )
        return arr

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wavelet!r})"


class FastWaveletTransform(_LeveledWaveletTransform):
    """Pyramidal fast wavelet transform (FWT).

    Each level filters only the approximation band left by the previous
    level. For a full decomposition the first coefficient is the scaled mean
    of the signal, followed by detail bands from coarsest to finest.
    """

    def forward(self, signal: np.ndarray, level: int | None = None) -> np.ndarray:
        arr_hilb = self._prepare(signal)
        steps = self.level_count(len(arr_hilb), level)

        h = len(arr_hilb)
        for _ in range(steps):
            arr_hilb[:h] = self.wavelet.forward(arr_hilb[:h])
            h >>= 1

        return arr_hilb

    def reverse(self, coefficients: np.ndarray, level: int | None = None) -> np.ndarray:
        arr_time = self._prepare(coefficients)
        steps = self.level_count(len(arr_time), level)
        if steps == 0:
            return arr_time

        h = len(arr_time) >> (steps - 1)
        while h <= len(arr_time):
            arr_time[:h] = self.wavelet.reverse(arr_time[:h])
            h <<= 1

        return arr_time


class WaveletPacketTransform(_LeveledWaveletTransform):
    """Wavelet packet transform (WPT).

    Filters with the full length first, then both sub bands (approximation
    and details) of every previous level with half the width, until the band
    width drops below the wave length.
    """

    def forward(self, signal: np.ndarray, level: int | None = None) -> np.ndarray:
        arr_hilb = self._prepare(signal)
        n = len(arr_hilb)
        steps = self.level_count(n, level)

        h = n
        for _ in range(steps):
            for start in range(0, n, h):  # 1 -> 2 -> 4 -> ... packets
                arr_hilb[start : start + h] = self.wavelet.forward(arr_hilb[start : start + h])
            h >>= 1

        return arr_hilb

    def reverse(self, coefficients: np.ndarray, level: int | None = None) -> np.ndarray:
        arr_time = self._prepare(coefficients)
        n = len(arr_time)
        steps = self.level_count(n, level)
        if steps == 0:
            return arr_time

        h = n >> (steps - 1)
        while h <= n:
            for start in range(0, n, h):  # ... -> 4 -> 2 -> 1 packets
                arr_time[start : start + h] = self.wavelet.reverse(arr_time[start : start + h])
            h <<= 1

        return arr_time
