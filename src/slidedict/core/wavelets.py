"""Orthonormal wavelet filters.

A wavelet filter performs one step of the discrete wavelet transform on a
signal whose length is a power of two: the first half of the result holds the
approximation (low-pass) coefficients, the second half the detail (high-pass)
coefficients. The signal is treated as periodic at its boundary, so the step
is an orthogonal change of basis and ``reverse`` is its transpose.

Each filter is defined by its scaling coefficients ``h``; the wavelet
coefficients follow from the quadrature mirror relation
``g[i] = (-1)**i * h[L - 1 - i]``.

Key classes:
- Wavelet: Generic filter step for any orthonormal scaling sequence
- Haar02: Haar wavelet (2 taps), the filter used for slide parameters
- Daubechies04: Daubechies wavelet with 4 taps
- Coiflet06: Coiflet wavelet with 6 taps
"""

import math
from collections.abc import Sequence

import numpy as np

from slidedict.exceptions import TransformError

_SQRT2 = math.sqrt(2.0)


def is_power_of_two(n: int) -> bool:
    """Check whether n is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0


class Wavelet:
    """One periodic filter step of an orthonormal wavelet.

    Signals shorter than ``wave_length`` are returned unchanged; the
    multi-level transforms never filter bands narrower than that.

    Attributes:
        name: Configuration name of the filter
        scales: Scaling (low-pass) coefficients
        coeffs: Wavelet (high-pass) coefficients
    """

    name = "wavelet"

    def __init__(self, scales: Sequence[float]) -> None:
        """Initialize the filter from its scaling coefficients.

        Args:
            scales: Scaling coefficients; their squares sum to 1

        Raises:
            ValueError: If fewer than 2 or an odd number of coefficients
        """
        if len(scales) < 2 or len(scales) % 2:
            raise ValueError(
                f"Wavelet needs an even number (>= 2) of coefficients, got {len(scales)}"
            )
        self.scales = np.asarray(scales, dtype=float)
        length = len(self.scales)
        self.coeffs = np.array(
            [(-1) ** i * self.scales[length - 1 - i] for i in range(length)]
        )

    @property
    def wave_length(self) -> int:
        """Number of filter taps; the minimum signal length filtered."""
        return len(self.scales)

    def _check(self, signal: np.ndarray) -> None:
        if not is_power_of_two(len(signal)):
            raise TransformError(
                f"{type(self).__name__} needs a power-of-two length, got {len(signal)}"
            )

    def forward(self, signal: np.ndarray, level: int | None = None) -> np.ndarray:
        """Apply one filter step: time domain to wavelet coefficients.

        Args:
            signal: Power-of-two length signal
            level: 0 returns the signal unchanged; otherwise ignored

        Returns:
            New array; approximation half followed by detail half

        Raises:
            TransformError: If the length is not a power of two
        """
        arr_time = np.asarray(signal, dtype=float)
        self._check(arr_time)
        if level == 0 or len(arr_time) < self.wave_length:
            return arr_time.copy()

        n = len(arr_time)
        half = n >> 1
        arr_hilb = np.zeros(n, dtype=float)
        for i in range(half):
            for j in range(self.wave_length):
                k = ((i << 1) + j) % n
                arr_hilb[i] += arr_time[k] * self.scales[j]
                arr_hilb[i + half] += arr_time[k] * self.coeffs[j]
        return arr_hilb

    def reverse(self, coefficients: np.ndarray, level: int | None = None) -> np.ndarray:
        """Invert one filter step: wavelet coefficients to time domain.

        Args:
            coefficients: Power-of-two length coefficient array
            level: 0 returns the coefficients unchanged; otherwise ignored

        Returns:
            New array in the time domain

        Raises:
            TransformError: If the length is not a power of two
        """
        arr_hilb = np.asarray(coefficients, dtype=float)
        self._check(arr_hilb)
        if level == 0 or len(arr_hilb) < self.wave_length:
            return arr_hilb.copy()

        n = len(arr_hilb)
        half = n >> 1
        arr_time = np.zeros(n, dtype=float)
        for i in range(half):
            for j in range(self.wave_length):
                k = ((i << 1) + j) % n
                arr_time[k] += arr_hilb[i] * self.scales[j] + arr_hilb[i + half] * self.coeffs[j]
        return arr_time

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Haar02(Wavelet):
    """Haar wavelet: pairwise sums and differences scaled by 1/sqrt(2)."""

    name = "haar"

    def __init__(self) -> None:
        super().__init__([1.0 / _SQRT2, 1.0 / _SQRT2])


class Daubechies04(Wavelet):
    """Daubechies wavelet with two vanishing moments (4 taps)."""

    name = "daubechies4"

    def __init__(self) -> None:
        sqrt3 = math.sqrt(3.0)
        norm = 4.0 * _SQRT2
        super().__init__(
            [
                (1.0 + sqrt3) / norm,
                (3.0 + sqrt3) / norm,
                (3.0 - sqrt3) / norm,
                (1.0 - sqrt3) / norm,
            ]
        )


class Coiflet06(Wavelet):
    """Coiflet wavelet with 6 taps."""

    name = "coiflet6"

    def __init__(self) -> None:
        sqrt15 = math.sqrt(15.0)
        super().__init__(
            [
                _SQRT2 * (sqrt15 - 3.0) / 32.0,
                _SQRT2 * (1.0 - sqrt15) / 32.0,
                _SQRT2 * (6.0 - 2.0 * sqrt15) / 32.0,
                _SQRT2 * (2.0 * sqrt15 + 6.0) / 32.0,
                _SQRT2 * (sqrt15 + 13.0) / 32.0,
                _SQRT2 * (9.0 - sqrt15) / 32.0,
            ]
        )


WAVELETS: dict[str, type[Wavelet]] = {
    cls.name: cls for cls in (Haar02, Daubechies04, Coiflet06)
}


def get_wavelet(name: str) -> Wavelet:
    """Create a wavelet filter by its configuration name.

    Raises:
        ValueError: If no filter has that name
    """
    try:
        return WAVELETS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown wavelet '{name}' (choose from: {', '.join(sorted(WAVELETS))})"
        ) from None
