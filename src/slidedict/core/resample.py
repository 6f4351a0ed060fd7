"""Arc-length resampling of polyline signals.

A word's key centers form a polyline whose point count depends on the word.
Resampling re-parameterizes the path by distance traveled and produces a
fixed number of samples, so that every word yields signals of equal length.
The x and y signals are resampled independently against the same segment
lengths, which keeps them aligned.
"""

from collections.abc import Sequence

import numpy as np

DEFAULT_SAMPLE_COUNT = 64


def resample(
    samples: Sequence[float],
    segment_lengths: Sequence[float],
    n: int = DEFAULT_SAMPLE_COUNT,
) -> np.ndarray:
    """Resample a polyline signal to n points equally spaced by arc length.

    Output sample ``i`` lies at distance ``i * T / (n - 1)`` along the path,
    where ``T`` is the total length. Its value is interpolated linearly
    between the endpoints of the segment containing that distance.

    Degenerate cases:
    - A zero-length segment (duplicate points) yields its end value.
    - A distance beyond the last segment, from floating-point rounding at
      the final sample, yields the last input sample.

    Args:
        samples: One coordinate of the polyline points (L >= 2 values)
        segment_lengths: The L - 1 segment lengths of the polyline
        n: Number of output samples (>= 2)

    Returns:
        Array of exactly n samples; the first equals samples[0] and the last
        equals samples[-1] up to floating-point tolerance

    Raises:
        ValueError: If fewer than 2 samples, n < 2, or segment_lengths does
            not have exactly len(samples) - 1 entries
    """
    values = np.asarray(samples, dtype=float)
    lengths = np.asarray(segment_lengths, dtype=float)

    if len(values) < 2:
        raise ValueError(f"Need at least 2 samples to resample, got {len(values)}")
    if len(lengths) != len(values) - 1:
        raise ValueError(
            f"Expected {len(values) - 1} segment lengths, got {len(lengths)}"
        )
    if n < 2:
        raise ValueError(f"Sample count must be at least 2, got {n}")

    result = np.empty(n, dtype=float)
    total = float(np.sum(lengths))
    segment_count = len(lengths)

    offset = 0.0
    current = 0
    for i in range(n):
        sample_pos = (i * total) / (n - 1)

        while current < segment_count and offset + lengths[current] < sample_pos:
            offset += lengths[current]
            current += 1

        if current == segment_count:
            result[i] = values[-1]
            continue

        a = values[current]
        b = values[current + 1]
        length = lengths[current]
        if length == 0.0:
            result[i] = b
        else:
            # relative position between a (0) and b (1)
            result[i] = a + (b - a) * ((sample_pos - offset) / length)

    return result
