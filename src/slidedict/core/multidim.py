"""Two- and three-dimensional extensions of 1-D transforms.

These are free functions over any Transform: the 1-D transform is applied
along each axis in turn. Forward passes run rows first, then columns (then
the first axis for 3-D data); reverse passes undo them in the opposite order.
"""

from collections.abc import Callable
from functools import partial

import numpy as np

from slidedict.core.transforms import Transform
from slidedict.exceptions import TransformError


def _along(
    func: Callable[..., np.ndarray], data: np.ndarray, axis: int, level: int | None
) -> np.ndarray:
    return np.apply_along_axis(partial(func, level=level), axis, data)


def _as_array(data: np.ndarray, ndim: int) -> np.ndarray:
    arr = np.asarray(data, dtype=float)
    if arr.ndim != ndim:
        raise TransformError(f"Expected {ndim}-D data, got shape {arr.shape}")
    if arr.size == 0:
        raise TransformError("Cannot transform empty data")
    return arr


def forward_2d(
    transform: Transform, matrix: np.ndarray, level: int | None = None
) -> np.ndarray:
    """Transform every row, then every column of a matrix."""
    mat = _as_array(matrix, 2)
    mat = _along(transform.forward, mat, 1, level)
    return _along(transform.forward, mat, 0, level)


def reverse_2d(
    transform: Transform, matrix: np.ndarray, level: int | None = None
) -> np.ndarray:
    """Invert forward_2d: columns first, then rows."""
    mat = _as_array(matrix, 2)
    mat = _along(transform.reverse, mat, 0, level)
    return _along(transform.reverse, mat, 1, level)


def forward_3d(
    transform: Transform, space: np.ndarray, level: int | None = None
) -> np.ndarray:
    """Transform each 2-D slice along the last two axes, then along the first axis."""
    spc = _as_array(space, 3)
    spc = np.stack([forward_2d(transform, mat, level) for mat in spc])
    return _along(transform.forward, spc, 0, level)


def reverse_3d(
    transform: Transform, space: np.ndarray, level: int | None = None
) -> np.ndarray:
    """Invert forward_3d: first axis, then each 2-D slice."""
    spc = _as_array(space, 3)
    spc = _along(transform.reverse, spc, 0, level)
    return np.stack([reverse_2d(transform, mat, level) for mat in spc])
