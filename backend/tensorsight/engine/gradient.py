"""Sobel gradient field over a luminance image.

Both gradients are computed once per image. The one-pixel border is left at
zero: only interior pixels (1 ≤ x < W-1, 1 ≤ y < H-1) receive a response,
so images narrower or shorter than 3 pixels yield all-zero gradients.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.ndimage import correlate

SOBEL_X = np.array(
    [
        [-1.0, 0.0, 1.0],
        [-2.0, 0.0, 2.0],
        [-1.0, 0.0, 1.0],
    ]
)

SOBEL_Y = np.array(
    [
        [-1.0, -2.0, -1.0],
        [0.0, 0.0, 0.0],
        [1.0, 2.0, 1.0],
    ]
)


def sobel_gradients(
    luminance: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Return (Ix, Iy), each the same shape as ``luminance``.

    Rows of the Sobel kernels index the y offset and columns the x offset.
    ``correlate`` applies them without flipping, so Ix is positive where
    intensity increases to the right and Iy where it increases downward.
    """
    lum = np.asarray(luminance, dtype=np.float64)
    ix = correlate(lum, SOBEL_X, mode="constant", cval=0.0)
    iy = correlate(lum, SOBEL_Y, mode="constant", cval=0.0)
    _zero_border(ix)
    _zero_border(iy)
    return ix, iy


def _zero_border(grid: NDArray[np.float64]) -> None:
    grid[0, :] = 0.0
    grid[-1, :] = 0.0
    grid[:, 0] = 0.0
    grid[:, -1] = 0.0
