"""Structure tensor accumulation at a single query point."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from tensorsight.engine.image import ImageHandle
from tensorsight.engine.kernel import KernelHandle


@dataclass(frozen=True)
class StructureTensor:
    """Symmetric 2×2 matrix [[sxx, sxy], [sxy, syy]]."""

    sxx: float
    sxy: float
    syy: float

    @property
    def trace(self) -> float:
        return self.sxx + self.syy

    @property
    def det(self) -> float:
        return self.sxx * self.syy - self.sxy * self.sxy

    def as_matrix(self) -> NDArray[np.float64]:
        return np.array([[self.sxx, self.sxy], [self.sxy, self.syy]])


def build_structure_tensor(
    image: ImageHandle,
    kernel: KernelHandle,
    x: int,
    y: int,
) -> StructureTensor:
    """Gaussian-weighted sum of gradient products around pixel (x, y).

    The query point is first clamped into the image. Each kernel offset then
    samples the gradient at the offset pixel clamped to the nearest edge, so
    the window near a border repeats the outermost row/column. Cost is
    O(size²) per call.
    """
    qx, qy = image.clamp_point(x, y)
    offsets = np.arange(-kernel.half, kernel.half + 1)
    cols = np.clip(qx + offsets, 0, image.width - 1)
    rows = np.clip(qy + offsets, 0, image.height - 1)

    # window[i, j] is the sample at offset (dx=offsets[j], dy=offsets[i])
    window = np.ix_(rows, cols)
    gx = image.ix[window]
    gy = image.iy[window]
    w = kernel.grid

    return StructureTensor(
        sxx=float(np.sum(w * gx * gx)),
        sxy=float(np.sum(w * gx * gy)),
        syy=float(np.sum(w * gy * gy)),
    )
