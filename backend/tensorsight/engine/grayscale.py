"""RGBA pixel buffer to single-channel luminance."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tensorsight.engine.config import DEFAULT_CONFIG, EngineConfig


def to_luminance(
    rgba: NDArray[np.uint8] | NDArray[np.float64],
    width: int,
    height: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> NDArray[np.float64]:
    """Convert a row-major RGBA buffer to an (height, width) luminance array.

    L = 0.3·R + 0.59·G + 0.11·B; alpha is ignored. The caller guarantees
    ``rgba`` holds exactly 4·width·height values.
    """
    pixels = np.asarray(rgba, dtype=np.float64).reshape(height, width, 4)
    return (
        config.luma_r * pixels[:, :, 0]
        + config.luma_g * pixels[:, :, 1]
        + config.luma_b * pixels[:, :, 2]
    )
