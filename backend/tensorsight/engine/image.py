"""ImageHandle — an image plus everything derived from it once at load time."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from tensorsight.engine.config import DEFAULT_CONFIG, EngineConfig
from tensorsight.engine.errors import InvalidImage
from tensorsight.engine.gradient import sobel_gradients
from tensorsight.engine.grayscale import to_luminance
from tensorsight.utils.math_helpers import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageHandle:
    """Read-only image state shared by every query against it."""

    width: int
    height: int
    # (height, width) arrays, indexed [y, x]
    luminance: NDArray[np.float64]
    ix: NDArray[np.float64]
    iy: NDArray[np.float64]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    def clamp_point(self, x: int, y: int) -> tuple[int, int]:
        """Clamp a pixel coordinate into the image bounds."""
        return (clamp(x, 0, self.width - 1), clamp(y, 0, self.height - 1))

    def gradient_at(self, x: int, y: int) -> tuple[float, float]:
        cx, cy = self.clamp_point(x, y)
        return (float(self.ix[cy, cx]), float(self.iy[cy, cx]))

    def gradient_magnitude(self) -> NDArray[np.float64]:
        """Per-pixel |∇I|, for heat-map overlays."""
        return np.hypot(self.ix, self.iy)


def load_image(
    pixels: Sequence[int] | bytes | NDArray[np.uint8],
    width: int,
    height: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ImageHandle:
    """Validate an RGBA buffer and derive its luminance and gradient fields.

    Raises:
        InvalidImage: non-integer or non-positive dimensions, or a buffer
            whose length is not 4·width·height.
    """
    if not (_is_int(width) and _is_int(height)):
        raise InvalidImage(f"Image dimensions must be integers, got {width!r}x{height!r}")
    if width < 1 or height < 1:
        logger.warning("Rejected image with dimensions %sx%s", width, height)
        raise InvalidImage(f"Image dimensions must be positive, got {width}x{height}")

    if isinstance(pixels, (bytes, bytearray, memoryview)):
        buffer = np.frombuffer(pixels, dtype=np.uint8)
    else:
        buffer = np.asarray(pixels).ravel()

    expected = 4 * int(width) * int(height)
    if buffer.size != expected:
        logger.warning(
            "Rejected %dx%d image: buffer has %d values, expected %d",
            width,
            height,
            buffer.size,
            expected,
        )
        raise InvalidImage(
            f"RGBA buffer has {buffer.size} values, expected {expected} for {width}x{height}"
        )

    t0 = time.perf_counter()
    luminance = to_luminance(buffer, int(width), int(height), config)
    ix, iy = sobel_gradients(luminance)
    for arr in (luminance, ix, iy):
        arr.flags.writeable = False

    elapsed = (time.perf_counter() - t0) * 1000
    logger.info("Loaded %dx%d image, gradients in %.1fms", width, height, elapsed)

    return ImageHandle(
        width=int(width),
        height=int(height),
        luminance=luminance,
        ix=ix,
        iy=iy,
    )


def _is_int(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
