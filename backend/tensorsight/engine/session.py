"""TensorProbe — host-facing session around one image and one kernel."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from tensorsight.engine.config import DEFAULT_CONFIG, EngineConfig
from tensorsight.engine.errors import InvalidImage
from tensorsight.engine.image import ImageHandle, load_image
from tensorsight.engine.kernel import KernelCache, KernelHandle
from tensorsight.engine.query import query_structure_tensor
from tensorsight.models.results import DisplayResult

logger = logging.getLogger(__name__)


class TensorProbe:
    """Holds the current image and kernel so the host only forwards events.

    The host calls ``load_image`` when a new picture arrives,
    ``set_kernel_params`` when a slider moves and ``query`` on every pointer
    move. Handles are replaced, never mutated, so a result always reports the
    parameters of the table that produced it.
    """

    def __init__(
        self,
        kernel_size: int = 5,
        sigma: float = 1.0,
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.kernels = KernelCache(self.config)
        self.image: ImageHandle | None = None
        self.kernel: KernelHandle = self.kernels.get(kernel_size, sigma)

    def load_image(
        self,
        pixels: Sequence[int] | bytes | NDArray[np.uint8],
        width: int,
        height: int,
    ) -> ImageHandle:
        self.image = load_image(pixels, width, height, self.config)
        return self.image

    def set_kernel_params(self, size: int, sigma: float) -> KernelHandle:
        self.kernel = self.kernels.get(size, sigma)
        return self.kernel

    def query(self, x: float, y: float) -> DisplayResult:
        if self.image is None:
            raise InvalidImage("No image loaded")
        return query_structure_tensor(self.image, self.kernel, x, y, self.config)
