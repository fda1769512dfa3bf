"""Per-query entry point: tensor → eigensolve → display result."""

from __future__ import annotations

import logging
import math

from tensorsight.engine.config import DEFAULT_CONFIG, EngineConfig
from tensorsight.engine.eigen import eigen_of_tensor
from tensorsight.engine.errors import InvalidParameter
from tensorsight.engine.image import ImageHandle
from tensorsight.engine.kernel import KernelHandle
from tensorsight.engine.projector import project
from tensorsight.engine.tensor import build_structure_tensor
from tensorsight.models.results import DisplayResult
from tensorsight.utils.math_helpers import to_pixel

logger = logging.getLogger(__name__)


def query_structure_tensor(
    image: ImageHandle,
    kernel: KernelHandle,
    x: float,
    y: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> DisplayResult:
    """Eigen-analysis of the structure tensor under the pointer at (x, y).

    Coordinates outside the canvas, infinite ones included, are clamped to
    the nearest edge.

    Raises:
        InvalidParameter: x or y is NaN.
    """
    if math.isnan(x) or math.isnan(y):
        raise InvalidParameter(f"Query coordinates must be numbers, got ({x}, {y})")
    px = to_pixel(x, image.width - 1)
    py = to_pixel(y, image.height - 1)
    tensor = build_structure_tensor(image, kernel, px, py)
    eig = eigen_of_tensor(tensor)
    result = project(eig, kernel, px, py, config)
    logger.debug(
        "Query (%d, %d) k=%d σ=%.2f → λ1=%d λ2=%d",
        px,
        py,
        kernel.size,
        kernel.sigma,
        result.lambda1,
        result.lambda2,
    )
    return result
