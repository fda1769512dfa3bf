"""Gaussian weighting kernel and the single-entry cache that holds it.

The Gaussian is evaluated analytically at integer offsets rather than
integrated over each pixel, so the raw weights of a small kernel do not sum
to 1. Every table is renormalized after evaluation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from pydantic import ValidationError

from tensorsight.engine.config import DEFAULT_CONFIG, EngineConfig
from tensorsight.engine.errors import InvalidParameter
from tensorsight.models.params import KernelParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KernelHandle:
    """An immutable, normalized size×size weight table."""

    size: int
    sigma: float
    # (size, size) array indexed [dy + half, dx + half]
    grid: NDArray[np.float64]

    @property
    def half(self) -> int:
        return (self.size - 1) // 2

    @property
    def weights(self) -> NDArray[np.float64]:
        """Flattened row-major weight table."""
        return self.grid.ravel()

    @property
    def key(self) -> tuple[int, float]:
        return (self.size, self.sigma)

    def weight(self, dx: int, dy: int) -> float:
        return float(self.grid[dy + self.half, dx + self.half])


def build_kernel(size: int, sigma: float) -> KernelHandle:
    """Build a normalized Gaussian table for offsets in [-(size-1)/2, (size-1)/2]².

    w(dx, dy) = exp(-(dx² + dy²) / 2σ²) / (2πσ²), then divided by Σw.

    Raises:
        InvalidParameter: size is even or non-positive, or sigma is not positive.
    """
    if not isinstance(size, (int, np.integer)) or size < 1 or size % 2 == 0:
        raise InvalidParameter(f"Kernel size must be a positive odd integer, got {size}")
    if not sigma > 0:
        raise InvalidParameter(f"Sigma must be positive, got {sigma}")

    half = (size - 1) // 2
    offsets = np.arange(-half, half + 1, dtype=np.float64)
    dx, dy = np.meshgrid(offsets, offsets)
    two_sigma_sq = 2.0 * sigma * sigma

    grid = np.exp(-(dx**2 + dy**2) / two_sigma_sq) / (math.pi * two_sigma_sq)
    grid /= grid.sum()
    grid.flags.writeable = False

    return KernelHandle(size=int(size), sigma=float(sigma), grid=grid)


def set_kernel_params(
    size: int,
    sigma: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> KernelHandle:
    """Validate (size, sigma) against the supported range and build the kernel.

    Raises:
        InvalidParameter: size even or outside its bounds, or sigma outside its bounds.
    """
    try:
        params = KernelParams.model_validate(
            {"size": size, "sigma": sigma}, context={"config": config}
        )
    except ValidationError as e:
        logger.warning("Rejected kernel parameters size=%r sigma=%r", size, sigma)
        raise InvalidParameter(_first_error(e)) from e

    return build_kernel(params.size, params.sigma)


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ()))
    return f"{field}: {err.get('msg', 'invalid value')}" if field else str(exc)


class KernelCache:
    """Holds the kernel for the current (size, sigma) and rebuilds on change.

    A rebuild replaces the handle rather than mutating it, so a handle already
    given to a query stays valid.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._current: KernelHandle | None = None
        self.hits = 0
        self.misses = 0

    @property
    def current(self) -> KernelHandle | None:
        return self._current

    def get(self, size: int, sigma: float) -> KernelHandle:
        if self._current is not None and self._current.key == (size, float(sigma)):
            self.hits += 1
            return self._current

        self.misses += 1
        kernel = set_kernel_params(size, sigma, self.config)
        logger.debug("Rebuilt kernel size=%d sigma=%.3f", kernel.size, kernel.sigma)
        self._current = kernel
        return kernel

    def clear(self) -> None:
        self._current = None
