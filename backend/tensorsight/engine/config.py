"""Engine configuration — numeric constants shared by every stage."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Constants for luminance, kernel bounds and result display.

    Kernel bounds feed ``KernelParams`` validation and may be wider or
    narrower than the defaults.
    """

    # ITU-R 601 style luma weights (alpha ignored)
    luma_r: float = 0.3
    luma_g: float = 0.59
    luma_b: float = 0.11

    # Kernel bounds, matching the host's slider ranges
    min_kernel_size: int = 1
    max_kernel_size: int = 51
    min_sigma: float = 0.1
    max_sigma: float = 30.0

    # Eigenvalues are divided by this before display
    display_scale: float = 1000.0


DEFAULT_CONFIG = EngineConfig()
