"""Kernel parameter model.

Range bounds come from the ``EngineConfig`` passed as validation context
(``{"config": cfg}``), so a config can widen the host's control bounds as
well as narrow them. Without a context only the shape rules apply: odd,
positive size and positive sigma.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class KernelParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: int = Field(..., description="Odd kernel width/height in pixels")
    sigma: float = Field(..., description="Gaussian standard deviation")

    @field_validator("size")
    @classmethod
    def _size_valid(cls, v: int, info: ValidationInfo) -> int:
        if v < 1 or v % 2 == 0:
            raise ValueError(f"kernel size must be a positive odd integer, got {v}")
        cfg = _config(info)
        if cfg is not None and not (cfg.min_kernel_size <= v <= cfg.max_kernel_size):
            raise ValueError(
                f"kernel size must be in [{cfg.min_kernel_size}, {cfg.max_kernel_size}], got {v}"
            )
        return v

    @field_validator("sigma")
    @classmethod
    def _sigma_valid(cls, v: float, info: ValidationInfo) -> float:
        if not v > 0:
            raise ValueError(f"sigma must be positive, got {v}")
        cfg = _config(info)
        if cfg is not None and not (cfg.min_sigma <= v <= cfg.max_sigma):
            raise ValueError(f"sigma must be in [{cfg.min_sigma}, {cfg.max_sigma}], got {v}")
        return v


def _config(info: ValidationInfo) -> Any:
    if not info.context:
        return None
    return info.context.get("config")
