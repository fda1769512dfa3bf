"""Query result model handed to the rendering host."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class DisplayResult(BaseModel):
    lambda1: int = Field(..., description="Larger scaled eigenvalue")
    lambda2: int = Field(..., description="Smaller scaled eigenvalue")
    vectors: list[tuple[float, float]] = Field(
        default_factory=list,
        description="Unit eigenvectors, paired with lambda1 then lambda2",
    )
    arrows: list[tuple[float, float]] = Field(
        default_factory=list,
        description="Each eigenvector scaled by its own scaled eigenvalue",
    )
    coherence: float = Field(default=0.0, description="(λ1 - λ2) / (λ1 + λ2); 0 for flat regions")
    x: int = 0
    y: int = 0
    kernel_size: int = 0
    sigma: float = 0.0

    @model_validator(mode="after")
    def _ordered(self) -> "DisplayResult":
        if self.lambda1 < self.lambda2:
            raise ValueError(f"lambda1 ({self.lambda1}) must be >= lambda2 ({self.lambda2})")
        return self
