"""Scale and order eigenpairs for display."""

from __future__ import annotations

from tensorsight.engine.config import DEFAULT_CONFIG, EngineConfig
from tensorsight.engine.eigen import EigenResult
from tensorsight.engine.kernel import KernelHandle
from tensorsight.models.results import DisplayResult


def project(
    eig: EigenResult,
    kernel: KernelHandle,
    x: int,
    y: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> DisplayResult:
    """Build a DisplayResult with lambda1 >= lambda2.

    Pairs are sorted as whole (value, vector) units so no vector is ever
    re-matched to another eigenvalue. Negative eigenvalues come only from
    round-off on a positive-semidefinite tensor and are treated as 0.
    """
    scaled = [
        (max(p.value, 0.0) / config.display_scale, p.vector) for p in eig.pairs
    ]
    scaled.sort(key=lambda item: item[0], reverse=True)
    (l1, v1), (l2, v2) = scaled

    total = l1 + l2
    coherence = (l1 - l2) / total if total > 0 else 0.0

    return DisplayResult(
        lambda1=round(l1),
        lambda2=round(l2),
        vectors=[v1, v2],
        arrows=[_scale(v1, l1), _scale(v2, l2)],
        coherence=coherence,
        x=x,
        y=y,
        kernel_size=kernel.size,
        sigma=kernel.sigma,
    )


def _scale(vec: tuple[float, float], factor: float) -> tuple[float, float]:
    return (vec[0] * factor, vec[1] * factor)

