"""Closed-form eigendecomposition of a symmetric 2×2 matrix.

For [[a, b], [b, d]]:

    trace = a + d,  det = a·d - b²
    disc  = sqrt(trace²/4 - det) = hypot((a - d)/2, b)
    λ1,2  = trace/2 ± disc

The hypot form never goes negative and keeps its precision when a ≈ d,
where trace²/4 - det cancels to noise. A diagonal matrix (b == 0) takes the
axis-aligned eigenvectors directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tensorsight.engine.tensor import StructureTensor
from tensorsight.utils.math_helpers import normalize


@dataclass(frozen=True)
class EigenPair:
    value: float
    # Unit length; sign is arbitrary
    vector: tuple[float, float]


@dataclass(frozen=True)
class EigenResult:
    """Eigenpairs as computed: ``major`` holds trace/2 + disc, ``minor`` trace/2 - disc."""

    major: EigenPair
    minor: EigenPair

    @property
    def pairs(self) -> tuple[EigenPair, EigenPair]:
        return (self.major, self.minor)


def eigen_symmetric_2x2(a: float, b: float, d: float) -> EigenResult:
    """Eigenvalues and orthogonal unit eigenvectors of [[a, b], [b, d]]."""
    half_trace = (a + d) / 2.0
    half_diff = (d - a) / 2.0
    disc = math.hypot(half_diff, b)
    lam1 = half_trace + disc
    lam2 = half_trace - disc

    if b == 0.0:
        # Diagonal: eigenvalues are a and d themselves
        if a >= d:
            v1, v2 = (1.0, 0.0), (0.0, 1.0)
        else:
            v1, v2 = (0.0, 1.0), (1.0, 0.0)
    else:
        v1 = _major_vector(half_diff, b, disc)
        v2 = (-v1[1], v1[0])

    return EigenResult(major=EigenPair(lam1, v1), minor=EigenPair(lam2, v2))


def eigen_of_tensor(tensor: StructureTensor) -> EigenResult:
    return eigen_symmetric_2x2(tensor.sxx, tensor.sxy, tensor.syy)


def _major_vector(half_diff: float, b: float, disc: float) -> tuple[float, float]:
    # λ1 - a = half_diff + disc and λ1 - d = disc - half_diff; pick the form
    # whose terms share a sign so nothing cancels.
    if half_diff >= 0.0:
        return normalize(b, half_diff + disc)
    return normalize(disc - half_diff, b)
