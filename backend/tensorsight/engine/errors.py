"""Engine error kinds. All are raised at construction time, never per query."""

from __future__ import annotations


class TensorSightError(ValueError):
    """Base class for validation failures."""


class InvalidImage(TensorSightError):
    """Image dimensions or pixel buffer are unusable."""


class InvalidParameter(TensorSightError):
    """Kernel size or sigma is outside the supported domain."""
