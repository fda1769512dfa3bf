"""Shared test fixtures and synthetic RGBA images."""

from __future__ import annotations

import numpy as np
import pytest

from tensorsight.engine.image import ImageHandle, load_image


def rgba_from_gray(gray: np.ndarray) -> np.ndarray:
    """Pack an (H, W) gray array into a flat RGBA uint8 buffer with opaque alpha."""
    h, w = gray.shape
    pixels = np.empty((h, w, 4), dtype=np.uint8)
    pixels[:, :, 0] = gray
    pixels[:, :, 1] = gray
    pixels[:, :, 2] = gray
    pixels[:, :, 3] = 255
    return pixels.ravel()


def black_image(width: int = 5, height: int = 5) -> ImageHandle:
    gray = np.zeros((height, width), dtype=np.uint8)
    return load_image(rgba_from_gray(gray), width, height)


def vertical_edge_image(width: int = 10, height: int = 10) -> ImageHandle:
    """Black left half, white right half; the step sits between x = w/2 - 1 and w/2."""
    gray = np.zeros((height, width), dtype=np.uint8)
    gray[:, width // 2 :] = 255
    return load_image(rgba_from_gray(gray), width, height)


def corner_image(size: int = 20) -> ImageHandle:
    """White square filling the lower-right quadrant of a black canvas."""
    gray = np.zeros((size, size), dtype=np.uint8)
    gray[size // 2 :, size // 2 :] = 255
    return load_image(rgba_from_gray(gray), size, size)


def noise_image(width: int = 10, height: int = 10, seed: int = 0) -> ImageHandle:
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=width * height * 4, dtype=np.uint8)
    return load_image(pixels, width, height)


@pytest.fixture
def black_5x5() -> ImageHandle:
    return black_image()

