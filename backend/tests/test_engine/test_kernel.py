"""Tests for Gaussian kernel construction, validation and caching."""

import math

import numpy as np
import pytest
from pydantic import ValidationError

from tensorsight.engine.config import EngineConfig
from tensorsight.engine.errors import InvalidParameter
from tensorsight.engine.kernel import KernelCache, build_kernel, set_kernel_params
from tensorsight.models.params import KernelParams


@pytest.mark.parametrize(
    "size,sigma",
    [(1, 1.0), (3, 0.1), (3, 1.0), (5, 2.5), (11, 30.0), (51, 0.7), (51, 30.0)],
)
def test_weights_sum_to_one(size, sigma):
    kernel = build_kernel(size, sigma)
    assert abs(float(np.sum(kernel.weights)) - 1.0) < 1e-9
    assert np.all(kernel.weights >= 0.0)


@pytest.mark.parametrize("size,sigma", [(3, 1.0), (7, 2.0), (15, 0.5)])
def test_point_symmetry(size, sigma):
    kernel = build_kernel(size, sigma)
    h = kernel.half
    for dy in range(-h, h + 1):
        for dx in range(-h, h + 1):
            assert kernel.weight(dx, dy) == kernel.weight(-dx, -dy)


def test_shape_and_layout():
    kernel = build_kernel(5, 1.0)
    assert kernel.grid.shape == (5, 5)
    assert kernel.weights.shape == (25,)
    assert kernel.half == 2
    # Center is the maximum
    assert kernel.weight(0, 0) == kernel.grid.max()


def test_relative_weights_match_gaussian():
    sigma = 1.5
    kernel = build_kernel(5, sigma)
    ratio = kernel.weight(1, 2) / kernel.weight(0, 0)
    assert ratio == pytest.approx(math.exp(-(1 + 4) / (2 * sigma * sigma)))


def test_size_one_is_identity():
    kernel = build_kernel(1, 3.0)
    assert kernel.weights.tolist() == [pytest.approx(1.0)]


def test_deterministic():
    a = build_kernel(9, 2.2)
    b = build_kernel(9, 2.2)
    assert np.array_equal(a.grid, b.grid)


def test_grid_is_read_only():
    kernel = build_kernel(3, 1.0)
    with pytest.raises(ValueError):
        kernel.grid[0, 0] = 1.0


@pytest.mark.parametrize("size", [4, 2, 0, -3])
def test_build_rejects_even_or_nonpositive_size(size):
    with pytest.raises(InvalidParameter):
        build_kernel(size, 1.0)


def test_build_rejects_nonpositive_sigma():
    with pytest.raises(InvalidParameter):
        build_kernel(3, 0.0)


def test_build_allows_sizes_past_ui_bounds():
    assert build_kernel(53, 1.0).size == 53


def test_set_kernel_params_valid():
    kernel = set_kernel_params(7, 2.0)
    assert kernel.size == 7
    assert kernel.sigma == 2.0


@pytest.mark.parametrize(
    "size,sigma",
    [(4, 1.0), (53, 1.0), (0, 1.0), (-1, 1.0), (5, 0.05), (5, 30.5), (5, -1.0)],
)
def test_set_kernel_params_rejects_out_of_range(size, sigma):
    with pytest.raises(InvalidParameter):
        set_kernel_params(size, sigma)


def test_set_kernel_params_bounds_inclusive():
    assert set_kernel_params(1, 0.1).size == 1
    assert set_kernel_params(51, 30.0).size == 51


def test_config_narrows_bounds():
    cfg = EngineConfig(max_kernel_size=9)
    with pytest.raises(InvalidParameter):
        set_kernel_params(11, 1.0, cfg)


def test_config_widens_bounds():
    cfg = EngineConfig(max_kernel_size=61, min_sigma=0.01, max_sigma=50.0)
    assert set_kernel_params(55, 1.0, cfg).size == 55
    assert set_kernel_params(3, 0.05, cfg).sigma == 0.05
    assert set_kernel_params(3, 45.0, cfg).sigma == 45.0
    with pytest.raises(InvalidParameter):
        set_kernel_params(55, 1.0)


def test_kernel_params_without_config_checks_shape_only():
    assert KernelParams(size=53, sigma=40.0).size == 53
    with pytest.raises(ValidationError):
        KernelParams(size=4, sigma=1.0)
    with pytest.raises(ValidationError):
        KernelParams(size=3, sigma=0.0)


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError, match="odd"):
        set_kernel_params(6, 1.0)


def test_cache_reuses_until_params_change():
    cache = KernelCache()
    first = cache.get(5, 1.0)
    assert cache.get(5, 1.0) is first
    assert cache.hits == 1
    assert cache.misses == 1

    second = cache.get(7, 1.0)
    assert second is not first
    assert cache.current is second
    # The replaced handle is untouched
    assert first.size == 5
    assert cache.misses == 2


def test_cache_keeps_previous_kernel_on_invalid_params():
    cache = KernelCache()
    good = cache.get(3, 1.0)
    with pytest.raises(InvalidParameter):
        cache.get(4, 1.0)
    assert cache.current is good


def test_cache_clear():
    cache = KernelCache()
    cache.get(3, 1.0)
    cache.clear()
    assert cache.current is None
