import math

import numpy as np
import pytest

from edgekit.errors import UnsupportedParameterError
from edgekit.filter import (
    CANNY_SMOOTHING_KERNEL,
    BorderType,
    REPLICATE,
    gaussian_kernel,
    gaussian_smooth,
    mean_kernel,
    mean_smooth,
    sobel,
    sobel_kernel,
    sobel_norm,
)
from edgekit.utils import max_diff


@pytest.mark.parametrize("ksize", [1, 3, 5, 7, 9, 15, 31])
def test_gaussian_kernel_mass_is_one(ksize):
    kernel = gaussian_kernel(ksize)
    assert kernel.shape == (ksize, ksize)
    assert abs(kernel.sum() - 1.0) < 1e-9


def test_gaussian_kernel_is_symmetric():
    kernel = gaussian_kernel(5)
    assert np.allclose(kernel, kernel.T)
    assert np.allclose(kernel, kernel[::-1, ::-1])
    assert kernel[2, 2] == kernel.max()


@pytest.mark.parametrize("ksize", [3, 7, 11])
def test_gaussian_sigma_does_not_depend_on_size(ksize):
    kernel = gaussian_kernel(ksize)
    c = ksize // 2
    assert kernel[c, c] / kernel[c, c + 1] == pytest.approx(math.exp(0.5))


def test_gaussian_kernel_3x3_values():
    weights = np.array([
        [math.exp(-1.0), math.exp(-0.5), math.exp(-1.0)],
        [math.exp(-0.5), 1.0, math.exp(-0.5)],
        [math.exp(-1.0), math.exp(-0.5), math.exp(-1.0)],
    ])
    np.testing.assert_allclose(gaussian_kernel(3), weights / weights.sum())


@pytest.mark.parametrize("ksize", [0, 2, 4, -3])
def test_kernel_size_must_be_positive_and_odd(ksize):
    with pytest.raises(UnsupportedParameterError):
        gaussian_kernel(ksize)
    with pytest.raises(UnsupportedParameterError):
        mean_kernel(ksize)


def test_mean_kernel():
    assert np.allclose(mean_kernel(5), 1.0 / 25.0)


def test_mean_smooth_single_pixel():
    a = np.array([[0.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 0.0]])
    smoothed = mean_smooth(a, 3, BorderType.constant(0.0))
    assert max_diff(smoothed, np.ones((3, 3)) / 9.0) < 1e-4


def test_gaussian_smooth_preserves_constant_image():
    a = np.full((6, 6), 0.4)
    for border in (REPLICATE, BorderType.reflect()):
        np.testing.assert_allclose(gaussian_smooth(a, 5, border), 0.4)


def test_smoothing_out_buffer():
    a = np.eye(4)
    out = np.zeros((4, 4))
    assert gaussian_smooth(a, 3, REPLICATE, out) is out
    assert mean_smooth(a, 3, REPLICATE, out) is out


def test_canny_smoothing_kernel_is_normalized():
    assert CANNY_SMOOTHING_KERNEL.shape == (5, 5)
    assert abs(CANNY_SMOOTHING_KERNEL.sum() - 1.0) < 1e-12
    assert CANNY_SMOOTHING_KERNEL[2, 2] == pytest.approx(15.0 / 159.0)


def test_sobel_kernels():
    kx = np.array([[-1.0, 0.0, 1.0], [-2.0, 0.0, 2.0], [-1.0, 0.0, 1.0]])
    assert np.array_equal(sobel_kernel(3, 1, 0), kx)
    assert np.array_equal(sobel_kernel(3, 0, 1), kx.T)


@pytest.mark.parametrize("ksize, dx, dy", [
    (5, 1, 0),
    (1, 0, 1),
    (3, 1, 1),
    (3, 0, 0),
    (3, 2, 0),
])
def test_sobel_rejects_unsupported_parameters(ksize, dx, dy):
    with pytest.raises(UnsupportedParameterError):
        sobel_kernel(ksize, dx, dy)
    with pytest.raises(UnsupportedParameterError):
        sobel(np.zeros((4, 4)), ksize, dx, dy)


def test_sobel_on_horizontal_ramp():
    ramp = np.tile(np.arange(6, dtype=np.float64), (5, 1))
    gx = sobel(ramp, 3, 1, 0, REPLICATE)
    gy = sobel(ramp, 3, 0, 1, REPLICATE)
    assert np.all(gx[:, 1:-1] == 8.0)
    assert np.all(gy == 0.0)


def test_sobel_norms_on_diagonal_ramp():
    i, j = np.mgrid[0:6, 0:6]
    ramp = (i + j).astype(np.float64)
    inner = (slice(1, -1), slice(1, -1))
    np.testing.assert_allclose(sobel_norm(ramp, 3, 2, REPLICATE)[inner], 8.0 * math.sqrt(2.0))
    np.testing.assert_allclose(sobel_norm(ramp, 3, 1, REPLICATE)[inner], 16.0)
    np.testing.assert_allclose(sobel_norm(ramp, 3, -1, REPLICATE)[inner], 8.0)


@pytest.mark.parametrize("norm", [0, 3, -2])
def test_sobel_norm_rejects_unknown_norm(norm):
    with pytest.raises(UnsupportedParameterError):
        sobel_norm(np.zeros((4, 4)), 3, norm)
