import numpy as np
import pytest
from chanquant.preprocessing.resize import scale_image, scaled_size

def test_scale_one_returns_input():
    img = (np.random.rand(31, 17, 3) * 255).astype("uint8")
    assert scale_image(img, 1.0) is img

@pytest.mark.parametrize("scale", [0, 0.0, -0.5])
def test_non_positive_scale_raises(scale):
    img = np.zeros((4, 4, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        scale_image(img, scale)

def test_downscale_dims():
    img = (np.random.rand(301, 517, 3) * 255).astype("uint8")
    out = scale_image(img, 0.5)
    assert out.shape == (151, 259, 3)  # 150.5 and 258.5 round up
    assert out.dtype == np.uint8

def test_dims_never_zero():
    assert scaled_size(3, 3, 0.01) == (1, 1)

def test_constant_image_stays_constant():
    img = np.full((40, 30, 3), (12, 200, 77), dtype=np.uint8)
    out = scale_image(img, 0.37)
    assert np.all(out == np.array([12, 200, 77], dtype=np.uint8))

def test_window_average_skips_out_of_bounds():
    img = np.zeros((3, 3, 3), dtype=np.uint8)
    img[0, 0] = 0
    img[0, 1] = 10
    img[1, 0] = 20
    img[1, 1] = 30
    img[2, :] = 250
    img[:, 2] = 250
    out = scale_image(img, 1 / 3)
    assert out.shape == (1, 1, 3)
    # maps to source (0, 0): only its 2x2 in-bounds neighbourhood counts
    assert out[0, 0].tolist() == [15, 15, 15]

def test_average_rounds_half_up():
    img = np.zeros((2, 2, 3), dtype=np.uint8)
    img[1, 1] = (1, 2, 3)
    img[0, 1] = (0, 0, 3)
    out = scale_image(img, 0.5)
    # sums (1, 2, 6) over 4 pixels -> (sum + 2) // 4
    assert out[0, 0].tolist() == [0, 1, 2]

def test_upscale_single_pixel():
    img = np.array([[[9, 99, 199]]], dtype=np.uint8)
    out = scale_image(img, 2.0)
    assert out.shape == (2, 2, 3)
    assert np.all(out == np.array([9, 99, 199], dtype=np.uint8))

def test_rgba_input_gives_rgb():
    img = np.full((8, 8, 4), 100, dtype=np.uint8)
    out = scale_image(img, 0.5)
    assert out.shape == (4, 4, 3)
