import math
import numpy as np
from chanquant.metrics.similarity import mse, psnr, ssim_rgb
from chanquant.quantization.pipeline import quantize

def test_identical_images():
    img = (np.random.rand(32, 32, 3) * 255).astype("uint8")
    assert mse(img, img) == 0.0
    assert psnr(img, img) == math.inf
    assert abs(ssim_rgb(img, img) - 1.0) < 1e-6

def test_mse_known_value():
    a = np.zeros((2, 2, 3), dtype=np.uint8)
    b = np.full((2, 2, 3), 10, dtype=np.uint8)
    assert mse(a, b) == 100.0
    assert abs(psnr(a, b) - 10.0 * math.log10(255.0 ** 2 / 100.0)) < 1e-9

def test_more_levels_lose_less():
    img = (np.random.rand(64, 64, 3) * 255).astype("uint8")
    coarse = quantize(img, 3, -1)
    fine = quantize(img, 12, -1)
    assert mse(img, fine) < mse(img, coarse)
    assert ssim_rgb(img, fine) > ssim_rgb(img, coarse)

def test_alpha_plane_is_ignored():
    a = np.zeros((16, 16, 4), dtype=np.uint8)
    b = np.zeros((16, 16, 4), dtype=np.uint8)
    a[..., 3] = 17
    b[..., 3] = 255
    b[..., 0] = 3
    assert mse(a, b) == 3.0  # 9 on one of three color planes
    assert mse(a, b) == mse(a[..., :3], b[..., :3])
