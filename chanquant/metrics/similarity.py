# chanquant/metrics/similarity.py
from __future__ import annotations
import math
import numpy as np
from skimage.metrics import structural_similarity as ssim

def _color_f32(img: np.ndarray) -> np.ndarray:
    """Color planes as float32; an alpha plane (always 255 after quantization) is ignored."""
    if img.ndim == 3 and img.shape[2] == 4:
        img = img[..., :3]
    return img.astype(np.float32)

def mse(a: np.ndarray, b: np.ndarray) -> float:
    diff = _color_f32(a) - _color_f32(b)
    return float(np.mean(diff * diff))

def psnr(a: np.ndarray, b: np.ndarray) -> float:
    """Peak signal-to-noise ratio in dB for 8-bit images (inf when identical)."""
    err = mse(a, b)
    if err == 0.0:
        return math.inf
    return float(10.0 * math.log10((255.0 ** 2) / err))

def ssim_rgb(a: np.ndarray, b: np.ndarray) -> float:
    """
    Mean SSIM over the color channels, on [0, 1] floats.
    Raises ValueError (from skimage) for images smaller than the 11px Gaussian window.
    """
    a_f = np.clip(_color_f32(a) / 255.0, 0.0, 1.0)
    b_f = np.clip(_color_f32(b) / 255.0, 0.0, 1.0)
    return float(ssim(a_f, b_f, channel_axis=2, data_range=1.0,
                      gaussian_weights=True, use_sample_covariance=False))
