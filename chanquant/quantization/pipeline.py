from __future__ import annotations
import logging
from typing import Tuple, Union
import numpy as np

from chanquant.quantization.centers import logarithmic_centers, uniform_centers
from chanquant.quantization.clustering import optimal_centers
from chanquant.quantization.histogram import channel_histograms
from chanquant.quantization.levels import Logarithmic, Optimal, QuantMode, resolve_levels, resolve_mode
from chanquant.quantization.mapping import apply_luts, nearest_center_lut, projection_lut

logger = logging.getLogger(__name__)

CenterSets = Tuple[np.ndarray, np.ndarray, np.ndarray]

def _check_image(img_rgb: np.ndarray) -> None:
    if not isinstance(img_rgb, np.ndarray) or img_rgb.ndim != 3 or img_rgb.shape[2] not in (3, 4):
        raise ValueError("img_rgb must be an RGB(A) image with shape (H, W, 3) or (H, W, 4)")
    if img_rgb.dtype != np.uint8:
        raise ValueError(f"img_rgb must be uint8, got {img_rgb.dtype}")

def static_centers(k: int, mode: QuantMode) -> np.ndarray:
    """Shared centers for the uniform / logarithmic modes."""
    if isinstance(mode, Logarithmic):
        return logarithmic_centers(k, mode.bias)
    return uniform_centers(k)

def quantize_with_centers(
    img_rgb: np.ndarray,
    quality: int,
    mode: Union[int, QuantMode],
) -> Tuple[np.ndarray, CenterSets]:
    """
    Same as quantize() but also returns the (red, green, blue) center sets used.
    On pass-through the input is returned as-is with empty center sets.
    """
    _check_image(img_rgb)
    k = resolve_levels(quality)
    if k is None:
        empty = np.empty((0,), dtype=np.int32)
        return img_rgb, (empty, empty, empty)

    mode = resolve_mode(mode)
    logger.debug("quantize %s: quality=%s levels=%d mode=%s", img_rgb.shape, quality, k, mode)

    if isinstance(mode, Optimal):
        hists = channel_histograms(img_rgb)
        centers = tuple(optimal_centers(h, k) for h in hists)
        luts = tuple(nearest_center_lut(c) for c in centers)
    else:
        shared = static_centers(k, mode)
        centers = (shared, shared, shared)
        lut = projection_lut(shared)
        luts = (lut, lut, lut)

    return apply_luts(img_rgb, luts), centers

def quantize(
    img_rgb: np.ndarray,
    quality: int,
    mode: Union[int, QuantMode],
) -> np.ndarray:
    """
    Reduce each channel to K = 2 ** (quality // 3) levels.
    - mode == OPTIMAL_SENTINEL (256): per-channel 1D Lloyd centers, nearest-center matching
    - mode == UNIFORM_SENTINEL (-1): uniform centers, bucket projection
    - any other int: logarithmic centers with that bias, bucket projection
    quality <= 0 (or < 3) returns img_rgb itself.
    """
    out, _ = quantize_with_centers(img_rgb, quality, mode)
    return out
