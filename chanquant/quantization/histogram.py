from __future__ import annotations
from typing import Tuple
import numpy as np

def channel_histogram(channel: np.ndarray) -> np.ndarray:
    """256-bin intensity counts for a single uint8 channel plane."""
    return np.bincount(channel.ravel(), minlength=256).astype(np.int64)

def channel_histograms(img_rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Per-channel intensity histograms of an (H, W, 3|4) uint8 image.
    Each returned array is independent, has 256 entries and sums to H*W.
    """
    return (
        channel_histogram(img_rgb[..., 0]),
        channel_histogram(img_rgb[..., 1]),
        channel_histogram(img_rgb[..., 2]),
    )
