from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np

_INTENSITIES = np.arange(256, dtype=np.int64)

def nearest_center(value: int, centers: Sequence[int]) -> int:
    """Closest center by absolute distance; the first one scanned wins ties."""
    best = int(centers[0])
    best_d = abs(int(value) - best)
    for c in centers[1:]:
        d = abs(int(value) - int(c))
        if d < best_d:
            best_d = d
            best = int(c)
    return best

def project_index(value: int, k: int) -> int:
    """Bucket index floor(value * k / 256), clamped to [0, k-1]."""
    idx = (int(value) * int(k)) // 256
    return k - 1 if idx >= k else max(idx, 0)

def nearest_center_lut(centers: np.ndarray) -> np.ndarray:
    """
    256-entry table: intensity -> nearest center (same tie rule as nearest_center).
    """
    centers = np.asarray(centers, dtype=np.int64)
    # (256,1) - (1,K) -> (256,K)
    dist = np.abs(_INTENSITIES[:, None] - centers[None, :])
    return centers[np.argmin(dist, axis=1)].astype(np.uint8)

def projection_lut(centers: np.ndarray) -> np.ndarray:
    """
    256-entry table: intensity -> centers[floor(v*K/256)].
    Ignores the center values when picking the bucket.
    """
    centers = np.asarray(centers, dtype=np.int64)
    k = centers.shape[0]
    idx = np.minimum((_INTENSITIES * k) // 256, k - 1)
    return centers[idx].astype(np.uint8)

def apply_luts(img_rgb: np.ndarray, luts: Tuple[np.ndarray, np.ndarray, np.ndarray]) -> np.ndarray:
    """
    Map each channel through its own LUT into a freshly allocated image.
    A 4th (alpha) channel, if present, is written fully opaque.
    """
    out = np.empty_like(img_rgb, dtype=np.uint8)
    for ch in range(3):
        out[..., ch] = luts[ch][img_rgb[..., ch]]
    if img_rgb.shape[2] == 4:
        out[..., 3] = 255
    return out
