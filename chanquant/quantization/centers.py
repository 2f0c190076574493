from __future__ import annotations
import numpy as np

from chanquant.config import LOG_BIAS_SCALE

def round_half_up(x: np.ndarray) -> np.ndarray:
    """Round .5 away from -inf (np.round would go to even)."""
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5)

def _check_levels(k: int) -> int:
    k = int(k)
    if k < 1:
        raise ValueError(f"level count must be >= 1, got {k}")
    return k

def uniform_centers(k: int) -> np.ndarray:
    """
    Midpoints of k equal-width bins over [0, 255], shifted down by half a step:
    center_i = round((i + 0.5) * 256/k - 0.5).
    """
    k = _check_levels(k)
    w = 256.0 / k
    i = np.arange(k, dtype=np.float64)
    c = round_half_up((i + 0.5) * w - 0.5)
    return np.clip(c, 0, 255).astype(np.int32)

def logarithmic_centers(k: int, bias: int) -> np.ndarray:
    """
    Exponentially spaced centers, lambda = 1 + bias/64.
    Falls back to uniform spacing when lambda <= 1. Endpoints are pinned to 0 and 255
    and the sequence is made non-decreasing.
    """
    k = _check_levels(k)
    lam = 1.0 + bias / LOG_BIAS_SCALE
    if lam <= 1.0:
        return uniform_centers(k)

    with np.errstate(over="ignore"):
        powers = np.power(lam, np.arange(k, dtype=np.float64))
        denom = float(np.power(lam, float(k))) - 1.0
    if denom == 0.0:
        denom = 1.0
    with np.errstate(invalid="ignore"):
        raw = (powers - 1.0) / denom
    # inf/inf from an overflowing curve; those levels are repaired below
    raw = np.nan_to_num(raw, nan=0.0, posinf=1.0, neginf=0.0)
    c = np.clip(round_half_up(raw * 255.0), 0, 255).astype(np.int32)

    if c[0] > 0:
        c[0] = 0
    c[-1] = 255
    for i in range(1, k):
        if c[i] < c[i - 1]:
            c[i] = c[i - 1]
    return c
