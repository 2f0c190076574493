# chanquant/quantization/clustering.py
from __future__ import annotations
import logging
import numpy as np

from chanquant.config import CONVERGENCE_TOLERANCE, MAX_ITERATIONS
from chanquant.quantization.centers import round_half_up

logger = logging.getLogger(__name__)

_VALUES = np.arange(256, dtype=np.float64)

def optimal_centers(
    hist: np.ndarray,
    k: int,
    max_iter: int = MAX_ITERATIONS,
    tol: float = CONVERGENCE_TOLERANCE,
) -> np.ndarray:
    """
    1D Lloyd (k-means) over the 256 intensity values, weighted by hist.

    Centers start evenly spread at 255*(j+0.5)/k. Each round assigns every
    intensity to its nearest center (ties -> lowest index) and moves each center
    to the weighted mean of its intensities; an empty cluster keeps its center.
    Stops once no label changed and no center moved by more than tol, or after
    max_iter rounds. The result is rounded, sorted and forced strictly increasing
    (bumped by one, capped at 255).
    """
    hist = np.asarray(hist, dtype=np.float64).ravel()
    if hist.shape[0] != 256:
        raise ValueError(f"histogram must have 256 bins, got {hist.shape[0]}")
    k = int(k)
    if k < 1:
        raise ValueError(f"level count must be >= 1, got {k}")

    centers = 255.0 * (np.arange(k, dtype=np.float64) + 0.5) / k
    labels = np.zeros(256, dtype=np.int64)
    weighted = hist * _VALUES

    rounds = 0
    converged = False
    for _ in range(max_iter):
        rounds += 1
        # (256,1) - (1,k) -> (256,k); argmin picks the first minimum
        dist = np.abs(_VALUES[:, None] - centers[None, :])
        new_labels = np.argmin(dist, axis=1)
        changed = bool(np.any(new_labels != labels))
        labels = new_labels

        sums = np.bincount(labels, weights=weighted, minlength=k)
        counts = np.bincount(labels, weights=hist, minlength=k)
        new_centers = centers.copy()
        occupied = counts > 0
        new_centers[occupied] = sums[occupied] / counts[occupied]
        moved = bool(np.any(np.abs(new_centers - centers) > tol))
        centers = new_centers

        if not changed and not moved:
            converged = True
            break

    logger.debug("lloyd k=%d: %d round(s), converged=%s", k, rounds, converged)

    out = np.clip(round_half_up(centers), 0, 255).astype(np.int32)
    out.sort()
    for j in range(1, k):
        if out[j] <= out[j - 1]:
            out[j] = min(255, out[j - 1] + 1)
    return out
