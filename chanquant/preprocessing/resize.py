from __future__ import annotations
import numpy as np

def _round_half_up_f32(x: np.ndarray) -> np.ndarray:
    return np.floor(x + np.float32(0.5)).astype(np.int64)

def scaled_size(h: int, w: int, scale: float) -> tuple[int, int]:
    """Output (H, W) for a scale factor: rounded, never below 1."""
    s = np.float32(scale)
    new_h = max(1, int(_round_half_up_f32(np.float32(h) * s)))
    new_w = max(1, int(_round_half_up_f32(np.float32(w) * s)))
    return new_h, new_w

def scale_image(img_rgb: np.ndarray, scale: float) -> np.ndarray:
    """
    Box-filter scaling. Each output pixel maps back to the source pixel
    (round(x/scale), round(y/scale)) and takes the rounded mean of the 3x3
    window around it, skipping neighbours outside the image.
    scale == 1 returns img_rgb itself; scale <= 0 raises ValueError.
    Output is always 3-channel RGB.
    """
    if scale <= 0:
        raise ValueError("scale must be > 0")
    if scale == 1.0:
        return img_rgb
    if not isinstance(img_rgb, np.ndarray) or img_rgb.ndim != 3 or img_rgb.shape[2] not in (3, 4):
        raise ValueError("img_rgb must be an RGB(A) image with shape (H, W, 3) or (H, W, 4)")

    h, w = img_rgb.shape[:2]
    new_h, new_w = scaled_size(h, w, scale)
    s = np.float32(scale)
    ys = _round_half_up_f32(np.arange(new_h, dtype=np.float32) / s)  # (new_h,)
    xs = _round_half_up_f32(np.arange(new_w, dtype=np.float32) / s)  # (new_w,)

    src = img_rgb[..., :3].astype(np.int64)
    sums = np.zeros((new_h, new_w, 3), dtype=np.int64)
    counts = np.zeros((new_h, new_w), dtype=np.int64)
    for dy in (-1, 0, 1):
        ky = ys + dy
        valid_y = (ky >= 0) & (ky < h)
        ky = np.clip(ky, 0, h - 1)
        for dx in (-1, 0, 1):
            kx = xs + dx
            valid_x = (kx >= 0) & (kx < w)
            kx = np.clip(kx, 0, w - 1)
            valid = valid_y[:, None] & valid_x[None, :]   # (new_h, new_w)
            sums += src[ky[:, None], kx[None, :]] * valid[..., None]
            counts += valid

    counts = np.maximum(counts, 1)[..., None]
    out = (sums + counts // 2) // counts
    return out.astype(np.uint8)
