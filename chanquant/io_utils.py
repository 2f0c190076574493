from pathlib import Path
from typing import Union
import cv2
import numpy as np

IMAGE_EXTS = (".jpg", ".jpeg", ".png", ".bmp", ".webp")

# cv2 works in BGR(A); everything in chanquant is RGB(A).
def load_image(path: Union[str, Path], keep_alpha: bool = False) -> np.ndarray:
    path = Path(path)
    flag = cv2.IMREAD_UNCHANGED if keep_alpha else cv2.IMREAD_COLOR
    img = cv2.imread(str(path), flag)
    if img is None:
        raise FileNotFoundError(f"Could not read image: {path}")
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGB)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)

def save_image_rgb(path: Union[str, Path], img_rgb: np.ndarray, quality: int = 92) -> Path:
    """
    Write an RGB(A) image; returns the path actually written.
    JPEG drops alpha, unknown extensions are written as PNG.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    ext = path.suffix.lower()
    if ext not in IMAGE_EXTS:
        path = path.with_suffix(".png")
        ext = ".png"

    if img_rgb.shape[2] == 4 and ext not in (".jpg", ".jpeg"):
        img_bgr = cv2.cvtColor(img_rgb, cv2.COLOR_RGBA2BGRA)
    else:
        img_bgr = cv2.cvtColor(np.ascontiguousarray(img_rgb[..., :3]), cv2.COLOR_RGB2BGR)

    if ext in (".jpg", ".jpeg"):
        ok = cv2.imwrite(str(path), img_bgr, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)])
    else:
        ok = cv2.imwrite(str(path), img_bgr)  # default compression
    if not ok:
        raise OSError(f"Could not write image: {path}")
    return path

def list_images(folder: Union[str, Path]) -> list[Path]:
    folder = Path(folder)
    return sorted([p for p in folder.iterdir() if p.suffix.lower() in IMAGE_EXTS])
