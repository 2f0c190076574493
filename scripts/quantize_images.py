import argparse
import sys
from pathlib import Path
from chanquant.config import (
    INPUTS_DIR, OUTPUTS_DIR, DEFAULT_QUALITY, DEFAULT_MODE, DEFAULT_SCALE,
    DEFAULT_JPEG_QUALITY, DEFAULT_OUTPUT_FORMAT, OPTIMAL_SENTINEL, UNIFORM_SENTINEL
)
from chanquant.io_utils import list_images, load_image, save_image_rgb
from chanquant.metrics.similarity import mse, psnr, ssim_rgb
from chanquant.preprocessing.resize import scale_image
from chanquant.quantization.pipeline import quantize_with_centers

MODE_NAMES = {"optimal": OPTIMAL_SENTINEL, "uniform": UNIFORM_SENTINEL}

def parse_mode(value: str) -> int:
    """'optimal' / 'uniform' or any integer (sentinel or logarithmic bias)."""
    key = value.strip().lower()
    if key in MODE_NAMES:
        return MODE_NAMES[key]
    try:
        return int(key)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"mode must be 'optimal', 'uniform' or an integer bias, got {value!r}"
        )

def positive_float(value: str) -> float:
    f = float(value)
    if f <= 0:
        raise argparse.ArgumentTypeError("scale must be > 0")
    return f

def mode_label(mode: int) -> str:
    if mode == OPTIMAL_SENTINEL:
        return "optimal"
    if mode == UNIFORM_SENTINEL:
        return "uniform"
    return f"log{mode}"

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reduce per-channel color levels of images.")
    parser.add_argument("--input", type=str, default=str(INPUTS_DIR), help="Image file or folder of images")
    parser.add_argument("--out", type=str, default=str(OUTPUTS_DIR / "quantized"), help="Output folder")
    parser.add_argument("--quality", type=int, default=DEFAULT_QUALITY,
                        help="Quality budget; levels per channel = 2 ** (quality // 3), <= 2 keeps the image")
    parser.add_argument("--mode", type=parse_mode, default=parse_mode(DEFAULT_MODE),
                        help="'optimal', 'uniform' or an integer logarithmic bias")
    parser.add_argument("--scale", type=positive_float, default=DEFAULT_SCALE,
                        help="Box-filter scale factor applied before quantization")
    parser.add_argument("--format", choices=["png", "jpg"], default=DEFAULT_OUTPUT_FORMAT,
                        help="Output format; jpg is lossy and adds levels back")
    parser.add_argument("--jpeg-quality", type=int, default=DEFAULT_JPEG_QUALITY)
    parser.add_argument("--keep-alpha", action="store_true",
                        help="Keep the alpha plane (written opaque); dropped when --scale != 1")
    parser.add_argument("--report", action="store_true", help="Print centers and MSE/PSNR/SSIM per image")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    src = Path(args.input)
    if src.is_dir():
        paths = list_images(src)
    else:
        paths = [src]

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    label = mode_label(args.mode)

    written = 0
    for img_path in paths:
        try:
            img = load_image(img_path, keep_alpha=args.keep_alpha)
            img = scale_image(img, args.scale)
            quant, centers = quantize_with_centers(img, args.quality, args.mode)
            ext = f".{args.format}"
            dst = save_image_rgb(
                out_dir / f"{img_path.stem}_q{args.quality}_{label}{ext}",
                quant,
                quality=args.jpeg_quality,
            )
        except (OSError, ValueError) as e:
            # continue on individual failures
            print(f"✗ {img_path.name}: {e}", file=sys.stderr)
            continue

        written += 1
        h, w = quant.shape[:2]
        print(f"✓ {img_path.name} -> {dst.name} ({w}x{h})")
        if args.format == "jpg":
            print("  note: jpg output is lossy, the saved file has more than the quantized levels")
        if args.report:
            if centers[0].size:
                for name, c in zip("RGB", centers):
                    print(f"  {name} centers: {c.tolist()}")
            else:
                print("  pass-through (quality too low)")
            try:
                ssim_txt = f"{ssim_rgb(img, quant):.4f}"
            except ValueError:
                ssim_txt = "n/a"  # image smaller than the SSIM window
            print(f"  mse={mse(img, quant):.2f} psnr={psnr(img, quant):.2f}dB ssim={ssim_txt}")

    if written == 0:
        print("No images written.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
