import argparse
import sys
from pathlib import Path

from PIL import Image

from glyphpic.cell import BtcRenderer, ThresholdRenderer
from glyphpic.converter import image_to_ansi
from glyphpic.engine import CellRenderer
from glyphpic.glyphs import DOT_MATRIX, QUADRANT, SEXTANT

MODES = ("braille", "braille-smooth", "braille-btc", "quadrant", "sextant")


def make_renderer(mode: str, threshold: int = 128, invert: bool = False) -> CellRenderer:
    """Map a mode name onto a cell renderer. Only the braille threshold modes use threshold/invert."""
    if mode == "braille":
        return ThresholdRenderer(DOT_MATRIX, threshold=threshold, invert=invert)
    if mode == "braille-smooth":
        return ThresholdRenderer(DOT_MATRIX, threshold=threshold, invert=invert, adaptive=True)
    if mode == "braille-btc":
        return BtcRenderer(DOT_MATRIX)
    if mode == "quadrant":
        return BtcRenderer(QUADRANT)
    if mode == "sextant":
        return BtcRenderer(SEXTANT)
    raise ValueError(f"Unknown mode: {mode}")


def _threshold(value: str) -> int:
    threshold = int(value)
    if not 0 <= threshold <= 255:
        raise argparse.ArgumentTypeError(f"threshold must be between 0 and 255, got {threshold}")
    return threshold


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render images in the terminal as coloured Unicode glyphs")
    parser.add_argument("images", nargs="*", help="Paths to input images")
    parser.add_argument("-e", "--edges", action="store_true", default=False, help="Sharpen edges before rendering")
    parser.add_argument(
        "-w", "--width", type=int, default=None, help="Output width in characters (default: terminal width)"
    )
    parser.add_argument(
        "-m", "--mode", default="sextant", choices=MODES, help="Glyph family and rendering policy (default: sextant)"
    )
    parser.add_argument(
        "-i", "--invert", action="store_true", default=False, help="Light dots for dark pixels (braille modes only)"
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=_threshold,
        default=128,
        help="Threshold for lighting a dot, 0-255 (default: 128). Lower means more dots. Braille modes only.",
    )
    args = parser.parse_args(argv)

    if not args.images:
        print("No input files specified.", file=sys.stderr)
        return 0

    renderer = make_renderer(args.mode, threshold=args.threshold, invert=args.invert)
    for image in args.images:
        image_path = Path(image)
        if len(args.images) > 1:
            print(f"\n--- {image_path} ---")
        try:
            print(image_to_ansi(image_path, renderer, width=args.width, edges=args.edges))
        except (OSError, Image.DecompressionBombError) as e:  # OSError includes UnidentifiedImageError
            print(f"Error processing {image_path}: {e}", file=sys.stderr)

    return 0
