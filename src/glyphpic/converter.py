from pathlib import Path

from PIL import Image, ImageFilter

from glyphpic.engine import CellRenderer
from glyphpic.frame import FrameRenderer
from glyphpic.glyphs import GlyphGeometry
from glyphpic.sampling import Bitmap
from glyphpic.terminal import get_terminal_size

# Rows kept free below the picture for the prompt and per-file header
ROW_MARGIN = 2

SHARPEN_KERNEL = ImageFilter.Kernel((3, 3), [0, -1, 0, -1, 5, -1, 0, -1, 0], scale=1)


def load_image(image: Image.Image | str | Path) -> Image.Image:
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    return image.convert("RGB")


def target_size(columns: int, rows: int, width: int | None = None) -> tuple[int, int]:
    """Pixel box the image is fitted into: 2 pixels per column, 4 per row.

    ``width`` is in characters and overrides the terminal width.
    """
    if width is not None:
        columns = width
    return max(1, columns) * 2, max(1, rows - ROW_MARGIN) * 4


def fit_within(size: tuple[int, int], box: tuple[int, int]) -> tuple[int, int]:
    """Largest size with the same aspect ratio as ``size`` that fits in ``box``."""
    w, h = size
    box_w, box_h = box
    scale = min(box_w / w, box_h / h)
    return max(1, round(w * scale)), max(1, round(h * scale))


def sharpen(image: Image.Image) -> Image.Image:
    return image.filter(SHARPEN_KERNEL)


def prepare_image(
    image: Image.Image,
    geometry: GlyphGeometry,
    box: tuple[int, int],
    edges: bool = False,
) -> Image.Image:
    """Resize into ``box``, squash vertically for the glyph family and optionally sharpen."""
    image = image.resize(fit_within(image.size, box), Image.LANCZOS)
    if geometry.vertical_scale != 1.0:
        # Terminal cells are twice as tall as wide; squash so sub-pixels stay square
        squashed_height = max(1, int(image.height * geometry.vertical_scale))
        image = image.resize((image.width, squashed_height), Image.LANCZOS)
    if edges:
        image = sharpen(image)
    return image


def image_to_ansi(
    image: Image.Image | str | Path,
    renderer: CellRenderer,
    width: int | None = None,
    edges: bool = False,
    terminal_size: tuple[int, int] | None = None,
) -> str:
    image = load_image(image)
    columns, rows = terminal_size if terminal_size is not None else get_terminal_size()
    image = prepare_image(image, renderer.geometry, target_size(columns, rows, width), edges=edges)
    return "\n".join(FrameRenderer(renderer).render(Bitmap.from_image(image)))
