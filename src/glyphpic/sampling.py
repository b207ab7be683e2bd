from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from PIL import Image

from glyphpic.colour import LUMA_WEIGHTS, to_linear
from glyphpic.glyphs import GlyphGeometry


class SubPixel(NamedTuple):
    x: int
    y: int
    bit: int


@dataclass
class Bitmap:
    """A decoded RGB image in the forms the cell renderers read.

    encoded: (h, w, 3) float64, sRGB values in [0, 1]
    linear: (h, w, 3) float64, linear light
    gray: (h, w) uint8, Rec. 709 luma of the encoded values
    """

    encoded: np.ndarray
    linear: np.ndarray
    gray: np.ndarray

    @classmethod
    def from_array(cls, rgb: np.ndarray) -> "Bitmap":
        """Build from an (h, w, 3) or (h, w, 4) uint8 array; alpha is dropped."""
        encoded = np.asarray(rgb, dtype=np.float64)[:, :, :3] / 255.0
        gray = np.rint(encoded @ np.array(LUMA_WEIGHTS) * 255.0).clip(0, 255).astype(np.uint8)
        return cls(encoded=encoded, linear=to_linear(encoded), gray=gray)

    @classmethod
    def from_image(cls, image: Image.Image) -> "Bitmap":
        return cls.from_array(np.asarray(image.convert("RGB")))

    @property
    def width(self) -> int:
        return self.encoded.shape[1]

    @property
    def height(self) -> int:
        return self.encoded.shape[0]


def sample_block(bitmap: Bitmap, x: int, y: int, geometry: GlyphGeometry) -> list[SubPixel]:
    """In-bounds sub-pixels of the cell with origin (x, y), in the geometry's scan order."""
    return [
        SubPixel(x + dx, y + dy, bit)
        for dx, dy, bit in geometry.subcells
        if x + dx < bitmap.width and y + dy < bitmap.height
    ]


def cell_origins(width: int, height: int, geometry: GlyphGeometry) -> list[list[tuple[int, int]]]:
    """Cell origins grouped by row, top to bottom and left to right. Partial edge cells are included."""
    return [
        [(x, y) for x in range(0, width, geometry.cell_width)]
        for y in range(0, height, geometry.cell_height)
    ]
