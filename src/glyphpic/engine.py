from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from glyphpic.diffusion import ErrorDiffusionBuffer
    from glyphpic.glyphs import GlyphGeometry
    from glyphpic.sampling import Bitmap

RGB = tuple[int, int, int]


@dataclass
class OutputGlyph:
    char: str
    fg: RGB  # 8-bit encoded
    bg: RGB
    bold: bool = False


class CellRenderer(Protocol):
    geometry: GlyphGeometry
    channels: int  # error channels diffused: 1 for luma, 3 for RGB

    def render_cell(self, bitmap: Bitmap, x: int, y: int, buffer: ErrorDiffusionBuffer) -> OutputGlyph:
        """Render the cell with origin (x, y), reading and updating pending error in ``buffer``."""
        ...
