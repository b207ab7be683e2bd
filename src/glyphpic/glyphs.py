from dataclasses import dataclass

from glyphpic.charsets import BRAILLE, QUADRANTS, SEXTANTS


@dataclass(frozen=True)
class GlyphGeometry:
    """Sub-cell layout and mask table for one glyph family.

    ``subcells`` lists ``(dx, dy, bit)`` in the order pixels are visited within a
    cell. ``vertical_scale`` squashes the resized image so sub-pixels come out
    roughly square in a 1:2 terminal cell.
    """

    name: str
    cell_width: int
    cell_height: int
    subcells: tuple[tuple[int, int, int], ...]
    table: str
    vertical_scale: float = 1.0

    @property
    def bit_count(self) -> int:
        return len(self.subcells)

    def mask_to_char(self, mask: int) -> str:
        return self.table[mask]


# Braille dot numbering runs 1-2-3 down the left column, 4-5-6 down the right,
# then 7 and 8 across the bottom row.
DOT_MATRIX = GlyphGeometry(
    name="braille",
    cell_width=2,
    cell_height=4,
    subcells=(
        (0, 0, 0x01),
        (0, 1, 0x02),
        (0, 2, 0x04),
        (1, 0, 0x08),
        (1, 1, 0x10),
        (1, 2, 0x20),
        (0, 3, 0x40),
        (1, 3, 0x80),
    ),
    table=BRAILLE,
)

QUADRANT = GlyphGeometry(
    name="quadrant",
    cell_width=2,
    cell_height=2,
    subcells=((0, 0, 1), (1, 0, 2), (0, 1, 4), (1, 1, 8)),
    table=QUADRANTS,
    vertical_scale=0.5,
)

SEXTANT = GlyphGeometry(
    name="sextant",
    cell_width=2,
    cell_height=3,
    subcells=((0, 0, 1), (1, 0, 2), (0, 1, 4), (1, 1, 8), (0, 2, 16), (1, 2, 32)),
    table=SEXTANTS,
    vertical_scale=0.75,
)
