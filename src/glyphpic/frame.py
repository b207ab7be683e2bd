from glyphpic.diffusion import ErrorDiffusionBuffer
from glyphpic.engine import CellRenderer, OutputGlyph
from glyphpic.sampling import Bitmap, cell_origins

RESET = "\033[0m"


def format_glyph(glyph: OutputGlyph) -> str:
    """One cell as an ANSI truecolor SGR sequence followed by its character."""
    fr, fg, fb = glyph.fg
    br, bg, bb = glyph.bg
    bold = "1;" if glyph.bold else ""
    return f"\033[{bold}38;2;{fr};{fg};{fb};48;2;{br};{bg};{bb}m{glyph.char}"


class FrameRenderer:
    """Drives a cell renderer over a whole bitmap in raster order.

    Error only ever flows right and down, so cells must be visited top row first
    and left to right within a row.
    """

    def __init__(self, cell_renderer: CellRenderer):
        self.cell_renderer = cell_renderer

    def render_cells(self, bitmap: Bitmap) -> list[list[OutputGlyph]]:
        if bitmap.width == 0 or bitmap.height == 0:
            return []
        buffer = ErrorDiffusionBuffer(bitmap.width, bitmap.height, self.cell_renderer.channels)
        geometry = self.cell_renderer.geometry
        return [
            [self.cell_renderer.render_cell(bitmap, x, y, buffer) for x, y in row]
            for row in cell_origins(bitmap.width, bitmap.height, geometry)
        ]

    def render(self, bitmap: Bitmap) -> list[str]:
        return ["".join(format_glyph(glyph) for glyph in row) + RESET for row in self.render_cells(bitmap)]
