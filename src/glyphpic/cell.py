import numpy as np

from glyphpic.colour import luma, to_byte, to_encoded, to_linear
from glyphpic.diffusion import ErrorDiffusionBuffer
from glyphpic.engine import RGB, OutputGlyph
from glyphpic.glyphs import DOT_MATRIX, GlyphGeometry
from glyphpic.sampling import Bitmap, SubPixel, sample_block

BLACK: RGB = (0, 0, 0)


def contrast_exponent(diff: float) -> float:
    """Gamma lift for a cell whose normalised luma range is ``diff``.

    Flat cells (diff near 0) get 0.8, high-contrast cells 0.5.
    """
    return 0.8 * (1.0 - diff) + 0.5 * diff


def solve_dot_color(target, bg) -> np.ndarray:
    """Colour that mixed 50/50 with ``bg`` reproduces ``target``, clamped to [0, 1]."""
    return np.clip(2.0 * np.asarray(target) - np.asarray(bg), 0.0, 1.0)


def _linear_to_rgb(linear) -> RGB:
    r, g, b = (to_byte(to_encoded(np.clip(c, 0.0, 1.0))) for c in linear)
    return (r, g, b)


def _coords(pixels: list[SubPixel]) -> tuple[np.ndarray, np.ndarray]:
    return np.array([p.y for p in pixels]), np.array([p.x for p in pixels])


class ThresholdRenderer:
    """Dot-matrix rendering with a luma threshold and error diffusion on a single channel.

    The shape comes from dithering the grayscale image; the glyph is drawn bold
    in one colour, the cell's average, on black.

    With ``adaptive`` the cell's luma range picks an exponent that lifts the
    displayed colour of flat cells and flattens the dither input, so smooth
    regions do not read as under-saturated.
    """

    channels = 1
    bold = True

    def __init__(
        self,
        geometry: GlyphGeometry = DOT_MATRIX,
        threshold: float = 128,
        invert: bool = False,
        adaptive: bool = False,
    ):
        self.geometry = geometry
        self.threshold = threshold
        self.invert = invert
        self.adaptive = adaptive

    def _values_and_colour(self, gray: np.ndarray, average: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        if self.adaptive:
            diff = (int(gray.max()) - int(gray.min())) / 255.0
            exponent = contrast_exponent(diff)
            values = to_linear(gray / 255.0) ** (1.0 - exponent) * 255.0
            colour = to_encoded(average**exponent)
        else:
            values = np.sqrt(gray / 255.0) * 255.0
            colour = np.sqrt(average)
        return values, colour

    def render_cell(self, bitmap: Bitmap, x: int, y: int, buffer: ErrorDiffusionBuffer) -> OutputGlyph:
        pixels = sample_block(bitmap, x, y, self.geometry)
        if not pixels:
            return OutputGlyph(" ", BLACK, BLACK, bold=self.bold)

        ys, xs = _coords(pixels)
        average = bitmap.linear[ys, xs].mean(axis=0)
        values, colour = self._values_and_colour(bitmap.gray[ys, xs].astype(np.float64), average)

        mask = 0
        for pixel, value in zip(pixels, values):
            value = float(value) + buffer.take(pixel.x, pixel.y)
            lit = value < self.threshold if self.invert else value > self.threshold
            if lit:
                mask |= pixel.bit
            # A lit dot stands for white, or for black when inverted
            level = 255.0 if lit != self.invert else 0.0
            buffer.diffuse(pixel.x, pixel.y, [value - level])

        fg = tuple(to_byte(c) for c in colour)
        return OutputGlyph(self.geometry.mask_to_char(mask), fg, BLACK, bold=self.bold)


class BtcRenderer:
    """Block Truncation Coding: two colours per cell split at the cell's own mean luma.

    Sub-pixels at or above the mean form the foreground (their mask bits are set),
    the rest the background. The foreground is unmixed against the background so
    the 50/50 blend the eye sees matches the true average, and whatever the clamp
    loses is diffused forward in linear light.
    """

    channels = 3
    bold = False

    def __init__(self, geometry: GlyphGeometry, diffuse: bool = True):
        self.geometry = geometry
        self.diffuse = diffuse

    def split(self, lumas: np.ndarray) -> np.ndarray:
        """Foreground selector: luma >= mean, ties going to the foreground."""
        # Clamping keeps float rounding in the mean from pushing it past every sample
        mean = np.clip(lumas.mean(), lumas.min(), lumas.max())
        return lumas >= mean

    def render_cell(self, bitmap: Bitmap, x: int, y: int, buffer: ErrorDiffusionBuffer) -> OutputGlyph:
        pixels = sample_block(bitmap, x, y, self.geometry)
        if not pixels:
            return OutputGlyph(" ", BLACK, BLACK)

        ys, xs = _coords(pixels)
        linear = bitmap.linear[ys, xs].copy()
        if self.diffuse:
            linear += np.array([[buffer.take(p.x, p.y, c) for c in range(3)] for p in pixels])

        foreground = self.split(luma(linear[:, 0], linear[:, 1], linear[:, 2]))
        mask = 0
        for pixel, selected in zip(pixels, foreground):
            if selected:
                mask |= pixel.bit

        target = linear[foreground].mean(axis=0)
        bg = linear[~foreground].mean(axis=0) if (~foreground).any() else target
        dot = solve_dot_color(target, bg)
        residual = target - (0.5 * dot + 0.5 * bg)

        if self.diffuse:
            for pixel in pixels:
                buffer.diffuse(pixel.x, pixel.y, residual)

        return OutputGlyph(self.geometry.mask_to_char(mask), _linear_to_rgb(dot), _linear_to_rgb(bg))
