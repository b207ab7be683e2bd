import numpy as np
import pytest
from PIL import Image

from glyphpic.glyphs import DOT_MATRIX, QUADRANT, SEXTANT
from glyphpic.sampling import Bitmap, SubPixel, cell_origins, sample_block
from tests.conftest import BLACK, WHITE, make_bitmap, solid_bitmap


def test_bitmap_forms():
    bitmap = make_bitmap([[WHITE, BLACK, (255, 0, 0)]])
    assert bitmap.width == 3
    assert bitmap.height == 1
    assert bitmap.encoded.shape == (1, 3, 3)
    np.testing.assert_allclose(bitmap.linear[0, 0], [1.0, 1.0, 1.0])
    np.testing.assert_allclose(bitmap.linear[0, 1], [0.0, 0.0, 0.0])
    assert bitmap.gray.dtype == np.uint8
    assert list(bitmap.gray[0]) == [255, 0, 54]


def test_bitmap_drops_alpha():
    image = Image.new("RGBA", (4, 2), (10, 20, 30, 0))
    bitmap = Bitmap.from_image(image)
    assert bitmap.encoded.shape == (2, 4, 3)
    np.testing.assert_allclose(bitmap.encoded[1, 3] * 255.0, [10, 20, 30])


def test_sample_full_cell_in_scan_order():
    bitmap = solid_bitmap(4, 8, WHITE)
    pixels = sample_block(bitmap, 2, 4, DOT_MATRIX)
    assert [p.bit for p in pixels] == [0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80]
    assert pixels[0] == SubPixel(2, 4, 0x01)
    assert pixels[-1] == SubPixel(3, 7, 0x80)


def test_sample_partial_cell_skips_out_of_bounds():
    bitmap = solid_bitmap(3, 5, WHITE)
    assert sample_block(bitmap, 2, 4, DOT_MATRIX) == [SubPixel(2, 4, 0x01)]


def test_sample_partial_sextant_rows():
    bitmap = solid_bitmap(2, 4, WHITE)
    pixels = sample_block(bitmap, 0, 3, SEXTANT)
    assert [p.bit for p in pixels] == [1, 2]


@pytest.mark.parametrize(
    "geometry, expected_rows, expected_cols",
    [(DOT_MATRIX, [0, 4], [0, 2, 4]), (QUADRANT, [0, 2, 4, 6], [0, 2, 4]), (SEXTANT, [0, 3, 6], [0, 2, 4])],
    ids=["braille", "quadrant", "sextant"],
)
def test_cell_origins_raster_order(geometry, expected_rows, expected_cols):
    origins = cell_origins(5, 7, geometry)
    assert [row[0][1] for row in origins] == expected_rows
    for row in origins:
        assert [x for x, _ in row] == expected_cols
