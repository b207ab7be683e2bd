import numpy as np
import pytest

from glyphpic.sampling import Bitmap

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def make_bitmap(rows) -> Bitmap:
    """Build a Bitmap from nested rows of (r, g, b) tuples."""
    return Bitmap.from_array(np.array(rows, dtype=np.uint8))


def solid_bitmap(width: int, height: int, colour) -> Bitmap:
    return make_bitmap([[colour] * width for _ in range(height)])


@pytest.fixture
def white_cell():
    """A single 2x4 all-white dot-matrix cell."""
    return solid_bitmap(2, 4, WHITE)
