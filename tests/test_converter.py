import pytest
from PIL import Image

from glyphpic.cell import BtcRenderer, ThresholdRenderer
from glyphpic.converter import fit_within, image_to_ansi, prepare_image, sharpen, target_size
from glyphpic.frame import RESET
from glyphpic.glyphs import DOT_MATRIX, QUADRANT, SEXTANT


def test_target_size_from_terminal():
    assert target_size(80, 24) == (160, 88)


def test_target_size_width_override():
    assert target_size(80, 24, width=40) == (80, 88)


def test_target_size_tiny_terminal():
    assert target_size(10, 1) == (20, 4)


def test_fit_within_preserves_aspect():
    assert fit_within((100, 50), (160, 88)) == (160, 80)
    assert fit_within((50, 100), (160, 88)) == (44, 88)


@pytest.mark.parametrize(
    "geometry, expected",
    [(DOT_MATRIX, (160, 80)), (QUADRANT, (160, 40)), (SEXTANT, (160, 60))],
    ids=["braille", "quadrant", "sextant"],
)
def test_prepare_image_squashes_per_geometry(geometry, expected):
    img = Image.new("RGB", (100, 50), (10, 20, 30))
    assert prepare_image(img, geometry, (160, 88)).size == expected


def test_sharpen_keeps_flat_regions():
    img = Image.new("RGB", (10, 10), (100, 150, 200))
    assert sharpen(img).getpixel((5, 5)) == (100, 150, 200)


def test_sharpen_boosts_edges():
    img = Image.new("L", (10, 10), 100)
    img.paste(200, (5, 0, 10, 10))
    result = sharpen(img)
    assert result.getpixel((4, 5)) == 0
    assert result.getpixel((5, 5)) == 255


def test_accepts_file_path(tmp_path):
    path = tmp_path / "white.png"
    Image.new("RGB", (20, 20), (255, 255, 255)).save(path)
    result = image_to_ansi(path, BtcRenderer(SEXTANT), terminal_size=(10, 6))
    lines = result.split("\n")
    # box (20, 16) -> 16x16 -> squashed to 16x12 -> 8 cells by 4 rows
    assert len(lines) == 4
    assert all(line.endswith(RESET) for line in lines)
    assert all(line.count("█") == 8 for line in lines)
    assert "\033[38;2;255;255;255;48;2;255;255;255m█" in lines[0]


def test_width_parameter():
    img = Image.new("RGB", (20, 20), (40, 80, 120))
    result = image_to_ansi(img, BtcRenderer(QUADRANT), width=5, terminal_size=(80, 24))
    lines = result.split("\n")
    # box (10, 88) -> 10x10 -> squashed to 10x5
    assert len(lines) == 3
    assert all(line.count("\033[") == 6 for line in lines)


def test_accepts_rgba_image():
    img = Image.new("RGBA", (20, 20), (255, 0, 0, 128))
    result = image_to_ansi(img, ThresholdRenderer(), terminal_size=(10, 6))
    assert "\033[1;38;2;" in result


def test_edges_option_renders():
    img = Image.new("RGB", (20, 20), (255, 255, 255))
    img.paste((0, 0, 0), (0, 0, 10, 20))
    result = image_to_ansi(img, BtcRenderer(SEXTANT), edges=True, terminal_size=(10, 6))
    assert result.count(RESET) == 4


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        image_to_ansi(tmp_path / "missing.png", BtcRenderer(SEXTANT), terminal_size=(10, 6))
