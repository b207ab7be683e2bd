import numpy as np

# Rec. 709 luma weights
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

_LINEAR_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
_LMS_TO_LINEAR = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)


def to_linear(encoded):
    """sRGB transfer function, encoded [0,1] -> linear light."""
    c = np.asarray(encoded, dtype=np.float64)
    return np.where(c <= 0.04045, c / 12.92, ((np.maximum(c, 0.04045) + 0.055) / 1.055) ** 2.4)


def to_encoded(linear):
    """Inverse sRGB transfer function, linear light -> encoded [0,1]."""
    c = np.asarray(linear, dtype=np.float64)
    return np.where(c <= 0.0031308, 12.92 * c, 1.055 * np.maximum(c, 0.0031308) ** (1.0 / 2.4) - 0.055)


def luma(r, g, b):
    wr, wg, wb = LUMA_WEIGHTS
    return wr * np.asarray(r) + wg * np.asarray(g) + wb * np.asarray(b)


def _apply(matrix: np.ndarray, x, y, z) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    stacked = np.stack(np.broadcast_arrays(*(np.asarray(v, dtype=np.float64) for v in (x, y, z))), axis=-1)
    out = stacked @ matrix.T
    return out[..., 0], out[..., 1], out[..., 2]


def linear_to_oklab(r, g, b):
    """Linear RGB -> Oklab (L, a, b)."""
    lms = _apply(_LINEAR_TO_LMS, r, g, b)
    return _apply(_LMS_TO_OKLAB, *(np.cbrt(c) for c in lms))


def oklab_to_linear(lightness, a, b):
    """Oklab -> linear RGB. Out-of-gamut inputs give values outside [0,1]; callers clamp."""
    lms = _apply(_OKLAB_TO_LMS, lightness, a, b)
    return _apply(_LMS_TO_LINEAR, *(c**3 for c in lms))


def to_oklab(r, g, b):
    """Encoded sRGB [0,1] -> Oklab."""
    return linear_to_oklab(to_linear(r), to_linear(g), to_linear(b))


def from_oklab(lightness, a, b):
    """Oklab -> encoded sRGB [0,1]."""
    r, g, b_ = oklab_to_linear(lightness, a, b)
    return to_encoded(r), to_encoded(g), to_encoded(b_)


def to_byte(encoded) -> int:
    """Encoded [0,1] value -> 8-bit channel, clamped and rounded."""
    return int(np.rint(np.clip(encoded, 0.0, 1.0) * 255.0))
