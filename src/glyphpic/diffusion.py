import numpy as np

# Stucki kernel: (dx, dy, weight) relative to the source pixel, weights sum to 1
STUCKI_KERNEL = (
    (1, 0, 8 / 42),
    (2, 0, 4 / 42),
    (-2, 1, 2 / 42),
    (-1, 1, 4 / 42),
    (0, 1, 8 / 42),
    (1, 1, 4 / 42),
    (2, 1, 2 / 42),
    (-2, 2, 1 / 42),
    (-1, 2, 2 / 42),
    (0, 2, 4 / 42),
    (1, 2, 2 / 42),
    (2, 2, 1 / 42),
)


class ErrorDiffusionBuffer:
    """Pending quantisation error per pixel and channel for one rendering pass.

    Positions outside the image are silently ignored on write and read as zero,
    so cells overlapping the image edge drop whatever would land outside.
    """

    def __init__(self, width: int, height: int, channels: int = 1):
        if width <= 0 or height <= 0 or channels <= 0:
            raise ValueError(f"Invalid buffer shape: {width}x{height}x{channels}")
        self.width = width
        self.height = height
        self.channels = channels
        self._error = np.zeros((height, width, channels), dtype=np.float64)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def add(self, x: int, y: int, channel: int, delta: float) -> bool:
        """Accumulate ``delta`` at (x, y). Returns False when the position is outside the image."""
        if not self._in_bounds(x, y):
            return False
        self._error[y, x, channel] += delta
        return True

    def take(self, x: int, y: int, channel: int = 0) -> float:
        """Current accumulated error at (x, y); the value is not cleared."""
        if not self._in_bounds(x, y):
            return 0.0
        return float(self._error[y, x, channel])

    def diffuse(self, x: int, y: int, errors) -> list[float]:
        """Spread one error per channel from source pixel (x, y) over the Stucki kernel.

        Returns the per-channel amount that actually landed inside the image.
        """
        deposited = [0.0] * self.channels
        for dx, dy, weight in STUCKI_KERNEL:
            nx, ny = x + dx, y + dy
            if not self._in_bounds(nx, ny):
                continue
            for channel, error in enumerate(errors):
                share = error * weight
                self._error[ny, nx, channel] += share
                deposited[channel] += share
        return deposited

    def total(self, channel: int = 0) -> float:
        return float(self._error[:, :, channel].sum())
