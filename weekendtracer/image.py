"""Image textures loaded from disk as linear 8-bit RGB."""

from __future__ import annotations

import os
import struct
import sys
from pathlib import Path

from PIL import Image

_BYTES_PER_PIXEL = 3
_GAMMA = 2.2
_MAGENTA = (255, 0, 255)
_SEARCH_DIRS = (
    "",
    "images",
    "../images",
    "../../images",
    "../../../images",
    "../../../../images",
    "../../../../../images",
    "../../../../../../images",
)


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def float_to_byte(value: float) -> int:
    """Map a linear value in [0, 1] to a byte, saturating outside that range."""
    if value <= 0.0:
        return 0
    if 1.0 <= value:
        return 255
    return int(256.0 * value)


# Each stored 8-bit channel is decoded to linear light and re-quantised.
_LINEAR_TABLE = bytes(
    float_to_byte(_as_float32((b / 255.0) ** _GAMMA)) for b in range(256)
)


def _clamp(x: int, low: int, high: int) -> int:
    """Clamp ``x`` to the half-open range [low, high)."""
    if x < low:
        return low
    if x < high:
        return x
    return high - 1


class RtwImage:
    """RGB image data, searched for in a few likely places.

    If ``RTW_IMAGES`` is set, that directory is tried first; then the name as
    given, then ``images/`` in the current directory and up to six parents.
    If nothing loads, width and height are 0 and every pixel is magenta.
    """

    def __init__(self, image_filename: str | os.PathLike[str] | None = None) -> None:
        self._data: bytes | None = None
        self._width = 0
        self._height = 0
        if image_filename is None:
            return

        filename = os.fspath(image_filename)
        imagedir = os.environ.get("RTW_IMAGES")
        candidates = [f"{imagedir}/{filename}"] if imagedir else []
        candidates += [str(Path(d) / filename) if d else filename for d in _SEARCH_DIRS]

        if not any(self.load(c) for c in candidates):
            print(f"ERROR: Could not load image file '{filename}'.", file=sys.stderr)

    def load(self, filename: str | os.PathLike[str]) -> bool:
        """Load linear image data from ``filename``; return whether it worked."""
        try:
            with Image.open(filename) as img:
                rgb = img.convert("RGB")
                width, height = rgb.size
                raw = rgb.tobytes()
        except OSError:
            self._data = None
            self._width = self._height = 0
            return False

        self._width, self._height = width, height
        self._data = raw.translate(_LINEAR_TABLE)
        return True

    @property
    def width(self) -> int:
        return self._width if self._data is not None else 0

    @property
    def height(self) -> int:
        return self._height if self._data is not None else 0

    def pixel_data(self, x: int, y: int) -> tuple[int, int, int]:
        """The RGB bytes at (x, y), clamped to the image; magenta if nothing loaded."""
        if self._data is None:
            return _MAGENTA
        x = _clamp(x, 0, self._width)
        y = _clamp(y, 0, self._height)
        start = (y * self._width + x) * _BYTES_PER_PIXEL
        r, g, b = self._data[start : start + _BYTES_PER_PIXEL]
        return (r, g, b)