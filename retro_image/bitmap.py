"""An in-memory RGBA bitmap that can be loaded from and saved to image files."""

from __future__ import annotations

import os
from pathlib import Path

from PIL import Image

from retro_image.color import ALPHA_TRANSPARENT, Color

_CHANNELS = 4
_MODE = "RGBA"


class Bitmap:
    """A rectangle of RGBA pixels stored row by row, four bytes per pixel."""

    def __init__(self) -> None:
        self._pixels = bytearray()
        self._width = 0
        self._height = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Number of pixels."""
        return self._width * self._height

    @property
    def size_bytes(self) -> int:
        """Number of bytes of pixel data."""
        return len(self._pixels)

    @property
    def empty(self) -> bool:
        return not self._pixels

    @property
    def data(self) -> tuple[Color, ...]:
        """The pixels as colours, row by row."""
        channels = iter(self._pixels)
        pixels = tuple(Color(*pixel) for pixel in zip(*[channels] * _CHANNELS))
        return pixels[: self.size]

    def _has_image(self) -> bool:
        return bool(self._pixels) and self._width > 0 and self._height > 0

    def create(self, width: int, height: int) -> None:
        """Resize to the given dimensions; new bytes are transparent black.

        A zero width or height leaves the bitmap untouched.
        """
        if width < 0 or height < 0:
            raise ValueError(f"dimensions must not be negative, got {width}x{height}")
        if width == 0 or height == 0:
            return
        self._width = width
        self._height = height
        wanted = width * height * _CHANNELS
        if len(self._pixels) > wanted:
            del self._pixels[wanted:]
        else:
            self._pixels.extend(bytes([ALPHA_TRANSPARENT]) * (wanted - len(self._pixels)))

    @staticmethod
    def _check_file(path: Path) -> None:
        if not path.exists():
            raise ValueError(f"File does not exist: {path}")
        if not path.is_file():
            raise ValueError(f"Path is not a regular file: {path}")

    def load_from_file(self, path: str | os.PathLike[str]) -> None:
        """Replace the contents with the image stored at ``path``."""
        path = Path(path)
        self._check_file(path)
        self.clear()
        try:
            with Image.open(path) as image:
                rgba = image.convert(_MODE)
        except OSError as exc:
            raise RuntimeError(f"Failed to load image: {path} - {exc}") from exc
        self._width, self._height = rgba.size
        self._pixels = bytearray(rgba.tobytes())

    def _to_image(self) -> Image.Image:
        return Image.frombytes(_MODE, (self._width, self._height), bytes(self._pixels))

    def save_to_file(self, path: str | os.PathLike[str]) -> None:
        """Write the bitmap to an existing file, choosing the format by extension.

        Nothing happens for an empty bitmap or an unknown extension.
        """
        if not self._has_image():
            return
        path = Path(path)
        self._check_file(path)

        extension = path.suffix
        image = self._to_image()
        try:
            if extension == ".png":
                image.save(path, format="PNG")
            elif extension in (".jpg", ".jpeg"):
                image.convert("RGB").save(path, format="JPEG", quality=100)
            elif extension == ".bmp":
                image.save(path, format="BMP")
        except OSError as exc:
            raise RuntimeError(f"Failed to save image: {path} - {exc}") from exc

    def clear(self) -> None:
        self._width = 0
        self._height = 0
        self._pixels.clear()

    def mask_from_color(self, color: Color, alpha: int = ALPHA_TRANSPARENT) -> None:
        """Set the alpha of every pixel whose RGB matches ``color``."""
        if not 0 <= alpha <= 255:
            raise ValueError(f"alpha must be in 0..255, got {alpha}")
        if not self._has_image():
            return
        target = bytes((color.red, color.green, color.blue))
        for offset in range(0, self.size * _CHANNELS, _CHANNELS):
            if self._pixels[offset : offset + 3] == target:
                self._pixels[offset + 3] = alpha

    def _transpose(self, method: Image.Transpose) -> None:
        if not self._has_image():
            return
        self._pixels = bytearray(self._to_image().transpose(method).tobytes())

    def flip_vertical(self) -> None:
        """Mirror the rows top to bottom."""
        self._transpose(Image.Transpose.FLIP_TOP_BOTTOM)

    def flip_horizontal(self) -> None:
        """Mirror each row left to right."""
        self._transpose(Image.Transpose.FLIP_LEFT_RIGHT)