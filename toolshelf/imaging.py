"""Pixel operations on raw RGBA buffers."""

from __future__ import annotations

import struct

_RED = 0.299
_GREEN = 0.587
_BLUE = 0.114


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_RED32 = _f32(_RED)
_GREEN32 = _f32(_GREEN)
_BLUE32 = _f32(_BLUE)


def _gray(red: int, green: int, blue: int) -> int:
    value = _f32(_f32(red * _RED32) + _f32(green * _GREEN32))
    value = _f32(value + _f32(blue * _BLUE32))
    return min(255, max(0, int(value)))


def apply_grayscale(data: bytes, width: int, height: int) -> bytes:
    """Convert an RGBA image to grayscale, keeping each pixel's alpha.

    The buffer must hold at least width * height * 4 bytes; any bytes past
    the image are returned unchanged. Raises ValueError when it is too short.
    """
    if width < 0 or height < 0:
        raise ValueError("Invalid image dimensions")
    needed = width * height * 4
    pixels = bytearray(data)
    if len(pixels) < needed:
        raise ValueError("Invalid image dimensions")
    for offset in range(0, needed, 4):
        gray = _gray(pixels[offset], pixels[offset + 1], pixels[offset + 2])
        pixels[offset : offset + 3] = bytes((gray, gray, gray))
    return bytes(pixels)