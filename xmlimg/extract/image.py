"""Describe decoded image bytes for progress output.

This is informational only. Bytes Pillow cannot identify are still
written as-is.
"""

from __future__ import annotations

import io
from dataclasses import dataclass


@dataclass
class ImageInfo:
    """Format and dimensions of a decoded image, if recognizable."""

    format: str  # 'png', 'jpeg', ... or 'unknown'
    width: int = 0
    height: int = 0

    def describe(self) -> str:
        if self.format == "unknown":
            return ""
        if self.width and self.height:
            return f"{self.format}, {self.width}x{self.height}"
        return self.format


def describe_image(data: bytes) -> ImageInfo:
    """
    Identify the format and size of image bytes.

    Args:
        data: Decoded image bytes

    Returns:
        ImageInfo, with format 'unknown' when nothing matches
    """
    from PIL import Image, UnidentifiedImageError

    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
            fmt = img.format.lower() if img.format else "unknown"
        if fmt == "jpg":
            fmt = "jpeg"
        elif fmt == "tif":
            fmt = "tiff"
        return ImageInfo(format=fmt, width=width, height=height)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError):
        pass

    # Fall back to magic bytes when PIL can't open it
    if data.startswith(b"\x89PNG"):
        fmt = "png"
    elif data.startswith(b"\xff\xd8\xff"):
        fmt = "jpeg"
    elif data.startswith(b"GIF8"):
        fmt = "gif"
    elif data.startswith(b"RIFF") and b"WEBP" in data[:12]:
        fmt = "webp"
    elif data.startswith(b"BM"):
        fmt = "bmp"
    else:
        fmt = "unknown"
    return ImageInfo(format=fmt)
