"""
Текстуры: декодер TGA и общий загрузчик.
"""

from scop.texture.targa import (
    Targa,
    TargaError,
    TargaImageType,
    InvalidHeader,
    UnsupportedImageType,
    UnsupportedBitDepth,
    UnsupportedOrdering,
)
from scop.texture.loader import Texture, load_texture

__all__ = [
    "Targa",
    "TargaError",
    "TargaImageType",
    "InvalidHeader",
    "UnsupportedImageType",
    "UnsupportedBitDepth",
    "UnsupportedOrdering",
    "Texture",
    "load_texture",
]
