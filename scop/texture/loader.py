"""
Загрузка диффузной текстуры: TGA – собственным декодером, остальное – Pillow.
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from scop.texture.targa import Targa
from scop.utils.logger import logger


@dataclass(frozen=True)
class Texture:
    """Пиксели по 3 байта на точку, строки сверху вниз."""
    width: int
    height: int
    pixels: bytes
    channel_order: str = "RGB"


def load_texture(path) -> Texture:
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"Texture not found: {p}")

    if p.suffix.lower() == ".tga":
        tga = Targa.from_file(p)
        tex = Texture(tga.width, tga.height, tga.bytes, channel_order="BGR")
    else:
        with Image.open(p) as img:
            rgb = img.convert("RGB")
            w, h = rgb.size
            tex = Texture(w, h, np.array(rgb, dtype=np.uint8).tobytes())

    logger.debug(f"[TextureLoader] Loaded texture {p} ({tex.width}x{tex.height})")
    return tex
