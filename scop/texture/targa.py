"""
Декодер Truevision TGA.

Поддерживается только несжатый true‑color (тип 2), 24 или 32 бит на
пиксель, порядок строк сверху вниз и слева направо. Пиксели
возвращаются как 3 байта на точку в порядке файла (BGR), альфа
отбрасывается.
"""

import struct
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import numpy as np

HEADER_SIZE = 18
_HEADER = struct.Struct("<BBBHHBHHHHBB")


class TargaImageType(IntEnum):
    NO_IMAGE = 0
    UNCOMPRESSED_COLOR_MAPPED = 1
    UNCOMPRESSED_TRUE_COLOR = 2
    UNCOMPRESSED_GRAYSCALE = 3
    COMPRESSED_COLOR_MAPPED = 9
    COMPRESSED_TRUE_COLOR = 10
    COMPRESSED_GRAYSCALE = 11


class TargaError(Exception):
    """Общий предок ошибок декодирования TGA."""


class InvalidHeader(TargaError):
    pass


class UnsupportedImageType(TargaError):
    def __init__(self, image_type: TargaImageType):
        super().__init__(f"Unsupported TGA image type: {image_type.name}")
        self.image_type = image_type


class UnsupportedBitDepth(TargaError):
    def __init__(self, bits_per_pixel: int):
        super().__init__(f"Unsupported TGA bit depth: {bits_per_pixel}")
        self.bits_per_pixel = bits_per_pixel


class UnsupportedOrdering(TargaError):
    def __init__(self, right_to_left: bool, top_to_bottom: bool):
        super().__init__(
            "Unsupported TGA pixel ordering: "
            f"{'right-to-left' if right_to_left else 'left-to-right'}, "
            f"{'top-to-bottom' if top_to_bottom else 'bottom-to-top'}"
        )
        self.right_to_left = right_to_left
        self.top_to_bottom = top_to_bottom


@dataclass(frozen=True)
class TargaHeader:
    id_length: int
    color_map_included: bool
    image_type: TargaImageType
    width: int
    height: int
    bits_per_pixel: int
    alpha_depth: int
    right_to_left: bool
    top_to_bottom: bool

    @classmethod
    def from_bytes(cls, data: bytes) -> "TargaHeader":
        if len(data) < HEADER_SIZE:
            raise InvalidHeader(f"TGA header needs {HEADER_SIZE} bytes, got {len(data)}")
        (id_length, color_map, image_type, _cm_first, _cm_length, _cm_entry,
         _x, _y, width, height, bpp, descriptor) = _HEADER.unpack_from(data)
        try:
            image_type = TargaImageType(image_type)
        except ValueError:
            raise InvalidHeader(f"Unknown TGA image type {image_type}") from None
        return cls(
            id_length=id_length,
            color_map_included=color_map != 0,
            image_type=image_type,
            width=width,
            height=height,
            bits_per_pixel=bpp,
            alpha_depth=descriptor & 0x0F,
            right_to_left=bool(descriptor & 0x10),
            top_to_bottom=bool(descriptor & 0x20),
        )


@dataclass(frozen=True)
class Targa:
    width: int
    height: int
    bytes: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "Targa":
        header = TargaHeader.from_bytes(data)

        if header.image_type != TargaImageType.UNCOMPRESSED_TRUE_COLOR:
            raise UnsupportedImageType(header.image_type)
        if header.bits_per_pixel not in (24, 32):
            raise UnsupportedBitDepth(header.bits_per_pixel)
        if header.right_to_left or not header.top_to_bottom:
            raise UnsupportedOrdering(header.right_to_left, header.top_to_bottom)

        channels = header.bits_per_pixel // 8
        start = HEADER_SIZE + header.id_length
        end = start + header.width * header.height * channels
        if end > len(data):
            raise InvalidHeader(
                f"TGA pixel data truncated: need {end} bytes, got {len(data)}"
            )

        pixels = np.frombuffer(data, dtype=np.uint8, count=end - start, offset=start)
        pixels = pixels.reshape((-1, channels))[:, :3]
        return cls(header.width, header.height, pixels.tobytes())

    @classmethod
    def from_file(cls, path) -> "Targa":
        return cls.from_bytes(Path(path).read_bytes())
