"""
Wavefront OBJ: парсер, записи и ошибки.
"""

from scop.wavefront.errors import (
    AttributeKind,
    FaceParseIntError,
    IndexOutOfRangeError,
    InvalidFaceOperand,
    InvalidOperandCount,
    NormalParseFloatError,
    ParseErrorDetail,
    UnknownCommand,
    UVParseFloatError,
    VertexParseFloatError,
    WavefrontIOError,
    WavefrontObjError,
    WavefrontParseError,
    WavefrontPathError,
)
from scop.wavefront.records import UV, Face, FaceAttribute, Normal, Position
from scop.wavefront.parser import INLINE_SOURCE, Obj

__all__ = [
    "AttributeKind",
    "Face",
    "FaceAttribute",
    "FaceParseIntError",
    "INLINE_SOURCE",
    "IndexOutOfRangeError",
    "InvalidFaceOperand",
    "InvalidOperandCount",
    "Normal",
    "NormalParseFloatError",
    "Obj",
    "ParseErrorDetail",
    "Position",
    "UV",
    "UVParseFloatError",
    "UnknownCommand",
    "VertexParseFloatError",
    "WavefrontIOError",
    "WavefrontObjError",
    "WavefrontParseError",
    "WavefrontPathError",
]
