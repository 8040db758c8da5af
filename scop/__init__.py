"""
Scop – загрузчик Wavefront OBJ для OpenGL‑просмотрщика.
Текст OBJ → разобранный документ → индексированный меш → bounding box.
"""

from scop.utils import logger
from scop.wavefront import (
    Obj,
    Face,
    FaceAttribute,
    WavefrontObjError,
    WavefrontParseError,
    IndexOutOfRangeError,
)
from scop.mesh import MeshData, triangulate
from scop.math import Vec3, Mat4, Quat, Transform, BoundingBox
from scop.loader import LoadedModel, load_model, build_model, format_obj_error

__version__ = "1.0.0"

__all__ = [
    "Obj",
    "Face",
    "FaceAttribute",
    "WavefrontObjError",
    "WavefrontParseError",
    "IndexOutOfRangeError",
    "MeshData",
    "triangulate",
    "Vec3",
    "Mat4",
    "Quat",
    "Transform",
    "BoundingBox",
    "LoadedModel",
    "load_model",
    "build_model",
    "format_obj_error",
]
