"""
Математический суб‑пакет: Vec3, Mat4, Quat, Transform, BoundingBox.
"""

from scop.math.vec3 import Vec3
from scop.math.mat4 import Mat4
from scop.math.quat import Quat
from scop.math.transform import Transform
from scop.math.bounding_box import BoundingBox

__all__ = ["Vec3", "Mat4", "Quat", "Transform", "BoundingBox"]
