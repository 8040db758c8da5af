# scop/math/quat.py
"""
Кватернион вращения (x, y, z, w): ось/угол, произведение, матрица 4×4.
"""
from math import cos, radians, sin

import numpy as np

from scop.math.mat4 import Mat4


class Quat:
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @staticmethod
    def from_axis_angle(axis, angle_deg: float) -> "Quat":
        """axis – 3 компоненты (нормируется), угол в градусах."""
        half = radians(angle_deg) / 2.0
        ax = np.asarray(axis, dtype=np.float64)
        ax = ax / np.linalg.norm(ax) * sin(half)
        return Quat(ax[0], ax[1], ax[2], cos(half))

    def __mul__(self, other: "Quat") -> "Quat":
        """Произведение Гамильтона (сначала other, затем self)."""
        a = np.array([self.x, self.y, self.z])
        b = np.array([other.x, other.y, other.z])
        xyz = self.w * b + other.w * a + np.cross(a, b)
        return Quat(*xyz, self.w * other.w - float(np.dot(a, b)))

    def conjugate(self) -> "Quat":
        return Quat(-self.x, -self.y, -self.z, self.w)

    def rotate_vector(self, vec) -> np.ndarray:
        """q · v · q*, результат – float32 длины 3."""
        res = self * Quat(vec[0], vec[1], vec[2], 0.0) * self.conjugate()
        return np.array([res.x, res.y, res.z], dtype=np.float32)

    def to_mat4(self) -> Mat4:
        """Матрица вращения: столбцы – повёрнутые базисные векторы."""
        m = np.identity(4, dtype=np.float32)
        for i, axis in enumerate(np.identity(3)):
            m[:3, i] = self.rotate_vector(axis)
        return Mat4(m)

    def __repr__(self):
        return f"Quat({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"
