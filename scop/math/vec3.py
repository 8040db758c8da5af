# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32), неизменяемый.
"""
from typing import Iterable, Tuple

import numpy as np


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)
        self._v.setflags(write=False)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vec3":
        x, y, z = values
        return cls(x, y, z)

    # -------------------------------------------------
    # арифметика
    # -------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v + other._v))

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __neg__(self) -> "Vec3":
        return Vec3(*(-self._v))

    # -------------------------------------------------
    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vec3":
        """Единичный вектор; нулевой вектор остаётся нулевым."""
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self):
        return "Vec3({:.3f}, {:.3f}, {:.3f})".format(*self._v)
