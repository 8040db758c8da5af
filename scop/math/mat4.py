# scop/math/mat4.py
import numpy as np


class Mat4:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    def __matmul__(self, other: "Mat4") -> "Mat4":
        return Mat4(np.dot(self.m, other.m))

    def transform_point(self, point) -> np.ndarray:
        """Применить матрицу к точке (w = 1), вернуть xyz."""
        p = np.append(np.asarray(point, dtype=np.float32)[:3], 1.0)
        return (self.m @ p)[:3]

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_gl(self) -> np.ndarray:
        """Транспонируем для передачи в OpenGL (столбцы‑массив)."""
        return self.m.T.copy()
