"""
Axis‑aligned bounding box.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

Point = Tuple[float, float, float]


@dataclass(frozen=True)
class BoundingBox:
    min_point: Point
    max_point: Point

    @classmethod
    def from_positions(cls, positions) -> Optional["BoundingBox"]:
        """Покомпонентные min/max по плоскому (или N×3) массиву позиций.

        Для пустого массива возвращает None.
        """
        pts = np.asarray(positions, dtype=np.float32).reshape((-1, 3))
        # NaN‑координаты пропускаются; столбец из одних NaN – коробки нет
        if len(pts) == 0 or np.isnan(pts).all(axis=0).any():
            return None
        lo = np.nanmin(pts, axis=0)
        hi = np.nanmax(pts, axis=0)
        return cls(tuple(float(c) for c in lo), tuple(float(c) for c in hi))

    def get_vertices(self) -> Tuple[Point, ...]:
        """8 углов; бит 0 – x, бит 1 – y, бит 2 – z (0 = min, 1 = max)."""
        corners = []
        for i in range(8):
            corners.append((
                self.max_point[0] if i & 1 else self.min_point[0],
                self.max_point[1] if i & 2 else self.min_point[1],
                self.max_point[2] if i & 4 else self.min_point[2],
            ))
        return tuple(corners)

    def contains(self, point) -> bool:
        return all(lo <= p <= hi for lo, p, hi in zip(self.min_point, point, self.max_point))

    def center(self) -> Point:
        return tuple((lo + hi) * 0.5 for lo, hi in zip(self.min_point, self.max_point))

    def size(self) -> Point:
        return tuple(hi - lo for lo, hi in zip(self.min_point, self.max_point))
