# scop/mesh/mesh_data.py
"""
MeshData – индексированный меш, готовый к загрузке в GPU.

Из разобранного OBJ: грани → веер треугольников → уникальные
комбинации (позиция, uv, нормаль) → плоские массивы + список индексов.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from scop.math.bounding_box import BoundingBox
from scop.math.vec3 import Vec3
from scop.mesh.triangulate import triangulate
from scop.utils.logger import logger
from scop.wavefront.errors import AttributeKind, IndexOutOfRangeError
from scop.wavefront.parser import Obj
from scop.wavefront.records import FaceAttribute

TRIANGLES = "triangles"
LINES = "lines"

DEFAULT_NORMAL = (0.0, 0.0, 0.0)
DEFAULT_UV = (0.0, 0.0)

# рёбра bounding box по углам BoundingBox.get_vertices()
_BOX_EDGES = (
    0, 1, 1, 3, 3, 2, 2, 0,   # передняя грань
    4, 5, 5, 7, 7, 6, 6, 4,   # задняя грань
    0, 4, 1, 5, 2, 6, 3, 7,
)


def _frozen(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.setflags(write=False)
    return arr


def _resolve(items: Sequence, index: int, kind: AttributeKind):
    """Элемент по индексу OBJ (1‑based) с проверкой границ."""
    if not 1 <= index <= len(items):
        raise IndexOutOfRangeError(kind, index, len(items))
    return items[index - 1]


@dataclass(frozen=True, eq=False)
class MeshData:
    """Плоские read‑only массивы: по 3 float на позицию/нормаль/цвет,
    2 float на uv; индексы uint32 (3 на треугольник или 2 на линию).

    Пустые `normals`, `uvs`, `colors` означают «атрибута нет».
    """
    positions: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    colors: np.ndarray
    indices: np.ndarray
    primitive: str = TRIANGLES

    # -----------------------------------------------------------------
    @classmethod
    def new(cls, positions=(), normals=(), uvs=(), colors=(), indices=(),
            primitive: str = TRIANGLES) -> "MeshData":
        return cls(
            positions=_frozen(positions, np.float32),
            normals=_frozen(normals, np.float32),
            uvs=_frozen(uvs, np.float32),
            colors=_frozen(colors, np.float32),
            indices=_frozen(indices, np.uint32),
            primitive=primitive,
        )

    @classmethod
    def from_obj(cls, obj: Obj) -> "MeshData":
        """Триангулировать грани и слить одинаковые углы в одну вершину.

        Ключ слияния – тройка индексов FaceAttribute, а не значения
        координат. Индекс вне диапазона → IndexOutOfRangeError.
        """
        positions: List[float] = []
        normals: List[float] = []
        uvs: List[float] = []
        indices: List[int] = []
        processed: Dict[FaceAttribute, int] = {}

        for face in obj.faces:
            for triangle in triangulate(face.attributes):
                for attribute in triangle:
                    index = processed.get(attribute)
                    if index is None:
                        index = len(processed)
                        cls._append_vertex(obj, attribute, positions, normals, uvs)
                        processed[attribute] = index
                    indices.append(index)

        logger.debug(
            f"[MeshData] {len(processed)} unique vertices, "
            f"{len(indices) // 3} triangles from {len(obj.faces)} faces"
        )
        return cls.new(positions, normals, uvs, (), indices)

    @staticmethod
    def _append_vertex(obj: Obj, attribute: FaceAttribute,
                       positions: List[float], normals: List[float], uvs: List[float]) -> None:
        position = _resolve(obj.positions, attribute.position_index, AttributeKind.POSITION)

        if attribute.normal_index is None:
            normal = DEFAULT_NORMAL
        else:
            raw = _resolve(obj.normals, attribute.normal_index, AttributeKind.NORMAL)
            normal = Vec3.from_iterable(raw).normalized().to_tuple()

        if attribute.uv_index is None:
            uv = DEFAULT_UV
        else:
            raw_uv = _resolve(obj.uvs, attribute.uv_index, AttributeKind.UV)
            uv = (raw_uv.u, raw_uv.v)

        positions.extend((position.x, position.y, position.z))
        normals.extend(normal)
        uvs.extend(uv)

    # -----------------------------------------------------------------
    # вспомогательные меши
    # -----------------------------------------------------------------
    @classmethod
    def axes(cls) -> "MeshData":
        """Оси X/Y/Z длиной 1000 (красная, зелёная, синяя)."""
        positions = [
            0.0, 0.0, 0.0, 1000.0, 0.0, 0.0,
            0.0, 0.0, 0.0, 0.0, 1000.0, 0.0,
            0.0, 0.0, 0.0, 0.0, 0.0, 1000.0,
        ]
        colors = [
            1.0, 0.0, 0.0, 1.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 1.0, 0.0, 0.0, 1.0,
        ]
        return cls.new(positions, colors=colors, indices=range(6), primitive=LINES)

    @classmethod
    def from_bounding_box(cls, box: Optional[BoundingBox]) -> Optional["MeshData"]:
        """Красный каркас bounding box; None, если коробки нет."""
        if box is None:
            return None
        corners = box.get_vertices()
        positions = [c for corner in corners for c in corner]
        colors = [1.0, 0.0, 0.0] * len(corners)
        return cls.new(positions, colors=colors, indices=_BOX_EDGES, primitive=LINES)

    # -----------------------------------------------------------------
    @property
    def vertex_count(self) -> int:
        return len(self.positions) // 3

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3 if self.primitive == TRIANGLES else 0

    def bounding_box(self) -> Optional[BoundingBox]:
        return BoundingBox.from_positions(self.positions)
