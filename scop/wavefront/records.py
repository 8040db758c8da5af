# -*- coding: utf-8 -*-
"""
Типизированные записи OBJ и парсеры операндов.

Функции здесь «чистые»: получают список операндов строки и возвращают
запись либо бросают ValueError, который диспетчер превращает в
WavefrontParseError с нужной деталью.
"""
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

# u32 без знака, допускается ведущий «+»
_UINT_RE = re.compile(r"\+?[0-9]+")
_UINT_MAX = 0xFFFFFFFF


class Position(NamedTuple):
    x: float
    y: float
    z: float
    w: float = 1.0


class UV(NamedTuple):
    u: float
    v: float = 0.0
    w: float = 0.0


class Normal(NamedTuple):
    x: float
    y: float
    z: float


class FaceAttribute(NamedTuple):
    """Угол грани: индексы (1‑based) позиции, UV и нормали.

    Равенство и хэш – по тройке индексов, поэтому запись сама является
    ключом дедупликации вершин.
    """
    position_index: int
    uv_index: Optional[int] = None
    normal_index: Optional[int] = None


@dataclass(frozen=True)
class Face:
    """Многоугольник (>= 3 углов), порядок углов задаёт обход."""
    attributes: Tuple[FaceAttribute, ...]

    def __len__(self) -> int:
        return len(self.attributes)

    def __iter__(self):
        return iter(self.attributes)


# ---------------------------------------------------------------------
# числа
# ---------------------------------------------------------------------
def parse_float(literal: str) -> float:
    # float() понимает «1_0», в OBJ такого не бывает
    if "_" in literal:
        raise ValueError(f"could not convert string to float: {literal!r}")
    return float(literal)


def parse_uint(literal: str) -> int:
    if not _UINT_RE.fullmatch(literal):
        raise ValueError(f"invalid unsigned integer: {literal!r}")
    value = int(literal)
    if value > _UINT_MAX:
        raise ValueError(f"unsigned integer out of range: {literal!r}")
    return value


def parse_floats(operands: Sequence[str]) -> List[float]:
    return [parse_float(op) for op in operands]


# ---------------------------------------------------------------------
# записи
# ---------------------------------------------------------------------
def parse_position(operands: Sequence[str]) -> Position:
    return Position(*parse_floats(operands))


def parse_uv(operands: Sequence[str]) -> UV:
    return UV(*parse_floats(operands))


def parse_normal(operands: Sequence[str]) -> Normal:
    return Normal(*parse_floats(operands))


def _optional_index(parts: List[str], i: int) -> Optional[int]:
    if i >= len(parts) or parts[i] == "":
        return None
    return parse_uint(parts[i])


def parse_face_attribute(operand: str) -> FaceAttribute:
    """`p`, `p/t`, `p//n`, `p/t/n` → FaceAttribute.

    Поля после третьего игнорируются.
    """
    parts = operand.split("/")
    return FaceAttribute(
        position_index=parse_uint(parts[0]),
        uv_index=_optional_index(parts, 1),
        normal_index=_optional_index(parts, 2),
    )
