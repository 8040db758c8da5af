"""
Fan‑триангуляция граней OBJ.

Рассчитана на выпуклые плоские многоугольники: для вогнутых граней
веер может дать неверные треугольники.
"""

from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def triangulate(attributes: Sequence[T]) -> List[Tuple[T, T, T]]:
    """Разбить многоугольник из n >= 3 углов на n‑2 треугольника,
    каждый из которых начинается с первого угла."""
    n = len(attributes)
    if n < 3:
        raise ValueError(f"A face needs at least 3 attributes, got {n}")
    anchor = attributes[0]
    return [(anchor, attributes[i], attributes[i + 1]) for i in range(1, n - 1)]
