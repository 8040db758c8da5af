# scop/wavefront/errors.py
"""
Ошибки загрузки Wavefront OBJ.

Иерархия:
    WavefrontObjError
      ├─ WavefrontIOError       – не удалось открыть/прочитать файл
      ├─ WavefrontPathError     – путь нельзя представить строкой UTF‑8
      ├─ WavefrontParseError    – ошибка в строке документа (file, line, detail)
      └─ IndexOutOfRangeError   – грань ссылается на несуществующий элемент
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class AttributeKind(str, Enum):
    """Вид атрибута вершины, на который ссылается грань."""
    POSITION = "position"
    UV = "uv"
    NORMAL = "normal"


# ---------------------------------------------------------------------
# детали ошибок разбора
# ---------------------------------------------------------------------
class ParseErrorDetail:
    """Базовый класс детали ошибки разбора."""

    @property
    def message(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class UnknownCommand(ParseErrorDetail):
    command: str

    @property
    def message(self) -> str:
        return f"Unknown command: {self.command}"


@dataclass(frozen=True)
class InvalidOperandCount(ParseErrorDetail):
    """`expected` – (min, max); None означает «без ограничения»."""
    expected: Tuple[Optional[int], Optional[int]]
    got: int

    @property
    def message(self) -> str:
        low, high = self.expected
        if low is not None and high is not None:
            if low == high:
                return f"Invalid operand count. Expected {low}, got {self.got}"
            return (f"Invalid operand count. Expected a value between "
                    f"{low} and {high}, got {self.got}")
        if low is not None:
            return f"Invalid operand count. Expected at least {low}, got {self.got}"
        return f"Invalid operand count. Expected at most {high}, got {self.got}"


@dataclass(frozen=True)
class FloatParseErrorDetail(ParseErrorDetail):
    literal: str

    @property
    def message(self) -> str:
        return "Malformed float"


class VertexParseFloatError(FloatParseErrorDetail):
    pass


class UVParseFloatError(FloatParseErrorDetail):
    pass


class NormalParseFloatError(FloatParseErrorDetail):
    pass


@dataclass(frozen=True)
class FaceParseIntError(ParseErrorDetail):
    literal: str

    @property
    def message(self) -> str:
        return "Malformed unsigned int"


@dataclass(frozen=True)
class InvalidFaceOperand(ParseErrorDetail):
    value: int

    @property
    def message(self) -> str:
        return f"Invalid index: {self.value}"


# ---------------------------------------------------------------------
# исключения
# ---------------------------------------------------------------------
class WavefrontObjError(Exception):
    """Общий предок всех ошибок загрузки OBJ."""


class WavefrontIOError(WavefrontObjError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class WavefrontPathError(WavefrontObjError):
    def __init__(self, path):
        super().__init__(f"Path is not valid UTF-8: {path!r}")
        self.path = path


class WavefrontParseError(WavefrontObjError):
    """Ошибка в конкретной строке (1‑based) документа."""

    def __init__(self, file: str, line: int, detail: ParseErrorDetail):
        super().__init__(f"{file}:{line}: {detail.message}")
        self.file = file
        self.line = line
        self.detail = detail


class IndexOutOfRangeError(WavefrontObjError):
    """Индекс грани (1‑based) выходит за пределы массива `kind`."""

    def __init__(self, kind: AttributeKind, index: int, length: int):
        super().__init__(
            f"Face references {kind.value} #{index}, "
            f"but only {length} {kind.value}(s) are declared"
        )
        self.kind = kind
        self.index = index
        self.length = length
