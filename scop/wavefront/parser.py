# -*- coding: utf-8 -*-
"""
Построчный парсер Wavefront OBJ (позиции, texcoords, нормали, грани).

Материалы и группы (mtllib, usemtl, s, g, o) распознаются, но
игнорируются. Разбор останавливается на первой ошибке – частичный
документ никогда не возвращается.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from scop.utils.logger import logger
from scop.wavefront import records
from scop.wavefront.errors import (
    FaceParseIntError,
    InvalidFaceOperand,
    InvalidOperandCount,
    NormalParseFloatError,
    ParseErrorDetail,
    UnknownCommand,
    UVParseFloatError,
    VertexParseFloatError,
    WavefrontIOError,
    WavefrontParseError,
    WavefrontPathError,
)
from scop.wavefront.records import UV, Face, Normal, Position

INLINE_SOURCE = "inline"

# директивы без данных
IGNORED_COMMANDS = frozenset({"mtllib", "usemtl", "s", "g", "o"})


@dataclass(frozen=True)
class Obj:
    """Разобранный документ: «сырые» массивы в порядке появления.

    Грани ссылаются на элементы по индексам, начинающимся с 1.
    """
    positions: Tuple[Position, ...]
    uvs: Tuple[UV, ...]
    normals: Tuple[Normal, ...]
    faces: Tuple[Face, ...]
    source: str = INLINE_SOURCE

    # -----------------------------------------------------------------
    @classmethod
    def from_string(cls, data: str, file_name: Optional[str] = None) -> "Obj":
        return _Parser(file_name or INLINE_SOURCE).parse(data)

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "Obj":
        """Прочитать файл целиком и разобрать его."""
        path_str = os.fspath(path)
        if isinstance(path_str, bytes):
            try:
                path_str = path_str.decode("utf-8")
            except UnicodeDecodeError:
                raise WavefrontPathError(path) from None
        try:
            # суррогаты = байты, которые не декодировались из ФС
            path_str.encode("utf-8")
        except UnicodeEncodeError:
            raise WavefrontPathError(path) from None

        try:
            # read_text() превратил бы одиночный \r в \n
            data = Path(path_str).read_bytes().decode("utf-8")
        except OSError as exc:
            raise WavefrontIOError(path_str, exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise WavefrontIOError(path_str, f"not valid UTF-8 ({exc.reason})") from exc

        obj = cls.from_string(data, path_str)
        logger.debug(f"[Wavefront] Read {len(data)} characters from {path_str}")
        return obj

    # -----------------------------------------------------------------
    def vertices(self) -> Tuple[Position, ...]:
        return self.positions


# ---------------------------------------------------------------------
# диспетчер директив
# ---------------------------------------------------------------------
def check_operand_count(low: int, high: Optional[int], got: int) -> Optional[InvalidOperandCount]:
    """None, если `got` в [low, high]; high=None – без верхней границы."""
    if got < low or (high is not None and got > high):
        return InvalidOperandCount(expected=(low, high), got=got)
    return None


class _Parser:
    """Одноразовый проход по тексту; накапливает массивы до конца разбора."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        self.positions: List[Position] = []
        self.uvs: List[UV] = []
        self.normals: List[Normal] = []
        self.faces: List[Face] = []
        self._handlers: Dict[str, Callable[[int, Sequence[str]], None]] = {
            "v": self._handle_position,
            "vt": self._handle_uv,
            "vn": self._handle_normal,
            "f": self._handle_face,
        }

    def _error(self, line: int, detail: ParseErrorDetail) -> WavefrontParseError:
        return WavefrontParseError(self.file_name, line, detail)

    def _check_count(self, line: int, low: int, high: Optional[int], operands) -> None:
        detail = check_operand_count(low, high, len(operands))
        if detail is not None:
            raise self._error(line, detail)

    # -----------------------------------------------------------------
    def _handle_position(self, line: int, operands: Sequence[str]) -> None:
        self._check_count(line, 3, 4, operands)
        try:
            self.positions.append(records.parse_position(operands))
        except ValueError:
            raise self._error(line, VertexParseFloatError(_bad_float(operands))) from None

    def _handle_uv(self, line: int, operands: Sequence[str]) -> None:
        self._check_count(line, 1, 3, operands)
        try:
            self.uvs.append(records.parse_uv(operands))
        except ValueError:
            raise self._error(line, UVParseFloatError(_bad_float(operands))) from None

    def _handle_normal(self, line: int, operands: Sequence[str]) -> None:
        self._check_count(line, 3, 3, operands)
        try:
            self.normals.append(records.parse_normal(operands))
        except ValueError:
            raise self._error(line, NormalParseFloatError(_bad_float(operands))) from None

    def _handle_face(self, line: int, operands: Sequence[str]) -> None:
        self._check_count(line, 3, None, operands)
        attributes = []
        for operand in operands:
            try:
                attributes.append(records.parse_face_attribute(operand))
            except ValueError:
                raise self._error(line, FaceParseIntError(operand)) from None
        if any(a.position_index == 0 for a in attributes):
            raise self._error(line, InvalidFaceOperand(0))
        self.faces.append(Face(tuple(attributes)))

    # -----------------------------------------------------------------
    def parse(self, data: str) -> Obj:
        # str.splitlines() режет и по \x0c, \x1c…; нужны только переводы строк
        for i, raw in enumerate(data.split("\n"), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            command, *operands = line.split()
            handler = self._handlers.get(command)
            if handler is not None:
                handler(i, operands)
            elif command not in IGNORED_COMMANDS:
                raise self._error(i, UnknownCommand(command))

        logger.debug(
            f"[Wavefront] Parsed {self.file_name}: {len(self.positions)} positions, "
            f"{len(self.uvs)} uvs, {len(self.normals)} normals, {len(self.faces)} faces"
        )
        return Obj(
            positions=tuple(self.positions),
            uvs=tuple(self.uvs),
            normals=tuple(self.normals),
            faces=tuple(self.faces),
            source=self.file_name,
        )


def _bad_float(operands: Sequence[str]) -> str:
    """Первый операнд, который не читается как float."""
    for op in operands:
        try:
            records.parse_float(op)
        except ValueError:
            return op
    return ""
