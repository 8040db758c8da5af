# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: тестовые OBJ‑документы, мок OpenGL.
Мок не требует GL‑контекста, а только записывает вызовы.
"""

import itertools
from typing import Any, List, Tuple

import pytest

from scop.utils.config import Config


CUBE_OBJ = """\
# unit cube, quads, shared normals
mtllib cube.mtl
o Cube
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 1.0 1.0 0.0
v 0.0 1.0 0.0
v 0.0 0.0 1.0
v 1.0 0.0 1.0
v 1.0 1.0 1.0
v 0.0 1.0 1.0

vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0

vn 0.0 0.0 -1.0
vn 0.0 0.0 1.0
vn 0.0 -1.0 0.0
vn 0.0 1.0 0.0
vn -1.0 0.0 0.0
vn 1.0 0.0 0.0

usemtl Material
s off
g sides
f 1/1/1 4/4/1 3/3/1 2/2/1
f 5/1/2 6/2/2 7/3/2 8/4/2
f 1/1/3 2/2/3 6/3/3 5/4/3
f 4/1/4 8/2/4 7/3/4 3/4/4
f 1/1/5 5/2/5 8/3/5 4/4/5
f 2/1/6 3/2/6 7/3/6 6/4/6
"""

TRIANGLE_OBJ = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"


@pytest.fixture
def cube_obj() -> str:
    return CUBE_OBJ


@pytest.fixture
def triangle_obj() -> str:
    return TRIANGLE_OBJ


@pytest.fixture
def obj_file(tmp_path):
    """Фабрика: записать текст в .obj‑файл и вернуть путь."""
    def _write(text: str, name: str = "model.obj"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config(tmp_path):
    """Свежий Config в tmp_path (singleton сбрасывается до и после)."""
    Config.reset()
    cfg = Config(str(tmp_path / "scop.json"))
    yield cfg
    Config.reset()


# ----------------------------------------------------------------------
# RecordingGL – подмена модуля OpenGL.GL
# ----------------------------------------------------------------------
class RecordingGL:
    """
    Имитация OpenGL.GL.
    Каждая gl*-функция записывает вызов в `self.calls`,
    GL_*-константы – просто строки с их именем.
    """

    GL_NO_ERROR = 0

    def __init__(self) -> None:
        # (function_name, args)
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self._ids = itertools.count(1)
        self.error = 0

    def __getattr__(self, name: str):
        if name.startswith("GL_"):
            return name
        if not name.startswith("gl"):
            raise AttributeError(name)

        def _record(*args):
            self.calls.append((name, args))
            if name.startswith("glGen"):
                return next(self._ids)
            return None
        return _record

    def glGetError(self):
        self.calls.append(("glGetError", ()))
        return self.error

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def fake_gl(monkeypatch):
    gpu_mesh = pytest.importorskip("scop.mesh.gpu_mesh")
    gl = RecordingGL()
    monkeypatch.setattr(gpu_mesh, "GL", gl)
    return gl
