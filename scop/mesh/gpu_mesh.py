# scop/mesh/gpu_mesh.py
import ctypes

import numpy as np
from OpenGL import GL

from scop.mesh.mesh_data import LINES, MeshData
from scop.utils.logger import logger

# position(3) normal(3) color(3) uv(2)
FLOATS_PER_VERTEX = 11
_STRIDE = FLOATS_PER_VERTEX * 4
_ATTRIBUTES = (
    # location, components, offset (в float)
    (0, 3, 0),
    (1, 3, 3),
    (2, 3, 6),
    (3, 2, 9),
)

WHITE = (1.0, 1.0, 1.0)


def _column(values: np.ndarray, width: int, count: int, default) -> np.ndarray:
    """Атрибут как массив count×width; недостающие вершины – `default`."""
    out = np.empty((count, width), dtype=np.float32)
    out[:] = default
    data = np.asarray(values, dtype=np.float32).reshape((-1, width))[:count]
    out[:len(data)] = data
    return out


def interleave(data: MeshData) -> np.ndarray:
    """Собрать вершинный буфер (N×11 float32) из MeshData."""
    count = data.vertex_count
    return np.hstack([
        _column(data.positions, 3, count, 0.0),
        _column(data.normals, 3, count, 0.0),
        _column(data.colors, 3, count, WHITE),
        _column(data.uvs, 2, count, 0.0),
    ])


def gl_check_error(context: str = "") -> bool:
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        logger.error(f"OpenGL error 0x{int(err):04X} [{context}]")
        return False
    return True


class GpuMesh:
    """Меш в видеопамяти – лениво создаёт VAO при первом draw()."""

    def __init__(self, data: MeshData, name="Mesh"):
        self.name = name
        self.data = data
        self.vertices = interleave(data)
        self.indices = np.ascontiguousarray(data.indices, dtype=np.uint32)
        self.index_count = len(self.indices)
        self.mode = GL.GL_LINES if data.primitive == LINES else GL.GL_TRIANGLES

        self.vao = None
        self.vbo = None
        self.ebo = None

    # -----------------------------------------------------------------
    def _setup_vao(self):
        self.vao = GL.glGenVertexArrays(1)
        GL.glBindVertexArray(self.vao)

        self.vbo = GL.glGenBuffers(1)
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.vbo)
        GL.glBufferData(GL.GL_ARRAY_BUFFER,
                        self.vertices.nbytes,
                        self.vertices,
                        GL.GL_STATIC_DRAW)

        self.ebo = GL.glGenBuffers(1)
        GL.glBindBuffer(GL.GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        GL.glBufferData(GL.GL_ELEMENT_ARRAY_BUFFER,
                        self.indices.nbytes,
                        self.indices,
                        GL.GL_STATIC_DRAW)

        for location, size, offset in _ATTRIBUTES:
            GL.glVertexAttribPointer(location, size, GL.GL_FLOAT, False,
                                     _STRIDE, ctypes.c_void_p(offset * 4))
            GL.glEnableVertexAttribArray(location)

        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, 0)
        GL.glBindVertexArray(0)
        gl_check_error(f"GpuMesh._setup_vao({self.name})")
        logger.debug(f"[GpuMesh] Uploaded {self.name}: "
                     f"{len(self.vertices)} vertices, {self.index_count} indices")

    # -----------------------------------------------------------------
    def _ensure_vao(self):
        if self.vao is None:
            self._setup_vao()

    def bind(self):
        self._ensure_vao()
        GL.glBindVertexArray(self.vao)

    @staticmethod
    def unbind():
        GL.glBindVertexArray(0)

    # -----------------------------------------------------------------
    def draw(self):
        """Отрисовка через чистый OpenGL."""
        self.bind()
        GL.glDrawElements(self.mode, self.index_count, GL.GL_UNSIGNED_INT, None)
        self.unbind()

    # -----------------------------------------------------------------
    def cleanup(self):
        """Освободить GL‑ресурсы."""
        if self.vao:
            GL.glDeleteVertexArrays(1, [self.vao])
        if self.vbo:
            GL.glDeleteBuffers(1, [self.vbo])
        if self.ebo:
            GL.glDeleteBuffers(1, [self.ebo])
        self.vao = self.vbo = self.ebo = None
