"""
Меш: триангуляция, индексирование вершин, GPU‑буферы.

GpuMesh импортируется отдельно (scop.mesh.gpu_mesh), т.к. требует PyOpenGL.
"""

from scop.mesh.triangulate import triangulate
from scop.mesh.mesh_data import MeshData, TRIANGLES, LINES

__all__ = ["triangulate", "MeshData", "TRIANGLES", "LINES"]
