# scop/loader.py
"""
Загрузка модели целиком: OBJ → MeshData → bounding box → Transform.

Любая ошибка прерывает загрузку; решать, что делать дальше (оставить
прежнюю модель или выйти), должен вызывающий код.
"""

from dataclasses import dataclass
from typing import Optional

from scop.math.bounding_box import BoundingBox
from scop.math.transform import Transform
from scop.math.vec3 import Vec3
from scop.mesh.mesh_data import MeshData
from scop.utils.logger import logger
from scop.utils.profiler import Profiler
from scop.wavefront.errors import (
    IndexOutOfRangeError,
    WavefrontObjError,
    WavefrontParseError,
)
from scop.wavefront.parser import Obj

ERROR_PREFIX = "\x1b[0;31merror:\x1b[0m"


@dataclass(frozen=True)
class LoadedModel:
    obj: Obj
    mesh: MeshData
    bounding_box: Optional[BoundingBox]
    transform: Transform
    bounding_box_mesh: Optional[MeshData]


def build_model(obj: Obj, center: bool = True) -> LoadedModel:
    """Собрать LoadedModel из уже разобранного документа."""
    with Profiler(f"MeshData.from_obj({obj.source})"):
        mesh = MeshData.from_obj(obj)

    box = mesh.bounding_box()
    transform = Transform()
    if center and box is not None:
        transform.origin = -Vec3.from_iterable(box.center())

    return LoadedModel(
        obj=obj,
        mesh=mesh,
        bounding_box=box,
        transform=transform,
        bounding_box_mesh=MeshData.from_bounding_box(box),
    )


def load_model(path, center: bool = True) -> LoadedModel:
    with Profiler(f"Obj.from_file({path})"):
        obj = Obj.from_file(path)

    logger.info(
        f"[Loader] Successfully loaded '{path}'. Total: "
        f"{len(obj.positions)} vertices, {len(obj.faces)} faces"
    )
    return build_model(obj, center=center)


def format_obj_error(error: WavefrontObjError, color: bool = False) -> str:
    """Текст диагностики в стиле компилятора: `file:line` + `error: ...`."""
    prefix = ERROR_PREFIX if color else "error:"
    if isinstance(error, WavefrontParseError):
        return f"{error.file}:{error.line}\n{prefix} {error.detail.message}"
    if isinstance(error, IndexOutOfRangeError):
        return (f"{prefix} Index out of range: {error.kind.value} {error.index} "
                f"(only {error.length} declared)")
    return f"{prefix} {error}"
