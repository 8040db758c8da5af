# scop/cli.py
"""
Командная строка: загрузить OBJ и вывести сводку по мешу.

    scop model.obj [--config scop.json] [--texture diffuse.tga] [--no-center]
"""

import argparse
import sys

from scop.loader import format_obj_error, load_model
from scop.texture.loader import load_texture
from scop.texture.targa import TargaError
from scop.utils.config import Config
from scop.utils.logger import logger, set_level
from scop.wavefront.errors import WavefrontObjError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scop",
        description="Load a Wavefront OBJ model and report its indexed mesh.",
    )
    parser.add_argument("model", help="path to the .obj file")
    parser.add_argument("--config", default="scop.json", help="JSON config path")
    parser.add_argument("--texture", default=None,
                        help="diffuse texture (defaults to the config value)")
    parser.add_argument("--no-center", action="store_true",
                        help="do not move the model centre to the origin")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = Config(args.config)
    set_level(config["log_level"])

    try:
        model = load_model(args.model, center=config["center_model"] and not args.no_center)
    except WavefrontObjError as exc:
        print(format_obj_error(exc, color=sys.stderr.isatty()), file=sys.stderr)
        return 1

    mesh = model.mesh
    print(f"{model.obj.source}: {mesh.vertex_count} vertices, "
          f"{mesh.triangle_count} triangles, {mesh.index_count} indices")
    if model.bounding_box is None:
        print("bounding box: none")
    else:
        print(f"bounding box: min={model.bounding_box.min_point} "
              f"max={model.bounding_box.max_point}")

    texture_path = args.texture or config["diffuse_texture"]
    if texture_path:
        try:
            tex = load_texture(texture_path)
            print(f"texture: {texture_path} ({tex.width}x{tex.height})")
        except (OSError, TargaError) as exc:
            # модель уже загружена – текстура не обязательна
            logger.warning(f"[CLI] Texture not loaded: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
