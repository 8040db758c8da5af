# -*- coding: utf-8 -*-
import json
import logging

import numpy as np
import pytest

from scop import cli
from scop.loader import build_model, format_obj_error, load_model
from scop.utils.config import DEFAULT_CONFIG, Config
from scop.utils.profiler import Profiler
from scop.wavefront import (
    AttributeKind,
    IndexOutOfRangeError,
    Obj,
    WavefrontIOError,
    WavefrontObjError,
    WavefrontParseError,
)


def first_error(text: str) -> WavefrontObjError:
    with pytest.raises(WavefrontObjError) as info:
        build_model(Obj.from_string(text))
    return info.value


# ----------------------------------------------------------------------
# load_model
# ----------------------------------------------------------------------
def test_load_model_centres_the_model(obj_file, cube_obj, caplog):
    path = obj_file(cube_obj)
    with caplog.at_level(logging.INFO, logger="Scop"):
        model = load_model(path)

    assert model.mesh.vertex_count == 24
    assert model.bounding_box.center() == (0.5, 0.5, 0.5)
    assert model.transform.origin.to_tuple() == (-0.5, -0.5, -0.5)
    assert model.bounding_box_mesh.index_count == 24
    assert "Total: 8 vertices, 6 faces" in caplog.text

    # центр коробки после model_matrix() переходит в начало координат
    centre = model.transform.model_matrix().transform_point(model.bounding_box.center())
    assert np.allclose(centre, [0.0, 0.0, 0.0])


def test_load_model_without_centering(obj_file, cube_obj):
    model = load_model(obj_file(cube_obj), center=False)
    assert model.transform.origin.to_tuple() == (0.0, 0.0, 0.0)


def test_empty_model_has_no_box():
    model = build_model(Obj.from_string("# nothing\n"))
    assert model.bounding_box is None
    assert model.bounding_box_mesh is None
    assert model.transform.origin.to_tuple() == (0.0, 0.0, 0.0)


def test_load_model_propagates_errors(obj_file):
    with pytest.raises(WavefrontParseError):
        load_model(obj_file("v 1 2\n"))


def test_index_error_propagates_from_build():
    err = first_error("v 0 0 0\nv 1 0 0\nf 1 2 3\n")
    assert isinstance(err, IndexOutOfRangeError)
    assert err.kind is AttributeKind.POSITION


# ----------------------------------------------------------------------
# форматирование ошибок
# ----------------------------------------------------------------------
def test_format_parse_error():
    with pytest.raises(WavefrontParseError) as info:
        Obj.from_string("v 0 0 0\nv 1.0 2.0\n", "model.obj")
    assert format_obj_error(info.value) == (
        "model.obj:2\nerror: Invalid operand count. "
        "Expected a value between 3 and 4, got 2"
    )


def test_format_inline_error_with_colour():
    with pytest.raises(WavefrontParseError) as info:
        Obj.from_string("zz 1 2 3\n")
    text = format_obj_error(info.value, color=True)
    assert text == "inline:1\n\x1b[0;31merror:\x1b[0m Unknown command: zz"


def test_format_index_error():
    err = IndexOutOfRangeError(AttributeKind.POSITION, 3, 2)
    assert format_obj_error(err) == "error: Index out of range: position 3 (only 2 declared)"


def test_format_io_error(tmp_path):
    with pytest.raises(WavefrontIOError) as info:
        Obj.from_file(tmp_path / "nope.obj")
    assert format_obj_error(info.value).startswith("error: ")


# ----------------------------------------------------------------------
# config / profiler
# ----------------------------------------------------------------------
def test_config_creates_default_file(config, tmp_path):
    assert config["center_model"] is True
    saved = json.loads((tmp_path / "scop.json").read_text(encoding="utf-8"))
    assert saved == DEFAULT_CONFIG


def test_config_is_singleton(config):
    assert Config() is config


def test_config_reads_existing_file(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"center_model": False}), encoding="utf-8")
    Config.reset()
    try:
        cfg = Config(str(path))
        assert cfg["center_model"] is False
        # ключа нет в файле – берётся значение по умолчанию
        assert cfg["log_level"] == "INFO"
    finally:
        Config.reset()


def test_config_broken_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    Config.reset()
    try:
        cfg = Config(str(path))
        assert cfg.data == DEFAULT_CONFIG
    finally:
        Config.reset()


def test_profiler_measures_elapsed_time():
    with Profiler("noop") as prof:
        sum(range(1000))
    assert prof.elapsed_ms >= 0.0


# ----------------------------------------------------------------------
# CLI
# ----------------------------------------------------------------------
def test_cli_reports_mesh(obj_file, cube_obj, tmp_path, capsys):
    Config.reset()
    try:
        code = cli.main([str(obj_file(cube_obj)), "--config", str(tmp_path / "c.json"),
                         "--texture", ""])
    finally:
        Config.reset()
    out = capsys.readouterr().out
    assert code == 0
    assert "24 vertices, 12 triangles, 36 indices" in out
    assert "max=(1.0, 1.0, 1.0)" in out


def test_cli_reports_parse_error(obj_file, tmp_path, capsys):
    path = obj_file("zz 1 2 3\n")
    Config.reset()
    try:
        code = cli.main([str(path), "--config", str(tmp_path / "c.json")])
    finally:
        Config.reset()
    err = capsys.readouterr().err
    assert code == 1
    assert f"{path}:1" in err
    assert "Unknown command: zz" in err


def test_cli_missing_texture_is_not_fatal(obj_file, triangle_obj, tmp_path, capsys):
    Config.reset()
    try:
        code = cli.main([str(obj_file(triangle_obj)), "--config", str(tmp_path / "c.json"),
                         "--texture", str(tmp_path / "missing.tga")])
    finally:
        Config.reset()
    assert code == 0
    assert "texture:" not in capsys.readouterr().out
