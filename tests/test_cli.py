import logging

import numpy as np
import pytest
from PIL import Image

import mazecli
from maze_errors import InvalidGeometry
from mazecli import main, parse_geometry
from raster import PATH_COLOR


@pytest.mark.parametrize("geometry,expected", [
    ("100x100", (100, 100)),
    ("13x7", (13, 7)),
    ("1x1", (1, 1)),
])
def test_parse_geometry(geometry, expected):
    assert parse_geometry(geometry) == expected


@pytest.mark.parametrize("geometry", [
    "100", "100x", "x100", "10x10x10", "axb", "0x10", "10x0",
    "-5x10", "10X10", " 10x10", "1.5x2", "",
])
def test_parse_geometry_rejects(geometry):
    with pytest.raises(InvalidGeometry) as excinfo:
        parse_geometry(geometry)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.geometry == geometry


def test_main_writes_image(tmp_path):
    out = tmp_path / "maze.png"
    assert main([str(out), "-g", "13x7", "--seed", "1"]) == 0
    with Image.open(out) as img:
        assert img.size == (13, 7)
        assert tuple(img.getpixel((0, 0))) == PATH_COLOR


def test_main_default_geometry(tmp_path):
    out = tmp_path / "maze.png"
    assert main([str(out)]) == 0
    with Image.open(out) as img:
        assert img.size == (100, 100)


def test_main_seed_is_reproducible(tmp_path):
    a, b = tmp_path / "a.png", tmp_path / "b.png"
    assert main([str(a), "--geometry", "64x48", "--seed", "7"]) == 0
    assert main([str(b), "--geometry", "64x48", "--seed", "7"]) == 0
    with Image.open(a) as img_a, Image.open(b) as img_b:
        assert np.array_equal(np.asarray(img_a), np.asarray(img_b))


def test_main_invalid_geometry(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "maze.png"), "-g", "100by100"])
    assert excinfo.value.code == 2
    assert "invalid geometry" in capsys.readouterr().err
    assert not (tmp_path / "maze.png").exists()


def test_main_write_failure(tmp_path, caplog):
    out = tmp_path / "missing" / "maze.png"
    with caplog.at_level(logging.ERROR):
        assert main([str(out), "-g", "20x20"]) == 1
    assert "could not write image" in caplog.text


def test_main_read_only_format(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main([str(tmp_path / "maze.psd"), "-g", "20x20"]) == 1
    assert "could not write image" in caplog.text


def test_main_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert mazecli.__version__ in capsys.readouterr().out


def test_main_short_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-v"])
    assert excinfo.value.code == 0
    assert mazecli.__version__ in capsys.readouterr().out


def test_main_verbose_logs_generation(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG):
        assert main([str(tmp_path / "maze.png"), "-g", "16x16", "--verbose"]) == 0
    assert "Generating 4x4 cell maze" in caplog.text


def test_main_show_and_animate(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr("maze.Maze.visualize", lambda self: calls.append("show"))
    monkeypatch.setattr("visualizer.Visualizer.animate", lambda self: calls.append("animate"))
    assert main([str(tmp_path / "maze.png"), "-g", "16x16", "--show", "--animate"]) == 0
    assert calls == ["show", "animate"]
