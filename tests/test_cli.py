import os
import struct

import pytest

from gearmesh.cli import main
from gearmesh.core.config import GearDefaults, GearEntry
from gearmesh.core.errors import ValidationError
from gearmesh.core.pipeline import run_gear_pipeline
from gearmesh.generators.registry import get_generator, list_generators


def read_header(path):
    return struct.unpack_from("<III", path.read_bytes(), 0)


def test_registry():
    assert list_generators() == ["spur"]
    assert get_generator("spur").name == "spur"
    with pytest.raises(KeyError):
        get_generator("helical")


def test_pipeline_writes_glb_and_report(tmp_path, capsys):
    defaults = GearDefaults(output_root=str(tmp_path))
    result = run_gear_pipeline(get_generator("spur"), GearEntry(name="demo"), defaults)

    glb = tmp_path / "demo.glb"
    assert result == {
        "gear": "demo",
        "glb": str(glb),
        "vertices": 768,
        "triangles": 384,
        "bytes": glb.stat().st_size,
    }
    assert read_header(glb) == (0x46546C67, 2, glb.stat().st_size)
    out = capsys.readouterr().out
    assert "GEAR REPORT: demo" in out
    assert "Triangles: 384" in out


def test_pipeline_rejects_bad_parameters(tmp_path):
    defaults = GearDefaults(output_root=str(tmp_path))
    with pytest.raises(ValidationError):
        run_gear_pipeline(get_generator("spur"), GearEntry(name="bad", inner_radius=2.0), defaults)
    assert not (tmp_path / "bad.glb").exists()


def test_cli_list(capsys):
    assert main(["list"]) == 0
    assert " - spur (gears)" in capsys.readouterr().out


def test_cli_build(tmp_path, capsys):
    out = tmp_path / "gear.glb"
    assert main(["build", "--teeth", "20", "--out", str(out)]) == 0
    assert read_header(out)[2] == out.stat().st_size
    assert "Vertices:  1,280" in capsys.readouterr().out


def test_cli_build_invalid_parameters(tmp_path):
    out = tmp_path / "gear.glb"
    assert main(["build", "--inner-radius", "1.0", "--outer-radius", "1.0", "--out", str(out)]) == 1
    assert not out.exists()


def test_cli_generate_and_skip(tmp_path, write_config, capsys):
    output_root = tmp_path / "out"
    path = write_config(
        {
            "defaults": {"output_root": str(output_root)},
            "gears": {"small": {"teeth": 6}, "large": {"teeth": 30}},
        }
    )

    assert main(["generate", "--config", str(path)]) == 0
    assert (output_root / "small.glb").exists()
    assert (output_root / "large.glb").exists()
    assert "SUMMARY generated=2 skipped=0" in capsys.readouterr().out

    config_mtime = os.path.getmtime(path)
    for name in ("small.glb", "large.glb"):
        os.utime(output_root / name, (config_mtime + 10, config_mtime + 10))

    assert main(["generate", "--config", str(path)]) == 0
    assert "SUMMARY generated=0 skipped=2" in capsys.readouterr().out

    assert main(["generate", "--config", str(path), "--gear", "small", "--force"]) == 0
    assert "SUMMARY generated=1 skipped=0" in capsys.readouterr().out


def test_cli_generate_unknown_generator(write_config, tmp_path):
    path = write_config(
        {"defaults": {"output_root": str(tmp_path)}, "gears": {"x": {"generator": "helical"}}}
    )
    assert main(["generate", "--config", str(path)]) == 1


def test_cli_generate_missing_config(tmp_path):
    assert main(["generate", "--config", str(tmp_path / "nope.json")]) == 1


@pytest.mark.parametrize(
    "data",
    [
        {"gears": {"a": "spur"}},
        {"defaults": [1], "gears": {}},
    ],
)
def test_cli_generate_malformed_config(write_config, data):
    assert main(["generate", "--config", str(write_config(data))]) == 1


def test_cli_log_file_records_writes(tmp_path):
    log_file = tmp_path / "gearmesh.log"
    out = tmp_path / "gear.glb"
    assert main(["--log-file", str(log_file), "build", "--out", str(out)]) == 0
    text = log_file.read_text(encoding="utf-8")
    assert "gearmesh.core.pipeline - INFO - Wrote" in text
    assert "DEBUG" not in text
