import pytest

from gearmesh.core.config import GearDefaults, GearEntry, load_gear_config
from gearmesh.core.errors import ConfigError
from gearmesh.core.pipeline import resolve_parameters
from gearmesh.generators.gear import GearParameters


def test_load_config_with_overrides(write_config):
    path = write_config(
        {
            "defaults": {"output_root": "build/gears", "teeth": 20, "width": 0.5},
            "gears": {
                "pinion": {"generator": "spur", "teeth": 8, "outer_radius": "0.9"},
                "plain": {},
            },
        }
    )
    config = load_gear_config(str(path))

    assert config.defaults.output_root == "build/gears"
    assert config.defaults.teeth == 20.0
    assert config.defaults.inner_radius == 0.5
    assert [g.name for g in config.gears] == ["pinion", "plain"]
    assert config.gears[0].teeth == 8.0
    assert config.gears[0].outer_radius == 0.9
    assert config.gears[1].generator == "spur"
    assert config.gears[1].teeth is None
    assert config.source_path == str(path.resolve())


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_gear_config(str(tmp_path / "missing.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "gears.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_gear_config(str(path))


@pytest.mark.parametrize(
    "data",
    [
        [1, 2, 3],
        {"gears": ["a", "b"]},
        {"gears": {"a": {"teeth": "many"}}},
        {"gears": {"a": 5}},
        {"gears": {"a": "spur"}},
        {"defaults": [1]},
    ],
)
def test_malformed_config(write_config, data):
    with pytest.raises(ConfigError):
        load_gear_config(str(write_config(data)))


def test_resolve_parameters_falls_back_to_defaults():
    defaults = GearDefaults(teeth=30, tooth_depth=0.1)
    entry = GearEntry(name="a", width=0.8)
    assert resolve_parameters(entry, defaults) == GearParameters(
        inner_radius=0.5, outer_radius=1.0, width=0.8, teeth=30, tooth_depth=0.1
    )
