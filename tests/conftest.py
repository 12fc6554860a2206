import json

import pytest

from gearmesh.generators.gear import GearParameters, generate_gear


@pytest.fixture
def default_params():
    return GearParameters(inner_radius=0.5, outer_radius=1.0, width=0.3, teeth=12, tooth_depth=0.2)


@pytest.fixture
def default_mesh(default_params):
    return generate_gear(default_params)


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / "gears.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
