from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any

from .errors import ConfigError

PARAMETER_NAMES = ("inner_radius", "outer_radius", "width", "teeth", "tooth_depth")


@dataclass
class GearDefaults:
    inner_radius: float = 0.5
    outer_radius: float = 1.0
    width: float = 0.3
    teeth: float = 12
    tooth_depth: float = 0.2
    output_root: str = "out/gears"


@dataclass
class GearEntry:
    name: str
    generator: str = "spur"
    inner_radius: float | None = None
    outer_radius: float | None = None
    width: float | None = None
    teeth: float | None = None
    tooth_depth: float | None = None


@dataclass
class GearConfig:
    defaults: GearDefaults = field(default_factory=GearDefaults)
    gears: list[GearEntry] = field(default_factory=list)
    source_path: str = ""


def _to_float(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be a number, got {value!r}") from exc


def load_gear_config(config_path: str) -> GearConfig:
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Config root must be an object")

    raw_defaults = data.get("defaults", {})
    if not isinstance(raw_defaults, dict):
        raise ConfigError("'defaults' must be an object")
    defaults = GearDefaults(output_root=str(raw_defaults.get("output_root", "out/gears")))
    for key in PARAMETER_NAMES:
        if key in raw_defaults:
            setattr(defaults, key, _to_float(raw_defaults[key], f"defaults.{key}"))

    entries: list[GearEntry] = []
    raw_gears = data.get("gears", {})
    if not isinstance(raw_gears, dict):
        raise ConfigError("'gears' must be an object keyed by gear name")
    for name, raw in raw_gears.items():
        if not isinstance(raw, dict):
            raise ConfigError(f"Gear '{name}' must be an object, got {raw!r}")
        entry = GearEntry(name=name, generator=str(raw.get("generator", "spur")))
        for key in PARAMETER_NAMES:
            if key in raw:
                setattr(entry, key, _to_float(raw[key], f"{name}.{key}"))
        entries.append(entry)

    return GearConfig(defaults=defaults, gears=entries, source_path=str(path.resolve()))
