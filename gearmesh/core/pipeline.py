from __future__ import annotations

import logging
from pathlib import Path

from ..generators.gear import GearParameters
from .config import PARAMETER_NAMES, GearDefaults, GearEntry
from .export import write_glb
from .validation import build_report, print_report

logger = logging.getLogger(__name__)


def resolve_parameters(entry: GearEntry, defaults: GearDefaults) -> GearParameters:
    values = {}
    for key in PARAMETER_NAMES:
        value = getattr(entry, key)
        values[key] = value if value is not None else getattr(defaults, key)
    return GearParameters(**values)


def run_gear_pipeline(generator, entry: GearEntry, defaults: GearDefaults) -> dict:
    params = resolve_parameters(entry, defaults)
    logger.info("Building %s with %s", entry.name, params)

    mesh = generator.create_mesh(params)
    glb_path = Path(defaults.output_root) / f"{entry.name}.glb"
    size = write_glb(mesh, str(glb_path))
    logger.info("Wrote %s (%d bytes)", glb_path, size)

    report = build_report(entry.name, mesh, size)
    print_report(report)

    return {
        "gear": entry.name,
        "glb": str(glb_path),
        "vertices": report.vertices,
        "triangles": report.triangles,
        "bytes": size,
    }
