"""
Procedural spur gear mesh.

The gear ring is split into ``teeth * 4`` equal angular segments. Boundaries 1 and 2
of every group of four sit on the crest radius, boundaries 0 and 3 on the base radius,
which gives each tooth a rising edge, a crest, a falling edge and a root gap.
Every segment owns four flat-shaded quads: front, back, outer rim and bore wall.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
from typing import Any, Mapping

import numpy as np

from ..core.errors import ValidationError
from ..core.mesh import Mesh
from .base import MeshGenerator

logger = logging.getLogger(__name__)

VERTICES_PER_SEGMENT = 16
INDICES_PER_SEGMENT = 24
NORMAL_EPSILON = 1e-9

_CAMEL_KEYS = {
    "innerRadius": "inner_radius",
    "outerRadius": "outer_radius",
    "toothDepth": "tooth_depth",
}


@dataclass(frozen=True)
class GearParameters:
    inner_radius: float = 0.5
    outer_radius: float = 1.0
    width: float = 0.3
    teeth: float = 12
    tooth_depth: float = 0.2

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GearParameters":
        """Build parameters from snake_case or camelCase keys; missing keys use defaults."""
        values = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value
        return cls(**values)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def validate_parameters(params: GearParameters) -> GearParameters:
    """Check ``params`` and return a copy with an integral tooth count."""
    for name in ("inner_radius", "outer_radius", "width", "teeth", "tooth_depth"):
        value = getattr(params, name)
        if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
            raise ValidationError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValidationError(f"{name} must be finite, got {value!r}")

    teeth = _round_half_up(float(params.teeth))

    if params.inner_radius <= 0:
        raise ValidationError(f"inner_radius must be > 0, got {params.inner_radius}")
    if params.outer_radius <= params.inner_radius:
        raise ValidationError(
            f"outer_radius ({params.outer_radius}) must be greater than "
            f"inner_radius ({params.inner_radius})"
        )
    if params.width <= 0:
        raise ValidationError(f"width must be > 0, got {params.width}")
    if teeth < 3:
        raise ValidationError(f"teeth must be >= 3, got {params.teeth}")
    if params.tooth_depth < 0:
        raise ValidationError(f"tooth_depth must be >= 0, got {params.tooth_depth}")

    return replace(
        params,
        inner_radius=float(params.inner_radius),
        outer_radius=float(params.outer_radius),
        width=float(params.width),
        teeth=teeth,
        tooth_depth=float(params.tooth_depth),
    )


def _boundary_radius(boundary: int, base: float, crest: float) -> float:
    return crest if boundary % 4 in (1, 2) else base


def _radial_normal(c1: float, s1: float, c2: float, s2: float, sign: float) -> list[float]:
    nx = sign * (c1 + c2)
    ny = sign * (s1 + s2)
    length = math.hypot(nx, ny)
    if length < NORMAL_EPSILON:
        return [sign * c1, sign * s1, 0.0]
    return [nx / length, ny / length, 0.0]


def generate_gear(params: GearParameters) -> Mesh:
    """Build the flat-shaded triangle mesh for a spur gear."""
    params = validate_parameters(params)

    segments = params.teeth * 4
    step = 2 * math.pi / segments
    base = params.outer_radius
    crest = params.outer_radius + params.tooth_depth
    r3 = params.inner_radius
    z = params.width * 0.5

    positions = []
    normals = []
    indices = []

    def add_quad(corners, normal, order):
        start = len(positions)
        positions.extend(corners)
        normals.extend([normal] * 4)
        indices.extend(start + k for k in order)

    for i in range(segments):
        a1 = i * step
        a2 = (i + 1) * step
        r1 = _boundary_radius(i, base, crest)
        r2 = _boundary_radius(i + 1, base, crest)
        c1, s1 = math.cos(a1), math.sin(a1)
        c2, s2 = math.cos(a2), math.sin(a2)

        # front
        add_quad(
            [[r3 * c1, r3 * s1, z], [r1 * c1, r1 * s1, z], [r2 * c2, r2 * s2, z], [r3 * c2, r3 * s2, z]],
            [0.0, 0.0, 1.0],
            (0, 1, 2, 0, 2, 3),
        )
        # back, reversed winding
        add_quad(
            [[r3 * c1, r3 * s1, -z], [r1 * c1, r1 * s1, -z], [r2 * c2, r2 * s2, -z], [r3 * c2, r3 * s2, -z]],
            [0.0, 0.0, -1.0],
            (0, 2, 1, 0, 3, 2),
        )
        # outer rim
        add_quad(
            [[r1 * c1, r1 * s1, z], [r1 * c1, r1 * s1, -z], [r2 * c2, r2 * s2, -z], [r2 * c2, r2 * s2, z]],
            _radial_normal(c1, s1, c2, s2, 1.0),
            (0, 1, 2, 0, 2, 3),
        )
        # bore wall
        add_quad(
            [[r3 * c1, r3 * s1, z], [r3 * c2, r3 * s2, z], [r3 * c2, r3 * s2, -z], [r3 * c1, r3 * s1, -z]],
            _radial_normal(c1, s1, c2, s2, -1.0),
            (0, 1, 2, 0, 2, 3),
        )

    logger.debug(
        "Generated gear: teeth=%d vertices=%d indices=%d",
        params.teeth, len(positions), len(indices),
    )
    return Mesh(
        positions=np.array(positions, dtype=np.float32),
        normals=np.array(normals, dtype=np.float32),
        indices=np.array(indices, dtype=np.uint32),
    )


class GearGenerator(MeshGenerator):
    name = "spur"
    category = "gears"

    def create_mesh(self, params: GearParameters) -> Mesh:
        return generate_gear(params)
