from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import ValidationError


@dataclass(frozen=True)
class Mesh:
    """Flat-shaded triangle mesh.

    ``positions`` and ``normals`` are parallel (N, 3) float32 arrays, ``indices`` is a
    flat array of triangle corners. Arrays are made read-only on construction.
    """

    positions: np.ndarray
    normals: np.ndarray
    indices: np.ndarray

    def __post_init__(self) -> None:
        positions = np.array(self.positions, dtype=np.float32).reshape(-1, 3)
        normals = np.array(self.normals, dtype=np.float32).reshape(-1, 3)
        indices = np.array(self.indices).reshape(-1)

        if len(positions) != len(normals):
            raise ValidationError(
                f"positions and normals differ in length: {len(positions)} != {len(normals)}"
            )
        if not np.isfinite(positions).all():
            raise ValidationError("positions contain NaN or infinite values")
        if not np.isfinite(normals).all():
            raise ValidationError("normals contain NaN or infinite values")
        if len(indices) % 3 != 0:
            raise ValidationError(f"index count {len(indices)} is not a multiple of 3")
        if len(indices):
            if not np.issubdtype(indices.dtype, np.integer):
                raise ValidationError(f"indices must be integers, got {indices.dtype}")
            if indices.min() < 0 or indices.max() >= len(positions):
                raise ValidationError(
                    f"index out of range for {len(positions)} vertices"
                )
        indices = indices.astype(np.uint32)

        for arr in (positions, normals, indices):
            arr.flags.writeable = False
        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "normals", normals)
        object.__setattr__(self, "indices", indices)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3


def count_tris(mesh: Mesh) -> int:
    return mesh.triangle_count


def compute_bounds(positions: np.ndarray) -> tuple[list[float], list[float]]:
    """Per-axis min/max of ``positions``; an empty array reports zeros."""
    positions = np.asarray(positions, dtype=np.float32).reshape(-1, 3)
    lo = positions.min(axis=0, initial=np.inf)
    hi = positions.max(axis=0, initial=-np.inf)
    if not len(positions):
        lo = np.zeros(3, dtype=np.float32)
        hi = np.zeros(3, dtype=np.float32)
    return [float(v) for v in lo], [float(v) for v in hi]
