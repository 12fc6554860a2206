from __future__ import annotations

from dataclasses import dataclass

from .mesh import Mesh, compute_bounds, count_tris


@dataclass
class MeshReport:
    name: str
    vertices: int
    triangles: int
    bounds_min: list[float]
    bounds_max: list[float]
    glb_bytes: int


def build_report(name: str, mesh: Mesh, glb_bytes: int) -> MeshReport:
    bounds_min, bounds_max = compute_bounds(mesh.positions)
    return MeshReport(
        name=name,
        vertices=mesh.vertex_count,
        triangles=count_tris(mesh),
        bounds_min=bounds_min,
        bounds_max=bounds_max,
        glb_bytes=glb_bytes,
    )


def print_report(report: MeshReport) -> None:
    lo = ", ".join(f"{v:.3f}" for v in report.bounds_min)
    hi = ", ".join(f"{v:.3f}" for v in report.bounds_max)
    print("=" * 56)
    print(f"GEAR REPORT: {report.name}")
    print(f"  Vertices:  {report.vertices:,}")
    print(f"  Triangles: {report.triangles:,}")
    print(f"  Bounds:    ({lo}) .. ({hi})")
    print(f"  GLB size:  {report.glb_bytes:,} bytes")
    print("=" * 56)
