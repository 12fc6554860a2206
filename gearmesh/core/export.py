from __future__ import annotations

import logging
from pathlib import Path

from pygltflib import GLTF2, Accessor, Asset, Buffer, BufferView, Mesh as GLTFMesh, Node, Primitive, Scene
from pygltflib import ARRAY_BUFFER, ELEMENT_ARRAY_BUFFER, FLOAT, UNSIGNED_SHORT
from pygltflib import TRIANGLES

from .errors import CapacityError
from .mesh import Mesh, compute_bounds

logger = logging.getLogger(__name__)

GLB_MAGIC = 0x46546C67  # "glTF"
GLB_VERSION = 2
CHUNK_TYPE_JSON = 0x4E4F534A  # "JSON"
CHUNK_TYPE_BIN = 0x004E4942  # "BIN\0"
GLB_MIME_TYPE = "model/gltf-binary"

MAX_VERTEX_COUNT = 0xFFFF + 1


def _build_gltf(mesh: Mesh, pos_len: int, norm_len: int, index_len: int) -> GLTF2:
    # Views are listed in payload order: positions, normals, indices.
    pos_view = BufferView(buffer=0, byteOffset=0, byteLength=pos_len, target=ARRAY_BUFFER)
    norm_view = BufferView(buffer=0, byteOffset=pos_len, byteLength=norm_len, target=ARRAY_BUFFER)
    index_view = BufferView(
        buffer=0, byteOffset=pos_len + norm_len, byteLength=index_len, target=ELEMENT_ARRAY_BUFFER
    )

    bounds_min, bounds_max = compute_bounds(mesh.positions)

    index_accessor = Accessor(
        bufferView=2,
        componentType=UNSIGNED_SHORT,
        count=mesh.index_count,
        type="SCALAR",
    )

    pos_accessor = Accessor(
        bufferView=0,
        componentType=FLOAT,
        count=mesh.vertex_count,
        type="VEC3",
        min=bounds_min,
        max=bounds_max,
    )

    norm_accessor = Accessor(
        bufferView=1,
        componentType=FLOAT,
        count=mesh.vertex_count,
        type="VEC3",
    )

    primitive = Primitive(
        attributes={"POSITION": 1, "NORMAL": 2},
        indices=0,
        mode=TRIANGLES,
    )

    return GLTF2(
        asset=Asset(generator="gearmesh", version="2.0"),
        buffers=[Buffer(byteLength=pos_len + norm_len + index_len)],
        bufferViews=[pos_view, norm_view, index_view],
        accessors=[index_accessor, pos_accessor, norm_accessor],
        meshes=[GLTFMesh(primitives=[primitive])],
        nodes=[Node(mesh=0)],
        scenes=[Scene(nodes=[0])],
        scene=0,
    )


def serialize(mesh: Mesh) -> bytes:
    """Pack ``mesh`` into a GLB container with 16-bit indices."""
    if mesh.vertex_count > MAX_VERTEX_COUNT:
        raise CapacityError(
            f"{mesh.vertex_count} vertices exceed the 16-bit index limit of {MAX_VERTEX_COUNT}"
        )

    pos_bytes = mesh.positions.astype("<f4").tobytes()
    norm_bytes = mesh.normals.astype("<f4").tobytes()
    index_bytes = mesh.indices.astype("<u2").tobytes()

    gltf = _build_gltf(mesh, len(pos_bytes), len(norm_bytes), len(index_bytes))
    gltf.set_binary_blob(pos_bytes + norm_bytes + index_bytes)
    blob = b"".join(gltf.save_to_bytes())

    logger.debug("Serialized GLB: %d bytes for %d vertices", len(blob), mesh.vertex_count)
    return blob


def write_glb(mesh: Mesh, out_path: str) -> int:
    """Serialize ``mesh`` to ``out_path`` and return the number of bytes written."""
    blob = serialize(mesh)
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(blob)
    return len(blob)
