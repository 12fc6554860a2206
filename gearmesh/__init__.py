"""Procedural spur gear meshes packed into binary glTF (GLB) containers."""

from .core.errors import CapacityError, ConfigError, GearMeshError, ValidationError
from .core.export import GLB_MIME_TYPE, serialize, write_glb
from .core.mesh import Mesh
from .generators.gear import GearParameters, generate_gear

generate = generate_gear

__version__ = "0.1.0"
