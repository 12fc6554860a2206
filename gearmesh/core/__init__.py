"""Core building blocks for gear mesh generation and GLB export."""

from .config import GearConfig, GearDefaults, GearEntry, load_gear_config
from .errors import CapacityError, ConfigError, GearMeshError, ValidationError
from .export import GLB_MIME_TYPE, serialize, write_glb
from .mesh import Mesh, compute_bounds, count_tris
