"""Procedural mesh generators."""

from .gear import GearGenerator, GearParameters, generate_gear, validate_parameters
from .registry import get_generator, list_generators
