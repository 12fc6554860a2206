from __future__ import annotations

from .gear import GearGenerator


def _all_generators():
    return {
        "spur": GearGenerator,
    }


def get_generator(name: str):
    gen_cls = _all_generators().get(name)
    if gen_cls is None:
        raise KeyError(f"Unknown generator: {name}")
    return gen_cls()


def list_generators() -> list[str]:
    return sorted(_all_generators().keys())
