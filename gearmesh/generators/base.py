from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.mesh import Mesh


class MeshGenerator(ABC):
    name: str = "base"
    category: str = "generic"

    @abstractmethod
    def create_mesh(self, params) -> Mesh:
        raise NotImplementedError
