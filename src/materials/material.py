# materials/material.py
import random
from typing import List, Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation), or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

class MaterialTable:
    """
    Append-only arena of materials. Primitives store the integer handle
    returned by add(); the table is never modified once rendering starts.
    """
    def __init__(self):
        self._materials: List[Material] = []

    def add(self, material: Material) -> int:
        self._materials.append(material)
        return len(self._materials) - 1

    def get(self, handle: int) -> Material:
        if not 0 <= handle < len(self._materials):
            raise KeyError(f"Unknown material handle: {handle}")
        return self._materials[handle]

    def __len__(self) -> int:
        return len(self._materials)
