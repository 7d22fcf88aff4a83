# materials/metal.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Specular reflector; `fuzz` in [0, 1] blurs the reflection.
    """
    def __init__(self, albedo: Vector3, fuzz: float):
        self.albedo = albedo
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if it does not scatter forward
