# src/materials/dielectric.py
import math
import random
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """Clear refractive medium such as glass or water. Never absorbs."""

    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Ray, Vector3]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        if ray_in.direction.dot(rec.normal) > 0:
            normal = -rec.normal
            ni_over_nt = self.ref_idx
        else:
            normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        if must_reflect(ni_over_nt, sin_theta) or schlick(cos_theta, ni_over_nt) > rng.uniform(0.0, 1.0):
            direction = reflect(unit_direction, normal)
        else:
            direction = refract(unit_direction, normal, ni_over_nt)

        return Ray(rec.p, direction, ray_in.time), attenuation

def must_reflect(ni_over_nt: float, sin_theta: float) -> bool:
    """Total internal reflection: Snell's law has no solution."""
    return ni_over_nt * sin_theta > 1.0

def refract(unit_v: Vector3, n: Vector3, ni_over_nt: float) -> Vector3:
    cos_theta = min(-unit_v.dot(n), 1.0)
    r_out_perp = (unit_v + n * cos_theta) * ni_over_nt
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.dot(r_out_perp))))
    return r_out_perp + r_out_parallel

def schlick(cos_theta: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
