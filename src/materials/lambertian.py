# materials/lambertian.py
import random
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, SolidColor

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        # Store either a solid color or a texture.
        if isinstance(albedo, Vector3):
            self.texture = SolidColor(albedo)
        else:
            self.texture = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Ray, Vector3]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Never absorbs; returns (scattered_ray, attenuation).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        return scattered, self.texture.value(rec.uv, rec.p)
