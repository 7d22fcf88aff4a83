import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from core.aabb import AABB
from core.motion import Timespan, Trajectory
from geometry.hittable import Hittable, HitRecord

def hit_sphere(center: Vector3, radius: float, material: int,
               ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
    """
    Ray/sphere intersection shared by static and moving spheres. A negative
    radius keeps the same surface but flips the normal inwards, which is how
    hollow glass shells are modelled.
    """
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None

    p = ray.at(root)
    outward_normal = (p - center) / radius
    return HitRecord(root, p, outward_normal, UV.on_unit_sphere(outward_normal), material)

def _sphere_box(center: Vector3, radius: float) -> AABB:
    offset = Vector3.splat(abs(radius))
    return AABB(center - offset, center + offset)

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material handle.
    """
    def __init__(self, center: Vector3, radius: float, material: int):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, timespan: Timespan) -> AABB:
        # The bounding box of a sphere is center ± radius
        return _sphere_box(self.center, self.radius)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, material={self.material})"

class MovingSphere(Hittable):
    """
    Sphere whose center follows a linear trajectory; the ray's time sample
    decides where it is hit.
    """
    def __init__(self, trajectory: Trajectory, radius: float, material: int):
        self.trajectory = trajectory
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        return self.trajectory.position(time)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, timespan: Timespan) -> AABB:
        # Union of the boxes at both ends of the span. Exact for a single
        # straight segment, which is the only motion supported.
        box0 = _sphere_box(self.center(timespan.start), self.radius)
        box1 = _sphere_box(self.center(timespan.end), self.radius)
        return AABB.surrounding_box(box0, box1)

    def __repr__(self) -> str:
        return f"MovingSphere({self.trajectory.start!r} -> {self.trajectory.end!r}, {self.radius}, material={self.material})"
