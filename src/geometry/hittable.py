# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from core.aabb import AABB
from core.motion import Timespan

class HitRecord:
    """
    Records details of a ray-object intersection. The normal is the outward
    surface normal; `material` is a handle into the scene's MaterialTable.
    """
    def __init__(self, t: float, p: Vector3, normal: Vector3, uv: UV, material: int):
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.normal = normal    # Outward surface normal
        self.uv = uv
        self.material = material

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, material={self.material})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, timespan: Timespan) -> Optional[AABB]:
        """
        Box enclosing the object over `timespan`, or None if it is unbounded.
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
