# src/geometry/world.py
import random
from typing import Optional, List
from core.aabb import AABB
from core.motion import Timespan
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode
from materials.material import Material, MaterialTable

class HittableList(Hittable):
    """
    A list of Hittable objects; hit() scans all of them and keeps the closest.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, timespan: Timespan) -> Optional[AABB]:
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(timespan)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box

class Scene:
    """
    What a scene builder hands to the renderer: the material arena plus the
    ordered primitive list. Primitives refer to materials by handle.
    """
    def __init__(self):
        self.materials = MaterialTable()
        self.world = HittableList()

    def add_material(self, material: Material) -> int:
        return self.materials.add(material)

    def add(self, obj: Hittable):
        self.world.add(obj)

    def __len__(self) -> int:
        return len(self.world)

    def build_bvh(self, timespan: Optional[Timespan] = None,
                  rng: Optional[random.Random] = None) -> BVHNode:
        return BVHNode.build(self.world.objects, timespan, rng)
