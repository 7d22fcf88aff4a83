# src/geometry/bvh.py
import logging
import random
from typing import List, Optional, Tuple
from core.aabb import AABB
from core.motion import Timespan
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHConstructionError(ValueError):
    """Raised when a BVH cannot be built from the given primitives."""

class BVHNode(Hittable):
    """
    Binary bounding-volume hierarchy node. A leaf wraps exactly one primitive;
    a branch holds two child nodes. The box of every node encloses all of the
    geometry below it and is computed once at build time.

    Use BVHNode.build() to construct a tree from a primitive list.
    """
    def __init__(self, entries: List[Tuple[AABB, Hittable]], start: int, end: int,
                 rng: random.Random):
        object_span = end - start

        # Random split axis; primitives are ordered by their box minimum on it.
        axis = rng.randint(0, 2)
        entries[start:end] = sorted(entries[start:end], key=lambda entry: entry[0].minimum[axis])

        if object_span == 1:
            self.box, self.object = entries[start]
            self.left = self.right = None
            self.is_leaf = True
            return

        mid = start + object_span // 2
        self.left = BVHNode(entries, start, mid, rng)
        self.right = BVHNode(entries, mid, end, rng)
        self.box = AABB.surrounding_box(self.left.box, self.right.box)
        self.is_leaf = False
        self.object = None

    @classmethod
    def build(cls, objects: List[Hittable], timespan: Optional[Timespan] = None,
              rng: Optional[random.Random] = None) -> "BVHNode":
        """
        Builds a tree over `objects`. Every primitive must report a bounding
        box over `timespan`; the list itself is left untouched.
        """
        if not objects:
            raise BVHConstructionError("Cannot build a BVH from an empty primitive list")
        if timespan is None:
            timespan = Timespan(0.0, 1.0)
        if rng is None:
            rng = random.Random()

        entries = []
        for index, obj in enumerate(objects):
            box = obj.bounding_box(timespan)
            if box is None:
                raise BVHConstructionError(f"Primitive {index} ({obj!r}) has no bounding box")
            entries.append((box, obj))

        root = cls(entries, 0, len(entries), rng)
        logger.debug("Built BVH over %d primitives: %d nodes, depth %d",
                     len(entries), root.node_count(), root.depth())
        return root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        if self.is_leaf:
            return self.object.hit(ray, t_min, t_max)

        hit_left = self.left.hit(ray, t_min, t_max)

        # Anything the right child reports is then strictly closer.
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, timespan: Timespan) -> AABB:
        return self.box

    def node_count(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + self.left.node_count() + self.right.node_count()

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

    def leaves(self):
        """Yields the wrapped primitives in tree order."""
        if self.is_leaf:
            yield self.object
            return
        yield from self.left.leaves()
        yield from self.right.leaves()
