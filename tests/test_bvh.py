"""Tests for the bounding-volume hierarchy.

The key property is that BVH traversal returns exactly the nearest hit a
linear scan over every primitive would return.
"""

import math
import random

import pytest

from core.motion import Timespan, Trajectory
from core.ray import Ray
from core.utils import random_unit_vector
from core.vector import Vector3
from geometry.bvh import BVHConstructionError, BVHNode
from geometry.sphere import MovingSphere, Sphere
from geometry.world import HittableList


def random_spheres(gen, count):
    return [
        Sphere(Vector3(gen.uniform(-10, 10), gen.uniform(-10, 10), gen.uniform(-10, 10)),
               gen.uniform(0.2, 2.0), index)
        for index in range(count)
    ]


def random_rays(gen, count, time_range=(0.0, 0.0)):
    rays = []
    for _ in range(count):
        origin = Vector3(gen.uniform(-15, 15), gen.uniform(-15, 15), gen.uniform(-15, 15))
        # Aim roughly at the cluster so most rays hit something
        target = Vector3(gen.uniform(-8, 8), gen.uniform(-8, 8), gen.uniform(-8, 8))
        rays.append(Ray(origin, target - origin, gen.uniform(*time_range)))
    for _ in range(count // 2):
        origin = Vector3(gen.uniform(-15, 15), gen.uniform(-15, 15), gen.uniform(-15, 15))
        rays.append(Ray(origin, random_unit_vector(gen), gen.uniform(*time_range)))
    return rays


def assert_same_hits(bvh, brute_force, rays):
    hits = 0
    for ray in rays:
        expected = brute_force.hit(ray, 0.001, math.inf)
        actual = bvh.hit(ray, 0.001, math.inf)
        assert (expected is None) == (actual is None), ray
        if expected is not None:
            hits += 1
            assert actual.t == pytest.approx(expected.t, rel=1e-9, abs=1e-9)
            assert actual.material == expected.material
    return hits


class TestBVHEquivalence:
    """BVH traversal agrees with brute force."""

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_matches_linear_scan(self, seed):
        gen = random.Random(seed)
        spheres = random_spheres(gen, 60)
        bvh = BVHNode.build(spheres, Timespan(0, 1), random.Random(seed + 100))
        brute_force = HittableList(spheres)

        hits = assert_same_hits(bvh, brute_force, random_rays(gen, 150))
        assert hits > 50

    def test_matches_linear_scan_with_motion(self):
        gen = random.Random(42)
        primitives = random_spheres(gen, 40)
        for index in range(20):
            start = Vector3(gen.uniform(-8, 8), gen.uniform(-8, 8), gen.uniform(-8, 8))
            end = start + Vector3(gen.uniform(-2, 2), gen.uniform(-2, 2), gen.uniform(-2, 2))
            primitives.append(MovingSphere(Trajectory(start, end, Timespan(0, 1)),
                                           gen.uniform(0.2, 1.0), 100 + index))

        bvh = BVHNode.build(primitives, Timespan(0, 1), random.Random(5))
        brute_force = HittableList(primitives)
        assert_same_hits(bvh, brute_force, random_rays(gen, 150, time_range=(0.0, 1.0)))

    def test_nested_bvh_as_primitive(self):
        gen = random.Random(9)
        inner = BVHNode.build(random_spheres(gen, 10), rng=random.Random(1))
        outer_spheres = random_spheres(gen, 10)
        bvh = BVHNode.build(outer_spheres + [inner], rng=random.Random(2))
        brute_force = HittableList(outer_spheres + list(inner.leaves()))
        assert_same_hits(bvh, brute_force, random_rays(gen, 100))


class TestBVHStructure:
    """Shape of the built tree."""

    def test_single_primitive_is_leaf(self):
        sphere = Sphere(Vector3(0, 0, -5), 1.0, 0)
        bvh = BVHNode.build([sphere])
        assert bvh.is_leaf
        assert bvh.object is sphere
        assert bvh.box.minimum == Vector3(-1, -1, -6)
        rec = bvh.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(4.0)

    def test_every_primitive_in_exactly_one_leaf(self):
        spheres = random_spheres(random.Random(3), 33)
        bvh = BVHNode.build(spheres, rng=random.Random(4))
        leaves = list(bvh.leaves())
        assert len(leaves) == 33
        assert {id(s) for s in leaves} == {id(s) for s in spheres}
        assert bvh.node_count() == 2 * 33 - 1

    def test_balanced_depth(self):
        bvh = BVHNode.build(random_spheres(random.Random(3), 64), rng=random.Random(4))
        assert bvh.depth() == 7

    def test_branch_box_encloses_children(self):
        bvh = BVHNode.build(random_spheres(random.Random(8), 20), rng=random.Random(8))

        def check(node):
            if node.is_leaf:
                return
            for child in (node.left, node.right):
                for axis in range(3):
                    assert node.box.minimum[axis] <= child.box.minimum[axis]
                    assert node.box.maximum[axis] >= child.box.maximum[axis]
                check(child)

        check(bvh)

    def test_input_list_untouched(self):
        spheres = random_spheres(random.Random(5), 10)
        before = list(spheres)
        BVHNode.build(spheres, rng=random.Random(1))
        assert spheres == before


class TestBVHPreconditions:
    """Construction fails fast on unusable input."""

    def test_empty_list(self):
        with pytest.raises(BVHConstructionError):
            BVHNode.build([])

    def test_primitive_without_bounding_box(self):
        spheres = random_spheres(random.Random(1), 3)
        with pytest.raises(BVHConstructionError, match="no bounding box"):
            BVHNode.build(spheres + [HittableList()])

    def test_is_value_error(self):
        assert issubclass(BVHConstructionError, ValueError)
