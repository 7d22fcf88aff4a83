"""Tests for the bundled scenes and the Scene container."""

import random

import pytest

from core.motion import Timespan
from core.vector import Vector3
from geometry.bvh import BVHNode
from geometry.sphere import MovingSphere, Sphere
from geometry.world import HittableList, Scene
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
import scenes


class TestScene:

    def test_material_handles_resolve(self):
        scene = Scene()
        handle = scene.add_material(Lambertian(Vector3(1, 0, 0)))
        scene.add(Sphere(Vector3(0, 0, 0), 1.0, handle))
        assert len(scene) == 1
        assert isinstance(scene.materials.get(scene.world.objects[0].material), Lambertian)

    def test_build_bvh(self):
        scene = scenes.few()
        bvh = scene.build_bvh(Timespan(0, 1), random.Random(0))
        assert isinstance(bvh, BVHNode)
        assert len(list(bvh.leaves())) == len(scene)

    def test_hittable_list_box(self):
        world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, 0), Sphere(Vector3(3, 0, 0), 1.0, 0)])
        box = world.bounding_box(Timespan(0, 1))
        assert box.minimum == Vector3(-1, -1, -1)
        assert box.maximum == Vector3(4, 1, 1)
        assert HittableList().bounding_box(Timespan(0, 1)) is None


class TestBundledScenes:

    def test_few(self):
        scene = scenes.few()
        assert len(scene) == 5
        assert len(scene.materials) == 4
        radii = [obj.radius for obj in scene.world.objects]
        assert -0.45 in radii

    def test_weekend_is_seeded(self):
        a = scenes.weekend(random.Random(3))
        b = scenes.weekend(random.Random(3))
        assert len(a) == len(b)
        assert [obj.center for obj in a.world.objects] == [obj.center for obj in b.world.objects]
        # Ground, up to 21x21 small spheres and three large ones
        assert 4 < len(a) <= 1 + 21 * 21 + 3

    def test_weekend_keeps_clearing(self):
        scene = scenes.weekend(random.Random(1))
        for obj in scene.world.objects:
            if obj.radius == 0.2:
                assert (obj.center - Vector3(4, 0.2, 0)).length() > 0.9

    def test_glass_balls_has_motion(self):
        scene = scenes.glass_balls()
        moving = [obj for obj in scene.world.objects if isinstance(obj, MovingSphere)]
        assert len(moving) == 11 * 6 * 11
        assert all(isinstance(scene.materials.get(obj.material), Dielectric) for obj in moving)

    def test_every_handle_valid(self):
        for name in scenes.SCENES:
            scene = scenes.build_scene(name, random.Random(0))
            for obj in scene.world.objects:
                scene.materials.get(obj.material)

    def test_unknown_scene(self):
        with pytest.raises(KeyError):
            scenes.build_scene("cornell")

    @pytest.mark.parametrize("name", sorted(scenes.SCENES))
    def test_default_camera(self, name):
        camera = scenes.default_camera(name, 1.5)
        assert camera.aspect_ratio == 1.5
        assert camera.time0 <= camera.time1

    @pytest.mark.parametrize("name", sorted(scenes.SCENES))
    def test_builders_share_signature(self, name):
        scene = scenes.SCENES[name](random.Random(0))
        assert len(scene) > 0
        assert len(scenes.SCENES[name]()) > 0

    def test_build_scene_forwards_rng(self):
        built = scenes.build_scene("weekend", random.Random(8))
        direct = scenes.weekend(random.Random(8))
        assert [obj.center for obj in built.world.objects] == [obj.center for obj in direct.world.objects]
