# scenes.py
"""
Ready-made scenes for the command line renderer. Each builder returns a
Scene; default_camera() gives the viewpoint each scene was composed for.
"""
import random
from typing import Optional
from core.vector import Vector3
from core.utils import random_color
from core.motion import Timespan, Trajectory
from camera.camera import Camera
from geometry.sphere import Sphere, MovingSphere
from geometry.world import Scene
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import ColorPresets, DielectricPresets, MetalPresets, TexturePresets

def weekend(rng: Optional[random.Random] = None) -> Scene:
    """Large ground sphere covered with small random spheres, plus three big ones."""
    if rng is None:
        rng = random.Random()
    scene = Scene()

    ground = scene.add_material(Lambertian(ColorPresets.GROUND))
    scene.add(Sphere(Vector3(0, -1000, 0), 1000, ground))

    for a in range(-10, 11):
        for b in range(-10, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_color(rng) * random_color(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # metal
                material = Metal(random_color(rng, 0.5, 1.0), rng.uniform(0.0, 0.5))
            else:
                material = DielectricPresets.glass()
            scene.add(Sphere(center, 0.2, scene.add_material(material)))

    scene.add(Sphere(Vector3(0, 1, 0), 1.0, scene.add_material(DielectricPresets.glass())))
    scene.add(Sphere(Vector3(-4, 1, 0), 1.0, scene.add_material(Lambertian(ColorPresets.BROWN))))
    scene.add(Sphere(Vector3(4, 1, 0.05), 1.0, scene.add_material(MetalPresets.polished_bronze())))
    return scene

def few(rng: Optional[random.Random] = None) -> Scene:
    """
    Five spheres: ground, a matte center, a hollow glass shell and a fuzzy
    gold one. The layout is fixed, `rng` is accepted for a uniform builder
    signature.
    """
    scene = Scene()
    ground = scene.add_material(ColorPresets.matte(ColorPresets.OLIVE))
    center = scene.add_material(ColorPresets.matte(ColorPresets.ROSE))
    glass = scene.add_material(DielectricPresets.glass())
    gold = scene.add_material(MetalPresets.gold())

    scene.add(Sphere(Vector3(0, -100.5, -1), 100.0, ground))
    scene.add(Sphere(Vector3(0, 0, -1), 0.5, center))
    scene.add(Sphere(Vector3(-1, 0, -1), 0.5, glass))
    # Negative radius flips the normal, turning the glass ball into a shell.
    scene.add(Sphere(Vector3(-1, 0, -1), -0.45, glass))
    scene.add(Sphere(Vector3(1, 0, -1), 0.5, gold))
    return scene

def glass_balls(rng: Optional[random.Random] = None) -> Scene:
    """Checkered ground with a lattice of glass balls, half of them in motion. Fixed layout."""
    scene = Scene()
    ground = scene.add_material(TexturePresets.checkerboard())
    scene.add(Sphere(Vector3(0, -1000, 0), 1000, ground))

    trajectory = Trajectory(Vector3(-1, 1, 0), Vector3(1, 1, 0), Timespan(0.0, 10.0))
    glass = scene.add_material(Dielectric(1.5))
    for x in range(-5, 6):
        for y in range(0, 6):
            for z in range(-5, 6):
                scene.add(Sphere(Vector3(x, 0.4 + 0.8 * y, z), 0.4, glass))
                scene.add(MovingSphere(trajectory, 0.35, glass))
    return scene

SCENES = {
    "weekend": weekend,
    "few": few,
    "glass_balls": glass_balls,
}

def build_scene(name: str, rng: Optional[random.Random] = None) -> Scene:
    if name not in SCENES:
        raise KeyError(f"Unknown scene '{name}', expected one of {sorted(SCENES)}")
    return SCENES[name](rng)

def default_camera(name: str, aspect_ratio: float) -> Camera:
    if name == "few":
        return Camera(lookfrom=Vector3(-2, 2, 1), lookat=Vector3(0, 0, -1), vup=Vector3(0, 1, 0),
                      vfov=30.0, aspect_ratio=aspect_ratio, aperture=0.0, focus_dist=1.0)
    if name == "glass_balls":
        return Camera(lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0), vup=Vector3(0, 1, 0),
                      vfov=20.0, aspect_ratio=aspect_ratio, aperture=0.0, focus_dist=10.0,
                      time0=0.0, time1=1.0)
    return Camera(lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0), vup=Vector3(0, 1, 0),
                  vfov=20.0, aspect_ratio=aspect_ratio, aperture=0.1, focus_dist=10.0)
