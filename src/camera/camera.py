# camera/camera.py
import math
import random
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera. The view basis and viewport are derived once in the
    constructor; afterwards the camera is read-only and safe to share
    between render workers.
    """
    def __init__(self, lookfrom: Vector3 = None, lookat: Vector3 = None, vup: Vector3 = None,
                 vfov: float = 90.0, aspect_ratio: float = 16.0 / 9.0,
                 aperture: float = 0.1, focus_dist: float = 10.0,
                 time0: float = 0.0, time1: float = 1.0):
        self.lookfrom = lookfrom if lookfrom is not None else Vector3(0, 0, 0)
        self.lookat = lookat if lookat is not None else Vector3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0  # Shutter open/close, ray times are drawn from this interval
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Computes the camera's basis vectors and viewport."""
        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist

        self.lower_left_corner = (self.lookfrom -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng: random.Random) -> Ray:
        """Generates a ray through normalized screen coordinates (s, t)."""
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = self.lookfrom + self.u * rd.x + self.v * rd.y
        else:
            origin = self.lookfrom
        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     origin)
        return Ray(origin, direction, rng.uniform(self.time0, self.time1))
