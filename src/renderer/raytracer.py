# renderer/raytracer.py
import logging
import math
import os
import random
import time
from multiprocessing import Pool
from typing import Optional, Tuple
import numpy as np
from tqdm import tqdm
from core.ray import Ray
from core.vector import Vector3
from camera.camera import Camera
from geometry.hittable import Hittable
from materials.material import MaterialTable
from .tone_mapping import gamma_quantize

logger = logging.getLogger(__name__)

# Hits closer than this are ignored so a scattered ray does not re-hit its own surface.
T_MIN = 0.001
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)

class RenderOptions:
    """Sampling settings for one render."""

    def __init__(self, samples_per_pixel: int = 100, max_depth: int = 10,
                 workers: Optional[int] = None, seed: Optional[int] = None,
                 progress: bool = True):
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers
        self.seed = seed
        self.progress = progress

    def __repr__(self) -> str:
        return (f"RenderOptions(samples_per_pixel={self.samples_per_pixel}, "
                f"max_depth={self.max_depth}, workers={self.workers}, seed={self.seed})")

def sky_color(ray: Ray) -> Vector3:
    """Vertical white-to-blue gradient seen by rays that hit nothing."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world: Hittable, materials: MaterialTable,
              depth: int, rng: random.Random) -> Vector3:
    """
    Radiance arriving along `ray`. Each bounce spends one unit of `depth`;
    an exhausted budget or an absorbed ray contributes black.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return sky_color(ray)

    scatter = materials.get(rec.material).scatter(ray, rec, rng)
    if scatter is None:
        return BLACK
    scattered, attenuation = scatter
    return attenuation * ray_color(scattered, world, materials, depth - 1, rng)

def row_rng(seed: int, y: int) -> random.Random:
    """Independent generator per scanline, so results do not depend on scheduling."""
    return random.Random(f"{seed}:{y}")

def sample_row(y: int, world: Hittable, materials: MaterialTable, camera: Camera,
               width: int, height: int, options: RenderOptions, seed: int) -> np.ndarray:
    """
    Sums `samples_per_pixel` jittered samples for every pixel of scanline `y`
    (y = 0 is the bottom row). Returns a (width, 3) array of color sums.
    """
    rng = row_rng(seed, y)
    row = np.zeros((width, 3), dtype=np.float64)
    x_span = max(width - 1, 1)
    y_span = max(height - 1, 1)
    for x in range(width):
        r = g = b = 0.0
        for _ in range(options.samples_per_pixel):
            s = (x + rng.random()) / x_span
            t = (y + rng.random()) / y_span
            color = ray_color(camera.get_ray(s, t, rng), world, materials, options.max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        row[x] = (r, g, b)
    return row

# Scene state installed once per worker process by the pool initializer.
_worker_state = {}

def _init_worker(world, materials, camera, width, height, options, seed):
    _worker_state.update(world=world, materials=materials, camera=camera,
                         width=width, height=height, options=options, seed=seed)

def _render_row(y: int) -> Tuple[int, np.ndarray]:
    state = _worker_state
    return y, sample_row(y, state['world'], state['materials'], state['camera'],
                         state['width'], state['height'], state['options'], state['seed'])

class Renderer:
    """
    Monte Carlo path tracer over an immutable world. Scanlines are independent
    units of work, fanned out over a process pool and joined once at the end.
    """
    def __init__(self, width: int, height: int, options: Optional[RenderOptions] = None):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.options = options if options is not None else RenderOptions()

    def accumulate(self, world: Hittable, materials: MaterialTable, camera: Camera) -> np.ndarray:
        """
        Returns the (height, width, 3) buffer of per-pixel color sums, top
        scanline first.
        """
        options = self.options
        seed = options.seed
        if seed is None:
            seed = random.SystemRandom().randrange(2 ** 63)

        workers = options.workers or os.cpu_count() or 1
        workers = min(workers, self.height)
        accumulation = np.zeros((self.height, self.width, 3), dtype=np.float64)

        logger.info("Rendering %dx%d, %d spp, depth %d on %d worker(s)",
                    self.width, self.height, options.samples_per_pixel,
                    options.max_depth, workers)
        start_time = time.perf_counter()

        rows = range(self.height)
        with tqdm(total=self.height, unit="row", disable=not options.progress) as progress:
            if workers == 1:
                for y in rows:
                    accumulation[self.height - 1 - y] = sample_row(
                        y, world, materials, camera, self.width, self.height, options, seed)
                    progress.update()
            else:
                init_args = (world, materials, camera, self.width, self.height, options, seed)
                with Pool(processes=workers, initializer=_init_worker, initargs=init_args) as pool:
                    for y, row in pool.imap_unordered(_render_row, rows):
                        accumulation[self.height - 1 - y] = row
                        progress.update()

        logger.info("Rendered %d rows in %.2fs", self.height, time.perf_counter() - start_time)
        return accumulation

    def render(self, world: Hittable, materials: MaterialTable, camera: Camera) -> np.ndarray:
        """
        Renders the full image and returns it as a (height, width, 3) uint8
        array, top row first.
        """
        accumulation = self.accumulate(world, materials, camera)
        return gamma_quantize(accumulation, self.options.samples_per_pixel)
