# core/utils.py
import random
from core.vector import Vector3

def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere (rejection sampling).
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                   rng.uniform(-1, 1),
                   rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector, a point sampled inside the unit sphere
    and pushed out to its surface.
    """
    return random_in_unit_sphere(rng).normalize()

def random_in_unit_disk(rng: random.Random) -> Vector3:
    """Random point in the z=0 unit disk, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def random_color(rng: random.Random, low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(low, high),
                   rng.uniform(low, high),
                   rng.uniform(low, high))

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
