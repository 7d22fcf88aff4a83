"""
Ray-intersectable geometry: hit records, spheres, lists and the BVH.

Submodules are imported directly (``from geometry.sphere import Sphere``);
materials import ``geometry.hittable``, so nothing is re-exported here.
"""
