# core/uv.py
import math

class UV:
    """
    Represents a 2D surface coordinate.
    """
    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    @classmethod
    def on_unit_sphere(cls, normal) -> "UV":
        """
        Spherical parameterization of a point on the unit sphere, as used for
        sphere hit records.
        """
        theta = -math.acos(max(-1.0, min(1.0, normal.y)))
        phi = -math.atan2(normal.z, normal.x) + math.pi
        return cls(phi / (2 * math.pi), theta / math.pi)

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
