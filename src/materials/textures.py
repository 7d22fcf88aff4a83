# materials/textures.py
import math
from core.vector import Vector3
from core.uv import UV

class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, point: Vector3) -> Vector3:
        """Color of the texture at the given surface coordinates and point."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, uv: UV, point: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    3D checker pattern: the sign of sin(10x)*sin(10y)*sin(10z) at the hit
    point selects between the odd and even sub-textures.
    """
    def __init__(self, odd: Texture, even: Texture, scale: float = 10.0):
        self.odd = odd
        self.even = even
        self.scale = scale

    @classmethod
    def from_colors(cls, odd: Vector3, even: Vector3, scale: float = 10.0) -> "CheckerTexture":
        return cls(SolidColor(odd), SolidColor(even), scale)

    def value(self, uv: UV, point: Vector3) -> Vector3:
        sines = (math.sin(self.scale * point.x) *
                 math.sin(self.scale * point.y) *
                 math.sin(self.scale * point.z))
        if sines < 0:
            return self.odd.value(uv, point)
        return self.even.value(uv, point)
