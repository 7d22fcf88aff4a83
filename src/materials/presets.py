# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.textures import CheckerTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold(fuzz: float = 1.0) -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz)

    @staticmethod
    def polished_bronze() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), 0.0)

class DielectricPresets:
    """Predefined dielectric materials with typical refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class ColorPresets:
    """Common colors for diffuse materials."""

    GROUND = Vector3(0.5, 0.5, 0.5)
    OLIVE = Vector3(0.8, 0.8, 0.0)
    ROSE = Vector3(0.7, 0.3, 0.3)
    BROWN = Vector3(0.4, 0.2, 0.1)
    WHITE = Vector3(1.0, 1.0, 1.0)
    BLACK = Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined textured materials."""

    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None) -> Lambertian:
        if color1 is None:
            color1 = ColorPresets.BLACK
        if color2 is None:
            color2 = ColorPresets.WHITE
        return Lambertian(CheckerTexture.from_colors(color1, color2))
