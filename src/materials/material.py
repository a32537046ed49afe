# materials/material.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidTexture

BLACK = Color(0.0, 0.0, 0.0)

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; pass textures through."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are read-only once built and may be shared by many objects.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """Light given off at the surface point. Black unless overridden."""
        return BLACK

    def get_texture_color(self, u: float, v: float, point: Vector3) -> Color:
        """
        Get the color from the texture at the given surface coordinates and point.
        If no texture is set, returns None.
        """
        if self.texture is None:
            return None
        return self.texture.value(u, v, point)
