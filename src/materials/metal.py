# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Metal(Material):
    """
    Mirror-like reflector. ``fuzz`` (clamped to [0, 1]) jitters the
    reflected direction inside a sphere of that radius; 0 is a perfect
    mirror.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = max(0.0, min(fuzz, 1.0))

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        direction = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0.0:
            direction = direction + random_in_unit_sphere(rng) * self.fuzz

        # Fuzz can push the ray below the surface; it is absorbed then.
        if direction.dot(rec.normal) <= 0:
            return None
        return (Ray(rec.p, direction, ray_in.time),
                self.get_texture_color(rec.u, rec.v, rec.p))
