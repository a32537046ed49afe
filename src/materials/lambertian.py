# materials/lambertian.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Lambertian(Material):
    """
    Ideal diffuse surface. Bounces follow a cosine-weighted distribution
    around the normal; the albedo may be a plain color or any texture.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Color]:
        # Normal plus a point on the unit sphere gives the cosine lobe.
        direction = rec.normal + random_unit_vector(rng)

        # The sample can cancel the normal; fall back to the normal itself.
        if direction.near_zero():
            direction = rec.normal

        albedo = self.get_texture_color(rec.u, rec.v, rec.p)
        return Ray(rec.p, direction, ray_in.time), albedo
