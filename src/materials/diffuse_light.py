# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class DiffuseLight(Material):
    """
    Area light. Surfaces with this material absorb every incoming ray and
    give off the texture's color as radiance, so a bright texture (values
    above 1) makes a strong light.
    """
    def __init__(self, emit: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        return self.texture.value(u, v, p)
