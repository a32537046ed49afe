# geometry/constant_medium.py
import math
import random
from typing import Optional, Union
from core.aabb import AABB
from core.config import MEDIUM_EPSILON
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.material import Material
from materials.textures import Texture


class ConstantMedium(Hittable):
    """
    A volume of uniform density filling a boundary shape (smoke, fog).

    Rays entering the boundary travel an exponentially distributed distance
    before scattering; if that distance takes them past the exit point they
    pass through untouched. The boundary must be convex.
    """
    def __init__(self, boundary: Hittable, density: float,
                 phase: Union[Material, Texture, Vector3]):
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        # Used when hit() is called without a generator.
        self.rng = random.Random()
        if isinstance(phase, Material):
            self.phase_function = phase
        else:
            self.phase_function = Isotropic(phase)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if rng is None:
            rng = self.rng

        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + MEDIUM_EPSILON, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], keeping log() finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        # Normal and face are arbitrary inside a volume.
        return HitRecord(p=ray.at(t), normal=Vector3(1.0, 0.0, 0.0), t=t,
                         material=self.phase_function, front_face=True)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
