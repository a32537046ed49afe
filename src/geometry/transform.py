# geometry/transform.py
import math
from dataclasses import replace
from typing import Optional
from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord


class Translate(Hittable):
    """
    Moves a child object by a fixed offset. The child is intersected in its
    own frame with the ray shifted by -offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.obj.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        # Direction is unchanged, so normal and face stay valid.
        return replace(rec, p=rec.p + self.offset)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.obj.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


class RotateY(Hittable):
    """
    Rotates a child object about the Y axis by ``angle`` degrees.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.obj = obj
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = obj.bounding_box(0.0, 1.0)
        if box is None:
            self.box = None
            return

        minimum = [math.inf, math.inf, math.inf]
        maximum = [-math.inf, -math.inf, -math.inf]
        for i in (0, 1):
            for j in (0, 1):
                for k in (0, 1):
                    x = i * box.maximum.x + (1 - i) * box.minimum.x
                    y = j * box.maximum.y + (1 - j) * box.minimum.y
                    z = k * box.maximum.z + (1 - k) * box.minimum.z
                    corner = self._to_world(Vector3(x, y, z))
                    for c in range(3):
                        minimum[c] = min(minimum[c], corner[c])
                        maximum[c] = max(maximum[c], corner[c])
        self.box = AABB(Vector3(*minimum), Vector3(*maximum))

    def _to_local(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._to_local(ray.origin), self._to_local(ray.direction), ray.time)
        rec = self.obj.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None
        # Rotation preserves dot products, so front_face carries over.
        return replace(rec, p=self._to_world(rec.p), normal=self._to_world(rec.normal))

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box
