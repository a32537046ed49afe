# core/aabb.py
import math
from core.vector import Vector3

class AABB:
    """
    Axis-aligned box between two corners. Used only to cull ray queries, so
    it carries no material.
    """
    def __init__(self, minimum: Vector3 = None, maximum: Vector3 = None):
        self.minimum = minimum if minimum is not None else Vector3(0.0, 0.0, 0.0)
        self.maximum = maximum if maximum is not None else Vector3(0.0, 0.0, 0.0)

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        """
        Slab test: narrow [t_min, t_max] by the entry/exit interval of each
        axis and report whether anything is left.
        """
        for axis in range(3):
            d = ray.direction[axis]
            # Python raises on x / 0.0, so spell out the IEEE result.
            inv_d = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            t_near = (self.minimum[axis] - ray.origin[axis]) * inv_d
            t_far = (self.maximum[axis] - ray.origin[axis]) * inv_d
            if inv_d < 0:
                t_near, t_far = t_far, t_near
            # NaN (origin on a slab plane, zero direction) leaves the bound as is.
            if t_near > t_min:
                t_min = t_near
            if t_far < t_max:
                t_max = t_far
            if t_max <= t_min:
                return False
        return True

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        """Smallest box enclosing both boxes."""
        return AABB(
            Vector3(min(box0.minimum.x, box1.minimum.x),
                    min(box0.minimum.y, box1.minimum.y),
                    min(box0.minimum.z, box1.minimum.z)),
            Vector3(max(box0.maximum.x, box1.maximum.x),
                    max(box0.maximum.y, box1.maximum.y),
                    max(box0.maximum.z, box1.maximum.z)),
        )
