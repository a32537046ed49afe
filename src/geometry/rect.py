# geometry/rect.py
from typing import Optional
from core.aabb import AABB
from core.config import RECT_PADDING
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord


class AxisAlignedRect(Hittable):
    """
    A rectangle lying in the plane ``axis k == const``, spanning
    [a0, a1] x [b0, b1] along the two remaining axes. The outward normal is
    the positive ``k`` axis.
    """
    # (a axis, b axis, k axis); set by subclasses
    axes = (0, 1, 2)

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        if not (a0 < a1 and b0 < b1):
            raise ValueError(f"rectangle needs a0 < a1 and b0 < b1, got "
                             f"[{a0}, {a1}] x [{b0}, {b1}]")
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        normal = [0.0, 0.0, 0.0]
        normal[self.axes[2]] = 1.0
        self.outward_normal = Vector3(*normal)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        a_axis, b_axis, k_axis = self.axes
        d = ray.direction[k_axis]
        if d == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[k_axis]) / d
        if t < t_min or t > t_max:
            return None

        a = ray.origin[a_axis] + t * ray.direction[a_axis]
        b = ray.origin[b_axis] + t * ray.direction[b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        u = (a - self.a0) / (self.a1 - self.a0)
        v = (b - self.b0) / (self.b1 - self.b0)
        return HitRecord.from_outward_normal(ray, t, ray.at(t), self.outward_normal,
                                             self.material, u, v)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        a_axis, b_axis, k_axis = self.axes
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[a_axis], hi[a_axis] = self.a0, self.a1
        lo[b_axis], hi[b_axis] = self.b0, self.b1
        # Pad the flat dimension so the box is never zero-width.
        lo[k_axis], hi[k_axis] = self.k - RECT_PADDING, self.k + RECT_PADDING
        return AABB(Vector3(*lo), Vector3(*hi))


class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k."""
    axes = (0, 1, 2)

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k."""
    axes = (0, 2, 1)

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k."""
    axes = (1, 2, 0)

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
