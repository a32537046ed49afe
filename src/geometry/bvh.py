# src/geometry/bvh.py
import logging
import random
from typing import List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


def box_compare(a: Hittable, b: Hittable, axis: int) -> bool:
    """True if a's box starts before b's box along ``axis``."""
    return _box_min(a, axis) < _box_min(b, axis)


def _box_min(obj: Hittable, axis: int) -> float:
    box = obj.bounding_box(0.0, 0.0)
    if box is None:
        logger.error("No bounding box in BVHNode constructor for %r", obj)
        return 0.0
    return box.minimum[axis]


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a list of hittables.

    Each node splits its span at the median along a randomly chosen axis.
    A span of one object stores that object as both children; the node box
    is tested before descending, so the duplicate test is only a constant
    cost. The tree is immutable once built.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 1.0, rng=None):
        if rng is None:
            rng = random.Random()
        axis = rng.randint(0, 2)
        object_span = end - start

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if box_compare(objects[start], objects[start + 1], axis):
                self.left, self.right = objects[start], objects[start + 1]
            else:
                self.left, self.right = objects[start + 1], objects[start]
        else:
            # Sort along the chosen axis by box minimum
            objects[start:end] = sorted(objects[start:end],
                                        key=lambda obj: _box_min(obj, axis))
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        box_left = self.left.bounding_box(time0, time1)
        box_right = self.right.bounding_box(time0, time1)
        if box_left is None or box_right is None:
            logger.error("No bounding box in BVHNode constructor.")
            box_left = box_left or AABB()
            box_right = box_right or AABB()
        self.box = AABB.surrounding_box(box_left, box_right)
        self.axis = axis

    @classmethod
    def from_list(cls, hittable_list, time0: float = 0.0, time1: float = 1.0,
                  rng=None) -> "BVHNode":
        """
        Build a tree over a HittableList or a plain list. The input itself is
        left untouched; sorting happens on a copy.
        """
        objects = list(getattr(hittable_list, "objects", hittable_list))
        if not objects:
            raise ValueError("cannot build a BVH over an empty list")
        logger.debug("Building BVH for %d objects", len(objects))
        return cls(objects, 0, len(objects), time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)

        # Update t_max for right branch if we hit something on the left
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of node levels below and including this one."""
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)
