# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB
from typing import Optional, List
from core.ray import Ray


class HittableList(Hittable):
    """
    A flat, ordered list of Hittable objects intersected by linear scan.
    Call build_bvh() to get an accelerated view of the same objects.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0, rng=None):
        # Imported here: bvh.py depends on this module for its input type.
        from geometry.bvh import BVHNode
        return BVHNode.from_list(self, time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far, rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        if not self.objects:
            return None
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box
