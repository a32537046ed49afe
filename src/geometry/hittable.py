# geometry/hittable.py
from dataclasses import dataclass
from typing import Any, Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB

@dataclass(frozen=True)
class HitRecord:
    """
    Records details of a ray-object intersection.

    The normal always points against the incoming ray; ``front_face`` tells
    whether that ray arrived from the outside of the surface.
    """
    p: Vector3              # Intersection point
    normal: Vector3         # Surface normal at intersection
    t: float                # Ray parameter at intersection
    material: Any = None
    u: float = 0.0
    v: float = 0.0
    front_face: bool = True  # Whether the hit was on the front side

    @classmethod
    def from_outward_normal(cls, ray: Ray, t: float, p: Vector3, outward_normal: Vector3,
                            material, u: float = 0.0, v: float = 0.0) -> "HitRecord":
        """
        Builds a record whose normal is flipped to oppose the ray.
        """
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(p=p, normal=normal, t=t, material=material, u=u, v=v,
                   front_face=front_face)

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Box enclosing the object over the shutter interval, or None if the
        object has no finite extent.
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
