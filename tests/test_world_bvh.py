"""Unit tests for HittableList and the BVH.

The main property: a BVH built over any list answers every query exactly
like a linear scan of the same list.
"""

import logging
import math
import random

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.bvh import BVHNode
from geometry.cuboid import Cuboid
from geometry.hittable import Hittable
from geometry.rect import XYRect, XZRect, YZRect
from geometry.sphere import MovingSphere, Sphere
from geometry.world import HittableList


class Unbounded(Hittable):
    """Object without a bounding box that is never hit."""

    def hit(self, ray, t_min, t_max, rng=None):
        return None

    def bounding_box(self, time0, time1):
        return None


def random_objects(rng, gray, count=40):
    objects = []
    for _ in range(count):
        kind = rng.randrange(5)
        c = Vector3.random(rng, -10, 10)
        if kind == 0:
            objects.append(Sphere(c, rng.uniform(0.2, 2), gray))
        elif kind == 1:
            objects.append(MovingSphere(c, c + Vector3(0, 1, 0), 0.0, 1.0,
                                        rng.uniform(0.2, 1), gray))
        elif kind == 2:
            objects.append(XYRect(c.x, c.x + 2, c.y, c.y + 1, c.z, gray))
        elif kind == 3:
            objects.append(XZRect(c.x, c.x + 1, c.z, c.z + 2, c.y, gray))
        else:
            size = Vector3.random(rng, 0.2, 3)
            objects.append(Cuboid(c, c + size, gray))
    objects.append(YZRect(-3, 3, -3, 3, 0, gray))
    return objects


class TestHittableList:
    """Tests for the linear-scan list."""

    def test_returns_closest_hit(self, gray):
        near = Sphere(Vector3(0, 0, -2), 0.5, gray)
        far = Sphere(Vector3(0, 0, -6), 0.5, gray)
        world = HittableList([far, near])
        rec = world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.5)

    def test_empty_list(self):
        world = HittableList()
        assert len(world) == 0
        assert world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None
        assert world.bounding_box(0, 1) is None

    def test_add_and_clear(self, gray):
        world = HittableList()
        world.add(Sphere(Vector3(0, 0, 0), 1, gray))
        assert len(world) == 1
        world.clear()
        assert len(world) == 0

    def test_bounding_box_is_union(self, gray):
        world = HittableList([Sphere(Vector3(0, 0, 0), 1, gray),
                              Sphere(Vector3(5, 0, 0), 1, gray)])
        box = world.bounding_box(0, 1)
        assert box.minimum == Vector3(-1, -1, -1)
        assert box.maximum == Vector3(6, 1, 1)

    def test_member_without_box_gives_no_box(self, gray):
        world = HittableList([Sphere(Vector3(0, 0, 0), 1, gray), Unbounded()])
        assert world.bounding_box(0, 1) is None


class TestBVH:
    """Tests for BVH construction and traversal."""

    def test_matches_linear_scan(self, gray):
        scene_rng = random.Random(99)
        objects = random_objects(scene_rng, gray)
        linear = HittableList(objects)

        for build in range(5):
            bvh = BVHNode.from_list(objects, 0.0, 1.0, random.Random(build))
            ray_rng = random.Random(build)
            for _ in range(300):
                ray = Ray(Vector3.random(ray_rng, -15, 15), Vector3.random(ray_rng, -1, 1),
                          ray_rng.random())
                expected = linear.hit(ray, 0.001, math.inf)
                actual = bvh.hit(ray, 0.001, math.inf)
                if expected is None:
                    assert actual is None
                else:
                    assert actual is not None
                    assert actual.t == pytest.approx(expected.t)
                    assert actual.p.x == pytest.approx(expected.p.x)

    def test_single_object(self, gray):
        sphere = Sphere(Vector3(0, 0, -3), 1, gray)
        bvh = BVHNode.from_list([sphere], 0.0, 1.0, random.Random(0))
        assert bvh.left is sphere and bvh.right is sphere
        rec = bvh.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)

    def test_empty_list_rejected(self):
        with pytest.raises(ValueError):
            BVHNode.from_list(HittableList())

    def test_input_list_is_not_reordered(self, gray):
        objects = random_objects(random.Random(5), gray, count=10)
        world = HittableList(objects)
        before = list(world.objects)
        world.build_bvh(0.0, 1.0, random.Random(1))
        assert world.objects == before

    def test_box_encloses_all_objects(self, gray):
        objects = random_objects(random.Random(7), gray)
        bvh = BVHNode.from_list(objects, 0.0, 1.0, random.Random(3))
        expected = HittableList(objects).bounding_box(0.0, 1.0)
        assert bvh.bounding_box(0.0, 1.0).minimum == expected.minimum
        assert bvh.bounding_box(0.0, 1.0).maximum == expected.maximum

    def test_same_seed_same_tree(self, gray):
        objects = random_objects(random.Random(11), gray)
        a = BVHNode.from_list(objects, 0.0, 1.0, random.Random(42))
        b = BVHNode.from_list(objects, 0.0, 1.0, random.Random(42))
        assert a.axis == b.axis
        assert a.left.axis == b.left.axis
        assert a.depth() == b.depth()

    def test_depth_is_logarithmic(self, gray):
        spheres = [Sphere(Vector3(i, 0, 0), 0.4, gray) for i in range(4)]
        assert BVHNode.from_list(spheres, rng=random.Random(0)).depth() == 2
        spheres = [Sphere(Vector3(i, 0, 0), 0.4, gray) for i in range(64)]
        assert BVHNode.from_list(spheres, rng=random.Random(0)).depth() == 6

    def test_missing_box_is_logged(self, gray, caplog):
        objects = [Sphere(Vector3(0, 0, -3), 1, gray), Unbounded()]
        with caplog.at_level(logging.ERROR, logger="geometry.bvh"):
            bvh = BVHNode.from_list(objects, 0.0, 1.0, random.Random(0))
        assert "No bounding box in BVHNode constructor" in caplog.text
        rec = bvh.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)
