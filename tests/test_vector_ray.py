"""Unit tests for Vector3, Ray and the sampling/optics helpers.

Tests cover:
- Vector arithmetic, indexing and normalization
- Ray evaluation and time propagation
- Unit-sphere / unit-disk samplers
- reflect() and refract() identities
"""

import math

import pytest

from core.ray import Ray
from core.utils import (
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
    schlick,
)
from core.vector import Vector3


def approx_vec(v, expected, abs_tol=1e-9):
    return (v.x == pytest.approx(expected[0], abs=abs_tol)
            and v.y == pytest.approx(expected[1], abs=abs_tol)
            and v.z == pytest.approx(expected[2], abs=abs_tol))


class TestVector3:
    """Tests for basic vector operations."""

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert -a == Vector3(-1, -2, -3)
        assert b / 2 == Vector3(2, 2.5, 3)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)

    def test_indexing(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        assert list(v) == [7, 8, 9]
        with pytest.raises(IndexError):
            v[3]

    def test_normalize(self):
        v = Vector3(3, 0, 4).normalize()
        assert v.length() == pytest.approx(1.0)
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-9, 1e-7, 0).near_zero()


class TestRay:
    """Tests for the Ray value type."""

    def test_at(self):
        ray = Ray(Vector3(1, 1, 1), Vector3(0, 0, -2))
        assert ray.at(0) == Vector3(1, 1, 1)
        assert ray.at(1.5) == Vector3(1, 1, -2)

    def test_time_defaults_to_zero(self):
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)).time == 0.0
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0), 0.25).time == 0.25


class TestSampling:
    """Tests for the random samplers."""

    def test_unit_sphere_samples_inside(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vector_has_unit_length(self, rng):
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_unit_disk_is_flat(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0
            assert p.length_squared() < 1.0


class TestOptics:
    """Tests for reflect(), refract() and the Schlick approximation."""

    def test_reflect_off_normal_then_negated_normal_is_identity(self, rng):
        for _ in range(50):
            v = Vector3.random(rng, -1, 1)
            n = random_unit_vector(rng)
            back = reflect(reflect(v, n), -n)
            assert approx_vec(back, v)

    def test_reflect_flips_normal_component(self):
        r = reflect(Vector3(1, -1, 0), Vector3(0, 1, 0))
        assert r == Vector3(1, 1, 0)

    def test_refract_normal_incidence_equal_indices(self):
        n = Vector3(0, 1, 0)
        v = Vector3(0, -1, 0)
        assert approx_vec(refract(v, n, 1.0), v)

    def test_refract_equal_indices_keeps_oblique_direction(self):
        n = Vector3(0, 1, 0)
        v = Vector3(1, -1, 0).normalize()
        assert approx_vec(refract(v, n, 1.0), v)

    def test_refract_bends_toward_normal_entering_denser_medium(self):
        n = Vector3(0, 1, 0)
        v = Vector3(1, -1, 0).normalize()
        out = refract(v, n, 1.0 / 1.5)
        # sin(theta_t) = sin(45deg) / 1.5
        assert out.x == pytest.approx(math.sin(math.radians(45)) / 1.5)
        assert out.length() == pytest.approx(1.0)

    def test_schlick_bounds(self):
        r0 = ((1 - 1.5) / (1 + 1.5)) ** 2
        assert schlick(1.0, 1.5) == pytest.approx(r0)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)
        # Same base reflectance for the inverse ratio
        assert schlick(1.0, 1 / 1.5) == pytest.approx(r0)
