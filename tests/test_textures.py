"""Unit tests for solid, checker, image and noise textures."""

import logging
import random

import numpy as np
import pytest
from PIL import Image

from core.vector import Color, Vector3
from materials.textures import (
    DEBUG_COLOR,
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    Perlin,
    SolidTexture,
)

ORIGIN = Vector3(0, 0, 0)


class TestSolidAndChecker:
    """Tests for SolidTexture and CheckerTexture."""

    def test_solid_ignores_coordinates(self):
        tex = SolidTexture(Color(0.1, 0.2, 0.3))
        assert tex.value(0, 0, ORIGIN) == Color(0.1, 0.2, 0.3)
        assert tex.value(0.9, 0.4, Vector3(5, 6, 7)) == Color(0.1, 0.2, 0.3)

    def test_checker_alternates_in_space(self):
        odd = Color(1, 0, 0)
        even = Color(0, 0, 1)
        tex = CheckerTexture(odd, even)
        assert tex.value(0, 0, Vector3(0.1, 0.1, 0.1)) == even
        assert tex.value(0, 0, Vector3(-0.1, 0.1, 0.1)) == odd

    def test_checker_accepts_textures(self):
        inner = SolidTexture(Color(0.5, 0.5, 0.5))
        tex = CheckerTexture(inner, Color(1, 1, 1))
        assert tex.value(0, 0, Vector3(-0.1, 0.1, 0.1)) == Color(0.5, 0.5, 0.5)


class TestImageTexture:
    """Tests for ImageTexture."""

    @pytest.fixture
    def quad_png(self, tmp_path):
        # Top row red, green; bottom row blue, white
        pixels = np.array([[[255, 0, 0], [0, 255, 0]],
                           [[0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
        path = tmp_path / "quad.png"
        Image.fromarray(pixels, "RGB").save(path)
        return path

    def test_lookup_flips_v(self, quad_png):
        tex = ImageTexture(str(quad_png))
        assert (tex.width, tex.height) == (2, 2)
        assert tex.value(0.25, 0.75, ORIGIN) == Color(1, 0, 0)
        assert tex.value(0.75, 0.75, ORIGIN) == Color(0, 1, 0)
        assert tex.value(0.25, 0.25, ORIGIN) == Color(0, 0, 1)
        assert tex.value(0.75, 0.25, ORIGIN) == Color(1, 1, 1)

    def test_coordinates_are_clamped(self, quad_png):
        tex = ImageTexture(str(quad_png))
        assert tex.value(1.0, 1.0, ORIGIN) == Color(0, 1, 0)
        assert tex.value(-3.0, -3.0, ORIGIN) == Color(0, 0, 1)
        assert tex.value(7.0, 0.0, ORIGIN) == Color(1, 1, 1)

    def test_missing_file_falls_back_to_debug_color(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="materials.textures"):
            tex = ImageTexture(str(tmp_path / "nope.jpg"))
        assert "Could not load texture" in caplog.text
        assert tex.value(0.5, 0.5, ORIGIN) == DEBUG_COLOR
        assert DEBUG_COLOR == Color(0, 1, 1)


class TestNoise:
    """Tests for Perlin noise and the marble texture."""

    def test_noise_is_bounded_and_smooth(self):
        perlin = Perlin(random.Random(5))
        rng = random.Random(6)
        for _ in range(200):
            p = Vector3.random(rng, -20, 20)
            n = perlin.noise(p)
            assert abs(n) <= 3.0
            nearby = perlin.noise(p + Vector3(1e-6, 0, 0))
            assert n == pytest.approx(nearby, abs=1e-4)

    def test_noise_vanishes_on_lattice(self):
        perlin = Perlin(random.Random(5))
        assert perlin.noise(Vector3(3, -2, 7)) == pytest.approx(0.0)

    def test_turbulence_is_non_negative(self):
        perlin = Perlin(random.Random(5))
        rng = random.Random(8)
        for _ in range(100):
            assert perlin.turb(Vector3.random(rng, -5, 5)) >= 0.0

    def test_same_seed_same_texture(self):
        a = NoiseTexture(4.0, random.Random(21))
        b = NoiseTexture(4.0, random.Random(21))
        p = Vector3(0.3, 1.7, -2.2)
        assert a.value(0, 0, p) == b.value(0, 0, p)

    def test_marble_is_gray_in_unit_range(self):
        tex = NoiseTexture(4.0, random.Random(2))
        rng = random.Random(3)
        for _ in range(100):
            c = tex.value(0, 0, Vector3.random(rng, -3, 3))
            assert c.x == c.y == c.z
            assert 0.0 <= c.x <= 1.0
