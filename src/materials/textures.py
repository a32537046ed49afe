# materials/textures.py
import logging
import math
import random
from typing import Union
import numpy as np
from PIL import Image
from core.vector import Vector3

logger = logging.getLogger(__name__)

# Returned by image textures whose file could not be loaded.
DEBUG_COLOR = Vector3(0.0, 1.0, 1.0)

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(x)sin(y)sin(z) at the hit point
    picks between the two sub-textures.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.odd = SolidTexture(odd) if isinstance(odd, Vector3) else odd
        self.even = SolidTexture(even) if isinstance(even, Vector3) else even
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: str):
        self.image_path = image_path
        # Load image using PIL
        try:
            with Image.open(image_path) as img:
                # Convert to RGB if necessary
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                # Convert to numpy array for faster access
                self.data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
                self.width = img.width
                self.height = img.height
        except (OSError, ValueError) as e:
            logger.warning("Could not load texture %s: %s; using debug color", image_path, e)
            self.data = None
            self.width = 0
            self.height = 0

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        if self.data is None:
            return DEBUG_COLOR

        # Clamp input texture coordinates to [0,1] x [1,0]
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # Flip V to image coordinates

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

class Perlin:
    """
    Gradient noise over a 256-entry table of random vectors and three
    permutation tables.
    """
    POINT_COUNT = 256

    def __init__(self, rng=None):
        if rng is None:
            rng = random.Random()
        np_rng = np.random.default_rng(rng.getrandbits(64))
        self.ran_vec = np_rng.uniform(-1.0, 1.0, (self.POINT_COUNT, 3)).tolist()
        self.perm_x = np_rng.permutation(self.POINT_COUNT).tolist()
        self.perm_y = np_rng.permutation(self.POINT_COUNT).tolist()
        self.perm_z = np_rng.permutation(self.POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        # Hermite smoothing of the fractional parts
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in (0, 1):
            for dj in (0, 1):
                for dk in (0, 1):
                    index = (self.perm_x[(i + di) & 255] ^
                             self.perm_y[(j + dj) & 255] ^
                             self.perm_z[(k + dk) & 255])
                    gx, gy, gz = self.ran_vec[index]
                    dot = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu)) *
                              (dj * vv + (1 - dj) * (1 - vv)) *
                              (dk * ww + (1 - dk) * (1 - ww)) * dot)
        return accum

    def turb(self, p: Vector3, depth: int = 7) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)

class NoiseTexture(Texture):
    """A marble-like procedural texture."""
    def __init__(self, scale: float = 1.0, rng=None):
        self.noise = Perlin(rng)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        value = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))
        return Vector3(value, value, value)
