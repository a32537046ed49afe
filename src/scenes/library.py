# scenes/library.py
import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional
from camera.camera import Camera
from core.config import RenderSettings
from core.vector import Vector3, Color
from geometry.constant_medium import ConstantMedium
from geometry.cuboid import Cuboid
from geometry.hittable import Hittable
from geometry.rect import XYRect, XZRect, YZRect
from geometry.sphere import MovingSphere, Sphere
from geometry.transform import RotateY, Translate
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, ImageTexture, NoiseTexture

logger = logging.getLogger(__name__)

EARTH_TEXTURE = "earthmap.jpg"
SKY = Color(0.70, 0.80, 1.00)
BLACK = Color(0.0, 0.0, 0.0)


@dataclass
class Scene:
    """Everything the renderer needs: geometry root, camera, background and settings."""
    world: Hittable
    camera: Camera
    background: Color
    settings: RenderSettings


def random_scene(rng) -> HittableList:
    world = HittableList()

    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = Color.random(rng) * Color.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = Color.random(rng, 0.5, 1)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


def two_spheres(rng) -> HittableList:
    checker = Lambertian(CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9)))
    return HittableList([
        Sphere(Vector3(0, -10, 0), 10, checker),
        Sphere(Vector3(0, 10, 0), 10, checker),
    ])


def two_perlin_spheres(rng) -> HittableList:
    perlin = Lambertian(NoiseTexture(4.0, rng))
    return HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, perlin),
        Sphere(Vector3(0, 2, 0), 2, perlin),
    ])


def earth(rng) -> HittableList:
    earth_surface = Lambertian(ImageTexture(EARTH_TEXTURE))
    return HittableList([Sphere(Vector3(0, 0, 0), 2, earth_surface)])


def simple_light(rng) -> HittableList:
    perlin = Lambertian(NoiseTexture(4.0, rng))
    difflight = DiffuseLight(Color(4, 4, 4))
    return HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, perlin),
        Sphere(Vector3(0, 2, 0), 2, perlin),
        XYRect(3, 5, 1, 3, -2, difflight),
    ])


def _cornell_walls(light_material, light_rect) -> HittableList:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    x0, x1, z0, z1 = light_rect
    return HittableList([
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(x0, x1, z0, z1, 554, light_material),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
    ])


def _cornell_blocks(material):
    box1 = Cuboid(Vector3(0, 0, 0), Vector3(165, 330, 165), material)
    box1 = Translate(RotateY(box1, 15), Vector3(265, 0, 295))
    box2 = Cuboid(Vector3(0, 0, 0), Vector3(165, 165, 165), material)
    box2 = Translate(RotateY(box2, -18), Vector3(130, 0, 65))
    return box1, box2


def cornell_box(rng) -> HittableList:
    objects = _cornell_walls(DiffuseLight(Color(15, 15, 15)), (213, 343, 227, 332))
    for block in _cornell_blocks(Lambertian(Color(0.73, 0.73, 0.73))):
        objects.add(block)
    return objects


def cornell_smoke(rng) -> HittableList:
    objects = _cornell_walls(DiffuseLight(Color(7, 7, 7)), (113, 443, 127, 432))
    box1, box2 = _cornell_blocks(Lambertian(Color(0.73, 0.73, 0.73)))
    objects.add(ConstantMedium(box1, 0.01, Color(0, 0, 0)))
    objects.add(ConstantMedium(box2, 0.01, Color(1, 1, 1)))
    return objects


def final_scene(rng) -> HittableList:
    boxes1 = HittableList()
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y0 = 0.0
            x1 = x0 + w
            y1 = rng.uniform(1, 101)
            z1 = z0 + w
            boxes1.add(Cuboid(Vector3(x0, y0, z0), Vector3(x1, y1, z1), ground))

    objects = HittableList()
    objects.add(boxes1.build_bvh(0.0, 1.0, rng))

    light = DiffuseLight(Color(7, 7, 7))
    objects.add(XZRect(123, 423, 147, 412, 554, light))

    center1 = Vector3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    objects.add(MovingSphere(center1, center2, 0.0, 1.0, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    glass = Dielectric(1.5)
    objects.add(Sphere(Vector3(260, 150, 45), 50, glass))
    objects.add(Sphere(Vector3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Vector3(360, 150, 145), 70, glass)
    objects.add(boundary)
    objects.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    boundary = Sphere(Vector3(0, 0, 0), 5000, glass)
    objects.add(ConstantMedium(boundary, 0.0001, Color(1, 1, 1)))

    objects.add(Sphere(Vector3(400, 200, 400), 100, Lambertian(ImageTexture(EARTH_TEXTURE))))
    objects.add(Sphere(Vector3(220, 280, 300), 80, Lambertian(NoiseTexture(0.1, rng))))

    boxes2 = HittableList()
    white = Lambertian(Color(0.73, 0.73, 0.73))
    for _ in range(1000):
        boxes2.add(Sphere(Vector3.random(rng, 0, 165), 10, white))

    objects.add(Translate(RotateY(boxes2.build_bvh(0.0, 1.0, rng), 15),
                          Vector3(-100, 270, 395)))
    return objects


def _setup_camera(lookfrom: Vector3, lookat: Vector3, vfov: float, aperture: float,
                  settings: RenderSettings) -> Camera:
    vup = Vector3(0, 1, 0)
    dist_to_focus = 10.0
    return Camera(lookfrom, lookat, vup, vfov, settings.aspect_ratio,
                  aperture, dist_to_focus, 0.0, 1.0)


# scene number -> (builder, background, lookfrom, lookat, vfov, aperture, settings tweak)
_SCENES: Dict[int, tuple] = {
    1: (random_scene, SKY, Vector3(13, 2, 3), Vector3(0, 0, 0), 20.0, 0.1, None),
    2: (two_spheres, SKY, Vector3(13, 2, 3), Vector3(0, 0, 0), 20.0, 0.0, None),
    3: (two_perlin_spheres, SKY, Vector3(13, 2, 3), Vector3(0, 0, 0), 20.0, 0.0, None),
    4: (earth, SKY, Vector3(13, 2, 3), Vector3(0, 0, 0), 20.0, 0.0, None),
    5: (lambda rng: HittableList(), BLACK, Vector3(0, 0, 1), Vector3(0, 0, 0), 40.0, 0.0,
        None),
    6: (simple_light, BLACK, Vector3(26, 3, 6), Vector3(0, 2, 0), 20.0, 0.0,
        lambda s: s.override(samples_per_pixel=400)),
    7: (cornell_box, BLACK, Vector3(278, 278, -800), Vector3(278, 278, 0), 40.0, 0.0,
        lambda s: s.with_aspect_ratio(1.0).override(image_width=600, samples_per_pixel=400)),
    8: (cornell_smoke, BLACK, Vector3(278, 278, -800), Vector3(278, 278, 0), 40.0, 0.0,
        lambda s: s.with_aspect_ratio(1.0).override(image_width=600, samples_per_pixel=200)),
}
_FINAL = (final_scene, BLACK, Vector3(478, 278, -600), Vector3(278, 278, 0), 40.0, 0.0,
          lambda s: s.with_aspect_ratio(1.0).override(image_width=800,
                                                      samples_per_pixel=10000))


def world_select(scene_number: int, rng=None,
                 settings: Optional[RenderSettings] = None) -> Scene:
    """
    Build demo scene ``scene_number``; unknown numbers give the final scene.
    Non-empty worlds are wrapped in a BVH over the shutter interval [0, 1].
    """
    if rng is None:
        rng = random.Random()
    if settings is None:
        settings = RenderSettings()

    builder, background, lookfrom, lookat, vfov, aperture, tweak = _SCENES.get(scene_number, _FINAL)
    if tweak is not None:
        settings = tweak(settings)

    objects = builder(rng)
    logger.info("Scene %d: %d top-level objects", scene_number, len(objects))
    world: Hittable = objects.build_bvh(0.0, 1.0, rng) if len(objects) else objects

    camera = _setup_camera(lookfrom, lookat, vfov, aperture, settings)
    return Scene(world, camera, background, settings)

