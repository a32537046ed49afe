# renderer/raytracer.py
import logging
import multiprocessing as mp
import random
import time
from typing import Tuple
import numpy as np
from tqdm import tqdm
from core.config import RenderSettings
from core.vector import Color
from renderer.integrator import ray_color

logger = logging.getLogger(__name__)

# Scene state of a pool worker, set once by _init_worker.
_worker_tracer = None


class RowTracer:
    """
    Traces whole image rows for one scene. Each row draws from its own
    generator seeded from (seed, row), so results do not depend on which
    process renders the row or in what order.
    """
    def __init__(self, world, camera, background: Color, settings: RenderSettings, seed: int):
        self.world = world
        self.camera = camera
        self.background = background
        self.width = settings.image_width
        self.height = settings.image_height
        self.samples_per_pixel = settings.samples_per_pixel
        self.max_depth = settings.max_depth
        self.seed = seed

    def row_rng(self, row: int) -> random.Random:
        return random.Random(f"{self.seed}:{row}")

    def trace_row(self, row: int) -> Tuple[int, np.ndarray]:
        """
        Average radiance of every pixel in image row ``row`` (0 = top).
        """
        rng = self.row_rng(row)
        j = self.height - 1 - row
        # Guard the single-row/column image against division by zero.
        u_scale = 1.0 / max(self.width - 1, 1)
        v_scale = 1.0 / max(self.height - 1, 1)
        scale = 1.0 / self.samples_per_pixel

        colors = np.zeros((self.width, 3), dtype=np.float64)
        for i in range(self.width):
            r = g = b = 0.0
            for _ in range(self.samples_per_pixel):
                u = (i + rng.random()) * u_scale
                v = (j + rng.random()) * v_scale
                ray = self.camera.get_ray(u, v, rng)
                color = ray_color(ray, self.background, self.world, self.max_depth, rng)
                r += color.x
                g += color.y
                b += color.z
            colors[i] = (r * scale, g * scale, b * scale)
        return row, colors


def _init_worker(tracer: RowTracer):
    global _worker_tracer
    _worker_tracer = tracer


def _trace_row(row: int) -> Tuple[int, np.ndarray]:
    return _worker_tracer.trace_row(row)


class Renderer:
    def __init__(self, settings: RenderSettings, quiet: bool = False):
        self.settings = settings
        self.width = settings.image_width
        self.height = settings.image_height
        self.quiet = quiet

    def render(self, world, camera, background: Color) -> np.ndarray:
        """
        Render the scene to a (height, width, 3) array of linear radiance,
        averaged over the samples of each pixel. Row 0 is the top row.
        """
        seed = self.settings.seed
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        tracer = RowTracer(world, camera, background, self.settings, seed)
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        workers = max(1, min(self.settings.workers, self.height))

        logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d worker(s), seed %d",
                    self.width, self.height, self.settings.samples_per_pixel,
                    self.settings.max_depth, workers, seed)
        start_time = time.time()

        with tqdm(total=self.height, unit="row", disable=self.quiet) as progress:
            if workers == 1:
                for row in range(self.height):
                    _, colors = tracer.trace_row(row)
                    image[row] = colors
                    progress.update(1)
            else:
                with mp.Pool(workers, initializer=_init_worker, initargs=(tracer,)) as pool:
                    for row, colors in pool.imap_unordered(_trace_row, range(self.height)):
                        # Only this process writes the buffer.
                        image[row] = colors
                        progress.update(1)

        logger.info("Render complete in %.1fs", time.time() - start_time)
        return image


def render(world, camera, background: Color, settings: RenderSettings,
           quiet: bool = False) -> np.ndarray:
    """Shortcut for Renderer(settings, quiet).render(world, camera, background)."""
    return Renderer(settings, quiet).render(world, camera, background)
