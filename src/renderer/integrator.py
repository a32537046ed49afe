# renderer/integrator.py
import math
import random
from core.config import T_MIN
from core.ray import Ray
from core.vector import Color

def ray_color(ray: Ray, background: Color, world, depth: int, rng=None) -> Color:
    """
    Radiance carried back along ``ray`` after at most ``depth`` bounces.

    Bounces are traced in a loop and the (emitted, attenuation) pairs are
    folded from the last bounce back to the first, which equals the usual
    recursion ``emitted + attenuation * ray_color(scattered, depth - 1)``
    without growing the call stack.
    """
    if rng is None:
        rng = random.Random()
    emitted_attenuation = []
    final_color = Color(0.0, 0.0, 0.0)

    for _ in range(depth):
        rec = world.hit(ray, T_MIN, math.inf, rng)
        if rec is None:
            final_color = background
            break

        emitted = rec.material.emitted(rec.u, rec.v, rec.p)
        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            final_color = emitted
            break

        ray, attenuation = scattered
        emitted_attenuation.append((emitted, attenuation))

    for emitted, attenuation in reversed(emitted_attenuation):
        final_color = emitted + attenuation * final_color
    return final_color
