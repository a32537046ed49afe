# core/config.py
import os
from dataclasses import dataclass, replace
from typing import Optional

# Rays start this far along their direction to avoid re-hitting the surface
# they just left ("shadow acne").
T_MIN = 0.001

# Half-thickness given to flat rectangles so their boxes have volume.
RECT_PADDING = 1e-4

# Gap between the entry and exit searches of a volume boundary.
MEDIUM_EPSILON = 1e-4


@dataclass(frozen=True)
class RenderSettings:
    """
    Image and sampling parameters for one render.
    """
    aspect_ratio: float = 3.0 / 2.0
    image_width: int = 1200
    image_height: int = 800
    samples_per_pixel: int = 500
    max_depth: int = 50
    workers: int = 1
    seed: Optional[int] = None

    def with_width(self, width: int) -> "RenderSettings":
        """Change the width and recompute the height from the aspect ratio."""
        return replace(self, image_width=width,
                       image_height=max(1, int(width / self.aspect_ratio)))

    def with_aspect_ratio(self, aspect_ratio: float) -> "RenderSettings":
        return replace(self, aspect_ratio=aspect_ratio,
                       image_height=max(1, int(self.image_width / aspect_ratio)))

    def override(self, **changes) -> "RenderSettings":
        """Apply the non-None values in ``changes``; width goes through with_width()."""
        changes = {k: v for k, v in changes.items() if v is not None}
        width = changes.pop("image_width", None)
        settings = replace(self, **changes)
        if width is not None:
            settings = settings.with_width(width)
        return settings


def default_workers() -> int:
    return os.cpu_count() or 1
