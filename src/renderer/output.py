# renderer/output.py
import logging
from pathlib import Path
from typing import Union
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def output_path(filename: Union[str, Path]) -> Path:
    """Append .ppm to a filename that has no extension."""
    path = Path(filename)
    if not path.suffix:
        path = path.with_suffix(".ppm")
    return path

def write_ppm(path: Path, pixels: np.ndarray) -> None:
    """Write an 8-bit (height, width, 3) array as plain-text P3."""
    height, width, _ = pixels.shape
    with open(path, "w") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in pixels:
            for r, g, b in row:
                f.write(f"{r} {g} {b}\n")

def save_image(filename: Union[str, Path], pixels: np.ndarray) -> Path:
    """
    Save an 8-bit RGB image. ``.ppm`` is written as text, any other
    extension is handed to PIL.
    """
    path = output_path(filename)
    if path.suffix.lower() == ".ppm":
        write_ppm(path, pixels)
    else:
        Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8), "RGB").save(path)
    logger.info("Image saved to %s", path)
    return path
