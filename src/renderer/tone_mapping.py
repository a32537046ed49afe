# renderer/tone_mapping.py
import numpy as np

def gamma_correct(linear: np.ndarray) -> np.ndarray:
    """
    Convert an averaged linear radiance image to 8-bit channels.

    Gamma 2 (square root), clamp to [0, 0.999], then scale to 0..255.
    NaN and negative samples map to black.
    """
    scaled = np.nan_to_num(np.asarray(linear, dtype=np.float64), nan=0.0, posinf=1.0)
    mapped = np.sqrt(np.maximum(scaled, 0.0))
    mapped = np.clip(mapped, 0.0, 0.999)
    return (256.0 * mapped).astype(np.uint8)
