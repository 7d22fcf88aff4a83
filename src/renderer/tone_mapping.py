# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def _quantize_kernel(accumulated, scale, output):
    height, width, channels = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                # Average, gamma 2, then map to 8 bits
                value = math.sqrt(max(accumulated[y, x, c] * scale, 0.0))
                output[y, x, c] = min(255, int(value * 255.99))

def gamma_quantize(accumulated: np.ndarray, samples: int) -> np.ndarray:
    """
    Turns per-pixel color sums over `samples` samples into 8-bit pixels:
    mean, gamma-2 correction (square root) and `value * 255.99` truncation,
    clamped to [0, 255].
    """
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    output = np.empty(accumulated.shape, dtype=np.uint8)
    _quantize_kernel(accumulated, 1.0 / samples, output)
    return output
