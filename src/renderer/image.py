# renderer/image.py
import os
import numpy as np
from PIL import Image

def to_ppm(pixels: np.ndarray) -> str:
    """
    Plain-text PPM (P3) for a (height, width, 3) uint8 raster, one line per
    scanline, top row first.
    """
    height, width = pixels.shape[:2]
    lines = [f"P3\n{width} {height}\n255"]
    for row in pixels:
        lines.append(" ".join(f"{r} {g} {b}" for r, g, b in row.tolist()))
    return "\n".join(lines) + "\n"

def save_image(pixels: np.ndarray, path: str) -> None:
    """
    Writes the raster to `path`. `.ppm` files use the plain-text format,
    anything else is encoded by Pillow based on the extension.
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        with open(path, "w") as f:
            f.write(to_ppm(pixels))
        return
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
