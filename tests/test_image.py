"""Tests for raster output."""

import numpy as np
from PIL import Image

from renderer.image import save_image, to_ppm


PIXELS = np.array([
    [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
    [[1, 2, 3], [128, 128, 128], [255, 255, 255]],
], dtype=np.uint8)


class TestPPM:

    def test_header(self):
        text = to_ppm(PIXELS)
        assert text.startswith("P3\n3 2\n255\n")

    def test_one_line_per_scanline_top_first(self):
        lines = to_ppm(PIXELS).splitlines()
        assert len(lines) == 3 + 2
        assert lines[3] == "255 0 0 0 255 0 0 0 255"
        assert lines[4] == "1 2 3 128 128 128 255 255 255"

    def test_values_in_range(self):
        body = to_ppm(PIXELS).splitlines()[3:]
        values = [int(v) for line in body for v in line.split()]
        assert len(values) == 3 * 2 * 3
        assert all(0 <= v <= 255 for v in values)


class TestSaveImage:

    def test_ppm_file(self, tmp_path):
        path = tmp_path / "out.ppm"
        save_image(PIXELS, str(path))
        assert path.read_text() == to_ppm(PIXELS)

    def test_png_file(self, tmp_path):
        path = tmp_path / "out.png"
        save_image(PIXELS, str(path))
        with Image.open(path) as img:
            assert img.size == (3, 2)
            assert np.array_equal(np.asarray(img.convert("RGB")), PIXELS)

    def test_ppm_readable_by_pillow(self, tmp_path):
        path = tmp_path / "out.ppm"
        save_image(PIXELS, str(path))
        with Image.open(path) as img:
            assert np.array_equal(np.asarray(img.convert("RGB")), PIXELS)
