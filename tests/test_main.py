"""Tests for the command line entry point."""

import main


class TestParseArgs:

    def test_defaults(self):
        args = main.parse_args([])
        assert args.scene == "weekend"
        assert args.quality == "balanced"
        assert args.samples is None
        assert not args.preview

    def test_overrides(self):
        args = main.parse_args(["--scene", "few", "--samples", "3", "--depth", "2", "--seed", "5"])
        assert (args.scene, args.samples, args.depth, args.seed) == ("few", 3, 2, 5)


class TestMain:

    def test_renders_scene_to_file(self, tmp_path, capsys):
        output = tmp_path / "few.ppm"
        status = main.main(["--scene", "few", "--width", "6", "--height", "4", "--samples", "1",
                            "--depth", "2", "--workers", "1", "--seed", "1", "--no-progress",
                            "-o", str(output)])
        assert status == 0
        text = output.read_text()
        assert text.startswith("P3\n6 4\n255\n")
        assert len(text.splitlines()) == 3 + 4
        assert "Wrote 6x4 image" in capsys.readouterr().out

    def test_invalid_samples(self, tmp_path, capsys):
        status = main.main(["--samples", "0", "--no-progress", "-o", str(tmp_path / "x.ppm")])
        assert status == 2
        assert "samples_per_pixel" in capsys.readouterr().err

    def test_zero_height(self, tmp_path, capsys):
        output = tmp_path / "x.ppm"
        status = main.main(["--height", "0", "--no-progress", "-o", str(output)])
        assert status == 2
        assert "Image size must be positive" in capsys.readouterr().err
        assert not output.exists()

    def test_zero_width(self, tmp_path, capsys):
        status = main.main(["--width", "0", "--height", "4", "--no-progress",
                            "-o", str(tmp_path / "x.ppm")])
        assert status == 2
        assert "0x4" in capsys.readouterr().err
