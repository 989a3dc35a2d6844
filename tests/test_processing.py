"""Tests for pmode_paint.processing: canvas fitting, export and batch conversion."""

import numpy as np
from PIL import Image

from pmode_paint.constants import HEIGHT, PIXEL_COUNT, WIDTH
from pmode_paint.palette_ops import palette_for_set
from pmode_paint.pixel_buffer import PixelBuffer
from pmode_paint.processing import (
    ConvertOptions,
    convert_photo,
    export_image,
    fit_to_canvas,
    save_artwork,
)

GREEN = (0, 255, 0)


def write_png(path, size, color):
    Image.new("RGB", size, color).save(path)
    return path


class TestFitToCanvas:
    def test_wide_image_is_letterboxed(self):
        image = Image.new("RGB", (256, 96), (255, 0, 0))
        samples = fit_to_canvas(image, GREEN)
        assert samples.shape == (HEIGHT, WIDTH, 4)
        assert tuple(samples[0, 0, :3]) == GREEN
        assert tuple(samples[23, 64, :3]) == GREEN
        assert tuple(samples[48, 64, :3]) == (255, 0, 0)
        assert tuple(samples[HEIGHT - 1, 0, :3]) == GREEN

    def test_matching_aspect_fills_canvas(self):
        image = Image.new("RGB", (64, 48), (0, 0, 255))
        samples = fit_to_canvas(image, GREEN)
        assert np.all(samples[:, :, :3] == (0, 0, 255))

    def test_transparent_image_shows_background(self):
        image = Image.new("RGBA", (40, 30), (255, 0, 0, 0))
        samples = fit_to_canvas(image, GREEN)
        assert np.all(samples[:, :, :3] == GREEN)


class TestExport:
    def test_indexed_image(self):
        palette = palette_for_set(1)
        buffer = PixelBuffer.blank()
        buffer.put(3, 4, 2)
        image = export_image(buffer, palette)
        assert image.mode == "P"
        assert image.size == (WIDTH, HEIGHT)
        assert image.getpalette()[:12] == palette.flat()
        assert image.getpixel((3, 4)) == 2

    def test_save_round_trip(self, tmp_path):
        palette = palette_for_set(0)
        buffer = PixelBuffer.blank(fill=1)
        buffer.put(0, 0, 3)
        act_path = save_artwork(buffer, palette, tmp_path / "nested" / "art.png")
        assert act_path == tmp_path / "nested" / "art.act"
        assert act_path.stat().st_size == 768
        assert act_path.read_bytes()[:12] == bytes(palette.flat())
        with Image.open(tmp_path / "nested" / "art.png") as reloaded:
            assert reloaded.mode == "P"
            assert np.array_equal(np.asarray(reloaded), buffer.pixels)

    def test_act_can_be_skipped(self, tmp_path):
        act_path = save_artwork(PixelBuffer.blank(), palette_for_set(0), tmp_path / "art.png", act=False)
        assert act_path is None
        assert not (tmp_path / "art.act").exists()


class TestConvertPhoto:
    def test_solid_red(self, tmp_path):
        src = write_png(tmp_path / "red.png", (64, 48), (255, 0, 0))
        result = convert_photo(ConvertOptions(input_path=src, output_dir=tmp_path / "out"))
        assert result.output_path == tmp_path / "out" / "red.png"
        assert result.output_path.exists()
        assert result.act_path.exists()
        assert result.color_counts == [0, PIXEL_COUNT, 0, 0]

    def test_swap_reindexes(self, tmp_path):
        src = write_png(tmp_path / "red.png", (64, 48), (255, 0, 0))
        result = convert_photo(
            ConvertOptions(input_path=src, output_dir=tmp_path / "out", swap=[1, 0, 2, 3])
        )
        assert result.color_counts == [PIXEL_COUNT, 0, 0, 0]

    def test_caption_is_baked(self, tmp_path):
        src = write_png(tmp_path / "red.png", (64, 48), (255, 0, 0))
        result = convert_photo(
            ConvertOptions(input_path=src, output_dir=tmp_path / "out", text="HI", text_color=3)
        )
        assert result.color_counts[3] > 0
        assert sum(result.color_counts) == PIXEL_COUNT

    def test_second_palette_set(self, tmp_path):
        src = write_png(tmp_path / "red.png", (64, 48), (255, 0, 0))
        result = convert_photo(
            ConvertOptions(input_path=src, output_dir=tmp_path / "out", palette_set=1)
        )
        assert result.palette.label == "BCMO"
        assert result.color_counts == [0, 0, 0, PIXEL_COUNT]
