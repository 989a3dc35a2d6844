"""Tests for pmode_paint.raster: lines, outlines, circles and flood fill."""

import math

import numpy as np

from pmode_paint.constants import HEIGHT, PIXEL_COUNT, WIDTH
from pmode_paint.pixel_buffer import PixelBuffer
from pmode_paint.raster import circle_radius, draw_circle, draw_line, draw_point, draw_rect, flood_fill


def lit(buffer, color=1):
    ys, xs = np.nonzero(buffer.pixels == color)
    return set(zip(xs.tolist(), ys.tolist()))


class TestPoint:
    def test_writes_in_bounds(self):
        buf = PixelBuffer.blank()
        draw_point(buf, 3, 4, 2)
        assert buf.get(3, 4) == 2
        assert lit(buf, 2) == {(3, 4)}

    def test_out_of_bounds_is_ignored(self):
        buf = PixelBuffer.blank()
        for x, y in [(-1, 0), (0, -1), (WIDTH, 0), (0, HEIGHT), (500, 500)]:
            draw_point(buf, x, y, 3)
        assert buf == PixelBuffer.blank()


class TestLine:
    def test_horizontal(self):
        buf = PixelBuffer.blank()
        draw_line(buf, 2, 5, 6, 5, 1)
        assert lit(buf) == {(x, 5) for x in range(2, 7)}

    def test_vertical(self):
        buf = PixelBuffer.blank()
        draw_line(buf, 7, 9, 7, 3, 1)
        assert lit(buf) == {(7, y) for y in range(3, 10)}

    def test_diagonal(self):
        buf = PixelBuffer.blank()
        draw_line(buf, 0, 0, 4, 4, 1)
        assert lit(buf) == {(i, i) for i in range(5)}

    def test_single_point(self):
        buf = PixelBuffer.blank()
        draw_line(buf, 10, 10, 10, 10, 2)
        assert lit(buf, 2) == {(10, 10)}

    def test_endpoints_always_included(self):
        pairs = [((0, 0), (7, 3)), ((20, 5), (3, 40)), ((100, 90), (101, 2)), ((5, 5), (50, 6))]
        for (x0, y0), (x1, y1) in pairs:
            buf = PixelBuffer.blank()
            draw_line(buf, x0, y0, x1, y1, 1)
            assert buf.get(x0, y0) == 1
            assert buf.get(x1, y1) == 1

    def test_reverse_direction_draws_same_pixels(self):
        pairs = [((0, 0), (2, 1)), ((0, 0), (7, 3)), ((20, 5), (3, 40)), ((9, 9), (1, 4)), ((64, 48), (127, 0))]
        for (x0, y0), (x1, y1) in pairs:
            forward = PixelBuffer.blank()
            backward = PixelBuffer.blank()
            draw_line(forward, x0, y0, x1, y1, 1)
            draw_line(backward, x1, y1, x0, y0, 1)
            assert lit(forward) == lit(backward)

    def test_line_is_connected(self):
        buf = PixelBuffer.blank()
        draw_line(buf, 3, 2, 40, 17, 1)
        points = lit(buf)
        # one pixel per step along the major axis
        assert len(points) == 40 - 3 + 1
        for x, y in points:
            if (x, y) == (40, 17):
                continue
            assert any((x + dx, y + dy) in points for dx in (0, 1) for dy in (0, 1) if (dx, dy) != (0, 0))

    def test_clips_off_canvas(self):
        buf = PixelBuffer.blank()
        draw_line(buf, -5, 0, 5, 0, 1)
        assert lit(buf) == {(x, 0) for x in range(0, 6)}


class TestRect:
    def test_outline_only(self):
        buf = PixelBuffer.blank()
        draw_rect(buf, 5, 4, 2, 2, 1)
        points = lit(buf)
        assert len(points) == 10
        assert (3, 3) not in points and (4, 3) not in points
        assert {(2, 2), (5, 2), (2, 4), (5, 4)} <= points

    def test_single_pixel(self):
        buf = PixelBuffer.blank()
        draw_rect(buf, 8, 8, 8, 8, 3)
        assert lit(buf, 3) == {(8, 8)}

    def test_clipped_at_edge(self):
        buf = PixelBuffer.blank()
        draw_rect(buf, WIDTH - 2, HEIGHT - 2, WIDTH + 5, HEIGHT + 5, 1)
        assert lit(buf) == {(WIDTH - 2, HEIGHT - 2), (WIDTH - 1, HEIGHT - 2), (WIDTH - 2, HEIGHT - 1)}


class TestCircle:
    def test_radius_is_floored_distance(self):
        assert circle_radius(50, 50, 53, 54) == 5
        assert circle_radius(0, 0, 1, 1) == 1
        assert circle_radius(10, 10, 10, 10) == 0

    def test_zero_radius_plots_center(self):
        buf = PixelBuffer.blank()
        draw_circle(buf, 20, 20, 20, 20, 2)
        assert lit(buf, 2) == {(20, 20)}

    def test_radius_one(self):
        buf = PixelBuffer.blank()
        draw_circle(buf, 20, 20, 21, 20, 1)
        assert lit(buf) == {(21, 20), (19, 20), (20, 21), (20, 19)}

    def test_cardinal_points_and_symmetry(self):
        buf = PixelBuffer.blank()
        draw_circle(buf, 50, 50, 53, 54, 1)
        points = lit(buf)
        assert {(55, 50), (45, 50), (50, 55), (50, 45)} <= points
        assert (50, 50) not in points
        for x, y in points:
            assert (100 - x, y) in points
            assert (x, 100 - y) in points
            assert (50 + (y - 50), 50 + (x - 50)) in points
            assert 4 <= math.hypot(x - 50, y - 50) <= 6

    def test_clipped_near_corner(self):
        buf = PixelBuffer.blank()
        draw_circle(buf, 0, 0, 10, 0, 1)
        points = lit(buf)
        assert (10, 0) in points and (0, 10) in points
        assert all(x >= 0 and y >= 0 for x, y in points)


class TestFloodFill:
    def test_fills_blank_canvas(self):
        buf = PixelBuffer.blank()
        assert flood_fill(buf, 0, 0, 2) == PIXEL_COUNT
        assert buf == PixelBuffer.blank(2)

    def test_same_color_is_noop(self):
        buf = PixelBuffer.blank(1)
        assert flood_fill(buf, 10, 10, 1) == 0
        assert buf == PixelBuffer.blank(1)

    def test_fills_enclosed_region_only(self):
        buf = PixelBuffer.blank()
        draw_rect(buf, 10, 10, 20, 20, 1)
        before = buf.copy()
        painted = flood_fill(buf, 15, 15, 2)
        assert painted == 81
        assert lit(buf, 2) == {(x, y) for x in range(11, 20) for y in range(11, 20)}
        # outline and outside untouched
        mask = buf.pixels != 2
        assert np.array_equal(buf.pixels[mask], before.pixels[mask])

    def test_seed_on_outside_skips_enclosed_region(self):
        buf = PixelBuffer.blank()
        draw_rect(buf, 10, 10, 20, 20, 1)
        flood_fill(buf, 0, 0, 3)
        assert buf.get(15, 15) == 0
        assert buf.get(0, 0) == 3
        assert buf.get(10, 10) == 1

    def test_four_connected_does_not_leak_diagonally(self):
        buf = PixelBuffer.blank()
        buf.put(1, 0, 1)
        buf.put(0, 1, 1)
        assert flood_fill(buf, 0, 0, 2) == 1
        assert buf.get(1, 1) == 0

    def test_second_fill_is_idempotent(self):
        buf = PixelBuffer.blank()
        draw_rect(buf, 30, 30, 40, 35, 3)
        flood_fill(buf, 35, 32, 2)
        once = buf.copy()
        assert flood_fill(buf, 35, 32, 2) == 0
        assert buf == once

    def test_out_of_bounds_seed(self):
        buf = PixelBuffer.blank()
        assert flood_fill(buf, -1, 5, 2) == 0
        assert buf == PixelBuffer.blank()
