"""Tests for palette generators."""

import pytest

from chromata.models import RGB24, SRGB
from chromata.palettes import (
    black_body_palette,
    grayscale,
    hue_palette,
    rainbow_palette,
)


class TestGrayscale:
    def test_extremes(self):
        assert grayscale(0x000000) == 0.0
        assert grayscale(0xFFFFFF) == pytest.approx(1.0)

    def test_green_brighter_than_blue(self):
        assert grayscale(0x00FF00) > grayscale(0xFF0000) > grayscale(0x0000FF)

    def test_mid_gray_is_decoded(self):
        """0x808080 is about 22% luminance, not 50%."""
        assert grayscale(0x808080) == pytest.approx(0.2158, abs=1e-3)


class TestRainbowPalette:
    def test_length_and_type(self):
        colors = rainbow_palette(9)

        assert len(colors) == 9
        assert all(isinstance(c, RGB24) for c in colors)

    def test_runs_red_to_violet(self):
        colors = rainbow_palette(9)

        assert colors[0].r > colors[0].b
        assert colors[-1].b > colors[-1].g

    def test_equal_luminance(self):
        """Every entry is dimmed to the darkest sample's luminance."""
        lums = [grayscale(c.packed) for c in rainbow_palette(9)]

        assert max(lums) - min(lums) < 0.01

    def test_needs_two_colors(self):
        with pytest.raises(ValueError, match="at least 2"):
            rainbow_palette(1)


class TestHuePalette:
    def test_equal_luminance(self):
        colors = hue_palette(9, target=0.5)

        assert len(colors) == 9
        for color in colors:
            assert grayscale(color.packed, SRGB) == pytest.approx(0.5, abs=0.01)

    def test_first_is_red_hue(self):
        first = hue_palette(6, target=0.2)[0]

        assert first.r > first.g
        assert first.g == first.b

    def test_include_white_appends_gray(self):
        colors = hue_palette(5, target=0.2, include_white=True)
        gray = colors[-1]

        assert len(colors) == 6
        assert gray.r == gray.g == gray.b
        assert grayscale(gray.packed) == pytest.approx(0.2, abs=0.01)

    def test_needs_one_color(self):
        with pytest.raises(ValueError):
            hue_palette(0)


class TestBlackBodyPalette:
    def test_default_ramp(self):
        """1000 K to 2300 K in 100 K steps."""
        colors = black_body_palette()

        assert len(colors) == 14

    def test_warms_toward_yellow(self):
        colors = black_body_palette()
        greens = [c.g for c in colors]

        assert all(c.r == 255 for c in colors)
        assert greens == sorted(greens)
        assert colors[0].g < colors[-1].g

    def test_invalid_step(self):
        with pytest.raises(ValueError, match="step_k"):
            black_body_palette(step_k=0)

    def test_empty_range(self):
        with pytest.raises(ValueError):
            black_body_palette(start_k=2000, stop_k=1000)
