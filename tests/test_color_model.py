"""
Unit tests for the perceptual color model.
"""

import pytest

from colorfit.services.colors.model import (
    Color, InvalidColorError, hue_distance, wrap_hue, colors_from_hex, colors_to_hex
)


class TestHexEncoding:
    """Test hex parsing and display encoding."""

    def test_hex_roundtrip_is_exact(self):
        """Hex -> Color -> hex returns the same display encoding."""
        for original in ["#FF0000", "#00FF00", "#0000FF", "#B5651D", "#F5F0E8", "#1C1C1C", "#808080"]:
            assert Color.from_hex(original).to_hex() == original

    def test_hex_formats_accepted(self):
        assert Color.from_hex("b5651d").to_hex() == "#B5651D"
        assert Color.from_hex("#fff").to_hex() == "#FFFFFF"
        assert Color.from_hex("  #000000 ").to_hex() == "#000000"

    def test_invalid_hex_raises(self):
        for bad in ["#GGGGGG", "#FF00", "", "red", "#12345678"]:
            with pytest.raises(InvalidColorError):
                Color.from_hex(bad)

    def test_invalid_color_error_is_value_error(self):
        with pytest.raises(ValueError):
            Color.from_hex("nope")

    def test_list_helpers(self):
        colors = colors_from_hex(["#FF0000", "#0000FF"])
        assert colors_to_hex(colors) == ["#FF0000", "#0000FF"]


class TestPerceptualCoordinates:
    """Test Lab/LCh views."""

    def test_white_and_black_lightness(self):
        assert Color.from_hex("#FFFFFF").l == pytest.approx(100.0, abs=0.5)
        assert Color.from_hex("#000000").l == pytest.approx(0.0, abs=0.5)

    def test_gray_is_achromatic(self):
        gray = Color.from_hex("#808080")
        assert gray.chroma < 1.0

    def test_lch_construction_roundtrip_in_gamut(self):
        """An in-gamut LCh color keeps its coordinates within rounding."""
        color = Color.from_lch(60, 20, 140)
        l, c, h = color.to_lch()
        assert l == pytest.approx(60, abs=0.5)
        assert c == pytest.approx(20, abs=0.5)
        assert hue_distance(h, 140) < 1.0

    def test_out_of_gamut_is_clipped_to_display(self):
        """Colors are snapped into sRGB so the hex round trip stays within 1 dE."""
        color = Color.from_lab(50, 120, -120)
        again = Color.from_hex(color.to_hex())
        assert color.perceptual_distance(again) < 1.0

    def test_lightness_is_clamped(self):
        assert Color.from_lab(150, 0, 0).l <= 100.5
        assert Color.from_lab(-20, 0, 0).l >= -0.5

    def test_non_finite_coordinates_rejected(self):
        with pytest.raises(InvalidColorError):
            Color.from_lab(float("nan"), 0, 0)
        with pytest.raises(InvalidColorError):
            Color.from_lch(50, float("inf"), 0)


class TestHueMath:
    """Test hue wrapping and distance."""

    def test_wrap_hue(self):
        assert wrap_hue(370) == pytest.approx(10)
        assert wrap_hue(-30) == pytest.approx(330)
        assert wrap_hue(360) == 0.0

    def test_hue_distance_wraps(self):
        assert hue_distance(350, 10) == pytest.approx(20)
        assert hue_distance(0, 180) == pytest.approx(180)
        assert hue_distance(90, 90) == 0


class TestPerceptualDistance:
    """Test CIEDE2000 distance."""

    def test_identical_colors_have_zero_distance(self):
        color = Color.from_hex("#9CAF88")
        assert color.perceptual_distance(Color.from_hex("#9CAF88")) == pytest.approx(0.0, abs=1e-6)

    def test_distance_is_symmetric(self):
        a = Color.from_hex("#B5651D")
        b = Color.from_hex("#9CAF88")
        assert a.perceptual_distance(b) == pytest.approx(b.perceptual_distance(a), rel=1e-6)

    def test_black_white_far_apart(self):
        assert Color.from_hex("#000000").perceptual_distance(Color.from_hex("#FFFFFF")) > 90

    def test_colors_are_hashable_values(self):
        assert Color.from_hex("#123456") == Color.from_hex("#123456")
        assert len({Color.from_hex("#123456"), Color.from_hex("#123456")}) == 1
