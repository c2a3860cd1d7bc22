"""
Unit tests for the free-text color parser.
"""

import numpy as np
import pytest

from colorfit.services.colors.model import Color, InvalidColorError
from colorfit.services.colors.parser import parse_color, parse_color_list


def _lch_sweep(seed, size):
    rng = np.random.default_rng(seed)
    return list(zip(rng.uniform(0, 100, size), rng.uniform(0, 150, size), rng.uniform(0, 360, size)))


class TestParseColor:
    """Test single-token parsing precedence."""

    def test_lab_function(self):
        color = parse_color("lab(50, 20, -10)")
        assert color is not None
        assert color.l == pytest.approx(50, abs=0.5)
        assert color.a == pytest.approx(20, abs=0.5)
        assert color.b == pytest.approx(-10, abs=0.5)

    def test_lab_function_case_and_spacing(self):
        assert parse_color("LAB( 70 ,0,0 )") is not None

    def test_bare_triple_is_lab(self):
        color = parse_color("60, -20, 30")
        assert color is not None
        assert color.l == pytest.approx(60, abs=0.5)

    def test_bare_hex(self):
        assert parse_color("b5651d").to_hex() == "#B5651D"

    def test_hash_hex_via_fallback(self):
        assert parse_color("#9CAF88").to_hex() == "#9CAF88"

    def test_css_named_color(self):
        assert parse_color("white").to_hex() == "#FFFFFF"

    def test_rgb_function(self):
        assert parse_color("rgb(255 0 0)").to_hex() == "#FF0000"

    def test_garbage_returns_none(self):
        for text in ["", "   ", "not a color", "lab(1, 2)", None, 42]:
            assert parse_color(text) is None


class TestParseColorList:
    """Test bulk import."""

    def test_mixed_list_keeps_order(self):
        colors, failed = parse_color_list("#FF0000, lab(50, 0, 0); 00FF00\nwhite")
        assert [c.to_hex() for c in colors][0] == "#FF0000"
        assert colors[2].to_hex() == "#00FF00"
        assert colors[3].to_hex() == "#FFFFFF"
        assert failed == []

    def test_failed_tokens_reported(self):
        colors, failed = parse_color_list("#FF0000, blorp, #0000FF")
        assert len(colors) == 2
        assert failed == ["blorp"]

    def test_empty_input(self):
        assert parse_color_list("") == ([], [])


class TestCssConstructor:
    def test_from_css_reads_functions_and_names(self):
        assert Color.from_css("hsl(0 100% 50%)").to_hex() == "#FF0000"
        assert Color.from_css("black").to_hex() == "#000000"

    def test_from_css_rejects_unknown_text(self):
        with pytest.raises(InvalidColorError):
            Color.from_css("blorp")


class TestHexEchoParsesBack:
    """Any constructed color survives display hex -> parser within 1 dE2000."""

    @pytest.mark.parametrize("l, c, h", [
        (50, 150, 300),
        (90, 130, 260),
        (10, 140, 30),
        (97, 120, 120),
        (0, 150, 0),
        (100, 150, 180),
        (60, 0, 0),
    ])
    def test_out_of_gamut_coordinates(self, l, c, h):
        color = Color.from_lch(l, c, h)
        assert color.perceptual_distance(parse_color(color.to_hex())) < 1

    @pytest.mark.parametrize("seed", [7, 1234, 2024])
    def test_seeded_lch_sweep(self, seed):
        for l, c, h in _lch_sweep(seed, 120):
            color = Color.from_lch(l, c, h)
            parsed = parse_color(color.to_hex())
            assert parsed is not None
            assert color.perceptual_distance(parsed) < 1, (l, c, h, color.to_hex())

    def test_lab_text_parses_back(self):
        for l, c, h in _lch_sweep(99, 40):
            color = Color.from_lch(l, c, h)
            assert color.perceptual_distance(parse_color(color.to_lab_string())) < 1
