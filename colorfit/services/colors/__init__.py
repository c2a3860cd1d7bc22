"""
ColorFit Colors Module

Perceptual color model, free-text parsing, seeded harmony generation and
swatch rendering for palette suggestions.
"""

from .model import Color, InvalidColorError, colors_from_hex, colors_to_hex, hue_distance
from .parser import parse_color, parse_color_list

__version__ = "1.0.0"

__all__ = [
    "Color",
    "InvalidColorError",
    "colors_from_hex",
    "colors_to_hex",
    "hue_distance",
    "parse_color",
    "parse_color_list",
]
