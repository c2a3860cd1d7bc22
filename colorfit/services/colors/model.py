"""
Perceptual Color Model

Immutable color values expressed in CIELAB / CIELCh (D65 white point) with a
clamped sRGB hex encoding for display and persistence. Conversions and the
CIEDE2000 distance are delegated to coloraide.
"""

import math
import re
from dataclasses import dataclass
from functools import cached_property
from typing import Tuple

from coloraide import Color as _Base
from coloraide.spaces.lab_d65 import LabD65
from coloraide.spaces.lch_d65 import LChD65


class _ColorSpace(_Base):
    """Project-local coloraide class with the D65 Lab/LCh spaces registered."""


_ColorSpace.register([LabD65(), LChD65()], overwrite=True)

LAB_SPACE = "lab-d65"
DISPLAY_SPACE = "srgb"

# Chroma below this is treated as achromatic when reporting hue
ACHROMATIC_EPSILON = 1e-4

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


class InvalidColorError(ValueError):
    """Raised when coordinates or text cannot describe a color."""


def wrap_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    wrapped = h % 360.0
    # -1e-18 % 360 rounds to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def hue_distance(h1: float, h2: float) -> float:
    """Smallest angular separation between two hues, in degrees [0, 180]."""
    diff = abs(wrap_hue(h1) - wrap_hue(h2))
    return min(diff, 360.0 - diff)


def _require_finite(*values: float):
    for value in values:
        if value is None or not math.isfinite(value):
            raise InvalidColorError(f"Non-finite color coordinate: {value}")


def _snap_to_display(ca: _Base) -> Tuple[Tuple[float, float, float], Tuple[float, float, float]]:
    """Clip a coloraide color into sRGB; return (srgb, lab) coordinates of the clipped color."""
    rgb = ca.convert(DISPLAY_SPACE).fit(DISPLAY_SPACE, method="clip")
    r, g, b = (min(1.0, max(0.0, float(v))) for v in rgb.coords())
    if not all(math.isfinite(v) for v in (r, g, b)):
        raise InvalidColorError("Color conversion produced non-finite sRGB channels")
    lab = _ColorSpace(DISPLAY_SPACE, [r, g, b]).convert(LAB_SPACE)
    L, a, b_ = (float(v) for v in lab.coords())
    return (r, g, b), (L, a, b_)


@dataclass(frozen=True)
class Color:
    """
    A single displayable color.

    Stored as CIELAB (D65) coordinates of the sRGB-clipped color, so every
    instance round-trips through its hex encoding within rounding tolerance.
    """
    l: float  # Lightness [0, 100]
    a: float  # Green-red axis
    b: float  # Blue-yellow axis

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_lab(cls, l: float, a: float, b: float) -> "Color":
        """Build a color from Lab coordinates, clamping L and clipping to sRGB."""
        _require_finite(l, a, b)
        l = min(100.0, max(0.0, l))
        _, lab = _snap_to_display(_ColorSpace(LAB_SPACE, [l, a, b]))
        return cls(*lab)

    @classmethod
    def from_lch(cls, l: float, c: float, h: float) -> "Color":
        """Build a color from cylindrical coordinates (hue wraps, chroma >= 0)."""
        _require_finite(l, c, h)
        l = min(100.0, max(0.0, l))
        c = max(0.0, c)
        h = wrap_hue(h)
        rad = math.radians(h)
        return cls.from_lab(l, c * math.cos(rad), c * math.sin(rad))

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        """Build a color from 0-255 sRGB channels."""
        _require_finite(r, g, b)
        channels = [min(255.0, max(0.0, v)) / 255.0 for v in (r, g, b)]
        _, lab = _snap_to_display(_ColorSpace(DISPLAY_SPACE, channels))
        return cls(*lab)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """
        Build a color from a hex string.

        Args:
            hex_color: #RRGGBB, RRGGBB, #RGB or RGB

        Returns:
            Color for the given display encoding

        Raises:
            InvalidColorError: If the string is not a hex triplet
        """
        match = _HEX_RE.match(hex_color.strip()) if isinstance(hex_color, str) else None
        if not match:
            raise InvalidColorError(f"Invalid hex color format: {hex_color}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return cls.from_rgb(r, g, b)

    @classmethod
    def from_css(cls, text: str) -> "Color":
        """
        Parse any CSS color string coloraide understands (#hex, rgb(), hsl(), names).

        Raises:
            InvalidColorError: If coloraide cannot read the string
        """
        try:
            ca = _ColorSpace(text)
        except (ValueError, TypeError) as e:
            raise InvalidColorError(f"Unrecognized color: {text!r}") from e
        _, lab = _snap_to_display(ca)
        return cls(*lab)

    # ------------------------------------------------------------------
    # Coordinate views
    # ------------------------------------------------------------------

    @property
    def chroma(self) -> float:
        return math.hypot(self.a, self.b)

    @property
    def hue(self) -> float:
        if self.chroma < ACHROMATIC_EPSILON:
            return 0.0
        return wrap_hue(math.degrees(math.atan2(self.b, self.a)))

    def to_lab(self) -> Tuple[float, float, float]:
        return (self.l, self.a, self.b)

    def to_lch(self) -> Tuple[float, float, float]:
        return (self.l, self.chroma, self.hue)

    @cached_property
    def _rgb(self) -> Tuple[int, int, int]:
        rgb = self._as_coloraide().convert(DISPLAY_SPACE).fit(DISPLAY_SPACE, method="clip")
        return tuple(max(0, min(255, round(float(v) * 255))) for v in rgb.coords())

    def to_rgb(self) -> Tuple[int, int, int]:
        """Return 8-bit sRGB channels (clamped)."""
        return self._rgb

    def to_hex(self) -> str:
        """Return the display encoding in format #RRGGBB (uppercase)."""
        r, g, b = self.to_rgb()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_lab_string(self) -> str:
        """Human-readable Lab triple as echoed back to users."""
        return f"{self.l:.1f}, {self.a:.1f}, {self.b:.1f}"

    # ------------------------------------------------------------------
    # Metrics and transforms
    # ------------------------------------------------------------------

    def perceptual_distance(self, other: "Color") -> float:
        """CIEDE2000 difference; ~2.3 is a just-noticeable difference."""
        return float(self._as_coloraide().delta_e(other._as_coloraide(), method="2000", space=LAB_SPACE))

    def rotate_hue(self, degrees: float) -> "Color":
        return Color.from_lch(self.l, self.chroma, self.hue + degrees)

    def shift_lightness(self, offset: float, low: float = 0.0, high: float = 100.0) -> "Color":
        return Color.from_lch(min(high, max(low, self.l + offset)), self.chroma, self.hue)

    def shift_chroma(self, offset: float, high: float = 130.0) -> "Color":
        return Color.from_lch(self.l, min(high, max(0.0, self.chroma + offset)), self.hue)

    def _as_coloraide(self) -> _Base:
        return _ColorSpace(LAB_SPACE, [self.l, self.a, self.b])

    def __str__(self) -> str:
        return self.to_hex()


def colors_from_hex(hex_values) -> list:
    """Convert a sequence of hex strings into Colors, raising on the first invalid entry."""
    return [Color.from_hex(value) for value in hex_values]


def colors_to_hex(colors) -> list:
    """Serialize Colors to their hex encodings."""
    return [color.to_hex() for color in colors]
