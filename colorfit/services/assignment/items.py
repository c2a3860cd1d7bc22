"""
Assignable items and their normalized catalog metadata.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from colorfit.services.colors.model import Color


class Tendency(str, Enum):
    """Soft, item-level color preference used as a tiebreaker."""
    ANY = "any"
    LIGHTER = "lighter"
    DARKER = "darker"
    WARMER = "warmer"
    COOLER = "cooler"
    NEUTRAL = "neutral"
    BOLD = "bold"


class ItemRole(str, Enum):
    """Role of an item in a room or outfit."""
    # Room roles
    BACKGROUND = "background"
    GROUND = "ground"
    ACCENT = "accent"
    ANCHOR = "anchor"
    NEUTRAL = "neutral"
    # Wardrobe roles (accent is shared)
    FOUNDATION = "foundation"
    CORE = "core"


# Discrete weight buckets from older catalog versions, mapped onto the 1-10 scale
WEIGHT_BUCKETS = {
    "large": 10.0,
    "medium": 5.0,
    "small": 2.0,
}
MIN_WEIGHT = 1.0
MAX_WEIGHT = 10.0


def normalize_weight(weight: Union[str, float, int, None], default: float = 3.0) -> float:
    """
    Normalize a visual weight onto the continuous 1-10 scale.

    Args:
        weight: "large"/"medium"/"small", a number, or None
        default: Weight used when the value is missing or unrecognized

    Returns:
        Weight in [1, 10]
    """
    if weight is None:
        return default
    if isinstance(weight, str):
        key = weight.strip().lower()
        if key in WEIGHT_BUCKETS:
            return WEIGHT_BUCKETS[key]
        try:
            weight = float(key)
        except ValueError:
            return default
    return min(MAX_WEIGHT, max(MIN_WEIGHT, float(weight)))


@dataclass(frozen=True)
class ItemMetadata:
    """Single stable catalog record; every field has a usable value."""
    name: str
    weight: float
    lightness_range: Tuple[float, float]
    role: ItemRole
    category: str = "other"

    @property
    def lightness_mid(self) -> float:
        return (self.lightness_range[0] + self.lightness_range[1]) / 2.0

    @property
    def lightness_width(self) -> float:
        return self.lightness_range[1] - self.lightness_range[0]


@dataclass(frozen=True)
class Item:
    """
    One assignable slot (a room surface, a piece of furniture, a garment).

    `id` is issued by whoever owns item lifecycle; the engine never creates ids.
    """
    id: int
    name: str
    color: Optional[Color] = None
    weight: float = 3.0
    tendency: Tendency = Tendency.ANY

    @property
    def is_assigned(self) -> bool:
        return self.color is not None

    def with_color(self, color: Optional[Color]) -> "Item":
        return replace(self, color=color)
