"""
Wardrobe Auto-Fill

Two lanes, same principle as rooms: foundation pieces take neutrals, core and
accent pieces take the palette's chromatic colors.

Unlike rooms, a wardrobe may hold several instances of one garment type
("T-Shirt 1", "T-Shirt 2", ...). Their target lightness is spread across the
type's range so three tees come out dark, mid and light instead of identical.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence

from loguru import logger

from colorfit.services.colors.model import Color
from .catalog import get_wardrobe_metadata
from .items import Item, ItemRole

# Colors above this chroma are treated as chromatic
CHROMATIC_THRESHOLD = 12.0

_INSTANCE_SUFFIX_RE = re.compile(r"\s+\d+$")


@dataclass
class _LaneSlot:
    index: int
    target_lightness: float
    range_width: float


def base_name(name: str) -> str:
    """Garment type name with any trailing instance number stripped."""
    return _INSTANCE_SUFFIX_RE.sub("", name)


def _build_lanes(items: Sequence[Item]):
    totals = Counter(base_name(item.name) for item in items if not item.is_assigned)
    seen: Counter = Counter()
    foundation: List[_LaneSlot] = []
    accent: List[_LaneSlot] = []

    for idx, item in enumerate(items):
        if item.is_assigned:
            continue
        garment = base_name(item.name)
        count = totals[garment]
        instance = seen[garment]
        seen[garment] += 1

        meta = get_wardrobe_metadata(garment)
        if count > 1:
            target = meta.lightness_range[0] + (instance / (count - 1)) * meta.lightness_width
        else:
            target = meta.lightness_mid

        slot = _LaneSlot(idx, target, meta.lightness_width)
        if meta.role == ItemRole.FOUNDATION:
            foundation.append(slot)
        else:
            accent.append(slot)

    # Most constrained accent items pick first
    accent.sort(key=lambda slot: slot.range_width)
    return foundation, accent


def select_diverse_indices(chromatic: Sequence[Color], picks: int) -> List[int]:
    """
    Greedy max-min CIEDE2000 selection, as positions into `chromatic`.

    The first (most chromatic) color is taken as is; each later pick is the
    remaining color farthest from everything already chosen. Positions keep
    repeated palette entries apart even when they are the same object.
    """
    remaining = list(range(len(chromatic)))
    chosen: List[int] = []
    while remaining and len(chosen) < picks:
        if not chosen:
            chosen.append(remaining.pop(0))
            continue
        best_pos, best_dist = 0, -1.0
        for pos, j in enumerate(remaining):
            nearest = min(chromatic[j].perceptual_distance(chromatic[k]) for k in chosen)
            if nearest > best_dist:
                best_pos, best_dist = pos, nearest
        chosen.append(remaining.pop(best_pos))
    return chosen


def select_diverse(chromatic: Sequence[Color], picks: int) -> List[Color]:
    """Greedy max-min CIEDE2000 selection of up to `picks` colors."""
    return [chromatic[j] for j in select_diverse_indices(chromatic, picks)]


def _match_by_target(result: List[Item], lane: Sequence[_LaneSlot],
                     colors: Sequence[Color], deplete: bool) -> None:
    """
    Give each lane slot the pool color whose lightness is nearest its target.

    With `deplete`, a picked color leaves the pool so two garments never match.
    Without it, slots pick independently (matching belt and boots is normal).
    """
    pool = [(color, color.l) for color in colors]
    for slot in lane:
        if not pool:
            break
        best_idx, best_dist = 0, float("inf")
        for j, (_, lightness) in enumerate(pool):
            dist = abs(lightness - slot.target_lightness)
            if dist < best_dist:
                best_idx, best_dist = j, dist
        result[slot.index] = result[slot.index].with_color(pool[best_idx][0])
        if deplete:
            pool.pop(best_idx)


def auto_fill_wardrobe(items: Sequence[Item], palette: Sequence[Color]) -> List[Item]:
    """
    Assign palette colors to unassigned garments.

    Args:
        items: Garment items; assigned items are left untouched
        palette: Candidate colors

    Returns:
        New list of items. Accent-lane items may stay unassigned when the
        palette has fewer chromatic colors than accent items.
    """
    result = list(items)
    if not palette:
        return result

    foundation, accent = _build_lanes(result)

    chromatic = sorted(
        (c for c in palette if c.chroma > CHROMATIC_THRESHOLD),
        key=lambda c: -c.chroma,
    )
    neutrals = [c for c in palette if c.chroma <= CHROMATIC_THRESHOLD]

    chosen = select_diverse_indices(chromatic, len(accent))
    accent_colors = [chromatic[j] for j in chosen]
    leftovers = sorted(
        (c for j, c in enumerate(chromatic) if j not in chosen),
        key=lambda c: c.chroma,
    )
    needed = max(0, len(foundation) - len(neutrals))
    foundation_colors = neutrals + leftovers[:needed]

    if not accent_colors:
        _match_by_target(result, foundation + accent, palette, deplete=False)
    elif not foundation_colors:
        _match_by_target(result, foundation + accent, palette, deplete=True)
    else:
        _match_by_target(result, accent, accent_colors, deplete=True)
        _match_by_target(result, foundation, foundation_colors, deplete=False)

    logger.debug(
        f"Wardrobe fill: {len(foundation)} foundation, {len(accent)} accent, "
        f"{len(accent_colors)} accent colors, {len(foundation_colors)} foundation colors"
    )
    return result
