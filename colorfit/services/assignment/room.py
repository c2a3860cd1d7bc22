"""
Room Auto-Fill

Greedy assignment of palette colors to room items. Heavy items (floors, walls)
are placed first; every later pick is scored against the room built so far.

Each candidate's fitness is the sum of:
1. Lightness fit: is the color's L inside the item's expected range?
2. Role fit: backgrounds want quiet colors, accents want chroma
3. Diversity: unused palette colors get a strong bonus
4. Harmony: 0.3 x cohesion of the room with the candidate added
5. Tendency: small per-item preference used to break near-ties

A greedy pass is order-sensitive. The default fill runs the weight-first pass,
then also tries item-list order and its reverse, and keeps whichever finished
room is most cohesive. Weight-first wins ties.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from colorfit.services.cohesion.scorer import FillAlgorithm, compute_cohesion_score, palette_hue_centers
from colorfit.services.colors.model import Color
from .catalog import get_room_metadata
from .items import Item, ItemRole, Tendency

# Lightness fit
IN_RANGE_MAX = 30.0
IN_RANGE_FALLOFF = 10.0
OUT_OF_RANGE_SLOPE = 0.8

# Diversity
UNUSED_BONUS = 25.0
USED_ONCE_BONUS = 8.0
REUSE_FLOOR = -10.0
SPREAD_OUT_PENALTY = 10.0

HARMONY_SCALE = 0.3


def lightness_fit(lightness: float, lightness_range: Tuple[float, float]) -> float:
    """Reward closeness to the range midpoint; penalize distance outside the range."""
    low, high = lightness_range
    if low <= lightness <= high:
        half = (high - low) / 2.0 or 1.0
        mid = (low + high) / 2.0
        return IN_RANGE_MAX - abs(lightness - mid) / half * IN_RANGE_FALLOFF
    distance = low - lightness if lightness < low else lightness - high
    return -distance * OUT_OF_RANGE_SLOPE


def role_fit(lightness: float, chroma: float, role: ItemRole) -> float:
    if role == ItemRole.BACKGROUND:
        return (10 if chroma < 10 else 5 if chroma < 20 else -5) + (5 if lightness > 75 else 0)
    if role == ItemRole.GROUND:
        return (8 if lightness < 65 else -5) + (7 if 5 < chroma < 35 else 0)
    if role == ItemRole.ACCENT:
        return 12 if chroma > 20 else 6 if chroma > 10 else 0
    if role == ItemRole.ANCHOR:
        return (5 if 25 < lightness < 80 else 0) + (3 if chroma > 5 else 0)
    if role == ItemRole.NEUTRAL:
        return 10 if chroma < 12 else 3 if chroma < 20 else -8
    return 0


def diversity_bonus(uses: int, palette_size: int, remaining: int) -> float:
    """
    Strong pull toward unused palette colors.

    Reuse is penalized harder when the palette has more colors than there
    are items left to fill.
    """
    if uses == 0:
        bonus = UNUSED_BONUS
    elif uses == 1:
        bonus = USED_ONCE_BONUS
    else:
        bonus = max(REUSE_FLOOR, 5.0 - uses * 5.0)
    if palette_size > remaining and uses > 0:
        bonus -= SPREAD_OUT_PENALTY
    return bonus


def tendency_bonus(color: Color, tendency: Tendency) -> float:
    """Tiebreaker nudges; large enough to matter within ~5 cohesion points."""
    tendency = Tendency(tendency)
    if tendency == Tendency.ANY:
        return 0
    lightness, chroma, hue = color.to_lch()

    if tendency == Tendency.LIGHTER:
        l_bonus = 8 if lightness > 80 else 3 if lightness > 65 else 0 if lightness > 50 else -5
        c_penalty = -4 if chroma > 35 else -1 if chroma > 20 else 0
        return l_bonus + c_penalty
    if tendency == Tendency.DARKER:
        return 4 if lightness < 40 else 1 if lightness < 55 else -3
    if tendency == Tendency.WARMER:
        return 4 if (hue <= 90 or hue >= 300) else -1
    if tendency == Tendency.COOLER:
        return 4 if 150 <= hue <= 270 else -1
    if tendency == Tendency.NEUTRAL:
        c_bonus = 6 if chroma < 8 else 3 if chroma < 15 else -3
        return c_bonus + (1 if lightness > 50 else -1)
    # Bold
    return 4 if chroma > 30 else 1 if chroma > 15 else -2



def item_fitness(
    candidate: Color,
    item: Item,
    room_colors: Sequence[Color],
    room_weights: Sequence[float],
    algorithm: FillAlgorithm,
    palette: Sequence[Color],
    usage: Dict[str, int],
    remaining: int,
    reference_centers: Optional[Sequence[float]] = None,
) -> float:
    """Composite fitness of placing `candidate` on `item` given the room so far."""
    meta = get_room_metadata(item.name)
    lightness, chroma, _ = candidate.to_lch()

    harmony = compute_cohesion_score(
        list(room_colors) + [candidate],
        algorithm,
        palette,
        list(room_weights) + [item.weight],
        reference_centers,
    )

    return (
        lightness_fit(lightness, meta.lightness_range)
        + role_fit(lightness, chroma, meta.role)
        + diversity_bonus(usage.get(candidate.to_hex(), 0), len(palette), remaining)
        + harmony * HARMONY_SCALE
        + tendency_bonus(candidate, item.tendency)
    )


def assigned_cohesion(
    items: Sequence[Item],
    palette: Sequence[Color],
    algorithm: FillAlgorithm = FillAlgorithm.SURFACE_AREA,
    reference_centers: Optional[Sequence[float]] = None,
) -> int:
    """Weighted cohesion of the assigned items' colors against the palette."""
    assigned = [item for item in items if item.is_assigned]
    return compute_cohesion_score(
        [item.color for item in assigned],
        algorithm,
        palette,
        [item.weight for item in assigned],
        reference_centers,
    )


def _processing_order(items: Sequence[Item], order: Optional[Sequence[int]]) -> List[int]:
    """Indices of unassigned items in the order they will be filled."""
    unassigned = [idx for idx, item in enumerate(items) if not item.is_assigned]
    if order is None:
        # Stable: equal weights keep list order
        return sorted(unassigned, key=lambda idx: -items[idx].weight)

    position = {item_id: rank for rank, item_id in enumerate(order)}
    listed = [idx for idx in unassigned if items[idx].id in position]
    listed.sort(key=lambda idx: position[items[idx].id])
    unlisted = [idx for idx in unassigned if items[idx].id not in position]
    return listed + unlisted


def _greedy_pass(
    items: Sequence[Item],
    palette: Sequence[Color],
    algorithm: FillAlgorithm,
    reference_centers: Sequence[float],
    processing: Sequence[int],
) -> List[Item]:
    result = list(items)
    pinned = [item for item in result if item.is_assigned]
    room_colors = [item.color for item in pinned]
    room_weights = [item.weight for item in pinned]

    usage = {color.to_hex(): 0 for color in palette}
    for color in room_colors:
        hex_value = color.to_hex()
        if hex_value in usage:
            usage[hex_value] += 1

    remaining = len(processing)
    for idx in processing:
        item = result[idx]
        best_color = None
        best_score = float("-inf")

        for candidate in palette:
            score = item_fitness(
                candidate, item, room_colors, room_weights,
                algorithm, palette, usage, remaining, reference_centers,
            )
            if score > best_score:
                best_score = score
                best_color = candidate

        if best_color is not None:
            room_colors.append(best_color)
            room_weights.append(item.weight)
            hex_value = best_color.to_hex()
            usage[hex_value] = usage.get(hex_value, 0) + 1
            result[idx] = item.with_color(best_color)
            logger.debug(f"Assigned {hex_value} to '{item.name}' (fitness={best_score:.1f})")

        remaining -= 1

    return result


def auto_fill_room(
    items: Sequence[Item],
    palette: Sequence[Color],
    algorithm: FillAlgorithm = FillAlgorithm.SURFACE_AREA,
    order: Optional[Sequence[int]] = None,
) -> List[Item]:
    """
    Assign a palette color to every unassigned room item.

    Args:
        items: Room items; assigned items are pinned and left untouched
        palette: Candidate colors
        algorithm: Cohesion weighting preset used for the harmony term
        order: Optional explicit processing order as item ids. Unassigned
            items not listed follow in list order. When given, exactly one
            pass runs in that order.

    Returns:
        New list of items (inputs are not mutated)
    """
    result = list(items)
    if not palette:
        return result

    algorithm = FillAlgorithm(algorithm)
    centers = palette_hue_centers(palette)

    if order is not None:
        return _greedy_pass(result, palette, algorithm, centers, _processing_order(result, order))

    best = _greedy_pass(result, palette, algorithm, centers, _processing_order(result, None))
    best_score = assigned_cohesion(best, palette, algorithm, centers)

    list_order = [item.id for item in result if not item.is_assigned]
    for label, alternative in (("list", list_order), ("reverse", list_order[::-1])):
        filled = _greedy_pass(result, palette, algorithm, centers, _processing_order(result, alternative))
        score = assigned_cohesion(filled, palette, algorithm, centers)
        if score > best_score:
            logger.debug(f"Room fill: {label} order beats weight order ({score} > {best_score})")
            best, best_score = filled, score

    return best
