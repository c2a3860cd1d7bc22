"""
ColorFit Palette Engine: Delta-E Smart Generation

Samples a Lab grid, ranks each point by how closely its CIEDE2000 distance to
every base color matches a random target distance, and greedily keeps
candidates that are mutually well separated.
"""

from typing import List, Sequence, Tuple

import numpy as np
from loguru import logger

from ..model import Color, InvalidColorError

# Lab sampling grid (inclusive bounds)
GRID_L = (15, 90, 8)
GRID_AB = (-60, 60, 12)

# Per-call random ranges
TARGET_DISTANCE_RANGE = (25.0, 45.0)
MIN_MUTUAL_DISTANCE_RANGE = (10.0, 20.0)
TIE_BREAK_NOISE = 5.0


def lab_grid() -> List[Tuple[float, float, float]]:
    """Enumerate the (L, a, b) sampling grid in L-major order."""
    l_start, l_stop, l_step = GRID_L
    ab_start, ab_stop, ab_step = GRID_AB
    ls = np.arange(l_start, l_stop + 1, l_step)
    abs_ = np.arange(ab_start, ab_stop + 1, ab_step)
    return [(float(l), float(a), float(b)) for l in ls for a in abs_ for b in abs_]


def generate_delta_e_smart(bases: Sequence[Color], count: int, rng) -> List[Color]:
    """
    Pick up to `count` well-spread colors near a target distance from all bases.

    Args:
        bases: Locked colors the candidates are measured against
        count: Maximum number of colors to return
        rng: Uniform [0, 1) stream for this variation

    Returns:
        Accepted colors in ascending score order (may be fewer than count)
    """
    lo, hi = TARGET_DISTANCE_RANGE
    target = lo + rng() * (hi - lo)

    candidates = []
    skipped = 0
    for l, a, b in lab_grid():
        try:
            color = Color.from_lab(l, a, b)
        except InvalidColorError:
            skipped += 1
            continue
        distances = np.array([color.perceptual_distance(base) for base in bases])
        score = float(np.sum((distances - target) ** 2))
        score += rng() * TIE_BREAK_NOISE
        candidates.append((score, color))

    # Stable sort keeps grid order for exact ties
    candidates.sort(key=lambda pair: pair[0])

    lo, hi = MIN_MUTUAL_DISTANCE_RANGE
    min_mutual = lo + rng() * (hi - lo)

    picked: List[Color] = []
    for _, candidate in candidates:
        if len(picked) >= count:
            break
        if all(candidate.perceptual_distance(p) >= min_mutual for p in picked):
            picked.append(candidate)

    logger.debug(
        f"delta-E smart: target={target:.1f} min_mutual={min_mutual:.1f} "
        f"candidates={len(candidates)} skipped={skipped} picked={len(picked)}"
    )
    return picked
