"""
Candidate Tiering for Color Pickers

Sweeps a coarse LCh grid plus the active palette, scores each candidate by the
cohesion of (other assigned colors + candidate), and buckets the results into
great / ok / avoid relative to the best achievable score for the slot.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from loguru import logger

from colorfit.services.colors.model import Color, InvalidColorError
from .scorer import FillAlgorithm, compute_cohesion_score

GRID_HUES = [0, 30, 60, 90, 120, 150, 180, 210, 240, 270, 300, 330]
GRID_LIGHTNESS = [35, 55, 80]
GRID_CHROMA = [15, 45]
NEUTRAL_LIGHTNESS = [25, 40, 55, 70, 85, 95]
NEUTRAL_CHROMA = 3

GREAT_MARGIN = 5
OK_MARGIN = 20

# Weight assumed for the slot being filled when other weights are supplied
DEFAULT_CANDIDATE_WEIGHT = 2.0


class FitTier(str, Enum):
    """Picker suggestion tiers."""
    GREAT = "great"
    OK = "ok"
    AVOID = "avoid"


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate color with its cohesion score and tier."""
    color: Color
    score: int
    tier: FitTier
    in_palette: bool

    def to_dict(self) -> dict:
        return {
            "hex": self.color.to_hex(),
            "score": self.score,
            "tier": self.tier.value,
            "in_palette": self.in_palette,
        }


def candidate_grid() -> List[Color]:
    """Coarse cylindrical sweep: 12 hues x 3 lightness x 2 chroma, plus neutrals."""
    generated = []
    coordinates = [(l, c, h) for h in GRID_HUES for l in GRID_LIGHTNESS for c in GRID_CHROMA]
    coordinates += [(l, NEUTRAL_CHROMA, 0) for l in NEUTRAL_LIGHTNESS]
    for l, c, h in coordinates:
        try:
            generated.append(Color.from_lch(l, c, h))
        except InvalidColorError as e:
            logger.debug(f"Skipping grid candidate L={l} C={c} H={h}: {e}")
    return generated


def classify_tier(score: int, best_score: int) -> FitTier:
    """Tier relative to the best score among evaluated candidates."""
    if score >= best_score - GREAT_MARGIN:
        return FitTier.GREAT
    if score >= best_score - OK_MARGIN:
        return FitTier.OK
    return FitTier.AVOID


def score_candidates(
    palette: Sequence[Color],
    other_colors: Sequence[Color],
    algorithm: FillAlgorithm = FillAlgorithm.SURFACE_AREA,
    other_weights: Optional[Sequence[float]] = None,
    candidate_weight: Optional[float] = None,
) -> List[ScoredCandidate]:
    """
    Rank candidate colors for one slot.

    Args:
        palette: Active palette (always included, listed first before dedupe)
        other_colors: Colors already assigned to the other items
        algorithm: Cohesion weighting preset
        other_weights: Visual weights of the other items, if known
        candidate_weight: Visual weight of the slot being filled

    Returns:
        Candidates sorted by score descending, each with its tier
    """
    palette_hexes = {c.to_hex() for c in palette}

    pool: List[Color] = list(palette)
    seen = set(palette_hexes)
    for color in candidate_grid():
        hex_value = color.to_hex()
        if hex_value not in seen:
            seen.add(hex_value)
            pool.append(color)

    scored = []
    for candidate in pool:
        if not other_colors:
            score = 100
        else:
            test_colors = list(other_colors) + [candidate]
            test_weights = None
            if other_weights is not None:
                weight = DEFAULT_CANDIDATE_WEIGHT if candidate_weight is None else candidate_weight
                test_weights = list(other_weights) + [weight]
            score = compute_cohesion_score(test_colors, algorithm, palette, test_weights)
        scored.append((candidate, score))

    # Stable: equal scores keep palette-first order
    scored.sort(key=lambda pair: -pair[1])
    best = scored[0][1] if scored else 0

    return [
        ScoredCandidate(
            color=candidate,
            score=score,
            tier=classify_tier(score, best),
            in_palette=candidate.to_hex() in palette_hexes,
        )
        for candidate, score in scored
    ]
