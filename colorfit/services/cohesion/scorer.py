"""
ColorFit Cohesion Scorer

Maps a set of colors to a 0-100 cohesion score built from three independent
sub-scores:

- hue cohesion: how few hue families are in play, or, when a reference
  palette is known, how closely each hue sits to one of the palette's families
- saturation coherence: how consistent chroma is across the set
- lightness reasonableness: whether the tonal range is neither flat nor full
  of unbridged holes

Sub-scores are blended with per-algorithm weights. Optional per-color weights
repeat each color round(weight) times so large surfaces dominate the statistics.
"""

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, List, Optional, Sequence

import numpy as np

from colorfit.services.colors.model import Color, hue_distance


class FillAlgorithm(str, Enum):
    """Named weighting presets for the cohesion score."""
    SURFACE_AREA = "surface-area"
    TONAL_GRADIENT = "tonal-gradient"
    ANCHOR_PIECE = "anchor-piece"
    MINIMAL_PALETTE = "minimal-palette"


FILL_LABELS = {
    FillAlgorithm.SURFACE_AREA: "Surface Area",
    FillAlgorithm.TONAL_GRADIENT: "Tonal Gradient",
    FillAlgorithm.ANCHOR_PIECE: "Anchor Piece",
    FillAlgorithm.MINIMAL_PALETTE: "Minimal Palette",
}

FILL_DESCRIPTIONS = {
    FillAlgorithm.SURFACE_AREA: "Balanced distribution based on item visual weight.",
    FillAlgorithm.TONAL_GRADIENT: "Strong hue cohesion, gentle lightness variation.",
    FillAlgorithm.ANCHOR_PIECE: "Tight cohesion with room for one accent.",
    FillAlgorithm.MINIMAL_PALETTE: "Fewest distinct colors, maximum cohesion.",
}


@dataclass(frozen=True)
class CohesionWeights:
    """Blend weights for the three sub-scores (sum to 1.0)."""
    hue_cohesion: float
    saturation_coherence: float
    lightness_reasonableness: float


ALGORITHM_WEIGHTS: Dict[FillAlgorithm, CohesionWeights] = {
    FillAlgorithm.SURFACE_AREA: CohesionWeights(0.45, 0.25, 0.30),
    FillAlgorithm.TONAL_GRADIENT: CohesionWeights(0.55, 0.20, 0.25),
    FillAlgorithm.ANCHOR_PIECE: CohesionWeights(0.40, 0.30, 0.30),
    FillAlgorithm.MINIMAL_PALETTE: CohesionWeights(0.50, 0.30, 0.20),
}

# Colors at or below this chroma carry no hue signal
NEUTRAL_CHROMA_THRESHOLD = 8.0

# Greedy hue clustering thresholds (degrees)
REFERENCE_CLUSTER_THRESHOLD = 45.0
SELF_CLUSTER_THRESHOLD = 40.0

# Reference fit decays 2 points per degree (0 past 50°)
REFERENCE_FIT_SLOPE = 2.0

# Saturation coherence
SATURATION_FLAT_STD = 5.0
SATURATION_INTERCEPT = 105.0
SATURATION_SLOPE = 1.8

# Lightness reasonableness
MIN_LIGHTNESS_RANGE = 15.0
FLAT_RANGE_PENALTY = 3.0
MAX_LIGHTNESS_GAP = 20.0
GAP_PENALTY = 1.2
GAP_UNEVENNESS_PENALTY = 0.4


def _clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def expand_by_weights(colors: Sequence[Color], weights: Optional[Sequence[float]] = None) -> List[Color]:
    """
    Repeat each color max(1, round(weight)) times.

    Weights are ignored unless there is exactly one per color.
    """
    if not weights or len(weights) != len(colors):
        return list(colors)
    expanded = []
    for color, weight in zip(colors, weights):
        # Half-up rounding (2.5 -> 3)
        repetitions = max(1, int(math.floor(weight + 0.5)))
        expanded.extend([color] * repetitions)
    return expanded


def circular_mean(hues: Sequence[float]) -> float:
    """Mean direction of a set of hue angles in degrees [0, 360)."""
    radians = np.radians(np.asarray(hues, dtype=float))
    angle = math.degrees(math.atan2(float(np.mean(np.sin(radians))), float(np.mean(np.cos(radians)))))
    return angle % 360.0


def cluster_hues(hues: Sequence[float], threshold: float) -> List[List[float]]:
    """
    Greedy hue clustering.

    Each hue joins the first cluster whose running circular-mean center is
    within `threshold` degrees, otherwise it starts a new cluster.
    """
    clusters: List[List[float]] = []
    centers: List[float] = []
    for h in hues:
        for idx, center in enumerate(centers):
            if hue_distance(h, center) < threshold:
                clusters[idx].append(h)
                centers[idx] = circular_mean(clusters[idx])
                break
        else:
            clusters.append([h])
            centers.append(h)
    return clusters


def chromatic_hues(colors: Sequence[Color]) -> List[float]:
    """Hues of colors whose chroma exceeds the neutral threshold."""
    return [c.hue for c in colors if c.chroma > NEUTRAL_CHROMA_THRESHOLD]


def palette_hue_centers(palette: Optional[Sequence[Color]]) -> List[float]:
    """Circular-mean centers of the reference palette's hue families."""
    if not palette:
        return []
    hues = chromatic_hues(palette)
    if not hues:
        return []
    return [circular_mean(cluster) for cluster in cluster_hues(hues, REFERENCE_CLUSTER_THRESHOLD)]


def cluster_count_score(n_clusters: int) -> float:
    """1-2 families read as intentional; each extra family costs steeply."""
    if n_clusters <= 2:
        return 100.0
    if n_clusters == 3:
        return 75.0
    if n_clusters == 4:
        return 50.0
    return max(0.0, 40.0 - (n_clusters - 4) * 15.0)


def hue_cohesion_score(colors: Sequence[Color], reference_centers: Sequence[float] = ()) -> float:
    """
    Hue cohesion sub-score [0, 100].

    Args:
        colors: (Weight-expanded) colors being scored
        reference_centers: Hue family centers of the reference palette, if any
    """
    hues = chromatic_hues(colors)
    if len(hues) <= 1:
        return 100.0

    if reference_centers:
        fits = []
        for h in hues:
            nearest = min(hue_distance(h, center) for center in reference_centers)
            fits.append(max(0.0, 100.0 - nearest * REFERENCE_FIT_SLOPE))
        return float(np.mean(fits))

    return cluster_count_score(len(cluster_hues(hues, SELF_CLUSTER_THRESHOLD)))


def saturation_coherence_score(colors: Sequence[Color]) -> float:
    """Saturation coherence sub-score [0, 100] from the population std of chroma."""
    chromas = np.array([c.chroma for c in colors], dtype=float)
    std_dev = float(np.std(chromas))
    if std_dev <= SATURATION_FLAT_STD:
        return 100.0
    return _clamp_score(SATURATION_INTERCEPT - std_dev * SATURATION_SLOPE)


def lightness_reasonableness_score(colors: Sequence[Color]) -> float:
    """
    Lightness reasonableness sub-score [0, 100].

    A wide total range is never penalized: light walls over dark floors is
    the normal case. Flat sets, unbridged gaps and uneven steps are.
    """
    lightness = np.sort(np.array([c.l for c in colors], dtype=float))
    score = 100.0

    tonal_range = float(lightness[-1] - lightness[0])
    if tonal_range < MIN_LIGHTNESS_RANGE:
        score -= (MIN_LIGHTNESS_RANGE - tonal_range) * FLAT_RANGE_PENALTY

    gaps = np.diff(lightness)
    for gap in gaps:
        if gap > MAX_LIGHTNESS_GAP:
            score -= (float(gap) - MAX_LIGHTNESS_GAP) * GAP_PENALTY

    if len(gaps) > 1:
        score -= float(np.std(gaps)) * GAP_UNEVENNESS_PENALTY

    return _clamp_score(score)


@dataclass
class CohesionBreakdown:
    """Sub-scores, the weights used, and the rounded total."""
    hue_cohesion: float
    saturation_coherence: float
    lightness_reasonableness: float
    weights: CohesionWeights
    score: int

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["hue_cohesion"] = round(self.hue_cohesion, 2)
        data["saturation_coherence"] = round(self.saturation_coherence, 2)
        data["lightness_reasonableness"] = round(self.lightness_reasonableness, 2)
        return data


def cohesion_breakdown(
    colors: Sequence[Color],
    algorithm: FillAlgorithm = FillAlgorithm.SURFACE_AREA,
    reference_palette: Optional[Sequence[Color]] = None,
    weights: Optional[Sequence[float]] = None,
    reference_centers: Optional[Sequence[float]] = None,
) -> CohesionBreakdown:
    """
    Compute every sub-score and the weighted total for a color set.

    `reference_centers` may carry precomputed `palette_hue_centers(reference_palette)`
    for callers that score many sets against one palette.
    """
    blend = ALGORITHM_WEIGHTS[FillAlgorithm(algorithm)]
    if len(colors) < 2:
        return CohesionBreakdown(100.0, 100.0, 100.0, blend, 100)

    expanded = expand_by_weights(colors, weights)
    if reference_centers is None:
        reference_centers = palette_hue_centers(reference_palette)

    hue = hue_cohesion_score(expanded, reference_centers)
    sat = saturation_coherence_score(expanded)
    light = lightness_reasonableness_score(expanded)

    total = (
        hue * blend.hue_cohesion
        + sat * blend.saturation_coherence
        + light * blend.lightness_reasonableness
    )
    # Half-up rounding to an integer score
    score = int(max(0, min(100, math.floor(total + 0.5))))
    return CohesionBreakdown(hue, sat, light, blend, score)


def compute_cohesion_score(
    colors: Sequence[Color],
    algorithm: FillAlgorithm = FillAlgorithm.SURFACE_AREA,
    reference_palette: Optional[Sequence[Color]] = None,
    weights: Optional[Sequence[float]] = None,
    reference_centers: Optional[Sequence[float]] = None,
) -> int:
    """
    Cohesion score of a color set, an integer in [0, 100].

    Args:
        colors: Colors to score (fewer than 2 always scores 100)
        algorithm: Weighting preset
        reference_palette: Source palette whose hue families define "allowed" hues
        weights: Optional per-color visual weights (1-10 scale)
        reference_centers: Precomputed hue centers of `reference_palette`

    Returns:
        Rounded cohesion score
    """
    return cohesion_breakdown(colors, algorithm, reference_palette, weights, reference_centers).score


def item_score_delta(
    color: Color,
    all_colors: Sequence[Color],
    algorithm: FillAlgorithm = FillAlgorithm.SURFACE_AREA,
    reference_palette: Optional[Sequence[Color]] = None,
    all_weights: Optional[Sequence[float]] = None,
) -> int:
    """
    How much one color helps (+) or hurts (-) the set's cohesion.

    Every occurrence of the color's hex is removed along with its weight.
    Returns 0 when fewer than 2 colors would remain.
    """
    target_hex = color.to_hex()
    hexes = [c.to_hex() for c in all_colors]
    without = [c for c, h in zip(all_colors, hexes) if h != target_hex]
    if len(without) < 2:
        return 0

    weights_without = None
    if all_weights is not None and len(all_weights) == len(all_colors):
        weights_without = [w for w, h in zip(all_weights, hexes) if h != target_hex]

    return (
        compute_cohesion_score(all_colors, algorithm, reference_palette, all_weights)
        - compute_cohesion_score(without, algorithm, reference_palette, weights_without)
    )
