"""
ColorFit Cohesion Module

Continuous cohesion scoring for sets of colors and picker candidate tiers.
"""

from .scorer import (
    ALGORITHM_WEIGHTS,
    FILL_DESCRIPTIONS,
    FILL_LABELS,
    CohesionBreakdown,
    CohesionWeights,
    FillAlgorithm,
    cohesion_breakdown,
    compute_cohesion_score,
    item_score_delta,
)
from .candidates import FitTier, ScoredCandidate, score_candidates

__all__ = [
    "ALGORITHM_WEIGHTS",
    "FILL_DESCRIPTIONS",
    "FILL_LABELS",
    "CohesionBreakdown",
    "CohesionWeights",
    "FillAlgorithm",
    "FitTier",
    "ScoredCandidate",
    "cohesion_breakdown",
    "compute_cohesion_score",
    "item_score_delta",
    "score_candidates",
]
