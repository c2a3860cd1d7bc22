"""
Unit tests for picker candidate tiering.
"""

from colorfit.services.cohesion.candidates import (
    DEFAULT_CANDIDATE_WEIGHT,
    FitTier,
    candidate_grid,
    classify_tier,
    score_candidates,
)
from colorfit.services.cohesion.scorer import FillAlgorithm, compute_cohesion_score
from colorfit.services.colors.model import Color


class TestCandidateGrid:
    def test_grid_size_before_dedupe(self):
        # 12 hues x 3 lightness x 2 chroma + 6 neutrals
        assert len(candidate_grid()) == 12 * 3 * 2 + 6

    def test_tiers(self):
        assert classify_tier(90, 90) == FitTier.GREAT
        assert classify_tier(85, 90) == FitTier.GREAT
        assert classify_tier(84, 90) == FitTier.OK
        assert classify_tier(70, 90) == FitTier.OK
        assert classify_tier(69, 90) == FitTier.AVOID


class TestScoreCandidates:
    def test_palette_included_and_flagged(self, spread_palette):
        ranked = score_candidates(spread_palette, [], FillAlgorithm.SURFACE_AREA)
        in_palette = {c.color.to_hex() for c in ranked if c.in_palette}
        assert in_palette == {c.to_hex() for c in spread_palette}

    def test_no_duplicate_hexes(self, spread_palette):
        ranked = score_candidates(spread_palette, spread_palette[:2], FillAlgorithm.SURFACE_AREA)
        hexes = [c.color.to_hex() for c in ranked]
        assert len(hexes) == len(set(hexes))

    def test_empty_room_everything_great(self, spread_palette):
        ranked = score_candidates(spread_palette, [], FillAlgorithm.SURFACE_AREA)
        assert all(c.score == 100 and c.tier == FitTier.GREAT for c in ranked)
        # Stable sort keeps palette first
        assert ranked[0].color.to_hex() == spread_palette[0].to_hex()

    def test_sorted_descending(self, spread_palette):
        ranked = score_candidates(spread_palette, spread_palette[:3], FillAlgorithm.TONAL_GRADIENT)
        scores = [c.score for c in ranked]
        assert scores == sorted(scores, reverse=True)
        assert ranked[0].tier == FitTier.GREAT

    def test_candidate_weight_defaults_to_two(self, spread_palette):
        others = spread_palette[:2]
        ranked = score_candidates(spread_palette, others, FillAlgorithm.SURFACE_AREA, other_weights=[10, 5])
        top = ranked[0]
        expected = compute_cohesion_score(
            others + [top.color], FillAlgorithm.SURFACE_AREA, spread_palette,
            [10, 5, DEFAULT_CANDIDATE_WEIGHT],
        )
        assert top.score == expected

    def test_to_dict(self):
        palette = [Color.from_hex("#9CAF88")]
        entry = score_candidates(palette, [])[0].to_dict()
        assert entry == {"hex": "#9CAF88", "score": 100, "tier": "great", "in_palette": True}
