"""
Unit tests for the cohesion scorer.
"""

import pytest

from colorfit.services.cohesion.scorer import (
    ALGORITHM_WEIGHTS,
    FillAlgorithm,
    circular_mean,
    cluster_count_score,
    cluster_hues,
    cohesion_breakdown,
    compute_cohesion_score,
    expand_by_weights,
    hue_cohesion_score,
    item_score_delta,
    lightness_reasonableness_score,
    palette_hue_centers,
    saturation_coherence_score,
)
from colorfit.services.colors.model import Color, hue_distance


def _lch(*triples):
    return [Color.from_lch(l, c, h) for l, c, h in triples]


class TestScoreBounds:
    """Scores are integers in [0, 100]."""

    def test_fewer_than_two_colors_score_100(self):
        assert compute_cohesion_score([]) == 100
        assert compute_cohesion_score([Color.from_hex("#FF0000")]) == 100

    @pytest.mark.parametrize("algorithm", list(FillAlgorithm))
    def test_bounds_on_chaotic_set(self, algorithm):
        colors = _lch((20, 60, 0), (90, 5, 60), (50, 80, 120), (30, 40, 200), (70, 90, 280), (95, 0, 0))
        score = compute_cohesion_score(colors, algorithm)
        assert isinstance(score, int)
        assert 0 <= score <= 100

    def test_bounds_with_reference_and_weights(self, spread_palette):
        score = compute_cohesion_score(
            spread_palette[:4], FillAlgorithm.ANCHOR_PIECE, spread_palette, [10, 1, 5, 2]
        )
        assert 0 <= score <= 100

    def test_algorithm_weights_sum_to_one(self):
        for weights in ALGORITHM_WEIGHTS.values():
            total = weights.hue_cohesion + weights.saturation_coherence + weights.lightness_reasonableness
            assert total == pytest.approx(1.0)

    def test_algorithm_accepts_string(self):
        colors = _lch((40, 20, 60), (80, 10, 70))
        assert compute_cohesion_score(colors, "tonal-gradient") == compute_cohesion_score(
            colors, FillAlgorithm.TONAL_GRADIENT
        )


class TestLightness:
    """Lightness reasonableness sub-score."""

    def test_flat_set_penalized(self):
        """Collapsing all lightness to one value strictly lowers the sub-score."""
        spread = _lch((30, 20, 60), (50, 20, 70), (70, 20, 80))
        flat = _lch((50, 20, 60), (50, 20, 70), (50, 20, 80))
        assert lightness_reasonableness_score(flat) < lightness_reasonableness_score(spread)

    def test_even_steps_score_full(self):
        assert lightness_reasonableness_score(_lch((30, 0, 0), (45, 0, 0), (60, 0, 0))) == pytest.approx(100, abs=1)

    def test_large_gap_penalized(self):
        bridged = _lch((20, 0, 0), (40, 0, 0), (60, 0, 0), (80, 0, 0))
        holey = _lch((20, 0, 0), (22, 0, 0), (78, 0, 0), (80, 0, 0))
        assert lightness_reasonableness_score(holey) < lightness_reasonableness_score(bridged)


class TestSaturation:
    def test_consistent_chroma_scores_full(self):
        assert saturation_coherence_score(_lch((50, 20, 0), (60, 22, 90), (40, 18, 200))) == 100

    def test_mixed_chroma_penalized(self):
        assert saturation_coherence_score(_lch((50, 2, 0), (60, 60, 90))) < 60


class TestHueCohesion:
    def test_neutrals_carry_no_hue(self):
        assert hue_cohesion_score(_lch((30, 2, 0), (60, 3, 120), (90, 1, 240))) == 100

    def test_cluster_count_steps(self):
        assert cluster_count_score(1) == 100
        assert cluster_count_score(2) == 100
        assert cluster_count_score(3) == 75
        assert cluster_count_score(4) == 50
        assert cluster_count_score(5) == 25
        assert cluster_count_score(8) == 0

    def test_self_clustering_counts_families(self):
        colors = _lch((50, 30, 10), (50, 30, 100), (50, 30, 190), (50, 30, 280))
        assert hue_cohesion_score(colors) == 50

    def test_reference_fit_rewards_palette_hues(self):
        palette = _lch((50, 30, 40), (60, 30, 140))
        centers = palette_hue_centers(palette)
        on_palette = _lch((50, 30, 40), (60, 30, 140))
        off_palette = _lch((50, 30, 260), (60, 30, 320))
        assert hue_cohesion_score(on_palette, centers) > hue_cohesion_score(off_palette, centers)

    @pytest.mark.parametrize("algorithm", list(FillAlgorithm))
    def test_precomputed_centers_match_palette(self, algorithm):
        palette = _lch((50, 30, 40), (60, 30, 140), (70, 5, 0), (40, 45, 250))
        colors = _lch((55, 25, 50), (45, 35, 150), (80, 10, 300))
        weights = [10, 5, 2]
        expected = compute_cohesion_score(colors, algorithm, palette, weights)
        centers = palette_hue_centers(palette)
        assert compute_cohesion_score(colors, algorithm, palette, weights, centers) == expected
        assert cohesion_breakdown(colors, algorithm, palette, weights, centers).score == expected

    def test_clusters_wrap_around_zero(self):
        assert len(cluster_hues([355, 5, 15], 40)) == 1

    def test_circular_mean_wraps(self):
        assert hue_distance(circular_mean([350, 10]), 0) < 1e-6


class TestWeights:
    def test_expand_by_weights(self):
        a, b = Color.from_hex("#FF0000"), Color.from_hex("#0000FF")
        assert expand_by_weights([a, b], [3, 1]) == [a, a, a, b]

    def test_half_rounds_up(self):
        a = Color.from_hex("#FF0000")
        assert len(expand_by_weights([a], [2.5])) == 3

    def test_mismatched_weights_ignored(self):
        a, b = Color.from_hex("#FF0000"), Color.from_hex("#0000FF")
        assert expand_by_weights([a, b], [5]) == [a, b]

    def test_weights_shift_the_score(self):
        colors = _lch((40, 20, 60), (45, 20, 65), (50, 60, 250))
        light = compute_cohesion_score(colors, weights=[10, 10, 1])
        heavy_outlier = compute_cohesion_score(colors, weights=[1, 1, 10])
        assert light != heavy_outlier


class TestBreakdown:
    def test_breakdown_total_matches_score(self):
        colors = _lch((30, 20, 60), (60, 15, 80), (85, 5, 90))
        breakdown = cohesion_breakdown(colors)
        assert breakdown.score == compute_cohesion_score(colors)
        data = breakdown.to_dict()
        assert set(data) == {"hue_cohesion", "saturation_coherence", "lightness_reasonableness", "weights", "score"}


class TestItemScoreDelta:
    def test_outlier_hurts(self):
        cohesive = _lch((30, 20, 60), (50, 20, 65), (70, 20, 70))
        outlier = Color.from_lch(50, 80, 250)
        assert item_score_delta(outlier, cohesive + [outlier]) < 0

    def test_fewer_than_two_remaining_is_zero(self):
        a, b = Color.from_hex("#FF0000"), Color.from_hex("#0000FF")
        assert item_score_delta(a, [a, b]) == 0

    def test_all_occurrences_removed(self):
        a = Color.from_lch(50, 60, 250)
        rest = _lch((30, 20, 60), (50, 20, 65), (70, 20, 70))
        delta = item_score_delta(a, [a] + rest + [a])
        assert delta == compute_cohesion_score([a] + rest + [a]) - compute_cohesion_score(rest)
