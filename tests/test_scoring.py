"""
Tests for songfinder/core/scoring.py.

Covers the weighted feature distance, per-dimension caps, the
recommendation reason sentence and candidate re-ranking.
"""

from dataclasses import replace

import pytest

from songfinder.core.features import DEFAULT_FEATURES
from songfinder.core.scoring import (
    DISTANCE_DIMENSIONS,
    RERANK_WEIGHTS,
    RecommendationCandidate,
    calculate_distance,
    generate_recommendation_reason,
    rank_candidates,
)


def _candidate(name: str, **features) -> RecommendationCandidate:
    return RecommendationCandidate(name=name, artist="Artist", features=replace(DEFAULT_FEATURES, **features))


class TestCalculateDistance:
    """Weighted distance between two feature vectors."""

    def test_identical_is_zero(self) -> None:
        result = calculate_distance(DEFAULT_FEATURES, DEFAULT_FEATURES)
        assert result.total == 0.0
        assert all(v == 0.0 for v in result.dimension_diffs.values())

    def test_symmetric(self) -> None:
        a = replace(DEFAULT_FEATURES, energy=0.9, tempo=150)
        b = replace(DEFAULT_FEATURES, valence=0.1, loudness=-20)
        assert calculate_distance(a, b).total == pytest.approx(calculate_distance(b, a).total)

    def test_unit_feature_diff_is_weighted(self) -> None:
        other = replace(DEFAULT_FEATURES, energy=0.9)
        result = calculate_distance(DEFAULT_FEATURES, other)
        assert result.dimension_diffs["energy"] == pytest.approx(0.4)
        assert result.total == pytest.approx(0.4 * RERANK_WEIGHTS["energy"])

    def test_tempo_diff_capped(self) -> None:
        a = replace(DEFAULT_FEATURES, tempo=100)
        b = replace(DEFAULT_FEATURES, tempo=220)
        result = calculate_distance(a, b)
        assert result.dimension_diffs["tempo"] == pytest.approx(1.0)
        assert result.total == pytest.approx(RERANK_WEIGHTS["tempo"])

    def test_tempo_diff_scaled(self) -> None:
        a = replace(DEFAULT_FEATURES, tempo=120)
        b = replace(DEFAULT_FEATURES, tempo=150)
        assert calculate_distance(a, b).dimension_diffs["tempo"] == pytest.approx(0.5)

    def test_loudness_diff_capped(self) -> None:
        a = replace(DEFAULT_FEATURES, loudness=-40)
        b = replace(DEFAULT_FEATURES, loudness=-6)
        result = calculate_distance(a, b)
        assert result.dimension_diffs["loudness"] == pytest.approx(1.0)
        assert result.total == pytest.approx(RERANK_WEIGHTS["loudness"])

    def test_all_dimensions_reported(self) -> None:
        result = calculate_distance(DEFAULT_FEATURES, DEFAULT_FEATURES)
        assert tuple(result.dimension_diffs) == DISTANCE_DIMENSIONS

    def test_ranked_totals_match_single(self) -> None:
        candidates = [_candidate("A", energy=0.1), _candidate("B", tempo=200)]
        for candidate, result in rank_candidates(DEFAULT_FEATURES, candidates):
            assert result.total == pytest.approx(calculate_distance(DEFAULT_FEATURES, candidate.features).total)


class TestRecommendationReason:
    """Closest-two-dimensions sentence."""

    def test_ties_follow_dimension_order(self) -> None:
        diffs = {d: 0.0 for d in DISTANCE_DIMENSIONS}
        assert generate_recommendation_reason(diffs) == "Matches closely in groove and energy level."

    def test_picks_smallest(self) -> None:
        diffs = {d: 0.5 for d in DISTANCE_DIMENSIONS}
        diffs["tempo"] = 0.0
        diffs["valence"] = 0.1
        assert generate_recommendation_reason(diffs) == "Matches closely in tempo and mood."


class TestRankCandidates:
    """Distance re-ranking."""

    def test_sorted_ascending(self) -> None:
        far = _candidate("far", energy=1.0, danceability=1.0)
        near = _candidate("near", energy=0.55)
        same = _candidate("same")
        ranked = rank_candidates(DEFAULT_FEATURES, [far, near, same])
        assert [c.name for c, _ in ranked] == ["same", "near", "far"]
        totals = [d.total for _, d in ranked]
        assert totals == sorted(totals)

    def test_limit(self) -> None:
        candidates = [_candidate(f"c{i}", energy=i / 10) for i in range(10)]
        assert len(rank_candidates(DEFAULT_FEATURES, candidates, limit=3)) == 3

    def test_ties_keep_input_order(self) -> None:
        candidates = [_candidate("first"), _candidate("second"), _candidate("third")]
        ranked = rank_candidates(DEFAULT_FEATURES, candidates)
        assert [c.name for c, _ in ranked] == ["first", "second", "third"]

    def test_candidates_without_features_skipped(self) -> None:
        bare = RecommendationCandidate(name="bare", artist="Artist")
        ranked = rank_candidates(DEFAULT_FEATURES, [bare, _candidate("full")])
        assert [c.name for c, _ in ranked] == ["full"]

    def test_empty(self) -> None:
        assert rank_candidates(DEFAULT_FEATURES, []) == []
