"""
Tests for songfinder/core/features.py.

Covers default vectors, per-feature averaging across matched tag
profiles, range clamping and the confidence levels.
"""

from dataclasses import fields

import pytest

from songfinder.core.features import (
    DEFAULT_FEATURES,
    FEATURE_RANGES,
    TAG_PROFILES,
    estimate_features_from_tags,
    get_confidence_level,
    matched_profile_count,
)


class TestEstimateFeatures:
    """Tag -> FeatureVector estimation."""

    def test_empty_tags_give_defaults(self) -> None:
        assert estimate_features_from_tags([]) == DEFAULT_FEATURES

    def test_unknown_tags_give_defaults(self) -> None:
        assert estimate_features_from_tags(["zzzqqq"]) == DEFAULT_FEATURES

    def test_single_profile_overrides_only_its_features(self) -> None:
        features = estimate_features_from_tags(["metal"])
        assert features.energy == pytest.approx(0.95)
        assert features.tempo == pytest.approx(160)
        assert features.loudness == pytest.approx(-4)
        assert features.danceability == pytest.approx(0.3)
        # untouched features keep their defaults
        assert features.acousticness == DEFAULT_FEATURES.acousticness
        assert features.speechiness == DEFAULT_FEATURES.speechiness
        assert features.key == -1

    def test_matched_profiles_are_averaged(self) -> None:
        features = estimate_features_from_tags(["metal", "chill"])
        assert features.energy == pytest.approx((0.95 + 0.25) / 2)
        assert features.tempo == pytest.approx((160 + 90) / 2)
        assert features.loudness == pytest.approx((-4 + -12) / 2)

    def test_substring_match(self) -> None:
        # "progressive house" contains "house"
        assert estimate_features_from_tags(["progressive house"]).danceability == pytest.approx(0.8)

    def test_raw_tags_are_normalized(self) -> None:
        assert estimate_features_from_tags(["Hip-Hop"]) == estimate_features_from_tags(["hip hop"])

    def test_minor_mode_from_mood(self) -> None:
        assert estimate_features_from_tags(["sad"]).mode == 0

    def test_order_does_not_matter(self) -> None:
        tags = ["jazz", "sad", "live", "acoustic", "rock"]
        assert estimate_features_from_tags(tags) == estimate_features_from_tags(list(reversed(tags)))

    def test_reordered_duplicates_same_features(self) -> None:
        tags = ["trap", "Drill", "hip-hop", "trap"]
        shuffled = list(reversed(tags)) + ["TRAP"]
        assert estimate_features_from_tags(tags) == estimate_features_from_tags(shuffled)

    def test_all_values_within_ranges(self) -> None:
        every_pattern = [p for profile in TAG_PROFILES for p in profile.patterns]
        features = estimate_features_from_tags(every_pattern)
        for name, (lo, hi) in FEATURE_RANGES.items():
            assert lo <= getattr(features, name) <= hi

    def test_vector_is_complete(self) -> None:
        data = estimate_features_from_tags(["house"]).to_dict()
        assert set(data) == {f.name for f in fields(DEFAULT_FEATURES)}


class TestConfidence:
    """Matched-profile count -> confidence level."""

    def test_no_matches_is_low(self) -> None:
        assert matched_profile_count([]) == 0
        assert get_confidence_level([]) == "low"

    def test_one_match_is_low(self) -> None:
        assert get_confidence_level(["metal"]) == "low"

    def test_two_matches_is_medium(self) -> None:
        assert matched_profile_count(["metal", "chill"]) == 2
        assert get_confidence_level(["metal", "chill"]) == "medium"

    def test_five_matches_is_high(self) -> None:
        tags = ["metal", "chill", "jazz", "folk", "reggae"]
        assert matched_profile_count(tags) == 5
        assert get_confidence_level(tags) == "high"
