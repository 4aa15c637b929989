"""
Tests for songfinder/core/vibe_tags.py.

Boundary values are inclusive on the middle label.
"""

from dataclasses import replace

import pytest

from songfinder.core.features import DEFAULT_FEATURES
from songfinder.core.vibe_tags import (
    derive_energy_tag,
    derive_groove_tag,
    derive_intensity_tag,
    derive_mood_tag,
    derive_texture_tag,
    derive_vibe_tags,
    derive_vocal_tag,
)


class TestThresholds:
    """Single-label derivation at the boundaries."""

    @pytest.mark.parametrize(
        "energy, label",
        [(0.34999, "Chill"), (0.35, "Balanced"), (0.70, "Balanced"), (0.71, "High-Energy")],
    )
    def test_energy(self, energy: float, label: str) -> None:
        assert derive_energy_tag(energy) == label

    @pytest.mark.parametrize(
        "valence, label",
        [(0.2, "Moody"), (0.35, "Bittersweet"), (0.9, "Bright")],
    )
    def test_mood(self, valence: float, label: str) -> None:
        assert derive_mood_tag(valence) == label

    @pytest.mark.parametrize(
        "danceability, label",
        [(0.39, "Loose"), (0.40, "Groovy"), (0.75, "Groovy"), (0.76, "Dance-Forward")],
    )
    def test_groove(self, danceability: float, label: str) -> None:
        assert derive_groove_tag(danceability) == label

    @pytest.mark.parametrize(
        "acousticness, label",
        [(0.1, "Produced"), (0.25, "Mixed"), (0.60, "Mixed"), (0.61, "Acoustic")],
    )
    def test_texture(self, acousticness: float, label: str) -> None:
        assert derive_texture_tag(acousticness) == label

    @pytest.mark.parametrize(
        "speechiness, label",
        [(0.33, "Melodic Vocals"), (0.331, "Talky/Rap-Adjacent")],
    )
    def test_vocal(self, speechiness: float, label: str) -> None:
        assert derive_vocal_tag(speechiness) == label

    @pytest.mark.parametrize(
        "loudness, label",
        [(-12.1, "Soft"), (-12.0, "Moderate"), (-6.0, "Moderate"), (-5.9, "Punchy")],
    )
    def test_intensity(self, loudness: float, label: str) -> None:
        assert derive_intensity_tag(loudness) == label


class TestDeriveVibeTags:
    """Full six-label list."""

    def test_defaults(self) -> None:
        assert derive_vibe_tags(DEFAULT_FEATURES) == [
            "Balanced",
            "Bittersweet",
            "Groovy",
            "Mixed",
            "Melodic Vocals",
            "Moderate",
        ]

    def test_loud_energetic_rap(self) -> None:
        features = replace(
            DEFAULT_FEATURES,
            energy=0.9,
            valence=0.2,
            danceability=0.9,
            acousticness=0.05,
            speechiness=0.5,
            loudness=-3,
        )
        assert derive_vibe_tags(features) == [
            "High-Energy",
            "Moody",
            "Dance-Forward",
            "Produced",
            "Talky/Rap-Adjacent",
            "Punchy",
        ]
