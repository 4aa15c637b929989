"""
Tests for songfinder/core/explanation.py.

All tests are deterministic: the generator is a pure function of its
input record.
"""

import re

from songfinder.core.explanation import (
    MOOD_FALLBACK,
    ExplanationInput,
    generate_explanation,
)


def _input(**overrides) -> ExplanationInput:
    values = dict(
        bpm=120,
        key="C",
        mode="Major",
        time_signature=4,
        danceability=0.5,
        energy=0.5,
        valence=0.5,
        acousticness=0.3,
        instrumentalness=0.1,
        loudness=-8.0,
    )
    values.update(overrides)
    return ExplanationInput(**values)


class TestTldr:
    """Three-sentence summary."""

    def test_three_sentences(self) -> None:
        assert len(generate_explanation(_input()).tldr) == 3

    def test_slow_sparse_track(self) -> None:
        explanation = generate_explanation(_input(bpm=70, danceability=0.2))
        assert "slow" in explanation.tldr[0].lower()

    def test_fast_danceable_track(self) -> None:
        explanation = generate_explanation(_input(bpm=140, danceability=0.9))
        assert re.search(r"upbeat|driv|dance", explanation.tldr[0].lower())

    def test_unknown_mode_bright_valence_falls_back(self) -> None:
        explanation = generate_explanation(_input(mode="Unknown", valence=0.9))
        assert explanation.tldr[1] == MOOD_FALLBACK

    def test_minor_low_valence(self) -> None:
        explanation = generate_explanation(_input(mode="Minor", valence=0.1))
        assert "minor key" in explanation.tldr[1]

    def test_acoustic_soft_texture(self) -> None:
        explanation = generate_explanation(_input(acousticness=0.9, loudness=-20))
        assert explanation.tldr[2] == "Gentle acoustic tones that feel intimate and delicate."


class TestSections:
    """Per-section bullets."""

    def test_rhythm_mentions_bpm(self) -> None:
        explanation = generate_explanation(_input(bpm=70))
        assert explanation.rhythm[0].startswith("At 70 BPM")

    def test_uncommon_time_signature(self) -> None:
        explanation = generate_explanation(_input(time_signature=9))
        assert explanation.rhythm[1] == "The 9/4 time signature shapes the rhythmic foundation."

    def test_unknown_key(self) -> None:
        explanation = generate_explanation(_input(key="Unknown", mode="Unknown"))
        assert "unclear" in explanation.harmony_mood[0]
        # no mode sentence without a known mode
        assert len(explanation.harmony_mood) == 2

    def test_known_key_and_mode(self) -> None:
        explanation = generate_explanation(_input(key="F#", mode="Minor"))
        assert explanation.harmony_mood[0].startswith("Rooted in F# minor")
        assert len(explanation.harmony_mood) == 3

    def test_texture_has_three_bullets(self) -> None:
        assert len(generate_explanation(_input()).sound_texture) == 3

    def test_to_dict_shape(self) -> None:
        data = generate_explanation(_input()).to_dict()
        assert set(data) == {"tldr", "sections"}
        assert set(data["sections"]) == {"rhythm", "harmony_mood", "sound_texture"}

    def test_deterministic(self) -> None:
        assert generate_explanation(_input()).to_dict() == generate_explanation(_input()).to_dict()
