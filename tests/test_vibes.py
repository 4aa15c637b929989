"""
Tests for songfinder/core/vibes.py and the vibe taxonomy tables.

Covers primary/secondary selection, descriptor picking, the
unclassified fallback and the startup taxonomy validation.
"""

import pytest

from songfinder.core.taxonomy import (
    DESCRIPTOR_SET,
    FALLBACK_DESCRIPTORS,
    UNCLASSIFIED,
    VIBE_GENRES,
    VIBE_META,
    VIBE_SIGNALS,
)
from songfinder.core.vibes import (
    MAX_DESCRIPTORS,
    MAX_SECONDARY,
    NormalizedSignal,
    derive_vibe_profile,
    get_normalized_signals,
    validate_taxonomy,
)


class TestTaxonomy:
    """Static table consistency."""

    def test_validates(self) -> None:
        validate_taxonomy()

    def test_genre_count(self) -> None:
        assert len(VIBE_GENRES) == 48
        assert len(set(VIBE_GENRES)) == 48

    def test_every_vibe_has_meta_and_signal(self) -> None:
        for vibe in VIBE_GENRES:
            assert VIBE_META[vibe]
            assert vibe in VIBE_SIGNALS

    def test_descriptions_keep_em_dashes(self) -> None:
        assert VIBE_META[UNCLASSIFIED] == "No rules yet. Tracks that don't fit\u2014but still hit."
        assert "relaxed but alive\u2014melodic" in VIBE_META["Palmwine Nights"]
        assert "cinematic and light\u2014floating" in VIBE_META["Electric Daydream"]

    def test_sentinel_has_no_evidence(self) -> None:
        signal = VIBE_SIGNALS[UNCLASSIFIED]
        assert not (signal.core or signal.broad or signal.boost or signal.anti)


class TestDeriveVibeProfile:
    """Tag list -> VibeProfile."""

    def test_trap_scenario(self) -> None:
        profile = derive_vibe_profile(["trap", "drill", "aggressive", "hip hop"])
        assert profile.primary == "Heat Check"
        assert profile.debug.vibe_scores["Heat Check"] == pytest.approx(7.0)
        assert "Bar for Bar" in profile.secondary
        assert profile.descriptors[0] == "bass-heavy"

    def test_ambient_scenario(self) -> None:
        profile = derive_vibe_profile(["ambient", "space", "cosmic", "ethereal", "atmospheric"])
        assert profile.primary == "Star Fishing"

    @pytest.mark.parametrize(
        "tags, primary",
        [
            (["indie rock", "indie pop", "indie"], "Indie Wanderlust"),
            (["k-pop", "korean pop"], "In Sync"),
            (["neo soul", "soul", "r&b", "warm"], "Soul Kitchen"),
            (["heavy metal", "thrash", "hard rock"], "Full Throttle"),
            (["hyperpop", "pc music", "glitch pop"], "Pixelated Pop"),
            (["reggae", "dub", "ska", "dancehall"], "Under A Palm Tree"),
            (["chill", "relaxing", "mellow", "calm"], "Hammock Mode"),
            (["sad", "melancholic", "heartbreak", "rainy day"], "Rainy Day Replay"),
            (["house", "tech house", "electronic", "club"], "Crowd Control"),
            (["classic rock", "rock", "70s rock"], "Dad Rock"),
        ],
    )
    def test_primary_by_genre(self, tags, primary) -> None:
        assert derive_vibe_profile(tags).primary == primary

    def test_raw_spellings_match_normalized(self) -> None:
        raw = derive_vibe_profile(["Trap", "DRILL", "Aggressive", "Hip-Hop"])
        clean = derive_vibe_profile(["trap", "drill", "aggressive", "hip hop"])
        assert raw.to_dict() == clean.to_dict()

    def test_empty_tags_unclassified(self) -> None:
        profile = derive_vibe_profile([])
        assert profile.primary == UNCLASSIFIED
        assert profile.secondary == []
        assert profile.descriptors == list(FALLBACK_DESCRIPTORS)

    def test_unknown_tags_unclassified(self) -> None:
        assert derive_vibe_profile(["zzzqqq", "123"]).primary == UNCLASSIFIED

    def test_shape_invariants(self) -> None:
        scenarios = [
            ["trap", "drill", "aggressive", "hip hop", "dark", "808"],
            ["ambient", "space", "cosmic", "ethereal", "atmospheric"],
            ["indie", "rock", "pop", "electronic", "chill", "sad", "jazz", "soul"],
        ]
        for tags in scenarios:
            profile = derive_vibe_profile(tags)
            assert profile.primary in VIBE_GENRES
            assert len(profile.secondary) <= MAX_SECONDARY
            assert profile.primary not in profile.secondary
            assert 1 <= len(profile.descriptors) <= MAX_DESCRIPTORS
            assert all(d in DESCRIPTOR_SET for d in profile.descriptors)
            roots = [d[:4] for d in profile.descriptors]
            assert len(roots) == len(set(roots))

    def test_deterministic(self) -> None:
        tags = ["indie", "rock", "pop", "electronic", "chill"]
        assert derive_vibe_profile(tags).to_dict() == derive_vibe_profile(tags).to_dict()

    def test_reordered_duplicates_same_profile(self) -> None:
        tags = ["trap", "Drill", "hip-hop", "trap"]
        shuffled = list(reversed(tags)) + ["TRAP"]
        assert derive_vibe_profile(tags).to_dict() == derive_vibe_profile(shuffled).to_dict()

    def test_every_core_tag_classifies(self) -> None:
        for vibe, signal in VIBE_SIGNALS.items():
            if vibe == UNCLASSIFIED:
                continue
            profile = derive_vibe_profile(list(signal.core))
            assert profile.primary in VIBE_GENRES

    def test_custom_signal_table(self) -> None:
        signals = {
            "Heat Check": NormalizedSignal(
                core=frozenset({"foo"}),
                broad=frozenset(),
                boost=frozenset(),
                anti=frozenset(),
                descriptors=("dark",),
            ),
        }
        profile = derive_vibe_profile(["foo"], signals=signals)
        assert profile.primary == "Heat Check"
        assert profile.descriptors == ["dark"]

    def test_to_dict_hides_debug(self) -> None:
        data = derive_vibe_profile(["jazz"]).to_dict()
        assert set(data) == {"primary", "secondary", "descriptors"}


class TestNormalizedSignals:
    """Shared, pre-normalized signal table."""

    def test_cached(self) -> None:
        assert get_normalized_signals() is get_normalized_signals()

    def test_covers_all_vibes(self) -> None:
        assert set(get_normalized_signals()) == set(VIBE_SIGNALS)
