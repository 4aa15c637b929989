"""
SongFinder Vibe Tags
특성 -> 짧은 무드 라벨 6개 (energy, mood, groove, texture, vocal, intensity)
"""

from typing import List

from .features import FeatureVector


# (LOW, HIGH) 경계값은 모두 배타적: LOW 미만 / HIGH 초과일 때만 양 끝 라벨
ENERGY_THRESHOLDS = (0.35, 0.70)
MOOD_THRESHOLDS = (0.35, 0.70)
GROOVE_THRESHOLDS = (0.40, 0.75)
TEXTURE_THRESHOLDS = (0.25, 0.60)
VOCAL_THRESHOLD = 0.33
INTENSITY_THRESHOLDS = (-12.0, -6.0)  # dB (QUIET, LOUD)


def _three_way(value: float, low: float, high: float, labels: tuple) -> str:
    low_label, mid_label, high_label = labels
    if value < low:
        return low_label
    if value > high:
        return high_label
    return mid_label


def derive_energy_tag(energy: float) -> str:
    return _three_way(energy, *ENERGY_THRESHOLDS, ("Chill", "Balanced", "High-Energy"))


def derive_mood_tag(valence: float) -> str:
    return _three_way(valence, *MOOD_THRESHOLDS, ("Moody", "Bittersweet", "Bright"))


def derive_groove_tag(danceability: float) -> str:
    return _three_way(danceability, *GROOVE_THRESHOLDS, ("Loose", "Groovy", "Dance-Forward"))


def derive_texture_tag(acousticness: float) -> str:
    return _three_way(acousticness, *TEXTURE_THRESHOLDS, ("Produced", "Mixed", "Acoustic"))


def derive_vocal_tag(speechiness: float) -> str:
    if speechiness > VOCAL_THRESHOLD:
        return "Talky/Rap-Adjacent"
    return "Melodic Vocals"


def derive_intensity_tag(loudness: float) -> str:
    return _three_way(loudness, *INTENSITY_THRESHOLDS, ("Soft", "Moderate", "Punchy"))


def derive_vibe_tags(features: FeatureVector) -> List[str]:
    """항상 6개, 고정 순서"""
    return [
        derive_energy_tag(features.energy),
        derive_mood_tag(features.valence),
        derive_groove_tag(features.danceability),
        derive_texture_tag(features.acousticness),
        derive_vocal_tag(features.speechiness),
        derive_intensity_tag(features.loudness),
    ]
