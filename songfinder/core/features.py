"""
SongFinder Feature Estimator
태그 기반 가상 오디오 특성 추정

Last.fm은 실제 오디오 분석을 제공하지 않으므로, 태그 -> 특성 규칙의
평균으로 Spotify 스타일 오디오 특성을 근사한다.
"""

import math
from dataclasses import dataclass, asdict, replace
from typing import Dict, Iterable, List, Literal, Tuple

from .normalizer import canonicalize_tag, normalize_tags


# =============================================================================
# FeatureVector
# =============================================================================

@dataclass(frozen=True)
class FeatureVector:
    """추정된 오디오 특성 (항상 전체 필드가 채워지고 범위 내로 clamp됨)"""
    tempo: float             # BPM, 40~220
    key: int                 # 0~11 (C~B), -1 = unknown
    mode: float              # 0 = minor, 1 = major
    time_signature: int      # 마디당 박자 수
    loudness: float          # dB, -60~0
    energy: float
    danceability: float
    valence: float
    acousticness: float
    instrumentalness: float
    liveness: float
    speechiness: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_FEATURES = FeatureVector(
    tempo=120,
    key=-1,
    mode=1,
    time_signature=4,
    loudness=-8,
    energy=0.5,
    danceability=0.5,
    valence=0.5,
    acousticness=0.3,
    instrumentalness=0.1,
    liveness=0.15,
    speechiness=0.05,
)

# 필드별 유효 범위 (key, mode, time_signature는 clamp 대상 아님)
FEATURE_RANGES: Dict[str, Tuple[float, float]] = {
    "energy": (0.0, 1.0),
    "danceability": (0.0, 1.0),
    "valence": (0.0, 1.0),
    "acousticness": (0.0, 1.0),
    "instrumentalness": (0.0, 1.0),
    "liveness": (0.0, 1.0),
    "speechiness": (0.0, 1.0),
    "tempo": (40.0, 220.0),
    "loudness": (-60.0, 0.0),
}

KEY_NAMES: Dict[int, str] = {
    -1: "Unknown",
    0: "C",
    1: "C#",
    2: "D",
    3: "D#",
    4: "E",
    5: "F",
    6: "F#",
    7: "G",
    8: "G#",
    9: "A",
    10: "A#",
    11: "B",
}

MODE_NAMES: Dict[int, str] = {
    0: "Minor",
    1: "Major",
}


# =============================================================================
# 태그 프로필
# =============================================================================

@dataclass(frozen=True)
class TagProfile:
    """패턴 중 하나라도 태그에 포함되면 features 조정값을 샘플로 기여"""
    patterns: Tuple[str, ...]
    features: Dict[str, float]


def _profile(patterns: List[str], **features: float) -> TagProfile:
    # 패턴은 동의어 치환 없이 입력 태그와 같은 표기로 맞춘다
    canonical = tuple(dict.fromkeys(canonicalize_tag(p) for p in patterns))
    return TagProfile(patterns=canonical, features=features)


TAG_PROFILES: Tuple[TagProfile, ...] = (
    # === Energy ===
    _profile(["energetic", "powerful", "intense", "heavy", "aggressive", "hard"],
             energy=0.85, loudness=-5, valence=0.55),
    _profile(["chill", "relaxing", "mellow", "calm", "peaceful", "ambient"],
             energy=0.25, loudness=-12, valence=0.45, tempo=90),
    _profile(["upbeat", "happy", "feel good", "fun", "party"],
             energy=0.75, valence=0.8, danceability=0.7),

    # === Tempo ===
    _profile(["fast", "uptempo", "driving"],
             tempo=140, energy=0.75),
    _profile(["slow", "ballad", "downtempo"],
             tempo=75, energy=0.35, danceability=0.35),

    # === Genre ===
    _profile(["metal", "death metal", "black metal", "thrash", "hardcore"],
             energy=0.95, loudness=-4, tempo=160, valence=0.35, danceability=0.3, instrumentalness=0.2),
    _profile(["punk", "punk rock", "pop punk"],
             energy=0.85, tempo=160, loudness=-5, danceability=0.5),
    _profile(["rock", "alternative rock", "indie rock", "hard rock"],
             energy=0.7, loudness=-6, tempo=125, acousticness=0.15),
    _profile(["classic rock", "soft rock", "70s", "80s rock"],
             energy=0.6, loudness=-7, tempo=115, acousticness=0.25),
    _profile(["pop", "dance pop", "synthpop", "electropop"],
             energy=0.7, danceability=0.7, valence=0.65, tempo=120, loudness=-5),
    _profile(["electronic", "edm", "electro", "electronica"],
             energy=0.75, danceability=0.7, acousticness=0.05, instrumentalness=0.4, tempo=128),
    _profile(["house", "deep house", "tech house"],
             energy=0.7, danceability=0.8, tempo=125, acousticness=0.05, instrumentalness=0.5),
    _profile(["techno", "minimal techno"],
             energy=0.8, danceability=0.75, tempo=130, acousticness=0.02, instrumentalness=0.7),
    _profile(["trance", "progressive trance", "psytrance"],
             energy=0.8, danceability=0.65, tempo=138, acousticness=0.02, instrumentalness=0.6, valence=0.6),
    _profile(["dubstep", "brostep", "bass"],
             energy=0.85, danceability=0.6, tempo=140, loudness=-4, acousticness=0.02),
    _profile(["drum and bass", "dnb", "jungle"],
             energy=0.85, danceability=0.65, tempo=174, acousticness=0.02, instrumentalness=0.4),
    _profile(["hip hop", "hip-hop", "rap", "trap"],
             energy=0.65, danceability=0.75, speechiness=0.25, tempo=95, valence=0.5, acousticness=0.1),
    _profile(["r&b", "rnb", "rhythm and blues", "neo soul"],
             energy=0.5, danceability=0.65, valence=0.55, tempo=95, acousticness=0.3),
    _profile(["soul", "motown", "funk"],
             energy=0.65, danceability=0.7, valence=0.7, tempo=110, acousticness=0.35),
    _profile(["jazz", "smooth jazz", "bebop", "swing"],
             energy=0.45, danceability=0.5, acousticness=0.6, instrumentalness=0.5, valence=0.55, tempo=120),
    _profile(["blues", "delta blues", "chicago blues"],
             energy=0.5, danceability=0.45, acousticness=0.55, valence=0.4, tempo=95),
    _profile(["classical", "orchestra", "symphony", "baroque", "romantic"],
             energy=0.35, danceability=0.2, acousticness=0.9, instrumentalness=0.95, valence=0.4, tempo=90, loudness=-15),
    _profile(["folk", "folk rock", "traditional"],
             energy=0.45, danceability=0.45, acousticness=0.75, valence=0.5, tempo=100),
    _profile(["country", "americana", "bluegrass"],
             energy=0.55, danceability=0.55, acousticness=0.6, valence=0.6, tempo=115),
    _profile(["acoustic", "unplugged", "singer-songwriter"],
             energy=0.35, danceability=0.4, acousticness=0.85, valence=0.45, tempo=100, loudness=-12),
    _profile(["reggae", "dub", "ska"],
             energy=0.55, danceability=0.7, valence=0.7, tempo=90, acousticness=0.3),
    _profile(["latin", "salsa", "merengue", "cumbia", "bachata"],
             energy=0.7, danceability=0.8, valence=0.75, tempo=105, acousticness=0.25),
    _profile(["reggaeton", "dembow"],
             energy=0.75, danceability=0.85, valence=0.7, tempo=95, speechiness=0.15),
    _profile(["k-pop", "kpop", "j-pop", "jpop"],
             energy=0.75, danceability=0.75, valence=0.7, tempo=125, loudness=-5),
    _profile(["afrobeats", "afropop", "afrofusion", "afroswing"],
             energy=0.65, danceability=0.8, valence=0.7, tempo=105, acousticness=0.2),
    _profile(["amapiano", "afro house"],
             energy=0.6, danceability=0.85, valence=0.65, tempo=115, acousticness=0.1, instrumentalness=0.3),
    _profile(["highlife"],
             energy=0.55, danceability=0.7, valence=0.7, tempo=110, acousticness=0.4),
    _profile(["hyperpop", "pc music", "glitch pop", "bubblegum bass", "nightcore", "digicore"],
             energy=0.85, danceability=0.65, valence=0.6, tempo=150, loudness=-4, acousticness=0.02),
    _profile(["darkwave", "coldwave"],
             energy=0.55, danceability=0.55, valence=0.3, tempo=120, acousticness=0.1),
    _profile(["indie", "indie pop", "indie folk"],
             energy=0.5, danceability=0.5, acousticness=0.4, valence=0.45, tempo=115),
    _profile(["shoegaze", "dream pop", "ethereal"],
             energy=0.45, danceability=0.4, acousticness=0.2, valence=0.4, tempo=100, loudness=-8),
    _profile(["post-rock", "post rock"],
             energy=0.55, danceability=0.25, acousticness=0.25, instrumentalness=0.7, valence=0.35, tempo=100),
    _profile(["ambient", "drone", "dark ambient"],
             energy=0.2, danceability=0.15, acousticness=0.3, instrumentalness=0.9, valence=0.3, tempo=80, loudness=-18),
    _profile(["lofi", "lo-fi", "chillhop"],
             energy=0.35, danceability=0.55, acousticness=0.35, instrumentalness=0.6, valence=0.45, tempo=85),

    # === Mood ===
    _profile(["sad", "melancholic", "depressing", "dark"],
             valence=0.2, energy=0.35, mode=0),
    _profile(["romantic", "love", "sensual"],
             valence=0.55, energy=0.45, tempo=95),
    _profile(["angry", "aggressive", "rage"],
             energy=0.9, valence=0.3, loudness=-4),

    # === Production ===
    _profile(["live", "concert", "bootleg"],
             liveness=0.8, acousticness=0.4),
    _profile(["instrumental", "no vocals"],
             instrumentalness=0.9, speechiness=0.02),
    _profile(["vocal", "vocals", "a cappella", "acappella"],
             instrumentalness=0.05, speechiness=0.1, acousticness=0.5),
    _profile(["spoken word", "poetry", "spoken"],
             speechiness=0.8, instrumentalness=0.1, danceability=0.3),
)


# =============================================================================
# 추정
# =============================================================================

def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def _profile_matches(profile: TagProfile, tags: List[str]) -> bool:
    return any(pattern in tag for pattern in profile.patterns for tag in tags)


def _matched_profiles(tags: List[str]) -> List[TagProfile]:
    return [profile for profile in TAG_PROFILES if _profile_matches(profile, tags)]


def estimate_features_from_tags(tags: Iterable[str]) -> FeatureVector:
    """
    태그 목록에서 오디오 특성 추정

    1. 태그 정규화 (중복 제거)
    2. 매칭된 프로필의 조정값을 특성별 샘플로 수집
    3. 샘플이 있는 특성은 평균, 없는 특성은 기본값
    4. 범위 clamp

    Args:
        tags: Last.fm 태그 (원본 그대로 넣어도 됨)

    Returns:
        FeatureVector
    """
    normalized = normalize_tags(tags)
    if not normalized:
        return DEFAULT_FEATURES

    samples: Dict[str, List[float]] = {}
    for profile in _matched_profiles(normalized):
        for feature, value in profile.features.items():
            samples.setdefault(feature, []).append(value)

    # fsum은 합산 순서와 무관하게 정확히 반올림되므로 프로필 순서가 결과에 영향 없음
    updates: Dict[str, float] = {
        feature: math.fsum(values) / len(values)
        for feature, values in samples.items()
    }

    for feature, (lo, hi) in FEATURE_RANGES.items():
        if feature in updates:
            updates[feature] = _clamp(updates[feature], lo, hi)

    return replace(DEFAULT_FEATURES, **updates)


def matched_profile_count(tags: Iterable[str]) -> int:
    """매칭된 태그 프로필 개수"""
    normalized = normalize_tags(tags)
    if not normalized:
        return 0
    return len(_matched_profiles(normalized))


def get_confidence_level(tags: Iterable[str]) -> Literal["high", "medium", "low"]:
    """매칭 프로필 수 기반 추정 신뢰도 (5개 이상 high, 2개 이상 medium)"""
    count = matched_profile_count(tags)
    if count >= 5:
        return "high"
    if count >= 2:
        return "medium"
    return "low"
