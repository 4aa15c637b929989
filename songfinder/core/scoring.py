"""
SongFinder Scoring Utilities
추정 특성 간 가중 거리 계산 + 후보곡 재정렬
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .features import FeatureVector


# =============================================================================
# 거리 차원 / 가중치
# =============================================================================

# 순서 고정 (추천 이유의 동점 처리도 이 순서를 따름)
DISTANCE_DIMENSIONS: Tuple[str, ...] = (
    "danceability",
    "energy",
    "valence",
    "acousticness",
    "instrumentalness",
    "speechiness",
    "liveness",
    "tempo",
    "loudness",
)

RERANK_WEIGHTS: Dict[str, float] = {
    "danceability": 1.2,
    "energy": 1.2,
    "valence": 1.0,
    "acousticness": 0.9,
    "instrumentalness": 0.6,
    "speechiness": 0.6,
    "liveness": 0.3,
    "tempo": 0.8,
    "loudness": 0.3,
}

FEATURE_DISPLAY_NAMES: Dict[str, str] = {
    "danceability": "groove",
    "energy": "energy level",
    "valence": "mood",
    "acousticness": "acoustic feel",
    "instrumentalness": "instrumental balance",
    "speechiness": "vocal style",
    "liveness": "live feel",
    "tempo": "tempo",
    "loudness": "loudness",
}

TEMPO_DIVISOR = 60.0     # BPM 차이 정규화
LOUDNESS_DIVISOR = 20.0  # dB 차이 정규화

_WEIGHTS = np.array([RERANK_WEIGHTS[d] for d in DISTANCE_DIMENSIONS], dtype=float)
# 차원별 나눗수 (0~1 특성은 1)
_DIVISORS = np.array(
    [TEMPO_DIVISOR if d == "tempo" else LOUDNESS_DIVISOR if d == "loudness" else 1.0
     for d in DISTANCE_DIMENSIONS],
    dtype=float,
)


@dataclass(frozen=True)
class DistanceResult:
    total: float
    dimension_diffs: Dict[str, float]


@dataclass
class RecommendationCandidate:
    """Last.fm 유사곡 + 추정 특성"""
    name: str
    artist: str
    url: str = ""
    image_url: Optional[str] = None
    match: float = 0.0
    features: Optional[FeatureVector] = None
    reason_prefix: str = ""


# =============================================================================
# 거리 계산
# =============================================================================

def feature_array(features: FeatureVector) -> np.ndarray:
    """FeatureVector -> (9,) 배열 (DISTANCE_DIMENSIONS 순서)"""
    return np.array([getattr(features, d) for d in DISTANCE_DIMENSIONS], dtype=float)


def _normalized_diffs(seed_vec: np.ndarray, cand_vecs: np.ndarray) -> np.ndarray:
    """
    차원별 정규화 차이

    Args:
        seed_vec: (9,) 시드 곡 특성
        cand_vecs: (N, 9) 후보곡 특성 행렬

    Returns:
        (N, 9) 0~1 범위 차이 (tempo, loudness는 1.0에서 cap)
    """
    diffs = np.abs(cand_vecs - seed_vec) / _DIVISORS
    return np.minimum(diffs, 1.0)


def calculate_distance(seed: FeatureVector, candidate: FeatureVector) -> DistanceResult:
    """두 곡 사이의 가중 거리 (0이면 동일)"""
    diffs = _normalized_diffs(feature_array(seed), feature_array(candidate)[np.newaxis, :])[0]
    return DistanceResult(
        total=float(np.dot(_WEIGHTS, diffs)),
        dimension_diffs={d: float(v) for d, v in zip(DISTANCE_DIMENSIONS, diffs)},
    )


def generate_recommendation_reason(dimension_diffs: Dict[str, float]) -> str:
    """
    가장 가까운 두 차원으로 추천 이유 문장 생성

    동점은 DISTANCE_DIMENSIONS 순서로 결정 (stable sort)
    """
    ordered = sorted(
        (d for d in DISTANCE_DIMENSIONS if d in dimension_diffs),
        key=lambda d: dimension_diffs[d],
    )
    first, second = ordered[:2]
    return f"Matches closely in {FEATURE_DISPLAY_NAMES[first]} and {FEATURE_DISPLAY_NAMES[second]}."


# =============================================================================
# 재정렬
# =============================================================================

def rank_candidates(
    seed: FeatureVector,
    candidates: List[RecommendationCandidate],
    limit: int = 10,
) -> List[Tuple[RecommendationCandidate, DistanceResult]]:
    """
    거리 오름차순으로 후보 정렬 후 상위 limit개 반환

    특성이 없는 후보는 제외. 거리가 같으면 입력 순서 유지.

    Returns:
        [(candidate, DistanceResult), ...]
    """
    scored = [c for c in candidates if c.features is not None]
    if not scored:
        return []

    cand_vecs = np.vstack([feature_array(c.features) for c in scored])
    diffs = _normalized_diffs(feature_array(seed), cand_vecs)
    totals = diffs @ _WEIGHTS
    order = np.argsort(totals, kind="stable")[:limit]

    return [
        (
            scored[i],
            DistanceResult(
                total=float(totals[i]),
                dimension_diffs={d: float(v) for d, v in zip(DISTANCE_DIMENSIONS, diffs[i])},
            ),
        )
        for i in order
    ]
