"""
SongFinder Vibe Classifier
태그 -> 바이브 장르 + 무드 디스크립터 분류
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .normalizer import normalize_tag, normalize_tags
from .taxonomy import (
    ANTI_W,
    BOOST_W,
    BROAD_W,
    CORE_W,
    DESCRIPTOR_SET,
    FALLBACK_DESCRIPTORS,
    UNCLASSIFIED,
    VIBE_GENRES,
    VIBE_META,
    VIBE_SIGNALS,
)

logger = logging.getLogger(__name__)

MAX_SECONDARY = 3
MAX_DESCRIPTORS = 7
DESCRIPTOR_ROOT_LEN = 4


class TaxonomyError(ValueError):
    """바이브 분류 테이블이 서로 맞지 않을 때"""


# =============================================================================
# 정규화된 신호 테이블
# =============================================================================

@dataclass(frozen=True)
class NormalizedSignal:
    core: FrozenSet[str]
    broad: FrozenSet[str]
    boost: FrozenSet[str]
    anti: FrozenSet[str]
    descriptors: Tuple[str, ...]


def _normalized_set(tags: Iterable[str]) -> FrozenSet[str]:
    return frozenset(t for t in (normalize_tag(tag) for tag in tags) if t)


def build_normalized_signals() -> Dict[str, NormalizedSignal]:
    """VIBE_SIGNALS의 태그를 입력 태그와 같은 규칙으로 정규화한 테이블 생성"""
    return {
        vibe: NormalizedSignal(
            core=_normalized_set(signal.core),
            broad=_normalized_set(signal.broad),
            boost=_normalized_set(signal.boost),
            anti=_normalized_set(signal.anti),
            descriptors=signal.descriptors,
        )
        for vibe, signal in VIBE_SIGNALS.items()
    }


@lru_cache(maxsize=1)
def get_normalized_signals() -> Mapping[str, NormalizedSignal]:
    """프로세스당 한 번만 빌드되는 신호 테이블"""
    return build_normalized_signals()


# =============================================================================
# 바이브 프로필
# =============================================================================

@dataclass(frozen=True)
class VibeDebug:
    matched_rules: List[str] = field(default_factory=list)
    vibe_scores: Dict[str, float] = field(default_factory=dict)
    desc_scores: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class VibeProfile:
    primary: str
    secondary: List[str]
    descriptors: List[str]
    debug: VibeDebug

    def to_dict(self) -> Dict[str, object]:
        """API 응답용 (debug 제외)"""
        return {
            "primary": self.primary,
            "secondary": list(self.secondary),
            "descriptors": list(self.descriptors),
        }


def _score_signal(signal: NormalizedSignal, tags: List[str]) -> Tuple[float, int]:
    core_hits = sum(1 for tag in tags if tag in signal.core)
    broad_hits = sum(1 for tag in tags if tag in signal.broad)
    boost_hits = sum(1 for tag in tags if tag in signal.boost)
    anti_hits = sum(1 for tag in tags if tag in signal.anti)

    # boost는 core/broad 근거가 있을 때만 가산
    has_base_evidence = core_hits > 0 or broad_hits > 0
    score = (
        core_hits * CORE_W
        + broad_hits * BROAD_W
        + (boost_hits * BOOST_W if has_base_evidence else 0.0)
        + anti_hits * ANTI_W
    )
    return score, core_hits


def _pick_descriptors(desc_scores: Dict[str, float]) -> List[str]:
    ranked = sorted(
        ((desc, score) for desc, score in desc_scores.items() if score > 0),
        key=lambda item: -item[1],
    )

    picked: List[str] = []
    used_roots = set()
    for desc, _ in ranked:
        if len(picked) >= MAX_DESCRIPTORS:
            break
        if desc not in DESCRIPTOR_SET:
            continue
        # 앞 4글자가 같으면 유사어로 보고 건너뜀
        root = desc[:DESCRIPTOR_ROOT_LEN]
        if root in used_roots:
            continue
        picked.append(desc)
        used_roots.add(root)

    return picked or list(FALLBACK_DESCRIPTORS)


def derive_vibe_profile(
    tags: Iterable[str],
    signals: Optional[Mapping[str, NormalizedSignal]] = None,
) -> VibeProfile:
    """
    태그로부터 바이브 프로필 도출

    Args:
        tags: 원본 태그 (내부에서 정규화)
        signals: 정규화된 신호 테이블 (None이면 공유 테이블 사용)

    Returns:
        VibeProfile (primary는 항상 채워짐, 매칭 없으면 UNCLASSIFIED)
    """
    if signals is None:
        signals = get_normalized_signals()

    normalized = normalize_tags(tags)

    vibe_scores: Dict[str, float] = {}
    core_counts: Dict[str, int] = {}
    matched_rules: List[str] = []

    for vibe, signal in signals.items():
        if vibe == UNCLASSIFIED:
            continue
        score, core_hits = _score_signal(signal, normalized)
        if score > 0:
            vibe_scores[vibe] = score
            core_counts[vibe] = core_hits
            matched_rules.append(vibe)

    # 점수 desc -> core 히트 수 desc -> 이름 asc
    ranked = sorted(
        vibe_scores.items(),
        key=lambda item: (-item[1], -core_counts[item[0]], item[0]),
    )

    primary = ranked[0][0] if ranked else UNCLASSIFIED
    secondary = [vibe for vibe, _ in ranked[1:1 + MAX_SECONDARY]]

    # 디스크립터 점수: 상위 바이브 점수 x 위치 가중치 (앞쪽일수록 높음)
    desc_scores: Dict[str, float] = {}
    for vibe, score in ranked:
        signal = signals.get(vibe)
        if signal is None:
            continue
        for i, desc in enumerate(signal.descriptors):
            weight = max(0.5, 1 - i * 0.08)
            desc_scores[desc] = desc_scores.get(desc, 0.0) + score * weight

    return VibeProfile(
        primary=primary,
        secondary=secondary,
        descriptors=_pick_descriptors(desc_scores),
        debug=VibeDebug(
            matched_rules=matched_rules,
            vibe_scores=vibe_scores,
            desc_scores=desc_scores,
        ),
    )


# =============================================================================
# 시작 시 검증
# =============================================================================

def validate_taxonomy() -> None:
    """
    분류 테이블 무결성 검사 (앱 시작 시 1회)

    Raises:
        TaxonomyError: 신호/설명 누락, 어휘 밖 디스크립터, 근거 태그를 가진 sentinel
    """
    problems: List[str] = []

    missing_signals = [vibe for vibe in VIBE_GENRES if vibe not in VIBE_SIGNALS]
    if missing_signals:
        problems.append(f"missing signals: {', '.join(missing_signals)}")

    unknown_signals = [vibe for vibe in VIBE_SIGNALS if vibe not in VIBE_GENRES]
    if unknown_signals:
        problems.append(f"signals for unknown vibes: {', '.join(unknown_signals)}")

    missing_meta = [vibe for vibe in VIBE_GENRES if not VIBE_META.get(vibe)]
    if missing_meta:
        problems.append(f"missing descriptions: {', '.join(missing_meta)}")

    invalid_descriptors = sorted({
        desc
        for signal in VIBE_SIGNALS.values()
        for desc in signal.descriptors
        if desc not in DESCRIPTOR_SET
    })
    if invalid_descriptors:
        problems.append(f"unknown descriptors: {', '.join(invalid_descriptors)}")

    sentinel = VIBE_SIGNALS.get(UNCLASSIFIED)
    if sentinel is not None and (sentinel.core or sentinel.broad or sentinel.boost or sentinel.anti):
        problems.append(f"{UNCLASSIFIED} must not carry evidence tags")

    if problems:
        raise TaxonomyError("; ".join(problems))

    logger.info(f"Vibe taxonomy OK: {len(VIBE_GENRES)} vibes, {len(DESCRIPTOR_SET)} descriptors")
