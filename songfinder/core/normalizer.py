"""
SongFinder Tag Normalizer
Last.fm 크라우드 태그 정규화 (대소문자, 발음 구별 기호, 구두점, 동의어)
"""

import re
import unicodedata
from typing import Dict, Iterable, List


# =============================================================================
# 동의어 테이블
# =============================================================================
# 자기 자신으로 매핑되는 항목(reggaeton, singer songwriter)도 그대로 유지

SYNONYM_MAP: Dict[str, str] = {
    # Hip-hop
    "hiphop": "hip hop",

    # R&B
    "r and b": "r&b",
    "rhythm and blues": "r&b",
    "rnb": "r&b",

    # Electronic
    "electronica": "electronic",

    # Lo-fi
    "lofi": "lo fi",

    # Chill
    "chillout": "chill",
    "downtempo": "chill",

    # Post-punk
    "postpunk": "post punk",

    # Dream pop
    "dreampop": "dream pop",

    # Indie
    "indiepop": "indie pop",
    "indierock": "indie rock",
    "indietronic": "indietronica",

    # Alt rock
    "alternativerock": "alternative rock",
    "alt rock": "alternative rock",

    # Prog rock
    "progrock": "progressive rock",
    "prog rock": "progressive rock",

    # Synth pop / electropop
    "synthpop": "synth pop",
    "electro pop": "electropop",

    # K-pop / J-pop
    "kpop": "k pop",
    "jpop": "j pop",

    # Pop punk
    "poppunk": "pop punk",

    # Drum and bass
    "dnb": "drum and bass",
    "d&b": "drum and bass",
    "drum & bass": "drum and bass",
    "drum n bass": "drum and bass",

    # Afro
    "afro beats": "afrobeats",
    "afro pop": "afropop",

    # Latin
    "reggaeton": "reggaeton",

    # House
    "techno house": "tech house",

    # New wave
    "newwave": "new wave",

    # Neo soul
    "neosoul": "neo soul",

    # Nu disco
    "nudisco": "nu disco",

    # Singer-songwriter
    "singer songwriter": "singer songwriter",

    # Post-hardcore
    "posthardcore": "post hardcore",
}

# ASCII 단어 문자, 공백, & 이외는 모두 공백으로 치환
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s&]")
_WHITESPACE_RE = re.compile(r"\s+")


def _strip_diacritics(text: str) -> str:
    """NFD 분해 후 결합 문자 제거 (ñ -> n, é -> e)"""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def canonicalize_tag(raw_tag: str) -> str:
    """
    동의어 치환 없이 표기만 정규화

    태그 프로필 패턴처럼 개념 자체는 바꾸면 안 되는 문자열에 사용
    """
    text = raw_tag.lower().strip()
    text = _strip_diacritics(text)
    text = _NON_WORD_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_tag(raw_tag: str) -> str:
    """
    태그 하나를 정규화

    Args:
        raw_tag: Last.fm 원본 태그 (예: "Hip-Hop", "Électronica")

    Returns:
        정규화된 태그 (빈 문자열일 수 있음, 호출 측에서 필터링)
    """
    canonical = canonicalize_tag(raw_tag)
    return SYNONYM_MAP.get(canonical, canonical)


def normalize_tags(raw_tags: Iterable[str]) -> List[str]:
    """
    태그 목록 정규화 + 중복 제거

    첫 등장 순서를 유지하고 빈 태그는 버린다.
    """
    seen: Dict[str, None] = {}
    for raw in raw_tags:
        tag = normalize_tag(raw)
        if tag:
            seen.setdefault(tag, None)
    return list(seen)
