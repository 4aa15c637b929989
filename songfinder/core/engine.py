"""
SongFinder Analysis Engine
Last.fm 태그 기반 곡 분석 + 유사곡 추천
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .explanation import ExplanationInput, generate_explanation
from .features import (
    KEY_NAMES,
    MODE_NAMES,
    FeatureVector,
    estimate_features_from_tags,
    get_confidence_level,
)
from .lastfm import (
    LastFmApiError,
    LastFmClient,
    SimilarTrack,
    TrackDetails,
    TrackNotFoundError,
    TrackStub,
    generate_track_id,
)
from .scoring import (
    RecommendationCandidate,
    generate_recommendation_reason,
    rank_candidates,
)
from .vibe_tags import derive_vibe_tags
from .vibes import derive_vibe_profile
from ..utils.timing import Timer, timed

logger = logging.getLogger(__name__)

FALLBACK_REASON_PREFIX = "From similar artist. "
LISTENER_PATTERN_REASON = "Similar artist and style based on listener patterns."
MAX_GENRES = 10


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def derive_fingerprint(features: FeatureVector, tags: Sequence[str]) -> Dict[str, Any]:
    """
    추정 특성 + 태그 -> 화면/캐시용 fingerprint

    Args:
        features: 추정 특성
        tags: 원본 태그 (앞 10개가 genres)
    """
    return {
        "bpm": _round_half_up(features.tempo),
        "key": KEY_NAMES.get(features.key, "Unknown"),
        # 0.0 / 1.0도 dict 키 0 / 1과 같게 조회됨
        "mode": MODE_NAMES.get(features.mode, "Unknown"),
        "time_signature": features.time_signature,
        "loudness": features.loudness,
        "energy": features.energy,
        "danceability": features.danceability,
        "valence": features.valence,
        "acousticness": features.acousticness,
        "instrumentalness": features.instrumentalness,
        "liveness": features.liveness,
        "speechiness": features.speechiness,
        "genres": list(tags[:MAX_GENRES]),
        "vibe_tags": derive_vibe_tags(features),
        "confidence": get_confidence_level(tags),
    }


class AnalysisEngine:
    """
    곡 분석 엔진

    분석 파이프라인:
    1. Last.fm에서 곡 정보 + 곡/아티스트 태그 조회
    2. 태그 -> 특성 추정 -> fingerprint, 설명, 바이브 프로필
    3. 유사곡 후보 태그를 병렬 조회 -> 특성 거리로 재정렬
    4. 유사곡이 없으면 유사 아티스트 인기곡으로 폴백
    """

    def __init__(
        self,
        client: LastFmClient,
        recommendation_limit: int = 10,
        similar_tracks_limit: int = 30,
        max_candidates: int = 20,
        fallback_artists: int = 5,
        fallback_top_tracks: int = 5,
        max_workers: int = 8,
    ):
        """
        Args:
            client: Last.fm 클라이언트
            recommendation_limit: 최종 추천 개수
            similar_tracks_limit: Last.fm에 요청할 유사곡 수
            max_candidates: 특성을 추정할 후보 최대 수
            fallback_artists: 폴백 시 조회할 유사 아티스트 수
            fallback_top_tracks: 폴백 시 아티스트당 인기곡 수
            max_workers: 후보 조회 스레드 수
        """
        self.client = client
        self.recommendation_limit = recommendation_limit
        self.similar_tracks_limit = similar_tracks_limit
        self.max_candidates = max_candidates
        self.fallback_artists = fallback_artists
        self.fallback_top_tracks = fallback_top_tracks
        self.max_workers = max_workers

        logger.info(
            f"Engine 초기화: limit={recommendation_limit}, "
            f"similar={similar_tracks_limit}, candidates={max_candidates}, "
            f"workers={max_workers}"
        )

    # -------------------------------------------------------------------------
    # 검색
    # -------------------------------------------------------------------------

    @timed
    def search(self, query: str, artist: Optional[str] = None, limit: int = 10) -> List[Dict[str, Any]]:
        """곡 검색 (Last.fm track.search)"""
        results = self.client.search_tracks(query, artist, limit)
        return [
            {
                "id": t.id,
                "name": t.name,
                "artist": t.artist,
                "url": t.url,
                "listeners": t.listeners,
            }
            for t in results
        ]

    # -------------------------------------------------------------------------
    # 후보 조회 (scatter / gather)
    # -------------------------------------------------------------------------

    def _fetch_details(self, stubs: Sequence[Tuple[str, str]]) -> List[Optional[TrackDetails]]:
        """
        (곡, 아티스트) 목록의 곡 정보를 병렬 조회

        결과는 요청 순서대로, 실패한 항목은 None
        """
        if not stubs:
            return []

        def fetch(pair: Tuple[str, str]) -> Optional[TrackDetails]:
            name, artist = pair
            try:
                return self.client.get_track_info(name, artist)
            except LastFmApiError as e:
                logger.info(f"후보 스킵: {artist} - {name} ({e})")
                return None

        workers = max(1, min(self.max_workers, len(stubs)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(fetch, stubs))

    def _similar_candidates(self, similar: List[SimilarTrack]) -> List[RecommendationCandidate]:
        subset = similar[:self.max_candidates]
        details = self._fetch_details([(t.name, t.artist) for t in subset])

        candidates = []
        for track, info in zip(subset, details):
            if info is None:
                continue
            candidates.append(RecommendationCandidate(
                name=track.name,
                artist=track.artist,
                url=track.external_url,
                image_url=track.image_url or info.album_image_url,
                match=track.match,
                features=estimate_features_from_tags(info.tags),
            ))
        return candidates

    def _fallback_candidates(self, artist: str, seed_name: str) -> List[RecommendationCandidate]:
        """유사 아티스트 인기곡 후보 (시드 곡명 + 중복 제외)"""
        similar_artists = self.client.get_similar_artists(artist, self.fallback_artists)
        if not similar_artists:
            return []

        seen_ids = set()
        candidates: List[RecommendationCandidate] = []

        for similar_artist in similar_artists:
            try:
                top_tracks = self.client.get_artist_top_tracks(similar_artist.name, self.fallback_top_tracks)
            except LastFmApiError as e:
                logger.info(f"폴백 아티스트 스킵: {similar_artist.name} ({e})")
                continue

            picked: List[TrackStub] = []
            for track in top_tracks:
                if track.id in seen_ids:
                    continue
                if track.name.lower() == seed_name.lower():
                    continue
                seen_ids.add(track.id)
                picked.append(track)

            details = self._fetch_details([(t.name, t.artist) for t in picked])
            for track, info in zip(picked, details):
                if info is None:
                    continue
                candidates.append(RecommendationCandidate(
                    name=track.name,
                    artist=track.artist,
                    url=track.url,
                    image_url=info.album_image_url or track.image_url,
                    match=similar_artist.match or 0.5,
                    features=estimate_features_from_tags(info.tags),
                    reason_prefix=FALLBACK_REASON_PREFIX,
                ))

            if len(candidates) >= self.max_candidates:
                break

        return candidates[:self.max_candidates]

    # -------------------------------------------------------------------------
    # 추천
    # -------------------------------------------------------------------------

    def _ranked(self, seed: FeatureVector, candidates: List[RecommendationCandidate]) -> List[Dict[str, Any]]:
        items = []
        for cand, distance in rank_candidates(seed, candidates, self.recommendation_limit):
            items.append({
                "id": generate_track_id(cand.name, cand.artist),
                "name": cand.name,
                "artists": [cand.artist],
                "external_url": cand.url,
                "reason": cand.reason_prefix + generate_recommendation_reason(distance.dimension_diffs),
                "album_art": cand.image_url,
                "distance": round(distance.total, 6),
            })
        return items

    def recommend(self, name: str, artist: str, seed: FeatureVector) -> Tuple[List[Dict[str, Any]], str]:
        """
        유사곡 추천

        Returns:
            (items, method) - method: "distance" | "similar_artists" | "lastfm_order" | "none"
        """
        similar = self.client.get_similar_tracks(name, artist, self.similar_tracks_limit)

        if not similar:
            candidates = self._fallback_candidates(artist, name)
            if not candidates:
                return [], "none"
            return self._ranked(seed, candidates), "similar_artists"

        candidates = self._similar_candidates(similar)
        if candidates:
            return self._ranked(seed, candidates), "distance"

        # 특성 추정 실패 -> Last.fm 순서 그대로
        items = [
            {
                "id": t.id,
                "name": t.name,
                "artists": [t.artist],
                "external_url": t.external_url,
                "reason": LISTENER_PATTERN_REASON,
                "album_art": t.image_url,
                "distance": None,
            }
            for t in similar[:self.recommendation_limit]
        ]
        return items, "lastfm_order"

    # -------------------------------------------------------------------------
    # 분석
    # -------------------------------------------------------------------------

    def _resolve(self, track: str, artist: Optional[str]) -> Tuple[str, str]:
        """아티스트가 없으면 검색 1위 결과 사용"""
        if artist and artist.strip():
            return track, artist
        results = self.client.search_tracks(track, None, 10)
        if not results:
            raise TrackNotFoundError("Track not found. Please provide both song name and artist.")
        top = results[0]
        logger.info(f"아티스트 미지정, 검색 1위 사용: {top.artist} - {top.name}")
        return top.name, top.artist

    def analyze(self, track: str, artist: Optional[str] = None) -> Dict[str, Any]:
        """
        곡 분석 실행

        Args:
            track: 곡 이름
            artist: 아티스트 (선택)

        Returns:
            {
                "track": {...},
                "fingerprint": {...},
                "explanation": {...},
                "recommendations": [...],
                "recommendation_method": str,
                "vibe_profile": {...}
            }

        Raises:
            TrackNotFoundError: 곡을 찾을 수 없는 경우
            LastFmApiError: 그 외 Last.fm 실패
        """
        with Timer(f"analyze {track!r}", level=logging.INFO):
            name, artist_name = self._resolve(track, artist)

            details = self.client.get_track_info(name, artist_name)
            tags = self.client.with_artist_tags(details.tags, details.artist)

            features = estimate_features_from_tags(tags)
            fingerprint = derive_fingerprint(features, tags)

            explanation = generate_explanation(ExplanationInput(
                bpm=fingerprint["bpm"],
                key=fingerprint["key"],
                mode=fingerprint["mode"],
                time_signature=fingerprint["time_signature"],
                danceability=fingerprint["danceability"],
                energy=fingerprint["energy"],
                valence=fingerprint["valence"],
                acousticness=fingerprint["acousticness"],
                instrumentalness=fingerprint["instrumentalness"],
                loudness=fingerprint["loudness"],
            ))

            vibe_profile = derive_vibe_profile(tags)
            logger.debug(f"Vibe scores: {vibe_profile.debug.vibe_scores}")

            with Timer("recommend"):
                recommendations, method = self.recommend(name, artist_name, features)

        return {
            "track": {
                "id": details.id,
                "name": details.name,
                "artists": [{"id": details.artist_id, "name": details.artist}],
                "album": {
                    "id": details.album_id,
                    "name": details.album,
                    "images": (
                        [{"url": details.album_image_url, "height": 300, "width": 300}]
                        if details.album_image_url else []
                    ),
                },
                "external_url": details.external_url,
            },
            "fingerprint": fingerprint,
            "explanation": explanation.to_dict(),
            "recommendations": recommendations,
            "recommendation_method": method,
            "vibe_profile": vibe_profile.to_dict(),
        }
