"""
SongFinder Redis Cache
곡 분석 결과 JSON 캐싱 (만료는 Redis TTL에 맡김)
"""

import json
import logging
from typing import Any, Dict, Optional

import redis

logger = logging.getLogger(__name__)

ANALYSIS_KEY_PREFIX = "analysis"
UNKNOWN_ARTIST = "Unknown Artist"


class RedisCache:
    """
    Redis 래퍼

    연결에 실패해도 예외를 올리지 않고 비활성 상태로 남는다.
    비활성 상태에서는 모든 조회가 miss, 저장은 무시.
    """

    def __init__(self, redis_url: str, client: Optional[redis.Redis] = None):
        """
        Args:
            redis_url: 예) redis://localhost:6379/0
            client: 미리 만든 클라이언트 (테스트에서 mock 주입)
        """
        self.redis_url = redis_url
        self._client: Optional[redis.Redis] = client
        self._connect()

    def _connect(self) -> None:
        try:
            if self._client is None:
                self._client = redis.from_url(
                    self.redis_url,
                    decode_responses=True,
                    socket_connect_timeout=2,
                    socket_timeout=2
                )
            self._client.ping()
            logger.info(f"Redis 연결됨: {self.redis_url}")
        except (redis.RedisError, ValueError) as e:
            logger.warning(f"Redis 사용 불가, 캐시 비활성: {e}")
            self._client = None

    @property
    def is_connected(self) -> bool:
        if self._client is None:
            return False
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def ping(self) -> bool:
        return self.is_connected

    def read(self, key: str) -> Optional[str]:
        """원본 문자열 조회 (비활성이면 None)"""
        if not self.is_connected:
            return None
        return self._client.get(key)

    def write(self, key: str, data: str, ttl_sec: int) -> None:
        """문자열 저장 (ttl_sec <= 0 이면 만료 없음)"""
        if not self.is_connected:
            return
        if ttl_sec > 0:
            self._client.setex(key, ttl_sec, data)
        else:
            self._client.set(key, data)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()


# =============================================================================
# 키
# =============================================================================

def make_track_key(artist: Optional[str], track: str) -> str:
    """
    곡 단위 논리 키: "{artist}::{track}" (소문자, 앞뒤 공백 제거)

    아티스트가 비어 있으면 "unknown artist"
    """
    artist_part = (artist or "").strip() or UNKNOWN_ARTIST
    return f"{artist_part.lower()}::{track.strip().lower()}"


def make_analysis_cache_key(track_key: str) -> str:
    return f"{ANALYSIS_KEY_PREFIX}:{track_key}"


# =============================================================================
# JSON 헬퍼
# =============================================================================

def get_json(cache: Optional[RedisCache], key: str) -> Optional[Dict[str, Any]]:
    """
    JSON 조회

    캐시 없음, Redis 오류, 깨진 JSON 모두 miss(None)로 처리
    """
    if cache is None:
        return None

    try:
        data = cache.read(key)
        return json.loads(data) if data else None
    except (redis.RedisError, ValueError) as e:
        logger.warning(f"캐시 조회 실패 ({key}): {e}")
        return None


def set_json(cache: Optional[RedisCache], key: str, value: Dict[str, Any], ttl_sec: int) -> None:
    """JSON 저장 (실패는 경고만 남기고 무시)"""
    if cache is None:
        return

    try:
        cache.write(key, json.dumps(value, ensure_ascii=False), ttl_sec)
    except (redis.RedisError, TypeError) as e:
        logger.warning(f"캐시 저장 실패 ({key}): {e}")


def get_analysis(cache: Optional[RedisCache], track_key: str) -> Optional[Dict[str, Any]]:
    return get_json(cache, make_analysis_cache_key(track_key))


def set_analysis(cache: Optional[RedisCache], track_key: str, result: Dict[str, Any], ttl_sec: int) -> None:
    set_json(cache, make_analysis_cache_key(track_key), result, ttl_sec)
