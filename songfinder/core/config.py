"""
SongFinder Backend Configuration
환경변수 기반 설정 관리
"""

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Engine settings
    ENGINE_VERSION: str = Field(default="lastfm_tags_v1", description="분석 엔진 버전")
    RECOMMENDATION_LIMIT: int = Field(default=10, ge=1, le=50, description="추천 곡 개수")
    SIMILAR_TRACKS_LIMIT: int = Field(default=30, ge=1, le=100, description="Last.fm 유사곡 요청 개수")
    MAX_CANDIDATES: int = Field(default=20, ge=1, le=100, description="특성 추정할 후보 최대 개수")
    FALLBACK_ARTISTS: int = Field(default=5, ge=0, le=20, description="폴백 시 유사 아티스트 수")
    FALLBACK_TOP_TRACKS: int = Field(default=5, ge=1, le=20, description="폴백 시 아티스트당 인기곡 수")
    MAX_WORKERS: int = Field(default=8, ge=1, le=32, description="후보 조회 스레드 수")

    # Last.fm settings
    LASTFM_API_KEY: Optional[str] = Field(default=None, description="Last.fm API 키")
    LASTFM_API_BASE: str = Field(default="https://ws.audioscrobbler.com/2.0/", description="Last.fm API URL")
    LASTFM_TIMEOUT_SEC: float = Field(default=10.0, gt=0, description="Last.fm 요청 타임아웃 (초)")

    # Redis settings
    REDIS_URL: str = Field(default="redis://localhost:6379/0", description="Redis 연결 URL")
    CACHE_TTL_SEC: int = Field(default=60 * 60 * 24 * 30, ge=0, description="분석 캐시 TTL (초, 30일)")

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO", description="로그 레벨")

    # .env 파일을 환경변수처럼 읽고, 이름 대소문자 구분
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


def get_settings() -> Settings:
    return Settings()
