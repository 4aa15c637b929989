"""
SongFinder Health Check API
헬스 체크 라우터
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ..core.taxonomy import VIBE_GENRES, DESCRIPTOR_SET

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str  # "ok" | "degraded"
    engine_version: str
    engine_loaded: bool
    lastfm_configured: bool
    redis_connected: bool
    vibe_count: int
    descriptor_count: int


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    서버 상태 확인

    Last.fm 키가 없으면 degraded (검색/분석 불가).
    Redis는 선택이라 상태에 영향 없음.
    """
    state = request.app.state
    config = state.config

    engine_loaded = getattr(state, "engine", None) is not None
    lastfm_configured = bool(config.LASTFM_API_KEY)

    cache = getattr(state, "redis_cache", None)
    redis_connected = cache.ping() if cache is not None else False

    return HealthResponse(
        status="ok" if engine_loaded and lastfm_configured else "degraded",
        engine_version=config.ENGINE_VERSION,
        engine_loaded=engine_loaded,
        lastfm_configured=lastfm_configured,
        redis_connected=redis_connected,
        vibe_count=len(VIBE_GENRES),
        descriptor_count=len(DESCRIPTOR_SET)
    )
