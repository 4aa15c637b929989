"""
SongFinder Analysis API
곡 분석 + 캐시된 분석 조회 라우터
"""

import logging
from fastapi import APIRouter, Request, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from ..schemas.analyze import AnalyzeRequest, AnalysisResponse
from ..schemas.common import ErrorResponse
from ..core.cache import make_track_key, get_analysis, set_analysis
from ..core.lastfm import LastFmApiError
from .errors import lastfm_http_error, UNEXPECTED_ERROR_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analyze"])


def _from_cache(data: dict, engine_version: str, track_key: str):
    """
    캐시 데이터 -> 응답

    저장 당시 엔진 버전이 현재와 다르거나 스키마가 맞지 않으면 None
    """
    if not isinstance(data, dict):
        logger.warning(f"캐시 데이터 형식 불일치, 무시: {track_key}")
        return None

    data = dict(data)
    cached_version = data.pop("engine_version", None)
    if cached_version != engine_version:
        logger.info(f"캐시 엔진 버전 불일치, 무시: {track_key} ({cached_version} != {engine_version})")
        return None

    try:
        return AnalysisResponse(
            engine_version=engine_version,
            cached=True,
            track_key=track_key,
            **data
        )
    except (ValidationError, TypeError) as e:
        logger.warning(f"캐시 데이터 형식 불일치, 무시: {track_key} ({e})")
        return None


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        404: {"model": ErrorResponse, "description": "Track not found"},
        503: {"model": ErrorResponse, "description": "Engine not initialized"}
    }
)
async def analyze(request: Request, body: AnalyzeRequest) -> AnalysisResponse:
    """
    곡 분석

    - track: 곡 이름 (1~200자)
    - artist: 아티스트 (선택, 없으면 검색 1위 결과)

    캐시가 있으면 캐시에서 반환, 없으면 엔진으로 분석 후 캐시 저장
    """
    state = request.app.state
    config = state.config

    # 엔진 확인
    if state.engine is None:
        raise HTTPException(status_code=503, detail="Analysis engine not initialized")

    # 캐시 키 생성 (입력 그대로 기준, 검색 보정 전)
    track_key = make_track_key(body.artist, body.track)

    # 캐시 조회
    cached_data = get_analysis(state.redis_cache, track_key)
    if cached_data is not None:
        response = _from_cache(cached_data, config.ENGINE_VERSION, track_key)
        if response is not None:
            logger.debug(f"Cache hit: {track_key}")
            return response

    logger.debug(f"Cache miss: {track_key}")

    # 분석 실행 (블로킹 I/O는 스레드풀에서)
    try:
        result = await run_in_threadpool(state.engine.analyze, body.track, body.artist)
    except LastFmApiError as e:
        logger.warning(f"Last.fm error for {track_key}: {e.message} (status={e.status_code}, code={e.error_code})")
        raise lastfm_http_error(e)
    except Exception:
        logger.exception(f"Analysis error: {track_key}")
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR_MESSAGE)

    # 응답 생성
    response = AnalysisResponse(
        engine_version=config.ENGINE_VERSION,
        cached=False,
        track_key=track_key,
        **result
    )

    # 캐시 저장 (엔진 버전 함께 기록)
    set_analysis(
        state.redis_cache,
        track_key,
        {**result, "engine_version": config.ENGINE_VERSION},
        config.CACHE_TTL_SEC
    )

    return response


@router.get(
    "/track/{track_key:path}",
    response_model=AnalysisResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Analysis not found or expired"},
        503: {"model": ErrorResponse, "description": "Cache not available"}
    }
)
async def get_cached_analysis(request: Request, track_key: str) -> AnalysisResponse:
    """
    캐시된 분석 조회

    - track_key: "artist::track" 형식 (소문자)
    """
    state = request.app.state
    config = state.config

    cache = state.redis_cache
    if cache is None or not cache.is_connected:
        raise HTTPException(status_code=503, detail="Caching not configured")

    cached_data = get_analysis(cache, track_key)
    response = _from_cache(cached_data, config.ENGINE_VERSION, track_key) if cached_data is not None else None
    if response is None:
        raise HTTPException(status_code=404, detail="Analysis not found or expired")

    return response
