"""
SongFinder Backend Main Application
FastAPI 앱 및 startup/shutdown 이벤트
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings
from .core.engine import AnalysisEngine
from .core.cache import RedisCache
from .core.lastfm import LastFmClient
from .core.vibes import get_normalized_signals, validate_taxonomy
from .api import routes_health, routes_search, routes_analyze, routes_vibes
from .schemas.common import error_body
from .utils.logging import setup_logging

# 로깅 설정
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 라이프사이클 관리"""
    # Startup
    logger.info("=" * 60)
    logger.info("SongFinder Backend Starting...")
    logger.info("=" * 60)

    # 설정 로드
    config = get_settings()
    app.state.config = config
    setup_logging(config.LOG_LEVEL)

    logger.info(f"Engine Version: {config.ENGINE_VERSION}")
    logger.info(f"Last.fm API key configured: {bool(config.LASTFM_API_KEY)}")

    # 분류 테이블 검증 (실패 시 앱 시작 중단) + 신호 테이블 미리 빌드
    validate_taxonomy()
    get_normalized_signals()

    # Redis 캐시 초기화
    app.state.redis_cache = RedisCache(config.REDIS_URL)

    # Last.fm 클라이언트 + 분석 엔진 초기화
    client = LastFmClient(
        api_key=config.LASTFM_API_KEY,
        base_url=config.LASTFM_API_BASE,
        timeout_sec=config.LASTFM_TIMEOUT_SEC
    )
    app.state.lastfm_client = client
    if not client.is_configured:
        logger.warning("LASTFM_API_KEY not set: search/analyze will fail until configured")

    app.state.engine = AnalysisEngine(
        client=client,
        recommendation_limit=config.RECOMMENDATION_LIMIT,
        similar_tracks_limit=config.SIMILAR_TRACKS_LIMIT,
        max_candidates=config.MAX_CANDIDATES,
        fallback_artists=config.FALLBACK_ARTISTS,
        fallback_top_tracks=config.FALLBACK_TOP_TRACKS,
        max_workers=config.MAX_WORKERS
    )

    logger.info("=" * 60)
    logger.info("SongFinder Backend Ready!")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("SongFinder Backend Shutting down...")
    client.close()
    app.state.redis_cache.close()


# FastAPI 앱 생성
app = FastAPI(
    title="SongFinder API",
    description="Last.fm 태그 기반 곡 분석 + 바이브 분류 + 유사곡 추천 API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패 -> 400 {"message", "detail": "field: msg, ..."}"""
    details = ", ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()) if part != 'body')}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.info(f"Validation error on {request.url.path}: {details}")
    return JSONResponse(status_code=400, content=error_body("Validation error", details))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException도 ErrorResponse 형식으로"""
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))


# 라우터 등록
app.include_router(routes_health.router)
app.include_router(routes_search.router)
app.include_router(routes_analyze.router)
app.include_router(routes_vibes.router)


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "SongFinder API",
        "version": "1.0.0",
        "docs": "/docs"
    }
