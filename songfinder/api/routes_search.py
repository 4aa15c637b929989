"""
SongFinder Search API
Last.fm 곡 검색 라우터
"""

import logging
from fastapi import APIRouter, Request, HTTPException
from fastapi.concurrency import run_in_threadpool

from ..schemas.search import SearchRequest, SearchResponse, SearchItem
from ..schemas.common import ErrorResponse
from ..core.lastfm import LastFmApiError
from .errors import lastfm_http_error, UNEXPECTED_ERROR_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Engine not initialized"}
    }
)
async def search_tracks(request: Request, body: SearchRequest) -> SearchResponse:
    """
    곡 검색

    - query: 곡 이름 (1~200자)
    - artist: 아티스트 필터 (선택)
    """
    state = request.app.state

    if state.engine is None:
        raise HTTPException(status_code=503, detail="Analysis engine not initialized")

    try:
        results = await run_in_threadpool(state.engine.search, body.query, body.artist)
    except LastFmApiError as e:
        logger.error(f"[Search] Last.fm error: {e.message} (status={e.status_code}, code={e.error_code})")
        raise lastfm_http_error(e)
    except Exception:
        logger.exception("[Search] Unexpected error")
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR_MESSAGE)

    return SearchResponse(
        query=body.query,
        total=len(results),
        results=[SearchItem(**item) for item in results]
    )
