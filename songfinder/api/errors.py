"""
SongFinder API Errors
Last.fm 에러 -> HTTP 응답 매핑
"""

from fastapi import HTTPException

from ..core.lastfm import ERROR_NOT_FOUND, LastFmApiError, TrackNotFoundError

TRACK_NOT_FOUND_MESSAGE = "Track not found. Please check the song name and artist."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


def lastfm_http_error(error: LastFmApiError) -> HTTPException:
    """
    LastFmApiError를 HTTPException으로 변환

    - 곡 없음 (404 또는 Last.fm 코드 6) -> 404
    - 그 외 -> Last.fm 상태 코드 (에러 코드 범위가 아니면 502)
    """
    if (
        isinstance(error, TrackNotFoundError)
        or error.status_code == 404
        or error.error_code == ERROR_NOT_FOUND
    ):
        return HTTPException(status_code=404, detail=TRACK_NOT_FOUND_MESSAGE)

    status_code = error.status_code if 400 <= error.status_code < 600 else 502
    return HTTPException(status_code=status_code, detail=error.message)
