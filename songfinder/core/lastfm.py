"""
SongFinder Last.fm Client
Last.fm 메타데이터 API 래퍼 (검색, 곡 정보 + 태그, 유사곡, 유사 아티스트)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

LASTFM_API_BASE = "https://ws.audioscrobbler.com/2.0/"

# Last.fm 에러 코드 6 = 대상 없음
ERROR_NOT_FOUND = 6

# 실제 앨범 아트가 아닌 기본 회색 별 이미지
LASTFM_PLACEHOLDER_HASHES = (
    "2a96cbd8b46e442fc41c2b86b821562f",
    "c6f59c1e5e7240a4c0d427abd71f3dbb",
)

IMAGE_SIZE_PRIORITY = ("mega", "extralarge", "large", "medium", "small")


# =============================================================================
# 에러
# =============================================================================

class LastFmApiError(Exception):
    """Last.fm 호출 실패 (HTTP 에러 또는 API 레벨 에러)"""

    def __init__(self, message: str, status_code: int, error_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code


class TrackNotFoundError(LastFmApiError):
    """곡/아티스트를 찾을 수 없음"""

    def __init__(self, message: str = "Track not found", error_code: Optional[int] = ERROR_NOT_FOUND):
        super().__init__(message, 404, error_code)


# =============================================================================
# 데이터 타입
# =============================================================================

@dataclass
class TrackStub:
    """검색 결과 / 아티스트 인기곡"""
    id: str
    name: str
    artist: str
    url: str = ""
    listeners: int = 0
    image_url: Optional[str] = None


@dataclass
class TrackDetails:
    """track.getInfo 결과 (정규화)"""
    id: str
    name: str
    artist: str
    artist_id: str
    album: str
    album_id: str
    album_image_url: Optional[str]
    external_url: str
    duration: float          # 초
    tags: List[str] = field(default_factory=list)
    playcount: int = 0
    listeners: int = 0


@dataclass
class SimilarTrack:
    id: str
    name: str
    artist: str
    artist_id: str
    external_url: str
    match: float
    image_url: Optional[str] = None


@dataclass
class SimilarArtist:
    name: str
    match: float = 0.0
    url: str = ""


# =============================================================================
# 헬퍼
# =============================================================================

def _to_base36(number: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if number == 0:
        return "0"
    out = []
    while number:
        number, rem = divmod(number, 36)
        out.append(digits[rem])
    return "".join(reversed(out))


def generate_track_id(name: str, artist: str) -> str:
    """
    곡 이름 + 아티스트로 결정적 ID 생성

    32비트 롤링 해시 (hash * 31 + code unit)의 절댓값을 36진수로, 8자리 zero-pad
    """
    normalized = f"{name.lower().strip()}-{artist.lower().strip()}"
    raw = normalized.encode("utf-16-le")

    value = 0
    for i in range(0, len(raw), 2):
        code_unit = raw[i] | (raw[i + 1] << 8)
        value = ((value << 5) - value + code_unit) & 0xFFFFFFFF

    # 부호 있는 32비트로 해석
    if value >= 0x80000000:
        value -= 0x100000000

    return _to_base36(abs(value)).rjust(8, "0")


def _is_placeholder(url: str) -> bool:
    return any(h in url for h in LASTFM_PLACEHOLDER_HASHES)


def get_best_image_url(images: Optional[List[Dict[str, Any]]]) -> Optional[str]:
    """
    Last.fm 이미지 목록에서 가장 큰 실제 이미지 URL 선택

    빈 URL과 placeholder 이미지는 건너뛴다.
    """
    if not images:
        return None

    for size in IMAGE_SIZE_PRIORITY:
        for image in images:
            url = (image.get("#text") or "").strip()
            if image.get("size") == size and url:
                if not _is_placeholder(url):
                    return url
                break

    for image in images:
        url = (image.get("#text") or "").strip()
        if url and not _is_placeholder(url):
            return url
    return None


def _as_list(value: Any) -> List[Any]:
    """Last.fm은 항목이 하나일 때 리스트 대신 객체를 돌려준다"""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _to_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _to_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _artist_name(value: Any) -> str:
    # search 결과는 문자열, 나머지는 {"name": ...}
    if isinstance(value, dict):
        return value.get("name") or value.get("#text") or ""
    return value or ""


def _tag_names(container: Any) -> List[str]:
    if not isinstance(container, dict):
        return []
    return [t["name"] for t in _as_list(container.get("tag")) if isinstance(t, dict) and t.get("name")]


# =============================================================================
# 클라이언트
# =============================================================================

class LastFmClient:
    """
    Last.fm REST 클라이언트

    Args:
        api_key: Last.fm API 키 (없으면 모든 호출이 500 에러)
        base_url: API 엔드포인트
        timeout_sec: 요청 타임아웃
        session: 테스트용 requests.Session 주입
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = LASTFM_API_BASE,
        timeout_sec: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout_sec = timeout_sec
        self._session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def close(self) -> None:
        self._session.close()

    def _request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise LastFmApiError(
                "Missing Last.fm API key. Set LASTFM_API_KEY environment variable.",
                500,
            )

        query = {"api_key": self.api_key, "format": "json", **params}
        try:
            response = self._session.get(self.base_url, params=query, timeout=self.timeout_sec)
        except requests.RequestException as e:
            raise LastFmApiError(f"Last.fm request failed: {e}", 502) from e

        if not response.ok:
            raise LastFmApiError(f"Last.fm API error: {response.reason}", response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise LastFmApiError("Last.fm returned an invalid response", 502) from e

        # API 레벨 에러 (HTTP 200 + {"error": code, "message": ...})
        if isinstance(data, dict) and data.get("error"):
            error_code = _to_int(data.get("error"))
            message = data.get("message") or "Unknown Last.fm API error"
            if error_code == ERROR_NOT_FOUND:
                raise TrackNotFoundError(message)
            raise LastFmApiError(message, 400, error_code)

        return data

    def _request_or_empty(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """유사곡/유사 아티스트 조회용: 대상 없음(6)은 빈 결과"""
        try:
            return self._request(params)
        except TrackNotFoundError:
            logger.debug(f"Last.fm {params.get('method')}: nothing found")
            return {}

    # -------------------------------------------------------------------------
    # 검색
    # -------------------------------------------------------------------------

    def search_tracks(self, name: str, artist: Optional[str] = None, limit: int = 10) -> List[TrackStub]:
        params: Dict[str, Any] = {"method": "track.search", "track": name, "limit": limit}
        if artist:
            params["artist"] = artist

        data = self._request(params)
        matches = data.get("results", {}).get("trackmatches", {})
        tracks = _as_list(matches.get("track") if isinstance(matches, dict) else None)

        return [
            TrackStub(
                id=generate_track_id(t.get("name", ""), _artist_name(t.get("artist"))),
                name=t.get("name", ""),
                artist=_artist_name(t.get("artist")),
                url=t.get("url", ""),
                listeners=_to_int(t.get("listeners")),
                image_url=get_best_image_url(t.get("image")),
            )
            for t in tracks
        ]

    # -------------------------------------------------------------------------
    # 곡 / 아티스트 정보
    # -------------------------------------------------------------------------

    def get_track_info(self, name: str, artist: str) -> TrackDetails:
        """
        곡 상세 정보 (곡 태그만 포함)

        Raises:
            TrackNotFoundError: 곡 없음
        """
        data = self._request({
            "method": "track.getInfo",
            "track": name,
            "artist": artist,
            "autocorrect": 1,
        })
        track = data.get("track")
        if not track:
            raise TrackNotFoundError()

        track_name = track.get("name") or name
        artist_name = _artist_name(track.get("artist")) or artist
        album = track.get("album") or {}
        album_name = album.get("title") or "Unknown Album"

        return TrackDetails(
            id=generate_track_id(track_name, artist_name),
            name=track_name,
            artist=artist_name,
            artist_id=generate_track_id("artist", artist_name),
            album=album_name,
            album_id=generate_track_id("album", album_name),
            album_image_url=get_best_image_url(album.get("image")),
            external_url=track.get("url", ""),
            duration=_to_int(track.get("duration")) / 1000,
            tags=_tag_names(track.get("toptags")),
            playcount=_to_int(track.get("playcount")),
            listeners=_to_int(track.get("listeners")),
        )

    def get_artist_tags(self, artist: str) -> List[str]:
        """
        아티스트 태그

        Raises:
            TrackNotFoundError: 아티스트 없음
        """
        data = self._request({"method": "artist.getInfo", "artist": artist, "autocorrect": 1})
        info = data.get("artist")
        if not info:
            raise TrackNotFoundError("Artist not found")
        return _tag_names(info.get("tags"))

    def with_artist_tags(self, tags: List[str], artist: str) -> List[str]:
        """곡 태그 뒤에 아티스트 태그를 붙여 중복 제거 (아티스트 태그는 선택)"""
        try:
            artist_tags = self.get_artist_tags(artist)
        except LastFmApiError as e:
            logger.debug(f"Artist tags unavailable for {artist}: {e}")
            artist_tags = []
        return list(dict.fromkeys(list(tags) + artist_tags))

    def get_track_tags(self, name: str, artist: str) -> List[str]:
        """곡 태그 + 아티스트 태그"""
        details = self.get_track_info(name, artist)
        return self.with_artist_tags(details.tags, details.artist)

    # -------------------------------------------------------------------------
    # 유사곡 / 유사 아티스트
    # -------------------------------------------------------------------------

    def get_similar_tracks(self, name: str, artist: str, limit: int = 30) -> List[SimilarTrack]:
        data = self._request_or_empty({
            "method": "track.getSimilar",
            "track": name,
            "artist": artist,
            "limit": limit,
            "autocorrect": 1,
        })
        tracks = _as_list(data.get("similartracks", {}).get("track"))

        results = []
        for t in tracks:
            artist_name = _artist_name(t.get("artist"))
            results.append(SimilarTrack(
                id=generate_track_id(t.get("name", ""), artist_name),
                name=t.get("name", ""),
                artist=artist_name,
                artist_id=generate_track_id("artist", artist_name),
                external_url=t.get("url", ""),
                match=_to_float(t.get("match")),
                image_url=get_best_image_url(t.get("image")),
            ))
        return results

    def get_similar_artists(self, artist: str, limit: int = 10) -> List[SimilarArtist]:
        data = self._request_or_empty({
            "method": "artist.getSimilar",
            "artist": artist,
            "limit": limit,
            "autocorrect": 1,
        })
        artists = _as_list(data.get("similarartists", {}).get("artist"))
        return [
            SimilarArtist(name=a.get("name", ""), match=_to_float(a.get("match")), url=a.get("url", ""))
            for a in artists
            if a.get("name")
        ]

    def get_artist_top_tracks(self, artist: str, limit: int = 10) -> List[TrackStub]:
        data = self._request_or_empty({
            "method": "artist.getTopTracks",
            "artist": artist,
            "limit": limit,
            "autocorrect": 1,
        })
        tracks = _as_list(data.get("toptracks", {}).get("track"))

        results = []
        for t in tracks:
            artist_name = _artist_name(t.get("artist")) or artist
            results.append(TrackStub(
                id=generate_track_id(t.get("name", ""), artist_name),
                name=t.get("name", ""),
                artist=artist_name,
                url=t.get("url", ""),
                listeners=_to_int(t.get("listeners")),
                image_url=get_best_image_url(t.get("image")),
            ))
        return results
