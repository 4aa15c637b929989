"""
SongFinder Analysis Schemas
곡 분석 요청/응답 스키마
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """분석 요청"""
    track: str = Field(..., min_length=1, max_length=200, description="곡 이름")
    artist: Optional[str] = Field(default=None, max_length=200, description="아티스트 (선택, 없으면 검색 1위)")


class ArtistRef(BaseModel):
    id: str
    name: str


class AlbumImage(BaseModel):
    url: str
    height: int
    width: int


class AlbumInfo(BaseModel):
    id: str
    name: str
    images: List[AlbumImage]


class TrackInfo(BaseModel):
    """분석 대상 곡 정보"""
    id: str
    name: str
    artists: List[ArtistRef]
    album: AlbumInfo
    external_url: str


class Fingerprint(BaseModel):
    """추정 오디오 특성 + 파생 태그"""
    bpm: int
    key: str
    mode: str
    time_signature: int
    loudness: float
    energy: float
    danceability: float
    valence: float
    acousticness: float
    instrumentalness: float
    liveness: float
    speechiness: float
    genres: List[str]
    vibe_tags: List[str]
    confidence: str  # "low" | "medium" | "high"


class ExplanationSections(BaseModel):
    rhythm: List[str]
    harmony_mood: List[str]
    sound_texture: List[str]


class ExplanationOut(BaseModel):
    tldr: List[str]
    sections: ExplanationSections


class RecommendationItem(BaseModel):
    """추천 곡"""
    id: str
    name: str
    artists: List[str]
    external_url: str
    reason: str
    album_art: Optional[str] = None
    distance: Optional[float] = None


class VibeProfileOut(BaseModel):
    primary: str
    secondary: List[str]
    descriptors: List[str]


class AnalysisResponse(BaseModel):
    """분석 응답"""
    engine_version: str
    cached: bool
    track_key: str
    track: TrackInfo
    fingerprint: Fingerprint
    explanation: ExplanationOut
    recommendations: List[RecommendationItem]
    recommendation_method: str  # "distance" | "similar_artists" | "lastfm_order" | "none"
    vibe_profile: VibeProfileOut
