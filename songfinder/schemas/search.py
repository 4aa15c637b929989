"""
SongFinder Search Schemas
곡 검색 스키마
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """검색 요청"""
    query: str = Field(..., min_length=1, max_length=200, description="곡 이름")
    artist: Optional[str] = Field(default=None, max_length=200, description="아티스트 (선택)")


class SearchItem(BaseModel):
    """검색 결과 항목"""
    id: str
    name: str
    artist: str
    url: str
    listeners: int


class SearchResponse(BaseModel):
    """검색 응답"""
    query: str
    total: int
    results: List[SearchItem]
