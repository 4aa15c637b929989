"""
SongFinder Vibe Schemas
바이브 분류 체계 스키마
"""

from typing import List
from pydantic import BaseModel


class VibeItem(BaseModel):
    name: str
    description: str
    descriptors: List[str]


class VibesResponse(BaseModel):
    total: int
    vibes: List[VibeItem]
