"""
SongFinder Vibes API
바이브 분류 체계 조회
"""

from fastapi import APIRouter

from ..schemas.vibes import VibeItem, VibesResponse
from ..core.taxonomy import VIBE_GENRES, VIBE_META, VIBE_SIGNALS

router = APIRouter(tags=["vibes"])


@router.get("/vibes", response_model=VibesResponse)
async def list_vibes() -> VibesResponse:
    """바이브 장르 목록 (설명 + 대표 디스크립터)"""
    vibes = [
        VibeItem(
            name=name,
            description=VIBE_META[name],
            descriptors=list(VIBE_SIGNALS[name].descriptors),
        )
        for name in VIBE_GENRES
    ]
    return VibesResponse(total=len(vibes), vibes=vibes)
