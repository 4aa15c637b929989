"""
SongFinder Common Schemas
모든 에러 응답이 공유하는 본문
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """에러 응답 본문 {"message", "detail"}"""
    message: str = Field(..., description="사용자에게 보여줄 메시지")
    detail: Optional[str] = Field(default=None, description="필드별 검증 오류 등 부가 정보")


def error_body(message: str, detail: Optional[str] = None) -> Dict[str, Any]:
    return ErrorResponse(message=message, detail=detail).model_dump()
