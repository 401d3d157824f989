from typing import Optional

from pydantic import BaseModel, ConfigDict


class IdeaRequest(BaseModel):
    title: str = ""
    description: str = ""


class IdeaUpdateRequest(BaseModel):
    """부분 수정 요청 - 전달된 필드만 반영"""
    title: Optional[str] = None
    description: Optional[str] = None


class IdeaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
