# prompthub/schemas/prompt_schemas.py
"""
Prompt and counter schemas
"""

from pydantic import BaseModel, Field
from typing import Optional
from .commons_schemas import BaseResponse

class ViewResponse(BaseResponse):
    totalViews: int

class LikeResponse(BaseResponse):
    liked: bool
    totalLikes: int

class PromptCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    content: str = Field(..., min_length=1)
    isPublic: bool = True

class PromptResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    content: str
    isPublic: bool
    views: int
    likes: int
    authorId: str
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None
