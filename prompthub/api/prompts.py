# prompthub/api/prompts.py
"""
Prompt, view counter and like API
"""

from typing import Optional

from fastapi import APIRouter, Depends

from prompthub.api.deps import get_principal, get_optional_principal
from prompthub.schemas.commons_schemas import Principal, ErrorResponse
from prompthub.schemas.prompt_schemas import (
    ViewResponse, LikeResponse, PromptCreateRequest, PromptResponse
)
from prompthub.services.counter_service import counter_service
from prompthub.services.like_service import like_service
from prompthub.services.prompt_service import prompt_service

router = APIRouter(prefix="/prompts", tags=["prompts"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post("", response_model=PromptResponse, status_code=201)
async def create_prompt(request: PromptCreateRequest, principal: Principal = Depends(get_principal)):
    return await prompt_service.create_prompt(principal, request)


@router.get("/{prompt_id}", response_model=PromptResponse, responses=NOT_FOUND)
async def get_prompt(prompt_id: str):
    return await prompt_service.get_prompt(prompt_id)


@router.post("/{prompt_id}/view", response_model=ViewResponse, responses=NOT_FOUND)
async def record_view(prompt_id: str):
    """Count one view. Every call counts, repeat viewers included."""
    total_views = await counter_service.increment_view(prompt_id)
    return ViewResponse(success=True, totalViews=total_views)


@router.get("/{prompt_id}/view", response_model=ViewResponse, responses=NOT_FOUND)
async def get_views(prompt_id: str):
    total_views = await counter_service.get_view(prompt_id)
    return ViewResponse(success=True, totalViews=total_views)


@router.post("/{prompt_id}/like", response_model=LikeResponse, responses=NOT_FOUND)
async def toggle_like(prompt_id: str, principal: Principal = Depends(get_principal)):
    result = await like_service.toggle_like(principal, prompt_id)
    return LikeResponse(success=True, **result)


@router.get("/{prompt_id}/like", response_model=LikeResponse, responses=NOT_FOUND)
async def get_like_status(prompt_id: str, principal: Optional[Principal] = Depends(get_optional_principal)):
    result = await like_service.like_status(principal, prompt_id)
    return LikeResponse(success=True, **result)
