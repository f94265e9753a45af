# prompthub/api/user.py
"""
Profile, settings and privacy API
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from prompthub.api.deps import get_principal
from prompthub.schemas.commons_schemas import Principal
from prompthub.schemas.user_schemas import ProfileUpdateRequest, ProfileUpdateResponse, UserProfile
from prompthub.services.user_service import user_service
from prompthub.utils.logger import logger

router = APIRouter(prefix="/user", tags=["user"])


@router.get("", response_model=UserProfile)
async def get_profile(principal: Principal = Depends(get_principal)):
    return await user_service.get_profile(principal)


@router.put("", response_model=ProfileUpdateResponse)
async def update_profile(request: ProfileUpdateRequest, principal: Principal = Depends(get_principal)):
    user = await user_service.update_profile(principal, request)
    return ProfileUpdateResponse(message="Profile updated", user=user)


@router.get("/settings")
async def get_settings(principal: Principal = Depends(get_principal)) -> Dict[str, Any]:
    return await user_service.get_document(principal, "settings")


@router.put("/settings")
async def put_settings(document: Dict[str, Any] = Body(...), principal: Principal = Depends(get_principal)) -> Dict[str, Any]:
    logger.info(f" Saving settings: {principal.email}")
    return await user_service.put_document(principal, "settings", document)


@router.get("/privacy")
async def get_privacy(principal: Principal = Depends(get_principal)) -> Dict[str, Any]:
    return await user_service.get_document(principal, "privacy")


@router.put("/privacy")
async def put_privacy(document: Dict[str, Any] = Body(...), principal: Principal = Depends(get_principal)) -> Dict[str, Any]:
    logger.info(f" Saving privacy settings: {principal.email}")
    return await user_service.put_document(principal, "privacy", document)
