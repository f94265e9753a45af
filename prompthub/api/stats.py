# prompthub/api/stats.py
"""
Aggregate statistics API
"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from prompthub.api.deps import get_principal
from prompthub.config import settings
from prompthub.exceptions import StoreFault
from prompthub.models.base import utcnow
from prompthub.schemas.commons_schemas import Principal, ErrorResponse
from prompthub.schemas.stats_schemas import OwnerStats, PlatformStats
from prompthub.services.stats_service import stats_service
from prompthub.utils.logger import logger

router = APIRouter(tags=["stats"])


@router.get(
    "/stats",
    response_model=OwnerStats,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_owner_stats(response: Response, principal: Principal = Depends(get_principal)):
    """Counts for the signed-in user"""
    logger.info(f" Stats request: {principal.email}")
    stats = await stats_service.compute_owner_stats(principal)
    response.headers["Cache-Control"] = settings.stats_cache_control
    return stats


@router.get("/platform-stats", response_model=PlatformStats)
async def get_platform_stats(response: Response):
    try:
        stats = await stats_service.compute_platform_stats()
    except StoreFault as e:
        return JSONResponse(
            status_code=200,
            content={
                "totalPrompts": 0,
                "publicPrompts": 0,
                "totalUsers": 0,
                "activeUsers": 0,
                "totalLikes": 0,
                "recentPrompts": 0,
                "lastUpdated": utcnow().isoformat(),
                "error": e.message,
            },
        )
    response.headers["Cache-Control"] = settings.stats_cache_control
    return stats
