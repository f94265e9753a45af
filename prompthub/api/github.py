# prompthub/api/github.py
"""
Repository metrics API - always 200, zeros when GitHub is unavailable
"""

from fastapi import APIRouter, Response

from prompthub.config import settings
from prompthub.schemas.github_schemas import GithubStats
from prompthub.services.github_service import github_service, result_to_response, Degraded
from prompthub.utils.logger import logger

router = APIRouter(prefix="/github", tags=["github"])


@router.get("/stats", response_model=GithubStats)
async def get_github_stats(response: Response):
    result = await github_service.fetch_external_metrics(settings.github_repo, settings.github_token)
    if isinstance(result, Degraded):
        logger.warning(f" Serving default GitHub stats: {result.cause}")
    response.headers["Cache-Control"] = settings.github_cache_control
    return result_to_response(result)
