# prompthub/services/stats_service.py
"""
Aggregate statistics, recomputed on every call.
Reads are not wrapped in one transaction; counts from concurrent writers may
be momentarily inconsistent with each other.
"""

from datetime import timedelta
from typing import Dict

from sqlalchemy import func, or_
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from prompthub.models.base import AsyncSessionLocal, utcnow
from prompthub.models.like import Like
from prompthub.models.prompt import Prompt
from prompthub.models.user import User
from prompthub.schemas.commons_schemas import Principal
from prompthub.exceptions import NotFound, StoreFault
from prompthub.utils.logger import logger

RECENT_PROMPT_WINDOW = timedelta(days=7)
ACTIVE_USER_WINDOW = timedelta(days=30)

class StatsService:
    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    async def compute_owner_stats(self, principal: Principal) -> Dict:
        try:
            async with self.session_factory() as session:
                user = await session.scalar(select(User).where(User.EMAIL == principal.email))
                if user is None:
                    # Valid session but no user row: data inconsistency, not a normal path
                    logger.warning(f" Session references missing user: {principal.email}")
                    raise NotFound("User not found")

                prompts_count = await session.scalar(
                    select(func.count()).select_from(Prompt).where(Prompt.AUTHOR_ID == user.USER_ID)
                )
                likes_count = await session.scalar(
                    select(func.count()).select_from(Like).where(Like.USER_ID == user.USER_ID)
                )
        except SQLAlchemyError as e:
            logger.error(f" Owner stats failed: {principal.email}: {e}")
            raise StoreFault("Failed to fetch stats") from e

        return {
            "promptsCount": prompts_count or 0,
            "likesCount": likes_count or 0,
            "joinedAt": user.CREATED_AT.isoformat(),
        }

    async def compute_platform_stats(self) -> Dict:
        now = utcnow()
        recent_author = select(Prompt.PROMPT_ID).where(
            Prompt.AUTHOR_ID == User.USER_ID,
            Prompt.CREATED_AT >= now - ACTIVE_USER_WINDOW,
        ).exists()
        any_like = select(Like.LIKE_ID).where(Like.USER_ID == User.USER_ID).exists()
        try:
            async with self.session_factory() as session:
                total_prompts = await session.scalar(select(func.count()).select_from(Prompt))
                public_prompts = await session.scalar(
                    select(func.count()).select_from(Prompt).where(Prompt.IS_PUBLIC.is_(True))
                )
                total_users = await session.scalar(select(func.count()).select_from(User))
                active_users = await session.scalar(
                    select(func.count()).select_from(User).where(or_(recent_author, any_like))
                )
                total_likes = await session.scalar(select(func.count()).select_from(Like))
                recent_prompts = await session.scalar(
                    select(func.count()).select_from(Prompt).where(
                        Prompt.CREATED_AT >= now - RECENT_PROMPT_WINDOW
                    )
                )
        except SQLAlchemyError as e:
            logger.error(f" Platform stats failed: {e}")
            raise StoreFault("Failed to fetch platform stats") from e

        return {
            "totalPrompts": total_prompts or 0,
            "publicPrompts": public_prompts or 0,
            "totalUsers": total_users or 0,
            "activeUsers": active_users or 0,
            "totalLikes": total_likes or 0,
            "recentPrompts": recent_prompts or 0,
            "lastUpdated": now.isoformat(),
        }

stats_service = StatsService()
