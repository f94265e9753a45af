# prompthub/services/like_service.py
"""
Like toggling
The relation row and the LIKES counter change in one transaction; the
unique (user, prompt) constraint keeps concurrent double-likes out.
"""

from typing import Dict, Optional
import uuid

from sqlalchemy import delete, update
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from prompthub.models.base import AsyncSessionLocal
from prompthub.models.like import Like
from prompthub.models.prompt import Prompt
from prompthub.models.user import User
from prompthub.schemas.commons_schemas import Principal
from prompthub.exceptions import NotFound, StoreFault
from prompthub.utils.logger import logger

class LikeService:
    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    async def toggle_like(self, principal: Principal, prompt_id: str) -> Dict:
        try:
            try:
                async with self.session_factory() as session:
                    async with session.begin():
                        user_id = await session.scalar(
                            select(User.USER_ID).where(User.EMAIL == principal.email)
                        )
                        if user_id is None:
                            raise NotFound("User not found")
                        exists = await session.scalar(
                            select(Prompt.PROMPT_ID).where(Prompt.PROMPT_ID == prompt_id)
                        )
                        if exists is None:
                            raise NotFound("Prompt not found")

                        removed = await session.execute(
                            delete(Like).where(Like.USER_ID == user_id, Like.PROMPT_ID == prompt_id)
                        )
                        if removed.rowcount:
                            await session.execute(
                                update(Prompt)
                                .where(Prompt.PROMPT_ID == prompt_id, Prompt.LIKES > 0)
                                .values(LIKES=Prompt.LIKES - 1)
                                .execution_options(synchronize_session=False)
                            )
                            liked = False
                        else:
                            session.add(Like(LIKE_ID=str(uuid.uuid4()), USER_ID=user_id, PROMPT_ID=prompt_id))
                            await session.flush()
                            await session.execute(
                                update(Prompt)
                                .where(Prompt.PROMPT_ID == prompt_id)
                                .values(LIKES=Prompt.LIKES + 1)
                                .execution_options(synchronize_session=False)
                            )
                            liked = True
                        total = await session.scalar(
                            select(Prompt.LIKES).where(Prompt.PROMPT_ID == prompt_id)
                        )
            except IntegrityError:
                # A concurrent request from the same user inserted the like first
                logger.warning(f" Duplicate like ignored: {principal.email} -> {prompt_id}")
                liked = True
                async with self.session_factory() as session:
                    total = await session.scalar(
                        select(Prompt.LIKES).where(Prompt.PROMPT_ID == prompt_id)
                    )
        except SQLAlchemyError as e:
            logger.error(f" Like toggle failed: {principal.email} -> {prompt_id}: {e}")
            raise StoreFault("Operation failed, please retry") from e

        logger.info(f" Like toggled: {principal.email} -> {prompt_id} (liked={liked})")
        return {"liked": liked, "totalLikes": total or 0}

    async def like_status(self, principal: Optional[Principal], prompt_id: str) -> Dict:
        try:
            async with self.session_factory() as session:
                total = await session.scalar(
                    select(Prompt.LIKES).where(Prompt.PROMPT_ID == prompt_id)
                )
                if total is None:
                    raise NotFound("Prompt not found")

                liked = False
                if principal is not None:
                    like_id = await session.scalar(
                        select(Like.LIKE_ID)
                        .join(User, User.USER_ID == Like.USER_ID)
                        .where(User.EMAIL == principal.email, Like.PROMPT_ID == prompt_id)
                    )
                    liked = like_id is not None
        except SQLAlchemyError as e:
            logger.error(f" Like status lookup failed: {prompt_id}: {e}")
            raise StoreFault("Lookup failed, please retry") from e

        return {"liked": liked, "totalLikes": total}

like_service = LikeService()
