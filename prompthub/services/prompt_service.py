# prompthub/services/prompt_service.py
from typing import Dict
import uuid

from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from prompthub.models.base import AsyncSessionLocal
from prompthub.models.prompt import Prompt
from prompthub.schemas.commons_schemas import Principal
from prompthub.schemas.prompt_schemas import PromptCreateRequest
from prompthub.services.user_service import ensure_user
from prompthub.exceptions import NotFound, StoreFault
from prompthub.utils.logger import logger

class PromptService:
    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    async def create_prompt(self, principal: Principal, request: PromptCreateRequest) -> Dict:
        try:
            async with self.session_factory() as session:
                author = await ensure_user(session, principal)
                prompt = Prompt(
                    PROMPT_ID=str(uuid.uuid4()),
                    TITLE=request.title,
                    DESCRIPTION=request.description,
                    CONTENT=request.content,
                    IS_PUBLIC=request.isPublic,
                    VIEWS=0,
                    LIKES=0,
                    AUTHOR_ID=author.USER_ID,
                )
                session.add(prompt)
                await session.commit()
                logger.info(f" Prompt created: {prompt.PROMPT_ID} by {principal.email}")
                return prompt.to_dict()
        except SQLAlchemyError as e:
            logger.error(f" Prompt creation failed: {e}")
            raise StoreFault("Failed to create prompt") from e

    async def get_prompt(self, prompt_id: str) -> Dict:
        try:
            async with self.session_factory() as session:
                prompt = await session.scalar(select(Prompt).where(Prompt.PROMPT_ID == prompt_id))
        except SQLAlchemyError as e:
            logger.error(f" Prompt lookup failed: {prompt_id}: {e}")
            raise StoreFault("Failed to fetch prompt") from e
        if prompt is None:
            raise NotFound("Prompt not found")
        return prompt.to_dict()

prompt_service = PromptService()
