# prompthub/services/counter_service.py
"""
View counter store
The increment is a single UPDATE ... SET VIEWS = VIEWS + n so concurrent
viewers can never overwrite each other's increments.
"""

from sqlalchemy import update
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from prompthub.models.base import AsyncSessionLocal
from prompthub.models.prompt import Prompt
from prompthub.exceptions import NotFound, StoreFault
from prompthub.utils.logger import logger

PROMPT_NOT_FOUND = "Prompt not found"

class CounterService:
    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory
        logger.info(" CounterService initialized")

    async def increment_view(self, prompt_id: str, amount: int = 1) -> int:
        """Atomically add `amount` views and return the count seen by this transaction."""
        if amount < 1:
            raise ValueError("amount must be positive")
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        update(Prompt)
                        .where(Prompt.PROMPT_ID == prompt_id)
                        .values(VIEWS=Prompt.VIEWS + amount)
                        .execution_options(synchronize_session=False)
                    )
                    if result.rowcount == 0:
                        raise NotFound(PROMPT_NOT_FOUND)
                    # Row is still locked by our UPDATE, so this read includes our increment
                    views = await session.scalar(
                        select(Prompt.VIEWS).where(Prompt.PROMPT_ID == prompt_id)
                    )
            logger.debug(f" View recorded: prompt={prompt_id}, views={views}")
            return views
        except SQLAlchemyError as e:
            logger.error(f" View increment failed: prompt={prompt_id}: {e}")
            raise StoreFault("Failed to update views") from e

    async def get_view(self, prompt_id: str) -> int:
        try:
            async with self.session_factory() as session:
                views = await session.scalar(
                    select(Prompt.VIEWS).where(Prompt.PROMPT_ID == prompt_id)
                )
        except SQLAlchemyError as e:
            logger.error(f" View lookup failed: prompt={prompt_id}: {e}")
            raise StoreFault("Failed to fetch views") from e
        if views is None:
            raise NotFound(PROMPT_NOT_FOUND)
        return views

# Global instance
counter_service = CounterService()
