# prompthub/services/auth_service.py
"""
Session lookup
Token exchange with the OAuth provider happens elsewhere; this service only
turns a stored session token into the caller's identity.
"""

from datetime import datetime, timedelta
from typing import Optional
import secrets

from sqlalchemy import delete
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from prompthub.models.base import AsyncSessionLocal, utcnow
from prompthub.models.session import UserSession
from prompthub.schemas.commons_schemas import Principal
from prompthub.exceptions import Unauthenticated, StoreFault
from prompthub.utils.logger import logger

class AuthService:
    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    async def resolve_principal(self, token: Optional[str]) -> Principal:
        if not token:
            raise Unauthenticated()
        try:
            async with self.session_factory() as session:
                row = await session.scalar(
                    select(UserSession).where(UserSession.SESSION_TOKEN == token)
                )
        except SQLAlchemyError as e:
            logger.error(f" Session lookup failed: {e}")
            raise StoreFault("Failed to verify session") from e

        if row is None or row.EXPIRES_AT <= utcnow():
            raise Unauthenticated()
        return Principal(email=row.USER_EMAIL, name=row.USER_NAME)

    async def create_session(self, email: str, name: Optional[str] = None,
                             lifetime: timedelta = timedelta(days=30)) -> str:
        """Store a session for a principal the identity provider has signed in."""
        token = secrets.token_urlsafe(32)
        async with self.session_factory() as session:
            session.add(UserSession(
                SESSION_TOKEN=token,
                USER_EMAIL=email,
                USER_NAME=name,
                EXPIRES_AT=utcnow() + lifetime,
            ))
            await session.commit()
        logger.info(f" Session created: {email}")
        return token

    async def purge_expired_sessions(self, now: Optional[datetime] = None) -> int:
        now = now or utcnow()
        async with self.session_factory() as session:
            result = await session.execute(
                delete(UserSession).where(UserSession.EXPIRES_AT <= now)
            )
            await session.commit()
        return result.rowcount or 0

auth_service = AuthService()
