# prompthub/services/user_service.py
"""
Profile and per-user settings/privacy documents
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse
import uuid

from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.models.base import AsyncSessionLocal, utcnow
from prompthub.models.user import User
from prompthub.schemas.commons_schemas import Principal
from prompthub.schemas.user_schemas import ProfileUpdateRequest
from prompthub.exceptions import StoreFault, ValidationFailed
from prompthub.utils.logger import logger

BLOB_COLUMNS = {
    "settings": "SETTINGS",
    "privacy": "PRIVACY",
}

NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500

def _is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)

def validate_profile(request: ProfileUpdateRequest) -> None:
    if request.name and len(request.name) > NAME_MAX_LENGTH:
        raise ValidationFailed(f"Name must be at most {NAME_MAX_LENGTH} characters")
    if request.bio and len(request.bio) > BIO_MAX_LENGTH:
        raise ValidationFailed(f"Bio must be at most {BIO_MAX_LENGTH} characters")
    if request.website and not _is_valid_url(request.website):
        raise ValidationFailed("Please enter a valid website URL")

async def find_user(session: AsyncSession, email: str) -> Optional[User]:
    return await session.scalar(select(User).where(User.EMAIL == email))

async def ensure_user(session: AsyncSession, principal: Principal) -> User:
    """Return the principal's user row, creating it on first sign-in."""
    user = await find_user(session, principal.email)
    if user is not None:
        return user
    user = User(
        USER_ID=str(uuid.uuid4()),
        EMAIL=principal.email,
        NAME=principal.name or "",
        BIO="",
        WEBSITE="",
        LOCATION="",
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError:
        # Another request created it first
        await session.rollback()
        user = await find_user(session, principal.email)
    else:
        logger.info(f" User created: {principal.email}")
    return user

class UserService:
    def __init__(self, session_factory=AsyncSessionLocal):
        self.session_factory = session_factory

    async def get_profile(self, principal: Principal) -> Dict[str, Any]:
        try:
            async with self.session_factory() as session:
                user = await ensure_user(session, principal)
                return user.to_profile()
        except SQLAlchemyError as e:
            logger.error(f" Profile lookup failed: {principal.email}: {e}")
            raise StoreFault() from e

    async def update_profile(self, principal: Principal, request: ProfileUpdateRequest) -> Dict[str, Any]:
        validate_profile(request)
        try:
            async with self.session_factory() as session:
                user = await ensure_user(session, principal)
                user.NAME = request.name or ""
                user.BIO = request.bio or ""
                user.WEBSITE = request.website or ""
                user.LOCATION = request.location or ""
                user.UPDATED_AT = utcnow()
                await session.commit()
                logger.info(f" Profile updated: {principal.email}")
                return user.to_profile()
        except SQLAlchemyError as e:
            logger.error(f" Profile update failed: {principal.email}: {e}")
            raise StoreFault() from e

    async def get_document(self, principal: Principal, kind: str) -> Dict[str, Any]:
        column = BLOB_COLUMNS[kind]
        try:
            async with self.session_factory() as session:
                user = await find_user(session, principal.email)
        except SQLAlchemyError as e:
            logger.error(f" {kind} lookup failed: {principal.email}: {e}")
            raise StoreFault() from e
        if user is None:
            return {}
        return getattr(user, column) or {}

    async def put_document(self, principal: Principal, kind: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the whole document; contents are stored as given."""
        column = BLOB_COLUMNS[kind]
        try:
            async with self.session_factory() as session:
                user = await ensure_user(session, principal)
                setattr(user, column, dict(document))
                user.UPDATED_AT = utcnow()
                await session.commit()
                logger.info(f" {kind} saved: {principal.email}")
                return getattr(user, column)
        except SQLAlchemyError as e:
            logger.error(f" {kind} save failed: {principal.email}: {e}")
            raise StoreFault() from e

user_service = UserService()
