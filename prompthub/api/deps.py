# prompthub/api/deps.py
"""
Request dependencies: the caller's Principal is resolved here and passed
explicitly into handlers.
"""

from typing import Optional

from fastapi import Request

from prompthub.config import settings
from prompthub.exceptions import Unauthenticated
from prompthub.schemas.commons_schemas import Principal
from prompthub.services.auth_service import auth_service

def extract_session_token(request: Request) -> Optional[str]:
    authorization = request.headers.get("Authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return request.cookies.get(settings.session_cookie_name)

async def get_principal(request: Request) -> Principal:
    return await auth_service.resolve_principal(extract_session_token(request))

async def get_optional_principal(request: Request) -> Optional[Principal]:
    try:
        return await auth_service.resolve_principal(extract_session_token(request))
    except Unauthenticated:
        return None
