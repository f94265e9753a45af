# prompthub/schemas/commons_schemas.py
"""
Common schemas shared by several APIs
"""

from pydantic import BaseModel
from typing import Optional

class BaseResponse(BaseModel):
    success: bool = True

class ErrorResponse(BaseModel):
    error: str

# Authenticated caller, resolved from a session token and passed explicitly to handlers
class Principal(BaseModel):
    email: str
    name: Optional[str] = None
