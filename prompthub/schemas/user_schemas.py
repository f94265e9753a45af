# prompthub/schemas/user_schemas.py
"""
Profile schemas (settings/privacy blobs are plain dicts, no schema)
"""

from pydantic import BaseModel
from typing import Optional

class ProfileUpdateRequest(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None

class UserProfile(BaseModel):
    id: str
    name: str
    email: str
    image: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

class ProfileUpdateResponse(BaseModel):
    message: str
    user: UserProfile
