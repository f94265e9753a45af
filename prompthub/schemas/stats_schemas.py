# prompthub/schemas/stats_schemas.py
"""
Aggregate statistics schemas
"""

from pydantic import BaseModel
from typing import Optional

class OwnerStats(BaseModel):
    promptsCount: int
    likesCount: int  # likes given by the owner, not received
    joinedAt: str

class PlatformStats(BaseModel):
    totalPrompts: int
    publicPrompts: int
    totalUsers: int
    activeUsers: int
    totalLikes: int
    recentPrompts: int
    lastUpdated: str
    error: Optional[str] = None
