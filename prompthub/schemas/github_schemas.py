# prompthub/schemas/github_schemas.py
"""
External repository metrics schemas
"""

from pydantic import BaseModel
from typing import List, Optional

class GithubStats(BaseModel):
    stars: int = 0
    forks: int = 0
    watchers: int = 0
    openIssues: int = 0
    language: Optional[str] = None
    lastUpdated: Optional[str] = None
    createdAt: Optional[str] = None
    topics: List[str] = []
    error: Optional[str] = None
