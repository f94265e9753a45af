"""
Models package
SQLAlchemy models and database connection setup
"""

from .base import Base, AsyncSessionLocal, init_db, close_db
from .user import User
from .prompt import Prompt
from .like import Like
from .session import UserSession

__all__ = [
    "Base",
    "AsyncSessionLocal",
    "init_db",
    "close_db",
    "User",
    "Prompt",
    "Like",
    "UserSession",
]
