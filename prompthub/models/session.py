# prompthub/models/session.py
"""
Session model (rows written by the OAuth sign-in integration, read-only here)
"""

from sqlalchemy import Column, String, DateTime
from .base import Base

class UserSession(Base):
    __tablename__ = "session_TB"

    SESSION_TOKEN = Column(String(255), primary_key=True)
    USER_EMAIL = Column(String(255), nullable=False, index=True)
    USER_NAME = Column(String(100))
    EXPIRES_AT = Column(DateTime, nullable=False)
