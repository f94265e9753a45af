"""
Like relation - at most one row per (user, prompt)
"""

from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from .base import Base, utcnow

class Like(Base):
    __tablename__ = "like_TB"
    __table_args__ = (
        UniqueConstraint("USER_ID", "PROMPT_ID", name="uq_like_user_prompt"),
    )

    LIKE_ID = Column(String(36), primary_key=True)
    USER_ID = Column(String(36), ForeignKey('user_TB.USER_ID'), nullable=False)
    PROMPT_ID = Column(String(36), ForeignKey('prompt_TB.PROMPT_ID'), nullable=False)
    CREATED_AT = Column(DateTime, default=utcnow, nullable=False)
