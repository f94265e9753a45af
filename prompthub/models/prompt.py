"""
Prompt model - VIEWS/LIKES are only ever changed with in-database arithmetic
"""

from sqlalchemy import Column, String, Text, DateTime, Boolean, Integer, ForeignKey, CheckConstraint
from .base import Base, utcnow

class Prompt(Base):
    __tablename__ = "prompt_TB"
    __table_args__ = (
        CheckConstraint("VIEWS >= 0", name="ck_prompt_views_nonneg"),
        CheckConstraint("LIKES >= 0", name="ck_prompt_likes_nonneg"),
    )

    PROMPT_ID = Column(String(36), primary_key=True)
    TITLE = Column(String(200), nullable=False)
    DESCRIPTION = Column(Text)
    CONTENT = Column(Text, nullable=False)
    IS_PUBLIC = Column(Boolean, default=True, nullable=False)
    VIEWS = Column(Integer, default=0, nullable=False)
    LIKES = Column(Integer, default=0, nullable=False)
    AUTHOR_ID = Column(String(36), ForeignKey('user_TB.USER_ID'), nullable=False)
    CREATED_AT = Column(DateTime, default=utcnow, nullable=False)
    UPDATED_AT = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.PROMPT_ID,
            "title": self.TITLE,
            "description": self.DESCRIPTION,
            "content": self.CONTENT,
            "isPublic": self.IS_PUBLIC,
            "views": self.VIEWS,
            "likes": self.LIKES,
            "authorId": self.AUTHOR_ID,
            "createdAt": self.CREATED_AT.isoformat() if self.CREATED_AT else None,
            "updatedAt": self.UPDATED_AT.isoformat() if self.UPDATED_AT else None,
        }
