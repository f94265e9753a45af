"""
User model
"""

from sqlalchemy import Column, String, DateTime, Text, JSON
from .base import Base, utcnow

class User(Base):
    __tablename__ = "user_TB"

    USER_ID = Column(String(36), primary_key=True)
    EMAIL = Column(String(255), unique=True, nullable=False)
    NAME = Column(String(100), nullable=False, default="")
    IMAGE = Column(Text)
    BIO = Column(Text)
    WEBSITE = Column(String(255))
    LOCATION = Column(String(100))
    SETTINGS = Column(JSON)  # opaque, passed through unvalidated
    PRIVACY = Column(JSON)   # opaque, passed through unvalidated
    CREATED_AT = Column(DateTime, default=utcnow, nullable=False)
    UPDATED_AT = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def to_profile(self) -> dict:
        return {
            "id": self.USER_ID,
            "name": self.NAME,
            "email": self.EMAIL,
            "image": self.IMAGE,
            "bio": self.BIO,
            "website": self.WEBSITE,
            "location": self.LOCATION,
            "createdAt": self.CREATED_AT.isoformat() if self.CREATED_AT else None,
            "updatedAt": self.UPDATED_AT.isoformat() if self.UPDATED_AT else None,
        }
