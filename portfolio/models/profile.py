"""Developer profile. Single row; nested sections are stored as JSON documents."""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from portfolio.db.session import Base
from portfolio.models.columns import JsonColumn


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    title = Column(String(200), nullable=False)
    bio = Column(Text, nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    location = Column(String(200), nullable=True)
    avatar_url = Column(Text, nullable=True)
    experience = Column(JsonColumn, nullable=False, default=list)
    education = Column(JsonColumn, nullable=False, default=list)
    skills = Column(JsonColumn, nullable=False, default=list)
    social_links = Column(JsonColumn, nullable=False, default=list)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
