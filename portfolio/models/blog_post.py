"""Blog post model."""
from sqlalchemy import Boolean, Column, Integer, String, Text
from sqlalchemy.orm import relationship

from portfolio.db.session import Base
from portfolio.models.columns import JsonColumn


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    cover_image_url = Column(Text, nullable=False)
    published_at = Column(String(40), nullable=False)  # ISO date as entered in the admin panel
    author = Column(String(100), nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    tags = Column(JsonColumn, nullable=False, default=list)

    comments = relationship("Comment", back_populates="blog_post", cascade="all, delete-orphan", passive_deletes=True)
