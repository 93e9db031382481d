"""Portfolio app model (apps shown in the portfolio section)."""
from sqlalchemy import Boolean, Column, Integer, String, Text

from portfolio.db.session import Base
from portfolio.models.columns import JsonColumn


class PortfolioApp(Base):
    __tablename__ = "apps"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    icon_url = Column(Text, nullable=False)
    screenshot_urls = Column(JsonColumn, nullable=False, default=list)
    featured = Column(Boolean, default=False, nullable=False)
    play_store_url = Column(Text, nullable=True)
    github_url = Column(Text, nullable=True)
    rating = Column(String(20), nullable=True)
    downloads = Column(String(40), nullable=True)
