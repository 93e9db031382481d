"""GitHub repository model (open source section)."""
from sqlalchemy import Column, Integer, String, Text

from portfolio.db.session import Base
from portfolio.models.columns import JsonColumn


class GithubRepo(Base):
    __tablename__ = "github_repos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    stars = Column(Integer, nullable=False, default=0)
    forks = Column(Integer, nullable=False, default=0)
    url = Column(Text, nullable=False)
    tags = Column(JsonColumn, nullable=False, default=list)
