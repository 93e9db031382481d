"""SQLAlchemy declarative base and model imports for Alembic."""
from portfolio.db.session import Base  # noqa: F401
from portfolio.models.blog_post import BlogPost  # noqa: F401
from portfolio.models.comment import Comment  # noqa: F401
from portfolio.models.portfolio_app import PortfolioApp  # noqa: F401
from portfolio.models.github_repo import GithubRepo  # noqa: F401
from portfolio.models.code_sample import CodeSample  # noqa: F401
from portfolio.models.contact_message import ContactMessage  # noqa: F401
from portfolio.models.profile import Profile  # noqa: F401

__all__ = ["Base", "BlogPost", "Comment", "PortfolioApp", "GithubRepo", "CodeSample", "ContactMessage", "Profile"]
