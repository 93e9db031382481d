from portfolio.models.blog_post import BlogPost
from portfolio.models.comment import Comment
from portfolio.models.portfolio_app import PortfolioApp
from portfolio.models.github_repo import GithubRepo
from portfolio.models.code_sample import CodeSample
from portfolio.models.contact_message import ContactMessage
from portfolio.models.profile import Profile

__all__ = ["BlogPost", "Comment", "PortfolioApp", "GithubRepo", "CodeSample", "ContactMessage", "Profile"]
