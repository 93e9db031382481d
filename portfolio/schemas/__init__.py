from portfolio.schemas.comment import (
    CommentCreate,
    CommentSubmission,
    CommentResponse,
    CommentThreadResponse,
)
from portfolio.schemas.blog_post import BlogPostCreate, BlogPostUpdate, BlogPostResponse
from portfolio.schemas.portfolio_app import PortfolioAppCreate, PortfolioAppUpdate, PortfolioAppResponse
from portfolio.schemas.github_repo import GithubRepoCreate, GithubRepoUpdate, GithubRepoResponse
from portfolio.schemas.code_sample import CodeSampleCreate, CodeSampleUpdate, CodeSampleResponse
from portfolio.schemas.contact import ContactMessageCreate, ContactMessageResponse
from portfolio.schemas.profile import ProfileUpdate, ProfileResponse
