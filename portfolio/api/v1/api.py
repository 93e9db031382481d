"""V1 API router aggregation."""
from fastapi import APIRouter

from portfolio.api.v1.endpoints import apps, blog, code_samples, comments, contact, github_repos, profile, uploads

api_router = APIRouter(prefix="/v1")
api_router.include_router(comments.router)
api_router.include_router(blog.router)
api_router.include_router(apps.router)
api_router.include_router(github_repos.router)
api_router.include_router(code_samples.router)
api_router.include_router(contact.router)
api_router.include_router(profile.router)
api_router.include_router(uploads.router)
