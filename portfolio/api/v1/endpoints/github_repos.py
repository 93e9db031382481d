"""GitHub repositories: public reads, admin writes."""
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import get_current_admin, get_db
from portfolio.core.exceptions import NotFound
from portfolio.models.github_repo import GithubRepo
from portfolio.schemas.github_repo import GithubRepoCreate, GithubRepoResponse, GithubRepoUpdate
from portfolio.services.content_service import create_item, delete_item, get_item, list_items, update_item

router = APIRouter(prefix="/github-repos", tags=["github-repos"])


@router.get("", response_model=list[GithubRepoResponse])
async def list_github_repos(db: AsyncSession = Depends(get_db)):
    """Most starred first."""
    return await list_items(db, GithubRepo, desc(GithubRepo.stars), GithubRepo.id)


@router.get("/{repo_id}", response_model=GithubRepoResponse)
async def get_github_repo(repo_id: int = Path(..., gt=0), db: AsyncSession = Depends(get_db)):
    repo = await get_item(db, GithubRepo, repo_id)
    if not repo:
        raise NotFound("GitHub repository not found")
    return repo


@router.post("", response_model=GithubRepoResponse, status_code=status.HTTP_201_CREATED)
async def create_github_repo(
    data: GithubRepoCreate,
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    repo = await create_item(db, GithubRepo, data)
    await db.commit()
    return repo


@router.patch("/{repo_id}", response_model=GithubRepoResponse)
async def update_github_repo(
    data: GithubRepoUpdate,
    repo_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    repo = await update_item(db, GithubRepo, repo_id, data)
    if not repo:
        raise NotFound("GitHub repository not found")
    await db.commit()
    return repo


@router.delete("/{repo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_github_repo(
    repo_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    if not await delete_item(db, GithubRepo, repo_id):
        raise NotFound("GitHub repository not found")
    await db.commit()
    return None
