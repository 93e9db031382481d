"""Blog posts: public reads, admin writes."""
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import get_current_admin, get_db
from portfolio.core.exceptions import NotFound
from portfolio.schemas.blog_post import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from portfolio.services.blog_service import (
    create_post,
    delete_post,
    get_featured_post,
    get_post_by_slug,
    list_posts,
    update_post,
)

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("", response_model=list[BlogPostResponse])
async def list_blog_posts(db: AsyncSession = Depends(get_db)):
    return await list_posts(db)


@router.get("/featured", response_model=BlogPostResponse)
async def get_featured_blog_post(db: AsyncSession = Depends(get_db)):
    post = await get_featured_post(db)
    if not post:
        raise NotFound("No featured post found")
    return post


@router.get("/{slug}", response_model=BlogPostResponse)
async def get_blog_post(slug: str, db: AsyncSession = Depends(get_db)):
    post = await get_post_by_slug(db, slug)
    if not post:
        raise NotFound("Blog post not found")
    return post


@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    data: BlogPostCreate,
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    post = await create_post(db, data)
    await db.commit()
    return post


@router.patch("/{post_id}", response_model=BlogPostResponse)
async def update_blog_post(
    data: BlogPostUpdate,
    post_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    post = await update_post(db, post_id, data)
    if not post:
        raise NotFound("Blog post not found")
    await db.commit()
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog_post(
    post_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    deleted = await delete_post(db, post_id)
    if not deleted:
        raise NotFound("Blog post not found")
    await db.commit()
    return None
