"""Blog post business logic."""
from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.exceptions import StorageError, ValidationError
from portfolio.models.blog_post import BlogPost
from portfolio.schemas.blog_post import BlogPostCreate, BlogPostUpdate
from portfolio.services.comment_service import CommentService
from portfolio.services.comment_store import CommentStore
from portfolio.services.content_service import create_item, get_item, list_items, update_item


async def _first(db: AsyncSession, q) -> BlogPost | None:
    try:
        result = await db.execute(q)
    except SQLAlchemyError as e:
        raise StorageError("Failed to load blog post") from e
    return result.scalar_one_or_none()


async def get_post_by_slug(db: AsyncSession, slug: str) -> BlogPost | None:
    return await _first(db, select(BlogPost).where(BlogPost.slug == slug))


async def get_featured_post(db: AsyncSession) -> BlogPost | None:
    return await _first(
        db,
        select(BlogPost)
        .where(BlogPost.is_featured.is_(True))
        .order_by(desc(BlogPost.published_at), desc(BlogPost.id))
        .limit(1),
    )


async def list_posts(db: AsyncSession) -> list[BlogPost]:
    return await list_items(db, BlogPost, desc(BlogPost.published_at), desc(BlogPost.id))


async def _ensure_slug_free(db: AsyncSession, slug: str, post_id: int | None = None) -> None:
    existing = await get_post_by_slug(db, slug)
    if existing and existing.id != post_id:
        raise ValidationError(f"slug: '{slug}' is already in use", field="slug")


async def create_post(db: AsyncSession, data: BlogPostCreate) -> BlogPost:
    await _ensure_slug_free(db, data.slug)
    return await create_item(db, BlogPost, data)


async def update_post(db: AsyncSession, post_id: int, data: BlogPostUpdate) -> BlogPost | None:
    if data.slug is not None:
        await _ensure_slug_free(db, data.slug, post_id)
    return await update_item(db, BlogPost, post_id, data)


async def delete_post(db: AsyncSession, post_id: int) -> bool:
    post = await get_item(db, BlogPost, post_id)
    if not post:
        return False
    # replies filed under other posts hang off this post's comments too
    await CommentService(CommentStore(db)).remove_for_post(post_id)
    try:
        await db.delete(post)
        await db.flush()
    except SQLAlchemyError as e:
        raise StorageError("Failed to delete blog post") from e
    return True
