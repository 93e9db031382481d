"""Persistence for blog comments.

Rows leave this module as frozen CommentRecord values; callers never hold ORM objects.
The store only deletes what it is told to. Cascading over replies is CommentService's job.
"""
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.exceptions import NotFound, StorageError
from portfolio.models.comment import Comment
from portfolio.schemas.comment import CommentSubmission


@dataclass(frozen=True)
class CommentRecord:
    id: int
    blog_post_id: int
    parent_id: int | None
    name: str
    email: str
    content: str
    created_at: datetime
    is_approved: bool

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @classmethod
    def from_row(cls, row: Comment) -> "CommentRecord":
        return cls(
            id=row.id,
            blog_post_id=row.blog_post_id,
            parent_id=row.parent_id,
            name=row.name,
            email=row.email,
            content=row.content,
            created_at=row.created_at,
            is_approved=bool(row.is_approved),
        )


class CommentStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _scalars(self, stmt) -> list[CommentRecord]:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("Failed to load comments") from e
        return [CommentRecord.from_row(row) for row in result.scalars().all()]

    async def list_by_post(self, blog_post_id: int) -> list[CommentRecord]:
        """All comments of a post, approved or not, newest first."""
        return await self._scalars(
            select(Comment)
            .where(Comment.blog_post_id == blog_post_id)
            .order_by(desc(Comment.created_at), desc(Comment.id))
        )

    async def list_children(self, parent_id: int) -> list[CommentRecord]:
        return await self._scalars(
            select(Comment).where(Comment.parent_id == parent_id).order_by(Comment.id)
        )

    async def list_pending(self) -> list[CommentRecord]:
        return await self._scalars(
            select(Comment)
            .where(Comment.is_approved.is_(False))
            .order_by(desc(Comment.created_at), desc(Comment.id))
        )

    async def get(self, comment_id: int) -> CommentRecord | None:
        try:
            row = await self.db.get(Comment, comment_id)
        except SQLAlchemyError as e:
            raise StorageError("Failed to load comment") from e
        return CommentRecord.from_row(row) if row else None

    async def insert(self, data: CommentSubmission) -> CommentRecord:
        comment = Comment(
            blog_post_id=data.blog_post_id,
            parent_id=data.parent_id,
            name=data.name,
            email=str(data.email),
            content=data.content,
            created_at=datetime.utcnow(),
            is_approved=False,
        )
        try:
            self.db.add(comment)
            await self.db.flush()
            await self.db.refresh(comment)
        except SQLAlchemyError as e:
            raise StorageError("Failed to save comment") from e
        return CommentRecord.from_row(comment)

    async def set_approved(self, comment_id: int) -> CommentRecord:
        try:
            comment = await self.db.get(Comment, comment_id)
            if comment is None:
                raise NotFound("Comment not found")
            comment.is_approved = True
            await self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError("Failed to approve comment") from e
        return CommentRecord.from_row(comment)

    async def delete(self, comment_id: int) -> None:
        await self.delete_many([comment_id])

    async def delete_many(self, comment_ids: Iterable[int]) -> int:
        """Delete the given rows in one statement. Returns how many existed."""
        ids = list(comment_ids)
        if not ids:
            return 0
        try:
            result = await self.db.execute(
                delete(Comment).where(Comment.id.in_(ids))
            )
        except SQLAlchemyError as e:
            raise StorageError("Failed to delete comments") from e
        return result.rowcount or 0
