"""Comment submission and moderation rules.

Submissions always start unapproved; only approve() makes a comment public.
remove() takes the whole reply subtree with it and is a no-op for unknown ids,
so double clicks and overlapping moderator deletes both succeed.
"""
import logging
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import pydantic

from portfolio.core.exceptions import ValidationError, format_validation_errors
from portfolio.schemas.comment import CommentSubmission
from portfolio.services.comment_store import CommentRecord, CommentStore

logger = logging.getLogger("portfolio.comments")

PENDING_APPROVAL_MESSAGE = "Comment submitted successfully. It will be visible after approval."


@dataclass(frozen=True)
class SubmissionResult:
    comment: CommentRecord
    message: str = PENDING_APPROVAL_MESSAGE


def validate_submission(data: CommentSubmission | Mapping[str, Any]) -> CommentSubmission:
    """Accept an already-parsed submission or a raw mapping; raise ValidationError on bad fields."""
    if isinstance(data, CommentSubmission):
        return data
    try:
        return CommentSubmission.model_validate(dict(data))
    except pydantic.ValidationError as e:
        errors = e.errors()
        field = ".".join(str(p) for p in errors[0]["loc"]) if errors else None
        raise ValidationError(format_validation_errors(errors), field=field) from None


class CommentService:
    def __init__(self, store: CommentStore):
        self.store = store

    async def submit(self, data: CommentSubmission | Mapping[str, Any]) -> SubmissionResult:
        submission = validate_submission(data)
        # parent's post is not compared with blog_post_id; replies are trusted to target their own post
        comment = await self.store.insert(submission)
        logger.info(
            "Comment %s submitted on post %s (parent=%s), awaiting approval",
            comment.id, comment.blog_post_id, comment.parent_id,
        )
        return SubmissionResult(comment=comment)

    async def list_for_post(self, blog_post_id: int) -> list[CommentRecord]:
        """Everything for the post, pending included. Public views filter through comment_tree.assemble."""
        return await self.store.list_by_post(blog_post_id)

    async def pending(self) -> list[CommentRecord]:
        return await self.store.list_pending()

    async def approve(self, comment_id: int) -> CommentRecord:
        comment = await self.store.set_approved(comment_id)
        logger.info("Comment %s approved", comment_id)
        return comment

    async def collect_subtree(self, comment_id: int) -> list[int]:
        """Ids of the comment and every transitive reply, breadth-first."""
        if await self.store.get(comment_id) is None:
            return []
        seen = {comment_id}
        ordered = [comment_id]
        queue = deque([comment_id])
        while queue:
            current = queue.popleft()
            for child in await self.store.list_children(current):
                if child.id in seen:
                    continue
                seen.add(child.id)
                ordered.append(child.id)
                queue.append(child.id)
        return ordered

    async def remove(self, comment_id: int) -> int:
        ids = await self.collect_subtree(comment_id)
        if not ids:
            logger.info("Comment %s already gone, nothing to delete", comment_id)
            return 0
        deleted = await self.store.delete_many(ids)
        logger.info("Comment %s deleted along with %d replies", comment_id, len(ids) - 1)
        return deleted

    async def remove_for_post(self, blog_post_id: int) -> int:
        """Delete every comment on the post plus all replies under them, wherever those replies were filed."""
        ids: list[int] = []
        seen: set[int] = set()
        for comment in await self.store.list_by_post(blog_post_id):
            if comment.id in seen:
                continue
            for comment_id in await self.collect_subtree(comment.id):
                if comment_id not in seen:
                    seen.add(comment_id)
                    ids.append(comment_id)
        deleted = await self.store.delete_many(ids)
        if deleted:
            logger.info("Post %s: deleted %d comments and replies", blog_post_id, deleted)
        return deleted
