"""Display structure for a post's comments.

Readers see two levels: top-level comments and the replies directly under them.
Only approved comments make it in, whatever their depth.
"""
from collections.abc import Iterable
from dataclasses import dataclass, field

from portfolio.services.comment_store import CommentRecord


@dataclass
class CommentThread:
    top_level: list[CommentRecord] = field(default_factory=list)
    replies_by_parent: dict[int, list[CommentRecord]] = field(default_factory=dict)

    def replies_to(self, comment_id: int) -> list[CommentRecord]:
        return self.replies_by_parent.get(comment_id, [])


def assemble(comments: Iterable[CommentRecord]) -> CommentThread:
    approved = [c for c in comments if c.is_approved]
    thread = CommentThread()
    for comment in approved:
        if comment.parent_id is None:
            thread.top_level.append(comment)
            thread.replies_by_parent.setdefault(comment.id, [])
    for comment in approved:
        if comment.parent_id is not None:
            # replies to replies stay under their literal parent and are never walked
            thread.replies_by_parent.setdefault(comment.parent_id, []).append(comment)
    return thread
