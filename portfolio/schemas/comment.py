"""Pydantic schemas for blog comments."""
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class CommentCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    content: str = Field(..., min_length=5)
    parent_id: int | None = Field(None, gt=0)


class CommentSubmission(CommentCreate):
    """A comment form plus the post it was submitted under."""

    blog_post_id: int = Field(..., gt=0)


class CommentResponse(BaseModel):
    # email is deliberately absent: it is never shown publicly
    id: int
    blog_post_id: int
    parent_id: int | None = None
    name: str
    content: str
    created_at: datetime
    is_approved: bool = False

    model_config = {"from_attributes": True}


class CommentSubmitResponse(BaseModel):
    message: str
    comment: CommentResponse


class CommentApproveResponse(BaseModel):
    message: str
    comment: CommentResponse


class CommentDeleteResponse(BaseModel):
    message: str
    deleted: int = 0


class CommentThreadResponse(BaseModel):
    top_level: list[CommentResponse]
    replies_by_parent: dict[int, list[CommentResponse]]
