"""Blog comments: public listing and submission, admin moderation."""
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import get_comment_service, get_current_admin, get_db
from portfolio.schemas.comment import (
    CommentApproveResponse,
    CommentCreate,
    CommentDeleteResponse,
    CommentResponse,
    CommentSubmission,
    CommentSubmitResponse,
    CommentThreadResponse,
)
from portfolio.services.comment_service import CommentService
from portfolio.services.comment_tree import assemble

router = APIRouter(tags=["comments"])


@router.get("/blog/{post_id}/comments", response_model=list[CommentResponse])
async def list_post_comments(
    post_id: int = Path(..., gt=0),
    service: CommentService = Depends(get_comment_service),
):
    """All comments for the post, pending ones included. Clients filter for display."""
    return await service.list_for_post(post_id)


@router.get("/blog/{post_id}/comments/thread", response_model=CommentThreadResponse)
async def get_post_comment_thread(
    post_id: int = Path(..., gt=0),
    service: CommentService = Depends(get_comment_service),
):
    """Approved comments grouped as top-level comments plus their direct replies."""
    thread = assemble(await service.list_for_post(post_id))
    return CommentThreadResponse(
        top_level=[CommentResponse.model_validate(c) for c in thread.top_level],
        replies_by_parent={
            parent_id: [CommentResponse.model_validate(c) for c in replies]
            for parent_id, replies in thread.replies_by_parent.items()
        },
    )


@router.post("/blog/{post_id}/comments", response_model=CommentSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_post_comment(
    data: CommentCreate,
    post_id: int = Path(..., gt=0),
    service: CommentService = Depends(get_comment_service),
    db: AsyncSession = Depends(get_db),
):
    submission = CommentSubmission(**data.model_dump(), blog_post_id=post_id)
    result = await service.submit(submission)
    await db.commit()
    return CommentSubmitResponse(message=result.message, comment=CommentResponse.model_validate(result.comment))


@router.get("/admin/comments/pending", response_model=list[CommentResponse])
async def list_pending_comments(
    _admin: str = Depends(get_current_admin),
    service: CommentService = Depends(get_comment_service),
):
    return await service.pending()


@router.post("/admin/comments/{comment_id}/approve", response_model=CommentApproveResponse)
async def approve_comment(
    comment_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    service: CommentService = Depends(get_comment_service),
    db: AsyncSession = Depends(get_db),
):
    comment = await service.approve(comment_id)
    await db.commit()
    return CommentApproveResponse(message="Comment approved successfully", comment=CommentResponse.model_validate(comment))


@router.delete("/admin/comments/{comment_id}", response_model=CommentDeleteResponse)
async def delete_comment(
    comment_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    service: CommentService = Depends(get_comment_service),
    db: AsyncSession = Depends(get_db),
):
    deleted = await service.remove(comment_id)
    await db.commit()
    return CommentDeleteResponse(message="Comment deleted successfully", deleted=deleted)
