"""API dependencies: db session, admin guard, comment service."""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.config import settings
from portfolio.core.security import decode_token
from portfolio.db.session import get_db
from portfolio.services.comment_service import CommentService
from portfolio.services.comment_store import CommentStore

security = HTTPBearer(auto_error=False)


async def get_token_payload(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> dict:
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_token(credentials.credentials)
    if not payload or payload.get("type") != "access" or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload


async def get_current_admin(payload: dict = Depends(get_token_payload)) -> str:
    """Subject of a token carrying the admin role."""
    if payload.get("role") != settings.ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="The user does not have enough privileges",
        )
    return payload["sub"]


async def get_comment_service(db: AsyncSession = Depends(get_db)) -> CommentService:
    return CommentService(CommentStore(db))
