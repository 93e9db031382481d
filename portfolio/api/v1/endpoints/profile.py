"""Developer profile shown in the hero and about sections."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import get_current_admin, get_db
from portfolio.core.exceptions import NotFound
from portfolio.schemas.profile import ProfileResponse, ProfileUpdate
from portfolio.services.profile_service import get_profile, save_profile

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
async def read_profile(db: AsyncSession = Depends(get_db)):
    profile = await get_profile(db)
    if not profile:
        raise NotFound("Profile not found")
    return profile


@router.put("", response_model=ProfileResponse)
async def write_profile(
    data: ProfileUpdate,
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    profile = await save_profile(db, data)
    await db.commit()
    return profile
