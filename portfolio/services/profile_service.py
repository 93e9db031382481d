"""The single developer profile row."""
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.exceptions import StorageError
from portfolio.models.profile import Profile
from portfolio.schemas.profile import ProfileUpdate


async def get_profile(db: AsyncSession) -> Profile | None:
    try:
        result = await db.execute(select(Profile).order_by(Profile.id).limit(1))
    except SQLAlchemyError as e:
        raise StorageError("Failed to load profile") from e
    return result.scalar_one_or_none()


async def save_profile(db: AsyncSession, data: ProfileUpdate) -> Profile:
    """Create the profile on first save, overwrite it afterwards."""
    values = data.model_dump(mode="json")
    profile = await get_profile(db)
    if profile is None:
        profile = Profile(**values)
        db.add(profile)
    else:
        for key, value in values.items():
            setattr(profile, key, value)
    try:
        await db.flush()
        await db.refresh(profile)
    except SQLAlchemyError as e:
        raise StorageError("Failed to save profile") from e
    return profile
