"""Code samples: public reads, admin writes."""
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import get_current_admin, get_db
from portfolio.core.exceptions import NotFound
from portfolio.models.code_sample import CodeSample
from portfolio.schemas.code_sample import CodeSampleCreate, CodeSampleResponse, CodeSampleUpdate
from portfolio.services.content_service import create_item, delete_item, get_item, list_items, update_item

router = APIRouter(prefix="/code-samples", tags=["code-samples"])


@router.get("", response_model=list[CodeSampleResponse])
async def list_code_samples(db: AsyncSession = Depends(get_db)):
    return await list_items(db, CodeSample)


@router.get("/{sample_id}", response_model=CodeSampleResponse)
async def get_code_sample(sample_id: int = Path(..., gt=0), db: AsyncSession = Depends(get_db)):
    sample = await get_item(db, CodeSample, sample_id)
    if not sample:
        raise NotFound("Code sample not found")
    return sample


@router.post("", response_model=CodeSampleResponse, status_code=status.HTTP_201_CREATED)
async def create_code_sample(
    data: CodeSampleCreate,
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    sample = await create_item(db, CodeSample, data)
    await db.commit()
    return sample


@router.patch("/{sample_id}", response_model=CodeSampleResponse)
async def update_code_sample(
    data: CodeSampleUpdate,
    sample_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    sample = await update_item(db, CodeSample, sample_id, data)
    if not sample:
        raise NotFound("Code sample not found")
    await db.commit()
    return sample


@router.delete("/{sample_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_code_sample(
    sample_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    if not await delete_item(db, CodeSample, sample_id):
        raise NotFound("Code sample not found")
    await db.commit()
    return None
