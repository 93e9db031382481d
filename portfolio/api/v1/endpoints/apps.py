"""Portfolio apps: public reads, admin writes."""
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import get_current_admin, get_db
from portfolio.core.exceptions import NotFound
from portfolio.models.portfolio_app import PortfolioApp
from portfolio.schemas.portfolio_app import PortfolioAppCreate, PortfolioAppResponse, PortfolioAppUpdate
from portfolio.services.content_service import create_item, delete_item, get_item, list_items, update_item

router = APIRouter(prefix="/apps", tags=["apps"])


@router.get("", response_model=list[PortfolioAppResponse])
async def list_apps(db: AsyncSession = Depends(get_db)):
    """Featured apps first."""
    return await list_items(db, PortfolioApp, desc(PortfolioApp.featured), PortfolioApp.id)


@router.get("/{app_id}", response_model=PortfolioAppResponse)
async def get_app(app_id: int = Path(..., gt=0), db: AsyncSession = Depends(get_db)):
    app = await get_item(db, PortfolioApp, app_id)
    if not app:
        raise NotFound("App not found")
    return app


@router.post("", response_model=PortfolioAppResponse, status_code=status.HTTP_201_CREATED)
async def create_app(
    data: PortfolioAppCreate,
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    app = await create_item(db, PortfolioApp, data)
    await db.commit()
    return app


@router.patch("/{app_id}", response_model=PortfolioAppResponse)
async def update_app(
    data: PortfolioAppUpdate,
    app_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    app = await update_item(db, PortfolioApp, app_id, data)
    if not app:
        raise NotFound("App not found")
    await db.commit()
    return app


@router.delete("/{app_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_app(
    app_id: int = Path(..., gt=0),
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    if not await delete_item(db, PortfolioApp, app_id):
        raise NotFound("App not found")
    await db.commit()
    return None
