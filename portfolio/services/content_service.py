"""CRUD for the portfolio content tables (apps, GitHub repos, code samples).

These resources share one shape: create from a schema, patch with the fields that were sent,
delete by id. Service functions flush; endpoints commit.
"""
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.exceptions import StorageError
from portfolio.db.session import Base

ModelT = TypeVar("ModelT", bound=Base)


async def list_items(db: AsyncSession, model: type[ModelT], *order_by: Any) -> list[ModelT]:
    q = select(model).order_by(*(order_by or (model.id,)))
    try:
        result = await db.execute(q)
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to load {model.__tablename__}") from e
    return list(result.scalars().all())


async def get_item(db: AsyncSession, model: type[ModelT], item_id: int) -> ModelT | None:
    try:
        return await db.get(model, item_id)
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to load {model.__tablename__}") from e


async def create_item(db: AsyncSession, model: type[ModelT], data: BaseModel) -> ModelT:
    item = model(**data.model_dump(mode="json"))
    db.add(item)
    try:
        await db.flush()
        await db.refresh(item)
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to save {model.__tablename__}") from e
    return item


async def update_item(db: AsyncSession, model: type[ModelT], item_id: int, data: BaseModel) -> ModelT | None:
    item = await get_item(db, model, item_id)
    if not item:
        return None
    for key, value in data.model_dump(mode="json", exclude_unset=True).items():
        setattr(item, key, value)
    try:
        await db.flush()
        await db.refresh(item)
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to update {model.__tablename__}") from e
    return item


async def delete_item(db: AsyncSession, model: type[ModelT], item_id: int) -> bool:
    item = await get_item(db, model, item_id)
    if not item:
        return False
    try:
        await db.delete(item)
        await db.flush()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to delete {model.__tablename__}") from e
    return True
