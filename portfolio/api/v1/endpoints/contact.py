"""Contact form submission and the admin inbox."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import get_current_admin, get_db
from portfolio.schemas.contact import ContactMessageCreate, ContactMessageResponse, ContactSubmitResponse
from portfolio.services.contact_service import create_message, list_messages

router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=ContactSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact_message(
    data: ContactMessageCreate,
    db: AsyncSession = Depends(get_db),
):
    message = await create_message(db, data)
    await db.commit()
    return ContactSubmitResponse(message="Message sent successfully", id=message.id)


@router.get("/admin/contact-messages", response_model=list[ContactMessageResponse])
async def list_contact_messages(
    _admin: str = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    return await list_messages(db)
