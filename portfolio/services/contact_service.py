"""Contact form messages."""
from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.contact_message import ContactMessage
from portfolio.schemas.contact import ContactMessageCreate
from portfolio.services.content_service import create_item, list_items


async def create_message(db: AsyncSession, data: ContactMessageCreate) -> ContactMessage:
    return await create_item(db, ContactMessage, data)


async def list_messages(db: AsyncSession) -> list[ContactMessage]:
    """Newest first."""
    return await list_items(db, ContactMessage, desc(ContactMessage.created_at), desc(ContactMessage.id))
