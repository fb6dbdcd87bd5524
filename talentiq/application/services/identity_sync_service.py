"""
Identity sync service.

Mirrors identity-provider user lifecycle events into the local users
table and the chat provider's user directory.

Dependencies: talentiq.boundary.db, talentiq.boundary.stream
System role: Background identity synchronization
"""

import logging
from typing import Any

from talentiq.boundary.db.connection import Database
from talentiq.boundary.db.CRUD.user_crud import user_crud
from talentiq.boundary.db.models.user_model import UserModel
from talentiq.boundary.stream import StreamChatClient

logger = logging.getLogger(__name__)


def _display_name(data: dict[str, Any]) -> str:
    first = data.get("first_name") or ""
    last = data.get("last_name") or ""
    return f"{first} {last}".strip()


def _primary_email(data: dict[str, Any]) -> str:
    addresses = data.get("email_addresses") or []
    if addresses:
        return addresses[0].get("email_address") or ""
    return ""


class IdentitySyncService:
    """Handlers for user.created and user.deleted identity events."""

    def __init__(self, database: Database, chat: StreamChatClient) -> None:
        """
        Initialize service.

        Args:
            database: Database handle; each handler opens its own session
            chat: Stream chat adapter
        """
        self.database = database
        self.chat = chat

    async def handle_user_created(self, data: dict[str, Any]) -> UserModel:
        """
        Insert the user if unknown, then register them with the chat provider.

        Args:
            data: Identity-provider user payload (id, first_name, last_name,
                email_addresses, image_url)

        Returns:
            UserModel: New or existing user
        """
        clerk_id = data["id"]
        async with self.database.session() as db:
            existing = await user_crud.get_by_clerk_id(db, clerk_id)
            if existing is not None:
                logger.info("User already synced", extra={"clerk_id": clerk_id})
                return existing

            user = await user_crud.create(
                db,
                clerk_id=clerk_id,
                name=_display_name(data),
                email=_primary_email(data),
                profile_image=data.get("image_url") or "",
            )
            await db.commit()

        await self.chat.upsert_user(user.clerk_id, name=user.name, image=user.profile_image)
        logger.info("User synced", extra={"clerk_id": clerk_id, "user_id": str(user.id)})
        return user

    async def handle_user_deleted(self, data: dict[str, Any]) -> bool:
        """
        Delete the user locally and from the chat provider.

        Args:
            data: Identity-provider user payload (id)

        Returns:
            bool: True if a local row was removed
        """
        clerk_id = data["id"]
        async with self.database.session() as db:
            deleted = await user_crud.delete_by_clerk_id(db, clerk_id)
            await db.commit()

        await self.chat.delete_user(clerk_id)
        logger.info("User deleted", extra={"clerk_id": clerk_id, "removed": deleted})
        return deleted
