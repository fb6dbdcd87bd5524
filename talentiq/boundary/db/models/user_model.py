"""
User ORM model.

Local mirror of an identity-provider account. Rows are created and deleted
only by identity sync events; request handlers treat them as read-only.

Dependencies: sqlalchemy, talentiq.boundary.db.base
System role: User persistence for session ownership and membership
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from talentiq.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model keyed by identity-provider subject id.

    Attributes:
        id: UUID primary key (auto-generated)
        clerk_id: Identity-provider subject id (unique); also the user id
            registered with the chat/video provider
        name: Display name
        email: Primary email address (unique)
        profile_image: Profile image URL, empty string when absent
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "users"

    clerk_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        doc="Identity-provider subject id",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    profile_image: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        default="",
    )
