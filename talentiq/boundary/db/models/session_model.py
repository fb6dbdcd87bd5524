"""
Interview session ORM model.

A hosted coding-interview instance pairing a host and at most one
participant around a problem, correlated with an external video call and
chat channel through call_id.

Dependencies: sqlalchemy, talentiq.boundary.db.base
System role: Interview session persistence and lifecycle state
"""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from talentiq.boundary.db.base import Base, TimestampMixin, UUIDMixin, utcnow


class Difficulty(str, enum.Enum):
    """Problem difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class SessionStatus(str, enum.Enum):
    """
    Interview session lifecycle states.

    PENDING: Declared but never assigned; sessions are created ACTIVE
    ACTIVE: Call and channel provisioned, open for one participant
    COMPLETED: Ended by the host; terminal
    """

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Interview session ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        problem: Problem title the session is about
        difficulty: Difficulty enum
        host_id: Owning user (required)
        participant_id: Joined user, None until someone joins
        call_id: External video call / chat channel id (unique)
        status: Lifecycle state enum
        started_at: Session start timestamp (UTC)
        ended_at: Set when the host ends the session
        cleanup_pending: True when the session completed but the external
            call or channel could not be deleted
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        host: Many-to-one with UserModel (cascade delete with the host user)
        participant: Many-to-one with UserModel (set null on user delete)
    """

    __tablename__ = "sessions"

    problem: Mapped[str] = mapped_column(String(255), nullable=False)

    difficulty: Mapped[Difficulty] = mapped_column(
        Enum(Difficulty, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )

    host_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    participant_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
        index=True,
    )

    call_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        doc="External video call and chat channel id",
    )

    status: Mapped[SessionStatus] = mapped_column(
        Enum(SessionStatus, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=SessionStatus.PENDING,
        index=True,
    )

    started_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    ended_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    cleanup_pending: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    # Relationships
    host = relationship("UserModel", foreign_keys=[host_id])
    participant = relationship("UserModel", foreign_keys=[participant_id])
