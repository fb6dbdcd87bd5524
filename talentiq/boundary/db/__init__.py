"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin, UUIDMixin: Model building blocks
  - Database, get_async_db: Connection lifecycle and request-scoped sessions
  - UserModel, SessionModel: Core domain entities
  - SessionStatus, Difficulty: Enum types
  - session_crud, user_crud: CRUD operation singletons

Dependencies: sqlalchemy, talentiq.configs
System role: Database adapter providing persistent storage for users and
interview sessions.
"""

from talentiq.boundary.db.base import Base, TimestampMixin, UUIDMixin
from talentiq.boundary.db.connection import Database, get_async_db
from talentiq.boundary.db.models import Difficulty, SessionModel, SessionStatus, UserModel
from talentiq.boundary.db.CRUD import (
    BaseCRUD,
    SessionCRUD,
    UserCRUD,
    session_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "Database",
    "get_async_db",
    # Models
    "Difficulty",
    "SessionModel",
    "SessionStatus",
    "UserModel",
    # CRUD classes
    "BaseCRUD",
    "SessionCRUD",
    "UserCRUD",
    # CRUD singletons
    "session_crud",
    "user_crud",
]
