"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from talentiq.boundary.db.CRUD import session_crud, user_crud

    session = await session_crud.get_with_users(db, session_id)
"""

from talentiq.boundary.db.CRUD.base_crud import BaseCRUD
from talentiq.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from talentiq.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "UserCRUD",
    "session_crud",
    "user_crud",
]
