"""
Database models package.

Exports:
  - UserModel: Identity-provider account mirror
  - SessionModel, SessionStatus, Difficulty: Interview session model and enums

Dependencies: sqlalchemy, talentiq.boundary.db.base
System role: Database model definitions for domain entities
"""

from talentiq.boundary.db.models.session_model import Difficulty, SessionModel, SessionStatus
from talentiq.boundary.db.models.user_model import UserModel

__all__ = [
    "Difficulty",
    "SessionModel",
    "SessionStatus",
    "UserModel",
]
