"""
User schemas.

Dependencies: pydantic
System role: User identity fields embedded in session responses
"""

import uuid

from talentiq.models.common import CamelModel


class UserSummary(CamelModel):
    """Identity fields populated into session host/participant."""

    id: uuid.UUID
    name: str
    email: str
    profile_image: str
    clerk_id: str
