"""
Chat schemas.

Dependencies: pydantic
System role: Chat/video token API contract
"""

from talentiq.models.common import CamelModel


class ChatTokenResponse(CamelModel):
    """User token for the video/chat provider plus the identity it is for."""

    token: str
    user_id: str
    name: str
    image: str
