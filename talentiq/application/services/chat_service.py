"""
Chat service.

Issues the provider token a client uses to connect to video and chat.

Dependencies: talentiq.boundary.stream
System role: Chat/video credential use case
"""

from talentiq.boundary.db.models.user_model import UserModel
from talentiq.boundary.stream import StreamChatClient


class ChatService:
    """Token issuance for the authenticated user."""

    def __init__(self, chat: StreamChatClient) -> None:
        self.chat = chat

    def get_token(self, user: UserModel) -> dict[str, str]:
        """
        Create a Stream user token for the caller.

        The token is keyed by the identity-provider subject id, which is
        also the user id registered with Stream during identity sync.

        Args:
            user: Authenticated user

        Returns:
            dict: token, userId, name, image
        """
        return {
            "token": self.chat.create_token(user.clerk_id),
            "user_id": user.clerk_id,
            "name": user.name,
            "image": user.profile_image,
        }
