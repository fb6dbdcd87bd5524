"""Managed video/chat provider boundary."""

from talentiq.boundary.stream.chat_client import StreamChatClient
from talentiq.boundary.stream.video_client import StreamVideoClient

__all__ = ["StreamChatClient", "StreamVideoClient"]
