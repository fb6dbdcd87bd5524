"""
Chat API endpoints.

Routes:
- GET /chat/token - Video/chat provider token for the caller

Dependencies: talentiq.application.services.chat_service, talentiq.models
System role: Chat credential HTTP API
"""

from fastapi import APIRouter, Depends

from talentiq.api.deps import get_chat_service, get_current_user
from talentiq.api.routers.error_handling import handle_service_errors
from talentiq.application.services import ChatService
from talentiq.boundary.db.models.user_model import UserModel
from talentiq.models.chat import ChatTokenResponse

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/token", response_model=ChatTokenResponse)
@handle_service_errors("Failed to generate chat token")
async def get_stream_token(
    user: UserModel = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatTokenResponse:
    """
    Issue a Stream user token for the authenticated caller.

    Returns:
        ChatTokenResponse: token, userId, name, image
    """
    return ChatTokenResponse(**chat_service.get_token(user))
