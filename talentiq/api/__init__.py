"""
HTTP API layer.

Exports:
  - api_router: All routers, mounted by the application under /api
"""

from fastapi import APIRouter

from .routers import chat_router, health_router, problems_router, sessions_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(chat_router)
api_router.include_router(sessions_router)
api_router.include_router(problems_router)

__all__ = ["api_router"]
