"""
Identity sync event functions.

Inngest functions that react to identity-provider user lifecycle events
and delegate to IdentitySyncService. Served under /api/inngest.

Dependencies: inngest, talentiq.application.services
System role: Background identity synchronization workers
"""

import logging
from typing import Callable

import inngest
import inngest.fast_api
from fastapi import FastAPI

from talentiq.application.services import IdentitySyncService
from talentiq.configs import Settings

logger = logging.getLogger(__name__)

USER_CREATED_EVENT = "clerk/user.created"
USER_DELETED_EVENT = "clerk/user.deleted"


def create_inngest_client(settings: Settings) -> inngest.Inngest:
    """
    Build the Inngest client from settings.

    Args:
        settings: Application settings

    Returns:
        inngest.Inngest: Client; production mode requires a signing key
    """
    return inngest.Inngest(
        app_id=settings.inngest.app_id,
        event_key=settings.inngest.event_key,
        signing_key=settings.inngest.signing_key,
        is_production=settings.is_production,
        logger=logger,
    )


def create_identity_sync_functions(
    client: inngest.Inngest,
    get_service: Callable[[], IdentitySyncService],
) -> list[inngest.Function]:
    """
    Define the sync-user and delete-user-from-db functions.

    Args:
        client: Inngest client the functions are registered with
        get_service: Resolves the sync service at run time, after startup

    Returns:
        list[inngest.Function]: Functions to serve
    """

    @client.create_function(
        fn_id="sync-user",
        trigger=inngest.TriggerEvent(event=USER_CREATED_EVENT),
    )
    async def sync_user(ctx: inngest.Context, step: inngest.Step) -> dict[str, str]:
        user = await get_service().handle_user_created(ctx.event.data)
        return {"userId": str(user.id), "clerkId": user.clerk_id}

    @client.create_function(
        fn_id="delete-user-from-db",
        trigger=inngest.TriggerEvent(event=USER_DELETED_EVENT),
    )
    async def delete_user_from_db(ctx: inngest.Context, step: inngest.Step) -> dict[str, object]:
        clerk_id = ctx.event.data["id"]
        deleted = await get_service().handle_user_deleted(ctx.event.data)
        return {"clerkId": clerk_id, "deleted": deleted}

    return [sync_user, delete_user_from_db]


def serve_identity_sync(
    app: FastAPI,
    settings: Settings,
    get_service: Callable[[], IdentitySyncService],
) -> None:
    """Mount the Inngest endpoint at /api/inngest."""
    client = create_inngest_client(settings)
    functions = create_identity_sync_functions(client, get_service)
    inngest.fast_api.serve(app, client, functions, serve_path="/api/inngest")
