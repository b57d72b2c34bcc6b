"""Endpoints for the text-generation API key."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from menu_pricing.api.models import ApiKeyUpdate

if TYPE_CHECKING:
    from menu_pricing.containers import AppContainer

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/api-key")
async def api_key_status(request: Request) -> dict[str, object]:
    """Report whether a key resolves and where it comes from, never the key."""
    container: AppContainer = request.app.state.container
    resolved = container.api_key_service.resolve()
    return {
        "configured": resolved is not None,
        "source": resolved.source if resolved else None,
    }


@router.put("/api-key")
async def set_api_key(payload: ApiKeyUpdate, request: Request) -> dict[str, object]:
    """Store the user-provided key."""
    container: AppContainer = request.app.state.container
    container.api_key_service.set_user_key(payload.api_key)
    return await api_key_status(request)


@router.delete("/api-key")
async def clear_api_key(request: Request) -> dict[str, object]:
    """Remove the user-provided key."""
    container: AppContainer = request.app.state.container
    container.api_key_service.clear_user_key()
    return await api_key_status(request)
