"""FastAPI dependency injection providers for services."""

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, Request, WebSocket

if TYPE_CHECKING:
    from whispssh.services import ChannelRegistry


def get_registry(request: Request) -> "ChannelRegistry":
    """Get the channel registry from app state."""
    return request.app.state.registry


# WebSocket-specific dependencies (WebSocket routes don't have Request)
def get_registry_ws(websocket: WebSocket) -> "ChannelRegistry":
    """Get the channel registry from app state (for WebSocket routes)."""
    return websocket.app.state.registry


RegistryDep = Annotated["ChannelRegistry", Depends(get_registry)]
RegistryWsDep = Annotated["ChannelRegistry", Depends(get_registry_ws)]
