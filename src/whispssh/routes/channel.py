"""Channel endpoints: create over HTTP, join over WebSocket."""

import logging

from fastapi import APIRouter, WebSocket, status
from fastapi.responses import JSONResponse

from whispssh.dependencies import RegistryDep, RegistryWsDep
from whispssh.models import ChannelCreate, ChannelCreated, ErrorResponse
from whispssh.relay import WebSocketConnection, run_session
from whispssh.services import ChannelAuthError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/channel", tags=["channel"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_channel(body: ChannelCreate, registry: RegistryDep) -> ChannelCreated:
    """Create a password-protected channel and return its id."""
    channel_id = await registry.create_channel(body.password)
    return ChannelCreated(channel_id=channel_id)


async def _deny(websocket: WebSocket, reason: str) -> None:
    """Reject the handshake without upgrading.

    Servers without the denial-response extension only let us close the
    handshake, which they answer with a plain 403.
    """
    extensions = websocket.scope.get("extensions") or {}
    if "websocket.http.response" in extensions:
        await websocket.send_denial_response(
            JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=ErrorResponse(error=reason).model_dump(),
            )
        )
    else:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=reason)


@router.websocket("/{channel_id}")
async def join_channel(
    websocket: WebSocket,
    channel_id: str,
    registry: RegistryWsDep,
    password: str = "",
) -> None:
    """Join a channel and relay messages until the connection ends."""
    try:
        channel = await registry.authorize(channel_id, password)
    except ChannelAuthError as e:
        await _deny(websocket, str(e))
        return

    try:
        await websocket.accept()
    except Exception as e:
        logger.error(f"Failed to upgrade connection for channel {channel_id}: {e!r}")
        return

    connection = WebSocketConnection(websocket)
    member_id = await channel.join(password, connection)
    await run_session(connection, channel, member_id)
