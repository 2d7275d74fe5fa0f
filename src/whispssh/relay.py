"""Per-connection session loop relaying WebSocket frames to a channel."""

import logging

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from whispssh.services import Channel, Payload

logger = logging.getLogger(__name__)


class WebSocketConnection:
    """Connection handle wrapping a Starlette WebSocket.

    Text frames stay text and binary frames stay binary in both
    directions.
    """

    def __init__(self, websocket: WebSocket) -> None:
        self._ws = websocket

    async def send(self, payload: Payload) -> None:
        if isinstance(payload, bytes):
            await self._ws.send_bytes(payload)
        else:
            await self._ws.send_text(payload)

    async def recv(self) -> Payload | None:
        """Return the next frame, or None once the peer has disconnected."""
        message = await self._ws.receive()
        if message["type"] == "websocket.disconnect":
            return None
        text = message.get("text")
        if text is not None:
            return text
        return message.get("bytes") or b""

    async def close(self) -> None:
        if (
            self._ws.application_state == WebSocketState.CONNECTED
            and self._ws.client_state == WebSocketState.CONNECTED
        ):
            await self._ws.close()


async def run_session(
    connection: WebSocketConnection,
    channel: Channel,
    member_id: str,
) -> None:
    """Relay inbound frames from one member until its connection ends.

    Whatever ends the loop, the connection is closed and the member
    leaves the channel exactly once.

    Args:
        connection: Live connection of the member
        channel: Channel the member has joined
        member_id: Id returned by Channel.join for this connection
    """
    try:
        while True:
            payload = await connection.recv()
            if payload is None:
                break
            await channel.broadcast(member_id, payload)
    except Exception as e:
        logger.debug(f"Session {member_id} in channel {channel.id} ended: {e!r}")
    finally:
        try:
            await connection.close()
        except Exception as e:
            logger.debug(f"Error closing connection for {member_id}: {e!r}")
        await channel.leave(member_id)
