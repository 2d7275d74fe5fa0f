import asyncio
import logging
from typing import Callable

from whispssh.services.channel import Channel, ChannelAuthError, new_id

logger = logging.getLogger(__name__)


class ChannelRegistry:
    """Process-wide mapping of channel id to Channel.

    Channels are never removed, so the mapping only grows for the
    lifetime of the process.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = new_id,
        send_timeout: float = 10.0,
    ) -> None:
        self._channels: dict[str, Channel] = {}
        self._lock = asyncio.Lock()
        self._id_factory = id_factory
        self._send_timeout = send_timeout

    async def create_channel(self, credential: str) -> str:
        channel_id = self._id_factory()
        channel = Channel(
            channel_id,
            credential,
            id_factory=self._id_factory,
            send_timeout=self._send_timeout,
        )
        async with self._lock:
            self._channels[channel_id] = channel
        logger.info(f"Created channel with ID: {channel_id}")
        return channel_id

    async def get_channel(self, channel_id: str) -> Channel | None:
        async with self._lock:
            return self._channels.get(channel_id)

    async def authorize(self, channel_id: str, credential: str) -> Channel:
        """Return the channel if the credential matches.

        Raises ChannelAuthError for an unknown channel and for a wrong
        password alike, so callers cannot tell the two apart.
        """
        channel = await self.get_channel(channel_id)
        if channel is None or not channel.check_credential(credential):
            logger.warning(f"Failed join attempt for channel: {channel_id}")
            raise ChannelAuthError("Invalid channel ID or password")
        return channel

    async def count(self) -> int:
        async with self._lock:
            return len(self._channels)
