import asyncio
import logging
import uuid
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

Payload = str | bytes


class ChannelAuthError(Exception):
    """Raised when a channel is unknown or the supplied password is wrong."""


class MessageSink(Protocol):
    async def send(self, payload: Payload) -> None: ...


def new_id() -> str:
    return str(uuid.uuid4())


class Channel:
    """A password-protected broadcast domain.

    The member table maps member ids to connection handles and is only
    read or mutated while holding ``self._lock``. The lock is private to
    this channel; no other lock is ever acquired while it is held.
    """

    def __init__(
        self,
        channel_id: str,
        credential: str,
        id_factory: Callable[[], str] = new_id,
        send_timeout: float = 10.0,
    ) -> None:
        self._id = channel_id
        self._credential = credential
        self._id_factory = id_factory
        self._send_timeout = send_timeout
        self._members: dict[str, MessageSink] = {}
        self._lock = asyncio.Lock()

    @property
    def id(self) -> str:
        return self._id

    def check_credential(self, credential: str) -> bool:
        return credential == self._credential

    async def join(self, credential: str, connection: MessageSink) -> str:
        """Register a connection as a new member and return its id."""
        if not self.check_credential(credential):
            raise ChannelAuthError("Invalid channel ID or password")

        member_id = self._id_factory()
        async with self._lock:
            self._members[member_id] = connection
        logger.info(f"Client {member_id} joined channel: {self._id}")
        return member_id

    async def leave(self, member_id: str) -> None:
        async with self._lock:
            removed = self._members.pop(member_id, None)
        if removed is not None:
            logger.info(f"Client {member_id} left channel: {self._id}")

    async def broadcast(self, sender_id: str, payload: Payload) -> None:
        """Send payload to every current member except the sender.

        Delivery is best effort: a recipient that fails or times out is
        logged and skipped, and stays registered until it leaves.
        """
        async with self._lock:
            recipients = [
                (member_id, conn)
                for member_id, conn in self._members.items()
                if member_id != sender_id
            ]
            if not recipients:
                return
            results = await asyncio.gather(
                *(self._send(conn, payload) for _, conn in recipients),
                return_exceptions=True,
            )

        for (member_id, _), result in zip(recipients, results):
            if isinstance(result, BaseException):
                logger.warning(
                    f"Error sending to client {member_id} in channel {self._id}: "
                    f"{result!r}"
                )

    async def _send(self, conn: MessageSink, payload: Payload) -> None:
        async with asyncio.timeout(self._send_timeout):
            await conn.send(payload)

    async def member_ids(self) -> list[str]:
        async with self._lock:
            return list(self._members)

    def __len__(self) -> int:
        return len(self._members)
