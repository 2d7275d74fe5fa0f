from .channel import Channel, ChannelAuthError, MessageSink, Payload
from .registry import ChannelRegistry

__all__ = [
    "Channel",
    "ChannelAuthError",
    "ChannelRegistry",
    "MessageSink",
    "Payload",
]
