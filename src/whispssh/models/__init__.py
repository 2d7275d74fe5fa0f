from .api import ChannelCreate, ChannelCreated, ErrorResponse, HealthResponse

__all__ = [
    "ChannelCreate",
    "ChannelCreated",
    "ErrorResponse",
    "HealthResponse",
]
