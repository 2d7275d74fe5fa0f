from .channel import router as channel_router
from .health import router as health_router

__all__ = [
    "channel_router",
    "health_router",
]
