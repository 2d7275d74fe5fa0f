"""API request/response schemas for FastAPI endpoints."""

from pydantic import BaseModel, StrictStr


# Channel schemas
class ChannelCreate(BaseModel):
    password: StrictStr


class ChannelCreated(BaseModel):
    channel_id: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    channels: int
