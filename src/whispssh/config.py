from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Upper bound (seconds) on a single broadcast send to one member
    send_timeout: float = 10.0

    # Log one line per plain HTTP request (WebSocket sessions log separately)
    access_log: bool = True

    model_config = SettingsConfigDict(env_prefix="WHISPSSH_")
