import logging

import uvicorn

from whispssh.app import create_app
from whispssh.config import Settings

_settings = Settings()

logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Expose app for ASGI servers: uvicorn whispssh:app
app = create_app(_settings)


def main() -> None:
    """Console entry point running uvicorn directly."""
    uvicorn.run(
        "whispssh:app",
        host=_settings.host,
        port=_settings.port,
        ws="websockets",
        access_log=False,
    )
