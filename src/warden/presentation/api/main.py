"""ASGI entry point: ``uvicorn warden.presentation.api.main:app``."""

import uvicorn

from warden.presentation.api.app import create_app
from warden_config.settings import get_settings

app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "warden.presentation.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
