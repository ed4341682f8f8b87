"""Process entry point: serve the API with uvicorn.

Host and port come from ``API_HOST`` and ``API_PORT`` (defaults
``0.0.0.0`` and ``5000``).

Usage:
    user-api
    python -m user_api
"""
import logging

from uvicorn import Config, Server

from .core.config import get_settings
from .main import app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    logger.info(f"API running on {settings.api_host}:{settings.api_port}")
    try:
        Server(config).run()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
