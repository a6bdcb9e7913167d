"""CRMDesk launcher script."""

import sys

import uvicorn
from loguru import logger

from .core.config import get_server_settings
from .core.logging_config import configure_logging


def main():
    """Main entry point."""
    settings = get_server_settings()
    configure_logging(settings)

    logger.info(f"Starting CRMDesk server on {settings.api_host}:{settings.api_port}")
    try:
        uvicorn.run(
            "crmdesk.main:app",
            host=settings.api_host,
            port=settings.api_port,
            reload=settings.reload,
            log_level=settings.log_level.lower()
            if settings.log_level in ("DEBUG", "INFO", "WARNING", "ERROR")
            else "info",
        )
    except Exception as e:
        logger.error(f"Error running CRMDesk: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
