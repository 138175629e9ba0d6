#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from chatly.config import Settings
from chatly.util.logging import setup_logging
from chatly.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    if not settings.notion.is_configured:
        logfire.warn(
            "Notion is not configured; store-backed routes will fail until "
            "NOTION__API_KEY and the database ids are set"
        )

    try:
        logfire.info("Starting FastAPI application", port=settings.port)

        uvicorn.run(
            "chatly.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
