"""
Process entry point.

Runs the Flask API and, when enabled in the Telegram settings record, the
Telegram bridge in the same process so both channels share one set of
stores. The HTTP server runs in a background thread while aiogram owns the
asyncio event loop.
"""

# Python Packages
import asyncio
import logging
import threading

# Local Imports
from .app import create_app
from .base import constants
from .config.container import EXTENSION_KEY
from .util.logging_config import setup_logging


logger = logging.getLogger(__name__)





def run_http(app) -> None:
    logger.info(f"SOLess AI Engine running on port {constants.PORT}")
    app.run(host = "0.0.0.0", port = constants.PORT, threaded = True, use_reloader = False)


def main() -> None:
    setup_logging()

    app = create_app()
    container = app.extensions[EXTENSION_KEY]

    if not container.telegram_settings.should_start():
        logger.info("Telegram bridge disabled")
        run_http(app)
        return

    from .telegram.bot import run_polling

    http_thread = threading.Thread(target = run_http, args = (app,), name = "http", daemon = True)
    http_thread.start()

    try:
        asyncio.run(run_polling(container, container.telegram_settings.resolve_token()))
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
