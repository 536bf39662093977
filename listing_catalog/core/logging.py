"""
Logging Configuration
====================

Centralized logging setup using loguru.
Structured JSON logging for production, colourised logging for development.
Modules keep using ``logging.getLogger(__name__)``; their records are
forwarded to loguru by ``InterceptHandler``.
"""

import logging
import sys

from loguru import logger

from listing_catalog.core.config import settings


class InterceptHandler(logging.Handler):
    """
    Redirect standard logging to Loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging() -> None:
    """
    Configure logging based on environment.
    """
    logging.root.handlers = []
    logger.remove()

    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL.upper()

    if settings.APP_ENV == "production":
        logger.add(
            sys.stderr,
            format="{message}",
            serialize=True,
            level=level,
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level=level,
            colorize=True,
        )

    # Intercept standard library logs (uvicorn, sqlalchemy, our own modules)
    logging.basicConfig(handlers=[InterceptHandler()], level=level, force=True)
    for name in ["uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "sqlalchemy"]:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    # SQL statement logging only in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
