import sys

from loguru import logger

from config.settings import LOG_FILE, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL, log_file: str | None = LOG_FILE):
    """Configure a single stderr sink with a unified format and an optional file sink.

    Modules log via `logger.bind(tab="Overview")` etc so the sink prints a clear prefix.
    """
    logger.remove()
    logger.configure(extra={"tab": "App"})
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | [{extra[tab]}] {message}",
        level=level,
    )
    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | [{extra[tab]}] {message}",
            level=level,
        )
