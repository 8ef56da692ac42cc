"""Logging configuration for the virtual filesystem."""

import logging
from typing import Optional

from .config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(config: Optional[Config] = None) -> logging.Logger:
    """Configure the ``vfs`` logger hierarchy.

    This should be called once at application startup. Library modules only
    create module-level loggers; without this call their records propagate
    to whatever the host application configured.

    Args:
        config: Configuration to read ``log_level`` from (default: from env)

    Returns:
        The configured ``vfs`` logger

    Environment Variables:
        VFS_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL

    Example:
        ```python
        from vfs.observability import configure_logging

        configure_logging(Config(log_level="DEBUG"))
        ```
    """
    if config is None:
        config = Config.from_env()
    logger = logging.getLogger("vfs")
    logger.setLevel(config.log_level)

    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Calling twice must not stack handlers
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
