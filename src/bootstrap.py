"""Process-level setup for applications embedding the invoicing engine"""

import logging
from config import ApplicationConfig


def configure_logging(config=ApplicationConfig) -> None:
    """Apply LOG_LEVEL and LOG_FORMAT from the application config"""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )
    logging.getLogger().setLevel(config.LOG_LEVEL)
