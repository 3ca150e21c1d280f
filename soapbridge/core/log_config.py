"""Logging setup shared by scripts and services using the bridge."""

import logging
from typing import Optional

from soapbridge.core.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
        log_file: Optional file to log to in addition to stderr;
                  defaults to the LOG_FILE setting
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )

    # zeep logs every WSDL import at debug level
    logging.getLogger("zeep").setLevel(max(logging.getLogger().level, logging.INFO))
