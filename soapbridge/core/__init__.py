"""Core modules for the SOAP bridge."""

from .config import AppSettings, get_settings, replace_env_vars
from .errors import (
    ErrorKind,
    SOAPBridgeError,
    RequestError,
    RetrievalError,
    ParsingError,
    ProcessingError,
    ConfigurationError
)
from .log_config import setup_logging

__all__ = [
    'AppSettings',
    'get_settings',
    'replace_env_vars',
    'ErrorKind',
    'SOAPBridgeError',
    'RequestError',
    'RetrievalError',
    'ParsingError',
    'ProcessingError',
    'ConfigurationError',
    'setup_logging'
]
