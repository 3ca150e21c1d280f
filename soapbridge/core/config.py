"""
Application settings for the SOAP bridge.
Values come from environment variables and an optional .env file.
"""

import os
import re
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class AppSettings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "SOAP XML Bridge"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # SOAP transport
    soap_wsdl_url: str = ""
    soap_username: Optional[str] = None
    soap_password: Optional[str] = None
    soap_timeout: float = Field(30.0, gt=0)
    soap_operation_timeout: Optional[float] = None
    soap_verify_ssl: bool = True
    soap_strict: bool = False
    soap_xml_huge_tree: bool = False

    # Endpoint catalogue
    soap_endpoints_config: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )


def replace_env_vars(config: Any) -> Any:
    """
    Recursively replace environment variables in configuration.
    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax, also inside
    longer strings. Unset variables without a default are left as is.
    """
    if isinstance(config, dict):
        return {k: replace_env_vars(v) for k, v in config.items()}
    elif isinstance(config, list):
        return [replace_env_vars(item) for item in config]
    elif isinstance(config, str):
        return _ENV_PATTERN.sub(_substitute, config)
    return config


def _substitute(match: "re.Match") -> str:
    var_name, default = match.group(1), match.group(2)
    value = os.getenv(var_name)
    if value is not None:
        return value
    if default is not None:
        return default
    return match.group(0)


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get application settings."""
    global _settings

    if _settings is None:
        load_dotenv()
        _settings = AppSettings()

    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
