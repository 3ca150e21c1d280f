"""
SOAP Endpoint Configuration Loader

Loads and parses SOAP endpoint definitions from YAML configuration files.
"""

import os
import logging
import yaml
from typing import Dict, List, Any, Optional
from pathlib import Path
from pydantic import BaseModel, Field

from soapbridge.core.config import get_settings, replace_env_vars

logger = logging.getLogger(__name__)


class SOAPParameter(BaseModel):
    """Model for SOAP parameter definition"""
    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    default: Optional[Any] = None


class SOAPEndpointDefinition(BaseModel):
    """Model for SOAP endpoint definition"""
    name: str
    description: str = ""
    wsdl_url: str = ""
    operation: str
    service_name: Optional[str] = None
    port_name: Optional[str] = None
    requires_auth: bool = False
    parameters: List[SOAPParameter] = Field(default_factory=list)


class SOAPEndpointConfig(BaseModel):
    """Complete SOAP configuration"""
    soap_endpoints: List[SOAPEndpointDefinition] = Field(default_factory=list)
    authentication: Dict[str, Any] = Field(default_factory=dict)
    default_wsdl_url: str = ""
    timeout: Optional[float] = None
    verify_ssl: Optional[bool] = None


class SOAPEndpointLoader:
    """Loads and manages SOAP endpoint configurations"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize SOAP endpoint loader

        Args:
            config_path: Path to YAML config file. If None, uses the
                         SOAP_ENDPOINTS_CONFIG setting or the default location.
        """
        if config_path is None:
            config_path = get_settings().soap_endpoints_config

        if config_path is None:
            # Try multiple locations
            project_path = Path(__file__).parent.parent.parent
            possible_paths = [
                Path.cwd() / "config" / "soap_endpoints.yaml",
                project_path / "config" / "soap_endpoints.yaml",
            ]

            for path in possible_paths:
                if path.exists():
                    config_path = path
                    break

            if config_path is None:
                config_path = possible_paths[0]

        self.config_path = Path(config_path)
        self.config: SOAPEndpointConfig = SOAPEndpointConfig()
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file"""
        if not self.config_path.exists():
            logger.info(f"No SOAP endpoint configuration at {self.config_path}")
            return

        with open(self.config_path, 'r') as f:
            raw_config = yaml.safe_load(f)

        if not raw_config:
            return

        raw_config = replace_env_vars(raw_config)
        self.config = SOAPEndpointConfig(**raw_config)

        # Endpoints without their own WSDL fall back to the default one
        for endpoint in self.config.soap_endpoints:
            if not endpoint.wsdl_url:
                endpoint.wsdl_url = self.config.default_wsdl_url

        logger.info(
            f"Loaded {len(self.config.soap_endpoints)} SOAP endpoints from {self.config_path}"
        )

    def get_endpoint(self, name: str) -> Optional[SOAPEndpointDefinition]:
        """Get endpoint definition by name"""
        for endpoint in self.config.soap_endpoints:
            if endpoint.name == name:
                return endpoint

        return None

    def get_all_endpoints(self) -> List[SOAPEndpointDefinition]:
        """Get all endpoint definitions"""
        return self.config.soap_endpoints

    def get_endpoints_by_description(self, query: str) -> List[SOAPEndpointDefinition]:
        """
        Find endpoints matching a description query

        Args:
            query: Search query to match against endpoint names and descriptions

        Returns:
            List of matching endpoint definitions
        """
        query_lower = query.lower()
        matching = []

        for endpoint in self.config.soap_endpoints:
            if query_lower in endpoint.description.lower() or query_lower in endpoint.name.lower():
                matching.append(endpoint)

        return matching

    def get_auth_config(self) -> Dict[str, Any]:
        """Get authentication configuration with credentials resolved from the environment"""
        auth_config = self.config.authentication.copy()

        if 'username_env_var' in auth_config:
            username = os.getenv(auth_config['username_env_var'])
            if username:
                auth_config['username'] = username

        if 'password_env_var' in auth_config:
            password = os.getenv(auth_config['password_env_var'])
            if password:
                auth_config['password'] = password

        return auth_config


# Global instance
_soap_endpoint_loader: Optional[SOAPEndpointLoader] = None


def get_soap_endpoint_loader() -> SOAPEndpointLoader:
    """Get global SOAP endpoint loader instance"""
    global _soap_endpoint_loader

    if _soap_endpoint_loader is None:
        _soap_endpoint_loader = SOAPEndpointLoader()

    return _soap_endpoint_loader
