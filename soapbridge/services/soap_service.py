"""
Named SOAP endpoint service.
Resolves endpoints from soap_endpoints.yaml and calls them through SOAPAdapter.
"""
import logging
from typing import Any, Dict, List, Optional

from soapbridge.config.soap_endpoint_loader import (
    SOAPEndpointDefinition,
    SOAPEndpointLoader,
    get_soap_endpoint_loader
)
from soapbridge.core.config import AppSettings, get_settings
from soapbridge.core.errors import ConfigurationError
from soapbridge.data.soap_adapter import SOAPAdapter

logger = logging.getLogger(__name__)


class SOAPService:
    """Calls configured SOAP endpoints by name"""

    def __init__(
        self,
        loader: Optional[SOAPEndpointLoader] = None,
        settings: Optional[AppSettings] = None
    ):
        self.loader = loader or get_soap_endpoint_loader()
        self.settings = settings or get_settings()

    def list_endpoints(self) -> List[str]:
        """Names of all configured endpoints"""
        return [endpoint.name for endpoint in self.loader.get_all_endpoints()]

    def get_adapter(self, definition: SOAPEndpointDefinition) -> SOAPAdapter:
        """Build an adapter for an endpoint definition"""
        return SOAPAdapter.from_endpoint(
            definition,
            auth_config=self.loader.get_auth_config(),
            settings=self.settings,
            timeout=self.loader.config.timeout,
            verify_ssl=self.loader.config.verify_ssl
        )

    @staticmethod
    def build_arguments(
        definition: SOAPEndpointDefinition,
        arguments: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Apply parameter defaults and check required parameters.

        Args:
            definition: Endpoint definition
            arguments: Caller supplied arguments

        Returns:
            Arguments for the SOAP operation

        Raises:
            ConfigurationError: If required parameters are missing
        """
        args = dict(arguments or {})

        for param in definition.parameters:
            if param.name not in args and param.default is not None:
                args[param.name] = param.default

        missing = [
            param.name for param in definition.parameters
            if param.required and args.get(param.name) is None
        ]
        if missing:
            raise ConfigurationError(
                f"endpoint {definition.name} is missing required parameters: {', '.join(missing)}"
            )

        return args

    async def call_endpoint(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Call a configured endpoint and decode its XML response.

        Args:
            name: Endpoint name from the catalogue
            arguments: Operation arguments

        Returns:
            Decoded response

        Raises:
            ConfigurationError: If the endpoint is unknown or arguments are incomplete
            ProcessingError: If the call or decoding fails
        """
        definition = self.loader.get_endpoint(name)
        if definition is None:
            raise ConfigurationError(f"unknown SOAP endpoint {name!r}")

        args = self.build_arguments(definition, arguments)
        adapter = self.get_adapter(definition)

        logger.info(f"Calling SOAP endpoint {name} ({definition.operation})")
        return await adapter.call_method(definition.operation, args)
