"""
SOAP API Adapter for legacy web services.
Calls WSDL-described operations through zeep and decodes XML payloads.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict, List, Optional, Union

import httpx
from zeep import AsyncClient, Settings
from zeep.helpers import serialize_object
from zeep.transports import AsyncTransport
from zeep.xsd.valueobjects import CompoundValue

from soapbridge.config.soap_endpoint_loader import SOAPEndpointDefinition
from soapbridge.core.config import AppSettings, get_settings
from soapbridge.core.errors import (
    ProcessingError,
    RequestError,
    RetrievalError,
)
from soapbridge.data.xml_decoder import decode_xml

logger = logging.getLogger(__name__)

TransportFactory = Callable[[], AsyncTransport]

SOAP_ENV_NAMESPACES = {
    'http://schemas.xmlsoap.org/soap/envelope/',
    'http://www.w3.org/2003/05/soap-envelope',
}


class SOAPAdapter:
    """
    Adapter for SOAP web services.

    Every call binds a fresh zeep client from the WSDL; nothing is reused
    between calls.
    """

    def __init__(
        self,
        wsdl_url: str,
        options: Optional[Dict[str, Any]] = None,
        transport_factory: Optional[TransportFactory] = None
    ):
        """
        Initialize SOAP adapter

        Args:
            wsdl_url: WSDL URL or path describing the service
            options: Keyword arguments passed verbatim to zeep.AsyncClient
            transport_factory: Builds a fresh transport for each call when
                               options do not carry a transport of their own
        """
        self.wsdl_url = wsdl_url
        self.options = dict(options or {})
        self.transport_factory = transport_factory

    @classmethod
    def from_endpoint(
        cls,
        definition: SOAPEndpointDefinition,
        auth_config: Optional[Dict[str, Any]] = None,
        settings: Optional[AppSettings] = None,
        timeout: Optional[float] = None,
        verify_ssl: Optional[bool] = None
    ) -> "SOAPAdapter":
        """
        Build an adapter for a configured endpoint.

        Args:
            definition: Endpoint definition from soap_endpoints.yaml
            auth_config: Resolved authentication config (username/password)
            settings: Application settings; defaults to the global settings
            timeout: Catalogue-level timeout overriding SOAP_TIMEOUT
            verify_ssl: Catalogue-level TLS verification overriding SOAP_VERIFY_SSL

        Returns:
            Configured SOAPAdapter
        """
        settings = settings or get_settings()
        auth_config = auth_config or {}

        username = auth_config.get('username') or settings.soap_username
        password = auth_config.get('password') or settings.soap_password
        timeout = settings.soap_timeout if timeout is None else timeout
        verify = settings.soap_verify_ssl if verify_ssl is None else verify_ssl

        auth = None
        if username and password:
            auth = httpx.BasicAuth(username, password)
        elif definition.requires_auth:
            logger.warning(f"Endpoint {definition.name} requires auth but no credentials are configured")

        operation_timeout = settings.soap_operation_timeout
        if operation_timeout is None:
            operation_timeout = timeout

        def transport_factory() -> AsyncTransport:
            return AsyncTransport(
                client=httpx.AsyncClient(auth=auth, verify=verify, timeout=operation_timeout),
                wsdl_client=httpx.Client(auth=auth, verify=verify, timeout=timeout)
            )

        options: Dict[str, Any] = {
            'settings': Settings(
                strict=settings.soap_strict,
                xml_huge_tree=settings.soap_xml_huge_tree
            )
        }
        if definition.service_name:
            options['service_name'] = definition.service_name
        if definition.port_name:
            options['port_name'] = definition.port_name

        return cls(
            wsdl_url=definition.wsdl_url or settings.soap_wsdl_url,
            options=options,
            transport_factory=transport_factory
        )

    def _new_transport(self) -> Optional[AsyncTransport]:
        """Build the transport for one call, or None if the caller supplied one."""
        # Transports passed in through options belong to the caller
        if 'transport' in self.options:
            return None
        if self.transport_factory is not None:
            return self.transport_factory()
        return AsyncTransport()

    @asynccontextmanager
    async def _bound_client(self) -> AsyncIterator[AsyncClient]:
        """
        Bind a zeep client for one call.

        The WSDL is loaded and parsed in a worker thread. A transport built
        here is closed on exit, including when binding itself fails.
        """
        transport = self._new_transport()
        kwargs = dict(self.options)
        if transport is not None:
            kwargs['transport'] = transport

        try:
            logger.debug(f"Binding SOAP client for {self.wsdl_url}")
            yield await asyncio.to_thread(AsyncClient, self.wsdl_url, **kwargs)
        finally:
            if transport is not None:
                await _close_transport(transport)

    async def request(self, operation: str, args: Any = None) -> Any:
        """
        Invoke a SOAP operation and return its primary result element.

        Args:
            operation: Operation name as declared in the WSDL
            args: Operation input. A dict is passed as keyword arguments,
                  a tuple or list as positional arguments.

        Returns:
            Primary result element as plain dicts, lists and scalars

        Raises:
            RequestError: If binding or invocation fails
        """
        try:
            async with self._bound_client() as client:
                method = client.service[operation]
                logger.info(f"Calling SOAP operation {operation} on {self.wsdl_url}")
                result = await self._invoke(method, args)
            primary = serialize_object(_primary_element(result), dict)
        except Exception as e:
            raise RequestError(e) from e

        logger.debug(f"SOAP operation {operation} returned {type(primary).__name__}")
        return primary

    @staticmethod
    async def _invoke(method: Callable, args: Any) -> Any:
        if args is None:
            return await method()
        if isinstance(args, dict):
            return await method(**args)
        if isinstance(args, (list, tuple)):
            return await method(*args)
        return await method(args)

    async def retrieve(self, operation: str, args: Any = None) -> Any:
        """
        Retrieve the response of a SOAP operation.

        Raises:
            RetrievalError: If the request fails
        """
        try:
            return await self.request(operation, args)
        except Exception as e:
            raise RetrievalError(e) from e

    async def parse(self, xml: Union[str, bytes]) -> Dict[str, Any]:
        """
        Decode an XML payload.

        Raises:
            ParsingError: If the payload is not well-formed XML
        """
        return decode_xml(xml)

    async def call_method(self, operation: str, args: Any = None) -> Dict[str, Any]:
        """
        Call a SOAP operation and decode its XML response.

        Args:
            operation: Operation name as declared in the WSDL
            args: Operation input

        Returns:
            Decoded response as dictionary

        Raises:
            ProcessingError: If retrieving or parsing fails
        """
        try:
            response = await self.retrieve(operation, args)
            return await self.parse(response)
        except Exception as e:
            raise ProcessingError(e) from e

    async def get_operations(self) -> List[str]:
        """
        Get list of operations declared in the WSDL.

        Raises:
            RequestError: If the WSDL cannot be bound
        """
        try:
            async with self._bound_client() as client:
                operations = set()
                for service in client.wsdl.services.values():
                    for port in service.ports.values():
                        # zeep has no public API listing a binding's operations
                        operations.update(port.binding._operations.keys())
        except Exception as e:
            raise RequestError(e) from e

        return sorted(operations)

    async def health_check(self) -> bool:
        """
        Check that the WSDL can be bound and declares operations.

        Returns:
            True if healthy, False otherwise
        """
        try:
            operations = await self.get_operations()
        except RequestError as e:
            logger.warning(f"SOAP health check failed for {self.wsdl_url}: {e}")
            return False
        return bool(operations)


async def _close_transport(transport: AsyncTransport) -> None:
    # AsyncTransport.aclose leaves the WSDL client open
    await transport.aclose()
    transport.wsdl_client.close()


def _is_soap_envelope(result: Any) -> bool:
    """True for the body/header envelope zeep returns for operations with SOAP headers."""
    if not isinstance(result, CompoundValue):
        return False
    elements = dict(result._xsd_type.elements)
    if set(elements) != {'body', 'header'}:
        return False
    return all(
        element.qname is not None and element.qname.namespace in SOAP_ENV_NAMESPACES
        for element in elements.values()
    )


def _primary_element(result: Any) -> Any:
    """Strip call-convention wrappers from an operation result."""
    if isinstance(result, tuple):
        return result[0] if result else None
    if _is_soap_envelope(result):
        return result['body']
    return result
