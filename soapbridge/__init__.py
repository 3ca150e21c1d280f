"""
SOAP XML bridge: call WSDL-described operations and decode XML payloads
into JSON-like structures.
"""

from soapbridge.core.errors import (
    ErrorKind,
    SOAPBridgeError,
    RequestError,
    RetrievalError,
    ParsingError,
    ProcessingError,
    ConfigurationError
)
from soapbridge.data.soap_adapter import SOAPAdapter
from soapbridge.data.xml_decoder import decode_xml
from soapbridge.services.soap_service import SOAPService

__version__ = "1.0.0"

__all__ = [
    'SOAPAdapter',
    'SOAPService',
    'decode_xml',
    'ErrorKind',
    'SOAPBridgeError',
    'RequestError',
    'RetrievalError',
    'ParsingError',
    'ProcessingError',
    'ConfigurationError'
]
