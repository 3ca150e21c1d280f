"""Configuration module"""
from soapbridge.config.soap_endpoint_loader import (
    SOAPEndpointLoader,
    SOAPEndpointDefinition,
    SOAPParameter,
    SOAPEndpointConfig,
    get_soap_endpoint_loader
)

__all__ = [
    'SOAPEndpointLoader',
    'SOAPEndpointDefinition',
    'SOAPParameter',
    'SOAPEndpointConfig',
    'get_soap_endpoint_loader'
]
