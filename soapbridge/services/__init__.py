"""SOAP endpoint services."""

from .soap_service import SOAPService

__all__ = ['SOAPService']
