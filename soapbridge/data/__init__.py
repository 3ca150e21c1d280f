"""
Data adapters re-export module
"""
from soapbridge.data.soap_adapter import SOAPAdapter
from soapbridge.data.xml_decoder import decode_xml

__all__ = [
    'SOAPAdapter',
    'decode_xml'
]
