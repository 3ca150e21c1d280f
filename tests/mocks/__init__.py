"""Mock objects for testing"""

from .mock_responses import MockSOAPResponses
from .mock_zeep import make_envelope, make_zeep_client

__all__ = [
    'MockSOAPResponses',
    'make_envelope',
    'make_zeep_client'
]
