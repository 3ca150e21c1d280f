"""
Error taxonomy for the SOAP bridge.

Each pipeline stage catches failures once, re-describes them with a fixed
prefix and re-raises with the original exception linked as ``__cause__``.
A failure deep in the transport therefore reads like
``processing failed: retrieving failed: request failed: timeout``.
"""

from enum import Enum
from typing import List, Optional

from zeep.exceptions import Fault


class ErrorKind(str, Enum):
    """Stage that produced an error."""
    REQUEST = "request"
    RETRIEVAL = "retrieval"
    PARSING = "parsing"
    PROCESSING = "processing"
    CONFIGURATION = "configuration"


class SOAPBridgeError(Exception):
    """Base class for all bridge errors."""

    kind: ErrorKind = ErrorKind.PROCESSING
    prefix: str = "bridge error"

    def __init__(self, cause: object):
        self.detail = str(cause)
        super().__init__(f"{self.prefix}: {self.detail}")

    @property
    def root_cause(self) -> Optional[BaseException]:
        """Innermost exception in the ``__cause__`` chain, if any."""
        current: BaseException = self
        while current.__cause__ is not None:
            current = current.__cause__
        return None if current is self else current

    def chain(self) -> List[ErrorKind]:
        """Kinds of the bridge errors in the chain, outermost first."""
        kinds = []
        current: Optional[BaseException] = self
        while isinstance(current, SOAPBridgeError):
            kinds.append(current.kind)
            current = current.__cause__
        return kinds


class RequestError(SOAPBridgeError):
    """Binding or invoking the remote operation failed."""
    kind = ErrorKind.REQUEST
    prefix = "request failed"

    @property
    def is_fault(self) -> bool:
        """True when the service answered with a SOAP fault."""
        return isinstance(self.root_cause, Fault)


class RetrievalError(SOAPBridgeError):
    kind = ErrorKind.RETRIEVAL
    prefix = "retrieving failed"


class ParsingError(SOAPBridgeError):
    kind = ErrorKind.PARSING
    prefix = "parsing failed"


class ProcessingError(SOAPBridgeError):
    kind = ErrorKind.PROCESSING
    prefix = "processing failed"


class ConfigurationError(SOAPBridgeError):
    """Endpoint catalogue lookup or argument preparation failed."""
    kind = ErrorKind.CONFIGURATION
    prefix = "configuration error"
