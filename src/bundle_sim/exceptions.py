from typing import Any, Optional


class BundleSimException(Exception):
    """
    An exception raised by bundle-sim.
    """


class SerializationError(BundleSimException):
    """
    Raised when a simulation request cannot be represented as JSON,
    such as when a transaction, override, or tracing option is invalid.
    """


class TransportError(BundleSimException):
    """
    Raised when the HTTP round trip fails: the node is unreachable,
    the TLS handshake fails, or the response body cannot be read.
    No partial body is ever attached.
    """

    def __init__(self, message: str, uri: Optional[str] = None):
        self.uri = uri
        super().__init__(message)


class DecodeError(BundleSimException):
    """
    Raised when the response body is not valid JSON or does not have the
    shape of a simulation response.
    """


class RPCError(DecodeError):
    """
    Raised when the node answers with a JSON-RPC ``error`` object
    instead of a ``result``.
    """

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        self.code = code
        self.data = data
        if code is not None:
            message = f"{message} (code={code})"

        super().__init__(message)


class ConfigError(BundleSimException):
    """
    Raised when a problem occurs from the configuration file.
    """


__all__ = [
    "BundleSimException",
    "ConfigError",
    "DecodeError",
    "RPCError",
    "SerializationError",
    "TransportError",
]
