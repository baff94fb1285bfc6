"""Error types raised by the transport and codec layers."""

from typing import Any


class GetblockError(Exception):
    """Base class for every error raised by this package."""


class TransportError(GetblockError):
    """The HTTP round trip did not produce a usable JSON-RPC response."""


class NetworkError(TransportError):
    """Connection-level failure (DNS, refused connection, timeout)."""


class MalformedResponseError(TransportError):
    """The response body is not a JSON-RPC response envelope."""


class HTTPStatusError(TransportError):
    """The endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body[:200]}")


class HTTPClientError(HTTPStatusError):
    """HTTP 4xx response."""


class HTTPServerError(HTTPStatusError):
    """HTTP 5xx response."""


class RPCError(GetblockError):
    """The node returned a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"RPC error {code}: {message}")


class DecodeError(GetblockError, ValueError):
    """A response payload could not be decoded into the requested shape.

    Attributes:
        field: Name of the first offending field (wire name)
        value: Raw value found in that field
    """

    def __init__(self, field: str, value: Any, reason: str = "invalid value") -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"cannot decode {field}={value!r}: {reason}")


class CancellationError(GetblockError):
    """The caller's cancel signal fired before or during the call."""


__all__ = [
    "CancellationError",
    "DecodeError",
    "GetblockError",
    "HTTPClientError",
    "HTTPServerError",
    "HTTPStatusError",
    "MalformedResponseError",
    "NetworkError",
    "RPCError",
    "TransportError",
]
