"""Pydantic models for JSON-RPC requests and responses."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from getblock.helpers.constants import JSONRPC_VERSION
from getblock.helpers.errors import RPCError


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    method: str = Field(..., description="Method name to call")
    params: list[Any] = Field(
        default_factory=list, description="Method parameters"
    )
    id: int | str = Field(..., description="Request ID")


class JsonRpcErrorObject(BaseModel):
    """Error member of a JSON-RPC 2.0 response."""

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Short error description")
    data: Any = Field(default=None, description="Optional server-defined data")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response envelope.

    Carries either a result (which may legitimately be null, e.g. an
    unknown block) or an error object.
    """

    model_config = ConfigDict(extra="allow")

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    id: int | str | None = Field(default=None, description="Request ID echoed back")
    result: Any = Field(default=None, description="Opaque result payload")
    error: JsonRpcErrorObject | None = Field(default=None, description="RPC error")

    @model_validator(mode="after")
    def _check_outcome(self) -> Self:
        if self.error is None and "result" not in self.model_fields_set:
            msg = "response carries neither result nor error"
            raise ValueError(msg)
        return self

    @property
    def is_error(self) -> bool:
        """Whether the node answered with an error object."""
        return self.error is not None

    def unwrap(self) -> Any:
        """Return the result payload.

        Raises:
            RPCError: If the response carries an error object
        """
        if self.error is not None:
            raise RPCError(self.error.code, self.error.message, self.error.data)
        return self.result


__all__ = [
    "JsonRpcErrorObject",
    "JsonRpcRequest",
    "JsonRpcResponse",
]
