"""Ethereum JSON-RPC transport with retry on server errors."""

import asyncio

from collections.abc import Awaitable, Sequence
from typing import Any, TypeVar

import httpx

from pydantic import ValidationError

from getblock.helpers.constants import (
    AUTH_HEADER_KEY,
    DEFAULT_ENDPOINT,
    DEFAULT_REQUEST_ID,
    DEFAULT_TIMEOUT,
    MAX_ATTEMPTS,
)
from getblock.helpers.errors import (
    CancellationError,
    MalformedResponseError,
    NetworkError,
)
from getblock.helpers.http import (
    create_http_client,
    raise_for_status,
    retry_on_server_error,
)
from getblock.helpers.logging import get_logger
from getblock.helpers.rpc_models import JsonRpcRequest, JsonRpcResponse


logger = get_logger(__name__)

T = TypeVar("T")


async def _until_cancelled(
    operation: Awaitable[T], cancel: asyncio.Event | None, method: str
) -> T:
    """Await an operation, aborting it as soon as the cancel event is set."""
    if cancel is None:
        return await operation

    task = asyncio.ensure_future(operation)
    waiter = asyncio.ensure_future(cancel.wait())
    try:
        done, _ = await asyncio.wait(
            {task, waiter}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        waiter.cancel()
        if not task.done():
            task.cancel()

    if task in done:
        return task.result()

    # Let the aborted request unwind before reporting the cancellation
    await asyncio.gather(task, return_exceptions=True)
    msg = f"{method} cancelled during request"
    raise CancellationError(msg)


class Transport:
    """JSON-RPC transport for a single endpoint.

    Holds only read-only configuration, so one instance can serve
    concurrent calls. Every call is retried on HTTP 5xx responses up to
    ``max_attempts`` times in total.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        token: str = "",
        *,
        header_key: str = AUTH_HEADER_KEY,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = MAX_ATTEMPTS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            endpoint: JSON-RPC endpoint URL
            token: Access token; empty means no auth header is sent
            header_key: Name of the auth header
            timeout: Default timeout for requests in seconds
            max_attempts: Total attempts per call while the server answers 5xx
            client: Shared HTTP client; a short-lived one is created per call
                when omitted

        Raises:
            ValueError: If endpoint is empty or max_attempts is less than 1
        """
        if not endpoint:
            msg = "RPC endpoint cannot be empty"
            raise ValueError(msg)

        self.endpoint = endpoint
        self.token = token
        self.header_key = header_key
        self.timeout = timeout
        self.max_attempts = max_attempts
        self._client = client
        self._send = retry_on_server_error(max_attempts)(self._attempt)

    def __repr__(self) -> str:
        # Never render the token
        return f"Transport(endpoint={self.endpoint!r}, max_attempts={self.max_attempts})"

    @property
    def headers(self) -> dict[str, str]:
        """Auth header for outbound requests, empty when there is no token."""
        if not self.token:
            return {}
        return {self.header_key: self.token}

    async def call(
        self,
        method: str,
        params: Sequence[Any] | None = None,
        *,
        cancel: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> JsonRpcResponse:
        """Make a single logical JSON-RPC call.

        Args:
            method: RPC method name (e.g., "eth_blockNumber")
            params: Method parameters
            cancel: Event that aborts the call when set, checked before each
                attempt and raced against the request in flight
            timeout: Optional per-attempt timeout override

        Returns:
            Response envelope; an RPC error object is left inside it

        Raises:
            HTTPServerError: If every attempt ended with HTTP 5xx
            HTTPClientError: On HTTP 4xx, without retrying
            NetworkError: On connection failure, timeout or redirect loop,
                without retrying
            MalformedResponseError: If the body cannot be decoded or is not a
                JSON-RPC response
            CancellationError: If the cancel event fired
        """
        request = JsonRpcRequest(
            method=method, params=list(params or []), id=DEFAULT_REQUEST_ID
        )
        return await self._send(request, cancel=cancel, timeout=timeout)

    async def _attempt(
        self,
        request: JsonRpcRequest,
        *,
        cancel: asyncio.Event | None,
        timeout: float | None,
    ) -> JsonRpcResponse:
        if cancel is not None and cancel.is_set():
            msg = f"{request.method} cancelled before attempt"
            raise CancellationError(msg)

        logger.debug("POST %s %s", self.endpoint, request.method)
        attempt_timeout = self.timeout if timeout is None else timeout
        response = await _until_cancelled(
            self._post(request, attempt_timeout), cancel, request.method
        )
        raise_for_status(response)

        try:
            return JsonRpcResponse.model_validate_json(response.content)
        except ValidationError as e:
            msg = f"{request.method}: malformed JSON-RPC response: {response.text[:200]}"
            raise MalformedResponseError(msg) from e

    async def _post(self, request: JsonRpcRequest, timeout: float) -> httpx.Response:
        payload = request.model_dump()
        try:
            if self._client is not None:
                return await self._client.post(
                    self.endpoint, json=payload, headers=self.headers, timeout=timeout
                )
            async with create_http_client(
                timeout=timeout, headers=self.headers
            ) as client:
                return await client.post(self.endpoint, json=payload)
        except httpx.DecodingError as e:
            msg = f"{request.method}: undecodable response body: {e!r}"
            raise MalformedResponseError(msg) from e
        except httpx.RequestError as e:
            msg = f"{request.method} request failed: {e!r}"
            raise NetworkError(msg) from e


__all__ = ["Transport"]
