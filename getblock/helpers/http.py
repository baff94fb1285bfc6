"""HTTP client utilities and helpers."""

from functools import wraps

from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import httpx

from getblock.helpers.constants import (
    CLIENT_ERROR_STATUS,
    DEFAULT_TIMEOUT,
    MAX_ATTEMPTS,
    SERVER_ERROR_STATUS,
)
from getblock.helpers.errors import (
    HTTPClientError,
    HTTPServerError,
    HTTPStatusError,
)
from getblock.helpers.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


logger = get_logger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def is_retryable(error: BaseException) -> bool:
    """Whether an error warrants another attempt.

    Only HTTP status errors of 500 and above qualify. Network failures,
    malformed bodies, RPC errors and client errors never do.
    """
    return (
        isinstance(error, HTTPStatusError)
        and error.status_code >= SERVER_ERROR_STATUS
    )


def retry_on_server_error(
    max_attempts: int = MAX_ATTEMPTS,
    *,
    log_errors: bool = True,
) -> "Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]":
    """Decorator to retry async functions on HTTP 5xx errors.

    Attempts are made back to back with no delay. Any error that is not
    retryable is raised straight away; once attempts are exhausted the last
    server error is raised.

    Args:
        max_attempts: Total number of attempts, first one included (default: 5)
        log_errors: Whether to log retry attempts (default: True)

    Returns:
        Decorated function that retries on HTTPServerError

    Raises:
        ValueError: If max_attempts is less than 1

    Example:
        ```python
        from getblock.helpers.http import retry_on_server_error

        @retry_on_server_error(max_attempts=3)
        async def fetch(client: httpx.AsyncClient, url: str) -> httpx.Response:
            response = await client.get(url)
            raise_for_status(response)
            return response

        # Makes at most 3 requests while the server answers 5xx
        ```
    """
    if max_attempts < 1:
        msg = f"max_attempts must be at least 1, got {max_attempts}"
        raise ValueError(msg)

    def decorator(func: "Callable[P, Awaitable[T]]") -> "Callable[P, Awaitable[T]]":
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            attempt = 1
            while True:
                try:
                    return await func(*args, **kwargs)
                except HTTPStatusError as e:
                    if not is_retryable(e):
                        raise
                    if attempt >= max_attempts:
                        if log_errors:
                            logger.error(
                                "%s failed after %d attempts: %s",
                                func.__name__,
                                attempt,
                                e,
                            )
                        raise
                    if log_errors:
                        logger.warning(
                            "%s HTTP %d (attempt %d/%d), retrying",
                            func.__name__,
                            e.status_code,
                            attempt,
                            max_attempts,
                        )
                attempt += 1

        return wrapper

    return decorator


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching HTTPStatusError for a non-2xx response.

    Args:
        response: Completed httpx response

    Raises:
        HTTPServerError: Status 500 and above
        HTTPClientError: Status 400 to 499
        HTTPStatusError: Any other non-success status (e.g. an unfollowed redirect)
    """
    if response.is_success:
        return

    status = response.status_code
    body = response.text
    if status >= SERVER_ERROR_STATUS:
        raise HTTPServerError(status, body)
    if status >= CLIENT_ERROR_STATUS:
        raise HTTPClientError(status, body)
    raise HTTPStatusError(status, body)


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT,
    headers: dict[str, str] | None = None,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        headers: Headers sent with every request
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from getblock.helpers.http import create_http_client

        async with create_http_client(headers={"x-api-key": token}) as client:
            response = await client.post(endpoint, json=payload)
        ```
    """
    return httpx.AsyncClient(timeout=timeout, headers=headers, **kwargs)


__all__ = [
    "create_http_client",
    "is_retryable",
    "raise_for_status",
    "retry_on_server_error",
]
