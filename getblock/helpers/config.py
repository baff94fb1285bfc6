"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv

from getblock.helpers.constants import DEFAULT_ENDPOINT


# Load environment variables from .env file
load_dotenv()

TOKEN_ENV = "GETBLOCK_TOKEN"
ENDPOINT_ENV = "GETBLOCK_ENDPOINT"


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_getblock_token(token: str | None = None) -> str:
    """Get the GetBlock access token from parameter or environment.

    An unset token is not an error: the empty string means the client
    sends no auth header at all.

    Args:
        token: Optional token to use directly

    Returns:
        Access token, or "" when neither the parameter nor GETBLOCK_TOKEN is set
    """
    if token:
        return token

    return get_optional_env(TOKEN_ENV) or ""


def get_getblock_endpoint(endpoint: str | None = None) -> str:
    """Get the JSON-RPC endpoint URL from parameter or environment.

    Args:
        endpoint: Optional endpoint URL to use directly

    Returns:
        Endpoint URL, falling back to GETBLOCK_ENDPOINT and then the
        Ethereum mainnet endpoint

    Example:
        ```python
        from getblock.helpers.config import get_getblock_endpoint

        # Mainnet unless GETBLOCK_ENDPOINT is set
        endpoint = get_getblock_endpoint()

        # Or provide explicitly
        endpoint = get_getblock_endpoint("https://eth.getblock.io/sepolia/")
        ```
    """
    if endpoint:
        return endpoint

    return get_optional_env(ENDPOINT_ENV) or DEFAULT_ENDPOINT


__all__ = [
    "ENDPOINT_ENV",
    "TOKEN_ENV",
    "get_getblock_endpoint",
    "get_getblock_token",
    "get_optional_env",
]
