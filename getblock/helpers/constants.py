"""Common configuration constants used across the client."""

# Endpoint and Auth
DEFAULT_ENDPOINT = "https://eth.getblock.io/mainnet/"
"""Default GetBlock endpoint for Ethereum mainnet"""

AUTH_HEADER_KEY = "x-api-key"
"""HTTP header carrying the GetBlock access token"""

JSONRPC_VERSION = "2.0"
"""JSON-RPC protocol version sent with every request"""

DEFAULT_REQUEST_ID = 1
"""Request ID used for single (non-batched) calls"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""

# Retry Configuration
MAX_ATTEMPTS = 5
"""Maximum number of attempts for one logical RPC call (4 retries)"""

SERVER_ERROR_STATUS = 500
"""Lowest HTTP status code treated as a retryable server error"""

CLIENT_ERROR_STATUS = 400
"""Lowest HTTP status code treated as a client error"""

# Ether Denomination
ETHER = 10**18
"""Wei per Ether, the main transaction token of the network"""


__all__ = [
    "AUTH_HEADER_KEY",
    "CLIENT_ERROR_STATUS",
    "DEFAULT_ENDPOINT",
    "DEFAULT_REQUEST_ID",
    "DEFAULT_TIMEOUT",
    "ETHER",
    "JSONRPC_VERSION",
    "MAX_ATTEMPTS",
    "SERVER_ERROR_STATUS",
]
