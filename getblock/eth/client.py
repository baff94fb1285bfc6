"""Ethereum JSON-RPC client for GetBlock nodes."""

import asyncio

from typing import Any, Self

from getblock.eth.codec import decode_block, decode_block_number, decode_quantity
from getblock.eth.models import Block
from getblock.helpers.config import get_getblock_endpoint, get_getblock_token
from getblock.helpers.logging import get_logger
from getblock.helpers.parsers import encode_hex_int
from getblock.helpers.rpc import Transport


logger = get_logger(__name__)


def _block_param(block: int | str) -> str:
    """Encode a block number, passing tags like "latest" through."""
    if isinstance(block, bool):
        msg = f"block must be a number or tag, not {block!r}"
        raise TypeError(msg)
    return encode_hex_int(block) if isinstance(block, int) else block


class EthClient:
    """Named Ethereum RPC methods on top of a Transport.

    Methods without a dedicated helper are reachable through ``invoke``.

    Example:
        ```python
        client = EthClient.from_token(token)
        head = await client.block_number()
        block = await client.get_block_by_number(head)
        ```
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    @classmethod
    def from_token(
        cls, token: str = "", endpoint: str | None = None, **kwargs: Any
    ) -> Self:
        """Create a client for the given token.

        Args:
            token: Access token; empty disables the auth header
            endpoint: Endpoint URL, Ethereum mainnet by default
            **kwargs: Additional Transport options (timeout, client, ...)
        """
        return cls(Transport(get_getblock_endpoint(endpoint), token, **kwargs))

    @classmethod
    def from_env(cls, **kwargs: Any) -> Self:
        """Create a client from GETBLOCK_TOKEN and GETBLOCK_ENDPOINT."""
        return cls.from_token(get_getblock_token(), **kwargs)

    async def invoke(
        self, method: str, *params: Any, cancel: asyncio.Event | None = None
    ) -> Any:
        """Call any RPC method and return its raw result.

        Args:
            method: RPC method name (e.g., "eth_getCode")
            *params: Method parameters
            cancel: Optional event that aborts the call when set

        Returns:
            Result payload, undecoded

        Raises:
            RPCError: If the node returned an error object
            TransportError: If the round trip failed
        """
        response = await self.transport.call(method, params, cancel=cancel)
        if response.is_error:
            logger.debug("%s returned RPC error %s", method, response.error)
        return response.unwrap()

    async def block_number(self, *, cancel: asyncio.Event | None = None) -> int:
        """Get the number of the current chain head."""
        result = await self.invoke("eth_blockNumber", cancel=cancel)
        return decode_block_number(result)

    async def get_block_by_number(
        self,
        block: int | str = "latest",
        detailed_transactions: bool = True,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Block:
        """Get a block by number.

        Args:
            block: Block number or tag ("latest", "earliest", "pending", ...)
            detailed_transactions: Return full transaction objects instead of hashes
            cancel: Optional event that aborts the call when set

        Returns:
            Decoded block

        Raises:
            DecodeError: If the block is unknown (null result) or malformed
        """
        result = await self.invoke(
            "eth_getBlockByNumber",
            _block_param(block),
            detailed_transactions,
            cancel=cancel,
        )
        return decode_block(result)

    async def get_block_by_hash(
        self,
        block_hash: str,
        detailed_transactions: bool = True,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Block:
        """Get a block by hash."""
        result = await self.invoke(
            "eth_getBlockByHash", block_hash, detailed_transactions, cancel=cancel
        )
        return decode_block(result)

    async def get_balance(
        self,
        address: str,
        block: int | str = "latest",
        *,
        cancel: asyncio.Event | None = None,
    ) -> int:
        """Get the balance of an address in Wei.

        Args:
            address: Ethereum address
            block: Block number or tag
            cancel: Optional event that aborts the call when set
        """
        result = await self.invoke(
            "eth_getBalance", address, _block_param(block), cancel=cancel
        )
        return decode_quantity(result)

    async def chain_id(self, *, cancel: asyncio.Event | None = None) -> int:
        """Get the chain ID."""
        result = await self.invoke("eth_chainId", cancel=cancel)
        return decode_quantity(result)

    async def gas_price(self, *, cancel: asyncio.Event | None = None) -> int:
        """Get the current gas price in Wei."""
        result = await self.invoke("eth_gasPrice", cancel=cancel)
        return decode_quantity(result)


__all__ = ["EthClient"]
