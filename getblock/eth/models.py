"""Pydantic models for Ethereum blocks and transactions.

Decoding happens in two stages. The ``Raw*`` models mirror the wire format
with every hex-bearing field kept as a string; the frozen ``Block`` and
``Transaction`` models hold the decoded values.
"""

# Pydantic needs this at runtime to validate the datetime field
from datetime import datetime
from decimal import Decimal

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from getblock.helpers.parsers import wei_to_ether


class RawTransaction(BaseModel):
    """Transaction object as returned on the wire."""

    block_hash: str | None = Field(default=None, alias="blockHash")
    block_number: str | None = Field(
        default=None, description="Block number as hex string", alias="blockNumber"
    )
    from_: str | None = Field(default=None, alias="from")
    gas: str | None = Field(default=None, description="Gas limit as hex string")
    gas_price: str | None = Field(
        default=None, description="Gas price as hex string", alias="gasPrice"
    )
    hash: str | None = None
    input: str | None = None
    nonce: str | None = Field(default=None, description="Nonce as hex string")
    to: str | None = None
    transaction_index: str | None = Field(default=None, alias="transactionIndex")
    value: str | None = Field(default=None, description="Value in Wei as hex string")
    type: str | None = Field(default=None, description="Envelope type as hex string")
    v: str | None = None
    r: str | None = None
    s: str | None = None
    max_fee_per_gas: str | None = Field(default=None, alias="maxFeePerGas")
    max_priority_fee_per_gas: str | None = Field(
        default=None, alias="maxPriorityFeePerGas"
    )
    access_list: list[Any] = Field(default_factory=list, alias="accessList")
    chain_id: str | None = Field(default=None, alias="chainId")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RawBlock(BaseModel):
    """Block object as returned on the wire.

    ``transactions`` holds transaction objects or, for blocks fetched
    without detailed transactions, bare hashes; they are decoded one by one
    in the second stage.
    """

    base_fee_per_gas: str | None = Field(
        default=None,
        description="Base fee per gas as hex string",
        alias="baseFeePerGas",
    )
    difficulty: str | None = None
    extra_data: str | None = Field(default=None, alias="extraData")
    gas_limit: str | None = Field(
        default=None, description="Gas limit as hex string", alias="gasLimit"
    )
    gas_used: str | None = Field(
        default=None, description="Gas used as hex string", alias="gasUsed"
    )
    hash: str | None = None
    logs_bloom: str | None = Field(default=None, alias="logsBloom")
    miner: str | None = None
    mix_hash: str | None = Field(default=None, alias="mixHash")
    nonce: str | None = None
    number: str | None = Field(default=None, description="Block number as hex string")
    parent_hash: str | None = Field(default=None, alias="parentHash")
    receipts_root: str | None = Field(default=None, alias="receiptsRoot")
    sha3_uncles: str | None = Field(default=None, alias="sha3Uncles")
    size: str | None = None
    state_root: str | None = Field(default=None, alias="stateRoot")
    timestamp: str | None = Field(
        default=None, description="Unix timestamp as hex string"
    )
    total_difficulty: str | None = Field(default=None, alias="totalDifficulty")
    transactions: list[Any] = Field(default_factory=list)
    transactions_root: str | None = Field(default=None, alias="transactionsRoot")
    uncles: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Transaction(BaseModel):
    """Decoded Ethereum transaction."""

    block_hash: str | None = None
    block_number: int = 0
    from_: str | None = None
    gas: int = 0
    gas_price: int = 0
    hash: str | None = None
    input: str | None = None
    nonce: int = 0
    to: str | None = None
    transaction_index: int = 0
    value: int = 0
    type: int = 0
    v: int = 0
    r: str | None = None
    s: str | None = None
    max_fee_per_gas: int = 0
    max_priority_fee_per_gas: int = 0
    access_list: list[Any] = Field(default_factory=list)
    chain_id: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def value_ether(self) -> Decimal:
        """Transferred value in Ether."""
        return wei_to_ether(self.value) or Decimal(0)


class Block(BaseModel):
    """Decoded Ethereum block."""

    base_fee_per_gas: int = 0
    difficulty: int = 0
    extra_data: str | None = None
    gas_limit: int = 0
    gas_used: int = 0
    hash: str | None = None
    logs_bloom: str | None = None
    miner: str | None = None
    mix_hash: str | None = None
    nonce: str | None = None
    number: int = 0
    parent_hash: str | None = None
    receipts_root: str | None = None
    sha3_uncles: str | None = None
    size: int = 0
    state_root: str | None = None
    timestamp: datetime
    total_difficulty: int = 0
    transactions: list[Transaction | str] = Field(default_factory=list)
    transactions_root: str | None = None
    uncles: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def transaction_hashes(self) -> list[str | None]:
        """Hashes of the block's transactions, in block order."""
        return [tx if isinstance(tx, str) else tx.hash for tx in self.transactions]


__all__ = [
    "Block",
    "RawBlock",
    "RawTransaction",
    "Transaction",
]
