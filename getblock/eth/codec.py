"""Decoding of JSON-RPC results into blocks and transactions."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from getblock.eth.models import Block, RawBlock, RawTransaction, Transaction
from getblock.helpers.errors import DecodeError
from getblock.helpers.http_models import JsonValue
from getblock.helpers.parsers import decode_hex_int, decode_hex_timestamp


M = TypeVar("M", bound=BaseModel)


def _field_path(loc: tuple[int | str, ...], prefix: str = "") -> str:
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else part
    return path


def _validate(model: type[M], raw: JsonValue, field: str, prefix: str) -> M:
    """First stage: check the payload shape and capture hex fields as strings."""
    if not isinstance(raw, dict):
        raise DecodeError(field, raw, "expected a JSON object")
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        raise DecodeError(
            _field_path(first["loc"], prefix), first.get("input"), first["msg"]
        ) from e


def _transaction_from_raw(raw: RawTransaction, prefix: str = "") -> Transaction:
    def field(name: str) -> str:
        return f"{prefix}.{name}" if prefix else name

    return Transaction(
        block_hash=raw.block_hash,
        block_number=decode_hex_int(raw.block_number, field("blockNumber")),
        from_=raw.from_,
        gas=decode_hex_int(raw.gas, field("gas")),
        gas_price=decode_hex_int(raw.gas_price, field("gasPrice")),
        hash=raw.hash,
        input=raw.input,
        nonce=decode_hex_int(raw.nonce, field("nonce")),
        to=raw.to,
        transaction_index=decode_hex_int(
            raw.transaction_index, field("transactionIndex")
        ),
        value=decode_hex_int(raw.value, field("value")),
        type=decode_hex_int(raw.type, field("type")),
        v=decode_hex_int(raw.v, field("v")),
        r=raw.r,
        s=raw.s,
        max_fee_per_gas=decode_hex_int(raw.max_fee_per_gas, field("maxFeePerGas")),
        max_priority_fee_per_gas=decode_hex_int(
            raw.max_priority_fee_per_gas, field("maxPriorityFeePerGas")
        ),
        access_list=raw.access_list,
        chain_id=decode_hex_int(raw.chain_id, field("chainId")),
    )


def _block_transaction(index: int, raw: Any) -> Transaction | str:
    # Hash-only blocks list transaction hashes instead of objects
    if isinstance(raw, str):
        return raw
    prefix = f"transactions[{index}]"
    return _transaction_from_raw(
        _validate(RawTransaction, raw, prefix, prefix), prefix
    )


def _block_from_raw(raw: RawBlock) -> Block:
    return Block(
        base_fee_per_gas=decode_hex_int(raw.base_fee_per_gas, "baseFeePerGas"),
        difficulty=decode_hex_int(raw.difficulty, "difficulty"),
        extra_data=raw.extra_data,
        gas_limit=decode_hex_int(raw.gas_limit, "gasLimit"),
        gas_used=decode_hex_int(raw.gas_used, "gasUsed"),
        hash=raw.hash,
        logs_bloom=raw.logs_bloom,
        miner=raw.miner,
        mix_hash=raw.mix_hash,
        nonce=raw.nonce,
        number=decode_hex_int(raw.number, "number"),
        parent_hash=raw.parent_hash,
        receipts_root=raw.receipts_root,
        sha3_uncles=raw.sha3_uncles,
        size=decode_hex_int(raw.size, "size"),
        state_root=raw.state_root,
        timestamp=decode_hex_timestamp(raw.timestamp, "timestamp"),
        total_difficulty=decode_hex_int(raw.total_difficulty, "totalDifficulty"),
        transactions=[
            _block_transaction(index, tx) for index, tx in enumerate(raw.transactions)
        ],
        transactions_root=raw.transactions_root,
        uncles=raw.uncles,
    )


def decode_transaction(raw: JsonValue) -> Transaction:
    """Decode a transaction object.

    Args:
        raw: JSON object as returned by e.g. eth_getTransactionByHash

    Returns:
        Transaction with numeric fields as int; r, s, hashes, addresses and
        input left as hex strings

    Raises:
        DecodeError: If the payload is not an object or a field is invalid
    """
    return _transaction_from_raw(_validate(RawTransaction, raw, "transaction", ""))


def decode_block(raw: JsonValue) -> Block:
    """Decode a block object, including its nested transactions.

    Args:
        raw: JSON object as returned by eth_getBlockByNumber / eth_getBlockByHash

    Returns:
        Block with numeric fields as int and timestamp as UTC datetime

    Raises:
        DecodeError: For the first field that fails to decode; a null result
            (unknown block) is reported the same way

    Example:
        >>> block = decode_block({"number": "0x10", "timestamp": "0x5f5e100"})
        >>> block.number
        16
    """
    return _block_from_raw(_validate(RawBlock, raw, "block", ""))


def decode_quantity(raw: JsonValue) -> int:
    """Decode a scalar hex-integer result (balance, chain ID, gas price).

    Unlike fields inside a block, a null result is an error here.

    Raises:
        DecodeError: If the result is not a string or not an integer literal
    """
    if not isinstance(raw, str):
        raise DecodeError("result", raw, "expected a hex string")
    return decode_hex_int(raw, "result")


def decode_block_number(raw: JsonValue) -> int:
    """Decode the result of eth_blockNumber.

    Raises:
        DecodeError: If the result is not a string or not an integer literal
    """
    return decode_quantity(raw)


__all__ = [
    "decode_block",
    "decode_block_number",
    "decode_quantity",
    "decode_transaction",
]
