"""Pytest configuration and shared fixtures."""

import pytest

from typing import Any


@pytest.fixture
def sample_transaction() -> dict[str, Any]:
    """EIP-1559 transaction object as returned by eth_getBlockByNumber.

    Returns:
        dict: Raw transaction with hex-encoded numeric fields
    """
    return {
        "blockHash": "0x1d59ff54b1eb26b013ce3cb5fc9dab3705b415a67127a003c3e61eb445bb8df2",
        "blockNumber": "0x10",
        "from": "0xa7d9ddbe1f17865597fbd27ec712455208b6b76d",
        "gas": "0x5208",
        "gasPrice": "0x4a817c800",
        "hash": "0x88df016429689c079f3b2f6ad39fa052532c56795b733da78a91ebe6a713944b",
        "input": "0x",
        "nonce": "0x15",
        "to": "0xf02c1c8e6114b1dbe8937a39260b5b0a374432bb",
        "transactionIndex": "0x0",
        "value": "0x1bc16d674ec80000",
        "type": "0x2",
        "v": "0x1",
        "r": "0x1b5e176d927f8e9ab405058b2d2457392da3e20f328b16ddabcebc33eaac5fea",
        "s": "0x4ba69724e8f69de52f0125ad8b3c5c2cef33019bac3249e2c0a2192766d1721c",
        "maxFeePerGas": "0x9502f9000",
        "maxPriorityFeePerGas": "0x3b9aca00",
        "accessList": [],
        "chainId": "0x1",
    }


@pytest.fixture
def sample_block(sample_transaction: dict[str, Any]) -> dict[str, Any]:
    """Block object with one detailed transaction.

    Returns:
        dict: Raw block as returned by eth_getBlockByNumber(..., true)
    """
    return {
        "baseFeePerGas": "0x7",
        "difficulty": "0x0",
        "extraData": "0x",
        "gasLimit": "0x1c9c380",
        "gasUsed": "0x5208",
        "hash": "0x1d59ff54b1eb26b013ce3cb5fc9dab3705b415a67127a003c3e61eb445bb8df2",
        "logsBloom": "0x" + "0" * 512,
        "miner": "0x0000000000000000000000000000000000000000",
        "mixHash": "0x" + "0" * 64,
        "nonce": "0x0000000000000000",
        "number": "0x10",
        "parentHash": "0x" + "ab" * 32,
        "receiptsRoot": "0x" + "cd" * 32,
        "sha3Uncles": "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347",
        "size": "0x220",
        "stateRoot": "0x" + "ef" * 32,
        "timestamp": "0x5f5e100",
        "totalDifficulty": "0xc70d815d562d3cfa955",
        "transactions": [sample_transaction],
        "transactionsRoot": "0x" + "12" * 32,
        "uncles": [],
    }
