"""Test fixtures for JSON-RPC decoding tests."""

from .addresses import (
    ALICE_ADDRESS,
    BOB_ADDRESS,
    TOKEN_ADDRESS,
    COINBASE_ADDRESS,
    ZERO_ADDRESS,
    TX_HASH,
    BLOCK_HASH,
    TRANSFER_TOPIC,
)
from .payloads import (
    legacy_transaction,
    eip155_transaction,
    deployment_transaction,
    transfer_log,
    receipt,
    block,
)

__all__ = [
    # Addresses and hashes
    "ALICE_ADDRESS",
    "BOB_ADDRESS",
    "TOKEN_ADDRESS",
    "COINBASE_ADDRESS",
    "ZERO_ADDRESS",
    "TX_HASH",
    "BLOCK_HASH",
    "TRANSFER_TOPIC",
    # Payloads
    "legacy_transaction",
    "eip155_transaction",
    "deployment_transaction",
    "transfer_log",
    "receipt",
    "block",
]
