"""
Decoded JSON-RPC entities: Transaction, TransactionDetails, EventLog,
TransactionReceipt, Block and the post-decode result wrappers.

All entities are frozen; sequences are stored as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ethwire.common.address import Address
from ethwire.common.bloom import BloomFilter
from ethwire.common.config import ChainConfig, get_chain_config
from ethwire.common.crypto import compute_create_address
from ethwire.common.hexcodec import hex_to_bytes


# ---------------------------------------------------------------------------
# Transaction
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TransactionOptions:
    """Call options shared by every transaction-shaped payload."""
    from_address: Optional[Address] = None
    to: Optional[Address] = None
    gas_price: Optional[int] = None
    gas_limit: Optional[int] = None
    value: Optional[int] = None


@dataclass(frozen=True)
class Transaction:
    to: Address  # CONTRACT_DEPLOYMENT for contract creation
    value: int
    gas_price: int
    gas_limit: int
    nonce: int
    data: bytes
    v: int
    r: int
    s: int
    chain_id: Optional[int] = None
    from_address: Optional[Address] = None

    @property
    def is_contract_deployment(self) -> bool:
        return self.to.is_contract_deployment

    @property
    def chain_config(self) -> Optional[ChainConfig]:
        return get_chain_config(self.chain_id)

    def deployed_contract_address(self) -> Optional[Address]:
        """CREATE address of the deployed contract, when the sender is known."""
        if not self.is_contract_deployment or self.from_address is None:
            return None
        return Address(compute_create_address(self.from_address.raw, self.nonce))


@dataclass(frozen=True)
class TransactionDetails:
    """A transaction with its block position; pending ones have none."""
    transaction: Transaction
    block_hash: Optional[bytes] = None
    block_number: Optional[int] = None
    transaction_index: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.block_hash is None


# ---------------------------------------------------------------------------
# Log & Receipt
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EventLog:
    address: Address
    block_hash: bytes
    block_number: int
    data: bytes
    log_index: int
    transaction_hash: bytes
    transaction_index: int
    topics: tuple[bytes, ...] = ()
    removed: bool = False


class TXStatus(Enum):
    OK = "ok"
    FAILED = "failed"
    NOT_YET_PROCESSED = "notYetProcessed"

    @classmethod
    def from_wire(cls, status: Optional[int]) -> TXStatus:
        if status is None:
            return cls.NOT_YET_PROCESSED
        if status == 1:
            return cls.OK
        return cls.FAILED


@dataclass(frozen=True)
class TransactionReceipt:
    transaction_hash: bytes
    block_hash: bytes
    block_number: int
    transaction_index: int
    cumulative_gas_used: int
    gas_used: int
    status: TXStatus
    logs: tuple[EventLog, ...] = ()
    contract_address: Optional[Address] = None
    logs_bloom: Optional[BloomFilter] = None

    @classmethod
    def not_processed(cls, transaction_hash: bytes) -> TransactionReceipt:
        """Placeholder receipt for a transaction the node has not mined yet."""
        return cls(
            transaction_hash=transaction_hash,
            block_hash=b"",
            block_number=0,
            transaction_index=0,
            cumulative_gas_used=0,
            gas_used=0,
            status=TXStatus.NOT_YET_PROCESSED,
        )


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TransactionHashEntry:
    hash: bytes


@dataclass(frozen=True)
class FullTransactionEntry:
    transaction: Transaction


@dataclass(frozen=True)
class NullTransactionEntry:
    pass


TransactionInBlock = Union[TransactionHashEntry, FullTransactionEntry, NullTransactionEntry]


@dataclass(frozen=True)
class Block:
    number: int
    hash: bytes
    parent_hash: bytes
    sha3_uncles: bytes
    transactions_root: bytes
    state_root: bytes
    receipts_root: bytes
    difficulty: int
    total_difficulty: int
    extra_data: bytes
    size: int
    gas_limit: int
    gas_used: int
    timestamp: datetime
    transactions: tuple[TransactionInBlock, ...] = ()
    uncles: tuple[bytes, ...] = ()
    nonce: Optional[bytes] = None
    logs_bloom: Optional[BloomFilter] = None
    miner: Optional[Address] = None

    def transaction_hashes(self) -> list[bytes]:
        return [e.hash for e in self.transactions if isinstance(e, TransactionHashEntry)]

    def full_transactions(self) -> list[Transaction]:
        return [e.transaction for e in self.transactions if isinstance(e, FullTransactionEntry)]


# ---------------------------------------------------------------------------
# Post-decode results
# ---------------------------------------------------------------------------

class DecodedValueKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    BYTES = "bytes"
    ADDRESS = "address"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class DecodedValue:
    """A tagged ABI-decoded value."""
    kind: DecodedValueKind
    value: Any

    @classmethod
    def wrap(cls, obj: Any) -> DecodedValue:
        if isinstance(obj, DecodedValue):
            return obj
        if isinstance(obj, Address):
            return cls(DecodedValueKind.ADDRESS, obj)
        if isinstance(obj, str):
            return cls(DecodedValueKind.STRING, obj)
        if isinstance(obj, bool):
            return cls(DecodedValueKind.INTEGER, int(obj))
        if isinstance(obj, int):
            return cls(DecodedValueKind.INTEGER, obj)
        if isinstance(obj, (bytes, bytearray, memoryview)):
            return cls(DecodedValueKind.BYTES, bytes(obj))
        if isinstance(obj, (list, tuple)):
            return cls(DecodedValueKind.SEQUENCE, tuple(cls.wrap(item) for item in obj))
        raise TypeError(f"Cannot wrap decoded value of type {type(obj).__name__}")

    def unwrap(self) -> Any:
        if self.kind is DecodedValueKind.SEQUENCE:
            return [item.unwrap() for item in self.value]
        return self.value


@dataclass(frozen=True)
class EventParserResult:
    event_name: str
    contract_address: Address
    decoded_result: Mapping[str, DecodedValue] = field(default_factory=dict, hash=False)
    transaction_receipt: Optional[TransactionReceipt] = None
    event_log: Optional[EventLog] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "decoded_result", MappingProxyType(dict(self.decoded_result)))

    @classmethod
    def build(
        cls,
        event_name: str,
        contract_address: Address,
        decoded_result: Mapping[str, Any],
        transaction_receipt: Optional[TransactionReceipt] = None,
        event_log: Optional[EventLog] = None,
    ) -> EventParserResult:
        return cls(
            event_name=event_name,
            contract_address=contract_address,
            decoded_result={k: DecodedValue.wrap(v) for k, v in decoded_result.items()},
            transaction_receipt=transaction_receipt,
            event_log=event_log,
        )


@dataclass(frozen=True)
class TransactionSendingResult:
    transaction: Transaction
    hash: str

    @property
    def hash_bytes(self) -> bytes:
        return hex_to_bytes(self.hash, "hash")
