"""
JSON-RPC object decoders.

Each entity has one decode function written against FieldSource plus two
public entry points: ``decode_x(payload)`` for a structured JSON document and
``decode_x_from_map(mapping)`` for an untyped mapping. Nothing is built until
every field has decoded, so a failure never leaves a partial entity behind.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional, Union

from ethwire.common.address import decode_address, decode_recipient
from ethwire.common.bloom import decode_bloom
from ethwire.common.config import EIP155_MIN_V, infer_chain_id
from ethwire.common.errors import InvalidEncoding, MissingOrMismatchedField
from ethwire.common.hexcodec import decode_bytes, decode_uint, hex_to_bytes
from ethwire.common.types import (
    Block,
    EventLog,
    FullTransactionEntry,
    NullTransactionEntry,
    Transaction,
    TransactionDetails,
    TransactionHashEntry,
    TransactionInBlock,
    TransactionOptions,
    TransactionReceipt,
    TXStatus,
)
from ethwire.rpc.fields import FieldSource, JsonFieldSource, MapFieldSource

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, bytearray, Mapping[str, Any]]


# ---------------------------------------------------------------------------
# Transaction
# ---------------------------------------------------------------------------

def decode_transaction_options(source: FieldSource) -> TransactionOptions:
    gas_limit = decode_uint(source, "gas", optional=True)
    gas_price = decode_uint(source, "gasPrice", optional=True)

    to_text = source.get_optional_string("to")
    to = decode_recipient(to_text, source.path("to")) if to_text is not None else None

    from_text = source.get_optional_string("from")
    from_address = (
        decode_address(from_text, source.path("from")) if from_text is not None else None
    )

    return TransactionOptions(
        from_address=from_address,
        to=to,
        gas_price=gas_price,
        gas_limit=gas_limit,
        value=decode_uint(source, "value", optional=True),
    )


def _decode_payload_data(source: FieldSource) -> bytes:
    for name in ("data", "input"):
        data = decode_bytes(source, name, optional=True)
        if data is not None:
            return data
    raise MissingOrMismatchedField("neither data nor input is present", source.path("data"))


def _decode_transaction(source: FieldSource) -> Transaction:
    options = decode_transaction_options(source)
    data = _decode_payload_data(source)
    nonce = decode_uint(source, "nonce")
    v = decode_uint(source, "v")
    r = decode_uint(source, "r")
    s = decode_uint(source, "s")

    for name, value in (
        ("value", options.value),
        ("to", options.to),
        ("gas", options.gas_limit),
        ("gasPrice", options.gas_price),
    ):
        if value is None:
            raise MissingOrMismatchedField("required field is missing", source.path(name))

    chain_id = None
    if v >= EIP155_MIN_V:
        chain_id = infer_chain_id(v, r, s)

    return Transaction(
        to=options.to,
        value=options.value,
        gas_price=options.gas_price,
        gas_limit=options.gas_limit,
        nonce=nonce,
        data=data,
        v=v,
        r=r,
        s=s,
        chain_id=chain_id,
        from_address=options.from_address,
    )


def _decode_transaction_details(source: FieldSource) -> TransactionDetails:
    block_hash = decode_bytes(source, "blockHash", optional=True)
    block_number = decode_uint(source, "blockNumber", optional=True)
    transaction_index = decode_uint(source, "transactionIndex", optional=True)
    return TransactionDetails(
        transaction=_decode_transaction(source),
        block_hash=block_hash,
        block_number=block_number,
        transaction_index=transaction_index,
    )


def decode_transaction(payload: Payload) -> Transaction:
    return _decode_transaction(JsonFieldSource.from_payload(payload))


def decode_transaction_from_map(mapping: Mapping[str, Any]) -> Transaction:
    return _decode_transaction(MapFieldSource.from_mapping(mapping))


def decode_transaction_details(payload: Payload) -> TransactionDetails:
    return _decode_transaction_details(JsonFieldSource.from_payload(payload))


def decode_transaction_details_from_map(mapping: Mapping[str, Any]) -> TransactionDetails:
    return _decode_transaction_details(MapFieldSource.from_mapping(mapping))


# ---------------------------------------------------------------------------
# Event log
# ---------------------------------------------------------------------------

def _decode_event_log(source: FieldSource) -> EventLog:
    address = decode_address(source.get_string("address"), source.path("address"))
    topics_path = source.path("topics")
    topics = tuple(
        hex_to_bytes(topic, f"{topics_path}[{i}]")
        for i, topic in enumerate(source.get_string_list("topics"))
    )
    return EventLog(
        address=address,
        block_hash=decode_bytes(source, "blockHash"),
        block_number=decode_uint(source, "blockNumber"),
        data=decode_bytes(source, "data"),
        log_index=decode_uint(source, "logIndex"),
        transaction_hash=decode_bytes(source, "transactionHash"),
        transaction_index=decode_uint(source, "transactionIndex"),
        topics=topics,
        removed=source.get_optional_flag("removed") == 1,
    )


def decode_event_log(payload: Payload) -> EventLog:
    return _decode_event_log(JsonFieldSource.from_payload(payload))


def decode_event_log_from_map(mapping: Mapping[str, Any]) -> EventLog:
    return _decode_event_log(MapFieldSource.from_mapping(mapping))


# ---------------------------------------------------------------------------
# Receipt
# ---------------------------------------------------------------------------

def _decode_receipt(source: FieldSource) -> TransactionReceipt:
    contract_text = source.get_optional_string("contractAddress")
    contract_address = (
        decode_address(contract_text, source.path("contractAddress"))
        if contract_text is not None
        else None
    )
    logs = tuple(_decode_event_log(log) for log in source.get_object_list("logs"))

    return TransactionReceipt(
        transaction_hash=decode_bytes(source, "transactionHash"),
        block_hash=decode_bytes(source, "blockHash"),
        block_number=decode_uint(source, "blockNumber"),
        transaction_index=decode_uint(source, "transactionIndex"),
        cumulative_gas_used=decode_uint(source, "cumulativeGasUsed"),
        gas_used=decode_uint(source, "gasUsed"),
        status=TXStatus.from_wire(decode_uint(source, "status", optional=True)),
        logs=logs,
        contract_address=contract_address,
        logs_bloom=decode_bloom(decode_bytes(source, "logsBloom", optional=True)),
    )


def decode_receipt(payload: Payload) -> TransactionReceipt:
    return _decode_receipt(JsonFieldSource.from_payload(payload))


def decode_receipt_from_map(mapping: Mapping[str, Any]) -> TransactionReceipt:
    return _decode_receipt(MapFieldSource.from_mapping(mapping))


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

def _decode_transaction_in_block(entry: Any, path: str) -> TransactionInBlock:
    if isinstance(entry, str):
        return TransactionHashEntry(hex_to_bytes(entry, path))
    if isinstance(entry, Mapping):
        # Full objects always go through the lenient path.
        return FullTransactionEntry(_decode_transaction(MapFieldSource(entry, path)))
    logger.debug("Unrecognised transaction entry at %s: %s", path, type(entry).__name__)
    return NullTransactionEntry()


def _decode_timestamp(source: FieldSource) -> datetime:
    seconds = decode_uint(source, "timestamp")
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidEncoding(f"timestamp out of range: {seconds}", source.path("timestamp")) from e


def _decode_block(source: FieldSource) -> Block:
    miner_text = source.get_optional_string("miner")
    miner = decode_address(miner_text, source.path("miner")) if miner_text is not None else None

    transactions_path = source.path("transactions")
    transactions = tuple(
        _decode_transaction_in_block(entry, f"{transactions_path}[{i}]")
        for i, entry in enumerate(source.get_list("transactions"))
    )
    uncles_path = source.path("uncles")
    uncles = tuple(
        hex_to_bytes(uncle, f"{uncles_path}[{i}]")
        for i, uncle in enumerate(source.get_string_list("uncles"))
    )

    return Block(
        number=decode_uint(source, "number"),
        hash=decode_bytes(source, "hash"),
        parent_hash=decode_bytes(source, "parentHash"),
        sha3_uncles=decode_bytes(source, "sha3Uncles"),
        transactions_root=decode_bytes(source, "transactionsRoot"),
        state_root=decode_bytes(source, "stateRoot"),
        receipts_root=decode_bytes(source, "receiptsRoot"),
        difficulty=decode_uint(source, "difficulty"),
        total_difficulty=decode_uint(source, "totalDifficulty"),
        extra_data=decode_bytes(source, "extraData"),
        size=decode_uint(source, "size"),
        gas_limit=decode_uint(source, "gasLimit"),
        gas_used=decode_uint(source, "gasUsed"),
        timestamp=_decode_timestamp(source),
        transactions=transactions,
        uncles=uncles,
        nonce=decode_bytes(source, "nonce", optional=True),
        logs_bloom=decode_bloom(decode_bytes(source, "logsBloom", optional=True)),
        miner=miner,
    )


def decode_block(payload: Payload) -> Block:
    return _decode_block(JsonFieldSource.from_payload(payload))


def decode_block_from_map(mapping: Mapping[str, Any]) -> Block:
    return _decode_block(MapFieldSource.from_mapping(mapping))
