"""
Entity -> JSON-RPC object encoders.

Output uses the node's field names and hex conventions, so every encoded
object decodes back to an equal entity.
"""

from __future__ import annotations

from typing import Optional

from ethwire.common.address import Address, encode_address
from ethwire.common.bloom import encode_bloom
from ethwire.common.hexcodec import bytes_to_hex, int_to_hex
from ethwire.common.types import (
    Block,
    EventLog,
    FullTransactionEntry,
    TransactionHashEntry,
    Transaction,
    TransactionDetails,
    TransactionInBlock,
    TransactionReceipt,
    TXStatus,
)


def _optional_hex(value: Optional[bytes]) -> Optional[str]:
    return bytes_to_hex(value) if value is not None else None


def _optional_quantity(value: Optional[int]) -> Optional[str]:
    return int_to_hex(value) if value is not None else None


def _optional_address(value: Optional[Address]) -> Optional[str]:
    return encode_address(value) if value is not None else None


def encode_transaction(tx: Transaction) -> dict:
    result: dict = {
        "nonce": int_to_hex(tx.nonce),
        "to": encode_address(tx.to),
        "value": int_to_hex(tx.value),
        "gas": int_to_hex(tx.gas_limit),
        "gasPrice": int_to_hex(tx.gas_price),
        "input": bytes_to_hex(tx.data),
        "v": int_to_hex(tx.v),
        "r": int_to_hex(tx.r),
        "s": int_to_hex(tx.s),
    }
    if tx.from_address is not None:
        result["from"] = encode_address(tx.from_address)
    if tx.chain_id is not None:
        result["chainId"] = int_to_hex(tx.chain_id)
    return result


def encode_transaction_details(details: TransactionDetails) -> dict:
    result = encode_transaction(details.transaction)
    result["blockHash"] = _optional_hex(details.block_hash)
    result["blockNumber"] = _optional_quantity(details.block_number)
    result["transactionIndex"] = _optional_quantity(details.transaction_index)
    return result


def encode_event_log(log: EventLog) -> dict:
    return {
        "address": encode_address(log.address),
        "topics": [bytes_to_hex(t) for t in log.topics],
        "data": bytes_to_hex(log.data),
        "blockNumber": int_to_hex(log.block_number),
        "blockHash": bytes_to_hex(log.block_hash),
        "transactionHash": bytes_to_hex(log.transaction_hash),
        "transactionIndex": int_to_hex(log.transaction_index),
        "logIndex": int_to_hex(log.log_index),
        "removed": log.removed,
    }


def encode_receipt(receipt: TransactionReceipt) -> dict:
    result = {
        "transactionHash": bytes_to_hex(receipt.transaction_hash),
        "transactionIndex": int_to_hex(receipt.transaction_index),
        "blockHash": bytes_to_hex(receipt.block_hash),
        "blockNumber": int_to_hex(receipt.block_number),
        "cumulativeGasUsed": int_to_hex(receipt.cumulative_gas_used),
        "gasUsed": int_to_hex(receipt.gas_used),
        "contractAddress": _optional_address(receipt.contract_address),
        "logs": [encode_event_log(log) for log in receipt.logs],
    }
    if receipt.logs_bloom is not None:
        result["logsBloom"] = encode_bloom(receipt.logs_bloom)
    if receipt.status is TXStatus.OK:
        result["status"] = int_to_hex(1)
    elif receipt.status is TXStatus.FAILED:
        result["status"] = int_to_hex(0)
    return result


def encode_transaction_in_block(entry: TransactionInBlock) -> Optional[object]:
    if isinstance(entry, TransactionHashEntry):
        return bytes_to_hex(entry.hash)
    if isinstance(entry, FullTransactionEntry):
        return encode_transaction(entry.transaction)
    return None


def encode_block(block: Block) -> dict:
    result = {
        "number": int_to_hex(block.number),
        "hash": bytes_to_hex(block.hash),
        "parentHash": bytes_to_hex(block.parent_hash),
        "nonce": _optional_hex(block.nonce),
        "sha3Uncles": bytes_to_hex(block.sha3_uncles),
        "transactionsRoot": bytes_to_hex(block.transactions_root),
        "stateRoot": bytes_to_hex(block.state_root),
        "receiptsRoot": bytes_to_hex(block.receipts_root),
        "miner": _optional_address(block.miner),
        "difficulty": int_to_hex(block.difficulty),
        "totalDifficulty": int_to_hex(block.total_difficulty),
        "extraData": bytes_to_hex(block.extra_data),
        "size": int_to_hex(block.size),
        "gasLimit": int_to_hex(block.gas_limit),
        "gasUsed": int_to_hex(block.gas_used),
        "timestamp": int_to_hex(int(block.timestamp.timestamp())),
        "transactions": [encode_transaction_in_block(e) for e in block.transactions],
        "uncles": [bytes_to_hex(u) for u in block.uncles],
    }
    if block.logs_bloom is not None:
        result["logsBloom"] = encode_bloom(block.logs_bloom)
    return result
