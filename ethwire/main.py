"""
ethwire: decode Ethereum JSON-RPC objects from the command line.

Reads one JSON document (a bare object or a JSON-RPC response envelope),
decodes it as the requested entity and prints the canonical re-encoding or
a one-line summary.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Optional

from ethwire.common.errors import DecodeError
from ethwire.common.hexcodec import bytes_to_hex
from ethwire.common.types import (
    Block,
    EventLog,
    Transaction,
    TransactionDetails,
    TransactionReceipt,
)
from ethwire.rpc.decode import (
    decode_block,
    decode_event_log,
    decode_receipt,
    decode_transaction,
    decode_transaction_details,
)
from ethwire.rpc.encode import (
    encode_block,
    encode_event_log,
    encode_receipt,
    encode_transaction,
    encode_transaction_details,
)


logger = logging.getLogger("ethwire")


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------

def _summarize_transaction(tx: Transaction) -> str:
    to = "<contract deployment>" if tx.is_contract_deployment else str(tx.to)
    chain = tx.chain_config.chain_name if tx.chain_config else tx.chain_id
    return f"transaction nonce={tx.nonce} to={to} value={tx.value} chain={chain}"


def _summarize_details(details: TransactionDetails) -> str:
    where = "pending" if details.is_pending else f"block={details.block_number}"
    return f"{_summarize_transaction(details.transaction)} {where}"


def _summarize_receipt(receipt: TransactionReceipt) -> str:
    return (
        f"receipt {bytes_to_hex(receipt.transaction_hash)} status={receipt.status.value} "
        f"gasUsed={receipt.gas_used} logs={len(receipt.logs)}"
    )


def _summarize_log(log: EventLog) -> str:
    return f"log {log.address} index={log.log_index} topics={len(log.topics)} removed={log.removed}"


def _summarize_block(block: Block) -> str:
    return (
        f"block {block.number} {bytes_to_hex(block.hash)} "
        f"time={block.timestamp.isoformat()} txs={len(block.transactions)} uncles={len(block.uncles)}"
    )


# kind -> (decode, encode, summarize)
KINDS: dict[str, tuple[Callable, Callable, Callable]] = {
    "transaction": (decode_transaction, encode_transaction, _summarize_transaction),
    "details": (decode_transaction_details, encode_transaction_details, _summarize_details),
    "receipt": (decode_receipt, encode_receipt, _summarize_receipt),
    "log": (decode_event_log, encode_event_log, _summarize_log),
    "block": (decode_block, encode_block, _summarize_block),
}


def unwrap_response(document: Any) -> Any:
    """Return ``result`` from a JSON-RPC response envelope, else the document."""
    if isinstance(document, dict) and document.get("jsonrpc") == "2.0" and "result" in document:
        return document["result"]
    return document


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ethwire",
        description="Decode Ethereum JSON-RPC objects",
    )
    parser.add_argument(
        "kind",
        choices=sorted(KINDS),
        help="Entity to decode",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="JSON file to read (default: stdin)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a one-line summary instead of the re-encoded JSON",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    decode, encode, summarize = KINDS[args.kind]

    with args.file as f:
        text = f.read()
    try:
        document = unwrap_response(json.loads(text))
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON input: %s", e)
        return 1

    try:
        entity = decode(document)
    except DecodeError as e:
        logger.error("Failed to decode %s: %s", args.kind, e)
        return 1
    logger.debug("Decoded %s", entity)

    if args.summary:
        print(summarize(entity))
    else:
        print(json.dumps(encode(entity), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
