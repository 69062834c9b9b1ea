"""Tests for entity -> JSON-RPC object encoding."""

import json

import pytest

from ethwire.common.address import CONTRACT_DEPLOYMENT
from ethwire.common.types import NullTransactionEntry, TransactionReceipt, TXStatus
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
    encode_transaction_in_block,
)
from tests.fixtures.addresses import TOKEN_ADDRESS, TX_HASH
from tests.fixtures.payloads import block, legacy_transaction


class TestEncodeTransaction:
    def test_wire_names(self, eip155_tx_json):
        encoded = encode_transaction(decode_transaction(eip155_tx_json))
        assert encoded["to"] == TOKEN_ADDRESS
        assert encoded["gas"] == "0xfde8"
        assert encoded["gasPrice"] == "0x4a817c800"
        assert encoded["input"] == eip155_tx_json["input"]
        assert encoded["nonce"] == "0x9"
        assert encoded["value"] == "0x0"
        assert encoded["v"] == "0x25"
        assert encoded["chainId"] == "0x1"

    def test_no_chain_id_when_unset(self, legacy_tx_json):
        assert "chainId" not in encode_transaction(decode_transaction(legacy_tx_json))

    def test_deployment_recipient(self, deployment_tx_json):
        tx = decode_transaction(deployment_tx_json)
        encoded = encode_transaction(tx)
        assert encoded["to"] == "0x"
        assert decode_transaction(encoded).to is CONTRACT_DEPLOYMENT

    def test_no_leading_zero_padding(self, legacy_tx_json):
        legacy_tx_json["value"] = "0x00ff"
        assert encode_transaction(decode_transaction(legacy_tx_json))["value"] == "0xff"

    @pytest.mark.parametrize("fixture", ["legacy_tx_json", "eip155_tx_json", "deployment_tx_json"])
    def test_roundtrip(self, request, fixture):
        tx = decode_transaction(request.getfixturevalue(fixture))
        assert decode_transaction(json.dumps(encode_transaction(tx))) == tx

    def test_details_roundtrip(self, legacy_tx_json):
        details = decode_transaction_details(legacy_tx_json)
        assert decode_transaction_details(encode_transaction_details(details)) == details

    def test_pending_details_encode_null_block_fields(self, legacy_tx_json):
        legacy_tx_json.update(blockHash=None, blockNumber=None, transactionIndex=None)
        encoded = encode_transaction_details(decode_transaction_details(legacy_tx_json))
        assert encoded["blockHash"] is None
        assert encoded["blockNumber"] is None
        assert encoded["transactionIndex"] is None


class TestEncodeReceipt:
    def test_roundtrip(self, receipt_json):
        r = decode_receipt(receipt_json)
        assert decode_receipt(json.dumps(encode_receipt(r))) == r

    @pytest.mark.parametrize("status,expected", [("0x1", "0x1"), ("0x0", "0x0"), ("0x5", "0x0")])
    def test_status(self, receipt_json, status, expected):
        receipt_json["status"] = status
        assert encode_receipt(decode_receipt(receipt_json))["status"] == expected

    def test_not_processed(self):
        encoded = encode_receipt(TransactionReceipt.not_processed(bytes.fromhex(TX_HASH[2:])))
        assert "status" not in encoded
        assert "logsBloom" not in encoded
        assert encoded["contractAddress"] is None
        assert encoded["blockHash"] == "0x"
        assert encoded["logs"] == []
        assert decode_receipt(encoded).status is TXStatus.NOT_YET_PROCESSED

    def test_removed_is_boolean(self, log_json):
        encoded = encode_event_log(decode_event_log(log_json))
        assert encoded["removed"] is False

    def test_log_roundtrip(self, log_json):
        log_json["removed"] = True
        log = decode_event_log(log_json)
        assert decode_event_log(encode_event_log(log)) == log


class TestEncodeBlock:
    def test_roundtrip(self):
        b = decode_block(block([TX_HASH, legacy_transaction(), None]))
        assert decode_block(json.dumps(encode_block(b))) == b

    def test_timestamp(self, block_json):
        assert encode_block(decode_block(block_json))["timestamp"] == "0x55ba467c"

    def test_transaction_entries(self):
        b = decode_block(block([TX_HASH, legacy_transaction(), None]))
        encoded = encode_block(b)["transactions"]
        assert encoded[0] == TX_HASH
        assert encoded[1]["nonce"] == "0x0"
        assert encoded[2] is None

    def test_null_entry(self):
        assert encode_transaction_in_block(NullTransactionEntry()) is None

    def test_optional_fields(self, block_json):
        for name in ("nonce", "logsBloom", "miner"):
            del block_json[name]
        encoded = encode_block(decode_block(block_json))
        assert encoded["nonce"] is None
        assert encoded["miner"] is None
        assert "logsBloom" not in encoded
