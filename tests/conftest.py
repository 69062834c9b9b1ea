"""Pytest configuration and shared fixtures for all tests."""

import pytest

from tests.fixtures.payloads import (
    block,
    deployment_transaction,
    eip155_transaction,
    legacy_transaction,
    receipt,
    transfer_log,
)


# =============================================================================
# Wire payload fixtures
# =============================================================================

@pytest.fixture
def legacy_tx_json():
    """Pre-EIP-155 transfer as returned by eth_getTransactionByHash."""
    return legacy_transaction()


@pytest.fixture
def eip155_tx_json():
    """EIP-155 signed token transfer (v = 37)."""
    return eip155_transaction()


@pytest.fixture
def deployment_tx_json():
    """Contract creation with recipient 0x0."""
    return deployment_transaction()


@pytest.fixture
def log_json():
    """ERC-20 Transfer log."""
    return transfer_log()


@pytest.fixture
def receipt_json():
    """Successful receipt with two Transfer logs."""
    return receipt()


@pytest.fixture
def block_json():
    """Block with one transaction hash entry."""
    return block()
