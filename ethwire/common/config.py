"""
Chain configuration and chain-id inference.

Tracks the well-known networks and the EIP-155 signature encoding
(v = chain_id * 2 + 35 + recovery_id) used to infer a chain id from ``v``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Lowest v that can carry a non-zero EIP-155 chain id
EIP155_MIN_V = 37

# Pre-EIP-155 recovery values
LEGACY_V_VALUES = (27, 28)


@dataclass(frozen=True)
class ChainConfig:
    chain_id: int = 1
    chain_name: str = "mainnet"
    eip155_block: Optional[int] = None

    def is_eip155(self, block_number: int) -> bool:
        return self.eip155_block is not None and block_number >= self.eip155_block


# ---------------------------------------------------------------------------
# Well-known chain configs
# ---------------------------------------------------------------------------

MAINNET_CONFIG = ChainConfig(
    chain_id=1,
    chain_name="mainnet",
    eip155_block=2_675_000,
)

SEPOLIA_CONFIG = ChainConfig(
    chain_id=11155111,
    chain_name="sepolia",
    eip155_block=0,
)

HOLESKY_CONFIG = ChainConfig(
    chain_id=17000,
    chain_name="holesky",
    eip155_block=0,
)


CHAIN_CONFIGS: dict[int, ChainConfig] = {
    1: MAINNET_CONFIG,
    11155111: SEPOLIA_CONFIG,
    17000: HOLESKY_CONFIG,
}


def get_chain_config(chain_id: Optional[int]) -> Optional[ChainConfig]:
    if chain_id is None:
        return None
    return CHAIN_CONFIGS.get(chain_id)


def infer_chain_id(v: int, r: int = 1, s: int = 1) -> Optional[int]:
    """Infer a candidate chain id from a legacy signature.

    An unsigned transaction (r == s == 0) stores the chain id in ``v``.
    """
    if r == 0 and s == 0:
        return v
    if v in LEGACY_V_VALUES or v < 35:
        return None
    return (v - 35) // 2
