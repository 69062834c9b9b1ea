"""
20-byte account address with a reserved contract-deployment sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_utils import to_checksum_address

from ethwire.common.errors import InvalidEncoding
from ethwire.common.hexcodec import bytes_to_hex, hex_to_bytes

ADDRESS_BYTE_SIZE = 20

# Recipient wire values meaning "no recipient, this creates a contract"
DEPLOYMENT_RECIPIENTS = frozenset({"0x", "0x0"})


@dataclass(frozen=True)
class Address:
    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) not in (0, ADDRESS_BYTE_SIZE):
            raise ValueError(f"Address must be {ADDRESS_BYTE_SIZE} bytes, got {len(self.raw)}")

    @property
    def is_contract_deployment(self) -> bool:
        return len(self.raw) == 0

    @property
    def checksum(self) -> str:
        """EIP-55 mixed-case form."""
        if self.is_contract_deployment:
            raise ValueError("contract deployment sentinel has no checksum form")
        return to_checksum_address(self.raw)

    def to_hex(self) -> str:
        return bytes_to_hex(self.raw)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        if self.is_contract_deployment:
            return "Address(<contract deployment>)"
        return f"Address({self.to_hex()})"


CONTRACT_DEPLOYMENT = Address(b"")


def decode_address(text: str, field: str | None = None) -> Address:
    raw = hex_to_bytes(text, field)
    if len(raw) != ADDRESS_BYTE_SIZE:
        raise InvalidEncoding(
            f"address must be {ADDRESS_BYTE_SIZE} bytes, got {len(raw)}", field
        )
    return Address(raw)


def decode_recipient(text: str, field: str | None = None) -> Address:
    """Like decode_address, but ``0x`` / ``0x0`` map to CONTRACT_DEPLOYMENT."""
    if text.lower() in DEPLOYMENT_RECIPIENTS:
        return CONTRACT_DEPLOYMENT
    return decode_address(text, field)


def encode_address(address: Address) -> str:
    return address.to_hex()
