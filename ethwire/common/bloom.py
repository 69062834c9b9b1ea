"""
Logs bloom filter.

The wire blob is wrapped verbatim. Membership queries use the 2048-bit,
3-hash Ethereum bloom and need the canonical 256-byte layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ethwire.common.address import Address
from ethwire.common.crypto import keccak256
from ethwire.common.hexcodec import bytes_to_hex

BLOOM_BYTE_SIZE = 256


def _bloom_bits(item: bytes) -> list[tuple[int, int]]:
    h = keccak256(item)
    bits = []
    for i in range(3):
        bit = (h[i * 2] << 8 | h[i * 2 + 1]) & 0x7FF
        bits.append((BLOOM_BYTE_SIZE - 1 - (bit // 8), bit % 8))
    return bits


@dataclass(frozen=True)
class BloomFilter:
    raw: bytes

    def __len__(self) -> int:
        return len(self.raw)

    def contains(self, item: bytes) -> bool:
        """Check if item might be in the filter (false positives possible)."""
        if len(self.raw) != BLOOM_BYTE_SIZE:
            raise ValueError(
                f"bloom membership needs {BLOOM_BYTE_SIZE} bytes, got {len(self.raw)}"
            )
        return all(self.raw[byte_idx] & (1 << bit_idx) for byte_idx, bit_idx in _bloom_bits(item))

    def might_contain_address(self, address: Address) -> bool:
        return self.contains(address.raw)

    def might_contain_topic(self, topic: bytes) -> bool:
        return self.contains(topic)

    @classmethod
    def build(cls, items: list[bytes]) -> BloomFilter:
        """Build a filter containing every item."""
        bloom = bytearray(BLOOM_BYTE_SIZE)
        for item in items:
            for byte_idx, bit_idx in _bloom_bits(item):
                bloom[byte_idx] |= 1 << bit_idx
        return cls(bytes(bloom))


def decode_bloom(blob: Optional[bytes]) -> Optional[BloomFilter]:
    """Absent or empty blob means no filter."""
    if not blob:
        return None
    return BloomFilter(blob)


def encode_bloom(bloom: BloomFilter) -> str:
    return bytes_to_hex(bloom.raw)
