"""
Stable string hashing for synthesized resource IDs.

The digest is the CRC-32 (IEEE 802.3) checksum of the UTF-8 encoded value, so it
is identical across processes, interpreters and platforms. IDs already stored
in state were produced with this exact algorithm; changing it breaks them.
"""

import zlib


def string_hash(value: str) -> int:
    """Return a deterministic non-negative 32-bit hash of value."""
    return zlib.crc32(value.encode("utf-8")) & 0xFFFFFFFF
