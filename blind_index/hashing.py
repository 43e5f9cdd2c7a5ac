"""
Keyed trigram fingerprints.

- SHA-256 over partition_id || salt || trigram (UTF-8); partition_id is optional.
- The partition/salt prefix is hashed once per call and copied per trigram.
- Fingerprint = first 4 digest bytes as a big-endian unsigned int; the rest is discarded.
"""

from typing import Iterable, Optional, Set, Union

from Crypto.Hash import SHA256

from .config import FINGERPRINT_BYTES

PartitionId = Union[str, bytes]
Salt = Union[bytes, bytearray, memoryview]


def _partition_bytes(partition_id: PartitionId) -> bytes:
    if isinstance(partition_id, str):
        return partition_id.encode("utf-8")
    if isinstance(partition_id, (bytes, bytearray, memoryview)):
        return bytes(partition_id)
    raise TypeError(f"partition_id must be str or bytes, not {type(partition_id).__name__}")


def keyed_hasher(partition_id: Optional[PartitionId], salt: Salt):
    """SHA-256 state primed with partition_id (if any) then salt. Copy before use."""
    if not isinstance(salt, (bytes, bytearray, memoryview)):
        raise TypeError(f"salt must be bytes-like, not {type(salt).__name__}")
    h = SHA256.new()
    if partition_id is not None:
        h.update(_partition_bytes(partition_id))
    h.update(bytes(salt))
    return h


def truncate_digest(digest: bytes) -> int:
    """Interpret the leading 4 bytes of digest as a big-endian u32."""
    if len(digest) < FINGERPRINT_BYTES:
        raise ValueError(f"Digest must be at least {FINGERPRINT_BYTES} bytes")
    return int.from_bytes(digest[:FINGERPRINT_BYTES], "big")


def _fingerprint_with(prefix, ngram: str) -> int:
    h = prefix.copy()
    h.update(ngram.encode("utf-8"))
    return truncate_digest(h.digest())


def fingerprint_ngram(ngram: str, partition_id: Optional[PartitionId], salt: Salt) -> int:
    """Fingerprint of a single trigram. Same inputs always give the same value."""
    return _fingerprint_with(keyed_hasher(partition_id, salt), ngram)


def fingerprint_ngrams(ngrams: Iterable[str], partition_id: Optional[PartitionId], salt: Salt) -> Set[int]:
    """
    Fingerprints of many trigrams under one partition/salt.
    Distinct trigrams that collide in 32 bits collapse into one entry.
    """
    prefix = keyed_hasher(partition_id, salt)
    return {_fingerprint_with(prefix, ngram) for ngram in ngrams}
