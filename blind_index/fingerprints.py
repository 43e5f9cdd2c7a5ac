"""
Blind index fingerprint generation.

- generate_fingerprints: deterministic set of 32-bit trigram fingerprints for (text, partition_id, salt).
- generate_fingerprints_padded: the same set plus random noise to hide its true size.
- Inputs longer than MAX_INPUT_CHARS, or yielding more than MAX_NGRAMS trigrams, are rejected, never truncated.
- fingerprints_to_bytes / fingerprints_from_bytes: sorted big-endian u32 encoding for callers that store sets.
"""

from typing import Iterable, Optional, Set

import structlog

from .config import FINGERPRINT_BITS, FINGERPRINT_BYTES, MAX_INPUT_CHARS, MAX_NGRAMS
from .errors import InputTooLongError, TooManyNGramsError
from .hashing import PartitionId, Salt, fingerprint_ngrams
from .ngrams import extract_trigrams
from .padding import AnyRandomSource, default_random_source, pad_fingerprints

logger = structlog.get_logger()


def _bounded_trigrams(text: str) -> Set[str]:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    if len(text) > MAX_INPUT_CHARS:
        logger.warning("fingerprint_input_rejected", reason="input_too_long", limit=MAX_INPUT_CHARS)
        raise InputTooLongError(
            f"Input is longer than the supported {MAX_INPUT_CHARS} characters",
            limit=MAX_INPUT_CHARS,
            actual=len(text),
        )
    trigrams = extract_trigrams(text)
    if len(trigrams) > MAX_NGRAMS:
        logger.warning("fingerprint_input_rejected", reason="too_many_ngrams", limit=MAX_NGRAMS)
        raise TooManyNGramsError(
            f"The input produced too many trigrams; at most {MAX_NGRAMS} are supported",
            limit=MAX_NGRAMS,
            actual=len(trigrams),
        )
    return trigrams


def generate_fingerprints(text: str, partition_id: Optional[PartitionId] = None, salt: Salt = b"") -> Set[int]:
    """
    Index text by all of its trigrams.
    Text is transliterated, lowercased and stripped of special chars before being split;
    each trigram is hashed with partition_id and salt and truncated to 32 bits.
    """
    return fingerprint_ngrams(_bounded_trigrams(text), partition_id, salt)


def generate_fingerprints_padded(
    text: str,
    partition_id: Optional[PartitionId] = None,
    salt: Salt = b"",
    random_source: Optional[AnyRandomSource] = None,
) -> Set[int]:
    """
    generate_fingerprints plus at least one random noise value, so empty and short
    inputs are indistinguishable by set size. random_source defaults to a fresh CSPRNG.
    """
    fingerprints = generate_fingerprints(text, partition_id, salt)
    if random_source is None:
        random_source = default_random_source()
    return pad_fingerprints(fingerprints, random_source)


def fingerprints_to_bytes(fingerprints: Iterable[int]) -> bytes:
    """Sorted concatenation of 4-byte big-endian values."""
    out = []
    for fp in sorted(set(fingerprints)):
        if not 0 <= fp < 1 << FINGERPRINT_BITS:
            raise ValueError(f"Fingerprint out of 32-bit range: {fp}")
        out.append(fp.to_bytes(FINGERPRINT_BYTES, "big"))
    return b"".join(out)


def fingerprints_from_bytes(data: bytes) -> Set[int]:
    if len(data) % FINGERPRINT_BYTES:
        raise ValueError(f"Encoded fingerprints must be a multiple of {FINGERPRINT_BYTES} bytes")
    return {
        int.from_bytes(data[i : i + FINGERPRINT_BYTES], "big")
        for i in range(0, len(data), FINGERPRINT_BYTES)
    }
