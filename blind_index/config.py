"""
Blind index settings.

- Trigram width, pad character and fingerprint width are fixed; they define the index format.
- CAPACITY_CEILING bounds every fingerprint set, padded or not.
- MAX_NGRAMS keeps MIN_PADDING_HEADROOM slots free so padding always has room.
- MAX_INPUT_CHARS is counted in Unicode code points; override with BLIND_INDEX_MAX_INPUT_CHARS.
"""

import os

NGRAM_SIZE = 3
PAD_CHAR = "-"
FINGERPRINT_BYTES = 4
FINGERPRINT_BITS = FINGERPRINT_BYTES * 8

CAPACITY_CEILING = 225
MIN_PADDING_HEADROOM = 2
MAX_NGRAMS = CAPACITY_CEILING - MIN_PADDING_HEADROOM

# Tier roll is uniform in [1, TIER_ROLL_MAX]; half-percent resolution without floats.
TIER_ROLL_MAX = 200
# (highest roll in tier, largest pad count); pad count is uniform in [1, max_pad].
PADDING_TIERS = (
    (1, 199),
    (5, 29),
    (50, 9),
    (TIER_ROLL_MAX, 4),
)


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


MAX_INPUT_CHARS = _positive_int("BLIND_INDEX_MAX_INPUT_CHARS", CAPACITY_CEILING)
