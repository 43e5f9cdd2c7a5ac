"""Privacy-preserving blind search index: salted 32-bit trigram fingerprints with noise padding."""

from .config import CAPACITY_CEILING, MAX_INPUT_CHARS, MAX_NGRAMS, NGRAM_SIZE
from .errors import (
    BlindIndexError,
    CapacityExceededError,
    InputTooLongError,
    TooManyNGramsError,
    RandomSourceCorruptedError,
)
from .normalize import normalize
from .ngrams import extract_trigrams
from .hashing import fingerprint_ngram, fingerprint_ngrams
from .padding import (
    RandomSource,
    SharedRandomSource,
    default_random_source,
    pad_fingerprints,
)
from .fingerprints import (
    generate_fingerprints,
    generate_fingerprints_padded,
    fingerprints_to_bytes,
    fingerprints_from_bytes,
)

__all__ = [
    "CAPACITY_CEILING",
    "MAX_INPUT_CHARS",
    "MAX_NGRAMS",
    "NGRAM_SIZE",
    "BlindIndexError",
    "CapacityExceededError",
    "InputTooLongError",
    "TooManyNGramsError",
    "RandomSourceCorruptedError",
    "normalize",
    "extract_trigrams",
    "fingerprint_ngram",
    "fingerprint_ngrams",
    "RandomSource",
    "SharedRandomSource",
    "default_random_source",
    "pad_fingerprints",
    "generate_fingerprints",
    "generate_fingerprints_padded",
    "fingerprints_to_bytes",
    "fingerprints_from_bytes",
]
