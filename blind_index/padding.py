"""
Noise padding for fingerprint sets.

- Adds a random number of uniform 32-bit values so set size does not reveal the trigram count.
- Pad count follows a tiered distribution: mostly 1-4, rarely up to 199 (see config.PADDING_TIERS).
- Padding never grows a set past CAPACITY_CEILING.
- Random sources: a fresh StrongRandom (OS CSPRNG) per call by default, or one
  SharedRandomSource guarded by a lock. A shared source interrupted while held is
  marked broken and refuses all further use.
"""

import threading
from contextlib import contextmanager, nullcontext
from typing import Iterator, Optional, Protocol, Set, Union

import structlog
from Crypto.Random.random import StrongRandom

from .config import CAPACITY_CEILING, FINGERPRINT_BITS, PADDING_TIERS, TIER_ROLL_MAX
from .errors import RandomSourceCorruptedError

logger = structlog.get_logger()


class RandomSource(Protocol):
    """Anything with random.Random-style randint/getrandbits (StrongRandom, random.Random)."""

    def randint(self, a: int, b: int) -> int: ...

    def getrandbits(self, k: int) -> int: ...


def default_random_source() -> RandomSource:
    """Independent CSPRNG-backed source. Use one per task to avoid lock contention."""
    return StrongRandom()


class SharedRandomSource:
    """
    One random source shared between callers. Access is serialized with a lock;
    acquisition blocks with no timeout.
    """

    def __init__(self, source: Optional[RandomSource] = None):
        self._source = source if source is not None else default_random_source()
        self._lock = threading.Lock()
        self._broken = False
        logger.debug("shared_random_source_created", source=type(self._source).__name__)

    @property
    def is_broken(self) -> bool:
        return self._broken

    @contextmanager
    def hold(self) -> Iterator[RandomSource]:
        """
        Exclusive access to the underlying source for a sequence of draws.
        Raises RandomSourceCorruptedError if a previous holder failed mid-draw.
        """
        with self._lock:
            if self._broken:
                raise RandomSourceCorruptedError("Shared random source is broken; a previous draw failed")
            try:
                yield self._source
            except BaseException:
                self._broken = True
                logger.error("random_source_corrupted", source=type(self._source).__name__)
                raise


AnyRandomSource = Union[RandomSource, SharedRandomSource]


def _acquire(random_source: AnyRandomSource):
    if isinstance(random_source, SharedRandomSource):
        return random_source.hold()
    return nullcontext(random_source)


def choose_pad_count(rng: RandomSource) -> int:
    """Draw the tier roll, then a pad count uniform within that tier. Always >= 1."""
    roll = rng.randint(1, TIER_ROLL_MAX)
    for threshold, max_pad in PADDING_TIERS:
        if roll <= threshold:
            return rng.randint(1, max_pad)
    raise ValueError(f"Tier roll out of range: {roll}")


def pad_fingerprints(
    fingerprints: Set[int],
    random_source: AnyRandomSource,
    capacity: int = CAPACITY_CEILING,
) -> Set[int]:
    """
    Return a copy of fingerprints with random 32-bit noise added.
    Tier roll, pad count and noise values are drawn under a single acquisition.
    Noise colliding with existing entries is not redrawn.
    """
    padded = set(fingerprints)
    with _acquire(random_source) as rng:
        pad_len = min(choose_pad_count(rng), max(capacity - len(padded), 0))
        padded.update(rng.getrandbits(FINGERPRINT_BITS) for _ in range(pad_len))
    return padded
