"""
Padding: tier distribution mapping, capacity clamping, shared random source
locking and fatal corruption behaviour.
"""

import random
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blind_index.config import CAPACITY_CEILING
from blind_index.errors import RandomSourceCorruptedError
from blind_index.padding import (
    SharedRandomSource,
    choose_pad_count,
    default_random_source,
    pad_fingerprints,
)


class ScriptedSource:
    """randint answers come from a script; getrandbits counts up from a start value."""

    def __init__(self, ints, start=1 << 31):
        self._ints = list(ints)
        self._next = start
        self.randint_calls = []

    def randint(self, a, b):
        self.randint_calls.append((a, b))
        return self._ints.pop(0)

    def getrandbits(self, k):
        self._next += 1
        return self._next


class FailingSource:
    def randint(self, a, b):
        return a

    def getrandbits(self, k):
        raise RuntimeError("entropy source failed")


@pytest.mark.parametrize(
    "roll, expected_range",
    [
        (1, (1, 199)),
        (2, (1, 29)),
        (5, (1, 29)),
        (6, (1, 9)),
        (50, (1, 9)),
        (51, (1, 4)),
        (200, (1, 4)),
    ],
)
def test_choose_pad_count_tiers(roll, expected_range):
    src = ScriptedSource([roll, 3])
    assert choose_pad_count(src) == 3
    assert src.randint_calls == [(1, 200), expected_range]


def test_choose_pad_count_rejects_bad_roll():
    with pytest.raises(ValueError):
        choose_pad_count(ScriptedSource([201, 1]))


def test_choose_pad_count_default_source_in_range():
    rng = default_random_source()
    for _ in range(500):
        assert 1 <= choose_pad_count(rng) <= 199


def test_pad_fingerprints_adds_requested_count():
    padded = pad_fingerprints({1, 2, 3}, ScriptedSource([100, 4]))
    assert len(padded) == 7
    assert {1, 2, 3} <= padded


def test_pad_fingerprints_does_not_mutate_input():
    original = {10, 20}
    pad_fingerprints(original, ScriptedSource([100, 2]))
    assert original == {10, 20}


def test_pad_fingerprints_clamped_to_capacity():
    full = set(range(CAPACITY_CEILING - 1))
    padded = pad_fingerprints(full, ScriptedSource([1, 199]))
    assert len(padded) == CAPACITY_CEILING


def test_pad_fingerprints_never_negative_room():
    over = set(range(CAPACITY_CEILING + 5))
    assert pad_fingerprints(over, ScriptedSource([1, 199])) == over


def test_pad_fingerprints_custom_capacity():
    padded = pad_fingerprints(set(), ScriptedSource([1, 150]), capacity=10)
    assert len(padded) == 10


def test_pad_fingerprints_values_are_u32():
    padded = pad_fingerprints(set(), default_random_source())
    assert padded
    assert all(0 <= fp < 2**32 for fp in padded)


def test_shared_source_seeded_is_reproducible():
    a = SharedRandomSource(random.Random(1234))
    b = SharedRandomSource(random.Random(1234))
    for _ in range(20):
        assert pad_fingerprints({1}, a) == pad_fingerprints({1}, b)


def test_shared_source_hold_is_exclusive():
    shared = SharedRandomSource(random.Random(5))
    with shared.hold():
        assert shared._lock.locked()
    assert not shared._lock.locked()
    assert not shared.is_broken


def test_shared_source_failure_is_fatal_afterwards():
    shared = SharedRandomSource(FailingSource())
    with pytest.raises(RuntimeError, match="entropy source failed"):
        pad_fingerprints(set(), shared)
    assert shared.is_broken
    with pytest.raises(RandomSourceCorruptedError):
        pad_fingerprints({1}, shared)
    with pytest.raises(RandomSourceCorruptedError):
        with shared.hold():
            pass


def test_plain_source_failure_propagates():
    with pytest.raises(RuntimeError):
        pad_fingerprints(set(), FailingSource())


def test_shared_source_concurrent_use():
    shared = SharedRandomSource(random.Random(99))

    def work(i):
        return [len(pad_fingerprints({i}, shared)) for _ in range(50)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        sizes = [s for batch in pool.map(work, range(8)) for s in batch]
    assert len(sizes) == 400
    assert all(2 <= s <= 200 for s in sizes)
    assert not shared.is_broken
