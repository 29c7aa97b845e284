"""Fixed-entropy seed sequences for seeding Mersenne Twister engines."""

from __future__ import annotations

import os
import secrets
import threading
import time
from collections.abc import Iterable

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_MODULUS = 1 << 32

_INIT_A = 0x43B0D7E5
_MULT_A = 0x931E8875
_INIT_B = 0x8B51F9DD
_MULT_B = 0x58F38DED
_MIX_MULT_L = 0xCA01F9DD
_MIX_MULT_R = 0x4973F715
_XSHIFT = 16


def _inverse(value: int) -> int:
    return pow(value, -1, _MODULUS)


def _mix(x: int, y: int) -> int:
    result = (_MIX_MULT_L * x - _MIX_MULT_R * y) & _MASK32
    return result ^ (result >> _XSHIFT)


class SeedSeqFE:
    """A seed sequence holding a fixed store of ``count`` 32-bit words.

    Any number of 32-bit seed words is mixed into the store so that every
    input bit affects every output bit. With exactly ``count`` inputs the
    mapping from inputs to store is a bijection, which :meth:`param` inverts.
    """

    def __init__(
        self,
        seeds: Iterable[int] = (),
        count: int = 4,
        mix_rounds: int | None = None,
    ) -> None:
        if count < 1:
            raise ValueError("count must be at least 1")
        if mix_rounds is None:
            mix_rounds = 2 if count <= 2 else 1
        if mix_rounds < 1:
            raise ValueError("mix_rounds must be at least 1")
        self._count = count
        self._mix_rounds = mix_rounds
        self._mixer = [0] * count
        self.seed(seeds)

    def _mix_entropy(self, values: Iterable[int]) -> None:
        inputs = iter([value & _MASK32 for value in values])
        hash_const = _INIT_A

        def hash_value(value: int) -> int:
            nonlocal hash_const
            value ^= hash_const
            hash_const = (hash_const * _MULT_A) & _MASK32
            value = (value * hash_const) & _MASK32
            return value ^ (value >> _XSHIFT)

        mixer = [hash_value(next(inputs, 0)) for _ in range(self._count)]
        for src in range(self._count):
            for dest in range(self._count):
                if src != dest:
                    mixer[dest] = _mix(mixer[dest], hash_value(mixer[src]))
        for value in inputs:
            for dest in range(self._count):
                mixer[dest] = _mix(mixer[dest], hash_value(value))
        self._mixer = mixer

    def seed(self, seeds: Iterable[int]) -> None:
        """Replace the store with a mix of ``seeds``."""
        self._mix_entropy(seeds)
        for _ in range(1, self._mix_rounds):
            self.stir()

    def stir(self) -> SeedSeqFE:
        """Mix the store with itself once more."""
        self._mix_entropy(list(self._mixer))
        return self

    def generate(self, n: int) -> list[int]:
        """Return ``n`` 32-bit words derived from the store."""
        if n < 0:
            raise ValueError("n must be non-negative")
        hash_const = _INIT_B
        words = []
        for index in range(n):
            value = self._mixer[index % self._count] ^ hash_const
            hash_const = (hash_const * _MULT_B) & _MASK32
            value = (value * hash_const) & _MASK32
            words.append(value ^ (value >> _XSHIFT))
        return words

    def param(self) -> list[int]:
        """Return ``count`` seed words that rebuild an identical store."""
        inv_a = _inverse(_MULT_A)
        mix_inv_l = _inverse(_MIX_MULT_L)
        mixer = list(self._mixer)
        order = range(self._count - 1, -1, -1)
        for _ in range(self._mix_rounds):
            hash_const = (
                _INIT_A * pow(_MULT_A, self._count * self._count, _MODULUS)
            ) & _MASK32
            for src in order:
                for dest in order:
                    if src == dest:
                        continue
                    mult_const = hash_const
                    hash_const = (hash_const * inv_a) & _MASK32
                    revhashed = mixer[src] ^ hash_const
                    revhashed = (revhashed * mult_const) & _MASK32
                    revhashed ^= revhashed >> _XSHIFT
                    unmixed = mixer[dest]
                    unmixed ^= unmixed >> _XSHIFT
                    unmixed = (unmixed + _MIX_MULT_R * revhashed) & _MASK32
                    mixer[dest] = (unmixed * mix_inv_l) & _MASK32
            for index in order:
                unhashed = mixer[index]
                unhashed ^= unhashed >> _XSHIFT
                unhashed = (unhashed * _inverse(hash_const)) & _MASK32
                hash_const = (hash_const * inv_a) & _MASK32
                mixer[index] = unhashed ^ hash_const
        return mixer

    def size(self) -> int:
        """Number of 32-bit words in the store."""
        return self._count


def seed_seq_fe128(seeds: Iterable[int]) -> SeedSeqFE:
    """Seed sequence with a 128-bit store."""
    return SeedSeqFE(seeds, count=4)


def seed_seq_fe256(seeds: Iterable[int]) -> SeedSeqFE:
    """Seed sequence with a 256-bit store."""
    return SeedSeqFE(seeds, count=8)


def _crush32(value: int) -> int:
    value &= _MASK64
    if value <= _MASK32:
        return value
    result = (value * 0xBC2AD017D719504D) & _MASK64
    return (result ^ (result >> 32)) & _MASK32


_random_word = secrets.randbits(32)
_random_lock = threading.Lock()


def _local_entropy(anchor: object) -> list[int]:
    global _random_word
    with _random_lock:
        _random_word = (_random_word + 0xEDF19156) & _MASK32
        random_word = _random_word
    scratch = object()
    return [
        random_word,
        _crush32(time.perf_counter_ns()),
        _crush32(time.time_ns()),
        _crush32(id(scratch)),
        _crush32(id(anchor)),
        _crush32(id(_local_entropy)),
        _crush32(id(time.time_ns)),
        _crush32(id(os.getpid)),
        _crush32(threading.get_ident()),
        _crush32(hash(SeedSeqFE)),
        _crush32(os.getpid()),
        _crush32(time.monotonic_ns()),
        secrets.randbits(32),
    ]


def auto_seed(count: int = 8) -> SeedSeqFE:
    """Seed sequence filled from local, non-deterministic entropy."""
    anchor = object()
    return SeedSeqFE(_local_entropy(anchor), count=count)