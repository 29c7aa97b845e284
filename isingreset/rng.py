"""A 32-bit Mersenne Twister engine and the distributions drawn from it.

The engine and its distributions reproduce the standard-library
``mt19937`` together with its uniform-integer, uniform-real and
exponential distributions, so seeded runs give the same streams.
"""

from __future__ import annotations

import math
from typing import Protocol, Union

from .seeding import seed_seq_fe128

_N = 624
_M = 397
_MASK32 = 0xFFFFFFFF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MATRIX_A = 0x9908B0DF
_DEFAULT_SEED = 5489
_TWO_32 = 4294967296.0
_TWO_64 = 18446744073709551616.0


class SeedSequence(Protocol):
    """Anything that can produce a list of 32-bit seed words."""

    def generate(self, n: int) -> list[int]:
        ...


Seeding = Union[int, SeedSequence, None]


class Mt19937:
    """Mersenne Twister with a 19937-bit state producing 32-bit words.

    It is seeded from a seed sequence (anything with ``generate(n)``), from
    a single integer, or, with no argument, from the standard default seed.
    """

    def __init__(self, seed_seq: Seeding = None) -> None:
        if seed_seq is None:
            self._seed_scalar(_DEFAULT_SEED)
        elif isinstance(seed_seq, int):
            self._seed_scalar(seed_seq)
        else:
            self._seed_sequence(seed_seq)

    def _seed_scalar(self, value: int) -> None:
        state = [value & _MASK32]
        for index in range(1, _N):
            previous = state[-1]
            state.append(
                (1812433253 * (previous ^ (previous >> 30)) + index) & _MASK32
            )
        self._state = state
        self._index = _N

    def _seed_sequence(self, seed_seq: SeedSequence) -> None:
        state = [word & _MASK32 for word in seed_seq.generate(_N)]
        if len(state) != _N:
            raise ValueError("seed sequence produced the wrong number of words")
        if not (state[0] & _UPPER_MASK) and not any(state[1:]):
            state[0] = _UPPER_MASK
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        state = self._state
        for index in range(_N):
            y = (state[index] & _UPPER_MASK) | (state[(index + 1) % _N] & _LOWER_MASK)
            value = state[(index + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            state[index] = value
        self._index = 0

    def next_u32(self) -> int:
        """Return the next raw 32-bit output."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def canonical(self) -> float:
        """Return a double in ``[0, 1)`` built from two 32-bit outputs."""
        low = self.next_u32()
        high = self.next_u32()
        value = (float(low) + float(high) * _TWO_32) / _TWO_64
        if value >= 1.0:
            value = math.nextafter(1.0, 0.0)
        return value

    def _bounded(self, span: int) -> int:
        """Uniform integer in ``[0, span)`` for ``span <= 2**32``."""
        product = self.next_u32() * span
        low = product & _MASK32
        if low < span:
            threshold = ((1 << 32) - span) % span
            while low < threshold:
                product = self.next_u32() * span
                low = product & _MASK32
        return product >> 32

    def _uniform_offset(self, span: int) -> int:
        """Uniform integer in ``[0, span]``."""
        if span < _MASK32:
            return self._bounded(span + 1)
        if span == _MASK32:
            return self.next_u32()
        block = 1 << 32
        while True:
            base = block * self._uniform_offset(span // block)
            result = base + self.next_u32()
            if result <= span:
                return result

    def uniform_int(self, low: int, high: int) -> int:
        """Return a uniform integer in the closed range ``[low, high]``."""
        if low > high:
            raise ValueError("low must not exceed high")
        return low + self._uniform_offset(high - low)

    def uniform_real(self, low: float = 0.0, high: float = 1.0) -> float:
        """Return a uniform double in ``[low, high)``."""
        if low > high:
            raise ValueError("low must not exceed high")
        return (high - low) * self.canonical() + low

    def exponential(self, rate: float = 1.0) -> float:
        """Return an exponentially distributed double with the given rate."""
        if not rate > 0.0:
            raise ValueError("rate must be positive")
        return -math.log(1.0 - self.canonical()) / rate


def seeded_engine(seed: int) -> Mt19937:
    """Engine seeded from the low and high 32-bit halves of a 64-bit seed."""
    seed &= 0xFFFFFFFFFFFFFFFF
    return Mt19937(seed_seq_fe128([seed & _MASK32, (seed >> 32) & _MASK32]))