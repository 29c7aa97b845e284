"""Command-line option lookup and small numeric helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class InputParser:
    """Looks up ``-flag value`` pairs in a list of command-line tokens.

    The tokens are the arguments only, without the program name.
    """

    def __init__(self, argv: Iterable[str]) -> None:
        self.tokens: tuple[str, ...] = tuple(argv)

    def get_option(self, option: str) -> str:
        """Return the token after the first ``option``, or ``""`` if there is none."""
        try:
            index = self.tokens.index(option)
        except ValueError:
            return ""
        if index + 1 < len(self.tokens):
            return self.tokens[index + 1]
        return ""

    def has_option(self, option: str) -> bool:
        """Return whether ``option`` appears among the tokens."""
        return option in self.tokens


def mod(a: int, b: int) -> int:
    """Remainder of truncating division, shifted up by ``b`` when negative.

    For a positive modulus this is the usual non-negative remainder, which
    is what periodic lattice indexing needs.
    """
    if b == 0:
        raise ZeroDivisionError("modulus must be non-zero")
    remainder = abs(a) % abs(b)
    if a < 0:
        remainder = -remainder
    if remainder < 0:
        remainder += b
    return remainder


def mean_of(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``."""
    if len(values) == 0:
        raise ValueError("mean of an empty sequence")
    return sum(values) / len(values)


def variance(values: Sequence[float]) -> float:
    """Population variance of ``values`` (divides by the number of values)."""
    mean = mean_of(values)
    return sum((value - mean) ** 2 for value in values) / len(values)