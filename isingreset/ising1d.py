"""Periodic one-dimensional Ising chain with single-spin and exchange dynamics."""

from __future__ import annotations

import copy
import math
from typing import TextIO

from .rng import Mt19937


def _fermi(x: float) -> float:
    """Return ``1 / (1 + exp(x))``, going to zero when ``exp`` overflows."""
    try:
        return 1.0 / (1.0 + math.exp(x))
    except OverflowError:
        return 0.0


def _boltzmann(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


class IsingLattice1D:
    """A ring of ``n`` spins taking the values +1 and -1.

    The lattice keeps its own copy of the engine it is given, so drawing
    from the lattice does not advance the caller's engine. Spins are zero
    until :meth:`initialise` is called.
    """

    def __init__(self, n: int, engine: Mt19937) -> None:
        if n < 1:
            raise ValueError("lattice needs at least one spin")
        self.n = n
        self.spins = [0] * n
        self._engine = copy.deepcopy(engine)
        self._probabilities = (0.0, 0.0, 0.0)

    def _site(self) -> int:
        return self._engine.uniform_int(0, self.n - 1)

    def _rand(self) -> float:
        return self._engine.uniform_real(0.0, 1.0)

    def _neighbours(self, x: int) -> int:
        spins = self.spins
        return spins[(x - 1) % self.n] + spins[(x + 1) % self.n]

    def initialise(self, m0: float) -> None:
        """Set each spin up with probability ``(1 + m0) / 2``."""
        threshold = (1.0 + m0) / 2.0
        self.spins = [1 if self._rand() < threshold else -1 for _ in range(self.n)]

    def glauber_probabilities(
        self, beta: float, h: float = 0.0
    ) -> tuple[float, float, float]:
        """Store and return the Glauber flip probabilities for local fields -2, 0, 2."""
        self._probabilities = tuple(
            _fermi(2.0 * beta * (i * 2.0 - 2.0 + h)) for i in range(3)
        )
        return self._probabilities

    def metropolis_sweep_zero_field(self, beta: float) -> None:
        """One Metropolis sweep of ``n`` random sites with a fixed acceptance factor."""
        boltz = _boltzmann(-4.0 * beta)
        spins = self.spins
        for _ in range(self.n):
            x = self._site()
            left = spins[(x - 1) % self.n]
            # The left neighbour is counted twice in this variant.
            ide = spins[x] * (left + left)
            if ide <= 0 or self._rand() < boltz:
                spins[x] = -spins[x]

    def metropolis_sweep(self, beta: float, h: float) -> None:
        """One Metropolis sweep of ``n`` random sites in field ``h``."""
        spins = self.spins
        for _ in range(self.n):
            x = self._site()
            ide = spins[x] * (self._neighbours(x) + h)
            if ide <= 0 or self._rand() < _boltzmann(-2.0 * beta * ide):
                spins[x] = -spins[x]

    def print_lattice(self, stream: TextIO) -> None:
        """Write the spins as a line of ``1`` (up) and ``0`` (down)."""
        symbols = {1: "1", -1: "0"}
        try:
            line = "".join(symbols[spin] for spin in self.spins)
        except KeyError:
            raise ValueError("lattice value not 1 or -1") from None
        stream.write(line + "\n")

    def write_config(self, stream: TextIO) -> None:
        """Write the spin values one after another, then a newline."""
        stream.write("".join(str(spin) for spin in self.spins) + "\n")

    def _glauber_updates(self, count: int) -> None:
        spins = self.spins
        probabilities = self._probabilities
        for _ in range(count):
            x = self._site()
            ide = int(spins[x] * self._neighbours(x) / 2.0 + 1.0)
            if self._rand() <= probabilities[ide]:
                spins[x] = -spins[x]

    def glauber_sweep(self, beta: float, h: float = 0.0) -> None:
        """One Glauber sweep of ``n`` random sites in field ``h``."""
        self.glauber_probabilities(beta, h)
        self._glauber_updates(self.n)

    def glauber_interval(self, beta: float, n_sites: int) -> None:
        """Glauber updates of ``n_sites`` random sites in zero field."""
        self.glauber_probabilities(beta, 0.0)
        self._glauber_updates(n_sites)

    def kawasaki_sweep(self, beta: float, h: float = 0.0) -> None:
        """One sweep of spin exchanges between random sites and their right neighbours."""
        spins = self.spins
        n = self.n
        for _ in range(n):
            x = self._site()
            y = (x + 1) % n
            if spins[x] == spins[y]:
                continue
            ide = spins[x] * spins[(x - 1) % n] + spins[y] * spins[(y + 1) % n]
            if self._rand() <= _fermi(2.0 * ide * beta):
                spins[x], spins[y] = spins[y], spins[x]

    def magnetisation(self) -> float:
        """Mean spin."""
        return sum(self.spins) / self.n

    def energy(self, h: float = 0.0) -> float:
        """Nearest-neighbour energy per spin; the field argument is not used."""
        total = sum(spin * self._neighbours(x) for x, spin in enumerate(self.spins))
        return -total / (2.0 * self.n)