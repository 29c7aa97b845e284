"""Periodic two-dimensional Ising lattice with single-spin dynamics."""

from __future__ import annotations

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


class IsingLattice2D:
    """A periodic ``length`` by ``length`` square lattice of +1/-1 spins.

    Sites are numbered row by row. The lattice draws from the engine it is
    given, so its updates advance the caller's engine. Spins are zero until
    :meth:`initialise` is called.
    """

    def __init__(self, length: int, engine: Mt19937) -> None:
        if length < 1:
            raise ValueError("lattice side must be at least 1")
        self.length = length
        self.n = length * length
        self.spins = [0] * self.n
        self._engine = engine
        self._probabilities = (0.0,) * 5
        self.neighbours: list[tuple[int, int, int, int]] = [
            self._neighbours_of(site) for site in range(self.n)
        ]

    def _neighbours_of(self, site: int) -> tuple[int, int, int, int]:
        """Left, right, up and down neighbours of ``site``."""
        side, n = self.length, self.n
        left = site + side - 1 if site % side == 0 else site - 1
        right = site + 1 - side if (site + 1) % side == 0 else site + 1
        up = (site - side) % n
        down = (site + side) % n
        return left, right, up, down

    def _site(self) -> int:
        return self._engine.uniform_int(0, self.n - 1)

    def _rand(self) -> float:
        return self._engine.uniform_real(0.0, 1.0)

    def initialise(self, m0: float) -> None:
        """Set each spin up with probability ``(1 + m0) / 2``."""
        threshold = (1.0 + m0) / 2.0
        self.spins = [1 if self._rand() < threshold else -1 for _ in range(self.n)]

    def glauber_probabilities(
        self, beta: float, h: float = 0.0
    ) -> tuple[float, float, float, float, float]:
        """Store and return the Glauber flip probabilities for local fields -4 to 4."""
        self._probabilities = tuple(
            _fermi(2.0 * beta * (i * 2.0 - 4.0 + h)) for i in range(5)
        )
        return self._probabilities

    def site_energy(self, x: int, j: float = 1.0) -> float:
        """Coupling ``j`` times the sum of the four neighbouring spins of ``x``."""
        spins = self.spins
        left, right, up, down = self.neighbours[x]
        return j * float(spins[left] + spins[right] + spins[up] + spins[down])

    def site_energy_pud(self, x: int, j: float) -> float:
        """Neighbour sum with vertical bonds weighted by ``j`` on odd sites only."""
        if x % 2 == 0:
            j = 1.0
        spins = self.spins
        left, right, up, down = self.neighbours[x]
        return float(spins[left] + spins[right]) + j * (spins[up] + spins[down])

    def metropolis_sweep(self, beta: float, j: float) -> None:
        """One Metropolis sweep of ``n`` random sites with coupling ``j``."""
        spins = self.spins
        for _ in range(self.n):
            x = self._site()
            delta = 2.0 * spins[x] * self.site_energy(x, j)
            if delta <= 0 or self._rand() < _boltzmann(-beta * delta):
                spins[x] = -spins[x]

    def metropolis_pud_sweep(self, beta: float, j: float) -> None:
        """One Metropolis sweep visiting every site in order, with odd-site vertical coupling ``j``."""
        spins = self.spins
        for x in range(self.n):
            delta = 2.0 * spins[x] * self.site_energy_pud(x, j)
            if delta <= 0 or self._rand() < _boltzmann(-beta * delta):
                spins[x] = -spins[x]

    def _glauber_updates(self, count: int) -> None:
        spins = self.spins
        probabilities = self._probabilities
        for _ in range(count):
            x = self._site()
            ide = int(spins[x] * self.site_energy(x) / 2.0 + 2.0)
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

    def magnetisation(self) -> float:
        """Mean spin."""
        return sum(self.spins) / self.n

    def energy(self, k: float = 0.0) -> float:
        """Nearest-neighbour energy per spin; the argument is not used."""
        total = sum(spin * self.site_energy(x) for x, spin in enumerate(self.spins))
        return -total / (2 * self.n)

    def write_config(self, stream: TextIO) -> None:
        """Write the spins as a line of ``1`` (up) and ``0`` (down)."""
        symbols = {1: "1", -1: "0"}
        try:
            line = "".join(symbols[spin] for spin in self.spins)
        except KeyError:
            raise ValueError("lattice value not 1 or -1") from None
        stream.write(line + "\n")