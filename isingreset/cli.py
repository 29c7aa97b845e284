"""Command-line runners for Ising chains and lattices reset at exponential times."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import Protocol

from .ising1d import IsingLattice1D
from .ising2d import IsingLattice2D
from .processing import InputParser, mean_of, variance
from .rng import Mt19937, seeded_engine

_DEFAULT_SEED = 328575958951598690
_DEFAULT_TRIALS = 10_000
_DEFAULT_SPINS_1D = 10_000
_DEFAULT_SIDE_2D = 100


class ResettableLattice(Protocol):
    """A lattice that can be reset, evolved by Glauber updates and measured."""

    def initialise(self, m0: float) -> None:
        ...

    def glauber_interval(self, beta: float, n_sites: int) -> None:
        ...

    def energy(self) -> float:
        ...

    def magnetisation(self) -> float:
        ...


def simulate_resets(
    lattice: ResettableLattice,
    engine: Mt19937,
    beta: float,
    m0: float,
    rate: float,
    trials: int,
    sites: int,
) -> Iterator[tuple[float, float]]:
    """Yield ``(energy, magnetisation)`` at the end of each of ``trials`` resets.

    Each trial draws an exponential time with the given ``rate`` from
    ``engine``, scales it by ``sites`` to a number of attempted spin flips,
    resets the lattice to magnetisation ``m0`` and runs that many Glauber
    updates at inverse temperature ``beta``.
    """
    for _ in range(trials):
        steps = int(engine.exponential(rate) * sites)
        lattice.initialise(m0)
        lattice.glauber_interval(beta, steps)
        yield lattice.energy(), lattice.magnetisation()


def _required(args: InputParser, option: str, message: str) -> str | None:
    text = args.get_option(option)
    if not text:
        print(message, file=sys.stderr)
    return text or None


def _parse_reset_options(
    args: InputParser, size_option: str, default_size: int
) -> tuple[float, int, float, float, int, int] | None:
    temperature_text = _required(args, "-T", "temperature not provided")
    if temperature_text is None:
        return None
    temperature = float(temperature_text)

    trials_text = args.get_option("-t")
    trials = int(trials_text) if trials_text else _DEFAULT_TRIALS

    m0_text = _required(args, "-m0", "reset magnetisation not provided")
    if m0_text is None:
        return None
    m0 = float(m0_text)

    rate_text = _required(args, "-r", "resetting rate not provided")
    if rate_text is None:
        return None
    rate = float(rate_text)

    size_text = args.get_option(size_option)
    size = int(size_text) if size_text else default_size

    seed_text = args.get_option("-s")
    seed = int(seed_text) if seed_text else _DEFAULT_SEED
    return temperature, trials, m0, rate, size, seed


def _write_resets(rate: float, results: Iterator[tuple[float, float]]) -> None:
    with open(f"resetData{rate:f}.txt", "w", encoding="utf-8") as out:
        for energy, magnetisation in results:
            out.write(f"{energy:.10f}\t{magnetisation:.10f}\n")


def reset_1d_main(argv: Sequence[str] | None = None) -> int:
    """Reset a 1D chain repeatedly and write ``resetData<r>.txt``.

    Options: ``-T`` temperature, ``-m0`` reset magnetisation and ``-r`` reset
    rate (required); ``-t`` trials, ``-N`` spins and ``-s`` seed.
    """
    args = InputParser(sys.argv[1:] if argv is None else argv)
    options = _parse_reset_options(args, "-N", _DEFAULT_SPINS_1D)
    if options is None:
        return 1
    temperature, trials, m0, rate, spins, seed = options
    beta = 1.0 / temperature

    engine = seeded_engine(seed)
    lattice = IsingLattice1D(spins, engine)
    _write_resets(
        rate, simulate_resets(lattice, engine, beta, m0, rate, trials, spins)
    )
    return 0


def reset_2d_main(argv: Sequence[str] | None = None) -> int:
    """Reset a square lattice repeatedly and write ``resetData<r>.txt``.

    Options: ``-T`` temperature, ``-m0`` reset magnetisation and ``-r`` reset
    rate (required); ``-t`` trials, ``-L`` side length and ``-s`` seed.
    """
    args = InputParser(sys.argv[1:] if argv is None else argv)
    options = _parse_reset_options(args, "-L", _DEFAULT_SIDE_2D)
    if options is None:
        return 1
    temperature, trials, m0, rate, side, seed = options
    beta = 1.0 / temperature

    engine = seeded_engine(seed)
    lattice = IsingLattice2D(side, engine)
    _write_resets(
        rate,
        simulate_resets(lattice, engine, beta, m0, rate, trials, side * side),
    )
    return 0


def _stats_line(values: Sequence[float]) -> str:
    return (
        f"max = {max(values):g};\t"
        f"min = {min(values):g};\t"
        f"avg = {mean_of(values):g};\t"
        f"var = {variance(values):g}"
    )


def initial_stats_main(argv: Sequence[str] | None = None) -> int:
    """Print statistics of energy and magnetisation of freshly initialised chains.

    Options: ``-T`` temperature, ``-t`` trials and ``-m0`` initial
    magnetisation (required); ``-N`` spins.
    """
    args = InputParser(sys.argv[1:] if argv is None else argv)

    temperature_text = _required(args, "-T", "T not provided")
    if temperature_text is None:
        return 1
    temperature = float(temperature_text)
    print(f"T = {temperature:g}")

    trials_text = _required(args, "-t", "t not provided")
    if trials_text is None:
        return 1
    trials = int(trials_text)
    print(f"t = {trials}")

    m0_text = _required(args, "-m0", "m0 not provided")
    if m0_text is None:
        return 1
    m0 = float(m0_text)
    print(f"m0 = {m0:g}")

    spins_text = args.get_option("-N")
    spins = int(spins_text) if spins_text else _DEFAULT_SPINS_1D
    print(f"N = {spins}")

    if trials < 1:
        raise ValueError("number of trials must be positive")

    lattice = IsingLattice1D(spins, seeded_engine(_DEFAULT_SEED))
    energies: list[float] = []
    magnetisations: list[float] = []
    for _ in range(trials):
        lattice.initialise(m0)
        energies.append(lattice.energy())
        magnetisations.append(lattice.magnetisation())

    print("Energy")
    print(_stats_line(energies))
    print("Magnetisation")
    print(_stats_line(magnetisations))
    return 0