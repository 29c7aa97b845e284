"""Exact 1D Glauber energy relaxation sampled at exponential reset times."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

import numpy as np
from scipy import special

from .processing import InputParser
from .rng import seeded_engine

_SAMPLES = 10_000_000
_STEP_SIZE = 10_000
_MAX_VAL = 100
_TERMS = 100
_HIST_BINS = 100
_DEFAULT_SEED = 328575958951598690


def exact_energy(t, eta: float, eta0: float, gamma: float, terms: int = _TERMS):
    """Energy per bond of the Glauber chain at time ``t``.

    ``eta`` is the equilibrium nearest-neighbour correlation, ``eta0`` the
    initial one and ``gamma`` the Glauber coupling; the Bessel series is cut
    after ``terms`` terms. ``t`` may be a number or an array.
    """
    times = np.asarray(t, dtype=float)
    z = 2.0 * gamma * times
    # exp(-2t) * I_v(z) == exp(-2t + |z|) * ive(v, z), which avoids overflow.
    scale = np.exp(-2.0 * times + np.abs(z))
    total = np.zeros_like(times)
    lower = special.ive(0, z)
    middle = special.ive(1, z)
    eta0_power = eta_power = 1.0
    for order in range(1, terms + 1):
        upper = special.ive(order + 1, z)
        eta0_power *= eta0
        eta_power *= eta
        total = total + (eta0_power - eta_power) * (lower - upper)
        lower, middle = middle, upper
    result = -(eta + scale * total)
    if result.ndim == 0:
        return float(result)
    return result


def exact_magnetisation(t: float, gamma: float, m0: float = 0.992) -> float:
    """Magnetisation decaying from ``m0`` at rate ``1 - gamma``."""
    return m0 * math.exp(-(1.0 - gamma) * t)


def hist_variance(values: Sequence[float], bins: int = 50) -> float:
    """Variance of the bin counts of a uniform histogram over ``[min, max)``.

    Values equal to the maximum lie outside the last bin and are not counted.
    """
    if bins < 1:
        raise ValueError("bins must be at least 1")
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        raise ValueError("histogram of an empty sequence")
    low, high = float(data.min()), float(data.max())
    if not low < high:
        raise ValueError("histogram range is empty: all values are equal")
    edges = np.array(
        [((bins - i) / bins) * low + (i / bins) * high for i in range(bins + 1)]
    )
    index = np.searchsorted(edges, data, side="right") - 1
    inside = (index >= 0) & (index < bins)
    counts = np.bincount(index[inside], minlength=bins).astype(float)
    return float(np.mean((counts - counts.mean()) ** 2))


def _energies_at(times: np.ndarray, eta: float, eta0: float, gamma: float) -> np.ndarray:
    """Energies at ``times``, read from the tabulated grid below the cut-off."""
    result = np.empty_like(times)
    far = times >= _MAX_VAL
    if far.any():
        result[far] = exact_energy(times[far], eta, eta0, gamma, _TERMS)
    near = ~far
    if near.any():
        table_size = _MAX_VAL * _STEP_SIZE
        index = np.minimum((times[near] * _STEP_SIZE).astype(np.int64), table_size - 1)
        grid, inverse = np.unique(index, return_inverse=True)
        table = exact_energy(grid.astype(float) / _STEP_SIZE, eta, eta0, gamma, _TERMS)
        result[near] = table[inverse]
    return result


def _required(args: InputParser, option: str, message: str) -> str | None:
    text = args.get_option(option)
    if not text:
        print(message, file=sys.stderr)
        return None
    return text


def main(argv: Sequence[str] | None = None) -> int:
    """Sample reset-time energies and write ``rawFile<r>`` and ``histFile<r>``.

    Options: ``-T`` temperature, ``-m0`` reset magnetisation, ``-r`` reset
    rate (all required), ``-s`` seed and ``-n`` number of samples.
    """
    args = InputParser(sys.argv[1:] if argv is None else argv)

    temperature_text = _required(args, "-T", "temperature not provided")
    if temperature_text is None:
        return 1
    m0_text = _required(args, "-m0", "reset magnetisation not provided")
    if m0_text is None:
        return 1
    rate_text = _required(args, "-r", "resetting rate not provided")
    if rate_text is None:
        return 1

    temperature = float(temperature_text)
    m0 = float(m0_text)
    rate = float(rate_text)
    seed_text = args.get_option("-s")
    seed = int(seed_text) if seed_text else _DEFAULT_SEED
    samples_text = args.get_option("-n")
    samples = int(samples_text) if samples_text else _SAMPLES
    if samples < 1:
        raise ValueError("sample count must be positive")

    engine = seeded_engine(seed)
    eta0 = m0 * m0
    eta = math.tanh(1.0 / temperature)
    gamma = math.tanh(2.0 / temperature)
    print(f"done energy calc T={temperature:f}")

    times = np.array([engine.exponential(rate) for _ in range(samples)])
    energies = _energies_at(times, eta, eta0, gamma)

    suffix = f"{rate:f}"
    with open(f"rawFile{suffix}", "w", encoding="utf-8") as raw:
        raw.writelines(f"{value:.3f}\n" for value in energies)
    spread = math.sqrt(hist_variance(energies, _HIST_BINS))
    with open(f"histFile{suffix}", "w", encoding="utf-8") as hist:
        hist.write(f"{spread:.3f}\n")
    return 0