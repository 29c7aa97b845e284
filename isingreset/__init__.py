"""Ising chains and lattices under stochastic resetting, with exact 1D results."""

__version__ = "0.1.0"

__all__ = ["cli", "exact", "ising1d", "ising2d", "processing", "rng", "seeding"]