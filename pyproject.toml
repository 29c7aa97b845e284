[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isingreset"
version = "0.1.0"
description = "Monte Carlo and exact statistics for Ising chains and lattices under stochastic resetting"
requires-python = ">=3.10"
keywords = ["ising", "monte carlo", "glauber", "stochastic resetting", "statistical physics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ising-reset-1d = "isingreset.cli:reset_1d_main"
ising-reset-2d = "isingreset.cli:reset_2d_main"
ising-initial-stats = "isingreset.cli:initial_stats_main"
ising-reset-exact = "isingreset.exact:main"

[tool.hatch.build.targets.wheel]
packages = ["isingreset"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
