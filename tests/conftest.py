"""Shared test fixtures for gene-pool tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- ranked_population: Small ranked population with distinct fitness values
- Fitness, mutation and crossover fixtures, some tracking their calls
"""

import numpy as np
import pytest

from gene_pool import GAConfig, RankedGenotype


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def ranked_population() -> list[RankedGenotype]:
    """Ranked population of 6 integer genotypes, best first (fitness == genotype)."""
    return [RankedGenotype(genotype=g, fitness=float(g)) for g in (6, 5, 4, 3, 2, 1)]


@pytest.fixture
def zero_fitness():
    """Synchronous batch fitness function returning 0.0 for every genotype."""

    def fitness(genotypes: list) -> list[float]:
        return [0.0] * len(genotypes)

    return fitness


@pytest.fixture
def identity_fitness():
    """Synchronous batch fitness function where the genotype is its own fitness."""

    def fitness(genotypes: list) -> list[float]:
        return [float(g) for g in genotypes]

    return fitness


@pytest.fixture
def tracking_fitness():
    """Asynchronous fitness function that records every batch it receives.

    Returns a tuple of (fitness_fn, call_log).
    """
    call_log: list[list] = []

    async def fitness(genotypes: list) -> list[float]:
        call_log.append(list(genotypes))
        return [0.0] * len(genotypes)

    return fitness, call_log


@pytest.fixture
def tracking_mutate():
    """Mutation that tracks all calls for verification.

    Returns a tuple of (mutate_fn, call_log).
    """
    call_log: list = []

    def mutate(x):
        call_log.append(x)
        return x

    return mutate, call_log


@pytest.fixture
def tracking_crossover():
    """Crossover that tracks all calls for verification.

    Returns a tuple of (crossover_fn, call_log).
    """
    call_log: list[tuple] = []

    def crossover(a, b):
        call_log.append((a, b))
        return 0

    return crossover, call_log


@pytest.fixture
def increment_mutate():
    """Mutation that adds one to a numeric genotype."""

    def mutate(x):
        return x + 1

    return mutate


@pytest.fixture
def make_config(identity_fitness, increment_mutate):
    """Factory building a GAConfig with test defaults; keyword arguments override."""

    def factory(**overrides) -> GAConfig:
        kwargs = {
            "population_size": 6,
            "fitness_function": identity_fitness,
            "mutation_function": increment_mutate,
        }
        kwargs.update(overrides)
        return GAConfig(**kwargs)

    return factory
