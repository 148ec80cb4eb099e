"""gene-pool: Generic Genetic Algorithm Engine.

A pluggable genetic algorithm over genotypes of any type. Callers supply the
fitness function, the mutation operator and, optionally, a crossover operator
and a comparator; the engine supplies the generational loop, the competition
policy and fitness caching.

Example:
    >>> import asyncio
    >>> from gene_pool import GAConfig, GeneticAlgorithm, batched
    >>> config = GAConfig(
    ...     population_size=10,
    ...     fitness_function=batched(lambda x: -abs(3 - x)),
    ...     mutation_function=lambda x: x + 1,
    ...     crossover_function=lambda a, b: (a + b) // 2,
    ... )
    >>> algorithm = GeneticAlgorithm(config, [0], seed=42)
    >>> asyncio.run(algorithm.evolve())
    >>> len(algorithm.population())
    10
"""

from gene_pool.competition import breed, pairwise_tournament, rank_population, roulette_wheel
from gene_pool.config import GAConfig
from gene_pool.engine import GeneticAlgorithm
from gene_pool.errors import (
    ConcurrentEvolutionError,
    EmptyPopulationError,
    FitnessCountMismatchError,
    GenePoolError,
    InvalidConfigError,
    NoScoredGenotypesError,
)
from gene_pool.fitness import batched, batched_parallel
from gene_pool.population import Population, RankedGenotype, ScoredEntry
from gene_pool.protocols import (
    Comparator,
    Competition,
    CrossoverFunction,
    FitnessFunction,
    MutationFunction,
    default_does_a_beat_b,
)
from gene_pool.registry import CompetitionRegistry, list_competitions

__all__ = [
    # Engine
    "GeneticAlgorithm",
    "GAConfig",
    # Competition strategies
    "pairwise_tournament",
    "roulette_wheel",
    "rank_population",
    "breed",
    # Fitness helpers
    "batched",
    "batched_parallel",
    # Registry system
    "CompetitionRegistry",
    "list_competitions",
    # Data structures
    "Population",
    "ScoredEntry",
    "RankedGenotype",
    # Protocols
    "FitnessFunction",
    "MutationFunction",
    "CrossoverFunction",
    "Comparator",
    "Competition",
    "default_does_a_beat_b",
    # Errors
    "GenePoolError",
    "InvalidConfigError",
    "EmptyPopulationError",
    "FitnessCountMismatchError",
    "NoScoredGenotypesError",
    "ConcurrentEvolutionError",
]
