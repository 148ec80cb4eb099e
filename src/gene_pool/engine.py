"""Generational genetic algorithm engine with fitness caching.

This module provides GeneticAlgorithm, the stateful engine that owns a
population and advances it one generation per evolve() call. Each generation
runs the same steps:

1. Replenish: grow the population to the target size with mutated copies of
   randomly chosen members.
2. Shuffle the population.
3. Rank: evaluate every genotype without a cached fitness value in a single
   batch call to the fitness function and merge the results into the cache.
4. Compete: apply the configured competition strategy to the ranked
   population to produce the next generation.

Fitness values stay cached on the entries that carry them, so a genotype that
survives unchanged is never evaluated twice (unless recalculation is forced).
Offspring always enter the population unscored.

All state changes replace the population in a single assignment. A failing
fitness, mutation or crossover call therefore leaves the previous population
and its cache intact.

Concurrency: the engine is single-threaded. Calls into one instance must not
overlap; an overlapping call raises ConcurrentEvolutionError immediately.
Separate instances share nothing and may evaluate concurrently.

Example:
    >>> import asyncio
    >>> import numpy as np
    >>> from gene_pool import GAConfig, GeneticAlgorithm
    >>>
    >>> rng = np.random.default_rng(0)
    >>>
    >>> async def fitness(genotypes):
    ...     return [1 / (abs(10 - x) + 1) for x in genotypes]
    >>>
    >>> config = GAConfig(
    ...     population_size=100,
    ...     fitness_function=fitness,
    ...     mutation_function=lambda x: x + rng.uniform(-5, 5),
    ...     crossover_function=lambda a, b: (a + b) / 2,
    ...     crossover_probability=0.2,
    ... )
    >>>
    >>> async def main():
    ...     algorithm = GeneticAlgorithm(config, [0.0] * 5, seed=42)
    ...     for _ in range(20):
    ...         await algorithm.evolve()
    ...     return await algorithm.best()
    >>>
    >>> best = asyncio.run(main())
"""

import inspect
import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

import numpy as np

from gene_pool.competition.base import rank_population
from gene_pool.config import GAConfig
from gene_pool.errors import (
    ConcurrentEvolutionError,
    EmptyPopulationError,
    FitnessCountMismatchError,
    InvalidConfigError,
    NoScoredGenotypesError,
)
from gene_pool.population import Population, RankedGenotype, ScoredEntry

logger = logging.getLogger(__name__)


class GeneticAlgorithm:
    """Stateful genetic algorithm over caller-defined genotypes.

    Args:
        config: Initial configuration. Can be replaced per call with evolve(config).
        initial_population: Initial genotypes. If config.population_size is
            larger, the rest is filled with mutated copies on the first
            generation.
        seed: Random seed or numpy Generator for reproducibility. If None,
            uses system entropy.

    Raises:
        EmptyPopulationError: If initial_population is empty.
        InvalidConfigError: If config is not a GAConfig.
    """

    def __init__(
        self,
        config: GAConfig,
        initial_population: Iterable[Any],
        seed: int | np.random.Generator | None = None,
    ) -> None:
        genotypes = list(initial_population)
        if not genotypes:
            raise EmptyPopulationError("initial population has to contain at least one genotype")
        self._config = self._check_config(config)
        self._population = Population.unscored(genotypes)
        self._rng = np.random.default_rng(seed)
        self._generation = 0
        self._busy = False

    @staticmethod
    def _check_config(config: GAConfig) -> GAConfig:
        if not isinstance(config, GAConfig):
            raise InvalidConfigError(f"config must be a GAConfig, got {type(config).__name__}")
        return config

    @property
    def config(self) -> GAConfig:
        """The current configuration, replaced once an evolve(config) call has scored its population."""
        return self._config

    @property
    def generation(self) -> int:
        """Number of completed evolve() calls."""
        return self._generation

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        if self._busy:
            raise ConcurrentEvolutionError(
                "GeneticAlgorithm is already running; calls into one instance must not overlap"
            )
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    # ------------------------------------------------------------------
    # Fitness cache
    # ------------------------------------------------------------------

    async def _evaluate(self, population: Population, config: GAConfig, force: bool) -> Population:
        """Score every entry of `population` that has no cached fitness.

        Returns a new population holding the freshly scored entries followed by
        the cached ones. The input population is not modified.

        Raises:
            FitnessCountMismatchError: If the fitness function returns a
                different number of values than genotypes submitted.
        """
        unscored, scored = population.partition(force)
        if not unscored:
            logger.debug("Fitness cache hit for all %d genotypes", len(scored))
            return population

        genotypes = [entry.genotype for entry in unscored]
        result = config.fitness_function(genotypes)
        if inspect.isawaitable(result):
            result = await result
        fitness = list(result)

        if len(fitness) != len(genotypes):
            raise FitnessCountMismatchError(
                f"fitness_function should return as many fitness values as there are input genotypes: "
                f"got {len(fitness)} values for {len(genotypes)} genotypes"
            )

        logger.debug("Evaluated %d genotypes, %d cached", len(genotypes), len(scored))
        fresh = [entry.with_fitness(float(value)) for entry, value in zip(unscored, fitness)]
        return Population(tuple(fresh) + tuple(scored))

    async def _rank(self, force: bool = False) -> list[RankedGenotype]:
        """Evaluate pending genotypes, commit the cache and return the ranked population."""
        self._population = await self._evaluate(self._population, self._config, force)
        _, scored = self._population.partition()
        return rank_population(scored, self._config.comparator)

    # ------------------------------------------------------------------
    # Generation steps
    # ------------------------------------------------------------------

    def _replenish(self, population: Population, config: GAConfig) -> Population:
        """Fill the population up to the target size with mutated copies of its members."""
        size = len(population)
        missing = config.population_size - size
        if missing <= 0:
            return population

        offspring = [
            ScoredEntry(config.mutation_function(population[int(self._rng.integers(size))].genotype))
            for _ in range(missing)
        ]
        logger.debug("Replenished population with %d mutated genotypes", missing)
        return population.extended(offspring)

    async def evolve(self, config: GAConfig | None = None) -> None:
        """Run for one generation.

        Args:
            config: Optional configuration replacing the current one, starting
                with this generation.

        Raises:
            InvalidConfigError: If config is not a GAConfig.
            FitnessCountMismatchError: If the fitness function returns the
                wrong number of values. The population is left unchanged.
            ConcurrentEvolutionError: If another call is running on this instance.
        """
        with self._exclusive():
            config = self._check_config(config) if config is not None else self._config

            population = self._replenish(self._population, config)
            population = population.shuffled(self._rng)
            population = await self._evaluate(
                population, config, config.recalculate_fitness_before_each_generation
            )

            # Cache write: replenished genotypes keep their scores even if competition fails
            self._population = population
            self._config = config

            _, scored = population.partition()
            ranked = rank_population(scored, config.comparator)
            next_generation = config.resolve_competition()(ranked, config, self._rng)

            self._population = Population(tuple(next_generation))
            self._generation += 1

            logger.debug(
                "Generation %d: %d genotypes, %d offspring, best fitness %s",
                self._generation,
                len(self._population),
                sum(not entry.is_scored for entry in self._population),
                ranked[0].fitness if ranked else None,
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def best_ranked(self) -> RankedGenotype:
        """Return the best genotype with its fitness value.

        Pending offspring are evaluated first so they can compete for best.

        Raises:
            NoScoredGenotypesError: If no genotype has been scored yet. No
                evaluation is triggered in that case.
        """
        with self._exclusive():
            self._require_fitness()
            return (await self._rank())[0]

    async def best(self) -> Any:
        """Return the best genotype. Only valid after running evolve()."""
        return (await self.best_ranked()).genotype

    async def best_score(self) -> float:
        """Return the best fitness value. Only valid after running evolve()."""
        return (await self.best_ranked()).fitness

    async def mean_fitness(self) -> float:
        """Return the mean fitness value of the population.

        Pending offspring are evaluated first.

        Raises:
            NoScoredGenotypesError: If no genotype has been scored yet.
        """
        with self._exclusive():
            self._require_fitness()
            ranked = await self._rank()
            return float(np.mean([entry.fitness for entry in ranked]))

    def population(self) -> list[Any]:
        """Return a snapshot of the genotypes, without fitness values."""
        return self._population.genotypes()

    def _require_fitness(self) -> None:
        if not self._population.has_fitness:
            raise NoScoredGenotypesError(
                "could not find genotypes with a calculated fitness value - did you run evolve() yet?"
            )
