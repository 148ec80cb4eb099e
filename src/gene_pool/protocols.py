"""Protocol definitions for the callbacks and strategies of the engine.

This module defines the interfaces through which callers plug problem-specific
behaviour into the genetic algorithm. Every callback is a plain callable; the
protocols only document (and allow runtime checking of) the expected
signatures.

Caller-supplied operators:

1. **FitnessFunction**: Scores a batch of genotypes. The only callback that
   may be asynchronous, so evaluation can be fanned out to workers.
2. **MutationFunction**: Returns a randomly perturbed copy of one genotype.
3. **CrossoverFunction**: Combines two parent genotypes into one child.
   Optional; crossover is disabled when it is absent.
4. **Comparator**: Decides whether ranked genotype `a` beats `b`. Optional;
   higher fitness wins by default.

Engine strategies:

5. **Competition**: Produces the next generation from a ranked population.

Operators must treat their inputs as immutable and return new values.

Example usage:
    ```python
    async def fitness(genotypes: list[str]) -> list[float]:
        return [float(sum(a == b for a, b in zip(g, "weasel"))) for g in genotypes]

    def mutate(genotype: str) -> str:
        return genotype[:-1] + "x"

    config = GAConfig(population_size=50, fitness_function=fitness, mutation_function=mutate)
    ```
"""

from collections.abc import Awaitable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from gene_pool.population import RankedGenotype, ScoredEntry

if TYPE_CHECKING:
    from gene_pool.config import GAConfig


@runtime_checkable
class FitnessFunction(Protocol):
    """Protocol for batch fitness evaluation.

    Parameters:
        genotypes: The genotypes to evaluate, in a stable order.

    Returns:
        One fitness value per input genotype, in the same order. May be
        returned directly or as an awaitable resolving to the sequence.
        Returning a different number of values is a contract violation.
    """

    def __call__(self, genotypes: list[Any]) -> Sequence[float] | Awaitable[Sequence[float]]: ...


@runtime_checkable
class MutationFunction(Protocol):
    """Protocol for mutation: return a new, randomly changed genotype."""

    def __call__(self, genotype: Any) -> Any: ...


@runtime_checkable
class CrossoverFunction(Protocol):
    """Protocol for crossover: return a child combining parents a and b."""

    def __call__(self, a: Any, b: Any) -> Any: ...


@runtime_checkable
class Comparator(Protocol):
    """Protocol for the dominance predicate between two ranked genotypes.

    Returns:
        True if `a` is considered better than `b`. Must return False for both
        orders when the two are considered equal.
    """

    def __call__(self, a: RankedGenotype, b: RankedGenotype) -> bool: ...


@runtime_checkable
class Competition(Protocol):
    """Protocol for competition strategies.

    A competition takes a population ranked best-first and produces the
    entries of the next generation. Retained parents keep their cached
    fitness; every offspring created through mutation or crossover must be
    returned unscored.

    Parameters:
        ranked: Ranked population, best first, fully scored.
        config: The configuration of the current generation.
        rng: NumPy random number generator for reproducible stochastic choices.

    Returns:
        List of exactly `config.population_size` entries.

    Example implementations:
        - Pairwise tournament: winners survive, losers are replaced by offspring
        - Roulette wheel: parents drawn proportionally to fitness
    """

    def __call__(
        self,
        ranked: Sequence[RankedGenotype],
        config: "GAConfig",
        rng: np.random.Generator,
    ) -> list[ScoredEntry]: ...


def default_does_a_beat_b(a: RankedGenotype, b: RankedGenotype) -> bool:
    """Default comparator: the numerically greater fitness wins."""
    return a.fitness > b.fitness
