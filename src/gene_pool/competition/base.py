"""Ranking and breeding helpers shared by the competition strategies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from typing import TYPE_CHECKING

import numpy as np

from gene_pool.population import RankedGenotype, ScoredEntry
from gene_pool.protocols import Comparator

if TYPE_CHECKING:
    from gene_pool.config import GAConfig


def rank_population(entries: Iterable[RankedGenotype], does_a_beat_b: Comparator) -> list[RankedGenotype]:
    """Sort ranked genotypes best-first according to a comparator.

    The sort is stable: genotypes the comparator considers equal (neither beats
    the other) keep their input order.

    Args:
        entries: Genotypes with calculated fitness.
        does_a_beat_b: Dominance predicate.

    Returns:
        New list ordered from best to worst.

    Example:
        >>> from gene_pool.protocols import default_does_a_beat_b
        >>> ranked = rank_population(
        ...     [RankedGenotype("a", 1.0), RankedGenotype("b", 3.0), RankedGenotype("c", 1.0)],
        ...     default_does_a_beat_b,
        ... )
        >>> [r.genotype for r in ranked]
        ['b', 'a', 'c']
    """

    def compare(a: RankedGenotype, b: RankedGenotype) -> int:
        if does_a_beat_b(a, b):
            return -1
        if does_a_beat_b(b, a):
            return 1
        return 0

    return sorted(entries, key=cmp_to_key(compare))


def winner_of(a: RankedGenotype, b: RankedGenotype, does_a_beat_b: Comparator) -> tuple[RankedGenotype, RankedGenotype]:
    """Return (winner, loser) of a pairwise competition. `a` wins ties."""
    if does_a_beat_b(b, a):
        return b, a
    return a, b


def breed(
    parent: RankedGenotype,
    mates: Sequence[RankedGenotype],
    config: GAConfig,
    rng: np.random.Generator,
) -> ScoredEntry:
    """Create one unscored offspring of `parent` by crossover or mutation.

    With probability `config.crossover_probability`, and only when a crossover
    function is configured, the parent is crossed with a uniformly drawn mate.
    Otherwise the parent is mutated.

    Args:
        parent: The genotype passing on its genes.
        mates: Candidates for the second crossover parent.
        config: Configuration holding the operators.
        rng: Random number generator.

    Returns:
        New entry without a fitness value.
    """
    if config.crossover_enabled and rng.random() < config.crossover_probability:
        mate = mates[int(rng.integers(len(mates)))]
        return ScoredEntry(config.crossover_function(parent.genotype, mate.genotype))
    return ScoredEntry(config.mutation_function(parent.genotype))
