"""Pairwise tournament competition with elitism."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from gene_pool.competition.base import breed, winner_of
from gene_pool.population import RankedGenotype, ScoredEntry

if TYPE_CHECKING:
    from gene_pool.config import GAConfig


def pairwise_tournament():
    """Create a pairwise tournament competition.

    The top `config.elite_count` genotypes are copied to the next generation
    unchanged. The remaining genotypes are shuffled and split into disjoint
    consecutive pairs. The winner of each pair survives and its offspring
    replaces the loser. A genotype left without an opponent survives as is.

    A genotype with strictly better fitness always wins its pair, so it is
    never less likely to survive than a worse one.

    Returns:
        A Competition callable.

    Example:
        >>> competition = pairwise_tournament()
        >>> next_generation = competition(ranked, config, rng)
    """

    def competition(
        ranked: Sequence[RankedGenotype],
        config: GAConfig,
        rng: np.random.Generator,
    ) -> list[ScoredEntry]:
        """Run one round of pairwise competitions.

        Args:
            ranked: Population ranked best-first. Entries beyond
                `config.population_size` are discarded before competing.
            config: Configuration of the current generation.
            rng: Random number generator for pairing and breeding.

        Returns:
            The next generation, `min(len(ranked), population_size)` entries.
        """
        survivors = list(ranked[: config.population_size])
        does_a_beat_b = config.comparator
        n_elite = min(config.elite_count, len(survivors))

        next_generation: list[ScoredEntry] = list(survivors[:n_elite])

        contenders = survivors[n_elite:]
        order = rng.permutation(len(contenders))
        for i in range(0, len(order) - 1, 2):
            a = contenders[int(order[i])]
            b = contenders[int(order[i + 1])]
            winner, _ = winner_of(a, b, does_a_beat_b)
            next_generation.append(winner)
            next_generation.append(breed(winner, survivors, config, rng))

        if len(order) % 2 == 1:
            next_generation.append(contenders[int(order[-1])])

        return next_generation

    return competition
