"""Roulette wheel (fitness-proportionate) competition."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from gene_pool.population import RankedGenotype, ScoredEntry

if TYPE_CHECKING:
    from gene_pool.config import GAConfig


def selection_weights(fitness: np.ndarray) -> np.ndarray:
    """Compute cumulative normalized selection shares.

    Negative fitness values are unfavorable and receive no share. The
    denominator is the sum of the remaining weights, or 1 when it is zero.

    Args:
        fitness: Fitness values, shape (n,).

    Returns:
        Non-decreasing cumulative shares, shape (n,). The last value is 1.0
        unless every weight is zero, in which case all shares are 0.0.

    Example:
        >>> selection_weights(np.array([1.0, 3.0, -2.0]))
        array([0.25, 1.  , 1.  ])
    """
    weights = np.clip(np.asarray(fitness, dtype=np.float64), 0.0, None)
    total = weights.sum()
    denominator = total if total > 0 else 1.0
    return np.cumsum(weights) / denominator


def roulette_wheel():
    """Create a roulette wheel (fitness-proportionate) competition.

    Parents are drawn with replacement, each with probability proportional to
    its share of the total fitness. For every breeding step, with probability
    `config.crossover_probability` (crossover configured) two parents are drawn,
    both are kept and one crossover child is added; otherwise one parent is
    drawn, kept, and one mutated child is added. Steps repeat until the next
    generation reaches the target size, which is then truncated to exactly
    `config.population_size`. The top `config.elite_count` genotypes are
    placed first.

    The proportional draw always favors numerically higher fitness and ignores
    does_a_beat_b, so GAConfig rejects a custom comparator for this strategy.
    When the total fitness is zero every genotype is equally likely.

    Returns:
        A Competition callable.

    Example:
        >>> competition = roulette_wheel()
        >>> next_generation = competition(ranked, config, rng)
    """

    def competition(
        ranked: Sequence[RankedGenotype],
        config: GAConfig,
        rng: np.random.Generator,
    ) -> list[ScoredEntry]:
        """Build the next generation by fitness-proportionate selection.

        Args:
            ranked: Population ranked best-first.
            config: Configuration of the current generation.
            rng: Random number generator for draws and breeding.

        Returns:
            Exactly `config.population_size` entries.
        """
        candidates = list(ranked[: config.population_size])
        target = config.population_size
        n_candidates = len(candidates)

        cumulative = selection_weights(np.array([entry.fitness for entry in candidates]))
        uniform = cumulative[-1] == 0.0

        def draw() -> RankedGenotype:
            if uniform:
                return candidates[int(rng.integers(n_candidates))]
            # First entry whose cumulative share is >= r
            idx = int(np.searchsorted(cumulative, rng.random(), side="left"))
            if idx >= n_candidates:
                idx = int(rng.integers(n_candidates))
            return candidates[idx]

        next_generation: list[ScoredEntry] = list(candidates[: min(config.elite_count, n_candidates)])

        while len(next_generation) < target:
            if config.crossover_enabled and rng.random() < config.crossover_probability:
                a, b = draw(), draw()
                child = config.crossover_function(a.genotype, b.genotype)
                next_generation.extend([a, b, ScoredEntry(child)])
            else:
                parent = draw()
                next_generation.extend([parent, ScoredEntry(config.mutation_function(parent.genotype))])

        return next_generation[:target]

    return competition
