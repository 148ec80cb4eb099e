"""Competition strategies for the genetic algorithm."""

from gene_pool.competition.base import breed, rank_population
from gene_pool.competition.roulette import roulette_wheel
from gene_pool.competition.tournament import pairwise_tournament
from gene_pool.registry import CompetitionRegistry

# Register built-in competition strategies
CompetitionRegistry.register("roulette", roulette_wheel)
CompetitionRegistry.register("tournament", pairwise_tournament)

__all__ = ["breed", "pairwise_tournament", "rank_population", "roulette_wheel"]
