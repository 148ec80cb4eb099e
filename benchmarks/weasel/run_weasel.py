"""Weasel program: evolve a string towards a target sentence.

Based on the thought experiment in Dawkins' The Selfish Gene. The genotype is
a string; its fitness is the number of characters matching the target.

Usage:
    uv run python benchmarks/weasel/run_weasel.py
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

import numpy as np

from gene_pool import GAConfig, GeneticAlgorithm

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
TARGET = "me thinks its a weasel"
ALPHABET = "abcdefghijklmnopqrstuvwxyz "
POP_SIZE = 400
N_GENERATIONS = 500
SEED = 42

rng = np.random.default_rng(SEED)


def matching_characters(a: str, b: str) -> int:
    """Count positions where both strings hold the same character."""
    return sum(x == y for x, y in zip(a, b))


async def fitness(genotypes: list[str]) -> list[float]:
    """Score genotypes by the number of characters matching the target.

    This is asynchronous so the evaluations could be forked into workers.
    """
    return [float(matching_characters(genotype, TARGET)) for genotype in genotypes]


def mutate(genotype: str) -> str:
    """Replace one random character."""
    position = int(rng.integers(len(genotype)))
    char = ALPHABET[int(rng.integers(len(ALPHABET)))]
    return f"{genotype[:position]}{char}{genotype[position + 1:]}"


def crossover(a: str, b: str) -> str:
    """Split both parents at a random position and join the halves."""
    position = int(rng.integers(len(a)))
    return f"{a[:position]}{b[position:]}"


async def run() -> str:
    """Run the weasel search and return the best genotype found."""
    config = GAConfig(
        population_size=POP_SIZE,
        fitness_function=fitness,
        mutation_function=mutate,
        crossover_function=crossover,
    )
    algorithm = GeneticAlgorithm(config, [" " * len(TARGET)], seed=SEED)

    best = ""
    for generation in range(1, N_GENERATIONS + 1):
        await algorithm.evolve()
        best = await algorithm.best()
        mean = await algorithm.mean_fitness()
        logger.info(f"generation={generation} best={best!r} mean_fitness={mean:.3f}")
        if best == TARGET:
            break
    return best


def main() -> None:
    """Main entry point for the weasel example."""
    logger.info(f"Parameters: pop_size={POP_SIZE}, generations={N_GENERATIONS}, seed={SEED}")
    best = asyncio.run(run())
    logger.info(f"Finished with {best!r}")


if __name__ == "__main__":
    main()
