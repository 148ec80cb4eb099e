"""Helpers for building batch fitness functions.

The engine always evaluates genotypes in batches. These helpers lift a
per-genotype scoring function to the batch signature expected by
GAConfig.fitness_function.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any


def batched(fn: Callable[[Any], float]) -> Callable[[list[Any]], list[float]]:
    """Lift a per-genotype fitness function to work on a batch.

    This utility allows users to write simple per-genotype functions
    while the engine handles batching.

    Args:
        fn: Function scoring a single genotype.
            Signature: (genotype,) -> float

    Returns:
        A synchronous batch fitness function.
        Signature: (list[genotype],) -> list[float]

    Example:
        >>> fitness = batched(lambda x: 1 / (abs(10 - x) + 1))
        >>> fitness([10, 9])
        [1.0, 0.5]
    """

    def lifted(genotypes: list[Any]) -> list[float]:
        return [float(fn(genotype)) for genotype in genotypes]

    return lifted


def batched_parallel(
    fn: Callable[[Any], float], n_workers: int
) -> Callable[[list[Any]], Awaitable[list[float]]]:
    """Lift a per-genotype fitness function to a batch evaluated by parallel workers.

    The batch is dispatched to joblib workers from a thread of the running
    event loop's default executor, so the loop stays responsive while the
    workers run.

    Args:
        fn: Function scoring a single genotype.
            Signature: (genotype,) -> float
            Must be picklable for multiprocessing.
        n_workers: Number of parallel workers. Use -1 for all CPU cores.

    Returns:
        An asynchronous batch fitness function.
        Signature: (list[genotype],) -> Awaitable[list[float]]

    Example:
        >>> fitness = batched_parallel(score_one, n_workers=4)
        >>> config = GAConfig(population_size=100, fitness_function=fitness, mutation_function=mutate)
    """
    from joblib import Parallel, delayed

    def evaluate(genotypes: list[Any]) -> list[float]:
        results: list[float] = Parallel(n_jobs=n_workers)(  # type: ignore[assignment]
            delayed(fn)(genotype) for genotype in genotypes
        )
        return [float(value) for value in results]

    async def lifted(genotypes: list[Any]) -> list[float]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, evaluate, genotypes)

    return lifted
