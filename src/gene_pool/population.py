"""Population data structures for the genetic algorithm engine.

This module provides the core data structures for representing a population
of genotypes together with their cached fitness values:

- ScoredEntry: A genotype with an optional fitness value
- RankedGenotype: A genotype whose fitness value is known
- Population: An immutable, ordered collection of entries

All classes are immutable (frozen dataclasses) to enforce functional style.
The engine never edits a Population in place; every change produces a new
instance which replaces the previous one in a single assignment.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ScoredEntry:
    """A genotype paired with its cached fitness value.

    Attributes:
        genotype: Caller-defined candidate solution. Never inspected by the engine.
        fitness: Cached fitness value, or None if the genotype has not been
            evaluated yet (or its value was invalidated).

    Example:
        >>> entry = ScoredEntry(genotype=[1, 2, 3])
        >>> entry.is_scored
        False
        >>> entry.with_fitness(0.5).fitness
        0.5
    """

    genotype: Any
    fitness: float | None = None

    @property
    def is_scored(self) -> bool:
        """Return True if a fitness value is cached for this entry."""
        return self.fitness is not None

    def with_fitness(self, fitness: float) -> "RankedGenotype":
        """Return a ranked copy of this entry carrying the given fitness value."""
        return RankedGenotype(genotype=self.genotype, fitness=fitness)


@dataclass(frozen=True)
class RankedGenotype(ScoredEntry):
    """A genotype whose fitness value has been calculated.

    This is the value handed to comparators and returned by best_ranked().

    Attributes:
        genotype: Caller-defined candidate solution.
        fitness: Calculated fitness value.

    Example:
        >>> best = RankedGenotype(genotype="weasel", fitness=6.0)
        >>> best.genotype, best.fitness
        ('weasel', 6.0)
    """

    fitness: float = field()

    def __post_init__(self) -> None:
        """Reject a missing fitness value.

        Raises:
            TypeError: If fitness is None.
        """
        if self.fitness is None:
            raise TypeError("RankedGenotype requires a fitness value, got None")


@dataclass(frozen=True)
class Population:
    """Immutable ordered collection of scored entries.

    Order carries no meaning except where the engine explicitly shuffles the
    population to pair competitors.

    Attributes:
        entries: The entries of the population as a tuple.

    Example:
        >>> pop = Population.unscored([0, 1, 2])
        >>> len(pop)
        3
        >>> pop.genotypes()
        [0, 1, 2]
        >>> pop.has_fitness
        False
    """

    entries: tuple[ScoredEntry, ...] = ()

    def __post_init__(self) -> None:
        """Copy entries into a tuple for immutability.

        Raises:
            TypeError: If any entry is not a ScoredEntry.
        """
        entries = tuple(self.entries)
        for entry in entries:
            if not isinstance(entry, ScoredEntry):
                raise TypeError(f"entries must be ScoredEntry instances, got {type(entry).__name__}")
        object.__setattr__(self, "entries", entries)

    @classmethod
    def unscored(cls, genotypes: Iterable[Any]) -> "Population":
        """Create a population where no genotype has a fitness value yet."""
        return cls(tuple(ScoredEntry(genotype) for genotype in genotypes))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ScoredEntry]:
        return iter(self.entries)

    def __getitem__(self, idx: int) -> ScoredEntry:
        return self.entries[idx]

    @property
    def has_fitness(self) -> bool:
        """Return True if at least one entry carries a cached fitness value."""
        return any(entry.is_scored for entry in self.entries)

    def genotypes(self) -> list[Any]:
        """Return the genotypes of all entries, dropping fitness values."""
        return [entry.genotype for entry in self.entries]

    def partition(self, force: bool = False) -> tuple[list[ScoredEntry], list[RankedGenotype]]:
        """Split entries into those needing evaluation and those with a cached value.

        Args:
            force: Treat every entry as needing evaluation, ignoring the cache.

        Returns:
            Tuple of (unscored, scored). Both lists keep the population order.
        """
        if force:
            return list(self.entries), []
        unscored = [entry for entry in self.entries if not entry.is_scored]
        scored = [_as_ranked(entry) for entry in self.entries if entry.is_scored]
        return unscored, scored

    def shuffled(self, rng: Any) -> "Population":
        """Return a copy of the population in random order.

        Args:
            rng: numpy random Generator used to draw the permutation.
        """
        order = rng.permutation(len(self.entries))
        return Population(tuple(self.entries[int(i)] for i in order))

    def extended(self, entries: Sequence[ScoredEntry]) -> "Population":
        """Return a copy of the population with the given entries appended."""
        return Population(self.entries + tuple(entries))


def _as_ranked(entry: ScoredEntry) -> RankedGenotype:
    if isinstance(entry, RankedGenotype):
        return entry
    assert entry.fitness is not None
    return entry.with_fitness(entry.fitness)
