"""Configuration of the genetic algorithm engine.

GAConfig bundles the target population size, the selection parameters and
the four caller-supplied operators. It is immutable; to change the
configuration between generations, pass a new instance to
GeneticAlgorithm.evolve(), typically built with dataclasses.replace().

Example:
    >>> from dataclasses import replace
    >>> config = GAConfig(
    ...     population_size=10,
    ...     fitness_function=lambda genotypes: [float(g) for g in genotypes],
    ...     mutation_function=lambda g: g + 1,
    ... )
    >>> config.elite_count
    0
    >>> replace(config, population_size=20, elitist_ratio=0.1).elite_count
    2
"""

import math
from dataclasses import dataclass, field

# Import competition package to trigger strategy registration
import gene_pool.competition  # noqa: F401
from gene_pool.errors import InvalidConfigError
from gene_pool.protocols import (
    Comparator,
    Competition,
    CrossoverFunction,
    FitnessFunction,
    MutationFunction,
    default_does_a_beat_b,
)
from gene_pool.registry import CompetitionRegistry


@dataclass(frozen=True)
class GAConfig:
    """Immutable configuration of one generation.

    Attributes:
        population_size: Target number of genotypes. Must be greater than one.
        fitness_function: Batch fitness evaluation, see FitnessFunction.
        mutation_function: Returns a mutated copy of a genotype.
        crossover_function: Combines two parents. Crossover is disabled if None.
        does_a_beat_b: Dominance predicate between two ranked genotypes. If None,
            the numerically greater fitness wins. Not supported by the roulette
            competition.
        crossover_probability: Probability, between 0.0 and 1.0, that an
            offspring is produced by crossover rather than mutation.
        elitist_ratio: Fraction, between 0.0 and 1.0, of the top-ranked
            population that survives unchanged and skips competition. The
            count is rounded half up.
        elitist_count: Absolute number of elite genotypes. Takes precedence
            over elitist_ratio when given.
        recalculate_fitness_before_each_generation: Evaluate every genotype
            again at each generation, for fitness functions that change over time.
        competition: Name of a registered competition strategy ("tournament"
            or "roulette") or a Competition callable.

    Raises:
        InvalidConfigError: If any value is out of range, the competition
            strategy is unknown, or roulette is combined with does_a_beat_b.
    """

    population_size: int
    fitness_function: FitnessFunction
    mutation_function: MutationFunction
    crossover_function: CrossoverFunction | None = None
    does_a_beat_b: Comparator | None = None
    crossover_probability: float = 0.5
    elitist_ratio: float = 0.0
    elitist_count: int | None = None
    recalculate_fitness_before_each_generation: bool = False
    competition: str | Competition = "tournament"
    _competition: Competition = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate values and resolve the competition strategy.

        Raises:
            InvalidConfigError: If a value is invalid.
        """
        if isinstance(self.population_size, bool) or not isinstance(self.population_size, int):
            raise InvalidConfigError(f"population_size must be an integer, got {type(self.population_size).__name__}")
        if self.population_size <= 1:
            raise InvalidConfigError(f"population_size has to be greater than one, got {self.population_size}")
        if not 0.0 <= self.crossover_probability <= 1.0:
            raise InvalidConfigError(
                f"crossover_probability has to be between 0.0 and 1.0, got {self.crossover_probability}"
            )
        if not 0.0 <= self.elitist_ratio <= 1.0:
            raise InvalidConfigError(f"elitist_ratio has to be between 0.0 and 1.0, got {self.elitist_ratio}")
        if self.elitist_count is not None and not 0 <= self.elitist_count <= self.population_size:
            raise InvalidConfigError(
                f"elitist_count has to be between 0 and population_size ({self.population_size}), "
                f"got {self.elitist_count}"
            )
        if not callable(self.fitness_function):
            raise InvalidConfigError("fitness_function has to be callable")
        if not callable(self.mutation_function):
            raise InvalidConfigError("mutation_function has to be callable")

        # Resolve competition strategy
        if isinstance(self.competition, str):
            try:
                competition = CompetitionRegistry.get(self.competition)
            except KeyError as exc:
                raise InvalidConfigError(str(exc.args[0])) from exc
        else:
            competition = self.competition
        if self.competition == "roulette" and self.does_a_beat_b is not None:
            raise InvalidConfigError(
                "roulette competition draws parents proportionally to fitness and cannot honor a custom "
                "does_a_beat_b; use the tournament competition with a custom comparator"
            )
        object.__setattr__(self, "_competition", competition)

    @property
    def elite_count(self) -> int:
        """Number of top-ranked genotypes that survive a generation unchanged."""
        if self.elitist_count is not None:
            return self.elitist_count
        # Exact halves round up
        return math.floor(self.elitist_ratio * self.population_size + 0.5)

    @property
    def comparator(self) -> Comparator:
        """The configured comparator, or the default higher-fitness-wins predicate."""
        return self.does_a_beat_b if self.does_a_beat_b is not None else default_does_a_beat_b

    @property
    def crossover_enabled(self) -> bool:
        """True if a crossover function is configured."""
        return self.crossover_function is not None

    def resolve_competition(self) -> Competition:
        """Return the competition callable selected by this configuration."""
        return self._competition
