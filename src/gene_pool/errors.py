"""Exception types raised by the genetic algorithm engine.

Every error derives from GenePoolError so callers can catch all engine
failures at once. Each concrete error also derives from the matching builtin
(ValueError, LookupError, RuntimeError) so existing handlers keep working.

Failures raised by caller-supplied callbacks (fitness, mutation, crossover,
comparator) are never wrapped: they propagate unchanged.
"""


class GenePoolError(Exception):
    """Base class for all errors raised by gene_pool."""


class InvalidConfigError(GenePoolError, ValueError):
    """Raised when a GAConfig holds an invalid value."""


class EmptyPopulationError(GenePoolError, ValueError):
    """Raised when an engine is constructed without any initial genotype."""


class FitnessCountMismatchError(GenePoolError, ValueError):
    """Raised when the fitness function returns the wrong number of values."""


class NoScoredGenotypesError(GenePoolError, LookupError):
    """Raised when fitness statistics are requested before any evaluation."""


class ConcurrentEvolutionError(GenePoolError, RuntimeError):
    """Raised when a second call enters an engine that is already running."""
