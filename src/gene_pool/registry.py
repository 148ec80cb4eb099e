"""Registry system for competition strategies.

This module provides a registry pattern for managing the competition policy
of the genetic algorithm. Instead of hardcoding one policy, strategy
factories are registered by name and the configuration refers to them by
string.

The registry pattern enables:
- **Pluggable strategies**: Swap the competition policy without code changes
- **Configuration-driven experiments**: Select the policy by name from config
- **Discoverability**: List all available strategies programmatically
- **Factory pattern**: Register functions that create configured competitions

Basic usage:
    ```python
    from gene_pool.registry import CompetitionRegistry, list_competitions

    # Register a strategy factory
    def keep_all_factory():
        def competition(ranked, config, rng):
            return list(ranked[: config.population_size])
        return competition

    CompetitionRegistry.register("keep_all", keep_all_factory)

    # Get a configured competition
    competition = CompetitionRegistry.get("keep_all")

    # List available strategies
    available = list_competitions()  # ["keep_all", "roulette", "tournament"]
    ```
"""

from collections.abc import Callable

from gene_pool.protocols import Competition


class CompetitionRegistry:
    """Registry for competition strategies.

    This class provides a class-level registry for competition strategy
    factories. Strategies are registered by name and can be retrieved with
    custom configuration parameters.

    Class Attributes:
        _registry: Dictionary mapping strategy names to factory functions.
            Keys are strategy names (str), values are callables that return
            Competition instances.
    """

    _registry: dict[str, Callable[..., Competition]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., Competition]) -> None:
        """Register a competition strategy factory.

        Args:
            name: Unique name for the strategy. Will overwrite if already exists.
            factory: Callable that returns a Competition. Should accept
                keyword arguments for configuration.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> Competition:
        """Get a configured competition by name.

        Args:
            name: Name of the registered strategy.
            **kwargs: Configuration parameters passed to the factory function.

        Returns:
            A configured Competition callable.

        Raises:
            KeyError: If the strategy name is not registered. Error message
                includes list of available strategies.

        Example:
            ```python
            competition = CompetitionRegistry.get("tournament")
            next_generation = competition(ranked, config, rng)
            ```
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Competition strategy '{name}' not found. Available strategies: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry.keys())


def list_competitions() -> list[str]:
    """List all registered competition strategies.

    Convenience function that returns CompetitionRegistry.list().
    """
    return CompetitionRegistry.list()
