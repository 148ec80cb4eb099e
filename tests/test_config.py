"""Tests for GAConfig validation and derived values."""

from dataclasses import replace

import pytest

from gene_pool import GAConfig, InvalidConfigError, RankedGenotype, default_does_a_beat_b
from gene_pool.competition import pairwise_tournament


class TestValidation:
    """GAConfig rejects invalid values with InvalidConfigError."""

    @pytest.mark.parametrize("size", [1, 0, -3])
    def test_population_size_must_exceed_one(self, make_config, size: int) -> None:
        """population_size <= 1 is rejected."""
        with pytest.raises(InvalidConfigError, match="greater than one"):
            make_config(population_size=size)

    def test_population_size_must_be_integer(self, make_config) -> None:
        """A float population size is rejected."""
        with pytest.raises(InvalidConfigError, match="integer"):
            make_config(population_size=4.0)

    @pytest.mark.parametrize("probability", [-0.1, 1.1])
    def test_crossover_probability_range(self, make_config, probability: float) -> None:
        """crossover_probability must lie in [0, 1]."""
        with pytest.raises(InvalidConfigError, match="crossover_probability"):
            make_config(crossover_probability=probability)

    @pytest.mark.parametrize("ratio", [-1.0, 1.5])
    def test_elitist_ratio_range(self, make_config, ratio: float) -> None:
        """elitist_ratio must lie in [0, 1]."""
        with pytest.raises(InvalidConfigError, match="elitist_ratio"):
            make_config(elitist_ratio=ratio)

    @pytest.mark.parametrize("count", [-1, 7])
    def test_elitist_count_range(self, make_config, count: int) -> None:
        """elitist_count must lie in [0, population_size]."""
        with pytest.raises(InvalidConfigError, match="elitist_count"):
            make_config(elitist_count=count)

    def test_unknown_competition(self, make_config) -> None:
        """An unregistered competition name is rejected and lists alternatives."""
        with pytest.raises(InvalidConfigError, match="tournament"):
            make_config(competition="lottery")

    def test_roulette_rejects_custom_comparator(self, make_config) -> None:
        """Roulette cannot follow a custom comparator, so the pair is rejected."""

        def lower_wins(a: RankedGenotype, b: RankedGenotype) -> bool:
            return a.fitness < b.fitness

        with pytest.raises(InvalidConfigError, match="does_a_beat_b"):
            make_config(competition="roulette", does_a_beat_b=lower_wins)
        assert make_config(competition="tournament", does_a_beat_b=lower_wins).comparator is lower_wins

    def test_fitness_function_must_be_callable(self, make_config) -> None:
        """A non-callable fitness function is rejected."""
        with pytest.raises(InvalidConfigError, match="fitness_function"):
            make_config(fitness_function=None)

    def test_invalid_config_is_value_error(self, make_config) -> None:
        """InvalidConfigError can be caught as ValueError."""
        with pytest.raises(ValueError):
            make_config(population_size=1)


class TestDerivedValues:
    """Tests for GAConfig properties."""

    def test_defaults(self, make_config) -> None:
        """Defaults match the documented values."""
        config = make_config()
        assert config.crossover_probability == 0.5
        assert config.elitist_ratio == 0.0
        assert config.elitist_count is None
        assert config.recalculate_fitness_before_each_generation is False
        assert config.competition == "tournament"
        assert not config.crossover_enabled

    def test_elite_count_from_ratio(self, make_config) -> None:
        """elite_count is the rounded share of the population."""
        assert make_config(population_size=5, elitist_ratio=0.4).elite_count == 2
        assert make_config(population_size=10, elitist_ratio=1.0).elite_count == 10

    @pytest.mark.parametrize(("size", "expected"), [(5, 3), (7, 4), (9, 5), (11, 6)])
    def test_elite_count_rounds_half_up(self, make_config, size: int, expected: int) -> None:
        """Exact halves round up, so elitism grows monotonically with population size."""
        assert make_config(population_size=size, elitist_ratio=0.5).elite_count == expected

    def test_crossover_enabled(self, make_config) -> None:
        """crossover_enabled reflects whether a crossover function is configured."""
        assert not make_config().crossover_enabled
        assert make_config(crossover_function=lambda a, b: a).crossover_enabled

    def test_elitist_count_overrides_ratio(self, make_config) -> None:
        """An explicit elitist_count wins over elitist_ratio."""
        assert make_config(elitist_ratio=0.5, elitist_count=1).elite_count == 1

    def test_default_comparator(self, make_config) -> None:
        """Without does_a_beat_b, higher fitness wins."""
        comparator = make_config().comparator
        assert comparator is default_does_a_beat_b
        assert comparator(RankedGenotype(1, 2.0), RankedGenotype(2, 1.0))
        assert not comparator(RankedGenotype(1, 1.0), RankedGenotype(2, 1.0))

    def test_custom_comparator(self, make_config) -> None:
        """A configured comparator is returned as is."""

        def lower_wins(a: RankedGenotype, b: RankedGenotype) -> bool:
            return a.fitness < b.fitness

        assert make_config(does_a_beat_b=lower_wins).comparator is lower_wins

    def test_callable_competition(self, make_config) -> None:
        """A Competition callable is used directly."""
        competition = pairwise_tournament()
        assert make_config(competition=competition).resolve_competition() is competition

    def test_replace_revalidates(self, make_config) -> None:
        """dataclasses.replace runs validation again."""
        config = make_config()
        assert replace(config, population_size=20).population_size == 20
        with pytest.raises(InvalidConfigError):
            replace(config, population_size=1)

    def test_config_is_frozen(self, make_config) -> None:
        """Fields cannot be reassigned."""
        config = make_config()
        with pytest.raises(AttributeError):
            config.population_size = 10  # type: ignore[misc]
