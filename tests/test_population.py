"""Tests for the population data structures."""

import numpy as np
import pytest

from gene_pool import Population, RankedGenotype, ScoredEntry


class TestScoredEntry:
    """Tests for ScoredEntry and RankedGenotype."""

    def test_default_entry_is_unscored(self) -> None:
        """An entry without fitness is not scored."""
        entry = ScoredEntry(genotype="abc")
        assert entry.fitness is None
        assert not entry.is_scored

    def test_zero_fitness_counts_as_scored(self) -> None:
        """A fitness of 0.0 is a value, not a missing score."""
        assert ScoredEntry(genotype="abc", fitness=0.0).is_scored

    def test_with_fitness_returns_ranked_copy(self) -> None:
        """with_fitness returns a new RankedGenotype and leaves the original alone."""
        entry = ScoredEntry(genotype=[1, 2])
        ranked = entry.with_fitness(-1.5)
        assert isinstance(ranked, RankedGenotype)
        assert ranked.genotype is entry.genotype
        assert ranked.fitness == -1.5
        assert entry.fitness is None

    def test_entries_are_frozen(self) -> None:
        """Entries cannot be modified after construction."""
        entry = ScoredEntry(genotype=1, fitness=1.0)
        with pytest.raises(AttributeError):
            entry.fitness = 2.0  # type: ignore[misc]

    def test_ranked_genotype_requires_fitness(self) -> None:
        """RankedGenotype has no default fitness."""
        with pytest.raises(TypeError):
            RankedGenotype(genotype=1)  # type: ignore[call-arg]

    def test_ranked_genotype_rejects_none_fitness(self) -> None:
        """An explicit None fitness is rejected and the default applies only to ScoredEntry."""
        with pytest.raises(TypeError, match="requires a fitness value"):
            RankedGenotype(genotype=1, fitness=None)  # type: ignore[arg-type]
        assert RankedGenotype(genotype=1, fitness=0.0).is_scored


class TestPopulation:
    """Tests for the Population store."""

    def test_unscored_constructor(self) -> None:
        """Population.unscored wraps every genotype without fitness."""
        pop = Population.unscored(["a", "b", "c"])
        assert len(pop) == 3
        assert pop.genotypes() == ["a", "b", "c"]
        assert not pop.has_fitness

    def test_entries_copied_to_tuple(self) -> None:
        """A list of entries is stored as a tuple."""
        entries = [ScoredEntry(1), ScoredEntry(2)]
        pop = Population(entries)  # type: ignore[arg-type]
        entries.append(ScoredEntry(3))
        assert isinstance(pop.entries, tuple)
        assert len(pop) == 2

    def test_rejects_non_entries(self) -> None:
        """Raw genotypes are rejected."""
        with pytest.raises(TypeError, match="ScoredEntry"):
            Population((1, 2))  # type: ignore[arg-type]

    def test_has_fitness(self) -> None:
        """has_fitness is True when any entry is scored."""
        pop = Population((ScoredEntry(1), ScoredEntry(2, 0.5)))
        assert pop.has_fitness

    def test_partition_splits_and_keeps_order(self) -> None:
        """partition separates unscored and scored entries in population order."""
        pop = Population((ScoredEntry("a"), ScoredEntry("b", 2.0), ScoredEntry("c"), ScoredEntry("d", 1.0)))
        unscored, scored = pop.partition()
        assert [e.genotype for e in unscored] == ["a", "c"]
        assert [e.genotype for e in scored] == ["b", "d"]
        assert all(isinstance(e, RankedGenotype) for e in scored)

    def test_partition_force_marks_everything_unscored(self) -> None:
        """With force, every entry needs evaluation."""
        pop = Population((ScoredEntry("a", 1.0), ScoredEntry("b", 2.0)))
        unscored, scored = pop.partition(force=True)
        assert [e.genotype for e in unscored] == ["a", "b"]
        assert scored == []

    def test_shuffled_returns_permutation(self, rng: np.random.Generator) -> None:
        """shuffled returns a new population with the same entries."""
        pop = Population.unscored(range(20))
        shuffled = pop.shuffled(rng)
        assert sorted(shuffled.genotypes()) == list(range(20))
        assert pop.genotypes() == list(range(20))

    def test_extended_appends(self) -> None:
        """extended returns a new, longer population."""
        pop = Population.unscored([1])
        longer = pop.extended([ScoredEntry(2)])
        assert longer.genotypes() == [1, 2]
        assert len(pop) == 1

    def test_indexing_and_iteration(self) -> None:
        """Population supports indexing and iteration over entries."""
        pop = Population.unscored([1, 2, 3])
        assert pop[-1].genotype == 3
        assert [e.genotype for e in pop] == [1, 2, 3]
