"""Movement genome for grassland animals.

A genome is a fixed-length sequence of turn genes. Each day an animal reads
its active gene, turns clockwise by that many eighths of a full turn, tries to
step forward, and moves on to the next gene (wrapping at the end).

Genomes are immutable and hashable so the simulation can group animals into
lineages by genome.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Tuple

from grassland.config.defaults import GENE_VALUES


@dataclass(frozen=True)
class Genome:
    """Immutable sequence of turn genes in ``0..GENE_VALUES - 1``."""

    genes: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.genes:
            raise ValueError("Genome must contain at least one gene")
        for gene in self.genes:
            if not 0 <= gene < GENE_VALUES:
                raise ValueError(f"Gene values must be in 0..{GENE_VALUES - 1}, got {gene}")

    def __len__(self) -> int:
        return len(self.genes)

    def __getitem__(self, index: int) -> int:
        return self.genes[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.genes)

    def __str__(self) -> str:
        return "".join(str(gene) for gene in self.genes)

    @classmethod
    def random(cls, length: int, rng: random.Random) -> "Genome":
        """Create a uniformly random genome of ``length`` genes."""
        return cls(tuple(rng.randrange(GENE_VALUES) for _ in range(length)))

    @classmethod
    def from_parents(
        cls,
        dominant: "Genome",
        recessive: "Genome",
        dominant_share: float,
        rng: random.Random,
        min_mutations: int = 0,
        max_mutations: int = 0,
    ) -> "Genome":
        """Cross two genomes and mutate the result.

        The dominant parent contributes ``dominant_share`` of the genes taken
        from a randomly chosen end (left or right); the recessive parent fills
        the rest. Then between ``min_mutations`` and ``max_mutations`` distinct
        genes are replaced with a different random value.

        Args:
            dominant: Genome of the stronger parent
            recessive: Genome of the weaker parent
            dominant_share: Fraction of genes from the dominant parent (0.0-1.0)
            rng: Random number generator
            min_mutations: Minimum number of mutated genes
            max_mutations: Maximum number of mutated genes

        Returns:
            The child genome
        """
        if len(dominant) != len(recessive):
            raise ValueError(
                f"Parent genomes differ in length ({len(dominant)} vs {len(recessive)})"
            )
        length = len(dominant)
        share = min(1.0, max(0.0, dominant_share))
        taken = round(length * share)

        if rng.random() < 0.5:
            genes = list(dominant.genes[:taken] + recessive.genes[taken:])
        else:
            genes = list(recessive.genes[: length - taken] + dominant.genes[length - taken :])

        mutation_count = rng.randint(min_mutations, min(max_mutations, length))
        for index in rng.sample(range(length), mutation_count):
            genes[index] = (genes[index] + rng.randrange(1, GENE_VALUES)) % GENE_VALUES

        return cls(tuple(genes))
