"""Arena of animals addressed by stable ids.

The world's occupancy lists and the simulation's rosters store ids issued
here instead of holding the animals themselves, so removing an animal from
one index can never leave the other pointing at a stale object.
"""

from __future__ import annotations

import itertools
from typing import Dict, Iterable, Iterator, List

from grassland.entities.animal import Animal
from grassland.exceptions import UnknownAnimalError


class AnimalRegistry:
    """Issues ids and resolves them back to animals (alive or dead)."""

    def __init__(self) -> None:
        self._animals: Dict[int, Animal] = {}
        self._next_id = itertools.count(1)

    def register(self, animal: Animal) -> int:
        """Assign an id to ``animal`` if it has none and return the id."""
        if animal.animal_id is not None:
            if self._animals.get(animal.animal_id) is not animal:
                raise UnknownAnimalError(
                    f"Animal #{animal.animal_id} was registered in a different registry"
                )
            return animal.animal_id
        animal_id = next(self._next_id)
        animal.animal_id = animal_id
        self._animals[animal_id] = animal
        return animal_id

    def get(self, animal_id: int) -> Animal:
        try:
            return self._animals[animal_id]
        except KeyError:
            raise UnknownAnimalError(f"No animal with id {animal_id}") from None

    def resolve(self, animal_ids: Iterable[int]) -> List[Animal]:
        return [self.get(animal_id) for animal_id in animal_ids]

    def __contains__(self, animal_id: object) -> bool:
        return animal_id in self._animals

    def __len__(self) -> int:
        return len(self._animals)

    def __iter__(self) -> Iterator[Animal]:
        return iter(self._animals.values())
