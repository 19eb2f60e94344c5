"""Tests for the animal id arena."""

import pytest

from grassland.entities import AnimalRegistry
from grassland.exceptions import UnknownAnimalError


def test_register_issues_sequential_ids(make_animal):
    registry = AnimalRegistry()
    first, second = make_animal(), make_animal()
    assert registry.register(first) == 1
    assert registry.register(second) == 2
    assert first.animal_id == 1
    assert len(registry) == 2
    assert list(registry) == [first, second]


def test_register_is_idempotent(make_animal):
    registry = AnimalRegistry()
    animal = make_animal()
    animal_id = registry.register(animal)
    assert registry.register(animal) == animal_id
    assert len(registry) == 1


def test_foreign_animal_is_rejected(make_animal):
    animal = make_animal()
    AnimalRegistry().register(animal)
    with pytest.raises(UnknownAnimalError):
        AnimalRegistry().register(animal)


def test_get_and_resolve(make_animal):
    registry = AnimalRegistry()
    animals = [make_animal() for _ in range(3)]
    for animal in animals:
        registry.register(animal)

    assert registry.get(2) is animals[1]
    assert registry.resolve([3, 1]) == [animals[2], animals[0]]
    assert 3 in registry
    assert 4 not in registry
    with pytest.raises(UnknownAnimalError):
        registry.get(4)
