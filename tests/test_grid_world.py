"""Tests for GridWorld occupancy, grass bookkeeping and the equator band."""

import pytest

from grassland.boundary import Boundary
from grassland.config import EnergyParameters
from grassland.entities import Grass
from grassland.exceptions import OccupancyError, SimulationError
from grassland.math_utils import MapDirection, Vector2d
from grassland.world import GridWorld, MapTopology, compute_equator


def _assert_partition(world: GridWorld) -> None:
    on_equator = set(world.empty_equator_positions())
    off_equator = set(world.empty_non_equator_positions())
    grass = {g.position for g in world.grasses}
    assert on_equator.isdisjoint(off_equator)
    assert grass.isdisjoint(on_equator | off_equator)
    assert grass | on_equator | off_equator == set(world.boundary.iter_positions())
    assert all(world.is_on_equator(p) for p in on_equator)
    assert not any(world.is_on_equator(p) for p in off_equator)


class TestEquator:
    def test_ten_rows(self) -> None:
        equator = compute_equator(Boundary.of_size(10, 10))
        assert equator == Boundary(Vector2d(0, 1), Vector2d(9, 6))

    def test_twenty_rows(self) -> None:
        equator = compute_equator(Boundary.of_size(5, 20))
        assert equator.lower_left.y == 4
        assert equator.upper_right.y == 13

    def test_single_row_has_no_band(self) -> None:
        assert compute_equator(Boundary.of_size(4, 1)) is None

    def test_band_follows_offset_origin(self) -> None:
        equator = compute_equator(Boundary(Vector2d(-3, 10), Vector2d(2, 19)))
        assert equator == Boundary(Vector2d(-3, 11), Vector2d(2, 16))

    def test_without_band_every_cell_is_off_equator(self, energy_parameters) -> None:
        world = GridWorld(Boundary.of_size(3, 1), energy_parameters)
        assert world.empty_equator_positions() == []
        assert len(world.empty_non_equator_positions()) == 3
        assert len(world.grow_grass(2)) == 2


class TestConstruction:
    def test_every_cell_starts_empty(self, world) -> None:
        assert world.count_grass() == 0
        assert len(world.empty_positions()) == 100
        assert len(world.empty_equator_positions()) == 60
        assert world.animals() == []
        _assert_partition(world)

    def test_empty_positions_lists_equator_first(self, world) -> None:
        positions = world.empty_positions()
        assert all(world.is_on_equator(p) for p in positions[:60])
        assert not any(world.is_on_equator(p) for p in positions[60:])

    def test_off_map_queries_are_empty(self, world) -> None:
        assert world.animals_at(Vector2d(50, 50)) == []
        assert world.grass_at(Vector2d(-1, 0)) is None


class TestGrass:
    def test_place_and_remove_restore_empty_sets(self, world) -> None:
        grass = Grass(Vector2d(3, 3))
        world.place_grass(grass)
        assert world.grass_at(Vector2d(3, 3)) is grass
        assert Vector2d(3, 3) not in world.empty_positions()
        _assert_partition(world)

        world.remove_grass(grass)
        assert world.grass_at(Vector2d(3, 3)) is None
        assert Vector2d(3, 3) in world.empty_equator_positions()
        _assert_partition(world)

    def test_double_placement_raises(self, world) -> None:
        world.place_grass(Grass(Vector2d(0, 0)))
        with pytest.raises(OccupancyError):
            world.place_grass(Grass(Vector2d(0, 0)))

    def test_off_map_placement_raises(self, world) -> None:
        with pytest.raises(OccupancyError):
            world.place_grass(Grass(Vector2d(10, 0)))

    def test_removing_missing_grass_raises(self, world) -> None:
        with pytest.raises(OccupancyError):
            world.remove_grass(Grass(Vector2d(1, 1)))

    def test_removing_a_different_tuft_raises(self, world) -> None:
        world.place_grass(Grass(Vector2d(1, 1)))
        with pytest.raises(SimulationError):
            world.remove_grass(Grass(Vector2d(1, 1)))


class TestGrowth:
    def test_growth_prefers_the_equator(self, world) -> None:
        grown = world.grow_grass(5)
        assert len(grown) == 5
        assert len({g.position for g in grown}) == 5
        assert all(world.is_on_equator(g.position) for g in grown)
        assert world.count_grass() == 5
        _assert_partition(world)

    def test_growth_falls_back_when_equator_is_full(self, world) -> None:
        world.grow_grass(60)
        assert world.empty_equator_positions() == []

        grown = world.grow_grass(3)

        assert len(grown) == 3
        assert not any(world.is_on_equator(g.position) for g in grown)
        _assert_partition(world)

    def test_growth_spills_over_within_one_call(self, world) -> None:
        grown = world.grow_grass(70)
        on_equator = [g for g in grown if world.is_on_equator(g.position)]
        assert len(on_equator) == 60
        assert len(grown) == 70

    def test_growth_is_capped_by_free_cells(self, world) -> None:
        grown = world.grow_grass(150)
        assert len(grown) == 100
        assert world.empty_positions() == []
        assert world.grow_grass(1) == []
        _assert_partition(world)

    def test_zero_growth(self, world) -> None:
        assert world.grow_grass(0) == []


class TestAnimals:
    def test_place_registers_and_lists(self, world, make_animal) -> None:
        animal = make_animal(Vector2d(2, 2))
        world.place_animal(animal)
        assert animal.animal_id is not None
        assert world.animals_at(Vector2d(2, 2)) == [animal]
        assert world.animals() == [animal]

    def test_place_remove_round_trip(self, world, make_animal) -> None:
        animal = make_animal(Vector2d(4, 4))
        world.place_animal(animal)
        world.remove_animal(animal)
        assert world.animals_at(Vector2d(4, 4)) == []
        with pytest.raises(OccupancyError):
            world.remove_animal(animal)

    def test_placing_twice_on_same_cell_raises(self, world, make_animal) -> None:
        animal = make_animal(Vector2d(1, 1))
        world.place_animal(animal)
        with pytest.raises(OccupancyError):
            world.place_animal(animal)

    def test_placing_off_map_raises(self, world, make_animal) -> None:
        with pytest.raises(OccupancyError):
            world.place_animal(make_animal(Vector2d(-1, 0)))

    def test_removing_unplaced_animal_raises(self, world, make_animal) -> None:
        with pytest.raises(OccupancyError):
            world.remove_animal(make_animal(Vector2d(0, 0)))

    def test_cells_hold_several_animals(self, world, make_animal) -> None:
        first = make_animal(Vector2d(5, 5))
        second = make_animal(Vector2d(5, 5))
        world.place_animal(first)
        world.place_animal(second)
        assert world.animals_at(Vector2d(5, 5)) == [first, second]

    def test_elements_lists_grass_then_animals(self, world, make_animal) -> None:
        grass = Grass(Vector2d(0, 0))
        animal = make_animal(Vector2d(0, 0))
        world.place_grass(grass)
        world.place_animal(animal)
        assert world.elements() == [grass, animal]


class TestMove:
    def test_move_relocates_and_charges(self, world, make_animal) -> None:
        animal = make_animal(Vector2d(2, 2), energy=10)
        world.place_animal(animal)

        world.move(animal)

        assert animal.position == Vector2d(2, 3)
        assert world.animals_at(Vector2d(2, 2)) == []
        assert world.animals_at(Vector2d(2, 3)) == [animal]
        assert animal.energy == 9

    def test_gene_turns_before_the_step(self, world, make_animal) -> None:
        animal = make_animal(Vector2d(2, 2), genes=(2, 0))
        world.place_animal(animal)

        world.move(animal)
        assert animal.orientation is MapDirection.EAST
        assert animal.position == Vector2d(3, 2)
        assert animal.gene_index == 1

        world.move(animal)
        assert animal.orientation is MapDirection.EAST
        assert animal.position == Vector2d(4, 2)
        assert animal.gene_index == 0

    def test_blocked_move_turns_around(self, world, make_animal) -> None:
        animal = make_animal(Vector2d(0, 9), energy=10)
        world.place_animal(animal)

        world.move(animal)

        assert animal.position == Vector2d(0, 9)
        assert animal.orientation is MapDirection.SOUTH
        assert world.animals_at(Vector2d(0, 9)) == [animal]
        assert animal.energy == 9

    def test_can_move_checks_the_forward_cell(self, world, make_animal) -> None:
        assert world.can_move(make_animal(Vector2d(9, 5), orientation=MapDirection.WEST))
        assert not world.can_move(make_animal(Vector2d(9, 5), orientation=MapDirection.EAST))
        assert not world.can_move(make_animal(Vector2d(0, 0), orientation=MapDirection.SOUTH_WEST))

    def test_moving_unplaced_animal_raises(self, world, make_animal) -> None:
        with pytest.raises(OccupancyError):
            world.move(make_animal(Vector2d(3, 3)))


class TestWinners:
    def test_ranking_by_energy_then_age_then_children(self, world, make_animal) -> None:
        position = Vector2d(1, 1)
        weak = make_animal(position, energy=5)
        old = make_animal(position, energy=20)
        old.age = 10
        parent = make_animal(position, energy=20)
        parent.age = 10
        parent.children.append(make_animal(position))
        strong = make_animal(position, energy=40)
        for animal in (weak, old, parent, strong):
            world.place_animal(animal)

        assert world.k_winners(position, 4) == [strong, parent, old, weak]
        assert world.k_winners(position, 2) == [strong, parent]

    def test_full_tie_goes_to_lower_id(self, world, make_animal) -> None:
        position = Vector2d(1, 1)
        first = make_animal(position, energy=20)
        second = make_animal(position, energy=20)
        world.place_animal(second)
        world.place_animal(first)
        assert world.k_winners(position, 1) == [second]

    def test_k_larger_than_occupants_and_non_positive(self, world, make_animal) -> None:
        animal = make_animal(Vector2d(1, 1))
        world.place_animal(animal)
        assert world.k_winners(Vector2d(1, 1), 5) == [animal]
        assert world.k_winners(Vector2d(1, 1), 0) == []
        assert world.k_winners(Vector2d(2, 2), 1) == []


class TestEating:
    def test_strongest_occupant_eats(self, world, make_animal) -> None:
        position = Vector2d(4, 4)
        grass = Grass(position)
        world.place_grass(grass)
        strong = make_animal(position, energy=10)
        weak = make_animal(position, energy=3)
        world.place_animal(weak)
        world.place_animal(strong)

        assert world.eat_grass(grass) is strong

        assert strong.energy == 15
        assert weak.energy == 3
        assert world.grass_at(position) is None
        assert position in world.empty_equator_positions()
        _assert_partition(world)

    def test_eaten_off_equator_returns_to_off_equator_set(self, world, make_animal) -> None:
        position = Vector2d(0, 9)
        grass = Grass(position)
        world.place_grass(grass)
        world.place_animal(make_animal(position))

        world.eat_grass(grass)

        assert position in world.empty_non_equator_positions()

    def test_nobody_to_eat(self, world) -> None:
        grass = Grass(Vector2d(4, 4))
        world.place_grass(grass)
        assert world.eat_grass(grass) is None
        assert world.grass_at(Vector2d(4, 4)) is grass

    def test_eating_unknown_grass_raises(self, world) -> None:
        with pytest.raises(OccupancyError):
            world.eat_grass(Grass(Vector2d(4, 4)))


class TestReproduce:
    def test_well_fed_pair_is_charged(self, world, make_animal) -> None:
        position = Vector2d(2, 2)
        first = make_animal(position, energy=50)
        second = make_animal(position, energy=40)
        world.place_animal(second)
        world.place_animal(first)

        assert world.reproduce(position) == (first, second)
        assert first.energy == 40
        assert second.energy == 30

    def test_weaker_parent_below_threshold(self, make_animal) -> None:
        world = GridWorld(
            Boundary.of_size(5, 5), EnergyParameters(energy_to_reproduce=10, energy_to_full=45)
        )
        position = Vector2d(2, 2)
        first = make_animal(position, energy=50)
        second = make_animal(position, energy=40)
        world.place_animal(first)
        world.place_animal(second)

        assert world.reproduce(position) is None
        assert (first.energy, second.energy) == (50, 40)

    def test_only_top_two_are_charged(self, world, make_animal) -> None:
        position = Vector2d(2, 2)
        animals = [make_animal(position, energy=e) for e in (31, 60, 45)]
        for animal in animals:
            world.place_animal(animal)

        assert world.reproduce(position) == (animals[1], animals[2])
        assert [a.energy for a in animals] == [31, 50, 35]

    def test_single_animal_cannot_reproduce(self, world, make_animal) -> None:
        world.place_animal(make_animal(Vector2d(2, 2), energy=100))
        assert world.reproduce(Vector2d(2, 2)) is None


def test_animals_stay_listed_exactly_once(world, make_animal, seeded_rng):
    animals = []
    for _ in range(15):
        genes = tuple(seeded_rng.randrange(8) for _ in range(5))
        position = Vector2d(seeded_rng.randrange(10), seeded_rng.randrange(10))
        animal = make_animal(position, energy=1000, genes=genes)
        world.place_animal(animal)
        animals.append(animal)

    for _ in range(100):
        animal = seeded_rng.choice(animals)
        world.move(animal)
        listed = [p for p in world.boundary.iter_positions() if animal in world.animals_at(p)]
        assert listed == [animal.position]

    assert sorted(a.animal_id for a in world.animals()) == sorted(a.animal_id for a in animals)


class OffMapTopology(MapTopology):
    """Resolves every step to a cell outside any map."""

    name = "off_map"

    def next_position(self, animal, world):
        return Vector2d(-100, -100), animal.orientation.opposite()


def test_off_map_topology_leaves_animal_where_it_was(energy_parameters, make_animal):
    world = GridWorld(Boundary.of_size(5, 5), energy_parameters, topology=OffMapTopology())
    animal = make_animal(Vector2d(2, 2), energy=10, genes=(2, 1))
    world.place_animal(animal)

    with pytest.raises(OccupancyError):
        world.move(animal)

    assert animal.position == Vector2d(2, 2)
    assert animal.orientation is MapDirection.NORTH
    assert animal.gene_index == 0
    assert animal.energy == 10
    assert world.animals_at(Vector2d(2, 2)) == [animal]
