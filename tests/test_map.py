import random

import pytest

from treasure_hunt.map import PLAYER_START, TreasureMapGenerator, choose_unoccupied_location, validate_layout
from treasure_hunt.objects import Point


def test_choose_unoccupied_location_records_choice():
    r = random.Random(1)
    used = [Point(1, 1)]
    location = choose_unoccupied_location(r, used, 5)

    assert location != Point(1, 1)
    assert used == [Point(1, 1), location]
    assert 1 <= location.x <= 5
    assert 1 <= location.y <= 5


def test_choose_unoccupied_location_finds_last_free_cell():
    r = random.Random(3)
    used = [Point(x, y) for x in range(1, 4) for y in range(1, 4) if (x, y) != (2, 3)]

    assert choose_unoccupied_location(r, used, 3) == Point(2, 3)


def test_placements_are_pairwise_distinct():
    generator = TreasureMapGenerator()
    for seed in range(50):
        player, monster, treasures = generator.mk_environment(
            random.Random(seed), 5, ['gem', 'ruby', 'diamond', 'coin', 'emerald', 'goblet']
        )
        locations = [player, monster] + [t.location for t in treasures]
        assert player == PLAYER_START
        assert len(set(locations)) == len(locations)


def test_full_grid_is_filled_exactly():
    names = [f"t{i}" for i in range(7)]
    player, monster, treasures = TreasureMapGenerator().mk_environment(random.Random(0), 3, names)

    locations = {player, monster} | {t.location for t in treasures}
    assert locations == {Point(x, y) for x in range(1, 4) for y in range(1, 4)}
    assert [t.name for t in treasures] == names


def test_overfull_grid_is_rejected():
    with pytest.raises(ValueError):
        TreasureMapGenerator().mk_environment(random.Random(0), 2, ['a', 'b', 'c'])


@pytest.mark.parametrize("grid_size, names", [(0, ['gem']), (5, []), (2, ['a', 'b', 'c'])])
def test_validate_layout_rejects_bad_settings(grid_size, names):
    with pytest.raises(ValueError):
        validate_layout(grid_size, names)


def test_validate_layout_accepts_a_full_grid():
    validate_layout(3, [f"t{i}" for i in range(7)])
