"""Random placement of the monster and treasures on the grid."""

import random
from typing import List, Sequence, Tuple

from .objects import Point, Treasure, find_point


PLAYER_START = Point(1, 1)


def choose_unoccupied_location(r: random.Random, used_locations: List[Point], grid_size: int) -> Point:
    """
    Pick a random point not already in used_locations and append it there.

    There is no retry limit. Callers must never ask for more than
    grid_size ** 2 distinct locations, otherwise this never returns.
    """
    while True:
        location = Point(r.randint(1, grid_size), r.randint(1, grid_size))
        if find_point(used_locations, location) is None:
            break

    used_locations.append(location)
    return location


def validate_layout(grid_size: int, treasure_names: Sequence[str]):
    if grid_size < 1:
        raise ValueError(f"grid_size must be at least 1, got {grid_size}")
    if not treasure_names:
        raise ValueError("treasure_names must contain at least one treasure")
    if len(treasure_names) + 2 > grid_size * grid_size:
        raise ValueError(
            f"Cannot place a monster and {len(treasure_names)} treasures on a "
            f"{grid_size}x{grid_size} grid"
        )


class TreasureMapGenerator:
    def __init__(self, player_start: Point = PLAYER_START):
        self.player_start = player_start

    def mk_environment(
        self,
        r: random.Random,
        grid_size: int,
        treasure_names: Sequence[str]
    ) -> Tuple[Point, Point, List[Treasure]]:
        validate_layout(grid_size, treasure_names)

        player = self.player_start
        used_locations = [player]

        monster = choose_unoccupied_location(r, used_locations, grid_size)

        treasures = []
        for name in treasure_names:
            treasures.append(Treasure(name, choose_unoccupied_location(r, used_locations, grid_size)))

        return player, monster, treasures
