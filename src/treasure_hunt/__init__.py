"""
Treasure Hunt - a turn-based text adventure on a square grid.

The player starts at (1, 1) and must find every hidden treasure without
walking into the hidden monster. A growl warns when the monster is next door.
"""

from .objects import Point, Treasure, adjacent, equal, make_point, to_display_string
from .map import choose_unoccupied_location
from .game import (
    DEFAULT_TREASURES,
    GRID_SIZE,
    Command,
    GameState,
    Outcome,
    TreasureHuntGame,
    enter_location,
    init_game,
    process_command,
)

__all__ = [
    'Point', 'Treasure', 'adjacent', 'equal', 'make_point', 'to_display_string',
    'choose_unoccupied_location',
    'DEFAULT_TREASURES', 'GRID_SIZE', 'Command', 'GameState', 'Outcome', 'TreasureHuntGame',
    'enter_location', 'init_game', 'process_command',
]
__version__ = '1.0.0'
