from typing import Dict, Optional, Sequence

import pytest

from treasure_hunt.game import GameState
from treasure_hunt.objects import Point, Treasure


@pytest.fixture
def make_state():
    """Build a GameState with a fixed layout instead of a random one."""

    def _make(
        monster=(3, 3),
        treasures: Optional[Dict[str, Sequence[int]]] = None,
        player=(1, 1),
        grid_size: int = 5,
    ) -> GameState:
        treasures = treasures or {}
        return GameState(
            player=Point(*player),
            monster=Point(*monster),
            treasures=[Treasure(name, Point(*loc)) for name, loc in treasures.items()],
            grid_size=grid_size,
        )

    return _make
