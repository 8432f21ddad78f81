"""Treasure Hunt game implementation."""

import random
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .objects import Point, Treasure, adjacent, equal, find_point, to_display_string
from .map import PLAYER_START, TreasureMapGenerator, validate_layout


GRID_SIZE = 5
DEFAULT_TREASURES = ['gem', 'ruby', 'diamond', 'coin', 'emerald', 'goblet']

MSG_EMPTY = "What??"
MSG_UNKNOWN = "I don't know what you mean"
MSG_BLOCKED = "You can't move in that direction!"
MSG_EATEN = "Oh no!!  You've been eaten by a hungry monster!"
MSG_GROWL = "You can hear a growling sound nearby!"
MSG_GAME_OVER = "The game is over."


class Command(Enum):
    LEFT = "l"
    RIGHT = "r"
    UP = "u"
    DOWN = "d"
    QUIT = "q"


MOVES: Dict[Command, Tuple[int, int]] = {
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
    Command.UP: (0, -1),
    Command.DOWN: (0, 1),
}

_COMMANDS_BY_TOKEN = {command.value: command for command in Command}


class Outcome(Enum):
    DIED = "died"
    WON = "won"
    QUIT = "quit"


class GameState:
    def __init__(
        self,
        player: Point,
        monster: Point,
        treasures: List[Treasure],
        grid_size: int = GRID_SIZE
    ):
        self.player = player
        self.monster = monster
        self.treasures = treasures
        self.grid_size = grid_size
        self.found_count = sum(1 for treasure in treasures if treasure.is_found)
        self.outcome: Optional[Outcome] = None
        self.turns = 0

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    @property
    def remaining(self) -> int:
        return len(self.treasures) - self.found_count

    def treasure_locations(self) -> List[Optional[Point]]:
        return [treasure.location for treasure in self.treasures]

    def in_bounds(self, point: Point) -> bool:
        return 1 <= point.x <= self.grid_size and 1 <= point.y <= self.grid_size


def init_game(
    treasure_names: Sequence[str] = DEFAULT_TREASURES,
    grid_size: int = GRID_SIZE,
    r: Optional[random.Random] = None
) -> GameState:
    if r is None:
        r = random.Random()

    player, monster, treasures = TreasureMapGenerator().mk_environment(r, grid_size, treasure_names)
    return GameState(player, monster, treasures, grid_size)


def enter_location(state: GameState, new_location: Point) -> Tuple[bool, List[str]]:
    """
    Move the player onto new_location and report what happens there.

    Returns (keep_playing, messages). Being eaten is checked before any
    treasure on the same square, so a monster always wins the tie.
    """
    messages = []

    state.player = new_location
    messages.append(f"You are now in location {to_display_string(new_location)}")

    if equal(state.monster, state.player):
        messages.append(MSG_EATEN)
        state.outcome = Outcome.DIED
        return False, messages

    # Any given location holds at most one treasure.
    index = find_point(state.treasure_locations(), state.player)

    if index is not None:
        treasure = state.treasures[index]
        messages.append(f"You found the {treasure.name}!")
        treasure.mark_found()
        state.found_count += 1

        if state.found_count == len(state.treasures):
            messages.append(f"You found all {state.found_count} treasures!  You win!!")
            state.outcome = Outcome.WON
            return False, messages

        remaining = state.remaining
        messages.append(f"You have {remaining} more treasure{'s' if remaining > 1 else ''} to find!")

    if adjacent(state.monster, state.player):
        messages.append(MSG_GROWL)

    return True, messages


def parse_command(raw_command: Optional[str]) -> Optional[Command]:
    if raw_command is None:
        return None
    return _COMMANDS_BY_TOKEN.get(raw_command.strip().lower())


def _candidate_location(state: GameState, command: Command) -> Optional[Point]:
    dx, dy = MOVES[command]
    candidate = Point(state.player.x + dx, state.player.y + dy)
    if not state.in_bounds(candidate):
        return None
    return candidate


def process_command(state: GameState, raw_command: Optional[str]) -> Tuple[bool, List[str]]:
    if state.is_over:
        return False, [MSG_GAME_OVER]

    state.turns += 1

    normalized = raw_command.strip().lower() if raw_command else ""
    if not normalized:
        return True, [MSG_EMPTY]

    command = parse_command(normalized)

    if command is None:
        return True, [MSG_UNKNOWN]

    if command == Command.QUIT:
        state.outcome = Outcome.QUIT
        return False, []

    new_location = _candidate_location(state, command)
    if new_location is None:
        return True, [MSG_BLOCKED]

    return enter_location(state, new_location)


class TreasureHuntGame:
    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        treasure_names: Optional[Sequence[str]] = None,
        seed: Optional[int] = None
    ):
        if treasure_names is None:
            treasure_names = DEFAULT_TREASURES

        validate_layout(grid_size, treasure_names)

        self.grid_size = grid_size
        self.treasure_names = list(treasure_names)
        self.seed = seed
        self.state: Optional[GameState] = None
        self.generation_properties = {
            "gridSize": grid_size,
            "numTreasures": len(self.treasure_names),
        }

        if seed is not None:
            self.generation_properties["seed"] = seed

    def reset(self, seed: Optional[int] = None) -> str:
        if seed is not None:
            self.seed = seed
            self.generation_properties["seed"] = seed

        r = random.Random(self.seed if self.seed is not None else None)
        self.state = init_game(self.treasure_names, self.grid_size, r)

        _, messages = enter_location(self.state, PLAYER_START)
        return "\n".join(messages)

    def _info(self, was_valid: bool) -> Dict[str, Any]:
        state = self.state
        return {
            "foundCount": state.found_count,
            "totalTreasures": len(state.treasures),
            "outcome": state.outcome.value if state.outcome is not None else None,
            "turns": state.turns,
            "wasValidAction": was_valid,
            "player": str(state.player),
        }

    def step(self, command: str) -> Tuple[str, float, bool, Dict[str, Any]]:
        if self.state is None:
            return "Game has not been reset. Please call reset() first.", 0.0, False, {
                "foundCount": 0,
                "totalTreasures": len(self.treasure_names),
                "outcome": None,
                "turns": 0,
                "wasValidAction": False,
                "player": None,
            }

        was_over = self.state.is_over
        was_valid = not was_over and parse_command(command) is not None
        keep_playing, messages = process_command(self.state, command)

        reward = 1.0 if not was_over and self.state.outcome == Outcome.WON else 0.0
        observation = "\n".join(messages)
        return observation, reward, not keep_playing, self._info(was_valid)

    def get_generation_properties(self) -> Dict[str, int]:
        return self.generation_properties.copy()
