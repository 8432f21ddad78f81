"""Play Treasure Hunt on the console."""

import os
import sys
import json
import argparse
from datetime import datetime
from typing import Optional, Dict, List, Tuple, Any, Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from treasure_hunt import DEFAULT_TREASURES, GRID_SIZE, Outcome, TreasureHuntGame


PROMPT = "\nWhat do you want to do? "
SEED_ENV_VAR = 'TREASURE_HUNT_SEED'


@dataclass
class GameStats:
    total_turns: int = 0
    commands: List[str] = field(default_factory=list)
    outcome: Optional[str] = None
    treasures_found: int = 0
    total_treasures: int = 0

    @property
    def game_won(self) -> bool:
        return self.outcome == Outcome.WON.value


class ConsoleGameRunner:
    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        print_func: Optional[Callable[..., None]] = None
    ):
        self.input_func = input_func or input
        self.print_func = print_func or print
        self.transcript: List[str] = []

    def _say(self, text: str = "") -> None:
        self.transcript.append(text)
        self.print_func(text)

    def _read_command(self) -> Optional[str]:
        try:
            command = self.input_func(PROMPT)
        except EOFError:
            return None
        self.transcript.append(f"{PROMPT.strip()} {command}")
        return command

    def run_game(
        self,
        grid_size: int = GRID_SIZE,
        treasures: Optional[Sequence[str]] = None,
        seed: Optional[int] = None,
        verbose: bool = True,
        auto_save: bool = False,
        output_file: Optional[str] = None,
        output_base: str = 'out'
    ) -> Tuple[GameStats, Dict[str, Any], Optional[Path]]:
        game = TreasureHuntGame(grid_size=grid_size, treasure_names=treasures, seed=seed)
        self.transcript = []

        if verbose:
            self._say("=== Treasure Hunt ===")
            self._say(f"Grid: {grid_size}x{grid_size}")
            self._say(f"Treasures to find: {len(game.treasure_names)}")
            self._say("Commands: L, R, U, D to move, Q to quit")

        self._say()
        self._say(game.reset())

        stats = GameStats(total_treasures=len(game.treasure_names))

        while True:
            command = self._read_command()

            if command is None:
                # End of input counts as quitting.
                command = 'q'

            obs, reward, done, info = game.step(command)

            stats.total_turns = info['turns']
            stats.commands.append(command)
            stats.treasures_found = info['foundCount']

            if obs:
                self._say()
                self._say(obs)

            if done:
                stats.outcome = info['outcome']
                break

        self._say("Thanks for playing!")

        game_info = {
            'total_turns': stats.total_turns,
            'commands': stats.commands,
            'outcome': stats.outcome,
            'game_won': stats.game_won,
            'treasures_found': stats.treasures_found,
            'total_treasures': stats.total_treasures,
            'grid_size': grid_size,
            'seed': seed,
            'timestamp': datetime.now().isoformat()
        }

        run_dir = None
        if auto_save or output_file:
            run_dir = self._save_results(game_info, output_base, output_file, verbose)

        return stats, game_info, run_dir

    def _save_results(
        self,
        game_info: Dict[str, Any],
        output_base: str,
        output_file: Optional[str],
        verbose: bool
    ) -> Path:
        base = Path(output_base)
        base.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        run_dir = base / f"treasure_hunt_{timestamp}"
        run_dir.mkdir(exist_ok=True)

        if output_file:
            json_path = run_dir / Path(output_file).name
        else:
            json_path = run_dir / f"game_{timestamp}.json"

        with open(json_path, 'w') as f:
            json.dump(game_info, f, indent=2)

        transcript_path = run_dir / "transcript.txt"
        with open(transcript_path, 'w') as f:
            f.write("=== Treasure Hunt Transcript ===\n\n")
            for line in self.transcript:
                f.write(f"{line}\n")

        if verbose:
            # Printed directly so the save notice stays out of the transcript.
            self.print_func(f"\nResults saved to directory: {run_dir}")
            self.print_func(f"  - Game results: {json_path.name}")
            self.print_func(f"  - Transcript: {transcript_path.name}")

        return run_dir


def load_env_file(env_path: str = '.env') -> None:
    env_file = Path(env_path)
    if env_file.exists():
        load_dotenv(env_path, override=True)
    elif env_path != '.env':
        print(f"Warning: .env file not found at {env_file.absolute()}")


def load_config(config_path: str, required: bool = True) -> Dict[str, Any]:
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        return config if config else {}
    except FileNotFoundError:
        if not required:
            return {}
        print(f"Error: Config file {config_path} not found. Exiting.", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error parsing YAML config: {e}", file=sys.stderr)
        sys.exit(1)


def parse_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def parse_treasures(value: Any) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(name, str) for name in value):
        raise ValueError(f"treasures must be a list of names, got {value!r}")
    return value


def resolve_seed(cli_seed: Optional[int], config: Dict[str, Any]) -> Optional[int]:
    if cli_seed is not None:
        return cli_seed

    seed = config.get('seed')
    if seed is None:
        seed = os.getenv(SEED_ENV_VAR)

    if isinstance(seed, str):
        try:
            seed = int(seed)
        except ValueError:
            print(f"Warning: ignoring non-integer seed {seed!r}")
            seed = None

    return seed


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Play Treasure Hunt on the console')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config file (default: config.yaml if present)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the treasure and monster layout')
    parser.add_argument('--quiet', action='store_true',
                        help='Skip the start-up banner and save notice')
    parser.add_argument('--save', action='store_true',
                        help='Write the session record to out/')

    args = parser.parse_args(argv)

    load_env_file('.env')
    if args.config is None:
        config = load_config('config.yaml', required=False)
    else:
        config = load_config(args.config)

    grid_size = config.get('grid_size', GRID_SIZE)
    treasures = config.get('treasures', DEFAULT_TREASURES)
    seed = resolve_seed(args.seed, config)
    auto_save = parse_bool(config.get('auto_save'), False) or args.save
    output_file = config.get('output')

    try:
        treasures = parse_treasures(treasures)
        runner = ConsoleGameRunner()

        stats, game_info, run_dir = runner.run_game(
            grid_size=grid_size,
            treasures=treasures,
            seed=seed,
            verbose=not args.quiet,
            auto_save=auto_save,
            output_file=output_file
        )

        sys.exit(0)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
