"""
Batch simulation of many games.

Every game owns its own GameState, bots and random source, so games can run
in separate worker processes with nothing shared between them.
"""

import logging
import random
from dataclasses import dataclass, field
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import List, Optional, Sequence, Union

from tqdm import tqdm

from ..bots import create_bot
from ..core import GameConfig, GameSimulationError
from ..engine import GameEngine
from ..storage import CSVGameLog, GameLogBackend, MemoryGameLog, log_columns

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Outcome of one simulated game."""

    game_index: int
    bot_names: List[str]
    coins: List[int] = field(default_factory=list)
    winners: List[int] = field(default_factory=list)  # Seats tied on most coins
    turns: int = 0
    rounds: int = 0
    log_path: Optional[str] = None
    error: Optional[str] = None  # Set when the game was abandoned

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SeatSummary:
    """Aggregate results for one seat across a batch."""

    seat: int
    bot: str
    games: int = 0
    total_coins: int = 0
    wins: int = 0

    @property
    def average_coins(self) -> float:
        return self.total_coins / self.games if self.games else 0.0

    @property
    def win_rate(self) -> float:
        return self.wins / self.games if self.games else 0.0


def game_log_path(output_dir: Union[str, Path], game_index: int) -> Path:
    """Path of the log for one game."""
    return Path(output_dir) / f"game_{game_index:05d}.csv"


def simulate_game(
    game_index: int,
    bot_names: Sequence[str],
    config: GameConfig,
    output_dir: Optional[Union[str, Path]] = None,
    seed: Optional[int] = None,
) -> GameResult:
    """
    Play one game and report how it went.

    A game that breaks the bot contract is abandoned, not retried; the
    error is carried in the result.

    Args:
        game_index: Index of this game in the batch (names the log file)
        bot_names: Registered bot names, one per seat
        config: Game configuration
        output_dir: Directory for the CSV log (no file written if None)
        seed: Seed for the game; bots and dice derive their seeds from it

    Returns:
        GameResult
    """
    rng = random.Random(seed)
    bot_seeds = [rng.getrandbits(32) if seed is not None else None for _ in bot_names]
    engine_seed = rng.getrandbits(32) if seed is not None else None

    bots = [create_bot(name, seed=s) for name, s in zip(bot_names, bot_seeds)]
    columns = log_columns(config.num_camels, len(bots))

    log_path = None
    game_log: GameLogBackend
    if output_dir is not None:
        log_path = game_log_path(output_dir, game_index)
        game_log = CSVGameLog(log_path, columns)
    else:
        game_log = MemoryGameLog(columns)

    result = GameResult(
        game_index=game_index,
        bot_names=list(bot_names),
        log_path=str(log_path) if log_path else None,
    )

    with game_log:
        engine = GameEngine(config, bots, seed=engine_seed, game_log=game_log)
        try:
            coins = engine.run()
        except GameSimulationError as e:
            logger.warning(f"Game {game_index} abandoned: {e}")
            result.error = f"{type(e).__name__}: {e}"
            result.coins = engine.state.coins()
        else:
            best = max(coins)
            result.coins = coins
            result.winners = [seat for seat, c in enumerate(coins) if c == best]
        result.turns = engine.turns_played
        result.rounds = engine.state.round_number

    return result


# Global state for worker processes (initialized once per worker)
_worker_bot_names: Optional[List[str]] = None
_worker_config: Optional[GameConfig] = None
_worker_output_dir: Optional[str] = None
_worker_base_seed: Optional[int] = None


def _worker_init(
    bot_names: List[str],
    config: GameConfig,
    output_dir: Optional[str],
    base_seed: Optional[int],
) -> None:
    """Initialize worker process."""
    global _worker_bot_names, _worker_config, _worker_output_dir, _worker_base_seed
    _worker_bot_names = bot_names
    _worker_config = config
    _worker_output_dir = output_dir
    _worker_base_seed = base_seed


def _game_seed(base_seed: Optional[int], game_index: int) -> Optional[int]:
    return None if base_seed is None else base_seed + game_index


def _worker_simulate(game_index: int) -> GameResult:
    """Worker function: play one game."""
    return simulate_game(
        game_index,
        _worker_bot_names,
        _worker_config,
        output_dir=_worker_output_dir,
        seed=_game_seed(_worker_base_seed, game_index),
    )


def run_simulations(
    num_games: int,
    bot_names: Sequence[str],
    config: GameConfig,
    output_dir: Optional[Union[str, Path]] = None,
    seed: Optional[int] = None,
    workers: int = 1,
    show_progress: bool = True,
) -> List[GameResult]:
    """
    Simulate a batch of games.

    Args:
        num_games: Games to play
        bot_names: Registered bot names, one per seat
        config: Game configuration shared by every game
        output_dir: Directory for per-game CSV logs (None to skip logs)
        seed: Base seed; game i uses seed + i
        workers: Worker processes (1 = run in this process, 0 = CPU count)
        show_progress: Show a tqdm progress bar

    Returns:
        Results ordered by game index
    """
    if num_games < 1:
        raise ValueError(f"num_games must be positive, got {num_games}")
    bot_names = list(bot_names)
    for name in bot_names:
        create_bot(name)  # Fail fast on unknown names
    if len(bot_names) < 2:
        raise ValueError(f"Need at least 2 bots, got {len(bot_names)}")
    if workers < 0:
        raise ValueError(f"workers must be 0 (CPU count) or more, got {workers}")

    if output_dir is not None:
        output_dir = str(output_dir)
        Path(output_dir).mkdir(parents=True, exist_ok=True)

    num_workers = workers or cpu_count()
    logger.info(
        f"Simulating {num_games:,} games with bots {bot_names} "
        f"({num_workers} worker{'s' if num_workers != 1 else ''})"
    )

    results: List[GameResult] = []
    with tqdm(total=num_games, desc="Games", unit=" game", disable=not show_progress) as pbar:
        if num_workers == 1:
            for game_index in range(num_games):
                results.append(
                    simulate_game(
                        game_index,
                        bot_names,
                        config,
                        output_dir=output_dir,
                        seed=_game_seed(seed, game_index),
                    )
                )
                pbar.update(1)
        else:
            with Pool(
                processes=num_workers,
                initializer=_worker_init,
                initargs=(bot_names, config, output_dir, seed),
            ) as pool:
                for result in pool.imap_unordered(_worker_simulate, range(num_games)):
                    results.append(result)
                    pbar.update(1)

    results.sort(key=lambda r: r.game_index)

    failed = sum(1 for r in results if not r.ok)
    if failed:
        logger.warning(f"{failed:,} of {num_games:,} games were abandoned")
    logger.info(f"Simulation complete: {num_games - failed:,} games finished")
    return results


def summarize_results(results: Sequence[GameResult]) -> List[SeatSummary]:
    """
    Aggregate finished games per seat.

    Abandoned games are left out.

    Args:
        results: Results from run_simulations

    Returns:
        One SeatSummary per seat
    """
    if not results:
        return []

    summaries = [
        SeatSummary(seat=seat, bot=name) for seat, name in enumerate(results[0].bot_names)
    ]
    for result in results:
        if not result.ok:
            continue
        for seat, coins in enumerate(result.coins):
            summary = summaries[seat]
            summary.games += 1
            summary.total_coins += coins
            if seat in result.winners:
                summary.wins += 1
    return summaries
