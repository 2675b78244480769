"""
Main CLI for the Camel Up simulator.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..bots import UnknownBotError, available_bots, create_bot
from ..core import GameConfig, TrapStackPolicy
from ..simulation import run_simulations
from ..storage import combine_game_logs
from ..utils.rich_display import SimulationDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _configure_logging(args) -> None:
    if args.rich_logging:
        setup_rich_logging(args.log_level)
    else:
        setup_logging(args.log_level)


def build_config(args) -> GameConfig:
    """Turn simulate flags into a GameConfig."""
    return GameConfig(
        num_camels=args.num_camels,
        board_size=args.board_size,
        starting_coins=args.starting_coins,
        trap_stack_policy=TrapStackPolicy(args.trap_stack_policy),
        allow_negative_coins=args.allow_negative_coins,
        clear_traps_on_round_end=args.clear_traps,
        max_turns=args.max_turns,
    )


def simulate_command(args) -> int:
    """Simulate a batch of games."""
    _configure_logging(args)
    display = SimulationDisplay()

    for name in args.bots:
        try:
            create_bot(name)
        except UnknownBotError as e:
            display.log_error(str(e))
            return 2

    if len(args.bots) < 2:
        display.log_error(f"Need at least 2 bots, got {len(args.bots)}")
        return 2
    if args.games < 1:
        display.log_error(f"--games must be positive, got {args.games}")
        return 2
    if args.workers < 0:
        display.log_error(f"--workers must be 0 (CPU count) or more, got {args.workers}")
        return 2

    try:
        config = build_config(args)
    except ValueError as e:
        display.log_error(f"Invalid configuration: {e}")
        return 2

    display.show_header("Camel Up Simulator", args.games, args.bots, args.workers)

    output_dir = None if args.no_logs else Path(args.output_dir)
    results = run_simulations(
        num_games=args.games,
        bot_names=args.bots,
        config=config,
        output_dir=output_dir,
        seed=args.seed,
        workers=args.workers,
        show_progress=not args.no_progress,
    )

    display.show_results(results)
    if output_dir is not None:
        display.log_info(f"Game logs written to {output_dir}")

    return 0 if all(r.ok for r in results) else 1


def combine_command(args) -> int:
    """Concatenate per-game logs into one file."""
    _configure_logging(args)
    display = SimulationDisplay()

    try:
        rows = combine_game_logs(args.input_dir, args.output, pattern=args.pattern)
    except ValueError as e:
        display.log_error(str(e))
        return 1

    display.log_success(f"Combined {rows:,} rows into {args.output}")
    return 0


def bots_command(args) -> int:
    """List registered bots."""
    for name in available_bots():
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Camel Up game simulator")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-logging", action="store_true", help="Route logs through rich"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Simulate games between bots")
    simulate_parser.add_argument(
        "bots", nargs="+", help=f"Bot for each seat, in turn order ({', '.join(available_bots())})"
    )
    simulate_parser.add_argument(
        "--games", type=int, required=True, help="Number of games to simulate"
    )
    simulate_parser.add_argument(
        "--output-dir", default="data/games", help="Directory for per-game CSV logs"
    )
    simulate_parser.add_argument(
        "--no-logs", action="store_true", help="Do not write per-game logs"
    )
    simulate_parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    simulate_parser.add_argument(
        "--workers", type=int, default=1, help="Worker processes (0 = CPU count)"
    )
    simulate_parser.add_argument("--board-size", type=int, default=16)
    simulate_parser.add_argument("--num-camels", type=int, default=5)
    simulate_parser.add_argument("--starting-coins", type=int, default=3)
    simulate_parser.add_argument(
        "--trap-stack-policy",
        choices=[p.value for p in TrapStackPolicy],
        default=TrapStackPolicy.SINGLE.value,
        help="single=only the landing camel takes a trap's effect, carry=its riders too",
    )
    simulate_parser.add_argument(
        "--allow-negative-coins", action="store_true", help="Let penalties push coins below zero"
    )
    simulate_parser.add_argument(
        "--clear-traps", action="store_true", help="Return all traps when a round ends"
    )
    simulate_parser.add_argument(
        "--max-turns", type=int, default=10_000, help="Abandon games longer than this"
    )
    simulate_parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    simulate_parser.set_defaults(func=simulate_command)

    # Combine command
    combine_parser = subparsers.add_parser("combine", help="Concatenate per-game logs")
    combine_parser.add_argument("input_dir", help="Directory holding per-game logs")
    combine_parser.add_argument("--output", required=True, help="Combined CSV file")
    combine_parser.add_argument(
        "--pattern", default="game_*.csv", help="Glob selecting per-game logs"
    )
    combine_parser.set_defaults(func=combine_command)

    # Bots command
    bots_parser = subparsers.add_parser("bots", help="List available bots")
    bots_parser.set_defaults(func=bots_command)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
