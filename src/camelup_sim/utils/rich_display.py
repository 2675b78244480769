"""
Rich-based console output for simulation runs.

Provides clean, formatted output with:
- Run header
- Per-seat results table
- Styled info/success/warning/error lines
"""

import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from ..simulation import GameResult, summarize_results

console = Console()
logger = logging.getLogger(__name__)


class SimulationDisplay:
    """Rich-based display for simulation batches."""

    def __init__(self, out: Optional[Console] = None):
        """
        Args:
            out: Console to print to (module console by default)
        """
        self.console = out or console

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, num_games: int, bot_names: Sequence[str], workers: int):
        """Show run header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print(f"Games: {num_games:,}")
        self.console.print(f"Seats: {', '.join(f'{i}:{n}' for i, n in enumerate(bot_names))}")
        self.console.print(f"Workers: {workers}")
        self.console.print()

    def results_table(self, results: Sequence[GameResult]) -> Table:
        """Build the per-seat summary table."""
        table = Table(title="Results by seat")
        table.add_column("Seat", justify="right", style="cyan")
        table.add_column("Bot", style="white")
        table.add_column("Games", justify="right")
        table.add_column("Avg coins", justify="right")
        table.add_column("Wins", justify="right")
        table.add_column("Win rate", justify="right", style="bold")

        for summary in summarize_results(results):
            table.add_row(
                str(summary.seat),
                summary.bot,
                f"{summary.games:,}",
                f"{summary.average_coins:.2f}",
                f"{summary.wins:,}",
                f"{summary.win_rate:.1%}",
            )
        return table

    def show_results(self, results: Sequence[GameResult]):
        """Print the summary table and any abandoned games."""
        self.console.print(self.results_table(results))

        failed = [r for r in results if not r.ok]
        if failed:
            self.log_warning(f"{len(failed):,} game(s) abandoned")
            for result in failed[:10]:
                self.console.print(f"  [dim]game {result.game_index}: {result.error}[/dim]")
        else:
            self.log_success(f"All {len(results):,} games finished")


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
