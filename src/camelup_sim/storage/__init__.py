"""Storage backends for per-game action logs."""

from .base import GameLogBackend, Row
from .combine import combine_game_logs, find_game_logs
from .csv_log import CSVGameLog
from .memory_log import MemoryGameLog
from .records import build_record, log_columns

__all__ = [
    "GameLogBackend",
    "Row",
    "CSVGameLog",
    "MemoryGameLog",
    "build_record",
    "log_columns",
    "combine_game_logs",
    "find_game_logs",
]
