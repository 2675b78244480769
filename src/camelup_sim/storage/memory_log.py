"""In-memory game log for tests and dry runs."""

from typing import List

from .base import GameLogBackend, Row


class MemoryGameLog(GameLogBackend):
    """Keeps rows in a list."""

    def __init__(self, columns: List[str]):
        super().__init__(columns)
        self.rows: List[Row] = []
        self.closed = False

    def record(self, row: Row) -> None:
        self.rows.append({column: row.get(column, "") for column in self.columns})

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True
