"""Abstract base class for game log backends."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

Row = Dict[str, Any]


class GameLogBackend(ABC):
    """Abstract interface for per-game action logs."""

    def __init__(self, columns: List[str]):
        """
        Args:
            columns: Column names, in output order
        """
        self.columns = list(columns)

    @abstractmethod
    def record(self, row: Row) -> None:
        """
        Append one action row.

        Args:
            row: Column name -> value; missing columns are written empty
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Ensure all pending writes are persisted."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Cleanup and close the log."""
        pass

    def __enter__(self) -> "GameLogBackend":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
