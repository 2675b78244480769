"""CSV game log: one delimited file per simulated game."""

import csv
import logging
from pathlib import Path
from typing import List, Union

from .base import GameLogBackend, Row

logger = logging.getLogger(__name__)


class CSVGameLog(GameLogBackend):
    """
    Writes one header line and one row per action.

    The file is opened on construction and the header written immediately,
    so even a game abandoned on its first turn leaves a valid file.
    """

    def __init__(self, path: Union[str, Path], columns: List[str], delimiter: str = ","):
        """
        Initialize CSV log.

        Args:
            path: Output file (parent directories are created)
            columns: Column names, in output order
            delimiter: Field delimiter
        """
        super().__init__(columns)
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, "w", newline="", encoding="utf-8")
        self._writer = csv.DictWriter(
            self._file, fieldnames=self.columns, delimiter=delimiter, restval=""
        )
        self._writer.writeheader()
        self.rows_written = 0
        logger.debug(f"Opened game log {self.path}")

    def record(self, row: Row) -> None:
        self._writer.writerow(row)
        self.rows_written += 1

    def flush(self) -> None:
        if not self._file.closed:
            self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
            logger.debug(f"Closed game log {self.path} ({self.rows_written} rows)")
