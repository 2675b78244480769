"""
Combine per-game logs into one file.

Pure concatenation: the shared header is written once and every data row
is copied unchanged, file by file in name order.
"""

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


def find_game_logs(input_dir: Union[str, Path], pattern: str = "game_*.csv") -> List[Path]:
    """List per-game logs in a directory, sorted by name."""
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise ValueError(f"Not a directory: {input_dir}")
    return sorted(p for p in input_dir.glob(pattern) if p.is_file())


def combine_game_logs(
    input_dir: Union[str, Path],
    output_path: Union[str, Path],
    pattern: str = "game_*.csv",
) -> int:
    """
    Concatenate every matching log in a directory.

    Args:
        input_dir: Directory holding per-game logs
        output_path: Combined file to write
        pattern: Glob selecting the per-game logs

    Returns:
        Number of data rows written

    Raises:
        ValueError: If no logs match or their headers differ
    """
    output_path = Path(output_path)
    logs = [p for p in find_game_logs(input_dir, pattern) if p.resolve() != output_path.resolve()]
    if not logs:
        raise ValueError(f"No files matching {pattern!r} in {input_dir}")

    logger.info(f"Combining {len(logs):,} game logs into {output_path}")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    header = None
    rows = 0
    with open(output_path, "w", encoding="utf-8", newline="") as out:
        for log_path in logs:
            with open(log_path, "r", encoding="utf-8", newline="") as f:
                first = f.readline()
                if not first:
                    logger.warning(f"Skipping empty log {log_path}")
                    continue

                if header is None:
                    header = first
                    out.write(header)
                elif first != header:
                    raise ValueError(f"Header of {log_path} does not match {logs[0]}")

                for line in f:
                    if not line.strip():
                        continue
                    if not line.endswith("\n"):
                        line += "\n"
                    out.write(line)
                    rows += 1

    logger.info(f"Wrote {rows:,} rows to {output_path}")
    return rows
