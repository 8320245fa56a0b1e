"""
CSV writer for sunrise/sunset files and rain reports.

Files are written to a temporary sibling first and moved into place, so a
report is either fully written or not written at all.
"""

import csv
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .core import constants
from .core.errors import OutputError
from .models import SunRow


class CsvReportWriter:
    """Write CSV outputs atomically."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize writer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write_rows(self, path: str, rows: Iterable[Sequence[str]]) -> Path:
        """
        Write rows (header included) to a CSV file.

        Args:
            path: Destination file
            rows: Rows to write, the first one being the header

        Returns:
            Path of the written file

        Raises:
            OutputError: If the directory or file cannot be created or written
        """
        target = Path(path)
        tmp_name = None

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
            )
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                count = 0
                for row in rows:
                    writer.writerow(row)
                    count += 1
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as e:
            self.logger.error(f"Failed to write CSV file {target}: {e}")
            raise OutputError("Failed to write CSV file", {"path": str(target), "error": str(e)})
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)

        self.logger.info(f"Wrote {count} rows to {target}")
        return target

    def write_sun_rows(self, path: str, rows: List[SunRow]) -> Path:
        """Write one year of sunrise/sunset rows."""
        return self.write_rows(
            path,
            [constants.SUN_CSV_HEADER] + [row.to_csv_row() for row in rows]
        )

    def write_rain_report(self, path: str, rows: List[List[str]]) -> Path:
        """Write the week vs weekend report (header row first)."""
        return self.write_rows(path, rows)
