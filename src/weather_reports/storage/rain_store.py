"""
SQLite store of raw rain measurements.

Timestamps are kept as ISO-8601 text. Text without an offset is UTC.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from sqlalchemy import create_engine, select, Column, Integer, Float, Text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from ..core import constants
from ..core.errors import ParseError, StorageError
from ..models import RainMeasurement

Base = declarative_base()


class Rain(Base):
    """One raw rain measurement row."""
    __tablename__ = constants.RAIN_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = Column(Text, nullable=False, index=True)
    value = Column(Float)  # mm


def parse_timestamp(text: str) -> datetime:
    """
    Parse a stored timestamp.

    Raises:
        ParseError: If the text is not an ISO-8601 timestamp
    """
    if isinstance(text, datetime):
        return text
    try:
        cleaned = text.strip()
        if cleaned.endswith("Z"):
            cleaned = cleaned[:-1] + "+00:00"
        return datetime.fromisoformat(cleaned)
    except (AttributeError, ValueError):
        raise ParseError("Failed to parse stored timestamp", {"timestamp": text})


class RainStore:
    """Read and write raw rain measurements."""

    def __init__(
        self,
        database_path: str = constants.DATABASE_PATH,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize store. No file is touched until the first query.

        Args:
            database_path: Path of the SQLite file
            logger: Logger instance
        """
        self.database_path = database_path
        self.logger = logger or logging.getLogger(__name__)
        self.engine = create_engine(f"sqlite:///{database_path}")
        self.SessionLocal = sessionmaker(bind=self.engine)

    def close(self) -> None:
        self.engine.dispose()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _prepare_for_write(self) -> None:
        try:
            Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                "Failed to create database directory",
                {"path": self.database_path, "error": str(e)}
            )

    def ensure_schema(self) -> None:
        """Create the measurement table if it does not exist."""
        self._prepare_for_write()
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to create schema",
                {"path": self.database_path, "table": constants.RAIN_TABLE, "error": str(e)}
            )
        self.logger.debug(f"Rain table ready in {self.database_path}")

    def insert_measurements(self, measurements: Iterable[RainMeasurement]) -> int:
        """
        Insert measurements in one transaction.

        Returns:
            Number of inserted rows
        """
        rows = [Rain(timestamp=m.timestamp.isoformat(), value=m.value) for m in measurements]
        self._prepare_for_write()

        session: Session = self.SessionLocal()
        try:
            session.add_all(rows)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(
                "Failed to insert measurements",
                {"path": self.database_path, "table": constants.RAIN_TABLE, "error": str(e)}
            )
        finally:
            session.close()

        self.logger.debug(f"Inserted {len(rows)} measurements into {constants.RAIN_TABLE}")
        return len(rows)

    def fetch_measurements(self) -> List[RainMeasurement]:
        """
        Load all measurements, ordered by timestamp.

        Raises:
            StorageError: If the database file is missing or the query fails
            ParseError: If a stored timestamp cannot be parsed
        """
        if not Path(self.database_path).is_file():
            raise StorageError("Database file not found", {"path": self.database_path})

        session: Session = self.SessionLocal()
        try:
            rows = session.execute(
                select(Rain.timestamp, Rain.value).order_by(Rain.timestamp)
            ).all()
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to fetch rain measurements",
                {"path": self.database_path, "table": constants.RAIN_TABLE, "error": str(e)}
            )
        finally:
            session.close()

        measurements = [
            RainMeasurement(timestamp=parse_timestamp(ts), value=value)
            for ts, value in rows
        ]
        self.logger.info(f"Fetched {len(measurements)} rain measurements")
        return measurements
