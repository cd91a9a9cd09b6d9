"""SQLite cache for geocoded city coordinates."""

import logging
import sqlite3
from pathlib import Path

from city_forecast.models import CacheLookup, Coordinate, NamedLocation


logger = logging.getLogger(__name__)


class CityCache:
    """SQLite-backed permanent cache of place name -> coordinate."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Get database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS cities (
                    name TEXT PRIMARY KEY,
                    lat REAL NOT NULL,
                    long REAL NOT NULL
                )
            """)

    def lookup(self, name: str) -> CacheLookup:
        """
        Look up the cached coordinate for a place name.

        Driver failures are reported as an ERROR lookup instead of being
        raised, so callers can tell a broken store from a plain miss.
        """
        try:
            with self._get_connection() as conn:
                row = conn.execute(
                    "SELECT lat, long FROM cities WHERE name = ?",
                    (name,),
                ).fetchone()
        except sqlite3.Error as e:
            return CacheLookup.failed(e)

        if row is None:
            return CacheLookup.miss()
        return CacheLookup.hit(Coordinate(latitude=row["lat"], longitude=row["long"]))

    def store_city(self, name: str, coordinate: Coordinate) -> bool:
        """
        Insert a city unless one with the same name already exists.

        Returns:
            True if a row was inserted, False if the name was already cached

        Raises:
            sqlite3.Error: If the insert fails
        """
        with self._get_connection() as conn:
            cursor = conn.execute(
                "INSERT OR IGNORE INTO cities (name, lat, long) VALUES (?, ?, ?)",
                (name, coordinate.latitude, coordinate.longitude),
            )
            inserted = cursor.rowcount > 0

        if not inserted:
            logger.info(f"  {name!r} already cached, keeping existing row")
        return inserted

    def list_cities(self) -> list[NamedLocation]:
        """Return every cached city ordered by name."""
        with self._get_connection() as conn:
            rows = conn.execute(
                "SELECT name, lat, long FROM cities ORDER BY name"
            ).fetchall()

        return [
            NamedLocation(
                name=row["name"],
                coordinate=Coordinate(latitude=row["lat"], longitude=row["long"]),
            )
            for row in rows
        ]
