"""
SQLite airport store.

One ``Airport`` table keyed by FAA code.  Inserting an airport whose FAA code
is already stored raises :class:`PersistenceConflict`; existing rows are never
updated.  An airport without an FAA code raises :class:`InvalidRecord`.
"""

import logging
import sqlite3
from pathlib import Path

from pilotnav_crawler.errors import (
    ConfigurationError,
    InvalidRecord,
    PersistenceConflict,
)
from pilotnav_crawler.models import Airport

log = logging.getLogger("pilotnav-crawler")

_COLUMNS = (
    "FAA", "IATA", "ICAO", "Name", "City", "State", "Country",
    "Latitude", "Longitude", "Elevation",
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS Airport (
    FAA       VARCHAR(4) NOT NULL PRIMARY KEY,
    IATA      VARCHAR(3),
    ICAO      VARCHAR(4),
    Name      TEXT,
    City      TEXT,
    State     VARCHAR(2),
    Country   TEXT,
    Latitude  REAL,
    Longitude REAL,
    Elevation INTEGER
);
CREATE INDEX IF NOT EXISTS Airport_IATA ON Airport (IATA);
CREATE INDEX IF NOT EXISTS Airport_ICAO ON Airport (ICAO);
"""


class AirportStore:
    """Airport persistence over a single SQLite connection."""

    def __init__(self, path: str | Path) -> None:
        if not path:
            raise ConfigurationError("a database file name is required")
        self.path = str(path)
        try:
            self._conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise ConfigurationError(f"cannot open database {self.path}: {exc}") from exc

    def __enter__(self) -> "AirportStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def create_schema(self) -> None:
        try:
            with self._conn:
                self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise ConfigurationError(f"cannot create schema in {self.path}: {exc}") from exc

    def insert(self, airport: Airport) -> None:
        if not airport.faa:
            raise InvalidRecord(f"airport {airport.name!r} has no FAA code")
        row = (
            airport.faa, airport.iata, airport.icao, airport.name,
            airport.city, airport.state, airport.country,
            airport.latitude, airport.longitude, airport.elevation,
        )
        try:
            with self._conn:
                self._conn.execute(
                    f"INSERT INTO Airport ({', '.join(_COLUMNS)}) "
                    f"VALUES ({', '.join('?' for _ in _COLUMNS)})",
                    row,
                )
        except sqlite3.IntegrityError as exc:
            if self.exists(airport.faa):
                raise PersistenceConflict(airport.faa) from exc
            raise
        log.debug("Inserted airport FAA=%s", airport.faa)

    def exists(self, faa: str | None) -> bool:
        cur = self._conn.execute("SELECT 1 FROM Airport WHERE FAA = ?", (faa,))
        return cur.fetchone() is not None

    def get(self, faa: str) -> Airport | None:
        cur = self._conn.execute(
            f"SELECT {', '.join(_COLUMNS)} FROM Airport WHERE FAA = ?", (faa,)
        )
        row = cur.fetchone()
        if row is None:
            return None
        faa, iata, icao, name, city, state, country, lat, lon, elev = row
        return Airport(
            faa=faa, iata=iata, icao=icao, name=name, city=city, state=state,
            country=country, latitude=lat, longitude=lon, elevation=elev,
        )

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM Airport").fetchone()[0]
