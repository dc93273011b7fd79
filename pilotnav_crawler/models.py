"""
The airport record filed by the crawler.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Airport:
    """One airport as scraped from its detail page.

    ``faa`` is the store's primary key.  There is an FAA code for every
    airport in the U.S.; the ICAO code, when present, is typically the FAA
    code prefixed with ``K``.
    """

    faa: str | None
    name: str
    country: str
    latitude: float
    longitude: float
    iata: str | None = None
    icao: str | None = None
    city: str | None = None
    state: str | None = None
    elevation: int = 0
