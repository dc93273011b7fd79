"""
Airport detail page scraper.

A detail page carries, in this order of reliability:

* code boxes – ``<div class="code_box code_icao_…">KSFO</div>`` for each of
  ICAO / IATA / FAA, FAA always last;
* the airport name in the first ``<h1>``;
* ``City, State, Country`` in the first ``<h2>`` (state only for the US, and
  the city itself may contain commas);
* a table of ``<td class="dataLabel">Latitude:</td><td>37.61</td>`` pairs.

Each stage raises its own :class:`~pilotnav_crawler.errors.ParseError`
subclass so the crawler can report exactly why a page was abandoned.
"""

import re

from bs4 import BeautifulSoup

from pilotnav_crawler.config import CODE_BOX_CLASS_PREFIX, DATA_LABEL_CLASS
from pilotnav_crawler.errors import (
    InvalidCoordinate,
    MissingCodes,
    MissingCoordinate,
    MissingLocation,
    MissingName,
)
from pilotnav_crawler.extraction.html_parser import load_document, node_text
from pilotnav_crawler.models import Airport
from pilotnav_crawler.utils.log import log

_DECIMAL_RE = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)")


def get_airport_codes(soup: BeautifulSoup) -> dict[str, str]:
    """Return ``{"ICAO": …, "IATA": …, "FAA": …}`` for the codes present."""
    codes: dict[str, str] = {}

    for div in soup.find_all("div"):
        css = " ".join(div.get("class") or [])
        if not css.startswith(CODE_BOX_CLASS_PREFIX):
            continue

        start = len(CODE_BOX_CLASS_PREFIX)
        end = css.rfind("_")
        if end <= start:
            continue

        key = css[start:end].upper()
        codes.setdefault(key, node_text(div))

        # the FAA box is always the last of the three
        if key == "FAA":
            break

    if not codes:
        raise MissingCodes("could not find airport codes")
    return codes


def get_airport_name(soup: BeautifulSoup) -> str:
    for h1 in soup.find_all("h1"):
        text = node_text(h1)
        if text:
            return text
    raise MissingName("could not find airport name")


def split_location(text: str, is_usa: bool) -> tuple[str | None, str | None, str]:
    """Split ``"City, State, Country"`` into ``(city, state, country)``.

    Outside the US there is never a state, so three components there mean a
    city whose name contains a comma.  More than three components always
    mean such a city; for the US the second-to-last component is the state.
    """
    parts = [p.strip() for p in text.split(",")]

    if len(parts) == 3 and is_usa:
        return parts[0], parts[1], parts[2]
    if len(parts) == 2:
        return parts[0], None, parts[1]
    if len(parts) == 1:
        return None, None, parts[0]

    n = 2 if is_usa else 1
    city = ", ".join(parts[:-n])
    state = parts[-2] if is_usa else None
    return city, state, parts[-1]


def get_airport_location(
    soup: BeautifulSoup, is_usa: bool
) -> tuple[str | None, str | None, str]:
    for h2 in soup.find_all("h2"):
        text = node_text(h2)
        if text:
            return split_location(text, is_usa)
    raise MissingLocation("could not find airport location")


def get_airport_key_values(soup: BeautifulSoup) -> dict[str, str]:
    """Collect the ``dataLabel`` table.  The first value seen for a key wins."""
    data: dict[str, str] = {}

    for td in soup.find_all("td", class_=DATA_LABEL_CLASS):
        key = node_text(td)
        if not key.endswith(":"):
            continue
        key = key[:-1].strip()

        value = td.find_next_sibling()
        if value is None or value.name != "td":
            continue

        data.setdefault(key, node_text(value))

    return data


def _coordinate(data: dict[str, str], key: str) -> float:
    value = data.get(key)
    if value is None:
        raise MissingCoordinate(f"key values did not contain the {key} coordinate")
    if not _DECIMAL_RE.fullmatch(value):
        raise InvalidCoordinate(f"could not parse {key}: {value!r}")
    return float(value)


def _elevation(data: dict[str, str], faa: str | None) -> int:
    value = data.get("Elevation")
    if value is None:
        log.warning("[WARN] Airport %s did not contain Elevation data", faa)
        return 0

    tokens = value.split()
    try:
        return int(tokens[0])
    except (IndexError, ValueError):
        log.warning("[WARN] Could not parse Elevation data for %s: %r", faa, value)
        return 0


def parse_airport(content: bytes | str, is_usa: bool) -> Airport:
    """Scrape one airport detail page.

    Raises a :class:`~pilotnav_crawler.errors.ParseError` subclass when the
    page lacks codes, name, location or a valid coordinate.  A missing or
    unreadable elevation only logs a warning and defaults to 0.
    """
    soup = load_document(content)

    codes = get_airport_codes(soup)
    faa = codes.get("FAA")
    if faa is None:
        log.warning("[WARN] Airport page has no FAA code (codes: %s)", codes)

    name = get_airport_name(soup)
    city, state, country = get_airport_location(soup, is_usa)

    data = get_airport_key_values(soup)
    latitude = _coordinate(data, "Latitude")
    longitude = _coordinate(data, "Longitude")

    return Airport(
        faa=faa,
        iata=codes.get("IATA"),
        icao=codes.get("ICAO"),
        name=name,
        city=city,
        state=state,
        country=country,
        latitude=latitude,
        longitude=longitude,
        elevation=_elevation(data, faa),
    )
