"""
Link discovery on listing pages.

Every listing page yields two things:

* the child segments of the level being expanded: the remainder of each
  ``href`` that starts with the level's prefix, e.g. ``"FRANCE"`` from
  ``/browse/Airports/continent/Europe/country/FRANCE`` for the prefix
  ``/browse/Airports/continent/Europe/country/``;
* the airport codes linked from anywhere on the page through ``/airport/…``.
"""

from dataclasses import dataclass, field

from bs4.builder import ParserRejectedMarkup

from pilotnav_crawler.config import AIRPORT_PATH
from pilotnav_crawler.extraction.html_parser import load_document
from pilotnav_crawler.utils.log import log


@dataclass
class ExtractedLinks:
    """Result of scanning one listing page.

    ``children`` is ``None`` when no prefix was requested.  Both lists keep
    document order and duplicates.
    """

    children: list[str] | None = None
    airports: list[str] = field(default_factory=list)


def _remainder(href: str, prefix: str) -> str | None:
    if href.startswith(prefix) and len(href) > len(prefix):
        return href[len(prefix):]
    return None


def extract_children(content: bytes | str, href_base: str | None) -> ExtractedLinks:
    """Scan every ``<a href>`` in *content*.

    Parameters
    ----------
    content : bytes | str
        The fetched listing page.
    href_base : str | None
        Site-relative prefix of the children to collect, or ``None`` when
        only airport links are wanted.
    """
    result = ExtractedLinks(children=[] if href_base is not None else None)

    try:
        soup = load_document(content)
    except ParserRejectedMarkup as exc:
        log.warning("[PARSE] Could not parse listing page – %s", exc)
        return result

    for anchor in soup.find_all("a", href=True):
        href = anchor.get("href")
        if not href:
            continue

        if href_base is not None:
            child = _remainder(href, href_base)
            if child is not None:
                result.children.append(child)

        code = _remainder(href, AIRPORT_PATH)
        if code is not None:
            result.airports.append(code)

    return result
