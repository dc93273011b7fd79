"""
Taxonomy segment encoding and URL building.

The directory addresses every level by path segments whose casing depends on
the level: continents are title-cased (``North%20America``) while countries
and states are upper-cased (``UNITED%20STATES``).  Segments produced here are
passed through untouched by the rest of the crawler.
"""

from pilotnav_crawler.config import (
    AIRPORT_FORMAT,
    BROWSE_CONTINENTS,
    CONTINENT_FORMAT,
    COUNTRY_FORMAT,
    PAGE_FORMAT,
    SITE_URL,
    STATE_FORMAT,
    USA_PAGE_FORMAT,
)

_SEGMENT_SEP = "%20"


def _title_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def encode_continent(name: str) -> str:
    """``"north america"`` → ``"North%20America"``."""
    return _SEGMENT_SEP.join(_title_word(w) for w in name.split(" "))


def encode_country(name: str) -> str:
    """``"United States"`` → ``"UNITED%20STATES"``."""
    return _SEGMENT_SEP.join(w.upper() for w in name.split(" "))


def encode_state(name: str) -> str:
    """``"ca"`` → ``"CA"``."""
    return _SEGMENT_SEP.join(w.upper() for w in name.split(" "))


# ── Request URLs ───────────────────────────────────────────────────

def continents_url() -> str:
    return BROWSE_CONTINENTS


def continent_url(continent: str) -> str:
    return CONTINENT_FORMAT.format(continent=continent)


def country_url(continent: str, country: str) -> str:
    return COUNTRY_FORMAT.format(continent=continent, country=country)


def state_url(continent: str, country: str, state: str) -> str:
    return STATE_FORMAT.format(continent=continent, country=country, state=state)


def page_url(
    continent: str,
    country: str,
    page: str,
    state: str | None = None,
) -> str:
    """URL of one result page.

    US listings are paged per state; every other country is paged directly
    under the country.
    """
    if state is not None:
        return USA_PAGE_FORMAT.format(
            continent=continent, country=country, state=state, page=page
        )
    return PAGE_FORMAT.format(continent=continent, country=country, page=page)


def airport_url(code: str) -> str:
    return AIRPORT_FORMAT.format(code=code)


# ── Child prefixes ─────────────────────────────────────────────────
#
# Listing pages link to their children with site-relative hrefs, so each
# prefix is the child URL template with an empty last component and the
# site root stripped.

def site_relative(url: str) -> str:
    """Strip the site root from an absolute URL built by this module."""
    if url.startswith(SITE_URL):
        return url[len(SITE_URL):]
    return url


def continent_prefix() -> str:
    return site_relative(continent_url(""))


def country_prefix(continent: str) -> str:
    return site_relative(country_url(continent, ""))


def state_prefix(continent: str, country: str) -> str:
    return site_relative(state_url(continent, country, ""))


def page_prefix(continent: str, country: str, state: str | None = None) -> str:
    return site_relative(page_url(continent, country, "", state=state))
