"""
Taxonomy crawler for the PilotNav airport directory.

Walks continent → country → (state, US only) → result page → airport,
breadth-first within each parent:

* every level is consumed through a cursor that refills the level's queue
  from the parent's listing page only if the queue is empty when the parent
  is entered, then drains it;
* result pages are fetched only to discover airport links;
* airport detail pages are scraped and filed into the store.

Failures never stop the crawl.  A failed fetch yields no children, a page
that cannot be scraped or an airport that is already stored is logged and
skipped.  Nothing is retried.
"""

import functools
import time
from typing import Callable, Iterator

from tqdm import tqdm

from pilotnav_crawler.config import DEFAULT_DELAY, USA_COUNTRY
from pilotnav_crawler.core.frontier import Frontier, Level
from pilotnav_crawler.core.storage import AirportStore
from pilotnav_crawler.errors import (
    ConfigurationError,
    InvalidRecord,
    ParseError,
    PersistenceConflict,
    TransportError,
)
from pilotnav_crawler.extraction.airport import parse_airport
from pilotnav_crawler.extraction.links import extract_children
from pilotnav_crawler.session import build_session, fetch as http_fetch
from pilotnav_crawler.utils.log import log
from pilotnav_crawler.utils.url import (
    airport_url,
    continent_prefix,
    continent_url,
    continents_url,
    country_prefix,
    country_url,
    encode_continent,
    encode_country,
    encode_state,
    page_prefix,
    page_url,
    state_prefix,
    state_url,
)


class Crawler:
    """
    Sequential crawler over the airport taxonomy.

    *store* needs ``insert(airport)`` raising ``PersistenceConflict`` on a
    duplicate FAA code.  *fetch* is any ``url -> bytes`` callable raising
    ``TransportError``; by default a ``requests`` session is used.
    """

    def __init__(
        self,
        store,
        fetch: Callable[[str], bytes] | None = None,
        delay: float = DEFAULT_DELAY,
        frontier: Frontier | None = None,
        progress: bool = False,
        verify_ssl: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fetch is None:
            fetch = functools.partial(http_fetch, build_session(verify_ssl=verify_ssl))
        self.store = store
        self.fetch = fetch
        self.delay = delay
        self.frontier = frontier if frontier is not None else Frontier()
        self.progress = progress
        self._sleep = sleep

        # current parent context, encoded
        self.continent: str | None = None
        self.country: str | None = None
        self.state: str | None = None

        self._stats = {"listings": 0, "pages": 0, "airports": 0, "saved": 0,
                       "dup": 0, "skipped": 0, "parse_err": 0,
                       "fetch_err": 0}

    @classmethod
    def create(
        cls,
        filename: str,
        continent: str | None = None,
        country: str | None = None,
        state: str | None = None,
        **kwargs,
    ) -> "Crawler":
        """Open (or create) the SQLite store at *filename* and seed the
        frontier with the optional starting scope.

        Raises ``ConfigurationError`` if *filename* is empty or unusable.
        """
        store = AirportStore(filename)
        try:
            store.create_schema()
        except ConfigurationError:
            store.close()
            raise
        crawler = cls(store, **kwargs)
        crawler.seed(continent, country, state)
        return crawler

    def seed(
        self,
        continent: str | None = None,
        country: str | None = None,
        state: str | None = None,
    ) -> None:
        """Restrict the crawl to a continent, country or US state.

        Inner scopes are only honoured when every outer scope is given.
        """
        if continent is None:
            return
        self.frontier.enqueue(Level.CONTINENT, encode_continent(continent))

        if country is None:
            return
        encoded = encode_country(country)
        self.frontier.enqueue(Level.COUNTRY, encoded)

        if state is None:
            return
        if encoded != USA_COUNTRY:
            log.warning("[WARN] States only exist for the United States – "
                        "ignoring state %r for %s", state, country)
            return
        self.frontier.enqueue(Level.STATE, encode_state(state))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> dict[str, int]:
        log.info("Crawl started.")

        for continent in self._cursor(Level.CONTINENT, self._queue_continents):
            self.continent = continent
            log.info("Continent: %s", continent)

            for country in self._cursor(Level.COUNTRY, self._queue_countries):
                self.country = country
                log.info("Country  : %s", country)

                if country == USA_COUNTRY:
                    for state in self._cursor(Level.STATE, self._queue_states):
                        self.state = state
                        log.info("State    : %s", state)
                        self._scrape_listing(is_usa=True)
                    self.state = None
                else:
                    self._scrape_listing(is_usa=False)

        log.info(
            "Crawl complete. listings=%d  pages=%d  airports=%d  saved=%d  "
            "dup=%d  skipped=%d  parse_err=%d  fetch_err=%d",
            self._stats["listings"],
            self._stats["pages"],
            self._stats["airports"],
            self._stats["saved"],
            self._stats["dup"],
            self._stats["skipped"],
            self._stats["parse_err"],
            self._stats["fetch_err"],
        )
        return dict(self._stats)

    # ------------------------------------------------------------------
    # Cursors
    # ------------------------------------------------------------------

    def _cursor(
        self,
        level: Level,
        refill: Callable[[], None] | None = None,
    ) -> Iterator[str]:
        """Yield *level*'s items, refilling first only if it is empty.

        The refill runs lazily on the first ``next()``, i.e. once the
        caller has set the parent context.
        """
        if refill is not None and self.frontier.is_empty(level):
            refill()
        while not self.frontier.is_empty(level):
            yield self.frontier.dequeue(level)

    def _scrape_listing(self, is_usa: bool) -> None:
        """Drain the page queue of the current country/state, then every
        airport discovered so far."""
        for page in self._cursor(Level.PAGE, lambda: self._queue_pages(is_usa)):
            self._scrape_page(page, is_usa)

        codes: Iterator[str] = self._cursor(Level.AIRPORT)
        if self.progress:
            codes = tqdm(
                codes,
                desc=f"Airports {self.state or self.country}",
                total=self.frontier.size(Level.AIRPORT),
                unit="airport",
                dynamic_ncols=True,
                leave=False,
            )
        for code in codes:
            self._scrape_airport(code, is_usa)

    # ------------------------------------------------------------------
    # Listing pages
    # ------------------------------------------------------------------

    def _pause(self) -> None:
        if self.delay > 0:
            self._sleep(self.delay)

    def _get_children(self, url: str, href_base: str | None) -> list[str]:
        """Fetch a listing page, enqueue the airports it links to and
        return the child segments under *href_base*."""
        self._stats["listings"] += 1
        log.debug("GET %s", url)
        try:
            content = self.fetch(url)
        except TransportError as exc:
            log.warning("[ERR] Failed to fetch %s – %s", url, exc.reason)
            self._stats["fetch_err"] += 1
            return []
        finally:
            self._pause()

        links = extract_children(content, href_base)
        added = self.frontier.extend(Level.AIRPORT, links.airports)
        if added:
            log.debug("  +%d airport(s) from %s", added, url)
        return links.children or []

    def _queue_children(self, level: Level, url: str, href_base: str) -> None:
        # pagers and menus often link the same child twice
        children = list(dict.fromkeys(self._get_children(url, href_base)))
        self.frontier.extend(level, children)
        log.info("[QUEUE] %d %s(s) from %s", len(children), level.value, url)

    def _queue_continents(self) -> None:
        self._queue_children(Level.CONTINENT, continents_url(), continent_prefix())

    def _queue_countries(self) -> None:
        self._queue_children(
            Level.COUNTRY,
            continent_url(self.continent),
            country_prefix(self.continent),
        )

    def _queue_states(self) -> None:
        self._queue_children(
            Level.STATE,
            country_url(self.continent, self.country),
            state_prefix(self.continent, self.country),
        )

    def _queue_pages(self, is_usa: bool) -> None:
        if is_usa:
            url = state_url(self.continent, self.country, self.state)
            href_base = page_prefix(self.continent, self.country, self.state)
        else:
            url = country_url(self.continent, self.country)
            href_base = page_prefix(self.continent, self.country)
        self._queue_children(Level.PAGE, url, href_base)

    def _scrape_page(self, page: str, is_usa: bool) -> None:
        state = self.state if is_usa else None
        url = page_url(self.continent, self.country, page, state=state)
        self._stats["pages"] += 1
        log.info("[PAGE] %s", url)
        self._get_children(url, None)

    # ------------------------------------------------------------------
    # Airport detail pages
    # ------------------------------------------------------------------

    def _scrape_airport(self, code: str, is_usa: bool) -> None:
        url = airport_url(code)
        self._stats["airports"] += 1
        log.debug("GET %s", url)

        try:
            content = self.fetch(url)
        except TransportError as exc:
            log.warning("[ERR] Failed to fetch airport %s – %s", url, exc.reason)
            self._stats["fetch_err"] += 1
            return

        try:
            airport = parse_airport(content, is_usa)
        except ParseError as exc:
            log.warning("[PARSE] Failed to parse airport information from %s – %s: %s",
                        url, type(exc).__name__, exc)
            self._stats["parse_err"] += 1
            return

        log.info("[SAVE] Filing airport, %s, under %s, %s, %s",
                 airport.faa, airport.city, airport.state, airport.country)
        try:
            self.store.insert(airport)
        except PersistenceConflict as exc:
            log.warning("[DUP] Looks like the airport for FAA=%s already exists (%s)",
                        exc.faa, url)
            self._stats["dup"] += 1
        except InvalidRecord as exc:
            log.warning("[SKIP] Not filing airport from %s – %s", url, exc)
            self._stats["skipped"] += 1
        else:
            self._stats["saved"] += 1

        self._pause()
