"""
Exception hierarchy for the crawler.

Only :class:`ConfigurationError` is fatal.  Everything else is raised at a
single node of the taxonomy, logged by the crawler, and the crawl moves on.
"""


class CrawlerError(Exception):
    """Base class for every error raised by pilotnav_crawler."""


class ConfigurationError(CrawlerError):
    """The crawler cannot be set up (missing or unusable store location)."""


class TransportError(CrawlerError):
    """A fetch failed: DNS, timeout, redirect loop or non-2xx status."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(CrawlerError):
    """An airport detail page did not have the expected structure."""


class MissingCodes(ParseError):
    pass


class MissingName(ParseError):
    pass


class MissingLocation(ParseError):
    pass


class MissingCoordinate(ParseError):
    pass


class InvalidCoordinate(ParseError):
    pass


class PersistenceConflict(CrawlerError):
    """An airport with the same FAA code is already stored."""

    def __init__(self, faa: str | None) -> None:
        super().__init__(f"airport FAA={faa} already exists")
        self.faa = faa


class InvalidRecord(CrawlerError):
    """An airport cannot be stored because it has no FAA code."""


class EmptyQueue(CrawlerError):
    """``Frontier.dequeue`` was called on an empty level."""
