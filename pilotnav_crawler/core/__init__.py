"""Core crawler logic – taxonomy controller, frontier and airport store."""

from pilotnav_crawler.core.crawler import Crawler
from pilotnav_crawler.core.frontier import Frontier, Level
from pilotnav_crawler.core.storage import AirportStore

__all__ = ["AirportStore", "Crawler", "Frontier", "Level"]
