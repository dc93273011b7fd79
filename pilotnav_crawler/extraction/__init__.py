"""Document parsing: listing-page links and airport detail pages."""

from pilotnav_crawler.extraction.airport import parse_airport
from pilotnav_crawler.extraction.links import ExtractedLinks, extract_children

__all__ = ["ExtractedLinks", "extract_children", "parse_airport"]
