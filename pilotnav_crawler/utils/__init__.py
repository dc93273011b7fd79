"""Utility helpers for taxonomy URLs and logging."""

from pilotnav_crawler.utils.url import (
    encode_continent,
    encode_country,
    encode_state,
)
from pilotnav_crawler.utils.log import setup_logging, log

__all__ = [
    "encode_continent",
    "encode_country",
    "encode_state",
    "setup_logging",
    "log",
]
