"""
pilotnav_crawler
================
Crawler for the PilotNav public airport directory.  Walks the
continent → country → (state) → page → airport taxonomy and files every
airport detail page it can parse into an SQLite database.

Package structure
-----------------
pilotnav_crawler/
├── __init__.py       – package init and public API
├── __main__.py       – ``python -m pilotnav_crawler``
├── cli.py            – argparse CLI
├── config.py         – site URLs and crawl tuning constants
├── errors.py         – exception hierarchy
├── models.py         – the ``Airport`` record
├── session.py        – requests.Session factory and ``fetch``
├── core/
│   ├── crawler.py    – taxonomy crawl controller
│   ├── frontier.py   – per-level work queues and the seen-airport set
│   └── storage.py    – SQLite airport store
├── extraction/
│   ├── html_parser.py – BeautifulSoup document loading
│   ├── links.py      – child-segment and airport link discovery
│   └── airport.py    – airport detail page scraper
└── utils/
    ├── log.py        – logging setup
    └── url.py        – taxonomy segment encoding and URL building

Quick start
-----------
    from pilotnav_crawler import Crawler

    crawler = Crawler.create("airports.db", continent="North America",
                             country="United States", state="CA")
    crawler.run()
"""

from pilotnav_crawler.core.crawler import Crawler
from pilotnav_crawler.core.frontier import Frontier, Level
from pilotnav_crawler.core.storage import AirportStore
from pilotnav_crawler.models import Airport

__version__ = "1.0.0"

__all__ = ["Airport", "AirportStore", "Crawler", "Frontier", "Level"]
