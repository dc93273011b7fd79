"""
Main entry point for the pilotnav_crawler package.

Allows running the crawler as: python -m pilotnav_crawler
"""

import sys

from pilotnav_crawler.cli import main

if __name__ == "__main__":
    sys.exit(main())
