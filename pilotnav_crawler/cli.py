"""
Command-line interface for the PilotNav airport crawler.
"""

import argparse
import logging
import sys
import time

from pilotnav_crawler.config import DEFAULT_DELAY
from pilotnav_crawler.core.crawler import Crawler
from pilotnav_crawler.errors import ConfigurationError
from pilotnav_crawler.utils.log import setup_logging, log


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Crawl the PilotNav airport directory into an SQLite "
                    "database.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m pilotnav_crawler airports.db\n"
            "  python -m pilotnav_crawler airports.db --continent Europe\n"
            "  python -m pilotnav_crawler airports.db --continent 'North America' "
            "--country 'United States' --state CA\n"
        ),
    )
    parser.add_argument(
        "database",
        help="SQLite database file to file airports into (created if missing)",
    )
    parser.add_argument(
        "--continent",
        help="Only crawl this continent (e.g. 'North America')",
    )
    parser.add_argument(
        "--country",
        help="Only crawl this country; requires --continent",
    )
    parser.add_argument(
        "--state",
        help="Only crawl this US state; requires --continent and --country",
    )
    parser.add_argument(
        "--delay", type=float, default=DEFAULT_DELAY,
        help=f"Pause after each listing fetch and filed airport in seconds "
             f"(default: {DEFAULT_DELAY})",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar while scraping airports",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    return parser.parse_args(argv)


def check_scope(args: argparse.Namespace) -> None:
    """Raise ``ConfigurationError`` when an inner scope lacks its outer one."""
    if args.state and not args.country:
        raise ConfigurationError("--state requires --country")
    if args.country and not args.continent:
        raise ConfigurationError("--country requires --continent")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.verify_ssl:
        import urllib3
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    try:
        check_scope(args)
        crawler = Crawler.create(
            args.database,
            continent=args.continent,
            country=args.country,
            state=args.state,
            delay=args.delay,
            verify_ssl=args.verify_ssl,
            progress=args.progress,
        )
    except ConfigurationError as exc:
        log.error("%s", exc)
        return 2

    t0 = time.monotonic()
    try:
        crawler.run()
    except KeyboardInterrupt:
        log.warning("Crawl interrupted by user")
        return 130
    finally:
        crawler.store.close()
        log.info("Total elapsed time: %.1f s", time.monotonic() - t0)
    return 0


if __name__ == "__main__":
    sys.exit(main())
