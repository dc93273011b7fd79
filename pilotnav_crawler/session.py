"""
HTTP session creation and the fetch capability used by the crawler.

The crawl is strictly sequential and never retries: a failed request is
reported as a :class:`TransportError` and the caller moves on to the next
queued item.
"""

import random

import requests
from requests.adapters import HTTPAdapter

from pilotnav_crawler.config import REQUEST_TIMEOUT, USER_AGENTS
from pilotnav_crawler.errors import TransportError


def build_session(verify_ssl: bool = True) -> requests.Session:
    """Return a ``requests.Session`` with keep-alive, no automatic retries
    and a randomised browser User-Agent."""
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=0, pool_connections=1, pool_maxsize=1)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": random.choice(USER_AGENTS),
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
    })
    return session


def fetch(
    session: requests.Session,
    url: str,
    timeout: float = REQUEST_TIMEOUT,
) -> bytes:
    """GET *url* following redirects and return the response body.

    Raises :class:`TransportError` for connection problems, timeouts,
    redirect loops and non-2xx responses.
    """
    try:
        resp = session.get(url, timeout=timeout, allow_redirects=True)
    except requests.RequestException as exc:
        raise TransportError(url, str(exc)) from exc

    if not resp.ok:
        raise TransportError(url, f"HTTP {resp.status_code}")
    return resp.content
