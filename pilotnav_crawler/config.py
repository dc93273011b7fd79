"""
Configuration constants for the PilotNav airport crawler.
"""

# ---------------------------------------------------------------------------
# Site layout
# ---------------------------------------------------------------------------
SITE_URL = "http://www.pilotnav.com"

BROWSE_CONTINENTS = SITE_URL + "/browse/Airports"
CONTINENT_FORMAT = BROWSE_CONTINENTS + "/continent/{continent}"
COUNTRY_FORMAT = CONTINENT_FORMAT + "/country/{country}"
STATE_FORMAT = COUNTRY_FORMAT + "/state/{state}"
USA_PAGE_FORMAT = STATE_FORMAT + "/p/{page}"
PAGE_FORMAT = COUNTRY_FORMAT + "/p/{page}"

AIRPORT_PATH = "/airport/"
AIRPORT_FORMAT = SITE_URL + AIRPORT_PATH + "{code}"

# Encoded country segment whose listing is split by state
USA_COUNTRY = "UNITED%20STATES"

# ---------------------------------------------------------------------------
# Detail page markup
# ---------------------------------------------------------------------------
CODE_BOX_CLASS_PREFIX = "code_box code_"
DATA_LABEL_CLASS = "dataLabel"

# ---------------------------------------------------------------------------
# Crawler tuning
# ---------------------------------------------------------------------------
DEFAULT_DELAY = 1.0            # seconds after every listing fetch / filed airport
REQUEST_TIMEOUT = 30

USER_AGENTS = [
    # Chrome (Windows)
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    # Chrome (macOS)
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    # Chrome (Linux)
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    # Firefox (Windows)
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:133.0) Gecko/20100101 Firefox/133.0",
    # Firefox (Linux)
    "Mozilla/5.0 (X11; Linux x86_64; rv:133.0) Gecko/20100101 Firefox/133.0",
]
