"""
HTML document loading via BeautifulSoup.
"""

from bs4 import BeautifulSoup

try:
    import lxml  # noqa: F401
    _BS4_PARSER = "lxml"
except ImportError:
    _BS4_PARSER = "html.parser"


def load_document(content: bytes | str) -> BeautifulSoup:
    """Parse *content* into a soup.

    Bytes are handed to BeautifulSoup undecoded so the page's declared
    charset (BOM, ``<meta charset>``) or sniffed encoding is honoured.
    """
    return BeautifulSoup(content, _BS4_PARSER)


def node_text(node) -> str:
    """Trimmed text content of *node*."""
    return node.get_text().strip()
