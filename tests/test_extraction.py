"""
Tests for listing-page link discovery.
"""

import unittest
from unittest.mock import patch

from bs4.builder import ParserRejectedMarkup

from pilotnav_crawler.extraction.links import extract_children


BASE = "/browse/Airports/continent/Europe/country/"


class TestExtractChildren(unittest.TestCase):
    def test_matching_anchors_in_document_order(self):
        html = f"""
        <html><body>
          <a href="{BASE}GERMANY">Germany</a>
          <a href="/about">About</a>
          <a href="{BASE}FRANCE">France</a>
          <a href="http://example.com/">Elsewhere</a>
          <a href="{BASE}SPAIN">Spain</a>
        </body></html>
        """
        result = extract_children(html, BASE)
        self.assertEqual(result.children, ["GERMANY", "FRANCE", "SPAIN"])

    def test_duplicates_preserved(self):
        html = f'<a href="{BASE}FRANCE">a</a><a href="{BASE}FRANCE">b</a>'
        result = extract_children(html, BASE)
        self.assertEqual(result.children, ["FRANCE", "FRANCE"])

    def test_prefix_alone_is_not_a_child(self):
        html = f'<a href="{BASE}">All</a><a href="{BASE}ITALY">Italy</a>'
        result = extract_children(html, BASE)
        self.assertEqual(result.children, ["ITALY"])

    def test_anchor_without_href_skipped(self):
        html = f'<a name="top">Top</a><a href="{BASE}ITALY">Italy</a>'
        result = extract_children(html, BASE)
        self.assertEqual(result.children, ["ITALY"])

    def test_airports_discovered_independently_of_prefix(self):
        html = f"""
        <a href="{BASE}FRANCE">France</a>
        <a href="/airport/LFPG">Paris CDG</a>
        <a href="/airport/">Broken</a>
        <a href="/airport/LFPO">Paris Orly</a>
        """
        result = extract_children(html, BASE)
        self.assertEqual(result.children, ["FRANCE"])
        self.assertEqual(result.airports, ["LFPG", "LFPO"])

    def test_airport_links_are_not_deduplicated_here(self):
        html = '<a href="/airport/KSFO">x</a><a href="/airport/KSFO">y</a>'
        result = extract_children(html, BASE)
        self.assertEqual(result.airports, ["KSFO", "KSFO"])

    def test_no_prefix_only_collects_airports(self):
        html = f'<a href="{BASE}FRANCE">France</a><a href="/airport/KOAK">Oakland</a>'
        result = extract_children(html, None)
        self.assertIsNone(result.children)
        self.assertEqual(result.airports, ["KOAK"])

    def test_bytes_input(self):
        html = f'<a href="{BASE}NORWAY">Norge \xf8</a>'.encode("latin-1")
        result = extract_children(html, BASE)
        self.assertEqual(result.children, ["NORWAY"])

    def test_malformed_document(self):
        html = f'<html><body><table><tr><td><a href="{BASE}POLAND">Poland</td></body>'
        result = extract_children(html, BASE)
        self.assertEqual(result.children, ["POLAND"])

    def test_empty_document(self):
        result = extract_children(b"", BASE)
        self.assertEqual(result.children, [])
        self.assertEqual(result.airports, [])

    @patch("pilotnav_crawler.extraction.links.load_document",
           side_effect=ParserRejectedMarkup("not markup"))
    def test_rejected_markup_yields_nothing(self, _):
        with self.assertLogs("pilotnav-crawler", level="WARNING"):
            result = extract_children(b"\x00\x01", BASE)
        self.assertEqual(result.children, [])
        self.assertEqual(result.airports, [])

    def test_declared_charset_honoured(self):
        html = (
            '<meta charset="iso-8859-1">'
            '<a href="/airport/LSZH">Z\u00fcrich</a>'
        ).encode("latin-1")
        result = extract_children(html, None)
        self.assertEqual(result.airports, ["LSZH"])


if __name__ == "__main__":
    unittest.main()
