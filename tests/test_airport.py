"""
Tests for the airport detail page scraper.
"""

import unittest

from pilotnav_crawler.errors import (
    InvalidCoordinate,
    MissingCodes,
    MissingCoordinate,
    MissingLocation,
    MissingName,
    ParseError,
)
from pilotnav_crawler.extraction.airport import (
    get_airport_codes,
    get_airport_key_values,
    parse_airport,
    split_location,
)
from pilotnav_crawler.extraction.html_parser import load_document


CODES = """
<div class="code_box code_icao_box">KSFO</div>
<div class="code_box code_iata_box">SFO</div>
<div class="code_box code_faa_box">SFO</div>
"""

DATA = """
<table>
  <tr><td class="dataLabel">Latitude:</td><td> 37.618972 </td></tr>
  <tr><td class="dataLabel">Longitude:</td><td>-122.374889</td></tr>
  <tr><td class="dataLabel">Elevation:</td><td>13 ft.</td></tr>
</table>
"""


def detail_page(codes=CODES, name="San Francisco International Airport",
                location="San Francisco, CA, United States", data=DATA):
    h1 = f"<h1>{name}</h1>" if name is not None else ""
    h2 = f"<h2>{location}</h2>" if location is not None else ""
    return f"""
    <html><body>
      {codes}
      <table><tr><td>{h1}</td></tr><tr><td>{h2}</td></tr></table>
      {data}
    </body></html>
    """


class TestSplitLocation(unittest.TestCase):
    def test_us_city_state_country(self):
        self.assertEqual(
            split_location("Springfield, IL, USA", is_usa=True),
            ("Springfield", "IL", "USA"),
        )

    def test_city_country(self):
        self.assertEqual(
            split_location("Paris, France", is_usa=False),
            ("Paris", None, "France"),
        )

    def test_two_tokens_in_us_has_no_state(self):
        self.assertEqual(
            split_location("Anchorage, United States", is_usa=True),
            ("Anchorage", None, "United States"),
        )

    def test_country_only(self):
        self.assertEqual(split_location("Antarctica", is_usa=False),
                         (None, None, "Antarctica"))

    def test_three_tokens_outside_us_is_long_city(self):
        self.assertEqual(
            split_location("Bonn, Rhein-Sieg, Germany", is_usa=False),
            ("Bonn, Rhein-Sieg", None, "Germany"),
        )

    def test_four_tokens_in_us_joins_city(self):
        self.assertEqual(
            split_location("Washington, D.C., DC, USA", is_usa=True),
            ("Washington, D.C.", "DC", "USA"),
        )

    def test_many_tokens_outside_us(self):
        self.assertEqual(
            split_location("A, B, C, Chile", is_usa=False),
            ("A, B, C", None, "Chile"),
        )

    def test_tokens_are_trimmed(self):
        self.assertEqual(
            split_location("  Oakland ,CA ,  United States ", is_usa=True),
            ("Oakland", "CA", "United States"),
        )


class TestAirportCodes(unittest.TestCase):
    def test_all_codes(self):
        codes = get_airport_codes(load_document(CODES))
        self.assertEqual(codes, {"ICAO": "KSFO", "IATA": "SFO", "FAA": "SFO"})

    def test_scanning_stops_at_faa(self):
        html = CODES + '<div class="code_box code_iata_box">XXX</div>' \
                       '<div class="code_box code_local_box">L1</div>'
        codes = get_airport_codes(load_document(html))
        self.assertNotIn("LOCAL", codes)
        self.assertEqual(codes["IATA"], "SFO")

    def test_other_divs_ignored(self):
        html = '<div class="code_boxes">x</div><div>y</div>' \
               '<div class="code_box code_faa_box"> 0Q5 </div>'
        self.assertEqual(get_airport_codes(load_document(html)), {"FAA": "0Q5"})

    def test_missing_codes(self):
        with self.assertRaises(MissingCodes):
            get_airport_codes(load_document("<div class='other'>x</div>"))


class TestKeyValues(unittest.TestCase):
    def test_first_key_wins(self):
        html = """
        <table>
          <tr><td class="dataLabel">Latitude:</td><td>1.5</td></tr>
          <tr><td class="dataLabel">Latitude:</td><td>9.9</td></tr>
        </table>
        """
        self.assertEqual(get_airport_key_values(load_document(html)),
                         {"Latitude": "1.5"})

    def test_label_without_colon_ignored(self):
        html = '<table><tr><td class="dataLabel">Runways</td><td>2</td></tr></table>'
        self.assertEqual(get_airport_key_values(load_document(html)), {})

    def test_label_without_value_cell_ignored(self):
        html = '<table><tr><td class="dataLabel">Owner:</td></tr></table>'
        self.assertEqual(get_airport_key_values(load_document(html)), {})


class TestParseAirport(unittest.TestCase):
    def test_complete_us_record(self):
        airport = parse_airport(detail_page().encode("utf-8"), is_usa=True)
        self.assertEqual(airport.faa, "SFO")
        self.assertEqual(airport.iata, "SFO")
        self.assertEqual(airport.icao, "KSFO")
        self.assertEqual(airport.name, "San Francisco International Airport")
        self.assertEqual(airport.city, "San Francisco")
        self.assertEqual(airport.state, "CA")
        self.assertEqual(airport.country, "United States")
        self.assertAlmostEqual(airport.latitude, 37.618972)
        self.assertAlmostEqual(airport.longitude, -122.374889)
        self.assertEqual(airport.elevation, 13)

    def test_non_us_record_has_no_state(self):
        codes = '<div class="code_box code_icao_box">LFPG</div>' \
                '<div class="code_box code_iata_box">CDG</div>'
        airport = parse_airport(
            detail_page(codes=codes, name="Charles de Gaulle",
                        location="Paris, France"),
            is_usa=False,
        )
        self.assertIsNone(airport.faa)
        self.assertEqual(airport.icao, "LFPG")
        self.assertEqual(airport.city, "Paris")
        self.assertIsNone(airport.state)
        self.assertEqual(airport.country, "France")

    def test_empty_heading_skipped_for_name(self):
        page = detail_page().replace("<h1>", "<h1>  </h1><h1>", 1)
        airport = parse_airport(page, is_usa=True)
        self.assertEqual(airport.name, "San Francisco International Airport")

    def test_missing_name(self):
        with self.assertRaises(MissingName):
            parse_airport(detail_page(name=None), is_usa=True)

    def test_missing_location(self):
        with self.assertRaises(MissingLocation):
            parse_airport(detail_page(location=None), is_usa=True)

    def test_missing_codes(self):
        with self.assertRaises(MissingCodes):
            parse_airport(detail_page(codes=""), is_usa=True)

    def test_missing_latitude(self):
        data = DATA.replace("Latitude:", "Lat:")
        with self.assertRaises(MissingCoordinate):
            parse_airport(detail_page(data=data), is_usa=True)

    def test_missing_longitude(self):
        data = DATA.replace("Longitude:", "Long:")
        with self.assertRaises(MissingCoordinate):
            parse_airport(detail_page(data=data), is_usa=True)

    def test_no_key_value_table(self):
        with self.assertRaises(MissingCoordinate):
            parse_airport(detail_page(data=""), is_usa=True)

    def test_invalid_coordinate(self):
        data = DATA.replace("-122.374889", "122° 22' W")
        with self.assertRaises(InvalidCoordinate):
            parse_airport(detail_page(data=data), is_usa=True)

    def test_coordinate_errors_are_parse_errors(self):
        self.assertTrue(issubclass(InvalidCoordinate, ParseError))
        self.assertTrue(issubclass(MissingCoordinate, ParseError))

    def test_missing_elevation_defaults_to_zero(self):
        data = DATA.replace("Elevation:", "Runways:")
        with self.assertLogs("pilotnav-crawler", level="WARNING") as cm:
            airport = parse_airport(detail_page(data=data), is_usa=True)
        self.assertEqual(airport.elevation, 0)
        self.assertTrue(any("Elevation" in line for line in cm.output))

    def test_unparsable_elevation_defaults_to_zero(self):
        data = DATA.replace("13 ft.", "unknown")
        with self.assertLogs("pilotnav-crawler", level="WARNING"):
            airport = parse_airport(detail_page(data=data), is_usa=True)
        self.assertEqual(airport.elevation, 0)

    def test_negative_elevation(self):
        data = DATA.replace("13 ft.", "-210 ft.")
        airport = parse_airport(detail_page(data=data), is_usa=True)
        self.assertEqual(airport.elevation, -210)

    def test_declared_latin1_charset_is_honoured(self):
        page = detail_page(name="Z\u00fcrich Airport",
                           location="Z\u00fcrich, Switzerland")
        page = page.replace(
            "<html>",
            '<html><head><meta http-equiv="Content-Type" '
            'content="text/html; charset=iso-8859-1"></head>',
            1,
        )
        airport = parse_airport(page.encode("latin-1"), is_usa=False)
        self.assertEqual(airport.name, "Z\u00fcrich Airport")
        self.assertEqual(airport.city, "Z\u00fcrich")
        self.assertEqual(airport.country, "Switzerland")

    def test_utf8_bytes_decoded(self):
        page = detail_page(name="S\u00e3o Paulo\u2013Guarulhos",
                           location="S\u00e3o Paulo, Brazil")
        page = page.replace("<html>", '<html><head><meta charset="utf-8"></head>', 1)
        airport = parse_airport(page.encode("utf-8"), is_usa=False)
        self.assertEqual(airport.name, "S\u00e3o Paulo\u2013Guarulhos")
        self.assertEqual(airport.city, "S\u00e3o Paulo")


if __name__ == "__main__":
    unittest.main()
