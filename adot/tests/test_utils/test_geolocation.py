import logging
import unittest
from unittest.mock import patch

import requests

from adot.errors import NetworkError, ParseError
from adot.tests.helpers.mock_responses import (
    mock_ipinfo_missing_city,
    mock_ipinfo_minimal,
    mock_ipinfo_not_json,
    mock_ipinfo_success,
    mock_ipinfo_unauthorized,
)
from adot.utils.geolocation import IPINFO_URL, fetch_location, parse_location

logger = logging.getLogger("adot.tests")


@patch('adot.utils.geolocation.requests.get')
class TestFetchLocation(unittest.TestCase):

    def test_success_sends_bearer_token(self, mock_get):
        mock_get.return_value = mock_ipinfo_success

        location = fetch_location(logger, "secret-token")

        self.assertEqual(location, {
            "city": "Hyderabad",
            "region": "Telangana",
            "country": "IN",
            "timezone": "Asia/Kolkata",
        })
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], IPINFO_URL)
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer secret-token")
        self.assertIn("timeout", kwargs)
        # Token must travel in the header, not in the URL
        self.assertNotIn("secret-token", args[0])

    def test_optional_fields_default_to_none(self, mock_get):
        mock_get.return_value = mock_ipinfo_minimal
        location = fetch_location(logger, "tok")
        self.assertIsNone(location["country"])
        self.assertIsNone(location["timezone"])

    def test_http_error_is_network_error(self, mock_get):
        mock_get.return_value = mock_ipinfo_unauthorized
        with self.assertRaises(NetworkError) as cm:
            fetch_location(logger, "bad")
        self.assertIn("403", str(cm.exception))

    def test_connection_error_is_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("Name or service not known")
        with self.assertRaises(NetworkError):
            fetch_location(logger, "tok")

    def test_timeout_is_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()
        with self.assertRaises(NetworkError) as cm:
            fetch_location(logger, "tok", timeout=3)
        self.assertIn("3 seconds", str(cm.exception))

    def test_non_json_body_is_parse_error(self, mock_get):
        mock_get.return_value = mock_ipinfo_not_json
        with self.assertRaises(ParseError):
            fetch_location(logger, "tok")

    def test_missing_city_is_parse_error(self, mock_get):
        mock_get.return_value = mock_ipinfo_missing_city
        with self.assertRaises(ParseError) as cm:
            fetch_location(logger, "tok")
        self.assertIn("city", str(cm.exception))


class TestParseLocation(unittest.TestCase):

    def test_rejects_non_object(self):
        with self.assertRaises(ParseError):
            parse_location(["Hyderabad", "Telangana"])

    def test_rejects_blank_region(self):
        with self.assertRaises(ParseError):
            parse_location({"city": "Austin", "region": "  "})

    def test_strips_whitespace(self):
        location = parse_location({"city": " Austin ", "region": "Texas"})
        self.assertEqual(location["city"], "Austin")


if __name__ == '__main__':
    unittest.main()
