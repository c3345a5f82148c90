import unittest
from unittest.mock import MagicMock
from datetime import date
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import requests

from event_explorer.errors import APIClientError
from event_explorer.ui.api_client import ExplorerAPIClient


def _response(payload):
    response = MagicMock()
    response.json.return_value = payload
    return response


class TestExplorerAPIClient(unittest.TestCase):

    def setUp(self):
        self.session = MagicMock()
        self.client = ExplorerAPIClient("http://api.test/api/", session=self.session)

    def test_search_events(self):
        self.session.post.return_value = _response([
            {"id": "7", "title": "Rover Landing", "summary": "s", "url": "", "lat": 1, "long": 2,
             "date": "2012-08-06", "score": 0.1},
        ])

        events = self.client.search_events("Mars", date(2000, 1, 1), date(2020, 1, 1))

        self.assertEqual(events[0].title, "Rover Landing")
        self.assertEqual(events[0].score, 0.1)
        self.assertEqual(events[0].id, "7")
        self.session.post.assert_called_once_with(
            "http://api.test/api/search",
            json={"keyword": "Mars", "startDate": "2000-01-01", "endDate": "2020-01-01"},
            timeout=30.0,
        )

    def test_related_keywords(self):
        self.session.post.return_value = _response({"relatedKeywords": ["Phobos"]})

        self.assertEqual(self.client.get_related_keywords("Mars"), ["Phobos"])

    def test_discovery_path(self):
        self.session.post.return_value = _response([
            {"title": "Mars Orbiter", "summary": "s", "url": "", "lat": 1, "long": 2, "date": "2006-03-10"},
        ])

        path = self.client.get_discovery_path("Mars")

        self.assertEqual(path[0].title, "Mars Orbiter")
        self.assertIsNone(path[0].score)

    def test_http_error_raises_client_error(self):
        response = _response({"error": "An error occurred while searching"})
        response.raise_for_status.side_effect = requests.HTTPError("500")
        self.session.post.return_value = response

        with self.assertRaises(APIClientError):
            self.client.search_events("Mars")

    def test_record_missing_fields_raises_client_error(self):
        self.session.post.return_value = _response([{"title": "x"}])

        with self.assertRaises(APIClientError):
            self.client.get_discovery_path("Mars")

    def test_object_where_list_expected_raises_client_error(self):
        self.session.post.return_value = _response({"error": "nope"})

        with self.assertRaises(APIClientError):
            self.client.search_events("Mars")

    def test_list_body_for_related_keywords_raises_client_error(self):
        self.session.post.return_value = _response(["Phobos"])

        with self.assertRaises(APIClientError):
            self.client.get_related_keywords("Mars")

    def test_connection_error_raises_client_error(self):
        self.session.post.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(APIClientError):
            self.client.get_discovery_path("Mars")


if __name__ == '__main__':
    unittest.main()
