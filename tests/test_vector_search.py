import unittest
from unittest.mock import MagicMock
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_explorer.errors import ProviderError
from event_explorer.services.vector_search import query_events


def _metadata(title, date="2020-01-01"):
    return {"title": title, "summary": "s", "url": "", "lat": 1.5, "long": -2.5, "date": date}


class TestQueryEvents(unittest.TestCase):

    def test_maps_hits_to_events_with_scores(self):
        collection = MagicMock()
        collection.query.return_value = {
            "ids": [["a", "b"]],
            "metadatas": [[_metadata("Rover Landing"), _metadata("Mars Orbiter")]],
            "distances": [[0.1, 0.3]],
        }

        events = query_events([0.2, 0.4], 10, collection=collection)

        self.assertEqual([e.title for e in events], ["Rover Landing", "Mars Orbiter"])
        self.assertEqual([e.score for e in events], [0.1, 0.3])
        self.assertEqual([e.id for e in events], ["a", "b"])
        self.assertEqual(events[0].lat, 1.5)
        kwargs = collection.query.call_args.kwargs
        self.assertEqual(kwargs["query_embeddings"], [[0.2, 0.4]])
        self.assertEqual(kwargs["n_results"], 10)

    def test_empty_results(self):
        collection = MagicMock()
        collection.query.return_value = {"ids": [[]], "metadatas": [[]], "distances": [[]]}

        self.assertEqual(query_events([0.0], 50, collection=collection), [])

    def test_missing_metadatas_key(self):
        collection = MagicMock()
        collection.query.return_value = {"ids": [[]], "metadatas": None, "distances": None}

        self.assertEqual(query_events([0.0], 50, collection=collection), [])

    def test_malformed_record_is_skipped(self):
        collection = MagicMock()
        broken = {"title": "No coordinates", "summary": "s", "date": "2020-01-01"}
        collection.query.return_value = {
            "ids": [["a", "b"]],
            "metadatas": [[broken, _metadata("Fine")]],
            "distances": [[0.1, 0.2]],
        }

        events = query_events([0.0], 10, collection=collection)

        self.assertEqual([e.title for e in events], ["Fine"])

    def test_store_failure_raises_provider_error(self):
        collection = MagicMock()
        collection.query.side_effect = ConnectionError("refused")

        with self.assertRaises(ProviderError):
            query_events([0.0], 10, collection=collection)


if __name__ == '__main__':
    unittest.main()
