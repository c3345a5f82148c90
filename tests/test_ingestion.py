import unittest
from unittest.mock import patch, MagicMock
import os
import sys
import tempfile

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_explorer.errors import ProviderError
from event_explorer.services.ingestion import initialize_collection, load_dataset

HEADER = "id,title,summary,url,lat,long,date\n"


class TestIngestion(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "dataset.csv")

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, rows):
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(HEADER)
            fh.writelines(row + "\n" for row in rows)

    def test_load_dataset_drops_incomplete_rows(self):
        self._write([
            "1,Apollo 11,First crewed landing,https://nasa.gov,28.57,-80.65,1969-07-20",
            "2,,Missing title,,28.5,-80.6,1970-01-01",
            "3,Skylab,No coordinates,,,,1973-05-14",
            "4,Mir,Bad latitude,,north,37.6,1986-02-20",
            ",Hubble,Launched on Discovery,,28.5,-80.6,1990-04-24",
            "5,Voyager,Infinite latitude,,inf,12.0,1977-09-05",
            "6,Pioneer,Infinite longitude,,10.0,-Infinity,1972-03-02",
        ])

        events = load_dataset(self.path)

        self.assertEqual([e.title for e in events], ["Apollo 11", "Hubble"])
        self.assertEqual(events[0].id, "1")
        self.assertEqual(events[0].url, "https://nasa.gov")
        self.assertAlmostEqual(events[0].lat, 28.57)
        self.assertIsNone(events[1].id)
        self.assertEqual(events[1].url, "")

    @patch('event_explorer.services.ingestion.generate_embedding')
    def test_initialize_collection_adds_in_batches(self, mock_embed):
        rows = [f"{i},Event {i},Summary {i},,10.0,20.0,2001-01-{i + 1:02d}" for i in range(11)]
        rows.append(",Unnamed id,Summary,,10.0,20.0,2002-02-02")
        self._write(rows)
        mock_embed.return_value = [0.3, 0.4]
        collection = MagicMock()
        collection.count.return_value = 0

        stats = initialize_collection(self.path, collection=collection)

        self.assertEqual(collection.add.call_count, 2)
        first = collection.add.call_args_list[0].kwargs
        second = collection.add.call_args_list[1].kwargs
        self.assertEqual(len(first["ids"]), 10)
        self.assertEqual(second["ids"], ["10", "item-10-1"])
        self.assertEqual(first["documents"][0], "Event 0 Summary 0")
        self.assertEqual(
            first["metadatas"][0],
            {"title": "Event 0", "summary": "Summary 0", "url": "", "lat": 10.0, "long": 20.0,
             "date": "2001-01-01"},
        )
        self.assertEqual(mock_embed.call_count, 12)
        self.assertEqual(stats.rows_loaded, 12)
        self.assertEqual(stats.rows_skipped, 0)
        self.assertEqual(stats.records_added, 12)

    @patch('event_explorer.services.ingestion.generate_embedding')
    def test_populated_collection_is_left_alone(self, mock_embed):
        self._write(["1,Apollo 11,Landing,,28.5,-80.6,1969-07-20"])
        collection = MagicMock()
        collection.count.return_value = 42

        stats = initialize_collection(self.path, collection=collection)

        self.assertTrue(stats.already_populated)
        collection.add.assert_not_called()
        mock_embed.assert_not_called()

    def test_missing_dataset_is_skipped(self):
        collection = MagicMock()
        collection.count.return_value = 0

        stats = initialize_collection(os.path.join(self.tmpdir.name, "nope.csv"), collection=collection)

        self.assertEqual(stats.records_added, 0)
        collection.add.assert_not_called()

    @patch('event_explorer.services.ingestion.generate_embedding')
    def test_add_failure_raises_provider_error(self, mock_embed):
        self._write(["1,Apollo 11,Landing,,28.5,-80.6,1969-07-20"])
        mock_embed.return_value = [0.1]
        collection = MagicMock()
        collection.count.return_value = 0
        collection.add.side_effect = RuntimeError("server error")

        with self.assertRaises(ProviderError):
            initialize_collection(self.path, collection=collection)


if __name__ == '__main__':
    unittest.main()
