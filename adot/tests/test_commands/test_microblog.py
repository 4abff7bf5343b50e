import logging
import unittest
from datetime import datetime
from unittest.mock import MagicMock, patch

from google.api_core import exceptions as api_exceptions

from adot.commands.microblog import build_post, handle_microblog
from adot.errors import NetworkError
from adot.utils.config import Config

logger = logging.getLogger("adot.tests")
CONFIG = Config(credentials_path="/tmp/sa.json", project_id="adot-test")


@patch('adot.commands.microblog.get_firestore_client')
class TestHandleMicroblog(unittest.TestCase):

    def _doc_ref(self, mock_get_client):
        client = MagicMock()
        mock_get_client.return_value = client
        return client, client.collection.return_value.document.return_value

    def test_creates_exactly_one_document(self, mock_get_client):
        client, doc_ref = self._doc_ref(mock_get_client)

        with patch('builtins.print'):
            post = handle_microblog(logger, CONFIG, "hello world")

        mock_get_client.assert_called_once_with(logger, CONFIG)
        client.collection.assert_called_once_with("microblog")
        client.collection.return_value.document.assert_called_once_with(post["id"])
        doc_ref.create.assert_called_once()
        written = doc_ref.create.call_args[0][0]
        self.assertEqual(written["text"], "hello world")
        self.assertEqual(written["id"], post["id"])
        self.assertIsInstance(written["created_at"], datetime)
        self.assertIsNotNone(written["created_at"].tzinfo)

    def test_timestamps_are_non_decreasing(self, mock_get_client):
        _, doc_ref = self._doc_ref(mock_get_client)

        with patch('builtins.print'):
            handle_microblog(logger, CONFIG, "first")
            handle_microblog(logger, CONFIG, "second")

        first, second = [c[0][0] for c in doc_ref.create.call_args_list]
        self.assertLessEqual(first["created_at"], second["created_at"])
        self.assertNotEqual(first["id"], second["id"])

    def test_rejected_write_is_network_error(self, mock_get_client):
        _, doc_ref = self._doc_ref(mock_get_client)
        doc_ref.create.side_effect = api_exceptions.PermissionDenied("denied")

        with patch('builtins.print') as mock_print:
            with self.assertRaises(NetworkError):
                handle_microblog(logger, CONFIG, "hello")
        mock_print.assert_not_called()


class TestBuildPost(unittest.TestCase):

    def test_post_fields(self):
        post = build_post("text")
        self.assertEqual(set(post), {"id", "text", "created_at"})
        self.assertEqual(len(post["id"]), 36)


if __name__ == '__main__':
    unittest.main()
