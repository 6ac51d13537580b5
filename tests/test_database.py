"""
Database Service Tests
"""

import unittest
from unittest.mock import patch

from app import create_app
from app.services import database


class TestMongoClientSingleton(unittest.TestCase):

    def setUp(self):
        self.app = create_app('testing')
        self.app.config['MONGO_URI'] = 'mongodb://localhost:27017/corrector'
        database._client = None

    def tearDown(self):
        database._client = None

    @patch('app.services.database.MongoClient')
    def test_client_created_once(self, mock_mongo_client):
        with self.app.app_context():
            first = database.get_client()
            second = database.get_client()

        self.assertIs(first, second)
        mock_mongo_client.assert_called_once_with(
            'mongodb://localhost:27017/corrector',
            serverSelectionTimeoutMS=5000,
        )

    @patch('app.services.database.MongoClient')
    def test_count_users_uses_default_database(self, mock_mongo_client):
        db = mock_mongo_client.return_value.get_default_database.return_value
        db.__getitem__.return_value.count_documents.return_value = 12

        with self.app.app_context():
            self.assertEqual(database.count_users(), 12)

        mock_mongo_client.return_value.get_default_database.assert_called_with(default='docx_corrector_db')
        db.__getitem__.assert_called_with('User')

    def test_missing_uri_raises(self):
        self.app.config['MONGO_URI'] = None
        with self.app.app_context():
            with self.assertRaises(database.DatabaseUnavailableError):
                database.get_client()


if __name__ == '__main__':
    unittest.main()
