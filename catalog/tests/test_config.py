import os
import unittest
from unittest.mock import patch

from catalog.config import Settings


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertIsNone(settings.mongo_url)
        self.assertEqual(settings.mongo_db_name, "infs3201_fall2025")
        self.assertEqual(settings.port, 8000)
        self.assertFalse(settings.use_in_memory_backends)

    def test_reads_environment(self):
        env = {
            "MONGO_URL": "mongodb://example.test:27017",
            "MONGO_DB_NAME": "catalog",
            "PORT": "9100",
            "LOG_LEVEL": "debug",
            "CATALOG_USE_IN_MEMORY_BACKENDS": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.mongo_url, "mongodb://example.test:27017")
        self.assertEqual(settings.mongo_db_name, "catalog")
        self.assertEqual(settings.port, 9100)
        self.assertEqual(settings.log_level, "debug")
        self.assertTrue(settings.use_in_memory_backends)


if __name__ == "__main__":
    unittest.main()
