"""Tests for JSON log formatting."""

import io
import json
import logging
import sys
import unittest
from unittest.mock import patch

from utils.logging import JSONFormatter, setup_structured_logging


class TestJSONFormatter(unittest.TestCase):
    """Test JSONFormatter output."""

    def _record(self, **extra):
        record = logging.LogRecord(
            name="adapter.external.free_dictionary", level=logging.WARNING, pathname=__file__,
            lineno=1, msg="Free Dictionary API returned non-200 status", args=(), exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_standard_fields(self):
        data = json.loads(JSONFormatter().format(self._record()))

        self.assertEqual(data["level"], "WARNING")
        self.assertEqual(data["logger"], "adapter.external.free_dictionary")
        self.assertEqual(data["message"], "Free Dictionary API returned non-200 status")
        self.assertTrue(data["timestamp"].endswith("Z"))

    def test_extra_fields_included(self):
        data = json.loads(JSONFormatter().format(self._record(word="run", status_code=404)))

        self.assertEqual(data["word"], "run")
        self.assertEqual(data["status_code"], 404)
        self.assertNotIn("pathname", data)

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        self.assertIn("ValueError: boom", data["exception"])


class TestSetupStructuredLogging(unittest.TestCase):
    """Test root logger configuration."""

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, root.handlers[:])

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers = self._saved[1]

    def test_level_argument(self):
        stream = io.StringIO()
        setup_structured_logging(level="warning", stream=stream)

        logging.getLogger("test.structured").info("hidden")
        logging.getLogger("test.structured").warning("shown", extra={"word": "run"})

        lines = stream.getvalue().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertEqual(json.loads(lines[0])["word"], "run")

    @patch.dict('os.environ', {"LOG_LEVEL": "DEBUG"}, clear=False)
    def test_level_from_env(self):
        setup_structured_logging(stream=io.StringIO())
        self.assertEqual(logging.getLogger().level, logging.DEBUG)


if __name__ == '__main__':
    unittest.main()
