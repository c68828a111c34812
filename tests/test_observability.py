import logging
import unittest
from unittest import mock

from satcom.observability import Metrics, get_logger
from satcom.observability.logger import EventFormatter, resolve_level


class TestLogger(unittest.TestCase):
    def test_level_names(self):
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" ERROR "), logging.ERROR)
        self.assertEqual(resolve_level(None), logging.WARNING)
        self.assertEqual(resolve_level("chatty"), logging.INFO)

    def test_single_handler_and_env_level(self):
        with mock.patch.dict("os.environ", {"SATCOM_LOG_LEVEL": "DEBUG"}):
            logger = get_logger("satcom.test.observability")
            again = get_logger("satcom.test.observability")
        self.assertIs(logger, again)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)


class TestEventFormatter(unittest.TestCase):
    def setUp(self):
        self.formatter = EventFormatter("%(name)s | %(levelname)s | %(message)s")

    def test_extra_fields_are_appended(self):
        record = logging.makeLogRecord({
            "name": "satcom.publisher.gs",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "request_rejected",
            "subscriber_id": 327,
            "code": "ALREADY_SUBSCRIBED",
        })
        self.assertEqual(
            self.formatter.format(record),
            "satcom.publisher.gs | INFO | request_rejected | subscriber_id=327 code=ALREADY_SUBSCRIBED",
        )

    def test_plain_record_is_unchanged(self):
        record = logging.makeLogRecord({
            "name": "satcom.config",
            "levelno": logging.WARNING,
            "levelname": "WARNING",
            "msg": "hello",
        })
        self.assertEqual(self.formatter.format(record), "satcom.config | WARNING | hello")


class TestMetrics(unittest.TestCase):
    def test_counters_and_gauges(self):
        metrics = Metrics()
        metrics.increment("a")
        metrics.increment("a", 2)
        metrics.set_gauge("g", 5)
        self.assertEqual(metrics.get_counter("a"), 3)
        self.assertEqual(metrics.get_counter("missing"), 0)
        self.assertEqual(metrics.snapshot(), {"counters": {"a": 3}, "gauges": {"g": 5}})


if __name__ == "__main__":
    unittest.main()
