from __future__ import annotations

import io
import json
import logging
import os
import unittest
from unittest.mock import patch

import treeconcat
from treeconcat.logging.factory import DefaultLoggerFactory
from treeconcat.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    is_trace_io_enabled,
    setup_base_logger,
    trace_io,
)


class LoggingHelpersTests(unittest.TestCase):
    def tearDown(self) -> None:
        base = logging.getLogger("treeconcat")
        for handler in list(base.handlers):
            base.removeHandler(handler)

    def test_get_logger_namespacing(self) -> None:
        self.assertEqual(get_logger().name, "treeconcat")
        self.assertEqual(get_logger("treeconcat").name, "treeconcat")
        self.assertEqual(get_logger("io.walker").name, "treeconcat.io.walker")
        self.assertEqual(get_logger("treeconcat.io.ignore").name, "treeconcat.io.ignore")

    def test_plain_text_format(self) -> None:
        stream = io.StringIO()
        setup_base_logger(stream=stream)
        get_logger("io.walker").error("⚠  could not read %s", "x.txt")
        self.assertEqual(stream.getvalue(), "ERROR: ⚠  could not read x.txt\n")

    def test_json_format_fields(self) -> None:
        stream = io.StringIO()
        setup_base_logger(json_logs=True, stream=stream)
        get_logger("io.reader").warning("skipped %d", 3, extra={"context": {"path": "a.bin"}})
        payload = json.loads(stream.getvalue())
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["module"], "treeconcat.io.reader")
        self.assertEqual(payload["msg"], "skipped 3")
        self.assertEqual(payload["version"], treeconcat.__version__)
        self.assertEqual(payload["ctx"], {"path": "a.bin"})
        self.assertTrue(payload["ts"].endswith("Z"))

    def test_reconfigure_replaces_handler(self) -> None:
        setup_base_logger(stream=io.StringIO())
        base = setup_base_logger(stream=io.StringIO(), level=logging.DEBUG)
        self.assertEqual(len(base.handlers), 1)
        self.assertEqual(base.level, logging.DEBUG)
        self.assertFalse(base.propagate)

    def test_trace_io_is_gated_by_env(self) -> None:
        stream = io.StringIO()
        setup_base_logger(stream=stream, level=logging.DEBUG)
        log = get_logger("io.reader")
        with patch.dict(os.environ, {"TREECONCAT_TRACE_IO": "0"}):
            self.assertFalse(is_trace_io_enabled())
            trace_io(log, "read", path="a.txt")
        self.assertEqual(stream.getvalue(), "")
        with patch.dict(os.environ, {"TREECONCAT_TRACE_IO": "1"}):
            trace_io(log, "read", path="a.txt")
        self.assertIn("read | ctx={'path': 'a.txt'}", stream.getvalue())

    def test_factory_configures_lazily(self) -> None:
        stream = io.StringIO()
        factory = DefaultLoggerFactory(json_logs=True, stream=stream)
        lg = factory.get_logger("cli")
        self.assertEqual(lg.name, "treeconcat.cli")
        lg.info("hello")
        self.assertEqual(json.loads(stream.getvalue())["msg"], "hello")
        self.assertIsInstance(logging.getLogger("treeconcat").handlers[0].formatter, JsonLogFormatter)


if __name__ == "__main__":
    unittest.main(verbosity=2)
