"""
Tests for the demo entry point.
"""

import io
import json
import os
import re
import tempfile
import unittest
from unittest.mock import patch

from log2u.demo import main


@patch.dict(os.environ, {}, clear=True)
class TestDemo(unittest.TestCase):

    def test_demo_without_color(self):
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = main(["--no-color", "--time-format", "%Y"])
        self.assertEqual(code, 0)
        text = out.getvalue()
        self.assertNotIn("\x1b[", text)
        ids = [int(i) for i in re.findall(r"^> #(\d+) ", text, re.M)]
        self.assertEqual(ids, list(range(1, 15)))
        self.assertEqual(text.count("DBG >"), 2)
        self.assertIn("CUS > This is a custom message with a string", text)

    def test_demo_debug_lines_point_at_demo(self):
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            main(["--no-color", "--time-format", "%Y"])
        debug_lines = [line for line in out.getvalue().splitlines() if "DBG >" in line]
        self.assertEqual(len(debug_lines), 2)
        for line in debug_lines:
            self.assertRegex(line, r"ON .*demo\.py:\d+ ⇒  DBG > ")

    def test_demo_plain(self):
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = main(["--plain"])
        self.assertEqual(code, 0)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 14)
        self.assertEqual(lines[0], "This is an info message")

    def test_demo_bad_settings(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bad.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"rich": "sometimes"}, f)
            with patch("sys.stderr", new_callable=io.StringIO):
                code = main(["--settings", path])
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
