"""
Tests for Message rendering.
"""

import unittest
from unittest.mock import patch

from log2u.colors import Color
from log2u.message import Message

FIXED_DATE = "2025-01-01 12:00:00"


@patch("log2u.message.format_now", return_value=FIXED_DATE)
class TestMessageRender(unittest.TestCase):

    def setUp(self):
        self.msg = Message(text="hello", tag="INF", color=Color.WHITE, id=7, file="/app/main.py", line="42")

    def test_default_template(self, _now):
        out = self.msg.render(stack=False, color=False, rich=True, time_format="%Y")
        self.assertEqual(out, "> #7 2025-01-01 12:00:00 ⇒  INF > hello\n")

    def test_stack_template(self, _now):
        out = self.msg.render(stack=True, color=False, rich=True, time_format="%Y")
        self.assertEqual(out, "> #7 2025-01-01 12:00:00 ⇒  ON /app/main.py:42 ⇒  INF > hello\n")

    def test_stack_template_with_empty_call_site(self, _now):
        msg = Message(text="x", tag="ERR", color=Color.RED, id=1)
        out = msg.render(stack=True, color=False, rich=True, time_format="%Y")
        self.assertEqual(out, "> #1 2025-01-01 12:00:00 ⇒  ON : ⇒  ERR > x\n")

    def test_color_wraps_whole_line(self, _now):
        out = self.msg.render(stack=False, color=True, rich=True, time_format="%Y")
        self.assertEqual(
            out,
            "\x1b[37m> #7 2025-01-01 12:00:00 ⇒  INF > hello\n\x1b[49m\x1b[0m",
        )

    def test_plain_output_ignores_color_and_stack(self, _now):
        for stack in (True, False):
            for color in (True, False):
                out = self.msg.render(stack=stack, color=color, rich=False, time_format="%Y")
                self.assertEqual(out, "hello\n")

    def test_text_is_not_escaped(self, _now):
        msg = Message(text="a ⇒ b > c {id}", tag="WAR", color=Color.YELLOW, id=3)
        out = msg.render(stack=False, color=False, rich=True, time_format="%Y")
        self.assertEqual(out, "> #3 2025-01-01 12:00:00 ⇒  WAR > a ⇒ b > c {id}\n")


class TestTimeFormat(unittest.TestCase):

    def test_time_format_passed_to_strftime(self):
        msg = Message(text="t", tag="INF", color=Color.WHITE, id=1)
        out = msg.render(stack=False, color=False, rich=True, time_format="literal")
        self.assertEqual(out, "> #1 literal ⇒  INF > t\n")


if __name__ == "__main__":
    unittest.main()
