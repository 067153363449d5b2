# src/log2u/message.py
"""
The per-call message record and its rendering.
"""

from dataclasses import dataclass

from log2u.colors import wrap
from log2u.constants import DEFAULT_FORMAT, STACK_FORMAT
from log2u.helpers import format_now


@dataclass
class Message:
    """
    One log line before rendering.

    `id` is the Logger's counter at call time. `file` and `line` are empty
    strings when call-site capture is off for the call.
    """

    text: str
    tag: str
    color: int
    id: int
    file: str = ""
    line: str = ""

    def render(self, stack: bool, color: bool, rich: bool, time_format: str) -> str:
        """Return the line ready for the sink, trailing newline included."""
        date = format_now(time_format)

        # Plain mode: raw text only, never colorized
        if not rich:
            return self.text + "\n"

        template = STACK_FORMAT if stack else DEFAULT_FORMAT
        rendered = template.format(
            id=self.id,
            date=date,
            file=self.file,
            line=self.line,
            tag=self.tag,
            text=self.text,
        )

        if color:
            rendered = wrap(rendered, self.color)
        return rendered
