"""Line-based formatting for bot replies.

Each line is classified by its prefix: ``**`` starts a heading, ``-``
starts a bullet, anything else is plain text.
"""

import html
from enum import Enum

from pydantic import BaseModel


class LineKind(str, Enum):
    HEADING = "heading"
    BULLET = "bullet"
    PLAIN = "plain"


class FormattedLine(BaseModel):
    kind: LineKind
    text: str


def classify_line(line: str) -> FormattedLine:
    """Classify a single line of bot output.

    Headings lose every ``**`` marker, bullets lose their leading dash.
    """
    stripped = line.strip()
    if stripped.startswith("**"):
        return FormattedLine(kind=LineKind.HEADING, text=stripped.replace("**", "").strip())
    if stripped.startswith("-"):
        return FormattedLine(kind=LineKind.BULLET, text=stripped[1:].strip())
    return FormattedLine(kind=LineKind.PLAIN, text=stripped)


def format_bot_text(text: str) -> list[FormattedLine]:
    return [classify_line(line) for line in text.split("\n")]


def render_bot_html(text: str) -> str:
    """Render a bot reply as HTML for the chat bubble."""
    parts: list[str] = []
    for index, line in enumerate(format_bot_text(text)):
        spacing = ' class="mt-2"' if index > 0 else ""
        content = html.escape(line.text)
        if line.kind is LineKind.HEADING:
            parts.append(f'<div{spacing}><h3 class="font-bold ml-2">{content}</h3></div>')
        elif line.kind is LineKind.BULLET:
            parts.append(
                f'<div{spacing}><div class="flex"><span class="mr-2">&bull;</span>'
                f"<span>{content}</span></div></div>"
            )
        else:
            parts.append(f"<div{spacing}>{content}</div>")
    return "".join(parts)
