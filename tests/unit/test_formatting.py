"""Unit tests for bot reply formatting."""

import pytest

from src.ui.formatting import LineKind, classify_line, format_bot_text, render_bot_html


class TestClassifyLine:
    @pytest.mark.parametrize(
        ("line", "kind", "text"),
        [
            ("**Overview**", LineKind.HEADING, "Overview"),
            ("  **Step 1:** install  ", LineKind.HEADING, "Step 1: install"),
            ("- first item", LineKind.BULLET, "first item"),
            ("   -second", LineKind.BULLET, "second"),
            ("Just text", LineKind.PLAIN, "Just text"),
            ("a - b", LineKind.PLAIN, "a - b"),
            ("", LineKind.PLAIN, ""),
        ],
    )
    def test_prefix_classification(self, line: str, kind: LineKind, text: str) -> None:
        result = classify_line(line)

        assert result.kind is kind
        assert result.text == text


class TestFormatBotText:
    def test_splits_on_newlines(self) -> None:
        lines = format_bot_text("**Tips**\n- drink water\nSleep well")

        assert [line.kind for line in lines] == [
            LineKind.HEADING,
            LineKind.BULLET,
            LineKind.PLAIN,
        ]


class TestRenderBotHtml:
    def test_escapes_markup(self) -> None:
        html = render_bot_html("<script>alert(1)</script>")

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_renders_heading_and_bullet(self) -> None:
        html = render_bot_html("**Title**\n- item")

        assert '<h3 class="font-bold ml-2">Title</h3>' in html
        assert "<span>item</span>" in html
