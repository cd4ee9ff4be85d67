"""Unit tests for journal_markdown.stages.blockquotes."""

import pytest

from journal_markdown import convert_blockquotes


class TestBlockquotes:
    """Test cases for plain blockquotes."""

    def test_converts_simple_blockquote(self):
        assert convert_blockquotes("> Quote") == "<blockquote>Quote</blockquote>"

    def test_converts_multi_line_blockquote(self):
        assert convert_blockquotes("> Line 1\n> Line 2") == "<blockquote>Line 1<br>Line 2</blockquote>"

    def test_marker_without_space(self):
        assert convert_blockquotes(">tight") == "<blockquote>tight</blockquote>"

    def test_plain_line_closes_run(self):
        text = "> a\nplain\n> b"
        assert convert_blockquotes(text) == "<blockquote>a</blockquote>\nplain\n<blockquote>b</blockquote>"


class TestAlerts:
    """Test cases for [!TYPE] alert blockquotes."""

    def test_converts_note_alert(self):
        text = convert_blockquotes("> [!NOTE]\n> This is a note")
        assert 'class="note"' in text
        assert "NOTE:" in text
        assert text == '<p class="note">ℹ️ <strong>NOTE:</strong> This is a note</p>'

    @pytest.mark.parametrize("alert", ["NOTE", "TIP", "IMPORTANT", "WARNING", "CAUTION"])
    def test_every_alert_type(self, alert):
        text = convert_blockquotes(f"> [!{alert}]\n> body")
        assert text == f'<p class="{alert.lower()}">ℹ️ <strong>{alert}:</strong> body</p>'

    def test_text_after_marker_is_first_line(self):
        text = convert_blockquotes("> [!TIP] Inline text\n> more")
        assert text == '<p class="tip">ℹ️ <strong>TIP:</strong> Inline text<br>more</p>'

    def test_lowercase_marker_is_content(self):
        assert convert_blockquotes("> [!note]\n> x") == "<blockquote>[!note]<br>x</blockquote>"

    def test_unknown_marker_is_content(self):
        assert convert_blockquotes("> [!DANGER] x") == "<blockquote>[!DANGER] x</blockquote>"

    def test_marker_on_later_line_ignored(self):
        text = convert_blockquotes("> first\n> [!WARNING]")
        assert text == "<blockquote>first<br>[!WARNING]</blockquote>"

    def test_alert_type_fixed_by_first_line(self):
        """A second marker after a bare first-line marker stays content."""
        text = convert_blockquotes("> [!NOTE]\n> [!TIP]\n> body")
        assert text == '<p class="note">ℹ️ <strong>NOTE:</strong> [!TIP]<br>body</p>'

    def test_alert_does_not_leak_into_next_quote(self):
        text = convert_blockquotes("> [!NOTE]\n> a\n\n> b")
        assert text == '<p class="note">ℹ️ <strong>NOTE:</strong> a</p>\n\n<blockquote>b</blockquote>'
