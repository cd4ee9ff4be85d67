"""Unit tests for journal_markdown.stages.headers."""

import pytest

from journal_markdown import convert_headers


class TestConvertHeaders:
    """Test cases for convert_headers."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_converts_every_level(self, level):
        """Each run of 1-6 # characters maps to the matching heading."""
        assert convert_headers("#" * level + " text") == f"<h{level}>text</h{level}>"

    def test_seven_hashes_not_converted(self):
        """More than six # characters is not a header."""
        assert convert_headers("####### text") == "####### text"

    def test_requires_space_after_hashes(self):
        """'#tag' is plain text."""
        assert convert_headers("#tag") == "#tag"

    def test_hash_inside_line_not_converted(self):
        """Only a leading # starts a header."""
        assert convert_headers("Issue # 42") == "Issue # 42"

    def test_handles_multiple_headers(self):
        """Every line is checked independently."""
        text = "# Title\n## Subtitle"
        assert convert_headers(text) == "<h1>Title</h1>\n<h2>Subtitle</h2>"

    def test_header_text_kept_verbatim(self):
        """Inline markup in the header is left for later stages."""
        assert convert_headers("## **Bold** title") == "<h2>**Bold** title</h2>"
