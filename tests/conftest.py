"""Shared fixtures for the journal_markdown test suite."""

import pytest
from bs4 import BeautifulSoup


@pytest.fixture
def parse_html():
    """Parse an HTML fragment with the stdlib-backed html.parser."""

    def _parse(html):
        return BeautifulSoup(html, "html.parser")

    return _parse
