"""Unit tests for journal_markdown.stages.lists."""

from journal_markdown import convert_ordered_lists, convert_unordered_lists


class TestUnorderedLists:
    """Test cases for convert_unordered_lists."""

    def test_converts_dash_items(self):
        assert convert_unordered_lists("- Item 1\n- Item 2") == "<ul><li>Item 1</li><li>Item 2</li></ul>"

    def test_converts_star_items(self):
        assert convert_unordered_lists("* Item 1\n* Item 2") == "<ul><li>Item 1</li><li>Item 2</li></ul>"

    def test_following_line_closes_run(self):
        """The closing line comes after </ul> on its own line."""
        assert convert_unordered_lists("- a\n- b\nafter") == "<ul><li>a</li><li>b</li></ul>\nafter"

    def test_preceding_line_kept(self):
        assert convert_unordered_lists("before\n- a") == "before\n<ul><li>a</li></ul>"

    def test_blank_line_splits_runs(self):
        text = "- a\n\n- b"
        assert convert_unordered_lists(text) == "<ul><li>a</li></ul>\n\n<ul><li>b</li></ul>"

    def test_nested_item_left_as_text(self):
        """Indented items are not list lines."""
        assert convert_unordered_lists("- a\n  - b") == "<ul><li>a</li></ul>\n  - b"

    def test_marker_requires_whitespace(self):
        assert convert_unordered_lists("-a") == "-a"

    def test_items_parse_as_list_elements(self, parse_html):
        soup = parse_html(convert_unordered_lists("- one\n- two\n- three"))
        assert [li.get_text() for li in soup.find("ul").find_all("li")] == ["one", "two", "three"]


class TestOrderedLists:
    """Test cases for convert_ordered_lists."""

    def test_converts_numbered_items(self):
        assert convert_ordered_lists("1. First\n2. Second") == "<ol><li>First</li><li>Second</li></ol>"

    def test_number_value_discarded(self):
        assert convert_ordered_lists("10. ten\n3. three") == "<ol><li>ten</li><li>three</li></ol>"

    def test_ignores_unordered_items(self):
        assert convert_ordered_lists("- a") == "- a"

    def test_different_list_types_not_merged(self):
        """Adjacent runs of different types produce two lists."""
        text = convert_ordered_lists(convert_unordered_lists("- a\n1. b"))
        assert text == "<ul><li>a</li></ul>\n<ol><li>b</li></ol>"
