"""
Unit tests for the label mapping parser.
"""

import pytest

from label_reviewer.exceptions import FORMAT_HINT, FormatError
from label_reviewer.mapping.parser import MappingParser, parse_label_mappings


class TestMappingParser:
    """Unit tests for MappingParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = MappingParser()

    def test_parse_valid(self):
        """Test parsing multiple pairs."""
        result = self.parser.parse("label1:[reviewer1,reviewer2],label2:[reviewer3]")

        assert result == {
            "label1": ["reviewer1", "reviewer2"],
            "label2": ["reviewer3"],
        }

    def test_parse_trims_whitespace(self):
        """Test whitespace around labels, reviewers and separators."""
        result = parse_label_mappings(
            "label1:[reviewer1,reviewer2, reviewer 3], label2 :[ reviewer3 ]"
        )

        assert result == {
            "label1": ["reviewer1", "reviewer2", "reviewer 3"],
            "label2": ["reviewer3"],
        }

    def test_parse_drops_empty_reviewers(self):
        result = self.parser.parse("bug:[alice,,bob,]")
        assert result == {"bug": ["alice", "bob"]}

    def test_parse_keeps_duplicate_reviewers(self):
        result = self.parser.parse("bug:[alice,alice]")
        assert result == {"bug": ["alice", "alice"]}

    def test_parse_last_duplicate_label_wins(self):
        result = self.parser.parse("bug:[alice],bug:[bob,carol]")
        assert result == {"bug": ["bob", "carol"]}

    def test_parse_label_with_spaces_and_symbols(self):
        result = self.parser.parse("area/frontend:[alice],needs review:[bob]")
        assert result == {"area/frontend": ["alice"], "needs review": ["bob"]}

    def test_parse_reviewers_keep_order(self):
        result = self.parser.parse("bug:[carol,alice,bob]")
        assert result["bug"] == ["carol", "alice", "bob"]

    def test_format_invalid_without_brackets(self):
        """Test reviewers without brackets."""
        with pytest.raises(FormatError) as exc_info:
            self.parser.parse("label1:reviewer1")

        assert str(exc_info.value) == FORMAT_HINT

    def test_format_invalid_empty_input(self):
        with pytest.raises(FormatError, match="no valid pairs|Each pair must be"):
            self.parser.parse("")

    def test_format_invalid_no_pairs(self):
        with pytest.raises(FormatError):
            self.parser.parse("just some text")

    def test_reviewers_empty(self):
        """Test empty reviewer list is rejected."""
        with pytest.raises(FormatError) as exc_info:
            self.parser.parse("label1:[],label2:[reviewer1]")

        message = str(exc_info.value)
        assert message.startswith("reviewers must not be empty.")
        assert message.endswith(FORMAT_HINT)

    def test_reviewers_only_whitespace(self):
        with pytest.raises(FormatError, match="^reviewers must not be empty"):
            self.parser.parse("label1:[ , ]")

    def test_label_empty(self):
        """Test whitespace-only label is rejected."""
        with pytest.raises(FormatError) as exc_info:
            self.parser.parse("  :[reviewer1]")

        assert str(exc_info.value) == f"label must not be empty. {FORMAT_HINT}"

    def test_reviewers_not_starting_with_bracket(self):
        with pytest.raises(FormatError) as exc_info:
            self.parser.parse("label1:reviewer1]")

        assert str(exc_info.value) == FORMAT_HINT

    def test_first_malformed_pair_raises(self):
        """Test a malformed pair fails the whole parse."""
        with pytest.raises(FormatError):
            self.parser.parse("label1:[reviewer1],label2:[]")

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            self.parser.parse("label1:reviewer1")
