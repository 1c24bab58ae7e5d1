"""Tests for the legend script parser."""

import pytest

from legend.legend_exceptions import LegendParseError
from legend.legend_parser import LegendParser
from legend.legend_types import (
    DeleteOperation,
    InsertOperation,
    LegendOperationType,
    ReplaceOperation,
)


class TestLegendParserBasic:
    """Test parsing each directive."""

    def test_parse_delete(self, parser):
        """Test parsing a delete directive."""
        operations = parser.parse("D-console.log('debug');")

        assert operations == [DeleteOperation("console.log('debug');")]
        assert operations[0].type == LegendOperationType.DELETE
        assert operations[0].target == "console.log('debug');"

    def test_parse_replace(self, parser):
        """Test parsing a replace directive with continuation lines."""
        operations = parser.parse("M-return a;\nM+-const b = a * 2;\nM+-return b;")

        assert operations == [
            ReplaceOperation(("return a;",), ("const b = a * 2;", "return b;"))
        ]
        assert operations[0].target == "return a;"

    def test_parse_insert(self, parser):
        """Test parsing an insert directive with continuation lines."""
        operations = parser.parse("AF+import os\nNAD+import sys\nNAD+import re")

        assert operations == [InsertOperation("import os", ("import sys", "import re"))]
        assert operations[0].type == LegendOperationType.INSERT

    def test_parse_mixed_script(self, parser):
        """Test the three directives together."""
        script = "D-bar\nM-foo\nM+-newfoo\nAF+newfoo\nNAD+tail"

        operations = parser.parse(script)

        assert operations == [
            DeleteOperation("bar"),
            ReplaceOperation(("foo",), ("newfoo",)),
            InsertOperation("newfoo", ("tail",))
        ]

    def test_parse_lines(self, parser):
        """Test parsing a pre-split list of lines."""
        operations = parser.parse_lines(["D-a", "D-b"])

        assert operations == [DeleteOperation("a"), DeleteOperation("b")]


class TestLegendParserWhitespace:
    """Test trimming of directives and content."""

    def test_content_trimmed(self, parser):
        """Test that captured content loses surrounding whitespace."""
        operations = parser.parse("D-   x = 1;   ")

        assert operations == [DeleteOperation("x = 1;")]

    def test_indented_directives(self, parser):
        """Test that directives are recognised after leading whitespace."""
        script = "   M-  old  \n\tM+-   new one\n  AF+ anchor\n    NAD+ added  "

        operations = parser.parse(script)

        assert operations == [
            ReplaceOperation(("old",), ("new one",)),
            InsertOperation("anchor", ("added",))
        ]

    def test_empty_continuation_line(self, parser):
        """Test that a bare continuation prefix inserts an empty line."""
        operations = parser.parse("AF+anchor\nNAD+\nNAD+next")

        assert operations == [InsertOperation("anchor", ("", "next"))]

    def test_windows_line_endings(self, parser):
        """Test that carriage returns are trimmed with the rest of the whitespace."""
        operations = parser.parse("D-a\r\nM-b\r\nM+-c\r\n")

        assert operations == [DeleteOperation("a"), ReplaceOperation(("b",), ("c",))]


class TestLegendParserEdgeCases:
    """Test permissive handling and continuation boundaries."""

    def test_replace_without_continuations(self, parser):
        """Test that a lone M- gives a replace with no new lines."""
        operations = parser.parse("M-remove me")

        assert operations == [ReplaceOperation(("remove me",), ())]

    def test_insert_without_continuations(self, parser):
        """Test that a lone AF+ gives an insert with no new lines."""
        operations = parser.parse("AF+anchor\nD-x")

        assert operations == [InsertOperation("anchor", ()), DeleteOperation("x")]

    def test_continuations_stop_at_other_line(self, parser):
        """Test that a blank line ends a block of continuation lines."""
        operations = parser.parse("M-a\nM+-b\n\nM+-c")

        assert operations == [ReplaceOperation(("a",), ("b",))]

    def test_wrong_continuation_prefix_ends_block(self, parser):
        """Test that insert continuations don't extend a replace."""
        operations = parser.parse("M-a\nNAD+b\nAF+c\nM+-d")

        assert operations == [
            ReplaceOperation(("a",), ()),
            InsertOperation("c", ())
        ]

    def test_unrecognised_lines_skipped(self, parser):
        """Test that unrecognised lines produce nothing and don't stop parsing."""
        script = "# comment\nrandom text\nD-keep going\nX-unknown\nD-last"

        operations = parser.parse(script)

        assert operations == [DeleteOperation("keep going"), DeleteOperation("last")]

    def test_only_unrecognised_lines(self, parser):
        """Test a script with nothing to parse."""
        assert parser.parse("hello\nworld") == []

    def test_empty_script(self, parser):
        """Test parsing an empty script."""
        assert parser.parse("") == []

    def test_operations_are_immutable(self, parser):
        """Test that parsed operations can't be modified."""
        operation = parser.parse("D-a")[0]

        with pytest.raises(AttributeError):
            operation.content = "b"


class TestLegendParserStrict:
    """Test strict parsing."""

    def test_strict_rejects_unrecognised_line(self):
        """Test that strict mode raises with the offending line."""
        parser = LegendParser(strict=True)

        with pytest.raises(LegendParseError) as exc_info:
            parser.parse("D-a\nnonsense\nD-b")

        assert exc_info.value.error_details['line_number'] == 2
        assert exc_info.value.error_details['line'] == "nonsense"

    def test_strict_allows_blank_lines(self):
        """Test that blank lines are fine in strict mode."""
        parser = LegendParser(strict=True)

        operations = parser.parse("D-a\n\n   \nD-b\n")

        assert operations == [DeleteOperation("a"), DeleteOperation("b")]
