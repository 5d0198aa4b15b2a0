"""Tests for source-editor helpers."""

from jformatter.editor import ERROR_LABEL, highlight_segments, line_numbers, line_span


class TestLineSpan:
    """Tests for line offset computation."""

    def test_middle_line(self) -> None:
        assert line_span("ab\ncd\nef", 1) == (3, 5)

    def test_first_and_last_lines(self) -> None:
        assert line_span("ab\ncd\nef", 0) == (0, 2)
        assert line_span("ab\ncd\nef", 2) == (6, 8)

    def test_empty_trailing_line(self) -> None:
        assert line_span("ab\n", 1) == (3, 3)

    def test_out_of_range(self) -> None:
        """Test unknown or missing lines have no span."""
        assert line_span("ab\ncd", 2) is None
        assert line_span("ab\ncd", -1) is None


class TestHighlightSegments:
    """Tests for the highlighted source view."""

    def test_labels_error_line(self) -> None:
        """Test only the error line carries the label."""
        assert highlight_segments("ab\ncd\nef", 1) == [
            ("ab\n", None),
            ("cd", ERROR_LABEL),
            ("\nef", None),
        ]

    def test_first_line(self) -> None:
        assert highlight_segments("{\"a\": }", 0) == [("{\"a\": }", ERROR_LABEL)]

    def test_empty_line_gets_marker(self) -> None:
        assert highlight_segments("a\n\nb", 1)[1] == (" ", ERROR_LABEL)

    def test_unknown_line(self) -> None:
        """Test no label is applied without a position."""
        assert highlight_segments("ab", -1) == [("ab", None)]
        assert highlight_segments("", 0) == []


class TestLineNumbers:
    """Tests for the gutter text."""

    def test_one_row_per_line(self) -> None:
        assert line_numbers("a\nb\nc") == "  1  \n  2  \n  3  "

    def test_empty_text_has_one_row(self) -> None:
        assert line_numbers("") == "  1  "
        assert line_numbers(None) == "  1  "
