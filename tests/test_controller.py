"""Tests for the convert controller."""

import pytest

from jformatter import controller
from jformatter.controller import convert


class Recorder:
    """Collects controller callbacks."""

    def __init__(self):
        self.successes = []
        self.errors = []

    def on_success(self, text):
        self.successes.append(text)

    def on_error(self, message, line, column):
        self.errors.append((message, line, column))


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


class TestConvert:
    """Tests for convert dispatch."""

    def test_success_callback(self, recorder: Recorder) -> None:
        """Test formatted text goes to on_success only."""
        convert('{"a":1}', "JSON", recorder.on_success, recorder.on_error)

        assert recorder.successes == ['{\n  "a": 1\n}\n']
        assert recorder.errors == []

    def test_error_callback(self, recorder: Recorder) -> None:
        """Test parse errors go to on_error with zero-based positions."""
        convert("<r><a></b></r>", "XML", recorder.on_success, recorder.on_error)

        assert recorder.successes == []
        assert len(recorder.errors) == 1
        message, line, column = recorder.errors[0]
        assert "mismatched tag" in message
        assert line == 0
        assert column >= 0

    @pytest.mark.parametrize("text", ["", "   \n\t", None])
    def test_blank_input_fires_nothing(self, recorder: Recorder, text) -> None:
        """Test blank input is ignored silently."""
        convert(text, "JSON", recorder.on_success, recorder.on_error)

        assert recorder.successes == []
        assert recorder.errors == []

    def test_unknown_format_propagates(self, recorder: Recorder) -> None:
        """Test an unknown format name is not turned into a callback."""
        with pytest.raises(ValueError):
            convert("a", "TOML", recorder.on_success, recorder.on_error)

        assert recorder.errors == []

    def test_unexpected_errors_propagate(self, recorder: Recorder, monkeypatch) -> None:
        """Test failures outside the parse path reach the caller."""

        def broken(text):
            raise RuntimeError("boom")

        monkeypatch.setattr(controller, "get_formatter", lambda name: broken)

        with pytest.raises(RuntimeError, match="boom"):
            convert("a", "JSON", recorder.on_success, recorder.on_error)

    def test_each_call_is_independent(self, recorder: Recorder) -> None:
        """Test a failure does not affect the next call."""
        convert("a: [", "YAML", recorder.on_success, recorder.on_error)
        convert("a: 1\n", "YAML", recorder.on_success, recorder.on_error)

        assert len(recorder.errors) == 1
        assert recorder.successes == ["a: 1\n"]
