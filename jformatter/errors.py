from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple
from xml.parsers.expat import ErrorString

UNKNOWN_POSITION = -1

_EXPAT_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class FormatError:
    """A parse failure in a shape the UI can consume.

    `line` and `column` are zero-based, or both UNKNOWN_POSITION when the
    parser did not report where it stopped.
    """

    message: str
    line: int = UNKNOWN_POSITION
    column: int = UNKNOWN_POSITION
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @property
    def has_position(self) -> bool:
        return self.line >= 0


@dataclass(frozen=True)
class FormatResult:
    text: Optional[str] = None
    error: Optional[FormatError] = None

    def __post_init__(self):
        if (self.text is None) == (self.error is None):
            raise ValueError("FormatResult needs exactly one of text or error.")

    @classmethod
    def success(cls, text: str) -> "FormatResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: FormatError) -> "FormatResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


def one_line(text: str) -> str:
    """Collapse a (possibly multi-line) diagnostic into a single line."""
    if text is None:
        return ''
    return re.sub(r'\s+', ' ', str(text)).strip()


def zero_based(reported: Optional[int]) -> int:
    if reported is None or reported < 1:
        return UNKNOWN_POSITION
    return reported - 1


def _positioned(message: str, line: int, column: int, cause: BaseException) -> FormatError:
    # A column without a line cannot be highlighted, so both go unknown together.
    if line < 0:
        line, column = UNKNOWN_POSITION, UNKNOWN_POSITION
    elif column < 0:
        column = UNKNOWN_POSITION
    return FormatError(message=one_line(message), line=line, column=column, cause=cause)


def position_at(text: str, index: int) -> Tuple[int, int]:
    """Zero-based (line, column) of a character index, lines split on '\\n'."""
    index = max(0, min(index, len(text)))
    line = text.count("\n", 0, index)
    column = index - (text.rfind("\n", 0, index) + 1)
    return line, column


def _expat_index(text: str, lineno: int, offset: int) -> int:
    # Expat breaks lines on '\r\n', '\r' and '\n' and counts columns in characters.
    starts = [0] + [m.end() for m in _EXPAT_LINE_BREAK.finditer(text)]
    if lineno - 1 >= len(starts):
        return len(text)
    start = starts[lineno - 1]
    match = _EXPAT_LINE_BREAK.search(text, start)
    end = match.start() if match else len(text)
    return min(start + max(offset, 0), end)


def from_json_error(exc) -> FormatError:
    """Normalize a json.JSONDecodeError (one-based lineno/colno)."""
    return _positioned(str(exc), zero_based(exc.lineno), zero_based(exc.colno), exc)


def from_expat_error(exc, text: Optional[str] = None) -> FormatError:
    """Normalize an xml.parsers.expat.ExpatError.

    Expat reports a one-based line and a zero-based column in characters,
    both counted with its own line breaks. Given the source text, the position
    is recomputed against lines split on '\\n'.
    """
    lineno = getattr(exc, 'lineno', None)
    offset = getattr(exc, 'offset', None)
    if lineno is None or lineno < 1:
        return from_unpositioned_error(exc)

    if text is None:
        line = zero_based(lineno)
        column = offset if offset is not None and offset >= 0 else UNKNOWN_POSITION
    else:
        line, column = position_at(text, _expat_index(text, lineno, offset or 0))

    code = getattr(exc, 'code', None)
    reason = ErrorString(code) if code is not None else str(exc)
    message = f"{reason}: line {line + 1}, column {column}"
    return _positioned(message, line, column, exc)


def from_yaml_error(exc, text: Optional[str] = None) -> FormatError:
    """Normalize a yaml.YAMLError.

    Marks are zero-based; given the source text, the mark's character index is
    used so lines are split on '\\n' only.
    """
    mark = getattr(exc, 'problem_mark', None) or getattr(exc, 'context_mark', None)
    if mark is None:
        return from_unpositioned_error(exc)

    if text is None or getattr(mark, 'index', None) is None:
        line, column = mark.line, mark.column
    else:
        line, column = position_at(text, mark.index)

    parts = [getattr(exc, 'context', None), getattr(exc, 'problem', None)]
    problem = ", ".join(p for p in parts if p) or type(exc).__name__
    message = f"{problem} (line {line + 1}, column {column + 1})"
    return _positioned(message, line, column, exc)


def from_unpositioned_error(exc) -> FormatError:
    message = str(exc) or type(exc).__name__
    return FormatError(message=one_line(message), cause=exc)
