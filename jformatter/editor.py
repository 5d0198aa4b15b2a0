"""Source-editor helpers: error-line spans, highlight segments and the gutter."""
from __future__ import annotations

from typing import List, Optional, Tuple

ERROR_LABEL = "error"


def line_span(text: str, line: int) -> Optional[Tuple[int, int]]:
    """Return (start, end) character offsets of a zero-based line.

    `end` excludes the line's newline. Returns None for negative lines and
    lines past the end of the text.
    """
    if text is None or line is None or line < 0:
        return None

    start = 0
    for _ in range(line):
        newline = text.find("\n", start)
        if newline == -1:
            return None
        start = newline + 1

    end = text.find("\n", start)
    if end == -1:
        end = len(text)
    return start, end


def highlight_segments(text: str, line: int) -> List[Tuple[str, Optional[str]]]:
    """Split the source into segments with the error line labeled."""
    if not text:
        return []
    span = line_span(text, line)
    if span is None:
        return [(text, None)]

    start, end = span
    segments: List[Tuple[str, Optional[str]]] = []
    if start > 0:
        segments.append((text[:start], None))
    # An empty line still gets a visible marker.
    segments.append((text[start:end] or " ", ERROR_LABEL))
    if end < len(text):
        segments.append((text[end:], None))
    return segments


def line_numbers(text: str) -> str:
    count = (text or "").count("\n") + 1
    return "\n".join(f"  {n}  " for n in range(1, count + 1))
