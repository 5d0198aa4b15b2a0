from __future__ import annotations

import json
import logging

from .errors import FormatResult, from_json_error, from_unpositioned_error

logger = logging.getLogger(__name__)

INDENT = 2


def parse_json(text: str):
    """Parse JSON text into plain Python values, keeping object key order."""
    return json.loads(text)


def render_json(value) -> str:
    return json.dumps(value, indent=INDENT, ensure_ascii=False) + "\n"


def format_json(text: str) -> FormatResult:
    """Pretty-print JSON text, or describe where it stops being valid JSON."""
    logger.debug("Formatting %d characters as JSON", len(text))
    try:
        return FormatResult.success(render_json(parse_json(text)))
    except json.JSONDecodeError as e:
        return FormatResult.failure(from_json_error(e))
    except RecursionError as e:
        # Nesting deeper than the interpreter's recursion limit.
        return FormatResult.failure(from_unpositioned_error(e))
