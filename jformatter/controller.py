from __future__ import annotations

import logging
from typing import Callable, Optional

from .registry import get_formatter

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[str], None]
ErrorCallback = Callable[[str, int, int], None]


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def convert(
    source_text: str,
    selected_name: str,
    on_success: SuccessCallback,
    on_error: ErrorCallback,
) -> None:
    """Format the source text and report the outcome through one callback.

    Blank input fires neither callback. Parse failures go to `on_error` with a
    zero-based line and column (-1 when unknown); any other exception, an
    unknown format name included, propagates to the caller.
    """
    if _is_blank(source_text):
        logger.debug("Ignoring convert request with blank input")
        return

    formatter = get_formatter(selected_name)
    result = formatter(source_text)

    if result.ok:
        logger.info("Formatted %d characters as %s", len(source_text), selected_name)
        on_success(result.text)
        return

    error = result.error
    logger.info(
        "%s input rejected at line %d, column %d (%s): %s",
        selected_name,
        error.line,
        error.column,
        type(error.cause).__name__ if error.cause is not None else "unknown",
        error.message,
    )
    on_error(error.message, error.line, error.column)
