from __future__ import annotations

from typing import Any, Dict

import gradio as gr

from .controller import convert
from .editor import highlight_segments, line_numbers, line_span


def hidden_highlight():
    return gr.update(value=None, visible=False)


def convert_handler(source_text, format_name):
    """Convert button callback.

    Returns updates for the destination editor and the error highlight view.
    Blank input leaves both untouched.
    """
    outcome: Dict[str, Any] = {}

    def on_success(text):
        outcome["text"] = text

    def on_error(message, line, column):
        outcome["error"] = (message, line, column)

    convert(source_text, format_name, on_success, on_error)

    if "text" in outcome:
        return gr.update(value=outcome["text"]), hidden_highlight()

    if "error" in outcome:
        message, line, _ = outcome["error"]
        if line_span(source_text, line) is None:
            return gr.update(value=message), hidden_highlight()
        segments = highlight_segments(source_text, line)
        return gr.update(value=message), gr.update(value=segments, visible=True)

    return gr.update(), gr.update()


def source_changed_handler(source_text):
    """Refresh the gutter and drop any stale error highlight."""
    return line_numbers(source_text), hidden_highlight()
