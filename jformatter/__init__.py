"""Core logic for jFormatter.

The Gradio UI lives in `app.py`. This package contains the pieces it drives:
- one pretty-printing function per format (JSON, XML, YAML)
- a read-only registry of those functions keyed by format name
- parse-error normalization into zero-based (line, column) positions
- the convert controller and source-editor helpers
"""
