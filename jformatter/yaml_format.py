from __future__ import annotations

import logging

import yaml

from .errors import FormatResult, from_unpositioned_error, from_yaml_error

logger = logging.getLogger(__name__)

INDENT = 2


def parse_yaml(text: str):
    """Parse a single YAML document.

    Streams holding more than one document are rejected by the loader.
    """
    return yaml.safe_load(text)


def render_yaml(value) -> str:
    return yaml.safe_dump(
        value,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=INDENT,
    )


def format_yaml(text: str) -> FormatResult:
    logger.debug("Formatting %d characters as YAML", len(text))
    try:
        return FormatResult.success(render_yaml(parse_yaml(text)))
    except yaml.YAMLError as e:
        return FormatResult.failure(from_yaml_error(e, text))
    except RecursionError as e:
        return FormatResult.failure(from_unpositioned_error(e))
