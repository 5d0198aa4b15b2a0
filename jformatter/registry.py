from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping

from .errors import FormatResult
from .json_format import format_json
from .xml_format import format_xml
from .yaml_format import format_yaml

Formatter = Callable[[str], FormatResult]


class FormatName(str, Enum):
    JSON = "JSON"
    XML = "XML"
    YAML = "YAML"


FORMATTERS: Mapping[str, Formatter] = MappingProxyType({
    FormatName.JSON.value: format_json,
    FormatName.XML.value: format_xml,
    FormatName.YAML.value: format_yaml,
})


def get_formatter(name: str) -> Formatter:
    """Get the formatter registered under a format name.

    Raises:
        ValueError: If the name is not a supported format.
    """
    if isinstance(name, FormatName):
        name = name.value
    if name not in FORMATTERS:
        raise ValueError(f"Unknown format: {name}")
    return FORMATTERS[name]


def list_formats() -> List[str]:
    """Supported format names, in the order the selector shows them."""
    return list(FORMATTERS)
