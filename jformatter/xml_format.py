from __future__ import annotations

import io
import logging
from xml.dom import Node
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import escape

from defusedxml import DefusedXmlException
from defusedxml.minidom import parseString

from .errors import FormatResult, from_expat_error, from_unpositioned_error

logger = logging.getLogger(__name__)

INDENT = 2
DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_ATTRIBUTE_ENTITIES = {'"': '&quot;', '\n': '&#10;', '\r': '&#13;', '\t': '&#9;'}
_TEXT_ENTITIES = {'\r': '&#13;'}


def parse_xml(text: str):
    """Parse a well-formed XML document into a minidom Document.

    Entity declarations and external references are refused by defusedxml.
    """
    return parseString(text)


def _is_text(node) -> bool:
    return node.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE)


def _is_blank(node) -> bool:
    return node.nodeType == Node.TEXT_NODE and not node.data.strip()


def _is_block(element) -> bool:
    """True when the element holds child elements and no significant text.

    Block elements are laid out one child per line. Everything else (empty,
    text-only and mixed content) is written on a single line so text keeps its
    whitespace exactly.
    """
    children = element.childNodes
    if not any(child.nodeType == Node.ELEMENT_NODE for child in children):
        return False
    return all(_is_blank(child) or not _is_text(child) for child in children)


def _start_tag(element, empty: bool = False) -> str:
    parts = [element.tagName]
    for name, value in element.attributes.items():
        parts.append(f'{name}="{escape(value, _ATTRIBUTE_ENTITIES)}"')
    return "<" + " ".join(parts) + ("/>" if empty else ">")


def _write_inline(writer, node):
    """Write a node and its subtree on one line, text exactly as parsed."""
    if node.nodeType == Node.ELEMENT_NODE:
        if not node.childNodes:
            writer.write(_start_tag(node, empty=True))
            return
        writer.write(_start_tag(node))
        for child in node.childNodes:
            _write_inline(writer, child)
        writer.write(f"</{node.tagName}>")
    elif node.nodeType == Node.TEXT_NODE:
        writer.write(escape(node.data, _TEXT_ENTITIES))
    else:
        # CDATA sections, comments, processing instructions and the doctype.
        node.writexml(writer)


def _write_node(writer, node, depth: int):
    pad = " " * (INDENT * depth)
    if node.nodeType == Node.ELEMENT_NODE and _is_block(node):
        writer.write(f"{pad}{_start_tag(node)}\n")
        for child in node.childNodes:
            if not _is_blank(child):
                _write_node(writer, child, depth + 1)
        writer.write(f"{pad}</{node.tagName}>\n")
        return

    writer.write(pad)
    _write_inline(writer, node)
    writer.write("\n")


def render_xml(document) -> str:
    """Serialize a parsed document as indented UTF-8 XML."""
    with io.StringIO() as buffer:
        buffer.write(DECLARATION + "\n")
        for child in document.childNodes:
            _write_node(buffer, child, 0)
        return buffer.getvalue()


def format_xml(text: str) -> FormatResult:
    logger.debug("Formatting %d characters as XML", len(text))
    try:
        document = parse_xml(text)
    except ExpatError as e:
        return FormatResult.failure(from_expat_error(e, text))
    except DefusedXmlException as e:
        return FormatResult.failure(from_unpositioned_error(e))

    if document.encoding:
        # Output stays UTF-8 whatever the declaration said.
        logger.debug("Declared XML encoding: %s", document.encoding)
    try:
        return FormatResult.success(render_xml(document))
    except RecursionError as e:
        # Nesting deeper than the interpreter's recursion limit.
        return FormatResult.failure(from_unpositioned_error(e))
