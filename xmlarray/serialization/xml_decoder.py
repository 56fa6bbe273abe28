"""Convert XML documents to NodeTrees."""

import logging
from collections.abc import Mapping
from typing import Any
from xml.dom import XMLNS_NAMESPACE
from xml.dom.minidom import Document, Element, Node
from xml.parsers.expat import ExpatError

from defusedxml import DefusedXmlException
from defusedxml.minidom import parseString

from xmlarray.config import ConversionConfig, resolve_config
from xmlarray.exceptions import InputTypeError, XmlParseError
from xmlarray.types import ConversionContext, NodeTree

logger = logging.getLogger(__name__)

# Characters trimmed from text and CDATA content
_WHITESPACE = " \t\n\r\0\x0b"


def xml_to_array(
    xml_input: Document | str | bytes,
    config: ConversionConfig | Mapping[str, Any] | None = None,
) -> dict[str, NodeTree]:
    """Convert XML text or a parsed document to a NodeTree.

    Args:
        xml_input: XML text, or a minidom Document
        config: Conversion options (see ConversionConfig)

    Returns:
        A one-key dict mapping the root tag name to its converted content

    Raises:
        XmlParseError: If the text is not a well-formed document
        InputTypeError: If xml_input is neither text nor a Document

    Example:
        >>> xml_to_array('<r a="1">text</r>')
        {'r': {'@value': 'text', '@attributes': {'a': '1'}}}
    """
    config = resolve_config(config)
    context = ConversionContext(config)
    document = parse_document(xml_input)

    root = document.documentElement
    if root is None:
        raise XmlParseError("XML document has no root element")

    logger.debug("Deserializing XML document with root '%s'", root.tagName)
    value = _element_to_value(root, context)

    if context.namespaces:
        keys = context.keys
        if not isinstance(value, dict):
            value = {keys.value: value}
        attributes = value.setdefault(keys.attributes, {})
        for name, uri in context.namespace_attributes().items():
            attributes.setdefault(name, uri)

    return {root.tagName: value}


def parse_document(xml_input: Document | str | bytes) -> Document:
    """Return xml_input as a Document, parsing it first if it is text.

    Text is parsed with defusedxml, so entity expansion and external
    resources are refused.

    Raises:
        XmlParseError: If the text cannot be parsed
        InputTypeError: If xml_input is neither text nor a Document
    """
    if isinstance(xml_input, Document):
        return xml_input
    if not isinstance(xml_input, (str, bytes)):
        raise InputTypeError(
            f"Expected XML text or a minidom Document, got {type(xml_input).__name__}"
        )

    try:
        return parseString(xml_input)
    except (ExpatError, DefusedXmlException) as e:
        logger.debug("Failed to parse XML input: %s", e)
        raise XmlParseError(f"Error parsing the XML string: {e}", raw_input=xml_input) from e


def _node_to_value(node: Node, context: ConversionContext) -> NodeTree:
    """Convert a text, CDATA or element node.

    Returns None for node kinds that carry no data (comments, processing
    instructions).
    """
    if node.nodeType == Node.CDATA_SECTION_NODE:
        return {context.keys.cdata: node.data.strip(_WHITESPACE)}
    if node.nodeType == Node.TEXT_NODE:
        return node.data.strip(_WHITESPACE)
    if node.nodeType == Node.ELEMENT_NODE:
        return _element_to_value(node, context)
    return None


def _element_to_value(element: Element, context: ConversionContext) -> NodeTree:
    """Convert an element and its subtree.

    Child elements are gathered into lists by tag name, then lists of one
    are collapsed to their single entry. Non-empty text or CDATA replaces
    whatever was gathered before it. Namespace declarations are not
    attributes; they only surface through the root flush.
    """
    keys = context.keys
    context.collate_namespace(element)

    output: NodeTree = {}
    for child in element.childNodes:
        value = _node_to_value(child, context)
        if child.nodeType == Node.ELEMENT_NODE:
            if not isinstance(output, dict):
                output = {}
            output.setdefault(child.tagName, []).append(value)
        elif value is not None and value != "":
            output = value

    if isinstance(output, dict):
        output = {
            name: entries[0] if isinstance(entries, list) and len(entries) == 1 else entries
            for name, entries in output.items()
        }
        if not output:
            output = ""

    attributes = {}
    for attribute in element.attributes.values():
        if attribute.namespaceURI == XMLNS_NAMESPACE:
            continue
        attributes[attribute.name] = attribute.value
        context.collate_namespace(attribute)
    if attributes:
        if not isinstance(output, dict):
            output = {keys.value: output}
        output[keys.attributes] = attributes

    return output
