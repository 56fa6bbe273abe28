"""Convert NodeTrees to XML documents."""

import logging
from collections.abc import Mapping
from typing import Any
from xml.dom.minidom import Document, Element, getDOMImplementation

from xmlarray.config import ConversionConfig, resolve_config
from xmlarray.exceptions import ContentError, NamingError
from xmlarray.names import is_valid_name
from xmlarray.types import ConversionContext, NodeTree, scalar_to_text, sibling_items

logger = logging.getLogger(__name__)


def array_to_xml(
    data: NodeTree,
    config: ConversionConfig | Mapping[str, Any] | None = None,
    root_name: str | None = None,
) -> Document:
    """Convert a NodeTree to an XML document.

    The root element name is chosen in this order: ``root_name``, the
    configured ``root_node_name``, then the single key of ``data`` when it
    is a one-key mapping (whose value becomes the root's content).

    Args:
        data: The NodeTree to convert
        config: Conversion options (see ConversionConfig)
        root_name: Explicit root element name

    Returns:
        A new minidom Document holding a single root element

    Raises:
        NamingError: If any tag or attribute name in the tree is illegal
        ContentError: If CDATA content contains "]]>"
        TypeError: If attributes are not a mapping or lists are nested

    Example:
        >>> doc = array_to_xml({"r": {"item": ["a", "b"]}})
        >>> doc.documentElement.toxml()
        '<r><item>a</item><item>b</item></r>'
    """
    config = resolve_config(config)
    context = ConversionContext(config)

    if root_name is None:
        root_name = config.root_node_name
    if root_name is None:
        if isinstance(data, Mapping) and len(data) == 1:
            root_name, data = next(iter(data.items()))
        else:
            root_name = ""
    root_name = str(root_name)
    if root_name and not is_valid_name(root_name):
        raise NamingError(root_name, "")

    logger.debug("Serializing NodeTree under root '%s'", root_name)

    document = getDOMImplementation().createDocument(None, None, None)
    document.version = config.version
    document.encoding = config.encoding
    document.appendChild(_node_to_element(document, root_name, data, context))
    return document


def _node_to_element(
    document: Document,
    name: str,
    value: NodeTree,
    context: ConversionContext,
) -> Element:
    """Build the element for one (name, value) pair of a NodeTree."""
    element = document.createElement(name)
    keys = context.keys

    if isinstance(value, (list, tuple)):
        raise TypeError(
            f"Node '{name}' has a list as its own value; a list only names "
            "repeated elements when it is the value of a tag key"
        )

    if not isinstance(value, Mapping):
        element.appendChild(document.createTextNode(scalar_to_text(value)))
        return element

    if keys.attributes in value:
        attributes = value[keys.attributes]
        if not isinstance(attributes, Mapping):
            raise TypeError(
                f"Attributes of node '{name}' must be a mapping, got {type(attributes).__name__}"
            )
        for attr_name, attr_value in attributes.items():
            if not is_valid_name(attr_name):
                raise NamingError(str(attr_name), name, kind="attribute")
            element.setAttribute(attr_name, scalar_to_text(attr_value))

    # A node with explicit text or CDATA cannot have child elements
    if keys.value in value:
        _log_discarded(name, value, keys.value, context)
        element.appendChild(document.createTextNode(scalar_to_text(value[keys.value])))
        return element
    if keys.cdata in value:
        _log_discarded(name, value, keys.cdata, context)
        text = scalar_to_text(value[keys.cdata])
        if "]]>" in text:
            raise ContentError(f"CDATA content of node '{name}' contains ']]>'", name)
        element.appendChild(document.createCDATASection(text))
        return element

    for key, child in value.items():
        if key == keys.attributes:
            continue
        if not is_valid_name(key):
            raise NamingError(str(key), name)

        siblings = sibling_items(child)
        if siblings is None:
            element.appendChild(_node_to_element(document, key, child, context))
        else:
            for sibling in siblings:
                element.appendChild(_node_to_element(document, key, sibling, context))

    return element


def _log_discarded(name: str, value: Mapping, matched: str, context: ConversionContext) -> None:
    discarded = [key for key in value if key not in context.keys]
    if discarded:
        logger.debug(
            "Node '%s' has %s content; discarding child keys %s",
            name, matched, discarded,
        )


def to_xml_string(document: Document, pretty_print: bool = False) -> str:
    """Render a document as XML text with its declaration.

    The declaration carries the document's ``version`` and ``encoding``
    (``1.0`` and ``UTF-8`` when unset).

    Args:
        document: The document to render
        pretty_print: Indent nested elements with two spaces

    Returns:
        XML text
    """
    version = document.version or "1.0"
    encoding = document.encoding or "UTF-8"
    declaration = f'<?xml version="{version}" encoding="{encoding}"?>'

    root = document.documentElement
    if root is None:
        return declaration + "\n"
    if pretty_print:
        body = root.toprettyxml(indent="  ")
    else:
        body = root.toxml() + "\n"
    return f"{declaration}\n{body}"


def to_xml_bytes(document: Document, pretty_print: bool = False) -> bytes:
    """Render a document as XML encoded with the document's encoding.

    Characters the encoding cannot represent become character references.
    """
    encoding = document.encoding or "UTF-8"
    return to_xml_string(document, pretty_print).encode(encoding, "xmlcharrefreplace")
