"""Reusable converters and one-shot conversion functions."""

from collections.abc import Mapping
from typing import Any

from xmlarray.config import ConversionConfig, resolve_config
from xmlarray.serialization import array_to_xml, xml_to_array
from xmlarray.types import NodeTree, XmlDocument


class ArrayToXml:
    """Converts NodeTrees to XML documents with a fixed configuration.

    The configuration is resolved once and never mutated, so one instance
    can serve any number of conversions.

    Example:
        >>> converter = ArrayToXml(attributesKey="_attrs")
        >>> doc = converter.build_xml({"r": {"_attrs": {"id": 1}}})
        >>> doc.documentElement.toxml()
        '<r id="1"/>'
    """

    def __init__(self, config: ConversionConfig | Mapping[str, Any] | None = None, **options: Any):
        self.config = resolve_config(config, **options)

    def build_xml(self, data: NodeTree, root_name: str | None = None) -> XmlDocument:
        """Convert a NodeTree to a new XML document.

        Args:
            data: The NodeTree to convert
            root_name: Root element name, overriding the configured one

        Returns:
            The XML document
        """
        return array_to_xml(data, self.config, root_name=root_name)


class XmlToArray:
    """Converts XML documents or text to NodeTrees with a fixed configuration.

    Namespace declarations are gathered per call, never on the instance.

    Example:
        >>> XmlToArray(valueKey="#text").build_array('<r a="1">x</r>')
        {'r': {'#text': 'x', '@attributes': {'a': '1'}}}
    """

    def __init__(self, config: ConversionConfig | Mapping[str, Any] | None = None, **options: Any):
        self.config = resolve_config(config, **options)

    def build_array(self, xml_input: XmlDocument | str | bytes) -> dict[str, NodeTree]:
        """Convert XML text or a parsed document to a NodeTree."""
        return xml_to_array(xml_input, self.config)


def create_xml(
    data: NodeTree,
    config: ConversionConfig | Mapping[str, Any] | NodeTree = None,
    **options: Any,
) -> XmlDocument:
    """Convert a NodeTree to an XML document.

    Also accepts the older ``create_xml(root_name, data)`` argument order:
    when ``data`` is a string and the second argument is a mapping (or is
    omitted along with any keyword options), the string is taken as the
    root element name and the mapping as the data.

    Args:
        data: The NodeTree to convert
        config: Conversion options (see ConversionConfig)
        **options: Extra options, applied on top of ``config``

    Returns:
        The XML document

    Example:
        >>> create_xml("r", {"item": ["a", "b"]}).documentElement.toxml()
        '<r><item>a</item><item>b</item></r>'
    """
    if isinstance(data, str) and (
        isinstance(config, Mapping) or (config is None and not options)
    ):
        root_name, data = data, config if config is not None else {}
        return ArrayToXml(**options).build_xml(data, root_name=root_name)
    return ArrayToXml(config, **options).build_xml(data)


def create_array(
    xml_input: XmlDocument | str | bytes,
    config: ConversionConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> dict[str, NodeTree]:
    """Convert XML text or a parsed document to a NodeTree.

    Example:
        >>> create_array("<r><c>x</c><c>y</c></r>")
        {'r': {'c': ['x', 'y']}}
    """
    return XmlToArray(config, **options).build_array(xml_input)
