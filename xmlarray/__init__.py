"""xmlarray - lossless conversion between nested mappings and XML.

Nested dicts and lists (NodeTrees) are converted to XML documents and back.
Reserved keys carry attributes, text and CDATA; lists carry repeated
sibling elements.
"""

from xmlarray._version import __version__
from xmlarray.config import ConversionConfig, resolve_config
from xmlarray.converter import ArrayToXml, XmlToArray, create_array, create_xml
from xmlarray.exceptions import (
    ContentError,
    InputTypeError,
    NamingError,
    XmlArrayError,
    XmlParseError,
)
from xmlarray.names import is_valid_name
from xmlarray.serialization import to_xml_bytes, to_xml_string

__all__ = [
    "__version__",
    "ArrayToXml",
    "XmlToArray",
    "create_xml",
    "create_array",
    "to_xml_string",
    "to_xml_bytes",
    "ConversionConfig",
    "resolve_config",
    "is_valid_name",
    "XmlArrayError",
    "NamingError",
    "XmlParseError",
    "InputTypeError",
    "ContentError",
]
