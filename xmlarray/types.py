"""Core data types for xmlarray."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union
from xml.dom import XML_NAMESPACE, XMLNS_NAMESPACE
from xml.dom.minidom import Document, Node

from xmlarray.config import ConversionConfig, ReservedKeys

logger = logging.getLogger(__name__)

Scalar = Union[str, int, float, bool, None]
NodeTree = Union[Scalar, Mapping[str, "NodeTree"], list["NodeTree"]]
XmlDocument = Document

# Namespaces bound by XML itself, never reported as declarations
_RESERVED_NAMESPACES = frozenset([XML_NAMESPACE, XMLNS_NAMESPACE])


def _as_index(key: Any) -> int | None:
    """Return key as a non-negative list index, or None if it is not one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isdigit() and key.isascii():
        if len(key) > 1 and key.startswith("0"):
            return None
        return int(key)
    return None


def sibling_items(value: Any) -> list | None:
    """Return the payloads of repeated sibling elements, or None.

    A list or tuple is always a run of siblings. A mapping counts as one
    only when its keys are exactly the indices 0..N-1 (ints or decimal
    strings); its entries are then returned in ascending index order.

    Example:
        >>> sibling_items({"1": "b", "0": "a"})
        ['a', 'b']
        >>> sibling_items({"1": "b"}) is None
        True
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if not isinstance(value, Mapping) or not value:
        return None

    indexed = {}
    for key, item in value.items():
        index = _as_index(key)
        if index is None or index in indexed:
            return None
        indexed[index] = item

    if max(indexed) != len(indexed) - 1:
        return None
    return [indexed[index] for index in range(len(indexed))]


def scalar_to_text(value: Any) -> str:
    """Render a scalar the way it is written to XML text and attributes."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return str(value)


@dataclass
class ConversionContext:
    """State for a single conversion call.

    Attributes:
        config: The resolved configuration for this call
        keys: Reserved keys taken from the configuration
        namespaces: Namespace URI to prefix, first seen wins
    """
    config: ConversionConfig
    keys: ReservedKeys = field(init=False)
    namespaces: dict[str, str | None] = field(default_factory=dict)

    def __post_init__(self):
        self.keys = ReservedKeys.from_config(self.config)

    def collate_namespace(self, node: Node) -> None:
        """Record the namespace of an element or attribute node.

        Does nothing unless namespace capture is enabled.
        """
        if not self.config.use_namespaces:
            return
        uri = node.namespaceURI
        if not uri or uri in _RESERVED_NAMESPACES or uri in self.namespaces:
            return
        self.namespaces[uri] = node.prefix or None
        logger.debug("Collated namespace %s with prefix %r", uri, node.prefix)

    def namespace_attributes(self) -> dict[str, str]:
        """Return the collected namespaces as ``xmlns`` attributes."""
        attributes = {}
        for uri, prefix in self.namespaces.items():
            name = f"xmlns:{prefix}" if prefix else "xmlns"
            attributes.setdefault(name, uri)
        return attributes
