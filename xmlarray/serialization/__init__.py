"""Conversion walkers between NodeTrees and XML documents."""

from xmlarray.serialization.xml_encoder import array_to_xml, to_xml_bytes, to_xml_string
from xmlarray.serialization.xml_decoder import parse_document, xml_to_array

__all__ = [
    "array_to_xml",
    "to_xml_bytes",
    "to_xml_string",
    "parse_document",
    "xml_to_array",
]
