"""Tests for the converter classes and one-shot functions."""

import pytest
from xml.dom.minidom import Document

import xmlarray
from xmlarray import (
    ArrayToXml,
    ConversionConfig,
    NamingError,
    XmlToArray,
    create_array,
    create_xml,
    to_xml_string,
)


def test_create_xml_returns_document():
    """Test the one-shot encoder."""
    doc = create_xml({"r": {"item": ["a", "b"]}})

    assert isinstance(doc, Document)
    assert doc.documentElement.toxml() == "<r><item>a</item><item>b</item></r>"


def test_create_xml_legacy_argument_order():
    """Test the (root_name, data) calling convention."""
    doc = create_xml("root", {"a": "1", "b": "2"})
    assert doc.documentElement.toxml() == "<root><a>1</a><b>2</b></root>"


def test_create_xml_legacy_root_name_only():
    """Test that a lone string names an empty root."""
    assert create_xml("root").documentElement.toxml() == "<root/>"


def test_create_xml_scalar_with_options():
    """Test that a string with options is data, not a root name."""
    doc = create_xml("hello", rootNodeName="greeting")
    assert doc.documentElement.toxml() == "<greeting>hello</greeting>"


def test_create_xml_with_config_object():
    """Test passing a ConversionConfig."""
    config = ConversionConfig(valueKey="#text")
    doc = create_xml({"r": {"#text": "t"}}, config)

    assert doc.documentElement.toxml() == "<r>t</r>"


def test_create_xml_keyword_options():
    """Test options given as keyword arguments."""
    doc = create_xml({"a": "1"}, rootNodeName="root", encoding="ISO-8859-1")

    assert doc.documentElement.toxml() == "<root><a>1</a></root>"
    assert doc.encoding == "ISO-8859-1"


def test_create_xml_naming_error():
    """Test that naming errors propagate from the facade."""
    with pytest.raises(NamingError):
        create_xml({"r": {"1bad": "x"}})


def test_create_array():
    """Test the one-shot decoder."""
    assert create_array("<r><c>x</c><c>y</c></r>") == {"r": {"c": ["x", "y"]}}


def test_create_array_keyword_options():
    """Test decoder options given as keyword arguments."""
    result = create_array('<r a="1">t</r>', valueKey="#text", attributesKey="#attrs")
    assert result == {"r": {"#text": "t", "#attrs": {"a": "1"}}}


def test_array_to_xml_instance_reuse():
    """Test that one encoder serves several conversions."""
    converter = ArrayToXml(attributesKey="_attrs")

    first = converter.build_xml({"r": {"_attrs": {"id": 1}}})
    second = converter.build_xml({"s": "x"})

    assert first.documentElement.toxml() == '<r id="1"/>'
    assert second.documentElement.toxml() == "<s>x</s>"
    assert first is not second


def test_array_to_xml_root_name_argument():
    """Test overriding the root name per call."""
    converter = ArrayToXml(rootNodeName="configured")
    doc = converter.build_xml({"a": "1"}, root_name="explicit")

    assert doc.documentElement.tagName == "explicit"


def test_xml_to_array_instance_reuse():
    """Test that namespaces from one call do not leak into the next."""
    converter = XmlToArray(useNamespaces=True)

    first = converter.build_array('<r><n:a xmlns:n="urn:n"/></r>')
    second = converter.build_array("<r><a/></r>")

    assert first["r"]["@attributes"] == {"xmlns:n": "urn:n"}
    assert second == {"r": {"a": ""}}


def test_converter_config_is_resolved_once():
    """Test that instances keep an immutable resolved config."""
    converter = XmlToArray({"valueKey": "#text"})

    assert isinstance(converter.config, ConversionConfig)
    assert converter.config.value_key == "#text"


def test_end_to_end_text_roundtrip():
    """Test encoding to text and decoding back through the package API."""
    data = {"r": {"@attributes": {"a": "1"}, "@value": "text"}}
    text = to_xml_string(create_xml(data))

    assert text == '<?xml version="1.0" encoding="UTF-8"?>\n<r a="1">text</r>\n'
    assert create_array(text) == data


def test_package_exports():
    """Test the public API surface."""
    for name in xmlarray.__all__:
        assert hasattr(xmlarray, name)
    assert xmlarray.__version__
