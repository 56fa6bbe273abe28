"""Shared test configuration and fixtures."""

import pytest

from xmlarray.config import ConversionConfig


@pytest.fixture
def custom_keys():
    """A config that renames every reserved key."""
    return ConversionConfig(attributesKey="#attrs", valueKey="#text", cdataKey="#cdata")


@pytest.fixture
def namespaced_xml():
    """A document whose descendants declare and reuse one prefix."""
    return (
        "<feed>"
        '<ns:entry xmlns:ns="urn:x"><ns:title>One</ns:title></ns:entry>'
        '<ns:entry xmlns:ns="urn:x"><ns:title>Two</ns:title></ns:entry>'
        "</feed>"
    )
